import logging
import pathlib
import sys
from datetime import date

import vobject

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
from vcard_writer.config import load_settings
from vcard_writer.models import create_contact
from vcard_writer.vcards import format_vcard

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

settings = load_settings(ROOT / "vcard.toml")
contact = create_contact(settings=settings)
contact.first_name, contact.last_name = "Jöhn", "Dör"
contact.organization = "Åcme, Sälës"
contact.email = ["john@example.com", "john.work@example.com"]
contact.home_phone = "(555) 010-2000"
contact.birthday = date(1985, 7, 13)
contact.home_address.street = "1 Main Street"
contact.home_address.city = "Springfield"
contact.note = "First line\nSecond line"
contact.social_urls["mastodon"] = "https://social.example/@john"

for version in ("2.1", "3.0", "4.0"):
    contact.version = version
    vcf = format_vcard(contact, settings=settings)
    print(f"--- {version} ---\n{vcf}")

contact.version = "3.0"
card = vobject.readOne(format_vcard(contact, settings=settings))
print("Read back:", card.fn.value, [e.value for e in card.email_list])
