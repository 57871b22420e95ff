from datetime import date, datetime, timezone

import pytest

from vcard_writer.models import Contact, create_contact

TEST_VALUE_UID = "69531f4a-c34d-4a1e-8922-bd38a9476a53"
FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def build_test_card(version: str = "3.0") -> Contact:
    c = create_contact(version)
    c.uid = TEST_VALUE_UID
    c.last_name = "Doe"
    c.middle_name = "D"
    c.first_name = "John"
    c.name_suffix = "J\\R"
    c.name_prefix = "M;R"
    c.nickname = "Test User"
    c.gender = "M"
    c.organization = "ACME Corporation"
    c.logo.attach_from_url("https://testurl", "png")
    c.work_phone = "312-555-1212"
    c.home_phone = "312-555-1313"
    c.cell_phone = "12345678900"
    c.pager_phone = "312-555-1515"
    c.home_fax = "312-555-1616"
    c.work_fax = "312-555-1717"
    c.birthday = date(2018, 12, 1)
    c.anniversary = date(2018, 12, 1)
    c.title = "Crash Test Dummy"
    c.role = "Crash Testing"
    c.email = "john.doe@testmail"
    c.work_email = "john.doe@workmail"
    c.url = "http://johndoe"
    c.work_url = "http://acemecompany/johndoe"

    c.home_address.label = "Home Address\nPrint Label"
    c.home_address.street = "123 Main Street"
    c.home_address.city = "Chicago"
    c.home_address.state_province = "IL"
    c.home_address.postal_code = 12345
    c.home_address.country_region = "United States of America"

    c.work_address.label = "Work Address\nPrint Label"
    c.work_address.street = "123 Corporate Loop\nSuite 500"
    c.work_address.city = "Los Angeles"
    c.work_address.state_province = "CA"
    c.work_address.postal_code = "54321"
    c.work_address.country_region = "California Republic"

    c.source = "http://sourceurl"
    c.note = "John Doe's \nnotes;,"

    c.social_urls["facebook"] = "https://facebook/johndoe"
    c.social_urls["linkedIn"] = "https://linkedin/johndoe"
    c.social_urls["twitter"] = "https://twitter/johndoe"
    c.social_urls["flickr"] = "https://flickr/johndoe"
    c.social_urls["custom"] = "https://custom/johndoe"
    return c


@pytest.fixture
def test_card() -> Contact:
    return build_test_card()
