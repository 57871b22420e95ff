from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .config import Settings
from .models import Address, Contact, Photo
from .policies import VersionPolicy, policy_for
from .utils import (
    CRLF,
    FOLD_WIDTH,
    as_list,
    content_line,
    escape_compound,
    escape_scalar,
    format_date,
    major_version,
    utc_now,
)

logger = logging.getLogger(__name__)

# (field, kind) in output order; the first address emitted is preferred
_EMAIL_FIELDS = (
    ("email", "home"),
    ("work_email", "work"),
    ("other_email", "other"),
)

# (field, TYPE tokens) in output order
_PHONE_FIELDS = (
    ("cell_phone", ("cell", "voice")),
    ("pager_phone", ("pager",)),
    ("home_phone", ("home", "voice")),
    ("work_phone", ("work", "voice")),
    ("home_fax", ("home", "fax")),
    ("work_fax", ("work", "fax")),
    ("other_phone", ("voice",)),
)

_ADDRESS_FIELDS = (
    ("home_address", "home"),
    ("work_address", "work"),
)


class _CardWriter:
    """Collects the content lines of one card under a single policy."""

    def __init__(self, policy: VersionPolicy, width: int = FOLD_WIDTH) -> None:
        self.policy = policy
        self.width = width
        self.lines: list[str] = []

    def add(self, name: str, params: Iterable[Optional[str]], value: str) -> None:
        self.lines.append(content_line(name, params, value, fold=self.policy.folds, width=self.width))

    def add_text(self, name: str, value: object) -> None:
        if value:
            self.add(name, self.policy.text_params(), escape_scalar(value))


def formatted_name(c: Contact) -> str:
    """FN value: the explicit formatted name or the given names joined by spaces."""
    if c.formatted_name:
        return c.formatted_name
    return " ".join(str(p) for p in (c.first_name, c.middle_name, c.last_name) if p)


def _write_names(w: _CardWriter, c: Contact) -> None:
    w.add("FN", w.policy.text_params(), escape_scalar(formatted_name(c)))
    parts = [c.last_name, c.first_name, c.middle_name, c.name_prefix, c.name_suffix]
    w.add("N", w.policy.text_params(), ";".join(escape_compound(p) for p in parts))
    if c.nickname and w.policy.supports_nickname:
        w.add("NICKNAME", [], escape_scalar(c.nickname))
    if c.gender and w.policy.supports_gender:
        w.add("GENDER", [], escape_scalar(c.gender))


def _write_dates(w: _CardWriter, c: Contact) -> None:
    if c.birthday:
        w.add("BDAY", w.policy.date_params(), escape_scalar(format_date(c.birthday)))
    if c.anniversary and w.policy.supports_anniversary:
        w.add("ANNIVERSARY", w.policy.date_params(), escape_scalar(format_date(c.anniversary)))


def _write_emails(w: _CardWriter, c: Contact) -> None:
    pref = True
    for attr, kind in _EMAIL_FIELDS:
        for address in as_list(getattr(c, attr)):
            w.add("EMAIL", w.policy.email_params(kind, pref), escape_scalar(address))
            pref = False


def _write_photo(w: _CardWriter, name: str, photo: Photo) -> None:
    if photo.url:
        params, value = w.policy.photo(photo)
        w.add(name, params, value)


def _write_phones(w: _CardWriter, c: Contact) -> None:
    pref = True
    for attr, types in _PHONE_FIELDS:
        for number in as_list(getattr(c, attr)):
            params, value = w.policy.tel(types, pref, number)
            w.add("TEL", params, value)
            pref = False


def _write_address(w: _CardWriter, kind: str, address: Address, pref: bool) -> None:
    params = w.policy.address_params(kind, pref, address.label)
    if address.label and not w.policy.label_inline:
        w.add("LABEL", params, escape_scalar(address.label))
    parts = [
        "",
        "",
        address.street,
        address.city,
        address.state_province,
        address.postal_code,
        address.country_region,
    ]
    w.add("ADR", params, ";".join(escape_compound(p) for p in parts))


def _write_addresses(w: _CardWriter, c: Contact) -> None:
    pref = True
    for attr, kind in _ADDRESS_FIELDS:
        address = getattr(c, attr)
        if address.is_empty():
            continue
        _write_address(w, kind, address, pref)
        pref = False


def _write_urls(w: _CardWriter, c: Contact) -> None:
    for url in as_list(c.url):
        w.add("URL", w.policy.url_params(""), escape_scalar(url))
    for url in as_list(c.work_url):
        w.add("URL", w.policy.url_params("work"), escape_scalar(url))


def _write_social(w: _CardWriter, c: Contact) -> None:
    for key, url in c.social_urls.items():
        if url:
            w.add("X-SOCIALPROFILE", w.policy.social_params(key), escape_scalar(url))


def format_vcard(
    c: Contact,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Render a contact as a single vCard in the version named by ``c.version``.

    ``now`` fixes the REV timestamp; it defaults to the current UTC time.
    """
    major = major_version(c.version)
    policy = policy_for(major)
    width = settings.fold_width if settings is not None else FOLD_WIDTH
    logger.debug("Formatting vCard %s (major %d) for %r", c.version, major, formatted_name(c))

    w = _CardWriter(policy, width)
    _write_names(w, c)
    if c.uid:
        w.add("UID", [], escape_scalar(c.uid))
    _write_dates(w, c)
    _write_emails(w, c)
    _write_photo(w, "LOGO", c.logo)
    _write_photo(w, "PHOTO", c.photo)
    _write_phones(w, c)
    _write_addresses(w, c)
    w.add_text("TITLE", c.title)
    w.add_text("ROLE", c.role)
    w.add_text("ORG", c.organization)
    _write_urls(w, c)
    w.add_text("NOTE", c.note)
    _write_social(w, c)
    w.add_text("SOURCE", c.source)
    w.add("REV", [], policy.timestamp(now or utc_now()))
    if c.is_organization:
        w.add("X-ABShowAs", [], "COMPANY")

    return (
        "BEGIN:VCARD" + CRLF
        + "VERSION:" + str(c.version) + CRLF
        + "".join(w.lines)
        + "END:VCARD" + CRLF
    )


def format_vcards(
    contacts: Iterable[Contact],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> str:
    return "".join(format_vcard(c, now=now, settings=settings) for c in contacts)


def save_to_file(c: Contact, filename: Union[str, Path]) -> None:
    """Write the formatted card to ``filename`` as UTF-8, replacing any existing file."""
    contents = format_vcard(c)
    with open(filename, "w", encoding="utf-8", newline="") as fh:
        fh.write(contents)
