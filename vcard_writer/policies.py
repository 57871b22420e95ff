"""Per-version rendering rules.

Each policy answers, for one major vCard version, which properties exist and
which parameters and value encodings a property gets. The formatter picks one
policy per card and never compares version numbers itself.
"""
from __future__ import annotations

from datetime import datetime

from .models import Photo
from .utils import escape_scalar, mime_subtype, mime_type, to_utc

CHARSET = "CHARSET=utf-8"


def _quoted(value: str) -> str:
    # a quoted parameter value cannot hold DQUOTE
    return '"' + escape_scalar(value).replace('"', "'") + '"'


class VersionPolicy:
    """vCard 4.0 (RFC 6350)."""

    major = 4
    folds = True
    supports_nickname = True
    supports_gender = True
    supports_anniversary = True
    label_inline = True

    def text_params(self) -> list[str]:
        return []

    def date_params(self) -> list[str]:
        return ["VALUE=date-and-or-time"]

    def email_params(self, kind: str, pref: bool) -> list[str]:
        return [f"TYPE={kind}", "PREF=1" if pref else ""]

    def tel(self, types: tuple[str, ...], pref: bool, number: str) -> tuple[list[str], str]:
        params = [f'TYPE="{",".join(types)}"', "PREF=1" if pref else "", "VALUE=uri"]
        return params, "tel:" + escape_scalar(number)

    def photo(self, photo: Photo) -> tuple[list[str], str]:
        mime = mime_type(photo.media_type)
        value = photo.url
        if photo.base64:
            value = f"data:{mime};base64,{photo.url}"
        return ["VALUE=uri", f"MEDIATYPE={mime}" if mime else ""], escape_scalar(value)

    def address_params(self, kind: str, pref: bool, label: str) -> list[str]:
        return [
            f"TYPE={kind}",
            "PREF=1" if pref else "",
            f"LABEL={_quoted(label)}" if label else "",
        ]

    def url_params(self, kind: str) -> list[str]:
        return [f"TYPE={kind}"] if kind else []

    def social_params(self, key: str) -> list[str]:
        return [f"TYPE={key}"]

    def timestamp(self, moment: datetime) -> str:
        return to_utc(moment).strftime("%Y%m%dT%H%M%SZ")


class Version3Policy(VersionPolicy):
    """vCard 3.0 (RFC 2426)."""

    major = 3
    supports_gender = False
    supports_anniversary = False
    label_inline = False

    def date_params(self) -> list[str]:
        return ["VALUE=date"]

    def email_params(self, kind: str, pref: bool) -> list[str]:
        tokens = [kind.upper(), "INTERNET"]
        if pref:
            tokens.append("PREF")
        return ["TYPE=" + ",".join(tokens)]

    def tel(self, types: tuple[str, ...], pref: bool, number: str) -> tuple[list[str], str]:
        tokens = [t.upper() for t in types]
        if pref:
            tokens.append("PREF")
        return ["TYPE=" + ",".join(tokens)], escape_scalar(number)

    def photo(self, photo: Photo) -> tuple[list[str], str]:
        subtype = mime_subtype(photo.media_type)
        params = ["ENCODING=b" if photo.base64 else "", f"TYPE={subtype}" if subtype else ""]
        return params, escape_scalar(photo.url)

    def address_params(self, kind: str, pref: bool, label: str = "") -> list[str]:
        tokens = [kind.upper()]
        if pref:
            tokens.append("PREF")
        return ["TYPE=" + ",".join(tokens)]

    def url_params(self, kind: str) -> list[str]:
        return [f"TYPE={kind.upper()}"] if kind else []

    def timestamp(self, moment: datetime) -> str:
        return to_utc(moment).strftime("%Y-%m-%dT%H:%M:%SZ")


class Version21Policy(Version3Policy):
    """vCard 2.1: positional parameters, explicit charset, no folding."""

    major = 2
    folds = False
    supports_nickname = False

    def text_params(self) -> list[str]:
        return [CHARSET]

    def email_params(self, kind: str, pref: bool) -> list[str]:
        return [
            kind.upper() if kind != "other" else "",
            "INTERNET",
            "PREF" if pref else "",
            CHARSET,
        ]

    def tel(self, types: tuple[str, ...], pref: bool, number: str) -> tuple[list[str], str]:
        params = [t.upper() for t in types]
        params.append("PREF" if pref else "")
        return params, escape_scalar(number)

    def photo(self, photo: Photo) -> tuple[list[str], str]:
        if photo.base64:
            subtype = mime_subtype(photo.media_type)
            return ["ENCODING=b", f"TYPE={subtype}" if subtype else ""], escape_scalar(photo.url)
        return ["VALUE=URL"], escape_scalar(photo.url)

    def address_params(self, kind: str, pref: bool, label: str = "") -> list[str]:
        return [kind.upper(), "PREF" if pref else "", CHARSET]

    def url_params(self, kind: str) -> list[str]:
        return [kind.upper() if kind else "", CHARSET]


_POLICIES = {
    2: Version21Policy(),
    3: Version3Policy(),
    4: VersionPolicy(),
}


def policy_for(major: int) -> VersionPolicy:
    """Pick the policy for a major version; 1 and 2 share the 2.1 rules, 5+ use 4.0."""
    if major <= 2:
        return _POLICIES[2]
    if major == 3:
        return _POLICIES[3]
    return _POLICIES[4]
