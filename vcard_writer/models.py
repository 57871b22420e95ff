from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from .types import DateLike, ScalarOrList, SocialUrls
from .utils import major_version

if TYPE_CHECKING:
    from .config import Settings


@dataclass
class Address:
    # text to print on a mailing label for this address
    label: str = ""
    street: str = ""
    city: str = ""
    state_province: str = ""
    postal_code: Union[str, int] = ""
    country_region: str = ""

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) in ("", None) for f in fields(self))


@dataclass
class Photo:
    # URL, or the base64 payload when base64 is set
    url: str = ""
    media_type: str = ""
    base64: bool = False

    def attach_from_url(self, url: str, media_type: str) -> None:
        self.url = url
        self.media_type = media_type
        self.base64 = False

    def embed_from_base64(self, data: str, media_type: str) -> None:
        self.url = data
        self.media_type = media_type
        self.base64 = True

    def embed_from_file(self, filename: Union[str, Path]) -> None:
        raise NotImplementedError(f"Embedding a photo from a file is not implemented: {filename}")


@dataclass
class Contact:
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    name_prefix: str = ""
    name_suffix: str = ""
    formatted_name: str = ""
    nickname: str = ""
    # free text, usually M or F
    gender: str = ""
    organization: str = ""
    title: str = ""
    role: str = ""
    note: str = ""
    # a URL where the latest version of this card can be fetched
    source: str = ""
    uid: str = ""
    birthday: DateLike = None
    anniversary: DateLike = None
    version: str = "4.0"
    is_organization: bool = False

    email: ScalarOrList = ""
    work_email: ScalarOrList = ""
    other_email: ScalarOrList = ""
    cell_phone: ScalarOrList = ""
    pager_phone: ScalarOrList = ""
    home_phone: ScalarOrList = ""
    work_phone: ScalarOrList = ""
    home_fax: ScalarOrList = ""
    work_fax: ScalarOrList = ""
    other_phone: ScalarOrList = ""
    url: ScalarOrList = ""
    work_url: ScalarOrList = ""

    home_address: Address = field(default_factory=Address)
    work_address: Address = field(default_factory=Address)
    photo: Photo = field(default_factory=Photo)
    logo: Photo = field(default_factory=Photo)
    social_urls: SocialUrls = field(default_factory=dict)

    @property
    def major_version(self) -> int:
        return major_version(self.version)

    def get_formatted_string(self) -> str:
        from .vcards import format_vcard

        return format_vcard(self)

    def save_to_file(self, filename: Union[str, Path]) -> None:
        from .vcards import save_to_file

        save_to_file(self, filename)


def create_contact(version: Optional[str] = None, settings: Optional["Settings"] = None) -> Contact:
    """Return an empty contact; version falls back to the configured default."""
    if version is None:
        version = settings.default_version if settings is not None else "4.0"
    return Contact(version=version)
