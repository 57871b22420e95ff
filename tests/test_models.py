import pytest

from vcard_writer.config import Settings
from vcard_writer.models import Address, Contact, Photo, create_contact
from vcard_writer.utils import as_list


def test_create_contact_defaults():
    c = create_contact()
    assert c.version == "4.0"
    assert c.first_name == ""
    assert c.email == ""
    assert c.is_organization is False
    assert c.home_address.is_empty()
    assert c.work_address.is_empty()
    assert c.photo.url == "" and c.logo.url == ""
    assert c.social_urls == {}


def test_create_contact_uses_configured_version():
    assert create_contact(settings=Settings(default_version="3.0")).version == "3.0"
    assert create_contact("2.1", settings=Settings(default_version="3.0")).version == "2.1"


def test_nested_records_are_not_shared():
    a, b = Contact(), Contact()
    a.home_address.city = "Chicago"
    a.social_urls["twitter"] = "https://twitter/a"
    assert b.home_address.city == ""
    assert b.social_urls == {}


@pytest.mark.parametrize(
    "version, major",
    [("4.0", 4), ("3.0", 3), ("2.1", 2), ("1", 1), ("", 4), (None, 4), ("four", 4), ("x.1", 4)],
)
def test_major_version(version, major):
    assert Contact(version=version).major_version == major


def test_attach_photo_from_url():
    photo = Photo()
    photo.embed_from_base64("AAAA", "png")
    photo.attach_from_url("https://testurl", "png")
    assert (photo.url, photo.media_type, photo.base64) == ("https://testurl", "png", False)


def test_embed_photo_from_base64():
    photo = Photo()
    photo.embed_from_base64("iVBORw0KGgo", "image/png")
    assert (photo.url, photo.media_type, photo.base64) == ("iVBORw0KGgo", "image/png", True)


def test_embed_photo_from_file_is_not_implemented(tmp_path):
    photo = Photo()
    with pytest.raises(NotImplementedError):
        photo.embed_from_file(tmp_path / "testPhoto.png")
    assert photo.url == ""


def test_address_with_numeric_postal_code_is_not_empty():
    assert not Address(postal_code=12345).is_empty()
    assert not Address(label="Home").is_empty()
    assert not Address(postal_code=0).is_empty()
    assert Address(postal_code=None).is_empty()


def test_as_list_does_not_alias_the_stored_list():
    stored = ["a@example.com", "", "b@example.com"]
    resolved = as_list(stored)
    assert resolved == ["a@example.com", "b@example.com"]
    resolved.append("c@example.com")
    assert stored == ["a@example.com", "", "b@example.com"]
    assert as_list("") == []
    assert as_list(12345678900) == ["12345678900"]
    assert as_list(12345678900.0) == ["12345678900.0"]
    assert as_list(("1", "2")) == ["1", "2"]
