from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, timezone

from .types import DateLike, ScalarOrList

logger = logging.getLogger(__name__)

CRLF = "\r\n"
DEFAULT_MAJOR_VERSION = 4
FOLD_WIDTH = 75


def major_version(version: object) -> int:
    """Return the leading integer of a version string such as ``"3.0"``.

    Missing or unparseable versions resolve to 4.
    """
    if not version:
        return DEFAULT_MAJOR_VERSION
    token = str(version).split(".")[0].strip()
    try:
        return int(token)
    except ValueError:
        logger.warning("Unparseable vCard version %r, using %d", version, DEFAULT_MAJOR_VERSION)
        return DEFAULT_MAJOR_VERSION


def escape_scalar(s: object) -> str:
    """Escape text for a vCard value.

    Escapes backslashes first, then newlines and commas. Removes stray CR.
    """
    if s is None or s == "":
        return ""
    value = str(s)
    return (
        value.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace(",", "\\,")
        .replace("\r", "")
    )


def escape_compound(s: object) -> str:
    """Escape one component of a semicolon-delimited value (N, ADR)."""
    return escape_scalar(s).replace(";", "\\;")


def as_list(value: ScalarOrList | None) -> list[str]:
    """Resolve a scalar-or-list field to a new list of non-empty strings.

    The stored field is left as it is.
    """
    if value is None or value == "":
        return []
    if not isinstance(value, (list, tuple)):
        return [str(value)]
    return [str(v) for v in value if v is not None and v != ""]


def format_date(value: DateLike) -> str:
    """Render a date as ``YYYY-MM-DD``; strings pass through unchanged."""
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value or "")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def mime_type(media_type: str) -> str:
    """``png`` -> ``image/png``; full mime types are kept."""
    media_type = (media_type or "").strip()
    if not media_type:
        return ""
    if "/" in media_type:
        return media_type.lower()
    return f"image/{media_type.lower()}"


def mime_subtype(media_type: str) -> str:
    """``image/png`` or ``png`` -> ``PNG``."""
    return (media_type or "").strip().rsplit("/", 1)[-1].upper()


def fold_line(line: str, width: int = FOLD_WIDTH) -> str:
    """Fold a content line and terminate it with CRLF.

    The first physical line holds ``width`` characters, each continuation
    holds ``width - 1`` after its leading space.
    """
    if len(line) <= width:
        return line + CRLF
    parts = [line[:width]]
    rest = line[width:]
    step = width - 1
    while rest:
        parts.append(rest[:step])
        rest = rest[step:]
    return (CRLF + " ").join(parts) + CRLF


def content_line(
    name: str,
    params: Iterable[str | None],
    value: str,
    fold: bool = True,
    width: int = FOLD_WIDTH,
) -> str:
    """Assemble ``NAME;PARAM...:VALUE`` with CRLF, folding when asked to."""
    head = ";".join([name, *[p for p in params if p]])
    line = f"{head}:{value}"
    if fold:
        return fold_line(line, width)
    return line + CRLF


def unfold(text: str) -> str:
    """Join folded continuation lines back together."""
    return text.replace(CRLF + " ", "").replace(CRLF + "\t", "")


__all__ = [
    "CRLF",
    "DEFAULT_MAJOR_VERSION",
    "FOLD_WIDTH",
    "major_version",
    "escape_scalar",
    "escape_compound",
    "as_list",
    "format_date",
    "utc_now",
    "to_utc",
    "mime_type",
    "mime_subtype",
    "fold_line",
    "content_line",
    "unfold",
]
