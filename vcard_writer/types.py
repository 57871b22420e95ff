from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Union

# A single value or a list or tuple of them. Numbers are accepted for phone
# numbers and postal codes and are rendered with str().
Scalar = Union[str, int, float, Decimal]
ScalarOrList = Union[Scalar, list[Scalar], tuple[Scalar, ...]]

# datetime.datetime is a subclass of date
DateLike = Union[date, str, None]

SocialUrls = dict[str, str]


__all__ = [
    "Scalar",
    "ScalarOrList",
    "DateLike",
    "SocialUrls",
]
