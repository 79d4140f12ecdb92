"""Derive the capitalized and pluralized forms of a resource name.

Pluralization is deliberately naive: an ``s`` is appended unless the name
already ends in ``s``.  Irregular plurals (``person``, ``bus``, ``child``)
are not handled, so ``bus`` stays ``bus``.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidNameError

__all__ = ["NAME_PATTERN", "ResourceName", "capitalize", "pluralize", "validate_name", "normalize_name", ]

NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*")


class ResourceName(BaseModel):
    """A validated resource name and its derived forms."""

    name: str
    capitalized: str
    pluralized: str

    model_config = ConfigDict(frozen = True)


def capitalize(name: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return name[:1].upper() + name[1:]


def pluralize(name: str) -> str:
    return name if name.endswith("s") else name + "s"


def validate_name(name: str | None) -> str:
    """Return *name* unchanged or raise :class:`InvalidNameError`."""
    if not name:
        raise InvalidNameError("Please provide a resource name")
    if not NAME_PATTERN.fullmatch(name):
        raise InvalidNameError(
                "Resource name must start with a letter and contain only letters and numbers"
                )
    return name


def normalize_name(name: str | None) -> ResourceName:
    name = validate_name(name)
    return ResourceName(name = name, capitalized = capitalize(name), pluralized = pluralize(name))
