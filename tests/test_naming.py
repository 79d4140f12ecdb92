# tests/test_naming.py
"""
Unit tests for the resource name helpers in ``mvc_generator.naming``.
"""

from pathlib import Path

import pytest

from mvc_generator.exceptions import InvalidNameError
from mvc_generator.naming import capitalize, normalize_name, pluralize, validate_name

VALID_NAMES = ["user", "product", "bus", "a", "orderItem", "v2Api", "X"]


@pytest.mark.parametrize("name", VALID_NAMES)
def test_capitalize_changes_only_first_character(name: str) -> None:
    result = capitalize(name)
    assert result[0] == name[0].upper()
    assert result[1:] == name[1:], "capitalize must not touch the rest of the name"


def test_capitalize_is_not_title_case() -> None:
    assert capitalize("orderItem") == "OrderItem"
    assert capitalize("ORDER") == "ORDER"


@pytest.mark.parametrize("name", VALID_NAMES)
def test_pluralize_is_idempotent(name: str) -> None:
    assert pluralize(pluralize(name)) == pluralize(name)


def test_pluralize_appends_s() -> None:
    assert pluralize("user") == "users"


def test_pluralize_keeps_trailing_s() -> None:
    """Known limitation: names ending in ``s`` are left as they are."""
    assert pluralize("bus") == "bus"


def test_normalize_name_user() -> None:
    resource = normalize_name("user")
    assert resource.name == "user"
    assert resource.capitalized == "User"
    assert resource.pluralized == "users"


@pytest.mark.parametrize(
        "name", ["", None, "1abc", "ab-c", "ab c", "ab_c", "user\n", "ünicode"],
        ids = ["empty", "none", "digit-first", "dash", "space", "underscore", "newline", "non-ascii"], )
def test_invalid_names_rejected(name, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(InvalidNameError):
        normalize_name(name)
    assert list(tmp_path.iterdir()) == [], "validation must not touch the filesystem"


def test_missing_name_message_differs_from_malformed() -> None:
    with pytest.raises(InvalidNameError, match = "provide a resource name"):
        validate_name("")
    with pytest.raises(InvalidNameError, match = "start with a letter"):
        validate_name("1abc")


def test_invalid_name_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        validate_name("ab-c")
