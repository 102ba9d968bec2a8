#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option value representation.

An option slot holds one of three variants:

- ``IntValue`` - integer-like values (Integer and Boolean kinds, tri-states)
- ``StrValue`` - an owned, non-empty string
- ``DEFAULT_STR`` - the shared "no value" default of every string option

Because the string default is a distinct variant, checking whether a
string option is at its default is a variant test rather than a content
comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class IntValue:
    """Integer-like option value."""

    value: int


@dataclass(frozen=True)
class StrValue:
    """Owned string option value."""

    text: str


class DefaultStr:
    """Singleton marking a string option that holds the shared default."""

    _instance: DefaultStr | None = None

    def __new__(cls) -> DefaultStr:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DEFAULT_STR"

    def __copy__(self) -> DefaultStr:
        return self

    def __deepcopy__(self, memo: dict) -> DefaultStr:
        return self


DEFAULT_STR = DefaultStr()

OptionValue = Union[IntValue, StrValue, DefaultStr]


def string_value(text: str | None) -> StrValue | DefaultStr:
    """Wrap ``text`` as a string value; empty or missing text is the default."""
    if not text:
        return DEFAULT_STR
    return StrValue(text)


def values_identical(first: OptionValue, second: OptionValue) -> bool:
    """Compare two option values of the same option.

    The shared default only equals itself; two owned strings compare by
    content; integer values compare by value.
    """
    if first is DEFAULT_STR or second is DEFAULT_STR:
        return first is second
    return first == second


def value_as_text(value: OptionValue) -> str | None:
    """Return the string held by ``value``, or None for the default or integers."""
    if isinstance(value, StrValue):
        return value.text
    return None
