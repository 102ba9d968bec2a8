#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pick-lists: enumerated choices with several accepted spellings.

A pick-list is an ordered tuple of choices. The position of a choice is the
integer stored for the option, so a stored value can always be turned back
into its canonical label by indexing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Choice:
    """A canonical label and the input spellings that select it."""

    label: str
    inputs: tuple[str, ...]

    def matches(self, token: str) -> bool:
        """Return True if ``token`` is one of the accepted spellings, ignoring case."""
        folded = token.lower()
        return any(folded == spelling.lower() for spelling in self.inputs)


@dataclass(frozen=True)
class PickList:
    """Ordered set of choices; ordinal equals position."""

    name: str
    choices: tuple[Choice, ...]

    def __post_init__(self) -> None:
        """Validate that every choice accepts at least one spelling."""
        for choice in self.choices:
            if not choice.inputs:
                raise ValueError(f"Pick-list '{self.name}' choice '{choice.label}' has no accepted inputs")

    def __len__(self) -> int:
        return len(self.choices)

    def __iter__(self) -> Iterator[Choice]:
        return iter(self.choices)

    def resolve(self, token: str) -> int | None:
        """Return the ordinal of the first choice accepting ``token``, or None."""
        for ordinal, choice in enumerate(self.choices):
            if choice.matches(token):
                return ordinal
        return None

    def label_for(self, ordinal: int) -> str | None:
        """Return the canonical label stored at ``ordinal``, or None if out of range."""
        if 0 <= ordinal < len(self.choices):
            return self.choices[ordinal].label
        return None

    def labels(self) -> list[str]:
        """Return all canonical labels in ordinal order."""
        return [choice.label for choice in self.choices]


_NO_INPUTS = ("0", "n", "f", "no", "false")
_YES_INPUTS = ("1", "y", "t", "yes", "true")

BOOL_PICKS = PickList(
    "boolean",
    (
        Choice("no", _NO_INPUTS),
        Choice("yes", _YES_INPUTS),
    ),
)

AUTO_BOOL_PICKS = PickList(
    "autobool",
    (
        Choice("no", _NO_INPUTS),
        Choice("yes", _YES_INPUTS),
        Choice("auto", ("auto",)),
    ),
)

REPEAT_ATTR_PICKS = PickList(
    "repeated-attributes",
    (
        Choice("keep-first", ("keep-first",)),
        Choice("keep-last", ("keep-last",)),
    ),
)

ACCESS_PICKS = PickList(
    "accessibility",
    (
        Choice("0 (Tidy Classic)", ("0", "0 (Tidy Classic)")),
        Choice("1 (Priority 1 Checks)", ("1", "1 (Priority 1 Checks)")),
        Choice("2 (Priority 2 Checks)", ("2", "2 (Priority 2 Checks)")),
        Choice("3 (Priority 3 Checks)", ("3", "3 (Priority 3 Checks)")),
    ),
)

CHAR_ENC_PICKS = PickList(
    "character-encoding",
    tuple(
        Choice(name, (name,))
        for name in (
            "raw",
            "ascii",
            "latin0",
            "latin1",
            "utf8",
            "iso2022",
            "mac",
            "win1252",
            "ibm858",
            "utf16le",
            "utf16be",
            "utf16",
            "big5",
            "shiftjis",
        )
    ),
)

NEWLINE_PICKS = PickList(
    "newline",
    (
        Choice("LF", ("lf",)),
        Choice("CRLF", ("crlf",)),
        Choice("CR", ("cr",)),
    ),
)

DOCTYPE_PICKS = PickList(
    "doctype",
    (
        Choice("html5", ("html5",)),
        Choice("omit", ("omit",)),
        Choice("auto", ("auto",)),
        Choice("strict", ("strict",)),
        Choice("transitional", ("loose", "transitional")),
        Choice("user", ("user",)),
    ),
)

SORTER_PICKS = PickList(
    "sort-attributes",
    (
        Choice("none", ("none",)),
        Choice("alpha", ("alpha",)),
    ),
)

CUSTOM_TAGS_PICKS = PickList(
    "custom-tags",
    (
        Choice("no", ("no", "n")),
        Choice("blocklevel", ("blocklevel",)),
        Choice("empty", ("empty",)),
        Choice("inline", ("inline", "y", "yes")),
        Choice("pre", ("pre",)),
    ),
)

ATTRIBUTE_CASE_PICKS = PickList(
    "attribute-case",
    (
        Choice("no", _NO_INPUTS),
        Choice("yes", _YES_INPUTS),
        Choice("preserve", ("preserve",)),
    ),
)


def resolve_pick(pick_list: PickList, token: str) -> int | None:
    """Resolve ``token`` against ``pick_list``; None when no choice accepts it."""
    return pick_list.resolve(token)
