#  Copyright (c) 2025 Tom Villani, Ph.D.
"""User-declared tag dictionary.

Custom tag names declared through the ``new-*-tags`` options are kept
here, keyed by name, together with the structural category they were
declared under. The dictionary is derived state: the configuration
clears and rebuilds it whenever the owning option values change.
"""

from __future__ import annotations

import logging
from typing import Iterator

from tidyconf.constants import UserTagType

logger = logging.getLogger(__name__)


class TagDictionary:
    """Mapping of declared tag names to their user tag category."""

    def __init__(self) -> None:
        self._declared: dict[str, UserTagType] = {}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._declared

    def __len__(self) -> int:
        return len(self._declared)

    def __iter__(self) -> Iterator[str]:
        return iter(self._declared)

    def define_tag(self, tag_type: UserTagType, name: str) -> None:
        """Declare ``name`` as a tag of category ``tag_type``.

        Redeclaring a name moves it to the new category.
        """
        key = name.lower()
        previous = self._declared.get(key)
        if previous is not None and previous != tag_type:
            logger.debug("Tag <%s> redeclared from %s to %s", key, previous.name, tag_type.name)
        self._declared[key] = tag_type

    def free_declared_tags(self, tag_type: UserTagType = UserTagType.NULL) -> None:
        """Forget every tag of ``tag_type``; ``UserTagType.NULL`` clears all categories."""
        if tag_type == UserTagType.NULL:
            self._declared.clear()
            return
        self._declared = {name: kind for name, kind in self._declared.items() if not kind & tag_type}

    def tag_type(self, name: str) -> UserTagType | None:
        """Return the category ``name`` was declared under, or None."""
        return self._declared.get(name.lower())

    def tags_of(self, tag_type: UserTagType) -> list[str]:
        """Return the declared names of one category, in declaration order."""
        return [name for name, kind in self._declared.items() if kind & tag_type]
