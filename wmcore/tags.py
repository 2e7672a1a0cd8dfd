"""Tags: the virtual desktops shown on workspaces."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

# Hidden tags count down from the largest unsigned 64-bit value so their ids
# never collide with normal tags, which count up from 1.
HIDDEN_TAG_BASE_ID = 2**64 - 1


@dataclass
class Tag:
    """A desktop-like group of windows, shown on at most one workspace.

    Tags are identified by ``id``; the label is for display only.
    Hidden tags are internal and cannot be shown on a workspace.
    """

    id: int
    label: str
    hidden: bool = False


@dataclass
class Tags:
    """All known tags, normal ones numbered from 1 and hidden ones at the end."""

    _normal: list[Tag] = field(default_factory=list)
    _hidden: list[Tag] = field(default_factory=list)

    def add_new(self, label: str) -> int:
        """Append a normal tag with ``label`` and return its id."""
        tag = Tag(id=len(self._normal) + 1, label=label)
        self._normal.append(tag)
        return tag.id

    def add_new_unlabeled(self) -> int:
        """Append a normal tag labelled with its own id and return the id."""
        return self.add_new(str(len(self._normal) + 1))

    def add_new_hidden(self, label: str) -> Optional[int]:
        """Append a hidden tag and return its id.

        Returns None, creating nothing, if a hidden tag with the same label exists.
        """
        if self.get_hidden_by_label(label) is not None:
            logger.error(
                "Tried creating a hidden tag with label %s, "
                "but a hidden tag with the same label already exists",
                label,
            )
            return None
        tag = Tag(id=HIDDEN_TAG_BASE_ID - len(self._hidden), label=label, hidden=True)
        self._hidden.append(tag)
        return tag.id

    def normal(self) -> list[Tag]:
        """The normal tags, in id order."""
        return list(self._normal)

    def all(self) -> list[Tag]:
        """Every tag, the hidden ones last."""
        return [*self._normal, *self._hidden]

    def get(self, id: int) -> Optional[Tag]:
        """The normal or hidden tag with ``id``, if any."""
        if 1 <= id <= len(self._normal):
            return self._normal[id - 1]
        return next((tag for tag in self._hidden if tag.id == id), None)

    def get_hidden_by_label(self, label: str) -> Optional[Tag]:
        """The hidden tag labelled ``label``, if any."""
        return next((tag for tag in self._hidden if tag.label == label), None)

    def len_normal(self) -> int:
        """The number of normal tags."""
        return len(self._normal)