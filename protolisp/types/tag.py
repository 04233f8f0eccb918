from __future__ import annotations
import sys


class Tag:
    """The runtime payload of an atom literal such as ``:true``."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Tag) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Tag, self.name))

    def __repr__(self):
        return f"Tag({self.name!r})"

    def __str__(self):
        return f":{self.name}"
