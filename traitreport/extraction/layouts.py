"""
Report layouts.

A standard profile has six trait sections. A breeder profile has five: the
coat color modifiers are lumped in with base color, so every later section
moves up one position. Section positions are resolved here so that nothing
else needs to know them.
"""

from enum import Enum

from ..core.loci import LocusGroup

_SECTION_ORDER = list(LocusGroup)


class ProfileLayout(Enum):
    """Layout variants of a DNA test profile."""

    STANDARD = "standard"
    BREEDERS = "breeders"

    @property
    def section_count(self) -> int:
        return 6 if self == ProfileLayout.STANDARD else 5

    def section_index(self, group: LocusGroup) -> int:
        """Position of a trait section within a profile of this layout."""
        index = _SECTION_ORDER.index(group)
        if self == ProfileLayout.BREEDERS and index > 0:
            index -= 1
        return index

    @classmethod
    def from_section_count(cls, count: int) -> "ProfileLayout":
        """Detect the layout from the number of trait sections in a profile."""
        for layout in cls:
            if layout.section_count == count:
                return layout
        raise ValueError(
            f"Unsupported profile with {count} trait sections. "
            f"Expected one of {[layout.section_count for layout in cls]}"
        )

    @classmethod
    def from_name(cls, name: str) -> "ProfileLayout":
        try:
            return cls(name.lower())
        except ValueError:
            valid = [layout.value for layout in cls]
            raise ValueError(f"Unknown layout: {name}. Must be one of {valid}") from None
