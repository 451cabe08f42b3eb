"""
Read-only registry of banned substances.

Built once from the declarative tables in ``constants.banned_substances``
and shared by every matcher.
"""

from functools import lru_cache
from typing import Optional, Tuple

from constants import SUBSTANCE_CATEGORIES
from services.label_analysis.models import SubstanceEntry


@lru_cache(maxsize=1)
def get_substance_registry() -> Tuple[SubstanceEntry, ...]:
    """Return every registered substance in stable iteration order."""
    return tuple(
        SubstanceEntry(name=name, aliases=tuple(aliases), category=category)
        for category, substances in SUBSTANCE_CATEGORIES.items()
        for name, aliases in substances.items()
    )


def substance_category(name: str) -> Optional[str]:
    for entry in get_substance_registry():
        if entry.name == name:
            return entry.category
    return None
