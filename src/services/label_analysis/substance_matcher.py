"""
Banned substance detection.

Scans recognized label text for any alias of a registered substance. E-code
aliases are compared against the E-codes found in the text with hyphens
removed, so "E-924" and "E924" are interchangeable. Every other alias must
appear as a whole word.
"""

import logging
import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Pattern, Tuple

from constants import E_CODE_ALIAS_PATTERN, E_CODE_PATTERN
from services.label_analysis.models import DetectionResult, SubstanceEntry
from services.label_analysis.substance_registry import get_substance_registry
from services.label_analysis.text_utils import normalize_for_matching

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CompiledEntry:
    name: str
    e_codes: FrozenSet[str]
    word_patterns: Tuple[Pattern[str], ...]


def _strip_hyphens(code: str) -> str:
    return code.replace("-", "").lower()


def is_e_code(alias: str) -> bool:
    """Check if an alias has the shape of an E-number such as E924 or E-924a."""
    return E_CODE_ALIAS_PATTERN.fullmatch(alias.strip()) is not None


def extract_e_codes(normalized_text: str) -> FrozenSet[str]:
    """Collect the hyphen-free E-codes present in already normalized text."""
    return frozenset(_strip_hyphens(m.group(0)) for m in E_CODE_PATTERN.finditer(normalized_text))


def _whole_word_pattern(alias: str) -> Pattern[str]:
    return re.compile(r"(?<!\w)" + re.escape(alias.lower()) + r"(?!\w)")


def _compile_entry(entry: SubstanceEntry) -> _CompiledEntry:
    e_codes = frozenset(_strip_hyphens(a) for a in entry.aliases if is_e_code(a))
    word_patterns = tuple(_whole_word_pattern(a) for a in entry.aliases if a.strip() and not is_e_code(a))
    return _CompiledEntry(name=entry.name, e_codes=e_codes, word_patterns=word_patterns)


class SubstanceMatcher:
    """Detects registered banned substances in free text."""

    def __init__(self, registry: Optional[Iterable[SubstanceEntry]] = None):
        entries = get_substance_registry() if registry is None else tuple(registry)
        self._entries = tuple(_compile_entry(e) for e in entries)

    def detect(self, text: str) -> DetectionResult:
        normalized = normalize_for_matching(text)
        if not normalized:
            return DetectionResult()

        candidates = extract_e_codes(normalized)
        found = []
        for entry in self._entries:
            if entry.name in found:
                continue
            if self._matches(entry, normalized, candidates):
                found.append(entry.name)

        if found:
            logger.info(f"Banned substances detected: {', '.join(found)}")
        return DetectionResult(substances=tuple(found))

    @staticmethod
    def _matches(entry: _CompiledEntry, normalized: str, candidates: FrozenSet[str]) -> bool:
        if entry.e_codes & candidates:
            return True
        return any(p.search(normalized) for p in entry.word_patterns)


_DEFAULT_MATCHER = SubstanceMatcher()


def get_substance_matcher() -> SubstanceMatcher:
    return _DEFAULT_MATCHER


def detect_banned_substances(text: str) -> DetectionResult:
    """Detect banned substances using the process-wide registry."""
    return get_substance_matcher().detect(text)
