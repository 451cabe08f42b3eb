"""
Data models for label analysis.

This module contains the immutable records passed between the substance
matcher, the field extractor, the confidence scorer and the assembler.
"""

import enum
from dataclasses import dataclass
from typing import NamedTuple, Tuple


class Label(NamedTuple):
    """An image-classification label and its confidence score."""
    name: str
    score: float


class AuthenticityVerdict(str, enum.Enum):
    AUTHENTIC = "authentic"
    UNVERIFIED = "unverified"
    COUNTERFEIT = "counterfeit"


@dataclass(frozen=True)
class SubstanceEntry:
    """A banned substance and every alias it can appear under."""
    name: str
    aliases: Tuple[str, ...]
    category: str = "other"


@dataclass(frozen=True)
class DetectionResult:
    """Banned substances found in a piece of text, in registry order."""
    substances: Tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.substances)


@dataclass(frozen=True)
class ExtractedFields:
    """Structured fields pulled out of recognized label text."""
    name: str = ""
    manufacturer: str = ""
    production_location: str = ""
    production_date: str = ""
    serial_number: str = ""
    certifications: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ProductRecord:
    """Final result of analysing one label."""
    id: str
    name: str = ""
    manufacturer: str = ""
    production_location: str = ""
    production_date: str = ""
    serial_number: str = ""
    certifications: Tuple[str, ...] = ()
    confidence_score: float = 0.0
    contains_banned_substances: bool = False
    banned_substances_found: Tuple[str, ...] = ()
    authenticity_code: str = ""

    def __post_init__(self) -> None:
        if self.contains_banned_substances != bool(self.banned_substances_found):
            raise ValueError(
                "contains_banned_substances must be True exactly when banned_substances_found is non-empty"
            )

    def is_valid(self) -> bool:
        """A record is usable once it has a name and a manufacturer or authenticity code."""
        return bool(self.name.strip()) and bool(
            self.manufacturer.strip() or self.authenticity_code.strip()
        )
