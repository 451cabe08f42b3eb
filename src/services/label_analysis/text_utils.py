"""
Text normalization utilities for recognized label text.
"""

import unicodedata
from typing import Optional

from services.label_analysis.config import NO_TEXT_SENTINEL


def normalize_recognized_text(text: Optional[str]) -> str:
    """Map OCR output to plain text, treating the no-text sentinel as empty."""
    if not text:
        return ""
    if text.strip() == NO_TEXT_SENTINEL:
        return ""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_for_matching(text: str) -> str:
    """Lowercase and trim text, folding fullwidth OCR characters to ASCII."""
    if not text:
        return ""
    folded = unicodedata.normalize("NFKC", text)
    return folded.lower().strip()
