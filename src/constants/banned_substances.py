"""Additives banned or restricted in EU/Italian food and cosmetic products.

Each canonical name maps to every alias it can appear under on a label:
common name, abbreviation, E-number (hyphenated and not), FD&C name and
Colour Index number where they exist. Matching is case-insensitive.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

PRESERVATIVES: Dict[str, Tuple[str, ...]] = {
    "Potassium bromate": (
        "potassium bromate", "bromato de potasio", "E924", "E924a", "E-924", "E-924a",
    ),
    "Brominated vegetable oil": (
        "brominated vegetable oil", "BVO", "vegetable oil, brominated",
    ),
    "Azodicarbonamide": (
        "azodicarbonamide", "ADA", "azodicarboxamide", "E927", "E-927",
    ),
    "Tertiary butylhydroquinone": (
        "tertiary butylhydroquinone", "TBHQ", "tert-butylhydroquinone", "E319", "E-319",
    ),
    "Butylated hydroxyanisole": (
        "butylated hydroxyanisole", "BHA", "E320", "E-320",
    ),
    "Butylated hydroxytoluene": (
        "butylated hydroxytoluene", "BHT", "E321", "E-321",
    ),
}

COLORANTS: Dict[str, Tuple[str, ...]] = {
    "Yellow #5": (
        "yellow #5", "yellow 5", "tartrazine", "E102", "E-102", "FD&C Yellow No. 5", "CI 19140",
    ),
    "Yellow #6": (
        "yellow #6", "yellow 6", "sunset yellow", "E110", "E-110", "FD&C Yellow No. 6", "CI 15985",
    ),
    "Red #40": (
        "red #40", "red 40", "allura red", "E129", "E-129", "FD&C Red No. 40", "CI 16035",
    ),
    "Blue #1": (
        "blue #1", "blue 1", "brilliant blue", "E133", "E-133", "FD&C Blue No. 1", "CI 42090",
    ),
    "Blue #2": (
        "blue #2", "blue 2", "indigo carmine", "E132", "E-132", "FD&C Blue No. 2", "CI 73015",
    ),
    "Green #3": (
        "green #3", "green 3", "fast green", "E143", "E-143", "FD&C Green No. 3", "CI 42053",
    ),
}

OTHER_ADDITIVES: Dict[str, Tuple[str, ...]] = {
    "Potassium iodate": ("potassium iodate", "KIO3"),
    "Cyclamates": (
        "cyclamate", "cyclamates", "sodium cyclamate", "calcium cyclamate", "E952", "E-952",
    ),
    "Olestra": ("olestra", "olean"),
    "rBGH": (
        "rbgh", "rbst", "recombinant bovine growth hormone", "recombinant bovine somatotropin",
    ),
}

SUBSTANCE_CATEGORIES: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    "preservative": MappingProxyType(PRESERVATIVES),
    "colorant": MappingProxyType(COLORANTS),
    "other": MappingProxyType(OTHER_ADDITIVES),
})

BANNED_SUBSTANCES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {**PRESERVATIVES, **COLORANTS, **OTHER_ADDITIVES}
)
