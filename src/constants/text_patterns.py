import re

E_CODE_PATTERN = re.compile(r"(?<!\w)e-?\d{3}[a-z]?(?!\w)", re.IGNORECASE)
E_CODE_ALIAS_PATTERN = re.compile(r"e-?\d{3}[a-z]?", re.IGNORECASE)

# Evaluation order is the reporting order.
CERTIFICATION_PATTERNS = {
    "DOP": [r"DOP", r"D\.O\.P\.?", r"Denominazione\s+di\s+Origine\s+Protetta"],
    "IGP": [r"IGP", r"I\.G\.P\.?", r"Indicazione\s+Geografica\s+Protetta"],
    "DOCG": [
        r"DOCG",
        r"D\.O\.C\.G\.?",
        r"Denominazione\s+di\s+Origine\s+Controllata\s+e\s+Garantita",
    ],
    "DOC": [
        r"DOC",
        r"D\.O\.C(?!\.G)\.?",
        r"Denominazione\s+di\s+Origine\s+Controllata(?!\s+e\s+Garantita)",
    ],
    "STG": [r"STG", r"S\.T\.G\.?", r"Specialit[àa]\s+Tradizionale\s+Garantita"],
    "BIO": [r"BIO", r"Biologico", r"Biologica", r"Organic", r"Organico"],
}

COMPILED_CERTIFICATION_PATTERNS = {
    code: re.compile(r"(?<!\w)(?:" + "|".join(triggers) + r")(?!\w)", re.IGNORECASE)
    for code, triggers in CERTIFICATION_PATTERNS.items()
}

SERIAL_NUMBER_PATTERN = re.compile(
    r"(?<!\w)(?:serial|s/n|series|code)(?:[ \t]*(?:(?:number|no)(?!\w)\.?|#))?[:\s]*(\w{5,})",
    re.IGNORECASE,
)

PRODUCTION_DATE_PATTERN = re.compile(
    r"(?<!\w)(?:prod|mfg|manufacturing|production)(?:[ \t.]*date)?[ :.-]*"
    r"(\d{1,2}[/.-]\d{1,2}[/.-]\d{2,4})(?!\d)",
    re.IGNORECASE,
)

ORIGIN_COUNTRY = "Italy"

MADE_IN_ITALY_PATTERN = re.compile(
    r"made\s+in\s+italy|prodotto\s+in\s+italia|fabbricato\s+in\s+italia",
    re.IGNORECASE,
)

LEGAL_FORM = r"(?i:s\.?r\.?l|s\.?p\.?a)\.?(?!\w)"

# A run of capitalized words on one line, stopping before a legal form.
CAPITALIZED_WORDS = (
    r"[A-ZÀ-ÖØ-Þ][\w&'-]*(?:[ \t]+(?!" + LEGAL_FORM + r")[A-ZÀ-ÖØ-Þ][\w&'-]*)*"
)

# Tried in order; the first capture group is the manufacturer.
MANUFACTURER_PATTERNS = [
    re.compile(r"(?<!\w)(?i:by)[ \t]+(" + CAPITALIZED_WORDS + r")"),
    re.compile(r"(" + CAPITALIZED_WORDS + r")[ \t,]+" + LEGAL_FORM),
]

ITALIAN_INDICATORS = ("italian", "italy", "made in italy", "handcrafted", "artisan")
