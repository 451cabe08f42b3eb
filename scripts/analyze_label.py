"""Script to analyse recognized label text from a file or stdin."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Tuple

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from services.label_analysis import assemble_product_record, authenticity_confidence, determine_verdict

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_label(value: str) -> Tuple[str, float]:
    name, sep, score = value.rpartition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=SCORE, got '{value}'")
    try:
        return name, float(score)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid score in '{value}'")


def analyze(text: str, labels: List[Tuple[str, float]]) -> dict:
    record = assemble_product_record(text, labels)
    return {
        "id": record.id,
        "name": record.name,
        "manufacturer": record.manufacturer,
        "production_location": record.production_location,
        "production_date": record.production_date,
        "serial_number": record.serial_number,
        "certifications": list(record.certifications),
        "confidence_score": record.confidence_score,
        "contains_banned_substances": record.contains_banned_substances,
        "banned_substances_found": list(record.banned_substances_found),
        "authenticity_confidence": authenticity_confidence(record),
        "verdict": determine_verdict(record).value,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Analyse text recognized on a product label")
    parser.add_argument("path", nargs="?", help="Text file to read (defaults to stdin)")
    parser.add_argument(
        "--label",
        action="append",
        default=[],
        type=parse_label,
        metavar="NAME=SCORE",
        help="Image classifier label, may be repeated",
    )
    args = parser.parse_args()

    if args.path:
        text = Path(args.path).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    result = analyze(text, args.label)
    if result["contains_banned_substances"]:
        logger.info(f"Banned substances: {', '.join(result['banned_substances_found'])}")
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
