"""Script to export the OpenAPI schema of the analysis API."""

import argparse
import json
import sys
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api import app


def export_schema(output_dir: Path) -> tuple[Path, Path]:
    schema = app.openapi()
    output_dir.mkdir(parents=True, exist_ok=True)

    yaml_path = output_dir / "swagger.yaml"
    json_path = output_dir / "openapi.json"
    yaml_path.write_text(yaml.safe_dump(schema, sort_keys=False, default_flow_style=False), encoding="utf-8")
    json_path.write_text(json.dumps(schema, indent=2), encoding="utf-8")
    return yaml_path, json_path


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Export the LabelLens OpenAPI schema")
    parser.add_argument("--output", type=Path, default=Path(__file__).parent.parent / "docs")
    args = parser.parse_args()

    yaml_path, json_path = export_schema(args.output)
    print(f"Generated OpenAPI documentation for {app.title}:")
    print(f"   - {yaml_path}")
    print(f"   - {json_path}")
