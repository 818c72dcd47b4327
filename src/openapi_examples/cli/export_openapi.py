"""CLI entry point for writing the API description document to disk."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from openapi_examples.docs import DocumentationSourceError
from openapi_examples.main import create_app

logger = logging.getLogger(__name__)


def generate_schema_dict() -> Dict[str, Any]:
    """Return the API description built by the application factory."""
    return create_app().openapi()


def write_output(schema: Dict[str, Any], out_path: Path, fmt: str) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "yaml":
        text = yaml.safe_dump(schema, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(schema, indent=2, ensure_ascii=False)
    out_path.write_text(text, encoding="utf-8")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export the OpenAPI description of the web API")
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("swagger.json"),
        help="Output file path (default: swagger.json)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = parse_args(argv)

    try:
        schema = generate_schema_dict()
    except DocumentationSourceError as exc:
        logger.error("Unable to build API description: %s", exc)
        return 1

    write_output(schema, args.out, args.format)
    logger.info("OpenAPI description written to %s in %s format", args.out, args.format.upper())
    return 0


if __name__ == "__main__":
    sys.exit(main())
