"""
CLI for applying an export template to a file of rows.

Usage:
    # CSV in, JSON to stdout
    python -m row_transform.cli --template config/templates/customers.yml \
        --input customers.csv

    # Named template from RT_TEMPLATES_DIR, JSON in, JSON file out
    python -m row_transform.cli --template-name customers \
        --input customers.json --output normalized.json

    # Keep going past misconfigured transformations and report them
    python -m row_transform.cli --template customers.yml --input rows.csv --report
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from row_transform.config.template_loader import (
    load_export_template,
    load_named_template,
)
from row_transform.infrastructure.transformations import (
    RowTransformer,
    TransformationError,
)
from row_transform.utils.logging import get_logger

logger = get_logger(__name__)


def read_rows(path: Path) -> List[Dict[str, Any]]:
    """
    Read input rows from CSV (all cells as text) or JSON (list of objects).

    Raises:
        ValueError: If the file type is unsupported or the JSON is not a
            list of objects
    """
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
        return df.to_dict(orient="records")

    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            content = json.load(f)
        if not isinstance(content, list):
            raise ValueError(
                f"Expected a JSON list of rows in {path}, got {type(content).__name__}"
            )
        for index, row in enumerate(content):
            if row is not None and not isinstance(row, dict):
                raise ValueError(
                    f"Row #{index} in {path} must be a JSON object, "
                    f"got {type(row).__name__}"
                )
        return content

    raise ValueError(f"Unsupported input file type: {path.suffix or '<none>'}")


def write_rows(rows: Any, output: Optional[Path]) -> None:
    payload = json.dumps(rows, ensure_ascii=False, indent=2, default=str)
    if output is None:
        sys.stdout.write(payload + "\n")
        return
    output.write_text(payload + "\n", encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    parser = argparse.ArgumentParser(
        prog="row_transform.cli",
        description="Rename and normalize row fields with an export template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    template_group = parser.add_mutually_exclusive_group(required=True)
    template_group.add_argument(
        "--template",
        type=Path,
        help="Path to a YAML export template",
    )
    template_group.add_argument(
        "--template-name",
        help="Name of a template in RT_TEMPLATES_DIR (without .yml)",
    )
    parser.add_argument(
        "--input",
        required=True,
        type=Path,
        help="Input rows (.csv or .json)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Record per-field configuration errors instead of aborting",
    )

    args = parser.parse_args(argv)

    try:
        if args.template is not None:
            field_configs = load_export_template(args.template)
        else:
            field_configs = load_named_template(args.template_name)
        rows = read_rows(args.input)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    transformer = RowTransformer(field_configs)

    if args.report:
        results = transformer.transform_with_report(rows)
        write_rows(
            [{"row": result.row, "status": result.status} for result in results],
            args.output,
        )
        failed = sum(result.fields_failed for result in results)
        if failed:
            print(f"{failed} field transformation(s) failed", file=sys.stderr)
            return 2
        return 0

    try:
        transformed = transformer.transform(rows)
    except TransformationError as e:
        logger.error("cli.transform_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    write_rows(transformed, args.output)
    logger.info(
        "cli.rows_written",
        rows=len(transformed),
        output=str(args.output) if args.output else "stdout",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
