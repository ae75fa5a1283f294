"""Run the risk analysis over a JSON export of patient records."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from ..adapters.envelope import extract_patients
from ..adapters.submission import to_submission
from ..core.analyze import analyze

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vitalrisk-analyze",
        description="Score patient vitals from a JSON file (bare list or vendor envelope).",
    )
    parser.add_argument("path", type=Path, help="JSON file with patient records")
    parser.add_argument(
        "--full",
        action="store_true",
        help="print scored patients and data quality details, not only the alert lists",
    )
    parser.add_argument("--indent", type=int, default=2)
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def load_records(parser: argparse.ArgumentParser, path: Path) -> List[object]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        parser.error(f"cannot read {path}: {exc}")
    except UnicodeDecodeError as exc:
        parser.error(f"{path} is not UTF-8 text: {exc}")
    except json.JSONDecodeError as exc:
        parser.error(f"{path} is not valid JSON: {exc}")
    return extract_patients(payload)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    records = load_records(parser, args.path)
    result = analyze(records)
    if args.full:
        data = result.model_dump()
    else:
        data = to_submission(result).model_dump()
    json.dump(data, sys.stdout, ensure_ascii=False, indent=args.indent)
    sys.stdout.write("\n")
    logger.info("Analyzed %d records from %s", len(records), args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
