import argparse
import json
import logging
import sys
from typing import List, Optional

from readiness.logic import InvalidInputError, ReadinessEngine
from readiness.settings import settings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readiness-score",
        description="Score a PhD application snapshot on the 0-10 readiness scale",
    )
    parser.add_argument("file", nargs="?", default="-",
                        help="JSON input record (default: read stdin)")
    parser.add_argument("--locale", choices=["en", "zh"],
                        help="Language for labels and tips")
    parser.add_argument("--scheme", choices=["default", "engineering", "humanities"],
                        help="Override the weight scheme in the input record")
    parser.add_argument("--options", action="store_true",
                        help="Print the selectable options instead of scoring")
    parser.add_argument("--pretty", action="store_true",
                        help="Indent the JSON output")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Logging level (default: READINESS_LOG_LEVEL or INFO)")
    return parser


def _read_payload(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = (args.log_level or settings.LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        print(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}", file=sys.stderr)
        return 2
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")
    indent = 2 if args.pretty else None
    engine = ReadinessEngine()

    if args.options:
        print(json.dumps(engine.list_options(args.locale), ensure_ascii=False, indent=indent))
        return 0

    try:
        payload = _read_payload(args.file)
    except (OSError, json.JSONDecodeError) as e:
        logging.error(f"Could not read input record: {e}")
        return 1

    if not isinstance(payload, dict):
        logging.error("Input record must be a JSON object")
        return 2
    if args.scheme:
        payload["weight_scheme"] = args.scheme

    try:
        output = engine.evaluate_from_dict(payload, locale=args.locale)
    except InvalidInputError as e:
        logging.error(str(e))
        for err in e.errors:
            print(f"  {err['field']}: {err['message']}", file=sys.stderr)
        return 2

    print(output.model_dump_json(indent=indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
