from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path

from wordsmith.config import get_settings
from wordsmith.exporting import serialize_definitions
from wordsmith.models import MATCH_CONTENT
from wordsmith.parsing import get_parsing_pipeline, split_terms


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Parse a saved definitions response into the export format.",
    )
    parser.add_argument("response", type=Path, help="Text file holding the model response")
    parser.add_argument(
        "--words",
        required=True,
        help="Words the response was requested for, comma or newline separated",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Where to write the export (default: <export dir>/word-definitions.txt)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log parsing decisions")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    terms = split_terms(args.words)
    if not terms:
        parser.error("--words must name at least one word")

    response = args.response.read_text(encoding="utf-8")
    records = get_parsing_pipeline().parse_definitions(response, terms)

    print(f"Expected words: {len(terms)}")
    print(f"Parsed records: {len(records)}")
    matches = Counter(record.match for record in records)
    for match, count in sorted(matches.items()):
        print(f"  {match}: {count}")
    for record in records:
        if record.match != MATCH_CONTENT:
            print(f"  check alignment of '{record.word}' ({record.match})")

    if not records:
        if response.strip():
            print("Response received but nothing could be parsed")
        raise SystemExit(1)

    output = args.output or get_settings().export_dir / "word-definitions.txt"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(serialize_definitions(records), encoding="utf-8")
    print(f"\nSaved export to {output}")


if __name__ == "__main__":
    main()
