from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from wordsmith.errors import FormatError
from wordsmith.exporting import import_definitions
from wordsmith.models import (
    DEFINITION_PLACEHOLDER,
    IMPORTED_DEFINITION_PLACEHOLDER,
    DefinitionRecord,
)


def _entry_problems(record: DefinitionRecord) -> List[str]:
    problems: List[str] = []
    if record.definition in {DEFINITION_PLACEHOLDER, IMPORTED_DEFINITION_PLACEHOLDER}:
        problems.append("no definition")
    if not record.uk_phonetic and not record.us_phonetic:
        problems.append("no phonetics")
    if not record.examples:
        problems.append("no examples")
    return problems


def main() -> None:
    parser = argparse.ArgumentParser(description="Check an exported definitions file.")
    parser.add_argument("path", type=Path, help="Export file to check")
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    try:
        result = import_definitions(text)
    except FormatError as exc:
        print(f"{args.path}: {exc}")
        raise SystemExit(1)

    print(f"{args.path}: {len(result.records)} entries ({result.grammar} format)")
    if result.generated_at:
        print(f"Generated at: {result.generated_at}")
    if result.version:
        print(f"Version: {result.version}")

    flagged = 0
    for index, record in enumerate(result.records, start=1):
        problems = _entry_problems(record)
        if problems:
            flagged += 1
            print(f"  {index}. {record.word}: {', '.join(problems)}")
    print(f"Entries with problems: {flagged}")


if __name__ == "__main__":
    main()
