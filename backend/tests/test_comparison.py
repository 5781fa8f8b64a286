import pytest

from wordsmith.errors import FormatError
from wordsmith.exporting import import_comparison, serialize_comparison
from wordsmith.models import COMPARISON_NOTICE, ComparisonRecord
from wordsmith.parsing import parse_comparison


RESPONSE = (
    "Happy is a general state, joyful is a more intense one.\n"
    "---DETAILS---\n"
    "## Happy\n"
    "**Usage:** everyday.\n"
    "\n"
    "## Comparison Table\n"
    "| Word | Intensity |\n"
    "|---|---|\n"
    "| happy | low |"
)


def test_response_is_split_on_details_separator():
    record = parse_comparison(RESPONSE)
    assert record.summary == "Happy is a general state, joyful is a more intense one."
    assert record.details.startswith("## Happy")
    assert record.details.endswith("| happy | low |")


def test_missing_separator_keeps_all_text_as_details():
    record = parse_comparison("## Happy\nJust markdown.")
    assert record.summary == COMPARISON_NOTICE
    assert record.details == "## Happy\nJust markdown."


def test_export_layout():
    text = serialize_comparison(ComparisonRecord(summary="Short.", details="## A\nLong."))
    assert text == (
        "Word Comparison Analysis\n\nKey Difference:\nShort.\n\n---\n\n## A\nLong."
    )


def test_round_trip():
    record = parse_comparison(RESPONSE)
    assert import_comparison(serialize_comparison(record)) == record


def test_import_without_separator_treats_body_as_details():
    record = import_comparison("Word Comparison Analysis\n\n## Happy\nText.")
    assert record.summary == "No summary found."
    assert record.details == "## Happy\nText."


def test_import_requires_title():
    with pytest.raises(FormatError):
        import_comparison("Key Difference:\nx\n\n---\n\ny")
