import pytest

from wordsmith.errors import FormatError
from wordsmith.exporting import import_synonyms, serialize_synonyms
from wordsmith.parsing import extract_synonym_view, parse_synonyms


RESPONSE = (
    "Here is your analysis.\n"
    "## Happy\n"
    "**Synonyms:** glad, cheerful and content\n"
    "**Usage Notes:** <mark>Happy</mark> is the most general.\n"
    "**Examples:**\n"
    "- I am happy.\n"
    "- She is glad.\n"
    "\n"
    "## Sad\n"
    "**Synonyms:** unhappy, down\n"
    "**Usage Notes:** Everyday word.\n"
    "**Examples:**\n"
    "- He is sad."
)


def test_response_is_split_into_heading_sections():
    sections = parse_synonyms(RESPONSE)
    assert len(sections) == 2
    assert sections[0].markdown.startswith("## Happy")
    assert sections[1].markdown.startswith("## Sad")


def test_text_without_headings_has_no_sections():
    assert parse_synonyms("No markdown headings at all.") == []
    assert parse_synonyms("") == []


def test_view_extracts_display_fields():
    view = extract_synonym_view(parse_synonyms(RESPONSE)[0])
    assert view.title == "Happy"
    assert view.synonyms == ["glad", "cheerful", "content"]
    assert view.usage_notes == "<mark>Happy</mark> is the most general."
    assert view.examples == "- I am happy.\n- She is glad."


def test_view_defaults_when_labels_are_missing():
    view = extract_synonym_view("Just text")
    assert view.title == "Synonym Analysis"
    assert view.synonyms == []
    assert view.usage_notes == ""


def test_export_and_import_round_trip():
    sections = parse_synonyms(RESPONSE)
    text = serialize_synonyms(sections)
    assert text.startswith("Word Synonym Analysis\n\n## Happy")
    assert "\n\n---\n\n## Sad" in text
    assert import_synonyms(text) == sections


def test_import_requires_title():
    with pytest.raises(FormatError):
        import_synonyms("## Happy\n**Synonyms:** glad")


def test_import_without_sections_is_a_format_error():
    with pytest.raises(FormatError):
        import_synonyms("Word Synonym Analysis\n\nnothing here")
