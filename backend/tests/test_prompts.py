from wordsmith.parsing.comparison import DETAILS_SEPARATOR
from wordsmith.services import prompts


def test_define_prompt_names_words_and_block_count():
    prompt = prompts.build_define_prompt(["happy", "joyful"], "5yrs-old")
    assert "Define these words: happy, joyful" in prompt
    assert "Return 2 separate definition blocks" in prompt
    assert "5-year-old" in prompt


def test_define_prompt_level_defaults():
    prompt = prompts.build_define_prompt(["happy"], "unknown")
    assert prompts.DEFINE_DEFAULT_INSTRUCTION in prompt


def test_compare_prompt_asks_for_separator():
    prompt = prompts.build_compare_prompt(["happy", "joyful"], "Advanced")
    assert DETAILS_SEPARATOR in prompt
    assert prompts.COMPARE_LEVEL_INSTRUCTIONS["advanced"] in prompt


def test_synonyms_and_etymology_prompts():
    assert "## Happy" in prompts.build_synonyms_prompt(["happy"])
    assert '"word": "salary"' in prompts.build_etymology_prompt(["salary"])
