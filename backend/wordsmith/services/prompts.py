"""Prompt templates for each tool.

The response grammars the parsers expect are spelled out here, so a change
to one side usually needs a change to the other.
"""

from __future__ import annotations

from typing import Sequence

from wordsmith.parsing.comparison import DETAILS_SEPARATOR


DEFINE_LEVEL_INSTRUCTIONS = {
    "5yrs-old": "Use very simple words that a 5-year-old would understand.",
    "proficient": "Use sophisticated vocabulary and provide detailed, nuanced explanations.",
}
DEFINE_DEFAULT_INSTRUCTION = (
    "Use clear, standard explanations suitable for intermediate English learners."
)

COMPARE_LEVEL_INSTRUCTIONS = {
    "beginner": "Keep explanations simple and clear, using short sentences.",
    "intermediate": "Use moderate depth, providing both meaning and subtle differences.",
    "advanced": "Include detailed linguistic nuances, idiomatic usage, and tone differences.",
}

SYNONYM_LEVEL_INSTRUCTIONS = {
    "beginner": "Use simple vocabulary and avoid complex sentence structures.",
    "intermediate": "Use moderately challenging vocabulary suitable for intermediate learners.",
    "advanced": "Use rich and nuanced language appropriate for advanced learners.",
}


def _level_key(level: str) -> str:
    return (level or "").strip().lower()


def build_define_prompt(terms: Sequence[str], level: str = "") -> str:
    instruction = DEFINE_LEVEL_INSTRUCTIONS.get(_level_key(level), DEFINE_DEFAULT_INSTRUCTION)
    return f"""Define these words: {", ".join(terms)}

{instruction}

For EACH word, return EXACTLY this format (separate each word with TWO blank lines):

word | part of speech
Level: <B1/B2/C1>   # OPTIONAL - include if you can estimate CEFR level
uk /phonetic/ us /phonetic/
Definition: clear definition in plain text
- Example sentence 1
- Example sentence 2

CRITICAL:
- Return {len(terms)} separate definition blocks
- Each word must have its own complete block
- Use exactly TWO blank lines between each word definition."""


def build_compare_prompt(terms: Sequence[str], level: str = "") -> str:
    instruction = COMPARE_LEVEL_INSTRUCTIONS.get(_level_key(level), "")
    return f"""**Task: Compare and contrast these words:** {", ".join(terms)}.

**Response Format (Strict):**
1. **Key Difference:** Start with a single, concise sentence that summarizes the absolute main difference. (No Markdown in this section)
2. **Separator:** After that sentence, insert the exact separator: "{DETAILS_SEPARATOR}" on its own line.
3. **Detailed Analysis:** After the separator, provide a full, detailed analysis formatted in Markdown. In this section:
    - Use a Level 2 Heading (e.g., '## Word') for each word.
    - Use Markdown bold ('**Usage:**') for subheadings.
    - **CRITICAL: Throughout your explanations, wrap the most important keywords and concepts in HTML <mark> tags to highlight them.**
    - Conclude with a final '## Comparison Table'.

{instruction}""".rstrip()


def build_synonyms_prompt(terms: Sequence[str], level: str = "") -> str:
    instruction = SYNONYM_LEVEL_INSTRUCTIONS.get(_level_key(level), "")
    return f"""For each word in this list: "{", ".join(terms)}", provide a detailed synonym analysis.

**Formatting Rules:**
- **USE MARKDOWN** for the entire response.
- For each word, create a Level 2 Heading (e.g., '## Happy').
- Under each heading, provide the following sections with bolded labels:
  - '**Synonyms:**' A comma-separated list of 5-7 relevant synonyms.
  - '**Usage Notes:**' A brief paragraph explaining the nuances.
  - '**Examples:**' A bulleted list with two sentences.
- **CRITICAL: Throughout "Usage Notes" and "Examples", wrap important keywords in HTML <mark> tags to highlight them.**

{instruction}""".rstrip()


def build_etymology_prompt(terms: Sequence[str], level: str = "") -> str:
    word = terms[0] if terms else ""
    return f"""Analyze the etymology of the word "{word}".

You MUST return your response as a single, minified JSON object.
Do NOT include any text, notes, or markdown formatting outside of the JSON object.

The JSON object must match this exact structure:
{{
  "word": "{word}",
  "languageOfOrigin": "e.g., Latin, Old French",
  "rootWord": "The original root word and its meaning",
  "firstKnownUse": "e.g., 14th Century",
  "explanation": "A concise, engaging story about the word's journey.",
  "timeline": [
    {{ "period": "e.g., 12th Century", "change": "Description of the word's form and meaning during this period." }},
    {{ "period": "e.g., 14th Century", "change": "Description of its entry into English and any changes." }}
  ]
}}"""
