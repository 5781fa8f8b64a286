"""Export formats and their importers."""

from .comparison import import_comparison, serialize_comparison
from .definitions import import_definitions, serialize_definitions
from .synonyms import import_synonyms, serialize_synonyms

__all__ = [
    "import_comparison",
    "import_definitions",
    "import_synonyms",
    "serialize_comparison",
    "serialize_definitions",
    "serialize_synonyms",
]
