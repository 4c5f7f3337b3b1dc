"""Text toolkit: string transformation, validation and similarity helpers."""
from importlib.metadata import version, PackageNotFoundError

from .analysis import distance_and_similarity, extract_words, similarity, word_count
from .generators import ALPHANUMERIC, random_string
from .transform import (
    escape_html,
    normalize_whitespace,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
    to_title_case,
    truncate,
)
from .utils.edit_distance import levenshtein
from .validators import is_email, is_url

try:
    __version__ = version("text-toolkit")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ALPHANUMERIC",
    "to_camel_case",
    "to_kebab_case",
    "to_snake_case",
    "to_title_case",
    "truncate",
    "slugify",
    "extract_words",
    "word_count",
    "normalize_whitespace",
    "is_email",
    "is_url",
    "random_string",
    "escape_html",
    "similarity",
    "distance_and_similarity",
    "levenshtein",
]
