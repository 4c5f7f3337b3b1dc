from .casing import to_camel_case, to_kebab_case, to_snake_case, to_title_case
from .text import escape_html, normalize_whitespace, slugify, truncate

__all__ = [
    "to_camel_case",
    "to_kebab_case",
    "to_snake_case",
    "to_title_case",
    "truncate",
    "slugify",
    "normalize_whitespace",
    "escape_html",
]
