from .similarity import distance_and_similarity, similarity
from .words import extract_words, word_count

__all__ = [
    "distance_and_similarity",
    "similarity",
    "extract_words",
    "word_count",
]
