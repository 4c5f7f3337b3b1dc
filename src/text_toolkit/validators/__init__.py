from .formats import is_email, is_url

__all__ = [
    "is_email",
    "is_url",
]
