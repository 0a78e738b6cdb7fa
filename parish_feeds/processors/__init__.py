"""Text processing helpers for parsed feed entries."""

from .normalize import clean_html_to_text, normalize_plain_text

__all__ = ["clean_html_to_text", "normalize_plain_text"]
