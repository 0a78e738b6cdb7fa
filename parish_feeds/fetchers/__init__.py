"""Network fetch and feed parsing layer."""

from .document import fetch_xml
from .entries import parse_entries

__all__ = ["fetch_xml", "parse_entries"]
