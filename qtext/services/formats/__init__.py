"""File format strategies and registry."""

from .base import FormatRegistryInst, filter_entry, open_filter, resolve_format
from .plain_text import PlainTextFormat
from .xml_text import XmlTextFormat, extract_text

__all__ = [
    "FormatRegistryInst",
    "filter_entry",
    "open_filter",
    "resolve_format",
    "PlainTextFormat",
    "XmlTextFormat",
    "extract_text",
]
