"""Phasebook utilities."""

from .config_loader import load_config, load_config_file, get_available_configs
from .line_classifier import (
    Heading,
    Bullet,
    Text,
    Blank,
    Line,
    classify_line,
    classify_document,
)
from .slug_codec import SlugCodec, encode_filename, decode_slug

__all__ = [
    "load_config",
    "load_config_file",
    "get_available_configs",
    "Heading",
    "Bullet",
    "Text",
    "Blank",
    "Line",
    "classify_line",
    "classify_document",
    "SlugCodec",
    "encode_filename",
    "decode_slug",
]
