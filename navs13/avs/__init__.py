"""
NAVS13 parsing and generation.
"""

from navs13.avs.generator import generate, generate_many
from navs13.avs.validator import extract_digits, is_valid, parse, parse_or_raise

__all__ = [
    "extract_digits",
    "generate",
    "generate_many",
    "is_valid",
    "parse",
    "parse_or_raise",
]
