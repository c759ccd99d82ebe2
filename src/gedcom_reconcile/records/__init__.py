"""
Individual records parsed from GEDCOM text.
"""

from .models import UNKNOWN_NAME, UNKNOWN_VALUE, BirthDetails, IndividualRecord
from .parser import load_individuals, parse_individuals, parse_tokens

__all__ = [
    "UNKNOWN_NAME",
    "UNKNOWN_VALUE",
    "BirthDetails",
    "IndividualRecord",
    "load_individuals",
    "parse_individuals",
    "parse_tokens",
]
