"""IRI parser - URNs and Unicode-aware URLs

This package classifies Internationalized Resource Identifiers as either
Uniform Resource Names or IRLs, the Unicode view of a URL that keeps its
ASCII-safe form alongside.
"""

from .errors import (
    IriError,
    UrnError,
    NotAUrnError,
    UrnFormatError,
    LocatorError,
    InvalidBaseError,
    PercentDecodingError,
    ClassificationError,
)
from .kind import IriKind
from .urn import ComponentOrder, Urn, parse_urn
from .irl import Irl, build_locator, percent_decode
from .iri import Iri, IriParser, Precedence, classify, is_iri
from .templates import iri, irl, url, urn

__version__ = "3.1.4"

__all__ = [
    "IriError",
    "UrnError",
    "NotAUrnError",
    "UrnFormatError",
    "LocatorError",
    "InvalidBaseError",
    "PercentDecodingError",
    "ClassificationError",
    "IriKind",
    "ComponentOrder",
    "Urn",
    "parse_urn",
    "Irl",
    "build_locator",
    "percent_decode",
    "Iri",
    "IriParser",
    "Precedence",
    "classify",
    "is_iri",
    "iri",
    "irl",
    "url",
    "urn",
]
