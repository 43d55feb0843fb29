"""Lenient constructors for interpolated strings

Each constructor joins literal fragments and interpolated values into one
string and parses it, returning None instead of raising when parsing fails:

    >>> host = "çağlayan.info"
    >>> irl(["https://", "/résumé"], host).pathname
    '/résumé'
    >>> urn("urn:ietf:rfc:3987").namespace
    'ietf'

Failures are logged at DEBUG; use `classify`, `build_locator` or `parse_urn`
to get the typed error instead.
"""

import logging
from typing import Any, Optional, Sequence, Union

from yarl import URL

from .errors import IriError
from .iri import IriValue, classify
from .irl import Irl
from .urn import Urn

logger = logging.getLogger(__name__)


def interpolate(strings: Union[str, Sequence[str]], values: Sequence[Any]) -> str:
    """Interleave literal fragments with the string form of each value"""
    if isinstance(strings, str):
        strings = [strings]
    if len(strings) != len(values) + 1:
        raise ValueError(
            f"Expected {len(values) + 1} literal fragments for {len(values)} values, "
            f"got {len(strings)}"
        )
    parts = [strings[0]]
    for value, literal in zip(values, strings[1:]):
        parts.append(str(value))
        parts.append(literal)
    return "".join(parts)


def iri(strings: Union[str, Sequence[str]], *values: Any, base: Any = None) -> Optional[IriValue]:
    """Parse an interpolated string as a URN or an IRL"""
    s = interpolate(strings, values)
    try:
        return classify(s, base)
    except IriError as e:
        logger.debug("iri() returned None: %s", e)
        return None


def irl(strings: Union[str, Sequence[str]], *values: Any, base: Any = None) -> Optional[Irl]:
    """Parse an interpolated string as an IRL"""
    s = interpolate(strings, values)
    try:
        return Irl(s, base)
    except IriError as e:
        logger.debug("irl() returned None: %s", e)
        return None


def url(strings: Union[str, Sequence[str]], *values: Any, base: Any = None) -> Optional[URL]:
    """Parse an interpolated string as an IRL and return its ASCII-safe URL"""
    parsed = irl(strings, *values, base=base)
    return None if parsed is None else parsed.url


def urn(strings: Union[str, Sequence[str]], *values: Any) -> Optional[Urn]:
    """Parse an interpolated string as a URN"""
    s = interpolate(strings, values)
    try:
        return Urn.from_string(s)
    except IriError as e:
        logger.debug("urn() returned None: %s", e)
        return None
