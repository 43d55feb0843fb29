"""Uniform Resource Names

Implements the RFC 8141 URN syntax with r-component, q-component and
f-component:

    urn:NID:NSS[?+r-component][?=q-component][#f-component]

The optional components are kept verbatim, delimiter included, so that a
parsed URN serializes back to the exact string it was read from.

Examples:
    urn:ietf:rfc:3987
    urn:example:weather?+CCResolve:cc=uk
    urn:example:weather?+CCResolve:cc=uk?=op=map&lat=39.56#top
"""

import re
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import NotAUrnError, UrnFormatError
from .kind import IriKind


class ComponentOrder(Enum):
    """Wire order of the r-component and q-component"""
    RESOLVER_FIRST = "resolver-first"
    QUERY_FIRST = "query-first"


# A "?" only opens a component when followed by "+" or "="
_PLAIN = r"(?:[^?#]|\?(?![+=]))"
_NID = r"(?P<namespace>[^:]+)"
_NSS = rf"(?P<namespace_specific>{_PLAIN}+)"
_RESOLVER = rf"(?P<resolver>\?\+{_PLAIN}*)?"
_QUERY = rf"(?P<query>\?={_PLAIN}*)?"
_FRAGMENT = r"(?P<fragment>#.*)?"

_PATTERNS: Dict[ComponentOrder, "re.Pattern[str]"] = {
    ComponentOrder.RESOLVER_FIRST: re.compile(
        rf"(?i:urn):{_NID}:{_NSS}{_RESOLVER}{_QUERY}{_FRAGMENT}", re.DOTALL
    ),
    ComponentOrder.QUERY_FIRST: re.compile(
        rf"(?i:urn):{_NID}:{_NSS}{_QUERY}{_RESOLVER}{_FRAGMENT}", re.DOTALL
    ),
}

OBJECT_TYPE = "UniformResourceName"


class Urn:
    """A Uniform Resource Name

    Immutable; build one with `Urn.from_string` or `parse_urn`.
    """

    __slots__ = ("_namespace", "_namespace_specific", "_resolver", "_query",
                 "_fragment", "_component_order")

    def __init__(self, namespace: str, namespace_specific: str,
                 resolver: Optional[str] = None, query: Optional[str] = None,
                 fragment: Optional[str] = None,
                 component_order: ComponentOrder = ComponentOrder.RESOLVER_FIRST):
        if not namespace or ":" in namespace or not namespace_specific:
            raise UrnFormatError(f"urn:{namespace}:{namespace_specific}")
        object.__setattr__(self, "_namespace", namespace)
        object.__setattr__(self, "_namespace_specific", namespace_specific)
        object.__setattr__(self, "_resolver", resolver)
        object.__setattr__(self, "_query", query)
        object.__setattr__(self, "_fragment", fragment)
        object.__setattr__(self, "_component_order", component_order)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_string(cls, s: Any,
                    order: ComponentOrder = ComponentOrder.RESOLVER_FIRST) -> 'Urn':
        """Create a URN from its string representation

        Non-string values are converted with `str()` first; `None` is rejected.
        The r-component and q-component must appear in `order`; anything else,
        including a repeated component, does not match.
        """
        if s is None:
            raise NotAUrnError("Not a Uniform Resource Name")
        if not isinstance(s, str):
            s = str(s)

        match = _PATTERNS[order].fullmatch(s)
        if match is None:
            raise UrnFormatError(s)

        return cls(
            match.group("namespace"),
            match.group("namespace_specific"),
            resolver=match.group("resolver"),
            query=match.group("query"),
            fragment=match.group("fragment"),
            component_order=order,
        )

    @property
    def namespace(self) -> str:
        """Namespace identifier (NID)"""
        return self._namespace

    @property
    def namespace_specific(self) -> str:
        """Namespace-specific string (NSS)"""
        return self._namespace_specific

    @property
    def resolver(self) -> Optional[str]:
        """r-component including its leading `?+`"""
        return self._resolver

    @property
    def query(self) -> Optional[str]:
        """q-component including its leading `?=`"""
        return self._query

    @property
    def fragment(self) -> Optional[str]:
        """f-component including its leading `#`"""
        return self._fragment

    @property
    def component_order(self) -> ComponentOrder:
        return self._component_order

    @property
    def object_type(self) -> str:
        return OBJECT_TYPE

    @property
    def kind(self) -> IriKind:
        return IriKind.URN

    def _key(self) -> Tuple[str, str, Optional[str], Optional[str], Optional[str], ComponentOrder]:
        return (self._namespace, self._namespace_specific,
                self._resolver, self._query, self._fragment, self._component_order)

    def to_string(self) -> str:
        """Serialize the URN, replaying every component verbatim"""
        if self._component_order is ComponentOrder.QUERY_FIRST:
            middle = (self._query or "") + (self._resolver or "")
        else:
            middle = (self._resolver or "") + (self._query or "")
        return f"urn:{self._namespace}:{self._namespace_specific}{middle}{self._fragment or ''}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Urn('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Urn):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


def parse_urn(value: Any, order: ComponentOrder = ComponentOrder.RESOLVER_FIRST) -> Urn:
    """Parse a URN, raising `UrnError` if `value` is not one"""
    return Urn.from_string(value, order)
