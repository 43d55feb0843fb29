"""IRI classification

An IRI is either a URN or a locator (IRL). `IriParser` decides which, trying
the two grammars in an order chosen by its `Precedence`.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

from yarl import URL

from .errors import ClassificationError, LocatorError, UrnError
from .irl import Irl
from .kind import IriKind
from .urn import OBJECT_TYPE, ComponentOrder, Urn

logger = logging.getLogger(__name__)

IriValue = Union[Urn, Irl]


class Precedence(Enum):
    """Which grammar the classifier tries first"""
    # URN grammar wins whenever it matches, base or not
    URN_FIRST = "urn-first"
    # A base means a relative locator is expected, so try the locator first
    BASE_IMPLIES_LOCATOR = "base-implies-locator"


class IriParser:
    """Classifies strings as URNs or IRLs"""

    def __init__(self, precedence: Precedence = Precedence.URN_FIRST,
                 component_order: ComponentOrder = ComponentOrder.RESOLVER_FIRST,
                 strict_decoding: bool = True):
        self.precedence = precedence
        self.component_order = component_order
        self.strict_decoding = strict_decoding

    def __repr__(self) -> str:
        return (f"IriParser(precedence={self.precedence}, "
                f"component_order={self.component_order}, "
                f"strict_decoding={self.strict_decoding})")

    def parse(self, value: Any, base: Any = None) -> IriValue:
        """Parse `value` as a URN or, failing that, as an IRL

        Raises `ClassificationError` only when both grammars reject the value;
        the two underlying errors are kept on the exception.
        """
        urn_error: Optional[UrnError] = None
        locator_error: Optional[LocatorError] = None

        locator_first = self.precedence is Precedence.BASE_IMPLIES_LOCATOR and base is not None
        if locator_first:
            try:
                return Irl(value, base, strict_decoding=self.strict_decoding)
            except LocatorError as e:
                logger.debug("Not a locator, trying URN grammar: %s", e)
                locator_error = e

        try:
            return Urn.from_string(value, self.component_order)
        except UrnError as e:
            logger.debug("Not a URN: %s", e)
            urn_error = e

        if not locator_first:
            try:
                return Irl(value, base, strict_decoding=self.strict_decoding)
            except LocatorError as e:
                logger.debug("Not a locator: %s", e)
                locator_error = e

        raise ClassificationError(value, base, urn_error, locator_error) from locator_error

    @staticmethod
    def is_iri(obj: Any) -> bool:
        """Check whether `obj` is an IRI

        True for IRLs, `yarl.URL` values and URNs, and for any object shaped like
        a URN (string `namespace` and `namespace_specific`, a `to_string()`
        returning a string and an `object_type` of "UniformResourceName").
        Never raises.
        """
        if isinstance(obj, (Irl, URL, Urn)):
            return True
        try:
            to_string = getattr(obj, "to_string", None)
            return (
                isinstance(getattr(obj, "namespace", None), str)
                and isinstance(getattr(obj, "namespace_specific", None), str)
                and callable(to_string)
                and isinstance(to_string(), str)
                and getattr(obj, "object_type", None) == OBJECT_TYPE
            )
        except Exception:
            # Probing arbitrary objects: any failure means "not URN-shaped"
            return False


class Iri:
    """Static entry points mirroring `IriParser` with default settings"""

    _parser = IriParser()

    @staticmethod
    def parse(value: Any, base: Any = None) -> IriValue:
        return Iri._parser.parse(value, base)

    @staticmethod
    def is_iri(obj: Any) -> bool:
        return IriParser.is_iri(obj)

    @staticmethod
    def kind_of(obj: Any) -> Optional[IriKind]:
        """Return the `IriKind` of a parsed value, None for anything else"""
        if isinstance(obj, (Urn, Irl)):
            return obj.kind
        return None


def classify(value: Any, base: Any = None) -> IriValue:
    """Parse `value` as a URN or an IRL using the default precedence"""
    return Iri.parse(value, base)


def is_iri(obj: Any) -> bool:
    return IriParser.is_iri(obj)
