"""Error classes shared by the URN, IRL and IRI parsers"""

from typing import Any, Optional


class IriError(TypeError):
    """Base exception for IRI errors"""
    pass


class UrnError(IriError):
    """Value is not a Uniform Resource Name"""
    pass


class NotAUrnError(UrnError):
    """Value is missing (None) and cannot be a URN"""
    pass


class UrnFormatError(UrnError):
    """String does not match the URN grammar"""
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Format does not match a Uniform Resource Name: '{value}'")


class LocatorError(IriError):
    """Value cannot be turned into a locator, optionally against a base"""
    def __init__(self, value: Any, base: Any = None, reason: str = "invalid locator"):
        self.value = value
        self.base = base
        self.reason = reason
        message = f"{reason}: '{value}'"
        if base is not None:
            message += f" (base '{base}')"
        super().__init__(message)


class InvalidBaseError(LocatorError):
    """Base cannot be parsed as an absolute URL"""
    def __init__(self, value: Any, base: Any):
        super().__init__(value, base, reason="invalid base URL")


class PercentDecodingError(LocatorError):
    """Component contains an invalid percent-encoded sequence"""
    def __init__(self, component: str, value: Any = None, base: Any = None):
        self.component = component
        if value is None:
            super().__init__(component, base, reason="invalid percent-encoding")
        else:
            super().__init__(value, base, reason=f"invalid percent-encoding in '{component}'")


class ClassificationError(IriError):
    """Value is neither a URN nor a locator"""
    def __init__(self, value: Any, base: Any,
                 urn_error: Optional[UrnError], locator_error: Optional[LocatorError]):
        self.value = value
        self.base = base
        self.urn_error = urn_error
        self.locator_error = locator_error
        message = f"Not an IRI: '{value}'"
        if base is not None:
            message += f" (base '{base}')"
        super().__init__(message)
