"""Discriminator shared by the two IRI variants"""

from enum import Enum


class IriKind(Enum):
    """Which variant of IRI a parsed value is"""
    URN = "urn"
    LOCATOR = "locator"
