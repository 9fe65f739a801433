"""
Per-domain question synthesizers.

Each domain has its own module with a synthesizer class exposing
build(level, rng), which branches into level bands and picks one of two
templates per band.
"""

from typing import TYPE_CHECKING

from mathquest.core.models import MasteryDomain

if TYPE_CHECKING:
    from .base import Synthesizer


# Synthesizer registry - populated by @register decorator
SYNTHESIZERS: dict[MasteryDomain, "Synthesizer"] = {}


def register(domain: MasteryDomain):
    """Decorator to register a domain synthesizer."""
    def decorator(cls):
        instance = cls()
        instance.domain = domain
        SYNTHESIZERS[domain] = instance
        return cls
    return decorator


def get_synthesizer(domain: str | MasteryDomain) -> "Synthesizer":
    """Get the synthesizer for a domain. Raises KeyError if none is registered."""
    if isinstance(domain, str) and not isinstance(domain, MasteryDomain):
        try:
            domain = MasteryDomain(domain.upper())
        except ValueError:
            raise KeyError(domain) from None
    return SYNTHESIZERS[domain]


# Import synthesizers to trigger registration
from . import arithmetic
from . import algebra
from . import geometry
from . import fractions
from . import number_theory
from . import probability
from . import statistics
from . import trigonometry
from . import calculus
from . import word_problems

__all__ = [
    "SYNTHESIZERS",
    "get_synthesizer",
    "register",
]
