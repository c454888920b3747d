"""
Dilemmas module.

The case catalog: built-in legal dilemmas and custom case parsing.

Public API:
- ICaseCatalog: Interface for catalog lookups
- Dilemma: A case with facts, context and both positions
- Side: prosecution / defense
- CustomCase: User-supplied case payload
"""

from .interfaces import ICaseCatalog
from .models import (
    CUSTOM_DILEMMA_ID,
    CustomCase,
    Dilemma,
    DilemmaId,
    DilemmaSummary,
    Positions,
    Side,
    parse_custom_case,
)
from .catalog import DILEMMAS, StaticCaseCatalog, get_case_catalog
from .exceptions import DilemmaNotFoundError

__all__ = [
    # Interface
    "ICaseCatalog",
    # Models
    "CUSTOM_DILEMMA_ID",
    "CustomCase",
    "Dilemma",
    "DilemmaId",
    "DilemmaSummary",
    "Positions",
    "Side",
    "parse_custom_case",
    # Catalog
    "DILEMMAS",
    "StaticCaseCatalog",
    "get_case_catalog",
    # Exceptions
    "DilemmaNotFoundError",
]
