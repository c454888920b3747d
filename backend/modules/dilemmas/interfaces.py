"""
Dilemmas module interface.

The debates module resolves dilemma references through ICaseCatalog and
never touches the static data directly.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Dilemma, DilemmaSummary


@runtime_checkable
class ICaseCatalog(Protocol):
    """Read-only lookup of built-in dilemmas."""

    def list_dilemmas(self) -> list[DilemmaSummary]:
        """
        List all catalog dilemmas.

        Returns:
            Summaries (id, title, description) in ID order
        """
        ...

    def get_dilemma(self, dilemma_id: int) -> Optional[Dilemma]:
        """
        Get a dilemma by catalog ID.

        Args:
            dilemma_id: Integer catalog ID

        Returns:
            The dilemma, or None if the ID is not in the catalog
        """
        ...
