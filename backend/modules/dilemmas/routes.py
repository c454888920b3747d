"""
Dilemma catalog endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_case_catalog

from .interfaces import ICaseCatalog
from .models import Dilemma, DilemmaSummary
from .exceptions import DilemmaNotFoundError

router = APIRouter()


@router.get("", response_model=list[DilemmaSummary])
async def list_dilemmas(
    catalog: ICaseCatalog = Depends(get_case_catalog),
) -> list[DilemmaSummary]:
    """
    List the built-in dilemmas available for debate.
    """
    return catalog.list_dilemmas()


@router.get("/{dilemma_id}", response_model=Dilemma)
async def get_dilemma(
    dilemma_id: int,
    catalog: ICaseCatalog = Depends(get_case_catalog),
) -> Dilemma:
    """
    Get a single dilemma with its context and both positions.
    """
    dilemma = catalog.get_dilemma(dilemma_id)
    if dilemma is None:
        error = DilemmaNotFoundError(dilemma_id)
        raise HTTPException(status_code=error.status_code, detail=error.to_dict())
    return dilemma
