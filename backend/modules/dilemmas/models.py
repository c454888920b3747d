"""
Dilemmas module data models.

A dilemma is the immutable case a debate is argued over: the facts, the
legal context, and the two opposing positions.
"""

import json
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import Field, field_validator

from shared.models import CamelModel

CUSTOM_DILEMMA_ID = "custom"

DilemmaId = Union[int, Literal["custom"]]


class Side(str, Enum):
    """The two sides of a legal debate."""

    PROSECUTION = "prosecution"
    DEFENSE = "defense"

    @property
    def opposite(self) -> "Side":
        """The side arguing against this one."""
        return Side.DEFENSE if self is Side.PROSECUTION else Side.PROSECUTION


class Positions(CamelModel):
    """Opening position statement for each side."""

    model_config = {"frozen": True}

    prosecution: str = Field(..., description="Prosecution / plaintiff position")
    defense: str = Field(..., description="Defense position")

    def for_side(self, side: Side) -> str:
        """Return the position text for a side."""
        return self.prosecution if side is Side.PROSECUTION else self.defense


class Dilemma(CamelModel):
    """
    A legal dilemma, either from the built-in catalog or supplied by a user.

    Custom dilemmas carry the sentinel ID "custom" and are stored verbatim
    on the debate that uses them.
    """

    model_config = {"frozen": True}

    id: DilemmaId = Field(..., description="Catalog ID or 'custom'")
    title: str = Field(..., description="Case name")
    description: str = Field(..., description="Facts of the case")
    context: str = Field(..., description="Legal principles the case explores")
    positions: Positions = Field(..., description="Position statement per side")

    @property
    def is_custom(self) -> bool:
        return self.id == CUSTOM_DILEMMA_ID


class DilemmaSummary(CamelModel):
    """Catalog listing entry (without positions or context)."""

    id: int
    title: str
    description: str


class CustomCase(CamelModel):
    """User-supplied or AI-generated case submitted with a new debate."""

    title: str = Field(..., max_length=300)
    description: str = Field(..., max_length=5000)
    context: Optional[str] = Field(None, max_length=2000)
    positions: Positions

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("positions")
    @classmethod
    def _positions_not_blank(cls, value: Positions) -> Positions:
        if not value.prosecution.strip() or not value.defense.strip():
            raise ValueError("both positions are required")
        return value

    def to_dilemma(self) -> Dilemma:
        """Build the Dilemma used for the debate."""
        return Dilemma(
            id=CUSTOM_DILEMMA_ID,
            title=self.title,
            description=self.description,
            context=self.context or "Custom case created by user.",
            positions=self.positions,
        )


def parse_custom_case(payload: Any) -> Dilemma:
    """
    Parse a custom case payload into a Dilemma.

    Accepts either a mapping or its JSON text, which is how the payload
    comes back from storage depending on the column type.

    Raises:
        ValueError: If the payload is not a well-formed custom case
            (pydantic's ValidationError and json's JSONDecodeError are
            both ValueError subclasses).
    """
    if isinstance(payload, (str, bytes)):
        payload = json.loads(payload)
    return CustomCase.model_validate(payload).to_dilemma()
