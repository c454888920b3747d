"""
Dilemmas module exceptions.
"""

from shared.exceptions import NotFoundError


class DilemmaNotFoundError(NotFoundError):
    """Raised when a catalog dilemma ID does not exist."""

    def __init__(self, dilemma_id: int):
        super().__init__(
            f"Dilemma not found: {dilemma_id}",
            code="DILEMMA_NOT_FOUND",
            details={"dilemma_id": dilemma_id},
        )
