"""Schemas for search run results."""

from pydantic import BaseModel, Field


class CellCounts(BaseModel):
    """Cell tallies from a finished search run."""

    solution: int = Field(0, ge=0)
    # solution cells are counted as visited too
    visited: int = Field(0, ge=0)
    frontier: int = Field(0, ge=0)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return self.model_dump()


class SolveSummary(BaseModel):
    """Schema for the outcome of a successful solve."""

    algorithm: str
    counts: CellCounts
    path_length: int = Field(..., ge=1)
    grid: str
