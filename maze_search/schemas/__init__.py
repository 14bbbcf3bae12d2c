# Schemas module
from .counts import CellCounts, SolveSummary

__all__ = [
    "CellCounts",
    "SolveSummary",
]
