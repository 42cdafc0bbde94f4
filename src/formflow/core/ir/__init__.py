"""
formflow Internal Representation (IR).

Pydantic models shared by the converter, the enrichment engine and the
JSON loaders.
"""

from .behaviors import (
    ActionContext,
    BehaviorBundle,
    BehaviorMatrix,
    CellMode,
    FieldCell,
    TaskFieldBehavior,
)

__all__ = [
    "ActionContext",
    "BehaviorBundle",
    "BehaviorMatrix",
    "CellMode",
    "FieldCell",
    "TaskFieldBehavior",
]
