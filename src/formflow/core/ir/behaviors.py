"""
Behavior types for formflow IR.

This module contains the authoring-time Behavior Matrix cell and the
runtime-facing Behavior Bundle consumed by a workflow/task runtime.

Example matrix (JSON):
    {
      "amount": {
        "entry": {"mode": "editable", "required": true},
        "review": {"mode": "readonly", "required": false}
      }
    }
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class CellMode(StrEnum):
    """How a field behaves in one workflow state."""

    HIDDEN = "hidden"
    READONLY = "readonly"
    EDITABLE = "editable"


class ActionContext(StrEnum):
    """Coarse per-state summary of intent."""

    CREATE = "create"
    UPDATE = "update"
    VIEW = "view"


class FieldCell(BaseModel):
    """
    One field's behavior in one state.

    An absent cell reads as ``FieldCell()``, i.e. hidden and not required.
    """

    mode: CellMode = CellMode.HIDDEN
    required: bool = False

    model_config = ConfigDict(frozen=True)


class TaskFieldBehavior(BaseModel):
    """
    A single bundle row.

    Attributes:
        field_name: Matches a schema component ``key``
        action_context: The owning bundle's action
        visible: Whether the field shows in the bundle's state
        required: Whether the field is required in the bundle's state
    """

    field_name: str
    action_context: ActionContext
    visible: bool = True
    required: bool = False

    model_config = ConfigDict(frozen=True)


class BehaviorBundle(BaseModel):
    """Per-state behavior for every field known to the source matrix."""

    state: str = Field(description="Workflow state, e.g. 'entry' or 'review.section1'")
    action: ActionContext
    rows: list[TaskFieldBehavior] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_row(self, field_name: str) -> TaskFieldBehavior | None:
        """Get the row for a field, if present."""
        for row in self.rows:
            if row.field_name == field_name:
                return row
        return None


# shape: matrix[field_name][state] = FieldCell
BehaviorMatrix = dict[str, dict[str, FieldCell]]
