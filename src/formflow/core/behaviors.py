"""
Behavior Matrix <-> Behavior Bundle conversion.

The matrix is what an author edits (field x state grid); bundles are what
a workflow runtime consumes (one per state, no knowledge of the matrix).

- visible: mode != hidden
- required: the cell's checkbox
- action per state:
  - "entry" => create
  - else => update if any cell is editable, otherwise view
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from formflow.core.ir import (
    ActionContext,
    BehaviorBundle,
    BehaviorMatrix,
    CellMode,
    FieldCell,
    TaskFieldBehavior,
)

logger = logging.getLogger(__name__)

ENTRY_STATE = "entry"

_MISSING_CELL = FieldCell()


def get_cell(
    matrix: Mapping[str, Mapping[str, FieldCell]], field_name: str, state: str
) -> FieldCell:
    """Read a cell, defaulting to hidden/not required when absent."""
    return matrix.get(field_name, {}).get(state) or _MISSING_CELL


def _action_for_state(matrix: Mapping[str, Mapping[str, FieldCell]], state: str) -> ActionContext:
    if state == ENTRY_STATE:
        return ActionContext.CREATE
    any_editable = any(
        get_cell(matrix, field_name, state).mode == CellMode.EDITABLE for field_name in matrix
    )
    return ActionContext.UPDATE if any_editable else ActionContext.VIEW


def bundles_from_matrix(
    matrix: Mapping[str, Mapping[str, FieldCell]], states: Iterable[str]
) -> list[BehaviorBundle]:
    """
    Derive one bundle per state from a behavior matrix.

    Every bundle carries one row per field in the matrix, whether or not the
    field has a cell for that state.

    Args:
        matrix: matrix[field_name][state] = FieldCell
        states: Workflow states to derive bundles for, in output order

    Returns:
        List of bundles, one per input state
    """
    bundles: list[BehaviorBundle] = []

    for state in states:
        action = _action_for_state(matrix, state)

        rows = []
        for field_name in matrix:
            cell = get_cell(matrix, field_name, state)
            rows.append(
                TaskFieldBehavior(
                    field_name=field_name,
                    action_context=action,
                    visible=cell.mode != CellMode.HIDDEN,
                    required=cell.required,
                )
            )

        logger.debug("State %s: action=%s, %d rows", state, action.value, len(rows))
        bundles.append(BehaviorBundle(state=state, action=action, rows=rows))

    return bundles


def matrix_from_bundles(bundles: Iterable[BehaviorBundle]) -> BehaviorMatrix:
    """
    Rebuild a behavior matrix from bundles.

    Mode comes only from (visible, action): a readonly cell under an update
    or create action comes back as editable.
    """
    matrix: BehaviorMatrix = {}
    for bundle in bundles:
        for row in bundle.rows:
            if row.visible is False:
                mode = CellMode.HIDDEN
            elif bundle.action == ActionContext.VIEW:
                mode = CellMode.READONLY
            else:
                mode = CellMode.EDITABLE
            matrix.setdefault(row.field_name, {})[bundle.state] = FieldCell(
                mode=mode, required=row.required
            )
    return matrix


def states_from_matrix(matrix: Mapping[str, Mapping[str, FieldCell]]) -> list[str]:
    """Get every state that appears in the matrix, in first-seen order."""
    states: dict[str, None] = {}
    for cells in matrix.values():
        for state in cells:
            states.setdefault(state, None)
    return list(states)


def seed_matrix(
    field_keys: Iterable[str],
    states: Iterable[str],
    mode: CellMode = CellMode.HIDDEN,
) -> BehaviorMatrix:
    """
    Build a matrix with an explicit cell for every (field, state) pair.

    Used to start authoring from a form schema's field keys
    (see ``formflow.core.schema.extract_field_keys``).
    """
    state_list = list(states)
    cell = FieldCell(mode=mode)
    return {field_name: {state: cell for state in state_list} for field_name in field_keys}
