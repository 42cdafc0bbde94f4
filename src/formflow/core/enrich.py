"""
Enrich a form-js schema with per-state visibility and required validation.

Re-run on every workflow state change: the authoring schema is never
mutated, each call works on its own deep copy.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from typing import Any

from formflow.core.expressions import hidden_in, to_expression, visible_only_in
from formflow.core.ir import BehaviorBundle
from formflow.core.schema import index_by_key

logger = logging.getLogger(__name__)


def enrich_form_schema_for_state(schema: dict[str, Any], bundle: BehaviorBundle) -> dict[str, Any]:
    """
    Enrich a base form-js schema for the bundle's state only.

    - Every keyed component is reset to "visible only in this state" and
      any existing ``validate.required`` is cleared.
    - Rows with ``visible=False`` hide their component in this state.
    - Rows with ``required=True`` set ``validate.required``.

    Rows naming a key the schema does not have are ignored.

    Args:
        schema: Authoring schema with top-level ``components``
        bundle: Behavior bundle for the state being rendered

    Returns:
        A new schema; ``schema`` is left untouched
    """
    cloned = copy.deepcopy(schema)
    by_key = index_by_key(cloned.get("components") or [])
    visible_here = to_expression(visible_only_in(bundle.state))

    # reset to "hide unless this state" for all known fields
    for component in by_key.values():
        conditional = component.get("conditional")
        if not isinstance(conditional, dict):
            conditional = {}
        conditional["hide"] = visible_here
        component["conditional"] = conditional
        validate = component.get("validate")
        if isinstance(validate, dict) and "required" in validate:
            validate["required"] = False

    for row in bundle.rows:
        component = by_key.get(row.field_name)
        if component is None:
            logger.debug("No component with key %r for state %s", row.field_name, bundle.state)
            continue

        if row.visible is False:
            previous = component["conditional"].get("hide")
            component["conditional"]["hide"] = to_expression(hidden_in(bundle.state, previous))
        else:
            component["conditional"]["hide"] = visible_here

        if row.required:
            validate = component.get("validate")
            if not isinstance(validate, dict):
                validate = {}
            validate["required"] = True
            component["validate"] = validate

    logger.debug(
        "Enriched %d components for state %s from %d rows",
        len(by_key),
        bundle.state,
        len(bundle.rows),
    )
    return cloned


def enrich_for_states(
    schema: dict[str, Any], bundles: Iterable[BehaviorBundle]
) -> dict[str, dict[str, Any]]:
    """Enrich the authoring schema once per bundle, keyed by state."""
    return {bundle.state: enrich_form_schema_for_state(schema, bundle) for bundle in bundles}
