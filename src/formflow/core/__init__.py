"""
formflow core: behavior matrix conversion and form schema enrichment.
"""

from formflow.core.behaviors import (
    bundles_from_matrix,
    get_cell,
    matrix_from_bundles,
    seed_matrix,
    states_from_matrix,
)
from formflow.core.enrich import enrich_for_states, enrich_form_schema_for_state
from formflow.core.schema import extract_field_keys, index_by_key

__all__ = [
    "bundles_from_matrix",
    "enrich_for_states",
    "enrich_form_schema_for_state",
    "extract_field_keys",
    "get_cell",
    "index_by_key",
    "matrix_from_bundles",
    "seed_matrix",
    "states_from_matrix",
]
