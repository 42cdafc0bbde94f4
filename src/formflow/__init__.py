"""
formflow - workflow-state behavior for form-js schemas.

Turns a field x state Behavior Matrix into per-state Behavior Bundles and
projects a bundle onto a form schema as conditional.hide / validate.required.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    bundles_from_matrix,
    enrich_for_states,
    enrich_form_schema_for_state,
    extract_field_keys,
    index_by_key,
    matrix_from_bundles,
)
from .core import ir
from .core.errors import FormflowError, LoadError, ManifestError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "FormflowError",
    "LoadError",
    "ManifestError",
    "bundles_from_matrix",
    "enrich_for_states",
    "enrich_form_schema_for_state",
    "extract_field_keys",
    "index_by_key",
    "matrix_from_bundles",
]
