"""
Build per-state form schemas for a formflow project.

Reads the schema and matrix named in formflow.toml and writes:
- <output>/bundles.json
- <output>/<name>.<state>.form.json for every state
"""

from __future__ import annotations

import logging
from pathlib import Path

from formflow.core.behaviors import bundles_from_matrix, states_from_matrix
from formflow.core.enrich import enrich_for_states
from formflow.core.errors import ErrorContext, LoadError, ManifestError
from formflow.core.loader import dump_bundles, load_matrix, load_schema, write_json
from formflow.core.manifest import MANIFEST_NAME, FormflowManifest

logger = logging.getLogger(__name__)

_SEPARATORS = ("/", "\\")


def is_safe_name_part(value: str) -> bool:
    """A file name component: non-empty, no separators, not '.' or '..'."""
    return bool(value) and value not in (".", "..") and not any(s in value for s in _SEPARATORS)


def form_filename(name: str, state: str) -> str:
    return f"{name}.{state}.form.json"


def build_project(manifest: FormflowManifest) -> list[Path]:
    """
    Run the matrix -> bundles -> enriched schema pipeline.

    Nothing is written if the project name or any state cannot be used
    inside a file name.

    Returns:
        Paths of every file written, bundles.json first
    """
    manifest_path = manifest.project_root / MANIFEST_NAME
    if not is_safe_name_part(manifest.name):
        raise ManifestError(
            f"Project name {manifest.name!r} cannot be used in a file name",
            ErrorContext(file=manifest_path, detail="[project]"),
        )

    schema = load_schema(manifest.paths.schema)
    matrix = load_matrix(manifest.paths.matrix)

    if manifest.workflow.states:
        states = manifest.workflow.states
        unsafe = [s for s in states if not is_safe_name_part(s)]
        if unsafe:
            raise ManifestError(
                f"States cannot be used in file names: {', '.join(map(repr, unsafe))}",
                ErrorContext(file=manifest_path, detail="[workflow]"),
            )
    else:
        states = states_from_matrix(matrix)
        unsafe = [s for s in states if not is_safe_name_part(s)]
        if unsafe:
            raise LoadError(
                f"States cannot be used in file names: {', '.join(map(repr, unsafe))}",
                ErrorContext(file=manifest.paths.matrix),
            )
    if not states:
        logger.warning("No workflow states configured or found in %s", manifest.paths.matrix)

    bundles = bundles_from_matrix(matrix, states)
    output = manifest.paths.output

    written = [write_json(output / "bundles.json", dump_bundles(bundles))]
    for state, enriched in enrich_for_states(schema, bundles).items():
        written.append(write_json(output / form_filename(manifest.name, state), enriched))

    logger.info("Built %d state forms for %s", len(states), manifest.name)
    return written
