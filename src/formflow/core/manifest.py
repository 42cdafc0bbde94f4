import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from formflow.core.errors import ErrorContext, ManifestError

MANIFEST_NAME = "formflow.toml"


@dataclass
class PathsConfig:
    """Project file locations, resolved against the manifest directory."""

    schema: Path
    matrix: Path
    output: Path


@dataclass
class WorkflowConfig:
    """Workflow states to build forms for."""

    # Empty means "every state that appears in the matrix"
    states: list[str] = field(default_factory=list)


@dataclass
class FormflowManifest:
    name: str
    project_root: Path
    paths: PathsConfig
    workflow: WorkflowConfig = field(default_factory=WorkflowConfig)


def _require_path(table: dict, key: str, manifest_path: Path) -> str:
    value = table.get(key)
    if not isinstance(value, str) or not value:
        raise ManifestError(
            f"Missing '{key}' path",
            ErrorContext(file=manifest_path, detail="[paths]"),
        )
    return value


def _table(data: dict, name: str, manifest_path: Path) -> dict:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ManifestError(
            f"'{name}' must be a table",
            ErrorContext(file=manifest_path, detail=f"[{name}]"),
        )
    return value


def load_manifest(path: Path) -> FormflowManifest:
    if not path.exists():
        raise ManifestError(f"No {MANIFEST_NAME} found", ErrorContext(file=path))

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML: {e}", ErrorContext(file=path)) from e

    project = _table(data, "project", path)
    paths_data = _table(data, "paths", path)
    workflow_data = _table(data, "workflow", path)

    root = path.parent.resolve()

    name = project.get("name", root.name)
    if not isinstance(name, str) or not name:
        raise ManifestError(
            "name must be a non-empty string",
            ErrorContext(file=path, detail="[project]"),
        )

    states = workflow_data.get("states", [])
    if not isinstance(states, list) or not all(isinstance(s, str) for s in states):
        raise ManifestError(
            "states must be a list of strings",
            ErrorContext(file=path, detail="[workflow]"),
        )

    output = paths_data.get("output", "build")
    if not isinstance(output, str) or not output:
        raise ManifestError(
            "'output' must be a non-empty string",
            ErrorContext(file=path, detail="[paths]"),
        )

    paths = PathsConfig(
        schema=root / _require_path(paths_data, "schema", path),
        matrix=root / _require_path(paths_data, "matrix", path),
        output=root / output,
    )

    return FormflowManifest(
        name=name,
        project_root=root,
        paths=paths,
        workflow=WorkflowConfig(states=list(states)),
    )
