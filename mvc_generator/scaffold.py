"""
Resource scaffold generator for an Express MVC project.
Creates `controllers/<name>Controller.js`, `routes/<name>Route.js` and `models/<name>Model.js`,
creates the shared entry file if needed and registers the new router in it. Intentionally conservative
and idempotent: existing files are never overwritten.

A file that cannot be written only fails its own step; the error is recorded on the report and the
remaining steps still run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field

from .config import CONFIG_FILENAME, GeneratorConfig, load_config
from .entry_file import RouteOutcome, register_route
from .exceptions import FileCreationError
from .file_generator import create_file
from .naming import ResourceName, normalize_name
from .templates import render_base_entry_file, render_controller, render_model, render_route

__all__ = ["GeneratedFile", "ScaffoldReport", "resource_file_paths", "generate_resource", ]

log = logging.getLogger(__name__)


class GeneratedFile(BaseModel):
    """A generated artifact, relative to the project root."""

    path: str
    content: str
    status: Literal["pending", "created", "exists", "failed"] = "pending"
    error: str | None = None


class ScaffoldReport(BaseModel):
    """Outcome of one :func:`generate_resource` run.

    ``route_outcome`` is ``None`` when the registration step itself failed;
    ``route_error`` then holds the reason.
    """

    resource: ResourceName
    files: list[GeneratedFile]
    entry_file: str
    entry_file_created: bool = False
    entry_file_error: str | None = None
    route_outcome: RouteOutcome | None = None
    route_error: str | None = None

    @computed_field
    @property
    def files_created(self) -> int:
        created = sum(1 for f in self.files if f.status == "created")
        return created + int(self.entry_file_created)

    @computed_field
    @property
    def files_skipped(self) -> int:
        return sum(1 for f in self.files if f.status == "exists")

    @computed_field
    @property
    def errors(self) -> list[str]:
        messages = [f"{f.path}: {f.error}" for f in self.files if f.status == "failed"]
        if self.entry_file_error:
            messages.append(f"{self.entry_file}: {self.entry_file_error}")
        if self.route_error:
            messages.append(f"route registration: {self.route_error}")
        return messages


def resource_file_paths(name: str) -> dict[str, str]:
    """Return the project-relative paths of the three files for *name*."""
    return {"controller": f"controllers/{name}Controller.js", "route": f"routes/{name}Route.js",
            "model": f"models/{name}Model.js", }


def _render_files(resource: ResourceName) -> list[GeneratedFile]:
    paths = resource_file_paths(resource.name)
    contents = {"controller": render_controller(resource.name, resource.capitalized, resource.pluralized),
                "route": render_route(resource.name, resource.capitalized),
                "model": render_model(resource.name, resource.capitalized), }
    return [GeneratedFile(path = paths[kind], content = contents[kind]) for kind in paths]


def _write_resource_file(root_path: Path, generated: GeneratedFile) -> None:
    try:
        created = create_file(root_path / generated.path, generated.content)
    except FileCreationError as exc:
        log.error("Failed to create %s: %s", generated.path, exc)
        generated.status = "failed"
        generated.error = str(exc)
        return
    generated.status = "created" if created else "exists"
    log.info("%s: %s", generated.status, generated.path)


def generate_resource(
        name: str | None, root: Path | str = ".", config: GeneratorConfig | None = None, ) -> ScaffoldReport:
    """
    Generate the controller, route and model files for *name* under *root*.

    The name is validated before anything touches the filesystem, so an
    :class:`~mvc_generator.exceptions.InvalidNameError` leaves *root* as it was.
    A missing anchor in the entry file is reported through ``route_outcome``,
    and a failed write through the report's ``errors``; neither stops the run.
    """
    resource = normalize_name(name)
    root_path = Path(root)
    if config is None:
        config = load_config(root_path / CONFIG_FILENAME)

    files = _render_files(resource)
    for generated in files:
        _write_resource_file(root_path, generated)

    report = ScaffoldReport(resource = resource, files = files, entry_file = config.entry_file)

    entry_path = root_path / config.entry_file
    try:
        report.entry_file_created = create_file(entry_path, render_base_entry_file())
    except FileCreationError as exc:
        log.error("Failed to create %s: %s", config.entry_file, exc)
        report.entry_file_error = str(exc)
    if report.entry_file_created:
        log.info("created: %s", config.entry_file)

    try:
        report.route_outcome = register_route(entry_path, resource.name, resource.pluralized)
    except FileCreationError as exc:
        log.error("Failed to register %s in %s: %s", resource.name, config.entry_file, exc)
        report.route_error = str(exc)

    return report
