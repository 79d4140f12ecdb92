"""Top‑level package for *mvc_generator*."""

from __future__ import annotations

__version__ = "1.0.0"

# First import non-dependent modules
from .exceptions import FileCreationError, GeneratorError, InvalidNameError
from .file_generator import create_file, write_file
from .naming import ResourceName, capitalize, normalize_name, pluralize, validate_name
from .templates import render_base_entry_file, render_controller, render_model, render_route
from .entry_file import RouteOutcome, register_route
from .config import GeneratorConfig, load_config
from .scaffold import GeneratedFile, ScaffoldReport, generate_resource, resource_file_paths

# Explicitly expose the public API members
__all__ = ["__version__", "capitalize", "pluralize", "validate_name", "normalize_name", "ResourceName",
        "render_controller", "render_route", "render_model", "render_base_entry_file", "create_file", "write_file",
        "register_route", "RouteOutcome", "GeneratorConfig", "load_config", "generate_resource",
        "resource_file_paths", "GeneratedFile", "ScaffoldReport", "GeneratorError", "InvalidNameError",
        "FileCreationError", ]
