"""Project-level configuration for the generator.

Settings are read from an optional ``mvcgen.json`` file at the project
root.  A missing file is not an error; the defaults describe the layout
the generator has always produced.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import GeneratorError

__all__ = ["CONFIG_FILENAME", "GeneratorConfig", "load_config", ]

log = logging.getLogger(__name__)

CONFIG_FILENAME = "mvcgen.json"


class GeneratorConfig(BaseModel):
    """Settings that locate the generated files."""

    entry_file: str = "app.js"

    model_config = ConfigDict(extra = "forbid", frozen = True)


def load_config(root: Path | str = ".") -> GeneratorConfig:
    """Load ``mvcgen.json`` from *root*, tolerant to a missing file.

    Parameters
    ----------
    root:
        Project root directory.  If it points to a file, that file is read
        directly.

    Returns
    -------
    GeneratorConfig
        Parsed configuration, or the defaults when no file exists.
    """
    cfg_file = Path(root)
    if cfg_file.is_dir():
        cfg_file = cfg_file / CONFIG_FILENAME

    if not cfg_file.exists():
        log.debug("No config file at %s, using defaults", cfg_file)
        return GeneratorConfig()

    try:
        with cfg_file.open("r", encoding = "utf-8") as f:
            data = json.load(f)
        return GeneratorConfig.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise GeneratorError(f"Invalid config file {cfg_file!s}: {exc}") from exc
