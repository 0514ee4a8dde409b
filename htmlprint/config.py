"""Load print options from YAML files and the environment.

Precedence, lowest first: model defaults, the YAML file, ``HTMLPRINT_*``
environment variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .models import PrintOptions

logger = logging.getLogger(__name__)

ENV_OVERRIDES: Dict[str, str] = {
    "HTMLPRINT_PRINT_WIDTH": "print_width",
    "HTMLPRINT_TAB_WIDTH": "tab_width",
    "HTMLPRINT_USE_TABS": "use_tabs",
}


def _env_values(environ: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for env_key, option in ENV_OVERRIDES.items():
        raw = environ.get(env_key)
        if raw is None:
            continue
        if option == "use_tabs":
            values[option] = raw.strip().lower() in ("1", "true", "yes")
        else:
            values[option] = raw.strip()
    return values


def options_from_mapping(
    data: Mapping[str, Any] | None, environ: Mapping[str, str] | None = None
) -> PrintOptions:
    """Validate a mapping of options, applying environment overrides on top."""
    merged: Dict[str, Any] = dict(data or {})
    merged.update(_env_values(os.environ if environ is None else environ))
    try:
        return PrintOptions.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid print options: {exc}") from exc


def load_options(path: Path, environ: Mapping[str, str] | None = None) -> PrintOptions:
    """Read options from a YAML file; a missing file means defaults."""
    data: Any = {}
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping of options.")
        logger.debug("loaded print options from %s", path)
    else:
        logger.debug("no options file at %s, using defaults", path)
    return options_from_mapping(data, environ)
