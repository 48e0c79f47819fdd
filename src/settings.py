"""Static configuration for findinclude.

All user-editable settings (directive forms, search paths, build variables,
logging) live in a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

from core.config import LocatorConfig
from core.directives import RULE_NAMES

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# FINDINCLUDE_CONFIG may come from the environment or a local .env file.
load_dotenv()
CONFIG_PATH = os.getenv("FINDINCLUDE_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config(path: str) -> dict:
    """Load the config file; a missing file means built-in defaults."""

    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        try:
            loaded = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid config file {path}: {exc.msg}") from exc
    if not isinstance(loaded, dict):
        raise ValueError(f"Invalid config file {path}: root must be an object")
    return loaded


# A broken file falls back to defaults; the CLI reports CONFIG_ERROR and exits.
try:
    _CONFIG = _load_json_config(CONFIG_PATH)
    CONFIG_ERROR = None
except ValueError as exc:
    _CONFIG = {}
    CONFIG_ERROR = str(exc)

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Directive forms can be switched off individually; priority order is fixed.
_directives = _CONFIG.get("directives", {})
DIRECTIVE_FORMS = _directives.get("forms", [{"name": name, "enabled": True} for name in RULE_NAMES])

# Where matched names are looked up after variable expansion.
_locator = _CONFIG.get("locator", {})
SEARCH_PATHS = tuple(_locator.get("search_paths", ["/usr/local/include", "/usr/include"]))
SUFFIXES = tuple(_locator.get("suffixes", []))
VARIABLES = dict(_locator.get("variables", {}))
LOCATOR_CONFIG = LocatorConfig(search_paths=SEARCH_PATHS, suffixes=SUFFIXES, variables=VARIABLES)

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
