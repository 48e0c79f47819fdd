"""Filesystem locator adapter.

Turns a matched include name into a path on disk using the including file's
directory and the configured search paths.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from core.config import LocatorConfig
from core.ports import VariableExpanderPort

LOGGER = logging.getLogger(__name__)


class FileLocator:
    """Resolve include names the way a find-file-at-point host would."""

    def __init__(self, config: LocatorConfig, expander: Optional[VariableExpanderPort] = None) -> None:
        self._config = config
        self._expander = expander

    def candidates(self, name: str, including_file: Optional[str] = None) -> List[str]:
        """Return every path worth trying for ``name``, in lookup order."""

        if self._expander is not None:
            name = self._expander.expand(name)
        name = os.path.expanduser(name)

        if os.path.isabs(name):
            bases = [""]
        else:
            if including_file:
                bases = [os.path.dirname(os.path.abspath(including_file))]
            else:
                bases = [os.getcwd()]
            bases.extend(os.path.expanduser(path) for path in self._config.search_paths)

        names = [name]
        # Suffixes only apply to names written without an extension.
        if not os.path.splitext(name)[1]:
            names.extend(f"{name}{suffix}" for suffix in self._config.suffixes)

        paths: List[str] = []
        for base in bases:
            for candidate in names:
                path = os.path.normpath(os.path.join(base, candidate))
                if path not in paths:
                    paths.append(path)
        return paths

    def locate(self, name: str, including_file: Optional[str] = None) -> Optional[str]:
        """Return the first existing file for ``name``, or None."""

        for path in self.candidates(name, including_file):
            if os.path.isfile(path):
                LOGGER.debug("Located %s at %s", name, path)
                return path
        LOGGER.info("No file found for %s", name)
        return None
