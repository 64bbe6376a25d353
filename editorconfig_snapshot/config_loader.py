from __future__ import annotations

import logging
from pathlib import Path

from .config_model import EMPTY, EditorConfigFile
from .config_parser import parse_text

logger = logging.getLogger(__name__)


class ConfigLoader:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> EditorConfigFile:
        """Parse the file at ``path``, or return ``EMPTY`` when it cannot be read."""
        try:
            if not self.path.is_file():
                logger.debug("No EditorConfig file at %s", self.path)
                return EMPTY
            text = self.path.read_text(encoding="utf-8-sig", errors="replace")
        except OSError as exc:
            logger.warning("Unable to read %s: %s", self.path, exc)
            return EMPTY
        return parse_text(text)


def load_config(path: str | Path) -> EditorConfigFile:
    return ConfigLoader(path).load()


__all__ = ["ConfigLoader", "load_config"]
