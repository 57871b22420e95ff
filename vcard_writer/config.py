from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    default_version: str = "4.0"
    # longest physical line before folding (3.0 and later)
    fold_width: int = 75


DEFAULT_CONF = """# vcard-writer configuration (TOML)
default_version = "4.0"
fold_width = 75
"""


def load_settings(path: Path | None = None) -> Settings:
    """Read settings from a TOML file.

    A missing file gives the defaults. A malformed file is logged and also
    gives the defaults.
    """
    settings = Settings()
    if path is None or not Path(path).is_file():
        return settings
    try:
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        logger.warning("Ignoring malformed config %s: %s", path, exc)
        return settings

    settings.default_version = str(data.get("default_version", settings.default_version))
    try:
        width = int(data.get("fold_width", settings.fold_width))
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid fold_width %r in %s", data.get("fold_width"), path)
    else:
        if width > 1:
            settings.fold_width = width
        else:
            logger.warning("Ignoring fold_width %d in %s, must be greater than 1", width, path)
    return settings


def write_default_config(path: Path) -> Path:
    """Create a config file with the defaults unless one exists already."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(DEFAULT_CONF, encoding="utf-8")
    return path
