"""Shared utility functions for the estate_report package."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """Return True for the values treated as "no data": None and ``""``."""
    return value is None or value == ""


def _parse_env_line(raw_line: str) -> Optional[Tuple[str, str]]:
    line = raw_line.strip()
    if line.startswith("export "):
        line = line[len("export "):].lstrip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key, value


def load_env_file(path: Path) -> Dict[str, str]:
    """Seed ``ESTATE_*`` and ``LOG_LEVEL`` settings from a KEY=VALUE file.

    Variables already set in the environment win over the file. Returns the
    entries that were applied; a missing or unreadable file applies nothing.
    """

    applied: Dict[str, str] = {}
    if not path.is_file():
        return applied

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read env file %s: %s", path, exc)
        return applied

    for raw_line in lines:
        entry = _parse_env_line(raw_line)
        if entry is None or entry[0] in os.environ:
            continue
        os.environ[entry[0]] = entry[1]
        applied[entry[0]] = entry[1]

    logger.debug("Applied %d settings from %s", len(applied), path)
    return applied


def get_config_value(key: str, default: str = "") -> str:
    """Return a stripped environment value, falling back to ``default``."""
    return os.getenv(key, default).strip()


def split_list(raw: str) -> List[str]:
    """Split a comma-separated setting into its non-empty items."""
    return [item.strip() for item in raw.split(",") if item.strip()]
