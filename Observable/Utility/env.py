"""Environment helpers (.env loading)"""
import os
import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export "):]
    if "=" not in line:
        return None
    key, val = (part.strip() for part in line.split("=", 1))
    if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
        val = val[1:-1]
    if not key:
        return None
    return key, val


def load_env_file(filepath: str = ".env", override: bool = False) -> Dict[str, str]:
    """Load KEY=VALUE pairs from `filepath` into os.environ.

    Existing variables win unless `override` is set. Returns the pairs that were applied.
    """
    applied: Dict[str, str] = {}
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return applied
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                pair = _parse_line(line)
                if pair is None:
                    continue
                key, val = pair
                if override or key not in os.environ:
                    os.environ[key] = val
                    applied[key] = val
    except OSError as e:
        logger.debug("Ignoring .env load error: %s", e)
    return applied
