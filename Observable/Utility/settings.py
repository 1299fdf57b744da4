"""Runtime settings read from the environment"""
import os
from typing import Optional

LEGACY_REMOVAL_ENV = "OBSERVABLE_LEGACY_REMOVAL"
_TRUTHY = ("1", "true", "yes", "on")


def legacy_removal_enabled(override: Optional[bool] = None) -> bool:
    if override is not None:
        return override
    return os.environ.get(LEGACY_REMOVAL_ENV, "").strip().lower() in _TRUTHY
