from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GameConfig:
    # Defaults keep the permissive overwrite behaviour callers rely on.
    replace_locations: bool = True
    reassign_centers: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "GameConfig":
        return cls(
            replace_locations=not _env_flag("DIPLOJUGE_STRICT_LOCATIONS"),
            reassign_centers=not _env_flag("DIPLOJUGE_STRICT_CENTERS"),
            log_level=os.environ.get("DIPLOJUGE_LOG_LEVEL", "WARNING").upper(),
        )
