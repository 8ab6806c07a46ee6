from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Guard settings loaded from environment in a type-safe, framework-free way.

    Thresholds, patterns and excluded directories are fixed constants of each
    guard and are intentionally not configurable here.
    """

    root: str
    log_level: str

    @staticmethod
    def from_env() -> Settings:
        prefix = "HYGIENE_"
        root = os.getenv(f"{prefix}ROOT", ".").strip() or "."
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "WARNING").strip() or "WARNING"
        return Settings(root=root, log_level=log_level.upper())

    def roots(self, argv: list[str]) -> list[str]:
        """Explicit roots from the command line win over the configured root."""
        return list(argv) if argv else [self.root]
