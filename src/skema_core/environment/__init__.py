"""Seeded cosmetic environment: generation and per-round locking."""

from skema_core.environment.config import (
    BACKGROUND_PATTERNS,
    EnvironmentalConfig,
    VisualOffset,
    background_css,
    generate_environmental_config,
)
from skema_core.environment.lock import EnvironmentLock

__all__ = [
    "BACKGROUND_PATTERNS",
    "EnvironmentLock",
    "EnvironmentalConfig",
    "VisualOffset",
    "background_css",
    "generate_environmental_config",
]
