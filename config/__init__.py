"""Configuration exports for backwards-compatible imports."""

from .settings import (
    BEST_RUNE_SET_STRATEGIES,
    NO_RESULT,
    SET_NAME,
    SPEED_EFF_TYPE,
    STRATEGY_KEYS,
    STRATEGY_LABEL,
)

__all__ = [
    "BEST_RUNE_SET_STRATEGIES",
    "NO_RESULT",
    "SET_NAME",
    "SPEED_EFF_TYPE",
    "STRATEGY_KEYS",
    "STRATEGY_LABEL",
]
