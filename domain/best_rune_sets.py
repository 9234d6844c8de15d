from __future__ import annotations

from typing import Dict, List

from config.settings import BEST_RUNE_SET_STRATEGIES
from domain.rune_speed import best_set_speed


def compute_best_rune_sets(runes: List[dict]) -> Dict[str, int]:
    """Best rune SPD for each strategy (swift, swiftWill, violent, ...).

    A flat bonus is added only to positive raw results; -1 stays -1.
    """
    out: Dict[str, int] = {}
    for key, _label, main_set_id, offset_set_id, bonus in BEST_RUNE_SET_STRATEGIES:
        spd = best_set_speed(runes, main_set_id, offset_set_id)
        if spd > 0:
            spd += bonus
        out[key] = spd
    return out


def speed_value(value) -> int:
    """Positive speed or 0 (missing values and the -1 sentinel count as 0)."""
    try:
        v = int(value)
    except (TypeError, ValueError):
        return 0
    return v if v > 0 else 0


def format_speed(value) -> str:
    v = speed_value(value)
    return f"+{v} SPD" if v > 0 else "-"
