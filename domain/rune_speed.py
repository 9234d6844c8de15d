from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import Any, Dict, List, Optional, Tuple

from config.settings import MAIN_SET_PIECES, NO_RESULT, SLOTS, SPEED_EFF_TYPE

Rune = Dict[str, Any]
RuneGroups = Dict[int, Dict[int, List[Tuple[int, Rune]]]]


def _safe_int(x: Any, default: int = 0) -> int:
    try:
        return int(x)
    except (TypeError, ValueError):
        return default


def _eff_speed(eff) -> int:
    if isinstance(eff, (list, tuple)) and len(eff) >= 2:
        if _safe_int(eff[0]) == SPEED_EFF_TYPE:
            return _safe_int(eff[1])
    return 0


# ---------- Speed extraction ----------


def rune_speed(r: Rune) -> int:
    """Total SPD carried by one rune (main + prefix + subs incl. grind).

    The gem bonus (sec_eff[i][2]) is not counted.
    """
    spd = _eff_speed(r.get("pri_eff")) + _eff_speed(r.get("prefix_eff"))

    for row in r.get("sec_eff") or []:
        if not isinstance(row, (list, tuple)) or len(row) < 2:
            continue
        if _safe_int(row[0]) != SPEED_EFF_TYPE:
            continue
        grind = _safe_int(row[3]) if len(row) > 3 else 0
        spd += _safe_int(row[1]) + grind

    return spd


# ---------- Grouping ----------


def group_runes(runes: List[Rune]) -> RuneGroups:
    """slot -> set_id -> [(speed, rune), ...] sorted by speed desc (stable)."""
    groups: RuneGroups = {slot: defaultdict(list) for slot in SLOTS}

    for r in runes or []:
        slot = _safe_int(r.get("slot_no"))
        if slot not in groups:
            continue
        groups[slot][_safe_int(r.get("set_id"))].append((rune_speed(r), r))

    for by_set in groups.values():
        for cands in by_set.values():
            cands.sort(key=lambda c: c[0], reverse=True)

    return {slot: dict(by_set) for slot, by_set in groups.items()}


# ---------- Lookup ----------


def best_rune(groups: RuneGroups, slot: int, set_id: Optional[int] = None) -> Optional[Tuple[int, Rune]]:
    by_set = groups.get(slot, {})

    if set_id is not None:
        cands = by_set.get(set_id)
        return cands[0] if cands else None

    best = None
    for cands in by_set.values():
        if cands and (best is None or cands[0][0] > best[0]):
            best = cands[0]
    return best


def best_rune_speed(groups: RuneGroups, slot: int, set_id: Optional[int] = None) -> Optional[int]:
    picked = best_rune(groups, slot, set_id)
    return picked[0] if picked else None


# ---------- Search ----------


def _subset_speed(groups: RuneGroups, main_slots, main_set_id: int, offset_set_id: Optional[int]) -> Optional[int]:
    total = 0

    for slot in main_slots:
        spd = best_rune_speed(groups, slot, main_set_id)
        if spd is None:
            return None
        total += spd

    for slot in SLOTS:
        if slot in main_slots:
            continue
        spd = best_rune_speed(groups, slot, offset_set_id)
        if spd is None:
            # only a required offset set invalidates the layout
            if offset_set_id is not None:
                return None
            spd = 0
        total += spd

    return total


def best_set_speed_from_groups(groups: RuneGroups, main_set_id: int, offset_set_id: Optional[int] = None) -> int:
    best = NO_RESULT

    for main_slots in combinations(SLOTS, MAIN_SET_PIECES):
        total = _subset_speed(groups, main_slots, main_set_id, offset_set_id)
        if total is not None and total > best:
            best = total

    return best


def best_set_speed(runes: List[Rune], main_set_id: int, offset_set_id: Optional[int] = None) -> int:
    """Max rune SPD for a 4-piece main set (+ optional 2-piece offset set).

    Returns -1 when the combination cannot be completed with the given runes.
    """
    return best_set_speed_from_groups(group_runes(runes), main_set_id, offset_set_id)
