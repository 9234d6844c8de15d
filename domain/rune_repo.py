from __future__ import annotations

import json
from typing import Any, Dict, List

from config.settings import SET_NAME, SLOTS


def _slot_no(r) -> int | None:
    try:
        slot = int(r.get("slot_no"))
    except (TypeError, ValueError):
        return None
    return slot if slot in SLOTS else None


def _dedupe_runes_by_id(runes):
    """Keep first occurrence of each rune_id (safety for mixed sources)."""
    seen = set()
    out = []
    for r in runes or []:
        rid = r.get("rune_id")
        if rid is None:
            out.append(r)
            continue
        if rid in seen:
            continue
        seen.add(rid)
        out.append(r)
    return out


def collect_runes(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Equipped runes of every unit plus storage runes, valid slots only."""
    pool = []
    for u in data.get("unit_list", []) or []:
        if isinstance(u, dict):
            pool.extend(r for r in (u.get("runes", []) or []) if isinstance(r, dict))
    pool.extend(r for r in (data.get("runes", []) or []) if isinstance(r, dict))

    return [r for r in _dedupe_runes_by_id(pool) if _slot_no(r) is not None]


def wizard_profile(data: Dict[str, Any]) -> Dict[str, Any]:
    info = data.get("wizard_info", {}) or {}
    return {
        "wizard_id": info.get("wizard_id"),
        "wizard_name": (info.get("wizard_name") or "").strip(),
        "wizard_level": info.get("wizard_level"),
        "unit_count": len(data.get("unit_list", []) or []),
        "rune_count": len(collect_runes(data)),
    }


def parse_export(raw: bytes) -> Dict[str, Any]:
    """Decode an SW export (JSON bytes) and check the parts we rely on."""
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"Invalid JSON file: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("Invalid export: top-level JSON must be an object.")
    if "wizard_info" not in data or "unit_list" not in data:
        raise ValueError("Invalid export: 'wizard_info' or 'unit_list' is missing.")

    return data


def rune_set_counts(runes: List[Dict[str, Any]]) -> Dict[str, int]:
    """Set name -> number of runes, most common first."""
    cnt: Dict[str, int] = {}
    for r in runes:
        try:
            sid = int(r.get("set_id"))
        except (TypeError, ValueError):
            sid = 0
        name = SET_NAME.get(sid, f"Set {sid}")
        cnt[name] = cnt.get(name, 0) + 1
    return dict(sorted(cnt.items(), key=lambda kv: (-kv[1], kv[0])))
