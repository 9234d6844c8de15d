# visualize.py
from config import STRATEGY_KEYS, STRATEGY_LABEL
from domain.best_rune_sets import format_speed

# ============================================================
# Internal builders (string only, no printing)
# ============================================================


def _build_best_rune_sets_lines(profile, best_rune_sets, set_counts=None):
    lines = []

    lines.append("")
    lines.append(f"=== Best Rune Sets: {profile.get('wizard_name') or '-'} ===")
    lines.append(f"Units: {profile.get('unit_count', 0)}  Runes: {profile.get('rune_count', 0)}")
    lines.append("")

    for key in STRATEGY_KEYS:
        lines.append(f"{STRATEGY_LABEL[key]:15}: {format_speed(best_rune_sets.get(key))}")

    if set_counts:
        lines.append("")
        lines.append("=== Runes per Set ===")
        for name, n in set_counts.items():
            lines.append(f"{name:15}: {n}")

    return lines


# ============================================================
# Public APIs
# ============================================================


def print_best_rune_sets(profile, best_rune_sets, set_counts=None):
    print(render_best_rune_sets(profile, best_rune_sets, set_counts))


def render_best_rune_sets(profile, best_rune_sets, set_counts=None):
    return "\n".join(_build_best_rune_sets_lines(profile, best_rune_sets, set_counts))
