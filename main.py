# main.py
import sys
import os

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from data.io import load_latest_export_bytes
from domain.best_rune_sets import compute_best_rune_sets
from domain.rune_repo import collect_runes, parse_export, rune_set_counts, wizard_profile
from visualize import print_best_rune_sets

# ============================
# Export file keyword (overridable by argv[1])
# ============================
KEYWORD = "swarfarm"
# ============================


def main():
    keyword = sys.argv[1] if len(sys.argv) > 1 else KEYWORD
    data = parse_export(load_latest_export_bytes(keyword))

    runes = collect_runes(data)
    print_best_rune_sets(wizard_profile(data), compute_best_rune_sets(runes), rune_set_counts(runes))


if __name__ == "__main__":
    main()
