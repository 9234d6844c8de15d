"""Game constants for rune speed statistics."""

# Attribute code of "SPD" in the exported rune effects
SPEED_EFF_TYPE = 8

SLOTS = (1, 2, 3, 4, 5, 6)
MAIN_SET_PIECES = 4

NO_RESULT = -1

# ----------------------------
# Rune sets
# ----------------------------
SET_NAME = {
    1: "Energy",
    2: "Guard",
    3: "Swift",
    4: "Blade",
    5: "Rage",
    6: "Focus",
    7: "Endure",
    8: "Fatal",
    10: "Despair",
    11: "Vampire",
    13: "Violent",
    14: "Nemesis",
    15: "Will",
    16: "Shield",
    17: "Revenge",
    18: "Destroy",
    19: "Fight",
    20: "Determination",
    21: "Enhance",
    22: "Accuracy",
    23: "Tolerance",
}

SWIFT_SET_ID = 3
DESPAIR_SET_ID = 10
VIOLENT_SET_ID = 13
WILL_SET_ID = 15

# Swift 4-set (+25% SPD) expressed on a 100 base speed
SWIFT_FLAT_BONUS = 25

# (key, label, main set, offset set, flat bonus when the raw result is positive)
BEST_RUNE_SET_STRATEGIES = (
    ("swift", "Swift", SWIFT_SET_ID, None, SWIFT_FLAT_BONUS),
    ("swiftWill", "Swift + Will", SWIFT_SET_ID, WILL_SET_ID, SWIFT_FLAT_BONUS),
    ("violent", "Violent", VIOLENT_SET_ID, None, 0),
    ("violentWill", "Violent + Will", VIOLENT_SET_ID, WILL_SET_ID, 0),
    ("despair", "Despair", DESPAIR_SET_ID, None, 0),
    ("despairWill", "Despair + Will", DESPAIR_SET_ID, WILL_SET_ID, 0),
)

STRATEGY_KEYS = [s[0] for s in BEST_RUNE_SET_STRATEGIES]
STRATEGY_LABEL = {s[0]: s[1] for s in BEST_RUNE_SET_STRATEGIES}

STRATEGY_COLOR = {
    "swift": "#3b82f6",
    "swiftWill": "#8b5cf6",
    "violent": "#ef4444",
    "violentWill": "#f97316",
    "despair": "#22c55e",
    "despairWill": "#14b8a6",
}

# Supabase table holding one summary row per wizard
RUNE_STATS_TABLE = "rune_stats"
