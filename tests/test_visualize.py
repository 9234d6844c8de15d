from visualize import render_best_rune_sets


def test_render_best_rune_sets_shows_dash_for_sentinel():
    text = render_best_rune_sets(
        {"wizard_name": "Cheese", "unit_count": 3, "rune_count": 12},
        {"swift": 75, "swiftWill": -1, "violent": 50, "violentWill": -1, "despair": -1, "despairWill": -1},
    )
    lines = text.splitlines()
    assert "=== Best Rune Sets: Cheese ===" in lines
    assert any(line.startswith("Swift ") and line.endswith("+75 SPD") for line in lines)
    assert any(line.startswith("Swift + Will") and line.endswith(": -") for line in lines)


def test_render_best_rune_sets_lists_set_counts():
    text = render_best_rune_sets(
        {"wizard_name": "Cheese"},
        {},
        {"Swift": 4, "Will": 2},
    )
    assert "=== Runes per Set ===" in text
    assert "Will           : 2" in text.splitlines()
