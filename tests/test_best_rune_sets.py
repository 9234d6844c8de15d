from domain.best_rune_sets import compute_best_rune_sets, format_speed, speed_value


def _rune(slot, set_id, spd):
    return {"slot_no": slot, "set_id": set_id, "pri_eff": [8, spd], "prefix_eff": [0, 0], "sec_eff": []}


def test_six_strategies_are_always_reported():
    out = compute_best_rune_sets([])
    assert list(out) == ["swift", "swiftWill", "violent", "violentWill", "despair", "despairWill"]
    assert set(out.values()) == {-1}


def test_swift_bonus_only_on_swift_results():
    runes = [_rune(1, 3, 20), _rune(2, 3, 15), _rune(3, 3, 10), _rune(4, 3, 5)]
    runes += [_rune(1, 13, 20), _rune(2, 13, 15), _rune(3, 13, 10), _rune(4, 13, 5)]
    out = compute_best_rune_sets(runes)
    assert out["swift"] == 50 + 25
    assert out["violent"] == 50
    assert out["swiftWill"] == -1
    assert out["violentWill"] == -1
    assert out["despair"] == -1


def test_will_offset_results():
    runes = [_rune(1, 3, 20), _rune(2, 3, 15), _rune(3, 3, 10), _rune(4, 3, 5), _rune(5, 15, 4), _rune(6, 15, 6)]
    out = compute_best_rune_sets(runes)
    assert out["swiftWill"] == 60 + 25
    assert out["swift"] == 60 + 25


def test_zero_speed_result_gets_no_bonus():
    runes = [{"slot_no": s, "set_id": 3, "pri_eff": [4, 63], "sec_eff": []} for s in (1, 2, 3, 4)]
    assert compute_best_rune_sets(runes)["swift"] == 0


def test_format_speed_and_speed_value():
    assert format_speed(75) == "+75 SPD"
    assert format_speed(-1) == "-"
    assert format_speed(0) == "-"
    assert format_speed(None) == "-"
    assert speed_value(-1) == 0
    assert speed_value(float("nan")) == 0
    assert speed_value("42") == 42
