import json

import pytest

from domain.rune_repo import collect_runes, parse_export, rune_set_counts, wizard_profile


def _rune(rune_id, slot):
    return {"rune_id": rune_id, "slot_no": slot, "set_id": 3, "pri_eff": [8, 10], "prefix_eff": [0, 0], "sec_eff": []}


def _export():
    return {
        "wizard_info": {"wizard_id": 1124059, "wizard_name": " Cheese ", "wizard_level": 50},
        "unit_list": [
            {"unit_id": 1, "runes": [_rune(1, 1), _rune(2, 2)]},
            {"unit_id": 2, "runes": None},
        ],
        "runes": [
            _rune(2, 2),
            _rune(3, 3),
            _rune(100, None),
            _rune(101, "invalid"),
            _rune(102, 7),
            _rune(103, 0),
        ],
    }


def test_collect_runes_merges_equipped_and_storage_without_duplicates():
    runes = collect_runes(_export())
    assert [r["rune_id"] for r in runes] == [1, 2, 3]


def test_wizard_profile():
    profile = wizard_profile(_export())
    assert profile == {
        "wizard_id": 1124059,
        "wizard_name": "Cheese",
        "wizard_level": 50,
        "unit_count": 2,
        "rune_count": 3,
    }


def test_parse_export_accepts_valid_json():
    data = parse_export(json.dumps(_export()).encode("utf-8"))
    assert data["wizard_info"]["wizard_id"] == 1124059


def test_parse_export_rejects_bad_input():
    with pytest.raises(ValueError):
        parse_export(b"{not json")
    with pytest.raises(ValueError):
        parse_export(b"[]")
    with pytest.raises(ValueError):
        parse_export(json.dumps({"runes": []}).encode("utf-8"))


def test_rune_set_counts_uses_set_names():
    runes = [
        {"slot_no": 1, "set_id": 15},
        {"slot_no": 2, "set_id": 3},
        {"slot_no": 3, "set_id": 3},
        {"slot_no": 4, "set_id": 99},
    ]
    assert rune_set_counts(runes) == {"Swift": 2, "Set 99": 1, "Will": 1}
    assert list(rune_set_counts(runes)) == ["Swift", "Set 99", "Will"]
