import json

import pandas as pd
import pytest

from allergen_scanner import __main__ as cli


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch, state):
    monkeypatch.setattr(cli, "get_scanner_state", lambda: state)
    return state


def test_no_arguments_prints_help(capsys):
    assert cli.main([]) == 2
    assert "usage" in capsys.readouterr().out


def test_scan_with_adhoc_allergens(capsys):
    assert cli.main(["--text", "Contains: DAIRY-FREE milk-chocolate", "--allergens", "milk,kiwi"]) == 0
    assert capsys.readouterr().out.strip() == "Allergens detected: milk"


def test_scan_json(capsys):
    assert cli.main(["--text", "almnd crumbs", "--allergens", "almond", "--json"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert body["matches"] == [{"allergenName": "almond", "matchType": "fuzzy"}]
    assert body["summary"]["status"] == "possible_allergens"


def test_registry_commands(capsys, isolated_state):
    assert cli.main(["--toggle", "peanuts", "--add", "Kiwi"]) == 0
    assert [a.name for a in isolated_state.registry] == ["peanuts", "Kiwi"]

    capsys.readouterr()
    assert cli.main(["--list", "--json"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert [r["name"] for r in records] == ["peanuts", "Kiwi"]

    kiwi_id = records[1]["id"]
    assert cli.main(["--remove", kiwi_id]) == 0
    assert [a.name for a in isolated_state.registry] == ["peanuts"]


def test_scan_uses_saved_selection(capsys, isolated_state):
    isolated_state.registry.toggle_builtin("peanuts")
    assert cli.main(["--text", "contains peanuts"]) == 0
    assert "peanuts" in capsys.readouterr().out


def test_revised_thresholds(capsys):
    assert cli.main(["--text", "shlfsh", "--allergens", "lupin,shellfish"]) == 0
    assert capsys.readouterr().out.strip() == "No allergens detected"
    assert cli.main(["--text", "shlfsh", "--allergens", "lupin,shellfish", "--revised"]) == 0
    assert "shellfish" in capsys.readouterr().out


def test_batch(tmp_path):
    source = tmp_path / "labels.csv"
    pd.DataFrame({"text": ["milk", "water"]}).to_csv(source, index=False)
    assert cli.main(["--batch", str(source), "--allergens", "milk"]) == 0
    assert pd.read_csv(tmp_path / "labels_scanned.csv")["status"].tolist() == [
        "allergens_detected", "safe"]


def test_batch_error_exits_one(tmp_path):
    source = tmp_path / "labels.csv"
    pd.DataFrame({"other": ["milk"]}).to_csv(source, index=False)
    assert cli.main(["--batch", str(source), "--allergens", "milk"]) == 1
