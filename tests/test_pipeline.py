import pandas as pd
import pytest

from allergen_scanner import AllergenRegistry, AllergenTerm, MatchResult, MatchType, ScanStatus, summarize
from allergen_scanner.core.exceptions import DataLoadingError
from allergen_scanner.pipeline.batch import batch_scan, scan_texts
from allergen_scanner.pipeline.session import ScanSession


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def selected():
    registry = AllergenRegistry()
    registry.toggle_builtin("milk")
    registry.toggle_builtin("tree nuts")
    return registry


class TestSummary:
    def test_exact_takes_precedence(self):
        matches = [MatchResult("milk", MatchType.FUZZY), MatchResult("soy", MatchType.EXACT)]
        summary = summarize("some text", matches)
        assert summary.status is ScanStatus.ALLERGENS_DETECTED
        assert summary.exact == ("soy",)
        assert summary.fuzzy == ("milk",)
        assert "soy" in summary.message

    def test_only_fuzzy(self):
        summary = summarize("almnd", [MatchResult("almond", MatchType.FUZZY)])
        assert summary.status is ScanStatus.POSSIBLE_ALLERGENS

    def test_safe_and_no_text(self):
        assert summarize("water, salt", []).status is ScanStatus.SAFE
        assert summarize("   ", []).status is ScanStatus.NO_TEXT

    def test_to_dict(self):
        payload = summarize("water", []).to_dict()
        assert payload == {"status": "safe", "exact": [], "fuzzy": [],
                           "message": "No allergens detected"}


class TestScanSession:
    def test_submit_and_latest(self, selected):
        session = ScanSession(selected, interval=1.0, clock=FakeClock())
        summary = session.submit("skimmed MILK powder, almonds")
        assert summary.status is ScanStatus.ALLERGENS_DETECTED
        assert summary.exact == ("milk", "tree nuts")
        assert session.latest == summary

    def test_blank_text_is_ignored(self, selected):
        session = ScanSession(selected, interval=1.0, clock=FakeClock())
        assert session.submit("") is None
        assert session.submit("  \n") is None
        assert session.latest is None

    def test_throttle(self, selected):
        clock = FakeClock()
        session = ScanSession(selected, interval=1.0, clock=clock)
        assert session.submit("water") is not None
        clock.now += 0.5
        assert session.submit("milk") is None
        assert session.latest.status is ScanStatus.SAFE
        clock.now += 0.5
        assert session.submit("milk").status is ScanStatus.ALLERGENS_DETECTED

    def test_superseded_scan_is_discarded(self, selected):
        session = ScanSession(selected, interval=0.0, clock=FakeClock())
        old = session.begin()
        new = session.begin()
        assert session.complete(old, "milk") is None
        assert session.latest is None
        assert session.complete(new, "water").status is ScanStatus.SAFE

    def test_registry_changes_apply_to_next_scan(self, selected):
        session = ScanSession(selected, interval=0.0, clock=FakeClock())
        assert session.submit("kiwi slices").status is ScanStatus.SAFE
        selected.add_custom("Kiwi")
        assert session.submit("kiwi slices").exact == ("Kiwi",)

    def test_stop_resets(self, selected):
        clock = FakeClock()
        session = ScanSession(selected, interval=10.0, clock=clock)
        ticket = session.begin()
        session.submit("milk")
        session.stop()
        assert session.latest is None
        assert session.complete(ticket, "milk") is None
        assert session.submit("milk") is not None


class TestBatch:
    def test_scan_texts(self):
        allergens = [AllergenTerm.create("milk", synonyms=["dairy"]),
                     AllergenTerm.create("almond")]
        df = scan_texts(["milk chocolate", "almnd", "water", ""], allergens)
        assert list(df.columns) == ["text", "exact", "fuzzy", "status"]
        assert df["status"].tolist() == ["allergens_detected", "possible_allergens", "safe", "no_text"]
        assert df.loc[0, "exact"] == "milk"
        assert df.loc[1, "fuzzy"] == "almond"

    def test_batch_scan_writes_csv(self, tmp_path, selected):
        source = tmp_path / "labels.csv"
        pd.DataFrame({
            "label_id": [1, 2, 3],
            "text": ["Whole milk", None, "Rice, water"],
        }).to_csv(source, index=False)

        out = batch_scan(source, selected.snapshot())

        assert out == tmp_path / "labels_scanned.csv"
        result = pd.read_csv(out)
        assert result["label_id"].tolist() == [1, 3]
        assert result["status"].tolist() == ["allergens_detected", "safe"]

    def test_custom_column_and_output(self, tmp_path, selected):
        source = tmp_path / "ocr.csv"
        pd.DataFrame({"ocr": ["cashew butter, cream"]}).to_csv(source, index=False)
        out = batch_scan(source, selected.snapshot(), tmp_path / "out.csv", column="ocr")
        assert pd.read_csv(out)["exact"].tolist() == ["milk, tree nuts"]

    def test_missing_column(self, tmp_path, selected):
        source = tmp_path / "bad.csv"
        pd.DataFrame({"other": ["milk"]}).to_csv(source, index=False)
        with pytest.raises(DataLoadingError):
            batch_scan(source, selected.snapshot())

    def test_missing_file(self, tmp_path, selected):
        with pytest.raises(DataLoadingError):
            batch_scan(tmp_path / "absent.csv", selected.snapshot())
