import json
import uuid

import pytest

from allergen_scanner import AllergenRegistry, AllergenTerm
from allergen_scanner.core.exceptions import PersistenceError
from allergen_scanner.data.storage import decode_allergens, encode_allergens


@pytest.fixture
def allergens():
    return [
        AllergenTerm.create("milk", synonyms=["dairy", "whey"]),
        AllergenTerm.create("Kiwi", is_custom=True),
    ]


class TestCodec:
    def test_round_trip(self, allergens):
        assert decode_allergens(encode_allergens(allergens)) == allergens

    def test_persisted_shape(self, allergens):
        records = json.loads(encode_allergens(allergens))
        assert records[0] == {
            "id": str(allergens[0].id),
            "name": "milk",
            "isCustom": False,
            "synonyms": ["dairy", "whey"],
        }
        assert records[1]["isCustom"] is True

    def test_missing_synonyms_decode_as_empty(self):
        record = {"id": str(uuid.uuid4()), "name": "Kiwi", "isCustom": True}
        (allergen,) = decode_allergens(json.dumps([record]))
        assert allergen.synonyms == frozenset()

    @pytest.mark.parametrize("payload", [
        "not json",
        '{"name": "milk"}',
        '[{"name": "milk"}]',
        '[{"id": "nope", "name": "milk"}]',
        '[{"id": "%s", "name": "  "}]' % uuid.uuid4(),
        '[{"id": "%s", "name": "milk", "synonyms": "dairy"}]' % uuid.uuid4(),
        '[{"id": "%s", "name": "milk", "isCustom": "false"}]' % uuid.uuid4(),
        '[42]',
    ])
    def test_malformed(self, payload):
        with pytest.raises(PersistenceError):
            decode_allergens(payload)


class TestStore:
    def test_missing_file_loads_empty(self, store):
        assert store.load() == []

    def test_corrupt_file_loads_empty(self, store):
        store.path.write_text("{broken", encoding="utf-8")
        assert store.load() == []

    def test_save_then_load(self, store, allergens):
        store.save(allergens)
        assert store.load() == allergens
        assert not list(store.path.parent.glob("*.tmp"))

    def test_save_failure_raises(self, tmp_path, allergens):
        from allergen_scanner import AllergenStore
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = AllergenStore(blocker / "selected.json")
        with pytest.raises(PersistenceError):
            store.save(allergens)

    def test_attach_saves_on_every_change(self, store):
        registry = AllergenRegistry()
        detach = store.attach(registry)

        registry.toggle_builtin("milk")
        kiwi = registry.add_custom("Kiwi")
        assert [a.name for a in store.load()] == ["milk", "Kiwi"]

        registry.remove(kiwi.id)
        assert [a.name for a in store.load()] == ["milk"]

        detach()
        registry.add_custom("Lupin")
        assert [a.name for a in store.load()] == ["milk"]


class TestScannerState:
    def test_registry_is_restored_and_persisted(self, state):
        state.registry.add_custom("Kiwi")
        state.clear()
        assert [a.name for a in state.registry] == ["Kiwi"]

    def test_corrupt_state_starts_empty(self, state):
        state.storage_path.write_text("[{]", encoding="utf-8")
        assert len(state.registry) == 0
