import os
import tempfile

# Keep configuration, logs and the saved selection out of the real home directory.
os.environ.setdefault("ALLERGEN_SCANNER_HOME", tempfile.mkdtemp(prefix="allergen_scanner_tests_"))

import pytest  # noqa: E402

from allergen_scanner import AllergenRegistry, AllergenStore, AllergenTerm  # noqa: E402
from allergen_scanner.core.state import ScannerStateManager  # noqa: E402


@pytest.fixture
def store(tmp_path):
    return AllergenStore(tmp_path / "selected.json")


@pytest.fixture
def registry():
    return AllergenRegistry()


@pytest.fixture
def state(tmp_path):
    manager = ScannerStateManager(storage_path=tmp_path / "state.json")
    yield manager
    manager.clear()


@pytest.fixture
def milk():
    return AllergenTerm.create("milk", synonyms=["dairy"])
