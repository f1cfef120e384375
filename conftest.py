import pytest

from library_catalog.config import settings
from library_catalog.library import CatalogService
from library_catalog.seed import load_sample_data
from library_catalog.utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # CLI --output writes the mode to the environment; start every test in plain mode
    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)
    monkeypatch.setattr(settings, "load_sample_data", True)


@pytest.fixture
def lib():
    # Each test gets its own empty catalog
    return CatalogService()


@pytest.fixture
def seeded(lib):
    load_sample_data(lib)
    return lib
