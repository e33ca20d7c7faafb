# tests/conftest.py
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_tickets.db")

import pytest

from app.core.config import Settings, get_settings
from app.main import app


@pytest.fixture
def images_folder(tmp_path):
    folder = tmp_path / "images"
    app.dependency_overrides[get_settings] = lambda: Settings(IMAGES_FOLDER=str(folder))
    yield folder
    app.dependency_overrides.pop(get_settings, None)
