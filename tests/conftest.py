from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from storefront.config import Settings
from storefront.main import create_app

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


@pytest.fixture()
def app():
    """A fresh application, and with it a fresh cart and order log."""
    return create_app(Settings(static_dir=str(PUBLIC_DIR)))


@pytest.fixture()
def client(app):
    return TestClient(app)
