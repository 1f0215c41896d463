from __future__ import annotations

import pytest

from figma_converter.store.db import Database
from figma_converter.store.migrations import run_migrations
from figma_converter.web.app import create_app

BUTTON_CSS = """\
/* button */
display: flex;
padding: 8px;
background: #F1F1F1;
border-radius: 100px;
"""


@pytest.fixture
def db():
    """Create a fresh in-memory database with migrations for each test."""
    database = Database(":memory:")
    database.connect()
    run_migrations(database)
    yield database
    database.close()


@pytest.fixture
def app(db):
    """Create a Flask app for testing."""
    application = create_app(db=db)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


def submit_css(client, css: str = BUTTON_CSS, **extra) -> dict:
    """POST css to the processing endpoint and return the JSON body."""
    response = client.post("/api/css/process", json={"cssCode": css, **extra})
    assert response.status_code == 202
    return response.get_json()
