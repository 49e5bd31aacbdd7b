from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from expense_insights.main import app
from expense_insights.models import Insight

client = TestClient(app)

EXPENSE = {"id": "1", "amount": 9.99, "category": "Entertainment", "description": "Netflix", "date": "2024-01-05"}


@pytest.fixture
def mock_generator() -> Generator[MagicMock, None, None]:
    had_generator = hasattr(app.state, "generator")
    original_generator = getattr(app.state, "generator", None)
    mock = MagicMock()
    app.state.generator = mock
    yield mock
    if had_generator:
        app.state.generator = original_generator
    else:
        delattr(app.state, "generator")

def test_insights_route(mock_generator: MagicMock) -> None:
    mock_generator.generate_expense_insights.return_value = [
        Insight(id="ai-1-0", type="tip", title="Subscriptions", message="9.99 on Netflix", confidence=0.9)
    ]

    response = client.post("/api/insights", json={"expenses": [EXPENSE]})

    assert response.status_code == 200
    data = response.json()
    assert data[0]["type"] == "tip"
    assert data[0]["action"] is None
    records = mock_generator.generate_expense_insights.call_args.args[0]
    assert records[0].description == "Netflix"

def test_categorize_route(mock_generator: MagicMock) -> None:
    mock_generator.categorize_expense.return_value = "Entertainment"

    response = client.post("/api/categorize", json={"description": "Netflix"})

    assert response.status_code == 200
    assert response.json() == {"category": "Entertainment"}
    mock_generator.categorize_expense.assert_called_once_with("Netflix")

def test_answer_route(mock_generator: MagicMock) -> None:
    mock_generator.generate_ai_answer.return_value = "You spent 9.99 on entertainment."

    response = client.post("/api/answer", json={"question": "Entertainment total?", "context": [EXPENSE]})

    assert response.status_code == 200
    assert response.json() == {"answer": "You spent 9.99 on entertainment."}

def test_categories_route() -> None:
    response = client.get("/api/categories")
    assert response.status_code == 200
    assert response.json() == ["Food", "Transportation", "Entertainment", "Shopping", "Bills", "Healthcare", "Other"]

def test_invalid_expense_rejected(mock_generator: MagicMock) -> None:
    response = client.post("/api/insights", json={"expenses": [{"id": "1", "amount": "lots"}]})
    assert response.status_code == 422
    mock_generator.generate_expense_insights.assert_not_called()

def test_generator_not_initialized() -> None:
    had_generator = hasattr(app.state, "generator")
    original_generator = getattr(app.state, "generator", None)
    if had_generator:
        delattr(app.state, "generator")
    try:
        response = client.post("/api/categorize", json={"description": "Coffee"})
    finally:
        if had_generator:
            app.state.generator = original_generator

    assert response.status_code == 500
    assert response.json()["detail"] == "Generator not initialized"
