"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def two_members():
    return {"a": {"name": "Alice"}, "b": {"name": "Bob"}}


@pytest.fixture
def three_members():
    return {"a": {"name": "A"}, "b": {"name": "B"}, "c": {"name": "C"}}


@pytest.fixture
def dinner_group(three_members):
    """Three members, two equally split expenses."""
    return {
        "members": three_members,
        "expenses": {
            "e1": {"description": "Dinner", "amount": 90, "amountILS": 90, "paidBy": "a", "category": "food"},
            "e2": {"description": "Taxi", "amount": 60, "amountILS": 60, "paidBy": "b", "category": "transport"},
        },
    }


@pytest.fixture
def client():
    from main import app
    return TestClient(app)
