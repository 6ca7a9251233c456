"""
Pytest fixtures for the transaction service.

Every test gets its own store and application, so no state leaks between tests.
"""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from store import TransactionStore


@pytest.fixture
def store() -> TransactionStore:
    return TransactionStore()


@pytest.fixture
def client(store: TransactionStore) -> TestClient:
    return TestClient(create_app(store))


@pytest.fixture
def transaction_payload() -> dict:
    return {
        "id": "T1",
        "location_datetime": "2024-01-01T00:00:00Z",
        "location": "Depot",
        "total_amount": 5.0,
        "currency": "USD",
        "vehicle": {"vrm": "AB12CDE", "country": "GB", "make": "Ford"},
        "driver": {
            "first_name": "A",
            "last_name": "B",
            "address_1": "1 High Street",
            "address_2": "Flat 2",
            "post_code": "AB1 2CD",
            "city": "London",
            "region": "Greater London",
            "country": "GB",
            "phone": "0123456789",
            "email": "a@b.com",
        },
    }
