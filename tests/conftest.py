"""
Pytest configuration and fixtures for Expense Tracker tests

Provides:
1. Key-value stores (memory and in-memory SQLite)
2. Transaction store and service wired to them
3. Sample transactions
4. FastAPI test clients with the service dependency overridden
"""

from datetime import datetime
from decimal import Decimal
from typing import List

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from expense_tracker.api.deps import get_transaction_service
from expense_tracker.core.kv_store import MemoryKeyValueStore, SQLKeyValueStore, create_tables
from expense_tracker.crud.transaction import TransactionStore
from expense_tracker.db.session import build_session_factory
from expense_tracker.main import create_application
from expense_tracker.models.transaction import Category, Transaction, TransactionType
from expense_tracker.services.transaction_service import TransactionService


# === PYTEST CONFIGURATION ===

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast)"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (slow)"
    )


# === STORAGE ===

@pytest.fixture
def memory_kv():
    """Empty dict-backed key-value store"""
    return MemoryKeyValueStore()


@pytest.fixture
def sql_engine():
    """In-memory SQLite engine shared across connections"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_kv(sql_engine):
    """Key-value store on the preferences table"""
    return SQLKeyValueStore(build_session_factory(sql_engine))


@pytest.fixture
def store(memory_kv):
    return TransactionStore(memory_kv)


@pytest.fixture
def service(store):
    return TransactionService(store)


# === SAMPLE DATA ===

def build_transaction(
    title: str,
    amount: str,
    type: TransactionType,
    category: Category,
    when: datetime,
) -> Transaction:
    return Transaction(
        title=title,
        amount=Decimal(amount),
        type=type,
        category=category,
        date=when,
    )


@pytest.fixture
def make_transaction():
    """Factory for transactions with string amounts"""
    return build_transaction


@pytest.fixture
def january_transactions() -> List[Transaction]:
    """Two food expenses, one transport expense and a salary in January 2024"""
    return [
        build_transaction("Groceries", "100", TransactionType.EXPENSE, Category.FOOD, datetime(2024, 1, 5, 9, 30)),
        build_transaction("Dinner", "50", TransactionType.EXPENSE, Category.FOOD, datetime(2024, 1, 20, 19, 0)),
        build_transaction("Bus pass", "30", TransactionType.EXPENSE, Category.TRANSPORT, datetime(2024, 1, 10, 8, 0)),
        build_transaction("January salary", "1000", TransactionType.INCOME, Category.SALARY, datetime(2024, 1, 1, 12, 0)),
    ]


# === FASTAPI TEST CLIENT ===

@pytest.fixture
def test_app(service):
    """Application with the service dependency pointed at the test service"""
    app = create_application()
    app.dependency_overrides[get_transaction_service] = lambda: service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app):
    """FastAPI test client"""
    return TestClient(test_app)


@pytest.fixture
async def async_test_client(test_app):
    """Async FastAPI test client"""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        yield client
