"""
Pytest markers and database fixtures.

Plain helpers live in tests/__init__.py.
"""

import os
import pytest


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


def _create_schema(url: str) -> None:
    from sqlalchemy import create_engine
    from database.init_db import init_db

    engine = create_engine(url)
    init_db(engine)
    engine.dispose()


@pytest.fixture(scope="session")
def test_database():
    """
    PostgreSQL URL with the schema created, for the whole test session.

    TEST_DATABASE_URL points at an existing server; otherwise a postgres:16
    container is started through testcontainers and stopped at the end.
    Tests depending on this are skipped when neither is possible.
    """
    if os.environ.get("TEST_DATABASE_URL"):
        from tests import TEST_DB_URL, check_db_available
        if not check_db_available():
            pytest.skip("External database not available")
        _create_schema(TEST_DB_URL)
        yield TEST_DB_URL
        return

    try:
        from testcontainers.postgres import PostgresContainer
    except ImportError:
        pytest.skip("testcontainers not installed")

    container = PostgresContainer(
        image="postgres:16-alpine",
        username="testuser",
        password="testpass",
        dbname="talentmatch_test",
    )
    try:
        container.start()
    except Exception as e:
        pytest.skip(f"Could not start test database container: {e}")

    try:
        url = container.get_connection_url()
        _create_schema(url)
        yield url
    finally:
        container.stop()


@pytest.fixture
def db_session(test_database):
    """Session on the test database; everything it wrote is rolled back afterwards."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker

    engine = create_engine(test_database)
    connection = engine.connect()
    transaction = connection.begin()
    session = sessionmaker(bind=connection, join_transaction_mode="create_savepoint")()

    yield session

    session.close()
    transaction.rollback()
    connection.close()
    engine.dispose()
