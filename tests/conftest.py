import pytest


@pytest.fixture(autouse=True, scope="session")
def fast_test_settings():
    # Minimum bcrypt cost keeps the suite fast
    from catshop.config import settings
    settings.bcrypt_rounds = 4
    settings.environment = "development"
    settings.jwt_secret = "test-secret"


@pytest.fixture
def user_store():
    from catshop.dependencies import get_user_store
    from catshop.main import app
    from catshop.services.user_store import InMemoryUserStore

    store = InMemoryUserStore()
    app.dependency_overrides[get_user_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_user_store, None)
