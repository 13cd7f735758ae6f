import pytest
from fastapi.testclient import TestClient

from app import app, get_payment_verifier, get_settings
from config import PRICE_CENTS, Settings


@pytest.fixture
def wallet() -> str:
    return "0x0000000000000000000000000000000000000abc"


@pytest.fixture
def facilitator_url() -> str:
    return "https://facilitator.test"


@pytest.fixture
def make_settings(wallet, facilitator_url):
    """Factory for Settings with test defaults; keyword arguments override fields."""

    def _make(**overrides) -> Settings:
        values = dict(
            port=3000,
            wallet_address=wallet,
            facilitator_url=facilitator_url,
            payment_verification="stub",
            facilitator_timeout_s=5.0,
            price_cents=PRICE_CENTS,
        )
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def override_verifier():
    """Install a verifier for the duration of a test."""

    def _install(verifier):
        app.dependency_overrides[get_payment_verifier] = lambda: verifier
        return verifier

    yield _install
    app.dependency_overrides.pop(get_payment_verifier, None)
