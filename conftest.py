import os

import httpx
import pytest
import pytest_asyncio

from api_clients import AuthApi, CartsApi, ProductsApi, UsersApi
from config import get_settings, load_settings
from external_data import ExternalDataProvider
from load_data import load_all_data

OFFLINE_URLS = {
    "base_url": "https://store.test",
    "json_placeholder_url": "https://users.test",
    "quotable_url": "https://quotes.test",
    "picsum_url": "https://images.test",
    "world_time_url": "https://time.test",
}


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="run tests marked 'live' against the real storefront and auxiliary APIs",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live") or os.getenv("STORE_API_LIVE") == "1":
        return
    skip_live = pytest.mark.skip(reason="live API test: pass --live or set STORE_API_LIVE=1")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


# -----------------------------
# Configuration / static data
# -----------------------------

@pytest.fixture(scope="session")
def settings():
    return get_settings()


@pytest.fixture(scope="session")
def offline_settings():
    # env={} keeps a developer's .env / BASE_URL out of the hermetic tests
    return load_settings(env={}, timeout=5, **OFFLINE_URLS)


@pytest.fixture(scope="session")
def static_data():
    products, carts, users, jsonplaceholder_user = load_all_data()
    return {
        "products": products,
        "carts": carts,
        "users": users,
        "jsonplaceholder_user": jsonplaceholder_user,
    }


@pytest.fixture(scope="session")
def products_mock(static_data):
    return static_data["products"]


@pytest.fixture(scope="session")
def carts_mock(static_data):
    return static_data["carts"]


@pytest.fixture(scope="session")
def users_mock(static_data):
    return static_data["users"]


# -----------------------------
# Live clients
# -----------------------------

@pytest_asyncio.fixture
async def http_client(settings):
    async with httpx.AsyncClient(timeout=settings.timeout) as client:
        yield client


@pytest.fixture
def products_api(http_client, settings):
    return ProductsApi(http_client, settings)


@pytest.fixture
def carts_api(http_client, settings):
    return CartsApi(http_client, settings)


@pytest.fixture
def users_api(http_client, settings):
    return UsersApi(http_client, settings)


@pytest.fixture
def auth_api(http_client, settings):
    return AuthApi(http_client, settings)


@pytest.fixture
def external_data(http_client, settings):
    return ExternalDataProvider(http_client, settings)


# -----------------------------
# Offline transport
# -----------------------------

@pytest_asyncio.fixture
async def mock_http():
    """
    Factory fixture: mock_http(handler) returns an httpx.AsyncClient whose
    requests are answered by handler(request) -> httpx.Response.
    """
    clients = []

    def factory(handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.aclose()
