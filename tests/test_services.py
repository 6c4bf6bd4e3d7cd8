import pytest

from order_ui.services import (
    DemoOrderService,
    HttpOrderService,
    close_order_service,
    get_order_service,
)


@pytest.fixture(autouse=True)
def _clear_cache():
    get_order_service.cache_clear()
    yield
    get_order_service.cache_clear()


def test_default_is_demo(monkeypatch):
    monkeypatch.delenv("ORDER_UI_SERVICE", raising=False)
    assert isinstance(get_order_service(), DemoOrderService)


def test_kind_from_environment(monkeypatch):
    monkeypatch.setenv("ORDER_UI_SERVICE", "HTTP")
    assert isinstance(get_order_service(), HttpOrderService)


def test_service_is_cached():
    assert get_order_service("demo") is get_order_service("demo")


def test_unknown_kind():
    with pytest.raises(ValueError, match="Unknown order service kind: grpc"):
        get_order_service("grpc")


async def test_close_releases_http_client():
    service = get_order_service("http")
    client = service._http()

    await close_order_service("http")
    assert client.is_closed
    assert service._client is None
    assert get_order_service("http") is not service


async def test_close_without_cached_service():
    await close_order_service()
    assert get_order_service.cache_info().currsize == 0
