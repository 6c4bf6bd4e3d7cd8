import asyncio

import pytest
from conftest import order_ids, settle

from order_ui.controller import NEW_ORDER_PATH, OrderListController, order_path


@pytest.fixture
def controller(service):
    return OrderListController(service)


async def test_mount_lists_first_page_once(service, controller):
    await controller.mount()
    assert service.calls == [("list", 1, 20)]
    assert controller.result.page == 1
    assert controller.result.has_next
    assert not controller.result.has_prev


async def test_search_then_next_page(service, controller):
    await controller.mount()
    await controller.set_search_term("alice")
    await controller.next_page()
    assert service.fetch_calls()[1:] == [
        ("search", "alice", 1, 20),
        ("search", "alice", 2, 20),
    ]
    assert controller.page == 2
    assert controller.result.page == 2


async def test_page_size_change_resets_page(service, controller):
    await controller.set_page(3)
    assert controller.page == 3
    await controller.set_page_size(50)
    assert service.calls[-1] == ("list", 1, 50)
    assert (controller.page, controller.page_size) == (1, 50)


async def test_search_resets_page(service, controller):
    await controller.set_page(4)
    await controller.set_search_term("bob")
    assert service.calls[-1] == ("search", "bob", 1, 20)


async def test_clearing_search_lists(service, controller):
    await controller.set_search_term("alice")
    await controller.set_page(2)
    await controller.set_search_term("")
    assert service.calls[-1] == ("list", 1, 20)


async def test_previous_page(service, controller):
    await controller.set_page(3)
    await controller.previous_page()
    assert service.calls[-1] == ("list", 2, 20)


async def test_typing_then_page_click_keeps_last_issued(service, controller):
    service.blocking = True
    typed = asyncio.ensure_future(controller.set_search_term("alice"))
    clicked = asyncio.ensure_future(controller.set_page(2))
    await settle()

    service.release(1)
    await clicked
    service.release(0)
    await typed

    assert service.calls == [("search", "alice", 1, 20), ("search", "alice", 2, 20)]
    assert controller.result.page == 2
    assert not controller.loading


async def test_unawaited_setter_still_fetches(service, controller):
    controller.set_search_term("alice")
    assert controller.loading
    await settle()
    assert service.calls == [("search", "alice", 1, 20)]
    assert controller.result.page == 1
    assert not controller.loading


async def test_awaiting_superseded_setter_clears_loading(service, controller):
    pending = controller.set_page(2)
    controller.set_page_size(50)
    assert await pending is None
    await settle()
    assert service.calls == [("list", 2, 20), ("list", 1, 50)]
    assert controller.result.page == 1
    assert len(controller.result.items) == 50
    assert not controller.loading


async def test_fetch_failure_is_soft(service, controller):
    before = await controller.mount()
    service.fail_fetch = True
    await controller.set_page(2)
    assert controller.result is before
    assert controller.page == 2
    assert not controller.loading


async def test_delete_refreshes_current_page(service, controller):
    await controller.set_page(2)
    victim = controller.result.items[0].order_id

    assert await controller.delete_order(victim)
    assert service.calls[-2:] == [("delete", victim), ("list", 2, 20)]
    assert controller.page == 2
    assert victim not in order_ids(controller.result)


async def test_delete_failure_skips_refresh(service, controller):
    await controller.mount()
    assert "42" not in order_ids(controller.result)
    await controller.set_page(3)
    assert "42" in order_ids(controller.result)
    calls_before = list(service.calls)
    shown = controller.result

    service.fail_delete = True
    assert not await controller.delete_order("42")
    assert service.calls == calls_before + [("delete", "42")]
    assert controller.result is shown
    assert "42" in order_ids(controller.result)


async def test_delete_of_unknown_order_skips_refresh(service, controller):
    await controller.mount()
    assert not await controller.delete_order("missing")
    assert service.calls[-1] == ("delete", "missing")


def test_navigation_is_forwarded(service):
    visited = []
    controller = OrderListController(service, navigate=lambda path: visited.append(path) or path)
    assert controller.view_order("42") == "/orders/42"
    assert controller.create_order() == NEW_ORDER_PATH
    assert visited == [order_path("42"), "/orders/new"]


def test_navigation_without_router(service):
    assert OrderListController(service).create_order() is None


def test_initial_state(controller):
    assert (controller.search_term, controller.page, controller.page_size) == ("", 1, 20)
    assert controller.result is None
    assert not controller.loading
