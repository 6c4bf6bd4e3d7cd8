import logging

from order_ui.lib import logs


def test_logger_named_after_module_file():
    log = logs.logger("/srv/order_ui/coordinator.py")
    assert log.name == "coordinator"
    assert log is logging.getLogger("coordinator")


def test_logger_configured_once():
    first = logs.logger("order_ui_test_single_handler")
    second = logs.logger("order_ui_test_single_handler")
    assert first is second
    assert len(second.handlers) == 1
    assert second.handlers[0].formatter._fmt == logs._LOG_FORMAT


def test_stale_discard_logged_at_debug(caplog):
    from order_ui.coordinator import issue_ticket, settle
    from order_ui.models.query import QueryState

    ticket = issue_ticket(0, QueryState())
    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="coordinator"):
        assert not settle(ticket, 2)
    assert [r.levelno for r in caplog.records] == [logging.DEBUG]
    assert "Discarding stale response - #1" in caplog.records[0].getMessage()
