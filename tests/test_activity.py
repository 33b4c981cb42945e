from datetime import datetime

from surfpool.activity import (
    ActivityLog,
    EventType,
    ProgressColor,
    format_event_time,
    format_event_time as fmt,
    remote_rpc_host,
)


def test_remote_rpc_host_drops_query():
    host = remote_rpc_host("https://rpc.example.com/?api-key=placeholder")
    assert host == "https://rpc.example.com/"
    assert "?" not in host


def test_remote_rpc_host_without_query_is_unchanged():
    url = "https://api.mainnet-beta.solana.com"
    assert remote_rpc_host(url) == url


def test_format_event_time_has_milliseconds():
    assert format_event_time(datetime(2024, 1, 2, 3, 4, 5, 678901)) == "03:04:05.678"


def test_format_event_time_pads_milliseconds():
    text = fmt(datetime(2024, 1, 2, 23, 59, 0, 5000))
    assert text.endswith(".005")
    assert len(text) == 12


def test_record_pushes_newest_first():
    log = ActivityLog()
    first = datetime(2024, 1, 1, 0, 0, 1)
    second = datetime(2024, 1, 1, 0, 0, 2)
    log.record(EventType.INFO, "one", first)
    log.record(EventType.WARNING, "two", second)
    assert list(log) == [
        (EventType.WARNING, second, "two"),
        (EventType.INFO, first, "one"),
    ]
    assert len(log) == 2


def test_record_defaults_to_now():
    log = ActivityLog()
    before = datetime.now()
    log.record(EventType.SUCCESS, "ready")
    after = datetime.now()
    event_type, when, message = log.events[0]
    assert event_type is EventType.SUCCESS
    assert message == "ready"
    assert before <= when <= after


def test_yellow_update_sets_status_bar_only():
    log = ActivityLog()
    log.apply_progress_update(ProgressColor.YELLOW, "Pending", "deploying")
    assert log.status_bar_message == "Pending: deploying"
    assert len(log) == 0


def test_green_update_clears_status_and_logs_info():
    log = ActivityLog(status_bar_message="Pending: deploying")
    log.apply_progress_update(ProgressColor.GREEN, "Confirmed", "deployed")
    assert log.status_bar_message is None
    assert [(t, m) for t, _, m in log] == [(EventType.INFO, "deployed")]


def test_red_update_logs_failure():
    log = ActivityLog(status_bar_message="Pending: deploying")
    log.apply_progress_update(ProgressColor.RED, "Failed", "out of funds")
    assert log.status_bar_message is None
    assert [(t, m) for t, _, m in log] == [(EventType.FAILURE, "out of funds")]


def test_purple_update_logs_info():
    log = ActivityLog()
    log.apply_progress_update(ProgressColor.PURPLE, "Done", "all set")
    assert [(t, m) for t, _, m in log] == [(EventType.INFO, "all set")]