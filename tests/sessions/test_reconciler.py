from src.worktime.worktime.core.enums import SessionFlag
from src.worktime.worktime.sessions.reconciler import SessionReconciler


def test_partial_rows_collapse_to_one_closed_session(event, at):
    events = [
        event("09:00", None, recorded="09:00"),
        event("09:00", "17:00", recorded="17:00"),
    ]

    sessions = SessionReconciler().reconcile(events)

    assert len(sessions) == 1
    assert sessions[0].check_in == at("09:00")
    assert sessions[0].check_out == at("17:00")
    assert sessions[0].flags == ()


def test_checkout_row_wins_regardless_of_write_order(event, at):
    events = [
        event("09:00", "17:00", recorded="17:00"),
        event("09:00", None, recorded="17:05"),
    ]

    sessions = SessionReconciler().reconcile(events)

    assert len(sessions) == 1
    assert sessions[0].check_out == at("17:00")


def test_unsorted_input_is_sorted_by_recorded_at(event, at):
    events = [
        event("09:00", None, recorded="09:30"),
        event("09:00", None, recorded="09:01"),
    ]

    sessions = SessionReconciler().reconcile(events)

    assert len(sessions) == 1
    assert sessions[0].is_open
    assert sessions[0].recorded_at == at("09:30")


def test_distinct_check_ins_yield_sessions_in_check_in_order(event, at):
    events = [
        event("13:00", "18:00"),
        event("09:00", "12:00"),
    ]

    sessions = SessionReconciler().reconcile(events)

    assert [s.check_in for s in sessions] == [at("09:00"), at("13:00")]
    assert all(not s.is_open for s in sessions)


def test_conflicting_checkouts_keep_first_and_flag(event, at):
    events = [
        event("09:00", "17:00", recorded="17:00"),
        event("09:00", "18:00", recorded="18:00"),
    ]

    [session] = SessionReconciler().reconcile(events)

    assert session.check_out == at("17:00")
    assert session.has_flag(SessionFlag.CONFLICTING_CHECKOUT)


def test_checkout_before_check_in_becomes_open_session(event):
    events = [event("13:00", "12:00", recorded="13:00")]

    [session] = SessionReconciler().reconcile(events)

    assert session.is_open
    assert session.has_flag(SessionFlag.INVERTED_CHECKOUT)


def test_re_check_in_before_close_keeps_both_open(event, at):
    events = [
        event("09:00", None, recorded="09:00"),
        event("10:00", None, recorded="10:00"),
    ]

    first, second = SessionReconciler().reconcile(events)

    assert first.is_open and second.is_open
    assert first.recorded_at == at("09:00")
    assert first.has_flag(SessionFlag.ABANDONED_OPEN)
    assert not second.has_flag(SessionFlag.ABANDONED_OPEN)


def test_overlapping_sessions_are_flagged_not_merged(event):
    events = [
        event("09:00", "12:00"),
        event("11:00", "13:00"),
    ]

    first, second = SessionReconciler().reconcile(events)

    assert not first.has_flag(SessionFlag.OVERLAPPING)
    assert second.has_flag(SessionFlag.OVERLAPPING)


def test_check_out_only_rows_are_ignored(event):
    events = [event(None, "17:00", recorded="17:00")]

    assert SessionReconciler().reconcile(events) == []


def test_empty_input():
    assert SessionReconciler().reconcile([]) == []
