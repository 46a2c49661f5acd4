import threading

from weaver.engine import WordLadderGame
from weaver.events import (
    Event, EventKind, STATE_CHANGED, NotificationChannel,
    ManualExecutor, ThreadExecutor,
)


def test_delivery_in_subscription_order():
    ch = NotificationChannel()
    seen = []
    ch.subscribe(lambda e: seen.append(("a", e.kind)))
    ch.subscribe(lambda e: seen.append(("b", e.kind)))
    ch.publish(STATE_CHANGED)
    assert seen == [("a", EventKind.STATE_CHANGED), ("b", EventKind.STATE_CHANGED)]


def test_late_subscriber_misses_earlier_events():
    ex = ManualExecutor()
    ch = NotificationChannel(ex)
    early, late = [], []
    ch.subscribe(early.append)
    ch.publish(Event(EventKind.ERROR, "boom"))
    ch.subscribe(late.append)
    ch.publish(STATE_CHANGED)
    assert ex.drain() == 2
    assert [e.kind for e in early] == [EventKind.ERROR, EventKind.STATE_CHANGED]
    assert [e.kind for e in late] == [EventKind.STATE_CHANGED]


def test_unsubscribe_and_clear():
    ch = NotificationChannel()
    seen = []
    h = ch.subscribe(seen.append)
    assert ch.unsubscribe(h) is True
    assert ch.unsubscribe(h) is False
    ch.subscribe(seen.append)
    ch.clear()
    assert ch.subscriber_count() == 0
    ch.publish(STATE_CHANGED)
    assert seen == []


def test_nested_publish_is_not_reentrant():
    ch = NotificationChannel()
    log = []

    def first(e):
        log.append(("first-start", e.message))
        if e.message == "outer":
            ch.publish(Event(EventKind.WIN, "inner"))
        log.append(("first-end", e.message))

    ch.subscribe(first)
    ch.subscribe(lambda e: log.append(("second", e.message)))
    ch.publish(Event(EventKind.WIN, "outer"))
    # "inner" is delivered only after every handler finished with "outer"
    assert log == [
        ("first-start", "outer"), ("first-end", "outer"), ("second", "outer"),
        ("first-start", "inner"), ("first-end", "inner"), ("second", "inner"),
    ]


def test_failing_subscriber_does_not_block_others(caplog):
    ch = NotificationChannel()
    seen = []

    def broken(e):
        raise RuntimeError("render failed")

    ch.subscribe(broken)
    ch.subscribe(seen.append)
    ch.publish(STATE_CHANGED)
    assert seen == [STATE_CHANGED]
    assert "failed" in caplog.text


def test_manual_executor_defers_engine_events():
    ex = ManualExecutor()
    g = WordLadderGame(["east", "vast", "west"], channel=NotificationChannel(ex))
    seen = []
    g.subscribe(seen.append)
    g.submit_word("vast")
    g.submit_word("nest")
    assert seen == []
    assert ex.pending() == 2
    ex.drain()
    assert [e.kind for e in seen] == [EventKind.STATE_CHANGED, EventKind.ERROR]


def test_thread_executor_delivers_on_one_thread():
    ex = ThreadExecutor()
    try:
        ch = NotificationChannel(ex)
        threads, seen = set(), []

        def handler(e):
            threads.add(threading.current_thread().name)
            seen.append(e.message)

        ch.subscribe(handler)
        for i in range(20):
            ch.publish(Event(EventKind.ERROR, str(i)))
        ex.flush(timeout=5)
        assert seen == [str(i) for i in range(20)]
        assert len(threads) == 1
        assert threading.current_thread().name not in threads
    finally:
        ex.shutdown()


def test_event_is_notice():
    assert not STATE_CHANGED.is_notice
    assert Event(EventKind.WIN, "x").is_notice


def test_thread_executor_with_mutations_on_delivery_thread():
    ex = ThreadExecutor()
    try:
        g = WordLadderGame(["lamp", "limp", "lump", "damp", "east", "vast", "west"],
                           channel=NotificationChannel(ex), seed=2)
        snapshots = []
        g.subscribe(lambda e: snapshots.append((g.start_word, g.current_path)))
        for flag in [True, False, True, False]:
            ex.submit(lambda flag=flag: g.set_random_words(flag))
        ex.submit(lambda: g.submit_word("vast"))
        ex.flush(timeout=5)
        assert len(snapshots) == 5
        assert all(path[0] == start for start, path in snapshots)
        assert snapshots[-1][1] == ("east", "vast")
    finally:
        ex.shutdown()
