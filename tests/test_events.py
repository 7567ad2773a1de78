import logging

from holdem.events import EventChannel
from holdem.models import EventKind

from .helpers import Recorder


def test_subscriber_for_one_kind_only_sees_that_kind():
    channel = EventChannel()
    folds = Recorder()
    channel.subscribe(folds, kinds=[EventKind.FOLD])

    channel.publish(EventKind.BET, "Player Phil bet 25")
    channel.publish(EventKind.FOLD, "Player Daniel folded")

    assert folds.texts() == ["Player Daniel folded"]


def test_catch_all_subscriber_sees_everything_in_order():
    channel = EventChannel()
    everything = Recorder()
    channel.subscribe(everything)

    channel.publish(EventKind.NEW_HAND, "Starting hand 1")
    channel.publish(EventKind.WIN, "Player Phil won 50 dollars")

    assert [event.kind for event in everything.events] == [EventKind.NEW_HAND, EventKind.WIN]
    assert channel.published == 2


def test_publish_returns_the_event():
    channel = EventChannel()
    event = channel.publish(EventKind.LOSE, "Player Stu is out of the game")

    assert event.kind == EventKind.LOSE
    assert event.text == "Player Stu is out of the game"


def test_unsubscribe_stops_delivery():
    channel = EventChannel()
    recorder = Recorder()
    channel.subscribe(recorder, kinds=[EventKind.BET, EventKind.FOLD])
    channel.unsubscribe(recorder)

    channel.publish(EventKind.BET, "Player Phil bet 25")

    assert recorder.events == []


def test_failing_subscriber_is_logged_and_skipped(caplog):
    channel = EventChannel()

    def broken(event):
        raise ValueError("boom")

    recorder = Recorder()
    channel.subscribe(broken)
    channel.subscribe(recorder)

    with caplog.at_level(logging.ERROR, logger="holdem.events"):
        channel.publish(EventKind.BET, "Player Phil bet 25")

    assert recorder.texts() == ["Player Phil bet 25"]
    assert "failed on Bet event" in caplog.text
