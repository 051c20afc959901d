from __future__ import annotations

import pytest

from thermometer.reactors import HeatingController, ThresholdAlert


def feed(controller: HeatingController, values) -> None:
    for value in values:
        controller.on_reading(value)


@pytest.mark.parametrize("value, fires", [(29.9, False), (30.0, True), (30.1, True), (-5.0, False)])
def test_threshold_alert(sink, value, fires):
    alert = ThresholdAlert(30.0, "Pretty hot!", sink=sink)

    alert.on_reading(value)

    assert sink.messages == (["Pretty hot!"] if fires else [])


def test_threshold_alert_fires_on_every_qualifying_reading(sink):
    alert = ThresholdAlert(0.0, "freezing point passed", sink=sink)

    feed_values = [1.0, -1.0, 2.0]
    for value in feed_values:
        alert.on_reading(value)

    assert sink.messages == ["freezing point passed", "freezing point passed"]


def test_heating_waits_for_full_window(sink):
    controller = HeatingController(19.0, 23.0, sink=sink)

    feed(controller, [10.0] * 9)

    assert sink.messages == []
    assert len(controller.buffered) == 9


def test_heating_turns_on_when_cold(sink):
    controller = HeatingController(19.0, 23.0, sink=sink)

    feed(controller, [10.0] * 10)

    assert sink.messages == ["Average temperature of the last 10 readings: 10.0", "Heating on"]
    assert controller.buffered == ()


def test_heating_turns_off_when_warm(sink):
    controller = HeatingController(19.0, 23.0, sink=sink)

    feed(controller, [30.0] * 10)

    assert sink.messages == ["Average temperature of the last 10 readings: 30.0", "Heating off"]


def test_heating_silent_between_thresholds(sink):
    controller = HeatingController(19.0, 23.0, sink=sink)

    feed(controller, [20.0, 22.0] * 5)

    assert sink.messages == ["Average temperature of the last 10 readings: 21.0"]


@pytest.mark.parametrize("value", [19.0, 23.0])
def test_heating_thresholds_are_exclusive(sink, value):
    controller = HeatingController(19.0, 23.0, sink=sink)

    feed(controller, [value] * 10)

    assert sink.messages == [f"Average temperature of the last 10 readings: {value}"]


def test_heating_windows_do_not_overlap(sink):
    controller = HeatingController(19.0, 23.0, sink=sink)

    feed(controller, [30.0] * 10)
    feed(controller, [10.0] * 9)

    assert sink.messages == ["Average temperature of the last 10 readings: 30.0", "Heating off"]
    assert controller.buffered == (10.0,) * 9

    controller.on_reading(10.0)

    assert sink.messages[-2:] == ["Average temperature of the last 10 readings: 10.0", "Heating on"]
    assert controller.buffered == ()


def test_heating_buffer_never_exceeds_window(sink):
    controller = HeatingController(19.0, 23.0, sink=sink)

    for step in range(35):
        controller.on_reading(float(step))
        assert len(controller.buffered) < 10

    assert len(controller.buffered) == 5
    assert sum(1 for m in sink.messages if m.startswith("Average")) == 3


def test_heating_inverted_thresholds_are_not_corrected(sink):
    controller = HeatingController(on_threshold=25.0, off_threshold=15.0, sink=sink)

    feed(controller, [20.0] * 10)

    # 20 > 15 wins before the "on" branch is considered
    assert sink.messages == ["Average temperature of the last 10 readings: 20.0", "Heating off"]


def test_heating_buffered_is_a_copy(sink):
    controller = HeatingController(19.0, 23.0, sink=sink)
    controller.on_reading(1.0)

    snapshot = controller.buffered
    controller.on_reading(2.0)

    assert snapshot == (1.0,)
