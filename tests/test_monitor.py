import datetime

import pytest

from trafficmon.monitor import (
    Connection,
    DailyTraffic,
    InterfaceCounters,
    TrafficSampler,
    read_interfaces,
    timer_count_for,
)

DAY = datetime.date(2024, 3, 10)


def _conns():
    return [Connection(0, "Adapter A", "a"), Connection(1, "Adapter B", "b"),
            Connection(2, "Adapter C", "c")]


def _counters(values, up=(True, True, True)):
    return [InterfaceCounters(f"if{i}", rx, tx, up[i]) for i, (rx, tx) in enumerate(values)]


def test_timer_count_for():
    assert timer_count_for(30, 1000) == 30
    assert timer_count_for(3, 500) == 2 * timer_count_for(3, 1000)


def test_auto_select_picks_busiest_running_connection():
    sampler = TrafficSampler(_conns(), 1000)
    counters = _counters([(10, 10), (500, 500), (900, 900)], up=(True, True, False))
    assert sampler.auto_select(counters) == 1
    assert sampler.connection_name == "b"
    assert sampler.connection_changed is True


def test_auto_select_without_connections_raises():
    with pytest.raises(ValueError):
        TrafficSampler([], 1000).auto_select([])


def test_invalid_time_span_raises():
    with pytest.raises(ValueError):
        TrafficSampler(_conns(), 0)


def test_select_by_name():
    sampler = TrafficSampler(_conns(), 1000, auto_select=False)
    assert sampler.select_by_name("c") == 2
    assert sampler.connection_name == "c"
    assert sampler.select_by_name("missing") == 0


def test_first_sample_is_zero_then_difference():
    sampler = TrafficSampler(_conns(), 1000, auto_select=False)
    assert sampler.sample(_counters([(1000, 500), (0, 0), (0, 0)]), DAY) == (0, 0)
    speeds = sampler.sample(_counters([(3000, 1500), (0, 0), (0, 0)]), DAY)
    assert speeds == (3000 - 1000, 1500 - 500)


def test_shorter_interval_scales_speed():
    slow = TrafficSampler(_conns(), 1000, auto_select=False)
    fast = TrafficSampler(_conns(), 500, auto_select=False)
    for sampler in (slow, fast):
        sampler.sample(_counters([(1000, 500), (0, 0), (0, 0)]), DAY)
    first = _counters([(3000, 1500), (0, 0), (0, 0)])
    slow_speed = slow.sample(first, DAY)
    fast_speed = fast.sample(first, DAY)
    assert fast_speed == (2 * slow_speed[0], 2 * slow_speed[1])


def test_connection_change_and_counter_reset_give_zero():
    sampler = TrafficSampler(_conns(), 1000, auto_select=False)
    sampler.sample(_counters([(1000, 500), (0, 0), (0, 0)]), DAY)
    sampler.mark_connection_changed()
    assert sampler.sample(_counters([(2000, 900), (0, 0), (0, 0)]), DAY) == (0, 0)
    assert sampler.sample(_counters([(100, 50), (0, 0), (0, 0)]), DAY) == (0, 0)


def test_select_all_sums_connections():
    single = TrafficSampler(_conns(), 1000, auto_select=False)
    total = TrafficSampler(_conns(), 1000, auto_select=False, select_all=True)
    before = _counters([(100, 100), (100, 100), (100, 100)])
    after = _counters([(200, 150), (200, 150), (200, 150)])
    for sampler in (single, total):
        sampler.sample(before, DAY)
    one = single.sample(after, DAY)
    assert total.sample(after, DAY) == (3 * one[0], 3 * one[1])


def test_today_traffic_accumulates_into_history():
    sampler = TrafficSampler(_conns(), 1000, auto_select=False)
    sampler.sample(_counters([(1, 1), (0, 0), (0, 0)]), DAY)
    sampler.sample(_counters([(1 + 4096, 1 + 2048), (0, 0), (0, 0)]), DAY)
    assert sampler.today_down_traffic == 4096
    assert sampler.today_up_traffic == 2048
    assert sampler.history[0].down_kbytes == sampler.today_down_traffic // 1024
    assert sampler.history[0].up_kbytes == sampler.today_up_traffic // 1024


def test_new_day_starts_new_record():
    sampler = TrafficSampler(_conns(), 1000, auto_select=False)
    sampler.history = [DailyTraffic(2024, 3, 9, up_kbytes=5, down_kbytes=7)]
    sampler.today_up_traffic = 5 * 1024
    sampler.sample(_counters([(10, 10), (0, 0), (0, 0)]), DAY)
    assert len(sampler.history) == 2
    assert (sampler.history[0].year, sampler.history[0].month, sampler.history[0].day) == (2024, 3, 10)
    assert sampler.today_up_traffic == 0
    assert sampler.history[1].kbytes() == 12


def test_long_silence_triggers_auto_select():
    sampler = TrafficSampler(_conns(), 1000, auto_select=True)
    sampler.selected = 0
    counters = _counters([(10, 10), (500, 500), (20, 20)])
    for _ in range(timer_count_for(30, 1000)):
        sampler.sample(counters, DAY)
    assert sampler.selected == 1
    assert sampler.zero_speed_count == 0


def test_read_interfaces_is_sorted_and_non_negative():
    interfaces = read_interfaces()
    names = [entry.description for entry in interfaces]
    assert names == sorted(names)
    assert all(entry.in_octets >= 0 and entry.out_octets >= 0 for entry in interfaces)