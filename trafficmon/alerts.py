"""Notifications raised when a reading or today's traffic passes a limit."""

from __future__ import annotations

from trafficmon.settings import NotifyTipSettings

_MIB = 1024 * 1024


def traffic_limit_bytes(value: int, unit: int) -> int:
    """Traffic limit in bytes: ``unit`` 0 means megabytes, anything else gigabytes."""
    if unit == 0:
        return value * _MIB
    return value * _MIB * 1024


class ThresholdNotifier:
    """Fires when a value rises to its threshold, at most once per interval."""

    def __init__(self, settings: NotifyTipSettings, interval: int):
        self.settings = settings
        self.interval = interval
        self.last_value = 0
        self.notify_time = -interval

    def check(self, value: float, timer_count: int) -> bool:
        """Feed the current value; True when a notification should be shown."""
        if not self.settings.enable:
            return False
        value = int(value)
        fired = (
            self.last_value < self.settings.tip_value <= value
            and timer_count - self.notify_time > self.interval
        )
        if fired:
            self.notify_time = timer_count
        self.last_value = value
        return fired


class TrafficLimitNotifier:
    """Fires when today's traffic crosses the configured limit."""

    def __init__(self, value: int, unit: int):
        self.limit = traffic_limit_bytes(value, unit)
        self.last_today_traffic = 0

    def check(self, today_traffic: int) -> bool:
        fired = self.last_today_traffic < self.limit <= today_traffic
        self.last_today_traffic = today_traffic
        return fired