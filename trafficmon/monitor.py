"""Network traffic sampling: per-interval speeds and today's traffic."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import psutil


@dataclass
class Connection:
    """A network connection that can be selected for monitoring."""

    index: int
    description: str
    name: str = ""


@dataclass
class InterfaceCounters:
    """Byte counters of one network interface."""

    description: str
    in_octets: int = 0
    out_octets: int = 0
    is_up: bool = True


@dataclass
class DailyTraffic:
    """Traffic used on one day, in kilobytes."""

    year: int
    month: int
    day: int
    up_kbytes: int = 0
    down_kbytes: int = 0
    mixed: bool = False

    def kbytes(self) -> int:
        return self.up_kbytes + self.down_kbytes


def read_interfaces() -> List[InterfaceCounters]:
    """Current byte counters of every interface, ordered by name."""
    counters = psutil.net_io_counters(pernic=True)
    stats = psutil.net_if_stats()
    return [
        InterfaceCounters(
            description=name,
            in_octets=io.bytes_recv,
            out_octets=io.bytes_sent,
            is_up=name in stats and stats[name].isup,
        )
        for name, io in sorted(counters.items())
    ]


def timer_count_for(seconds: int, monitor_time_span: int) -> int:
    """How many monitor ticks of ``monitor_time_span`` ms fit in ``seconds``."""
    return seconds * 1000 // monitor_time_span


class TrafficSampler:
    """Turns successive counter readings into speeds and daily totals."""

    def __init__(self, connections: Sequence[Connection], monitor_time_span: int,
                 auto_select: bool = True, select_all: bool = False):
        if monitor_time_span <= 0:
            raise ValueError("monitor_time_span must be positive")
        self.connections: List[Connection] = list(connections)
        self.monitor_time_span = monitor_time_span
        self.auto_select_enabled = auto_select
        self.select_all = select_all
        self.selected = 0
        self.connection_name = ""
        self.connection_changed = False
        self.last_in_bytes = 0
        self.last_out_bytes = 0
        self.zero_speed_count = 0
        self.tick_count = 0
        self.history: List[DailyTraffic] = []
        self.today_up_traffic = 0
        self.today_down_traffic = 0
        self.save_due = False
        self._last_saved_kbytes = 0

    def _period(self, seconds: int) -> int:
        return max(1, timer_count_for(seconds, self.monitor_time_span))

    def auto_select(self, counters: Sequence[InterfaceCounters]) -> int:
        """Select the running connection that has moved the most bytes."""
        if not self.connections:
            raise ValueError("there are no connections to select from")
        best, best_bytes = 0, 0
        for position, connection in enumerate(self.connections):
            entry = counters[connection.index]
            if not entry.is_up:
                continue
            total = entry.in_octets + entry.out_octets
            if total > best_bytes:
                best, best_bytes = position, total
        self.selected = best
        self.connection_name = self.connections[best].name
        self.connection_changed = True
        return best

    def select_by_name(self, name: str) -> int:
        """Select the last connection called ``name``, or the first one if none is."""
        self.selected = 0
        for position, connection in enumerate(self.connections):
            if connection.name == name:
                self.selected = position
        if self.connections:
            self.connection_name = self.connections[self.selected].name
        return self.selected

    def mark_connection_changed(self) -> None:
        """Make the next sample report no speed, since the counters are not comparable."""
        self.connection_changed = True

    def _read_bytes(self, counters: Sequence[InterfaceCounters]) -> Tuple[int, int]:
        if self.select_all:
            entries = [counters[connection.index] for connection in self.connections]
            return sum(e.in_octets for e in entries), sum(e.out_octets for e in entries)
        entry = counters[self.connections[self.selected].index]
        return entry.in_octets, entry.out_octets

    def sample(self, counters: Sequence[InterfaceCounters], today: datetime.date) -> Tuple[int, int]:
        """Take one reading; return download and upload speed in bytes per second."""
        in_bytes, out_bytes = self._read_bytes(counters)
        invalid = (
            (in_bytes == 0 and out_bytes == 0)
            or (self.last_in_bytes == 0 and self.last_out_bytes == 0)
            or self.connection_changed
            or self.last_in_bytes > in_bytes
            or self.last_out_bytes > out_bytes
        )
        cur_in, cur_out = (0, 0) if invalid else (in_bytes - self.last_in_bytes,
                                                  out_bytes - self.last_out_bytes)
        in_speed = cur_in * 1000 // self.monitor_time_span
        out_speed = cur_out * 1000 // self.monitor_time_span

        self.connection_changed = False
        self.last_in_bytes, self.last_out_bytes = in_bytes, out_bytes

        if self.auto_select_enabled:
            self.zero_speed_count = self.zero_speed_count + 1 if cur_in == 0 and cur_out == 0 else 0
            if self.zero_speed_count >= timer_count_for(30, self.monitor_time_span):
                self.auto_select(counters)
                self.zero_speed_count = 0

        if not self.history or self.history[0].day != today.day:
            self.history.insert(0, DailyTraffic(today.year, today.month, today.day))
            self.today_up_traffic = 0
            self.today_down_traffic = 0

        self.today_up_traffic += cur_out
        self.today_down_traffic += cur_in
        current = self.history[0]
        current.up_kbytes = self.today_up_traffic // 1024
        current.down_kbytes = self.today_down_traffic // 1024

        self.save_due = False
        period = self._period(30)
        if self.tick_count % period == period - 1:
            kbytes = current.kbytes()
            if kbytes < self._last_saved_kbytes or kbytes - self._last_saved_kbytes >= 100:
                self.save_due = True
                self._last_saved_kbytes = kbytes

        self.tick_count += 1
        return in_speed, out_speed