"""Text of the tooltips shown over the main window and the notify icon."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from trafficmon.settings import DisplayItem

NOTIFY_TIP_MAX_LENGTH = 127


@dataclass
class Readings:
    """The latest monitored values; negative means not available."""

    in_speed: int = 0
    out_speed: int = 0
    cpu_usage: int = -1
    memory_usage: int = -1
    used_memory: int = 0
    total_memory: int = 0
    cpu_temperature: float = -1
    gpu_temperature: float = -1
    hdd_temperature: float = -1
    main_board_temperature: float = -1
    gpu_usage: int = -1
    unit_byte: bool = True


def format_kbytes(kbytes: int) -> str:
    """A size given in kilobytes, in KB, MB or GB."""
    if kbytes < 1024:
        return f"{kbytes} KB"
    if kbytes < 1024 * 1024:
        return f"{kbytes / 1024:.2f} MB"
    return f"{kbytes / (1024 * 1024):.2f} GB"


def format_speed(bytes_per_second: int, unit_byte: bool = True) -> str:
    """A byte count as kilo, mega or giga bytes, or bits when ``unit_byte`` is false."""
    if unit_byte:
        value, suffix = bytes_per_second, "B"
    else:
        value, suffix = bytes_per_second * 8, "b"
    kilo = value / 1024
    if kilo < 10:
        return f"{kilo:.2f} K{suffix}"
    if kilo < 1024:
        return f"{kilo:.1f} K{suffix}"
    if kilo < 1024 * 1024:
        return f"{kilo / 1024:.2f} M{suffix}"
    return f"{kilo / (1024 * 1024):.2f} G{suffix}"


def format_temperature(value: float) -> str:
    return f"{int(value)} °C"


def notify_icon_tip(title: str, readings: Readings) -> str:
    """Tooltip of the notify icon, cut to what the icon can hold."""
    lines: List[str] = [
        title,
        f"Upload: {format_speed(readings.out_speed)}/s",
        f"Download: {format_speed(readings.in_speed)}/s",
        f"CPU: {readings.cpu_usage}%",
        f"Memory: {readings.memory_usage}%",
    ]
    if readings.gpu_usage >= 0:
        lines.append(f"GPU usage: {readings.gpu_usage}")
    for label, value in (
        ("CPU temperature", readings.cpu_temperature),
        ("GPU temperature", readings.gpu_temperature),
        ("HDD temperature", readings.hdd_temperature),
        ("Mainboard temperature", readings.main_board_temperature),
    ):
        if value > 0:
            lines.append(f"{label}: {int(value)}")
    return "\r\n".join(lines)[:NOTIFY_TIP_MAX_LENGTH]


def mouse_tip(readings: Readings, shown_items: int, up_traffic: int, down_traffic: int) -> str:
    """Tooltip of the main window: today's traffic plus every item the skin hides."""

    def hidden(item: DisplayItem) -> bool:
        return not int(shown_items) & int(item)

    lines: List[str] = [
        "Traffic used today: {} (Upload: {}/Download: {})".format(
            format_kbytes((up_traffic + down_traffic) // 1024),
            format_kbytes(up_traffic // 1024),
            format_kbytes(down_traffic // 1024),
        )
    ]
    if hidden(DisplayItem.UP):
        lines.append(f"Upload: {format_speed(readings.out_speed, readings.unit_byte)}/s")
    if hidden(DisplayItem.DOWN):
        lines.append(f"Download: {format_speed(readings.in_speed, readings.unit_byte)}/s")
    if hidden(DisplayItem.CPU):
        lines.append(f"CPU usage: {readings.cpu_usage}%")
    memory = f"Memory usage: {format_kbytes(readings.used_memory)}/{format_kbytes(readings.total_memory)}"
    if hidden(DisplayItem.MEMORY):
        memory += f" ({readings.memory_usage}%)"
    lines.append(memory)
    if hidden(DisplayItem.GPU_USAGE) and readings.gpu_usage >= 0:
        lines.append(f"GPU usage: {readings.gpu_usage}%")
    for item, label, value in (
        (DisplayItem.CPU_TEMP, "CPU temperature", readings.cpu_temperature),
        (DisplayItem.GPU_TEMP, "GPU temperature", readings.gpu_temperature),
        (DisplayItem.HDD_TEMP, "HDD temperature", readings.hdd_temperature),
        (DisplayItem.MAIN_BOARD_TEMP, "Mainboard temperature", readings.main_board_temperature),
    ):
        if hidden(item) and value > 0:
            lines.append(f"{label}: {format_temperature(value)}")
    return "\r\n".join(lines)