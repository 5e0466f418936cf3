from trafficmon.settings import ALL_DISPLAY_ITEMS, DisplayItem
from trafficmon.tips import (
    NOTIFY_TIP_MAX_LENGTH,
    Readings,
    format_kbytes,
    format_speed,
    format_temperature,
    mouse_tip,
    notify_icon_tip,
)

ALL_SHOWN = 0
for _item in ALL_DISPLAY_ITEMS:
    ALL_SHOWN |= int(_item)


def test_format_kbytes_units():
    assert format_kbytes(512) == "512 KB"
    assert format_kbytes(2048).endswith("MB")
    assert format_kbytes(3 * 1024 * 1024).endswith("GB")


def test_format_speed_units():
    assert format_speed(0) == "0.00 KB"
    assert format_speed(5 * 1024 * 1024).endswith("MB")
    assert format_speed(5 * 1024 * 1024 * 1024).endswith("GB")


def test_format_speed_bits_uses_lower_case_suffix():
    assert format_speed(1024, unit_byte=False).endswith("Kb")
    assert format_speed(1024, unit_byte=True).endswith("KB")


def test_format_temperature_truncates():
    assert format_temperature(55.9) == "55 °C"


def test_notify_tip_basic_lines():
    tip = notify_icon_tip("Monitor", Readings(cpu_usage=12, memory_usage=40))
    lines = tip.split("\r\n")
    assert lines[0] == "Monitor"
    assert "CPU: 12%" in lines
    assert "Memory: 40%" in lines
    assert len(lines) == 5


def test_notify_tip_optional_values():
    tip = notify_icon_tip("M", Readings(gpu_usage=30, cpu_temperature=61.7))
    assert "GPU usage: 30" in tip
    assert "CPU temperature: 61" in tip
    assert "HDD temperature" not in tip


def test_notify_tip_is_truncated():
    tip = notify_icon_tip(
        "x" * 100,
        Readings(gpu_usage=1, cpu_temperature=50, gpu_temperature=50,
                 hdd_temperature=50, main_board_temperature=50),
    )
    assert len(tip) == NOTIFY_TIP_MAX_LENGTH


def test_mouse_tip_all_shown_lists_only_traffic_and_memory():
    tip = mouse_tip(Readings(used_memory=100, total_memory=200, memory_usage=50), ALL_SHOWN, 0, 0)
    lines = tip.split("\r\n")
    assert len(lines) == 2
    assert lines[0].startswith("Traffic used today:")
    assert lines[1] == "Memory usage: 100 KB/200 KB"


def test_mouse_tip_hidden_items_are_listed():
    shown = ALL_SHOWN & ~int(DisplayItem.CPU) & ~int(DisplayItem.MEMORY)
    tip = mouse_tip(Readings(cpu_usage=33, memory_usage=50, used_memory=1, total_memory=2),
                    shown, 0, 0)
    assert "CPU usage: 33%" in tip
    assert "(50%)" in tip
    assert "Upload:" not in tip.split("\r\n", 1)[1]


def test_mouse_tip_skips_unavailable_temperatures():
    shown = int(DisplayItem.UP | DisplayItem.DOWN)
    tip = mouse_tip(Readings(cpu_temperature=-1, gpu_temperature=70), shown, 0, 0)
    assert "CPU temperature" not in tip
    assert "GPU temperature: 70 °C" in tip


def test_mouse_tip_traffic_totals():
    tip = mouse_tip(Readings(), ALL_SHOWN, 1024 * 100, 1024 * 200)
    assert tip.split("\r\n")[0] == "Traffic used today: 300 KB (Upload: 100 KB/Download: 200 KB)"