"""Setting records shared by the monitor, its windows and its config file."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional


class DisplayItem(enum.IntFlag):
    """Items that can be shown in the main window or the taskbar window."""

    UP = 1
    DOWN = 2
    CPU = 4
    MEMORY = 8
    GPU_USAGE = 16
    CPU_TEMP = 32
    GPU_TEMP = 64
    HDD_TEMP = 128
    MAIN_BOARD_TEMP = 256


ALL_DISPLAY_ITEMS = (
    DisplayItem.UP,
    DisplayItem.DOWN,
    DisplayItem.CPU,
    DisplayItem.MEMORY,
    DisplayItem.GPU_USAGE,
    DisplayItem.CPU_TEMP,
    DisplayItem.GPU_TEMP,
    DisplayItem.HDD_TEMP,
    DisplayItem.MAIN_BOARD_TEMP,
)


class SpeedUnit(enum.IntEnum):
    AUTO = 0
    KBPS = 1
    MBPS = 2


class DoubleClickAction(enum.IntEnum):
    CONNECTION_INFO = 0
    HISTORY_TRAFFIC = 1
    SHOW_MORE_INFO = 2
    OPTIONS = 3
    TASK_MANAGER = 4
    SPECIFIC_APP = 5
    NONE = 6
    CHANGE_SKIN = 7


class HistoryViewType(enum.IntEnum):
    DAY = 0
    WEEK = 1
    MONTH = 2
    YEAR = 3


def rgb(red: int, green: int, blue: int) -> int:
    """Pack three 0-255 channels into a 0x00BBGGRR color value."""
    for channel in (red, green, blue):
        if not 0 <= channel <= 255:
            raise ValueError(f"color channel out of range: {channel}")
    return red | (green << 8) | (blue << 16)


@dataclass
class ItemColor:
    """Label and value colors of one taskbar item."""

    label: int = 0
    value: int = 0


def default_text_colors(color: int) -> Dict[DisplayItem, ItemColor]:
    """Give every display item the same label and value color."""
    return {item: ItemColor(color, color) for item in ALL_DISPLAY_ITEMS}


@dataclass
class FontInfo:
    name: str = ""
    size: int = 9
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_out: bool = False


@dataclass
class NotifyTipSettings:
    enable: bool = False
    tip_value: int = 80


@dataclass
class GeneralSettings:
    check_update_when_start: bool = True
    allow_skin_cover_font: bool = True
    allow_skin_cover_text: bool = True
    language: int = 0
    show_all_interface: bool = False
    get_cpu_usage_by_cpu_times: bool = True
    monitor_time_span: int = 1000
    portable_mode: bool = False
    auto_run: bool = False
    traffic_tip_enable: bool = False
    traffic_tip_value: int = 200
    traffic_tip_unit: int = 0
    memory_usage_tip: NotifyTipSettings = field(default_factory=NotifyTipSettings)
    cpu_temp_tip: NotifyTipSettings = field(default_factory=NotifyTipSettings)
    gpu_temp_tip: NotifyTipSettings = field(default_factory=NotifyTipSettings)
    hdd_temp_tip: NotifyTipSettings = field(default_factory=NotifyTipSettings)
    mainboard_temp_tip: NotifyTipSettings = field(default_factory=NotifyTipSettings)


def _main_display_strings() -> Dict[DisplayItem, str]:
    return {
        DisplayItem.UP: "Up: $",
        DisplayItem.DOWN: "Down: $",
        DisplayItem.CPU: "CPU: $",
        DisplayItem.MEMORY: "Memory: $",
        DisplayItem.GPU_USAGE: "GPU: $",
        DisplayItem.CPU_TEMP: "CPU: $",
        DisplayItem.GPU_TEMP: "GPU: $",
        DisplayItem.HDD_TEMP: "HDD: $",
        DisplayItem.MAIN_BOARD_TEMP: "MBD: $",
    }


def _taskbar_display_strings() -> Dict[DisplayItem, str]:
    strings = _main_display_strings()
    strings[DisplayItem.UP] = "↑: $"
    strings[DisplayItem.DOWN] = "↓: $"
    return strings


@dataclass
class MainWindowSettings:
    text_colors: Dict[DisplayItem, int] = field(
        default_factory=lambda: {item: 16384 for item in ALL_DISPLAY_ITEMS}
    )
    specify_each_item_color: bool = False
    font: FontInfo = field(default_factory=lambda: FontInfo(size=10))
    disp_str: Dict[DisplayItem, str] = field(default_factory=_main_display_strings)
    swap_up_down: bool = False
    hide_main_wnd_when_fullscreen: bool = True
    speed_short_mode: bool = False
    separate_value_unit_with_space: bool = True
    show_tool_tip: bool = True
    unit_byte: bool = True
    speed_unit: SpeedUnit = SpeedUnit.AUTO
    hide_unit: bool = False
    hide_percent: bool = False
    double_click_action: DoubleClickAction = DoubleClickAction.CONNECTION_INFO
    double_click_exe: str = ""


@dataclass
class TaskbarSettings:
    DEFAULT_BACK_COLOR: ClassVar[int] = 0
    DEFAULT_TRANSPARENT_COLOR: ClassVar[int] = 0
    DEFAULT_STATUS_BAR_COLOR: ClassVar[int] = 0x005A5A5A
    DEFAULT_TEXT_COLOR: ClassVar[int] = 0x00FFFFFF

    text_colors: Dict[DisplayItem, ItemColor] = field(
        default_factory=lambda: default_text_colors(TaskbarSettings.DEFAULT_TEXT_COLOR)
    )
    back_color: int = 0
    transparent_color: int = 0
    status_bar_color: int = 0x005A5A5A
    specify_each_item_color: bool = False
    font: FontInfo = field(default_factory=FontInfo)
    disp_str: Dict[DisplayItem, str] = field(default_factory=_taskbar_display_strings)
    swap_up_down: bool = False
    tbar_wnd_on_left: bool = False
    speed_short_mode: bool = False
    unit_byte: bool = True
    speed_unit: SpeedUnit = SpeedUnit.AUTO
    hide_unit: bool = False
    hide_percent: bool = False
    value_right_align: bool = False
    horizontal_arrange: bool = False
    show_status_bar: bool = False
    separate_value_unit_with_space: bool = True
    show_tool_tip: bool = True
    digits_number: int = 4
    double_click_action: DoubleClickAction = DoubleClickAction.CONNECTION_INFO
    double_click_exe: str = ""
    cm_graph_type: bool = False
    auto_adapt_light_theme: bool = False
    dark_default_style: int = 0
    light_default_style: int = -1
    auto_set_background_color: bool = False

    def first_label_color(self) -> Optional[int]:
        """Label color of the lowest display item, or None with no colors."""
        if not self.text_colors:
            return None
        return self.text_colors[min(self.text_colors)].label


@dataclass
class MainConfig:
    transparency: int = 80
    always_on_top: bool = True
    lock_window_pos: bool = False
    show_notify_icon: bool = True
    show_more_info: bool = False
    mouse_penetrate: bool = False
    show_task_bar_wnd: bool = False
    position_x: int = -1
    position_y: int = -1
    auto_select: bool = True
    select_all: bool = False
    hide_main_window: bool = False
    connection_name: str = ""
    skin_name: str = ""
    notify_icon_selected: int = 0
    notify_icon_auto_adapt: bool = True
    dft_notify_icon: int = 0
    alow_out_of_border: bool = False
    tbar_display_item: int = int(DisplayItem.UP | DisplayItem.DOWN)
    use_log_scale: bool = True
    sunday_first: bool = True
    view_type: HistoryViewType = HistoryViewType.DAY


@dataclass(frozen=True)
class ThemeInfo:
    """Operating system version and color theme the settings depend on."""

    major_version: int = 10
    minor_version: int = 0
    build_number: int = 0
    light_theme: bool = False

    @property
    def is_windows7(self) -> bool:
        return self.major_version == 6 and self.minor_version == 1

    @property
    def is_windows8_or_8point1(self) -> bool:
        return self.major_version == 6 and self.minor_version in (2, 3)

    @property
    def is_windows8_or_later(self) -> bool:
        return self.major_version > 6 or (self.major_version == 6 and self.minor_version >= 2)

    @property
    def is_windows10_or_later(self) -> bool:
        return self.major_version >= 10

    @property
    def is_windows10_light_theme(self) -> bool:
        return self.is_windows10_or_later and self.light_theme