# trafficmon

A library of building blocks for a network traffic and system usage
monitor. It reads interface byte counters, turns them into speeds and
daily totals, and works out which connection to watch. It decides when a
usage alert is due, builds tooltip text, and holds the setting records
and file locations that such a monitor needs.

## Install

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Modules

- `trafficmon.settings`: setting data classes (`GeneralSettings`,
  `MainWindowSettings`, `TaskbarSettings`, `MainConfig`, `FontInfo`,
  `NotifyTipSettings`, `ItemColor`, `ThemeInfo`) and the enums
  `DisplayItem`, `SpeedUnit`, `DoubleClickAction` and `HistoryViewType`.
  `rgb` packs three channels into a `0x00BBGGRR` color value, and
  `default_text_colors` gives every display item the same color.
- `trafficmon.monitor`: `read_interfaces` returns the byte counters of
  every interface through psutil. `TrafficSampler` turns successive
  readings into download and upload speeds and keeps a list of
  `DailyTraffic` records. It can also pick the busiest running connection
  with `auto_select`, or pick one by name with `select_by_name`.
- `trafficmon.connections`: `SelectionState` and the rules of the
  connection menu (`apply_connection_command`, `checked_menu_index`,
  `normalize_selection`). It also has `toggle_display_item` and
  `toggle_item_pair` for showing and hiding display items.
- `trafficmon.alerts`: `ThresholdNotifier` fires when a value rises to its
  threshold, at most once per interval. `TrafficLimitNotifier` fires when
  today's traffic crosses `traffic_limit_bytes(value, unit)`.
- `trafficmon.tips`: `format_kbytes`, `format_speed`,
  `format_temperature`, and the tooltip builders `notify_icon_tip` and
  `mouse_tip`, which take a `Readings` record.
- `trafficmon.window`: `Rect` and `keep_window_on_screen`, which keeps a
  window inside the work area. `transparency_alpha` converts an opacity
  percentage to an alpha value.
- `trafficmon.app`: `resolve_paths` works out the config, history, log
  and skin locations as `AppPaths`. `load_global_config` and
  `save_global_config` handle the portable-mode flag in `global_cfg.ini`.
  Also here are `quote_module_path`, `dpi_scale`,
  `auto_select_notify_icon` and `system_info_string`.
- `trafficmon.xmlhelper`: ElementTree helpers that return empty strings
  instead of `None` (`load_xml_file`, `iter_child_elements`,
  `element_attribute`, `element_name`, `element_text`, `string_to_bool`).

## Example

```python
import datetime

from trafficmon.monitor import Connection, TrafficSampler, read_interfaces

counters = read_interfaces()
connections = [
    Connection(index=i, description=c.description, name=c.description)
    for i, c in enumerate(counters)
]
sampler = TrafficSampler(connections, 1000, auto_select=True, select_all=False)
sampler.auto_select(counters)

in_speed, out_speed = sampler.sample(read_interfaces(), datetime.date.today())
```

The first sample always reports zero speed, because there is no earlier
reading to compare with.

## What it does not do

- There is no command-line program and no window. The caller has to run
  the sampling loop and show the results.
- The main settings file is not read or written. Only the portable-mode
  flag in `global_cfg.ini` is stored.
- Taskbar color presets, light/dark theme switching and update checks
  are not provided.
- CPU usage, memory usage and temperatures are not measured. `Readings`
  only carries values that the caller supplies.