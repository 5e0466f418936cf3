"""Application-level paths, the global config file and small helpers."""

from __future__ import annotations

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from trafficmon.settings import ThemeInfo

GLOBAL_CONFIG_NAME = "global_cfg.ini"
CONFIG_NAME = "config.ini"
HISTORY_TRAFFIC_NAME = "history_traffic.dat"
LOG_NAME = "error.log"
SKINS_DIR_NAME = "skins"
BASE_DPI = 96

_PathLike = Union[str, Path]


@dataclass(frozen=True)
class AppPaths:
    """Where the program lives and where it keeps its files."""

    module_path: Path
    module_path_reg: str
    module_dir: Path
    appdata_dir: Path
    config_dir: Path
    config_path: Path
    history_traffic_path: Path
    log_path: Path
    skin_path: Path


def quote_module_path(path: str) -> str:
    """Wrap a path in double quotes when it contains a space."""
    if " " in path:
        return f'"{path}"'
    return path


def resolve_paths(module_path: _PathLike, module_dir: _PathLike, appdata_dir: _PathLike,
                  portable_mode: bool) -> AppPaths:
    """Work out the config, history, log and skin locations.

    In portable mode the data files sit next to the program, otherwise in
    the per-user application data directory.
    """
    module_dir = Path(module_dir)
    appdata_dir = Path(appdata_dir)
    config_dir = module_dir if portable_mode else appdata_dir
    return AppPaths(
        module_path=Path(module_path),
        module_path_reg=quote_module_path(str(module_path)),
        module_dir=module_dir,
        appdata_dir=appdata_dir,
        config_dir=config_dir,
        config_path=config_dir / CONFIG_NAME,
        history_traffic_path=config_dir / HISTORY_TRAFFIC_NAME,
        log_path=config_dir / LOG_NAME,
        skin_path=module_dir / SKINS_DIR_NAME,
    )


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment]
    return parser


def _read_parser(path: Path) -> configparser.ConfigParser:
    parser = _new_parser()
    if path.is_file():
        try:
            parser.read(path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError):
            parser = _new_parser()
    return parser


def _write_parser(parser: configparser.ConfigParser, path: Path) -> bool:
    try:
        with path.open("w", encoding="utf-8") as handle:
            parser.write(handle, space_around_delimiters=False)
    except OSError:
        return False
    return True


def _parse_bool(raw: str, default: bool) -> bool:
    value = raw.strip().lower()
    if value in ("true", "1"):
        return True
    if value in ("false", "0"):
        return False
    return default


def load_global_config(module_dir: _PathLike, appdata_dir: _PathLike,
                       temp_dir: Optional[_PathLike] = None) -> Tuple[bool, bool]:
    """Read the global config next to the program.

    Returns ``(portable_mode, module_dir_writable)``. Without a global config
    file, portable mode is the default unless the per-user directory already
    holds a config file. The file is written back to probe whether the
    program directory is writable; a program running from the temporary
    directory is treated as not writable. A directory that is not writable
    turns portable mode off.
    """
    module_dir = Path(module_dir)
    global_path = module_dir / GLOBAL_CONFIG_NAME
    portable_default = False
    if not global_path.exists():
        portable_default = not (Path(appdata_dir) / CONFIG_NAME).exists()

    parser = _read_parser(global_path)
    portable_mode = _parse_bool(
        parser.get("config", "portable_mode", fallback=""), portable_default
    )

    writable = _write_parser(parser, global_path)
    if temp_dir is not None and str(temp_dir) and str(temp_dir) in str(module_dir):
        writable = False
    if not writable:
        portable_mode = False
    return portable_mode, writable


def save_global_config(module_dir: _PathLike, portable_mode: bool) -> bool:
    """Store the portable-mode flag; returns False when the file cannot be written."""
    path = Path(module_dir) / GLOBAL_CONFIG_NAME
    parser = _read_parser(path)
    if not parser.has_section("config"):
        parser.add_section("config")
    parser.set("config", "portable_mode", "true" if portable_mode else "false")
    return _write_parser(parser, path)


def dpi_scale(dpi: int, pixel: int) -> int:
    """Scale a length given at 96 DPI to ``dpi``, truncating toward zero."""
    product = dpi * pixel
    quotient = abs(product) // BASE_DPI
    return quotient if product >= 0 else -quotient


def auto_select_notify_icon(selected: int, theme: ThemeInfo) -> int:
    """Swap white and black notify icons to match the system theme."""
    if theme.major_version < 10:
        return selected
    if theme.is_windows10_light_theme:
        swap = {0: 4, 1: 5}
    else:
        swap = {4: 0, 5: 1}
    return swap.get(selected, selected)


def system_info_string(theme: ThemeInfo, dpi: int, version: str, arch: str) -> str:
    """Text describing the system, used in the about box."""
    return (
        "System Info:\r\n"
        f"Windows Version: {theme.major_version}.{theme.minor_version} "
        f"build {theme.build_number}\r\n"
        f"DPI: {dpi}\r\n"
        f"Version: {version} {arch}"
    )