"""Parameter sets for the tracker and the re-identification model."""

from __future__ import annotations

import configparser
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

__all__ = ["ConfigError", "ReIDParams", "TrackerParams"]

T = TypeVar("T")

_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}


class ConfigError(Exception):
    """A configuration file is missing, malformed or holds a bad value."""


@dataclass
class TrackerParams:
    """Settings of the multi-object tracker."""

    reid_enabled: bool = False
    gmc_enabled: bool = False
    track_high_thresh: float = 0.6
    track_low_thresh: float = 0.1
    new_track_thresh: float = 0.7
    track_buffer: int = 30
    match_thresh: float = 0.7
    proximity_thresh: float = 0.5
    appearance_thresh: float = 0.25
    gmc_method_name: str = "sparseOptFlow"
    frame_rate: int = 30
    lambda_: float = 0.985


class _IniSection:
    """Typed read access to one section of an INI file; absent keys give None."""

    def __init__(self, path: str, section: str):
        parser = configparser.ConfigParser(
            interpolation=None, inline_comment_prefixes=(";", "#"), strict=False
        )
        try:
            with open(path, encoding="utf-8") as handle:
                parser.read_file(handle)
        except (OSError, configparser.Error) as exc:
            raise ConfigError(f"Can't load {path}: {exc}") from exc
        self._path = path
        self._section = next(
            (parser[name] for name in parser.sections() if name.lower() == section.lower()),
            None,
        )

    def _raw(self, key: str) -> Optional[str]:
        if self._section is None:
            return None
        value = self._section.get(key)
        return None if value is None else value.strip()

    def _convert(self, key: str, convert: Callable[[str], T]) -> Optional[T]:
        raw = self._raw(key)
        if raw is None:
            return None
        try:
            return convert(raw)
        except ValueError as exc:
            raise ConfigError(f"{self._path}: bad value for {key!r}: {raw!r}") from exc

    def string(self, key: str, default: str) -> str:
        raw = self._raw(key)
        return default if raw is None else raw

    def integer(self, key: str, default: int) -> int:
        value = self._convert(key, _parse_int)
        return default if value is None else value

    def boolean(self, key: str, default: bool) -> bool:
        value = self._convert(key, _parse_bool)
        return default if value is None else value

    def items(self, key: str, convert: Callable[[str], T]) -> list[T]:
        raw = self._raw(key)
        if raw is None:
            return []
        try:
            return [convert(item) for item in _split_list(raw)]
        except ValueError as exc:
            raise ConfigError(f"{self._path}: bad list for {key!r}: {raw!r}") from exc


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        return int(text, 10)


def _parse_bool(text: str) -> bool:
    word = text.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(text)


def _split_list(text: str) -> list[str]:
    text = text.strip().strip("[]")
    parts = text.replace(",", " ").split()
    return [part.strip().strip("'\"") for part in parts if part.strip()]


@dataclass
class ReIDParams:
    """Settings of the appearance (re-identification) model."""

    gpu_id: int = 0
    distance_metric: str = "euclidean"
    trt_logging_level: int = 1
    batch_size: int = 1
    input_layer_name: str = ""
    input_layer_dimensions: list[int] = field(default_factory=list)
    output_layer_names: list[str] = field(default_factory=list)
    enable_fp16: bool = True
    enable_tf32: bool = True
    swap_rb: bool = False

    @staticmethod
    def load_config(config_path) -> "ReIDParams":
        """Read the ``[ReID]`` section of an INI file; absent keys keep defaults."""
        reader = _IniSection(str(config_path), "ReID")
        defaults = ReIDParams()
        return ReIDParams(
            gpu_id=reader.integer("gpu_id", defaults.gpu_id),
            distance_metric=reader.string("distance_metric", defaults.distance_metric),
            trt_logging_level=reader.integer("trt_logging_level", defaults.trt_logging_level),
            batch_size=reader.integer("batch_size", defaults.batch_size),
            input_layer_name=reader.string("input_layer_name", defaults.input_layer_name),
            input_layer_dimensions=reader.items("input_layer_dimensions", _parse_int),
            output_layer_names=reader.items("output_layer_names", str),
            enable_fp16=reader.boolean("enable_fp16", defaults.enable_fp16),
            enable_tf32=reader.boolean("enable_tf32", defaults.enable_tf32),
            swap_rb=reader.boolean("swapRB", defaults.swap_rb),
        )