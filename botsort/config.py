"""Resolution of tracker configuration given as an object, a file path or nothing.

A configuration may be handed over as a ready parameter object, as the path
of a file to load it from, or as ``None`` (no configuration at all).  An empty
path counts as no configuration.
"""

from __future__ import annotations

import os
from typing import Callable, TypeVar, Union

from botsort.params import ConfigError

__all__ = ["buffer_size", "fetch_config", "not_empty", "requires_load"]

T = TypeVar("T")

Config = Union[T, str, "os.PathLike[str]", None]

_UINT8_MASK = 0xFF


def _is_path(config) -> bool:
    return isinstance(config, (str, os.PathLike))


def requires_load(config) -> bool:
    """True when ``config`` is a non-empty path that has to be loaded."""
    return _is_path(config) and os.fspath(config) != ""


def not_empty(config) -> bool:
    """True when ``config`` holds a parameter object or a non-empty path."""
    if config is None:
        return False
    if _is_path(config):
        return os.fspath(config) != ""
    return True


def fetch_config(config, loader: Callable[[str], T], kind: type) -> T:
    """Return the parameters held by ``config``.

    A ``kind`` instance is returned as it is, a non-empty path is passed to
    ``loader``.  ``None`` or an empty path raises :class:`ConfigError`.
    """
    if isinstance(config, kind):
        return config
    if requires_load(config):
        return loader(os.fspath(config))
    if config is None or _is_path(config):
        raise ConfigError("Config is empty")
    raise TypeError(
        f"config must be a {kind.__name__}, a path or None, not {type(config).__name__}"
    )


def buffer_size(frame_rate, track_buffer) -> int:
    """Number of frames a lost track is kept, scaled by the frame rate.

    Both inputs and the result are held in one unsigned byte, so values wrap
    modulo 256 and the scaled size is truncated towards zero.
    """
    rate = int(frame_rate) & _UINT8_MASK
    buffer = int(track_buffer) & _UINT8_MASK
    return int(rate / 30.0 * buffer) & _UINT8_MASK