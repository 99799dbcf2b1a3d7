"""Set operations on lists of tracks, keyed by track identity.

Tracks are any objects with an integer ``track_id``.  Duplicate removal also
needs ``frame_id`` (last frame the track was updated) and ``start_frame``.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, TypeVar

import numpy as np

__all__ = [
    "DUPLICATE_IOU_DISTANCE",
    "merge_track_lists",
    "remove_duplicate_tracks",
    "remove_from_list",
]

#: Two tracks closer than this IoU distance are treated as the same object.
DUPLICATE_IOU_DISTANCE = 0.15


class _Identified(Protocol):
    track_id: int


class _Timed(Protocol):
    track_id: int
    frame_id: int
    start_frame: int


TrackT = TypeVar("TrackT", bound=_Identified)
TimedT = TypeVar("TimedT", bound=_Timed)


def merge_track_lists(tracks_a: Iterable[TrackT], tracks_b: Iterable[TrackT]) -> list[TrackT]:
    """Return all tracks of ``tracks_a`` followed by those of ``tracks_b`` with a new id.

    Every track of ``tracks_a`` is kept; a track of ``tracks_b`` is added only
    if no track with the same id has been seen before.
    """
    merged = list(tracks_a)
    seen = {track.track_id for track in merged}
    for track in tracks_b:
        if track.track_id not in seen:
            seen.add(track.track_id)
            merged.append(track)
    return merged


def remove_from_list(
    tracks: Iterable[TrackT], tracks_to_remove: Iterable[TrackT]
) -> list[TrackT]:
    """Return the tracks whose id is not among the ids of ``tracks_to_remove``."""
    removed_ids = {track.track_id for track in tracks_to_remove}
    return [track for track in tracks if track.track_id not in removed_ids]


def remove_duplicate_tracks(
    tracks_a: Sequence[TimedT], tracks_b: Sequence[TimedT], iou_dists
) -> tuple[list[TimedT], list[TimedT]]:
    """Drop tracks that overlap a track of the other list almost entirely.

    ``iou_dists[i][j]`` is the IoU distance between ``tracks_a[i]`` and
    ``tracks_b[j]``.  For each pair closer than :data:`DUPLICATE_IOU_DISTANCE`
    the track with the shorter history is dropped; on a tie the one from
    ``tracks_a`` goes.  Returns the cleaned ``(tracks_a, tracks_b)``.
    """
    tracks_a = list(tracks_a)
    tracks_b = list(tracks_b)
    if not tracks_a or not tracks_b:
        return tracks_a, tracks_b

    dists = np.asarray(iou_dists, dtype=float)
    expected = (len(tracks_a), len(tracks_b))
    if dists.shape != expected:
        raise ValueError(f"iou_dists must have shape {expected}, got {dists.shape}")

    dup_a: set[int] = set()
    dup_b: set[int] = set()
    for i, j in np.argwhere(dists < DUPLICATE_IOU_DISTANCE):
        track_a, track_b = tracks_a[i], tracks_b[j]
        time_a = track_a.frame_id - track_a.start_frame
        time_b = track_b.frame_id - track_b.start_frame
        if time_a > time_b:
            dup_b.add(int(j))
        else:
            dup_a.add(int(i))

    kept_a = [track for i, track in enumerate(tracks_a) if i not in dup_a]
    kept_b = [track for j, track in enumerate(tracks_b) if j not in dup_b]
    return kept_a, kept_b