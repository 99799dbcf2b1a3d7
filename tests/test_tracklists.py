from dataclasses import dataclass

import numpy as np
import pytest

from botsort.tracklists import (
    DUPLICATE_IOU_DISTANCE,
    merge_track_lists,
    remove_duplicate_tracks,
    remove_from_list,
)


@dataclass(eq=False)
class FakeTrack:
    track_id: int
    frame_id: int = 0
    start_frame: int = 0


def ids(tracks):
    return [t.track_id for t in tracks]


def test_merge_appends_new_ids_in_order():
    a = [FakeTrack(1), FakeTrack(2)]
    b = [FakeTrack(3), FakeTrack(4)]
    merged = merge_track_lists(a, b)
    assert ids(merged) == [1, 2, 3, 4]
    assert merged[0] is a[0]
    assert merged[2] is b[0]


def test_merge_prefers_tracks_from_first_list():
    a = [FakeTrack(1), FakeTrack(2)]
    b = [FakeTrack(2), FakeTrack(5)]
    merged = merge_track_lists(a, b)
    assert ids(merged) == [1, 2, 5]
    assert merged[1] is a[1]


def test_merge_keeps_duplicates_within_first_list():
    a = [FakeTrack(7), FakeTrack(7)]
    merged = merge_track_lists(a, [])
    assert merged == a


def test_merge_drops_duplicates_within_second_list():
    b = [FakeTrack(4), FakeTrack(4), FakeTrack(6)]
    merged = merge_track_lists([], b)
    assert merged == [b[0], b[2]]


def test_merge_does_not_modify_inputs():
    a = [FakeTrack(1)]
    b = [FakeTrack(2)]
    merge_track_lists(a, b)
    assert ids(a) == [1]
    assert ids(b) == [2]


def test_remove_from_list_by_id():
    tracks = [FakeTrack(1), FakeTrack(2), FakeTrack(3)]
    to_remove = [FakeTrack(2), FakeTrack(9)]
    result = remove_from_list(tracks, to_remove)
    assert result == [tracks[0], tracks[2]]


def test_remove_from_list_with_nothing_to_remove():
    tracks = [FakeTrack(1), FakeTrack(2)]
    assert remove_from_list(tracks, []) == tracks


def test_remove_then_merge_round_trip():
    a = [FakeTrack(1), FakeTrack(2)]
    b = [FakeTrack(3)]
    merged = merge_track_lists(a, b)
    assert remove_from_list(merged, b) == a


def test_duplicates_shorter_history_in_b_is_dropped():
    a = [FakeTrack(1, frame_id=20, start_frame=0)]
    b = [FakeTrack(2, frame_id=20, start_frame=15)]
    kept_a, kept_b = remove_duplicate_tracks(a, b, [[0.05]])
    assert kept_a == a
    assert kept_b == []


def test_duplicates_shorter_history_in_a_is_dropped():
    a = [FakeTrack(1, frame_id=20, start_frame=18)]
    b = [FakeTrack(2, frame_id=20, start_frame=0)]
    kept_a, kept_b = remove_duplicate_tracks(a, b, [[0.05]])
    assert kept_a == []
    assert kept_b == b


def test_duplicates_tie_drops_track_from_a():
    a = [FakeTrack(1, frame_id=10, start_frame=5)]
    b = [FakeTrack(2, frame_id=10, start_frame=5)]
    kept_a, kept_b = remove_duplicate_tracks(a, b, [[0.0]])
    assert kept_a == []
    assert kept_b == b


def test_threshold_is_strict():
    a = [FakeTrack(1, frame_id=5)]
    b = [FakeTrack(2, frame_id=1)]
    kept_a, kept_b = remove_duplicate_tracks(a, b, [[DUPLICATE_IOU_DISTANCE]])
    assert kept_a == a
    assert kept_b == b


def test_far_tracks_are_kept():
    a = [FakeTrack(1), FakeTrack(2)]
    b = [FakeTrack(3), FakeTrack(4)]
    kept_a, kept_b = remove_duplicate_tracks(a, b, np.ones((2, 2)))
    assert kept_a == a
    assert kept_b == b


def test_mixed_pairs_keep_order():
    a = [
        FakeTrack(1, frame_id=30, start_frame=0),
        FakeTrack(2, frame_id=30, start_frame=29),
        FakeTrack(3, frame_id=30, start_frame=0),
    ]
    b = [
        FakeTrack(4, frame_id=30, start_frame=10),
        FakeTrack(5, frame_id=30, start_frame=0),
    ]
    dists = np.array([
        [0.1, 0.9],
        [0.9, 0.1],
        [0.9, 0.9],
    ])
    kept_a, kept_b = remove_duplicate_tracks(a, b, dists)
    assert kept_a == [a[0], a[2]]
    assert kept_b == [b[1]]


def test_empty_lists_pass_through():
    a = [FakeTrack(1)]
    kept_a, kept_b = remove_duplicate_tracks(a, [], np.zeros((1, 0)))
    assert kept_a == a
    assert kept_b == []


def test_shape_mismatch_raises():
    a = [FakeTrack(1), FakeTrack(2)]
    b = [FakeTrack(3)]
    with pytest.raises(ValueError):
        remove_duplicate_tracks(a, b, [[0.5, 0.5]])