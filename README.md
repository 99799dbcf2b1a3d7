# botsort

Core pieces of a BoT-SORT style multi-object tracker, built on numpy.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `botsort.kalman.KalmanFilter(dt)`: constant-velocity Kalman filter over the
  state `[x, y, w, h, vx, vy, vw, vh]` (box centre, size and their
  velocities). Its methods `init`, `predict`, `project`, `update` and
  `gating_distance` work on and return `(mean, covariance)` numpy arrays;
  `gating_distance` gives the squared Mahalanobis distance to each
  measurement, over the box centre only when `only_position=True`.
  `botsort.kalman.CHI2INV95` holds the 0.95 chi-square quantiles for 0 to 9
  degrees of freedom. Inputs of the wrong size raise `ValueError`.
- `botsort.kalman_acc.AccKalmanFilter(dt)`: a variant whose process noise
  models acceleration and jerk and whose velocities decay with a half-life of
  two time units; detection noise scales with the box size but never drops
  below a floor, and `project(..., motion_compensated=True)` uses the looser
  noise meant for motion-compensated detections.
- `botsort.distances`: `cosine_distance` and `euclidean_distance` between
  feature vectors, and `iou` between `(left, top, width, height)` boxes,
  with extents counted inclusively in pixels.
- `botsort.params`: the dataclasses `TrackerParams` (thresholds, track
  buffer, frame rate, `lambda_` and so on, with their defaults) and
  `ReIDParams`. `ReIDParams.load_config(path)` reads the `[ReID]` section of
  an INI file; keys that are absent keep their defaults, and a file that
  cannot be read or a value that cannot be parsed raises `ConfigError`.
- `botsort.config`: `fetch_config(config, loader, kind)` resolves a
  configuration given as a `kind` instance, a path handed to `loader`, or
  `None`; `None` or an empty path raises `ConfigError`, any other type
  raises `TypeError`. `requires_load` and `not_empty` tell those cases
  apart. `buffer_size(frame_rate, track_buffer)` gives the number of frames
  a lost track is kept, computed in one unsigned byte.
- `botsort.tracklists`: `merge_track_lists`, `remove_from_list` and
  `remove_duplicate_tracks` keep lists of tracks consistent by `track_id`;
  duplicate removal takes a matrix of IoU distances and, for each pair closer
  than `DUPLICATE_IOU_DISTANCE` (0.15), drops the track with the shorter
  history.

## Example

```python
import numpy as np
from botsort.kalman import KalmanFilter
from botsort.distances import iou

kf = KalmanFilter(1 / 30)
mean, cov = kf.init(np.array([100.0, 50.0, 20.0, 40.0]))
mean, cov = kf.predict(mean, cov)
mean, cov = kf.update(mean, cov, np.array([102.0, 51.0, 20.0, 40.0]))

print(iou([0, 0, 10, 10], [5, 5, 10, 10]))
```

## What it does not do

The package has no tracker loop that takes detections frame by frame and
returns tracks, no track objects of its own, no camera motion compensation,
no appearance feature extraction and no linear assignment solver. It has no
command-line program and no timing or profiling helpers. It supplies the
filters, distances, parameter loading and list bookkeeping such a tracker is
built from.