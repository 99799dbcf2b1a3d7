"""Constant-velocity Kalman filter for tracking boxes in image space.

The state is ``[x, y, w, h, vx, vy, vw, vh]`` where ``(x, y)`` is the box
centre and ``(w, h)`` its width and height.  Measurements are ``[x, y, w, h]``.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

STATE_DIM = 8
MEASUREMENT_DIM = 4

#: 0.95 quantile of the chi-square distribution for 0..9 degrees of freedom.
CHI2INV95 = (0.0, 3.8415, 5.9915, 7.8147, 9.4877, 11.070, 12.592, 14.067, 15.507, 16.919)


def _as_vector(values, size: int, what: str) -> np.ndarray:
    vector = np.asarray(values, dtype=float).reshape(-1)
    if vector.shape[0] != size:
        raise ValueError(f"{what} must have {size} elements, got {vector.shape[0]}")
    return vector


def _as_matrix(values, size: int, what: str) -> np.ndarray:
    matrix = np.asarray(values, dtype=float)
    if matrix.shape != (size, size):
        raise ValueError(f"{what} must be a {size}x{size} matrix, got shape {matrix.shape}")
    return matrix


class KalmanFilter:
    """Kalman filter with a constant-velocity motion model scaled by box size."""

    std_weight_position = 1.0 / 20
    std_weight_velocity = 1.0 / 160

    def __init__(self, dt):
        self.dt = float(dt)
        self._motion_mat = np.eye(STATE_DIM)
        self._motion_mat[np.arange(4), np.arange(4, 8)] = self.dt
        self._update_mat = np.eye(MEASUREMENT_DIM, STATE_DIM)

    def init(self, measurement):
        """Create a track state ``(mean, covariance)`` from a first measurement."""
        measurement = _as_vector(measurement, MEASUREMENT_DIM, "measurement")
        mean = np.concatenate([measurement, np.zeros(4)])

        w, h = measurement[2], measurement[3]
        size = np.array([w, h, w, h])
        std = np.concatenate([
            2 * self.std_weight_position * size,
            10 * self.std_weight_velocity * size,
        ])
        return mean, np.diag(np.square(std))

    def predict(self, mean, covariance):
        """Return the state ``(mean, covariance)`` one time step ahead."""
        mean = _as_vector(mean, STATE_DIM, "mean")
        covariance = _as_matrix(covariance, STATE_DIM, "covariance")

        w, h = mean[2], mean[3]
        size = np.array([w, h, w, h])
        std = np.concatenate([
            self.std_weight_position * size,
            self.std_weight_velocity * size,
        ])
        motion_cov = np.diag(np.square(std))

        new_mean = self._motion_mat @ mean
        new_cov = self._motion_mat @ covariance @ self._motion_mat.T + motion_cov
        return new_mean, new_cov

    def project(self, mean, covariance):
        """Project the state distribution to measurement space."""
        mean = _as_vector(mean, STATE_DIM, "mean")
        covariance = _as_matrix(covariance, STATE_DIM, "covariance")

        w, h = mean[2], mean[3]
        innovation_cov = np.diag(np.square(self.std_weight_position * np.array([w, h, w, h])))

        projected_mean = self._update_mat @ mean
        projected_cov = self._update_mat @ covariance @ self._update_mat.T + innovation_cov
        return projected_mean, projected_cov

    def update(self, mean, covariance, measurement):
        """Correct the state ``(mean, covariance)`` with a new measurement."""
        mean = _as_vector(mean, STATE_DIM, "mean")
        covariance = _as_matrix(covariance, STATE_DIM, "covariance")
        measurement = _as_vector(measurement, MEASUREMENT_DIM, "measurement")

        projected_mean, projected_cov = self.project(mean, covariance)
        b = (covariance @ self._update_mat.T).T
        kalman_gain = np.linalg.solve(projected_cov, b).T
        innovation = measurement - projected_mean

        new_mean = mean + kalman_gain @ innovation
        new_cov = covariance - kalman_gain @ projected_cov @ kalman_gain.T
        return new_mean, new_cov

    def gating_distance(self, mean, covariance, measurements, only_position=False):
        """Squared Mahalanobis distance between the state and each measurement.

        With ``only_position`` only the box centre takes part in the distance.
        """
        projected_mean, projected_cov = self.project(mean, covariance)
        points = np.asarray(measurements, dtype=float)
        if points.size == 0:
            return np.zeros(0)
        points = points.reshape(-1, MEASUREMENT_DIM)

        if only_position:
            projected_mean = projected_mean[:2]
            projected_cov = projected_cov[:2, :2]
            points = points[:, :2]

        lower = np.linalg.cholesky(projected_cov)
        diff = (points - projected_mean).T
        y = np.linalg.solve(lower, diff)
        return np.sum(np.square(y), axis=0)