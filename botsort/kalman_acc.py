"""Kalman filter whose process noise models acceleration and jerk.

The state is ``[x, y, w, h, vx, vy, vw, vh]`` where ``(x, y)`` is the box
centre and ``(w, h)`` its width and height.  Measurements are ``[x, y, w, h]``.
Velocities decay with a fixed half-life, and the noise of the detections
scales with the box size but never drops below a floor.
"""

from __future__ import annotations

import numpy as np

from botsort.kalman import CHI2INV95, MEASUREMENT_DIM, STATE_DIM, _as_matrix, _as_vector

__all__ = ["AccKalmanFilter", "CHI2INV95"]


class AccKalmanFilter:
    """Kalman filter with velocity decay and acceleration-based process noise."""

    init_pos_weight = 5.0
    init_vel_weight = 15.0
    std_factor_acceleration = 50.25
    std_offset_acceleration = 100.5
    std_factor_detection = 0.10
    min_std_detection = 4.0
    std_factor_motion_compensated_detection = 0.14
    min_std_motion_compensated_detection = 5.0
    velocity_coupling_factor = 0.6
    velocity_half_life = 2

    def __init__(self, dt):
        self.dt = float(dt)
        dt = self.dt
        coupling = self.velocity_coupling_factor

        motion = np.eye(STATE_DIM)
        decay = 0.5 ** (dt / self.velocity_half_life)
        for i in range(4):
            motion[i, i + 4] = coupling * dt
            motion[i, (i + 2) % 4 + 4] = (1.0 - coupling) * dt
            motion[i + 4, i + 4] = decay
        self._motion_mat = motion

        noise = np.eye(STATE_DIM)
        for i in range(4):
            noise[i, i] = dt**4 / 4 + dt**2
            noise[i, i + 4] = dt**3 / 2
            noise[i + 4, i] = dt**3 / 2
            noise[i + 4, i + 4] = dt**2
        self._process_noise = noise

        self._update_mat = np.eye(MEASUREMENT_DIM, STATE_DIM)

    def init(self, measurement):
        """Create a track state ``(mean, covariance)`` from a first measurement."""
        measurement = _as_vector(measurement, MEASUREMENT_DIM, "measurement")
        mean = np.concatenate([measurement, np.zeros(4)])

        w, h = measurement[2], measurement[3]
        size = np.array([w, h, w, h])
        std = np.concatenate([
            np.maximum(self.init_pos_weight * self.std_factor_detection * size,
                       self.min_std_detection),
            np.maximum(self.init_vel_weight * self.std_factor_detection * size,
                       self.min_std_detection),
        ])
        return mean, np.diag(np.square(std))

    def predict(self, mean, covariance):
        """Return the state ``(mean, covariance)`` one time step ahead."""
        mean = _as_vector(mean, STATE_DIM, "mean")
        covariance = _as_matrix(covariance, STATE_DIM, "covariance")

        std = self.std_factor_acceleration * max(mean[2], mean[3]) + self.std_offset_acceleration
        motion_cov = std**2 * self._process_noise

        new_mean = self._motion_mat @ mean
        new_cov = self._motion_mat @ covariance @ self._motion_mat.T + motion_cov
        return new_mean, new_cov

    def project(self, mean, covariance, motion_compensated=False):
        """Project the state distribution to measurement space.

        Motion-compensated detections are assumed to be noisier.
        """
        mean = _as_vector(mean, STATE_DIM, "mean")
        covariance = _as_matrix(covariance, STATE_DIM, "covariance")

        if motion_compensated:
            factor = self.std_factor_motion_compensated_detection
            min_std = self.min_std_motion_compensated_detection
        else:
            factor = self.std_factor_detection
            min_std = self.min_std_detection

        w, h = mean[2], mean[3]
        std = np.maximum(factor * np.array([w, h, w, h]), min_std)
        measurement_cov = np.diag(np.square(std))

        projected_mean = self._update_mat @ mean
        projected_cov = self._update_mat @ covariance @ self._update_mat.T + measurement_cov
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