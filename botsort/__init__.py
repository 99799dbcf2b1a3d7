"""Kalman filters, association distances, parameters and track list bookkeeping for BoT-SORT tracking."""

__version__ = "0.1.0"
__all__ = ["config", "distances", "kalman", "kalman_acc", "params", "tracklists"]