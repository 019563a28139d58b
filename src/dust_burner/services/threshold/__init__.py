"""Minimum burn threshold."""

from dust_burner.services.threshold.threshold_source import ThresholdSource

__all__ = ["ThresholdSource"]
