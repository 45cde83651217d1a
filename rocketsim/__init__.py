"""Terminal rocket flight game with altitude-dependent gravity and switchable stages."""

__version__ = "0.1.0"