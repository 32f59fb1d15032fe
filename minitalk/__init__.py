"""Text messaging between processes over SIGUSR1 and SIGUSR2, one bit per signal."""

__version__ = "0.1.0"