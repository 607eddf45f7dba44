"""Text messaging between processes over SIGUSR1 and SIGUSR2, with printf, number and string helpers."""

__version__ = "0.1.0"