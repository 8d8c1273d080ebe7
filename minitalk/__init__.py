"""Bit-by-bit messaging between processes over SIGUSR1 and SIGUSR2, with small text helpers."""

__version__ = "1.0.0"

__all__ = ["client", "lines", "printf", "protocol", "server", "signals", "strings"]