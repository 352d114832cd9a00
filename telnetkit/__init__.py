"""Telnet client toolkit: option negotiation, terminal buffer, key codes, ports and console helpers."""

__version__ = "1.0.0"

__all__ = ["client", "cmdline", "host", "keycodes", "log", "telnet", "terminal"]