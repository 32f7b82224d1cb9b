"""Unit-testing framework with a suite registry, text reporters and an interactive console."""

__version__ = "0.1.0"