"""Helpers for command-line tools: functional list utilities, checks, JSON, a rune scanner, file utilities and process helpers."""

__version__ = "0.1.0"