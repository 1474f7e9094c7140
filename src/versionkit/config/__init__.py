"""Lightweight configuration package exports."""

from __future__ import annotations

from .settings import AppSettings, LoggingSettings, get_settings, load_settings

__all__ = ["AppSettings", "LoggingSettings", "get_settings", "load_settings"]
