# src/xquote/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Values are read from environment variables and an optional .env file.
"""

from xquote.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
