"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
"""

from domain_quotes.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
