"""
Configuration package for Animal Spotter.

This package contains settings management and .env file discovery.
"""

__all__ = ["settings", "env_loader"]
