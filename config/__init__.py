"""
Configuration package.

Settings come from environment variables (or a local `.env` file) through
pydantic-settings; the Supabase client factory lives in `config.database`.
"""

from config.settings import Settings, get_settings, get_settings_for_testing

__all__ = ["Settings", "get_settings", "get_settings_for_testing"]
