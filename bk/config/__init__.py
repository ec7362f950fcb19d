"""Configuration for bk."""

from .settings import get_description_width, get_env_var

__all__ = ["get_description_width", "get_env_var"]
