"""Public API for lightweight utility helpers."""

from .env import env_int, env_str

__all__ = [
    "env_int",
    "env_str",
]
