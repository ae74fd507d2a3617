"""Shared pytest fixtures and helpers."""

from .persons import *  # noqa: F401,F403
from .storage import *  # noqa: F401,F403
