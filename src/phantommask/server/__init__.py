"""PhantomMask HTTP API - Starlette app exposing derive, sign and verify."""

from .app import create_app, run
from .config import ServerSettings, get_settings

__all__ = ["create_app", "run", "ServerSettings", "get_settings"]
