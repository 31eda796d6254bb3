"""
Auth Service

Mock Civic sign-in, session persistence and the embedded wallet.
"""

from .auth_session_store import AuthSessionStore
from .factory import create_auth_session_store

__all__ = ["AuthSessionStore", "create_auth_session_store"]
