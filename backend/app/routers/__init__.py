"""
API Routers module.
"""
from app.routers import auth, health, items, users

__all__ = ["auth", "health", "items", "users"]
