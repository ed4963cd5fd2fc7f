"""Domain services."""

from .base import Service
from .cover_service import CoverService
from .jwt_service import JWTService
from .post_service import PostService

__all__ = [
    "CoverService",
    "JWTService",
    "PostService",
    "Service",
]
