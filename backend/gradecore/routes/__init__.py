"""Application route blueprints."""

from .grades import grades_bp

__all__ = ["grades_bp"]
