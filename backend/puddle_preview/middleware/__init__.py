"""
Middleware package for request timing.
"""

from .performance import PerformanceMiddleware

__all__ = ["PerformanceMiddleware"]
