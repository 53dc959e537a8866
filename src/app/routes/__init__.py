"""
FastAPI Routes.

페이지 라우트 (HTML) 하나: GET /
"""

from . import index

__all__ = ["index"]
