"""
Render layer: HTML 출력 생성.

역할:
- 템플릿 + PageContext → 인덱스 페이지
- Jinja2
"""

from .html import HtmlRenderer

__all__ = [
    "HtmlRenderer",
]
