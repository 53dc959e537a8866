"""
Core layer: 파일 시스템 → 차트 데이터.

역할:
- 바탕화면 해석, 폴더 스캔, TOML 파싱, 파일명 정렬
- 요청 간 공유 상태 없음 (읽기 전용)
"""

from .aggregate import sort_charts
from .desktop import resolve_desktop_dir
from .parser import parse_chart, read_chart
from .scanner import list_entries

__all__ = [
    # desktop
    "resolve_desktop_dir",
    # scanner
    "list_entries",
    # parser
    "parse_chart",
    "read_chart",
    # aggregate
    "sort_charts",
]
