"""
Services: 라우트에서 호출하는 처리 단위.

- gantt: 바탕화면 폴더 스캔 → 파싱 → 정렬
"""

from .gantt import GanttService

__all__ = ["GanttService"]
