"""
Gantt Service: 바탕화면 폴더 → PageContext

처리 순서 (각 단계 실패 시 즉시 중단):
1. 바탕화면 해석 → MissingBaseDirectory
2. 대상 폴더 나열 → TargetDirectoryNotFound
3. 파일별 읽기/파싱 → FileReadError / ParseError
4. 파일명 순 정렬, 파일명 제거
"""

import logging
from pathlib import Path

from src.core.aggregate import sort_charts
from src.core.desktop import resolve_desktop_dir
from src.core.parser import read_chart
from src.core.scanner import list_entries
from src.domain.constants import GANTT_DIR_NAME
from src.domain.schemas import Chart, PageContext

logger = logging.getLogger(__name__)


class GanttService:
    """
    간트 차트 수집 서비스.

    요청마다 생성, 상태 없음.
    """

    def __init__(
        self,
        desktop_dir: Path | None = None,
        dir_name: str = GANTT_DIR_NAME,
    ):
        """
        Args:
            desktop_dir: 바탕화면 경로 (None 이면 플랫폼 해석)
            dir_name: 바탕화면 아래 차트 폴더 이름
        """
        self.desktop_dir = desktop_dir
        self.dir_name = dir_name

    def collect(self) -> PageContext:
        """
        폴더의 모든 차트를 읽어 PageContext 생성.

        Raises:
            GanttError: 단계별 실패 (첫 실패에서 중단)
        """
        desktop = resolve_desktop_dir(self.desktop_dir)
        entries = list_entries(desktop, self.dir_name)

        pairs: list[tuple[str, Chart]] = []
        for path in entries:
            pairs.append((path.name, read_chart(path)))

        charts = sort_charts(pairs)
        logger.info(f"Collected {len(charts)} chart(s) from {desktop / self.dir_name}")
        return PageContext(charts=tuple(charts))
