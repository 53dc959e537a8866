"""
test_gantt_service.py - GanttService 테스트

검증 포인트:
1. 파일명 순 정렬
2. 빈 폴더 → 차트 0개 (에러 아님)
3. 첫 실패에서 요청 전체 중단
"""

from pathlib import Path

import pytest

from src.app.services.gantt import GanttService
from src.domain.errors import (
    FileReadError,
    MissingBaseDirectory,
    ParseError,
    TargetDirectoryNotFound,
)
from src.domain.schemas import Chart, Section


class TestCollect:
    """GanttService.collect 테스트."""

    def test_charts_sorted_by_filename(self, desktop_dir: Path, write_chart, alpha_toml, beta_toml):
        write_chart("b.toml", beta_toml)
        write_chart("a.toml", alpha_toml)

        context = GanttService(desktop_dir=desktop_dir).collect()

        assert context.charts == (
            Chart("Alpha", (Section("S1", "c1"),)),
            Chart("Beta"),
        )

    def test_sorting_ignores_enumeration_order(
        self, desktop_dir: Path, write_chart, monkeypatch: pytest.MonkeyPatch
    ):
        """스캐너가 역순으로 돌려줘도 결과는 파일명 순."""
        for name in ["c", "a", "b"]:
            write_chart(f"{name}.toml", f'title = "{name}"\nsections = []\n')

        from src.app.services import gantt as gantt_module

        original = gantt_module.list_entries
        monkeypatch.setattr(
            gantt_module,
            "list_entries",
            lambda base, sub: sorted(original(base, sub), reverse=True),
        )

        context = GanttService(desktop_dir=desktop_dir).collect()
        assert [c.title for c in context.charts] == ["a", "b", "c"]

    def test_empty_folder(self, desktop_dir: Path, gantt_dir: Path):
        context = GanttService(desktop_dir=desktop_dir).collect()
        assert context.charts == ()

    def test_missing_folder(self, desktop_dir: Path):
        with pytest.raises(TargetDirectoryNotFound):
            GanttService(desktop_dir=desktop_dir).collect()

    def test_custom_folder_name(self, desktop_dir: Path, alpha_toml):
        folder = desktop_dir / "plans"
        folder.mkdir()
        (folder / "a.toml").write_text(alpha_toml, encoding="utf-8")

        context = GanttService(desktop_dir=desktop_dir, dir_name="plans").collect()
        assert [c.title for c in context.charts] == ["Alpha"]

    def test_one_bad_file_fails_all(self, desktop_dir: Path, write_chart, alpha_toml):
        write_chart("a.toml", alpha_toml)
        bad = write_chart("z.toml", "title = 3\nsections = []\n")

        with pytest.raises(ParseError) as exc_info:
            GanttService(desktop_dir=desktop_dir).collect()

        assert exc_info.value.path == str(bad)

    def test_unreadable_entry(self, desktop_dir: Path, gantt_dir: Path):
        (gantt_dir / "nested").mkdir()

        with pytest.raises(FileReadError):
            GanttService(desktop_dir=desktop_dir).collect()

    def test_desktop_unresolvable(self, monkeypatch: pytest.MonkeyPatch):
        from src.app.services import gantt as gantt_module

        def _fail(override=None):
            raise MissingBaseDirectory()

        monkeypatch.setattr(gantt_module, "resolve_desktop_dir", _fail)

        with pytest.raises(MissingBaseDirectory):
            GanttService().collect()
