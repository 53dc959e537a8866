"""
Directory scanner: <desktop>/<subfolder> 항목 나열.

- 필터링 없음 (파일/하위폴더 모두 반환)
- 순서 보장 없음 (정렬은 aggregate 단계)
- 읽기 전용
"""

from pathlib import Path

from src.domain.errors import TargetDirectoryNotFound


def list_entries(base_dir: Path, subfolder: str) -> list[Path]:
    """
    대상 폴더의 항목 목록.

    Args:
        base_dir: 바탕화면 경로
        subfolder: 하위 폴더 이름 (예: "gantt")

    Returns:
        항목 경로 목록 (순서 미정)

    Raises:
        TargetDirectoryNotFound: 폴더가 없거나 읽을 수 없음
    """
    target = base_dir / subfolder
    try:
        return list(target.iterdir())
    except OSError as e:
        raise TargetDirectoryNotFound(subfolder, reason=str(e)) from e
