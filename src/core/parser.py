"""
Record parser: TOML 텍스트 → Chart.

- 문법 오류/스키마 위반 → ParseError(path)
- 읽기 실패 (권한, 삭제, 인코딩, 하위폴더) → FileReadError(path)
- 첫 실패에서 즉시 중단 (요청 전체 실패)
"""

import logging
import tomllib
from pathlib import Path

from src.domain.errors import FileReadError, ParseError
from src.domain.schemas import Chart

logger = logging.getLogger(__name__)


def parse_chart(path: Path, text: str) -> Chart:
    """
    파일 내용을 Chart 로 역직렬화.

    Args:
        path: 원본 파일 경로 (에러 메시지용)
        text: 파일 내용

    Returns:
        Chart

    Raises:
        ParseError: TOML 문법 또는 스키마 위반
    """
    try:
        data = tomllib.loads(text)
        return Chart.from_dict(data)
    except (tomllib.TOMLDecodeError, ValueError) as e:
        logger.warning(f"Invalid chart file {path}: {e}")
        raise ParseError(str(path), reason=str(e)) from e


def read_chart(path: Path) -> Chart:
    """
    파일을 읽어 Chart 로 변환.

    Raises:
        FileReadError: 파일 읽기 실패
        ParseError: 내용 형식 오류
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read chart file {path}: {e}")
        raise FileReadError(str(path), reason=str(e)) from e

    chart = parse_chart(path, text)
    logger.debug(f"Parsed {path.name}: {len(chart.sections)} section(s)")
    return chart
