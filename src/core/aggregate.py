"""
Aggregator: (파일명, Chart) 쌍 → 파일명 순 Chart 목록.

파일명의 파일시스템 바이트 순 (os.fsencode), 오름차순, 안정 정렬.
UTF-8 로 디코딩되지 않는 이름 (surrogateescape) 도 원래 바이트로 비교.
"""

import os
from collections.abc import Iterable

from src.domain.schemas import Chart


def sort_charts(pairs: Iterable[tuple[str, Chart]]) -> list[Chart]:
    """파일명 기준 정렬 후 파일명 제거."""
    ordered = sorted(pairs, key=lambda pair: os.fsencode(pair[0]))
    return [chart for _, chart in ordered]
