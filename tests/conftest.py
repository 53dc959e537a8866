"""
Pytest fixtures for the gantt board tests.

테스트 구성:
- 바탕화면/ gantt 폴더는 tmp_path 아래에 생성
- 앱 설정은 load_config 를 교체하여 tmp 바탕화면을 가리키게 함
"""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.app import main
from src.app.config import AppConfig
from src.domain.schemas import Chart

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def desktop_dir(tmp_path: Path) -> Path:
    """가짜 바탕화면 폴더."""
    desktop = tmp_path / "Desktop"
    desktop.mkdir()
    return desktop


@pytest.fixture
def gantt_dir(desktop_dir: Path) -> Path:
    """<desktop>/gantt 폴더 (비어 있음)."""
    folder = desktop_dir / "gantt"
    folder.mkdir()
    return folder


@pytest.fixture
def write_chart(gantt_dir: Path) -> Callable[[str, str], Path]:
    """gantt 폴더에 파일을 쓰는 헬퍼."""

    def _write(filename: str, content: str) -> Path:
        path = gantt_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Sample Data
# =============================================================================

ALPHA_TOML = """\
title = "Alpha"

[[sections]]
name = "S1"
content = "c1"
"""

BETA_TOML = """\
title = "Beta"
sections = []
"""


@pytest.fixture
def alpha_toml() -> str:
    return ALPHA_TOML


@pytest.fixture
def beta_toml() -> str:
    return BETA_TOML


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def app_config(desktop_dir: Path) -> AppConfig:
    """tmp 바탕화면을 가리키는 설정."""
    return AppConfig(desktop_dir=desktop_dir, locale="ja")


@pytest.fixture
def client(
    app_config: AppConfig, monkeypatch: pytest.MonkeyPatch
) -> Generator[TestClient, None, None]:
    """lifespan 이 실행된 TestClient."""
    monkeypatch.setattr(main, "load_config", lambda *args, **kwargs: app_config)

    with TestClient(main.app) as test_client:
        yield test_client


# =============================================================================
# TOML Writer
# =============================================================================


def dump_chart(chart: Chart) -> str:
    """
    Chart 를 gantt 폴더 파일 형식의 TOML 텍스트로 직렬화.

    tomllib 는 읽기 전용이므로 문자열은 TOML basic string 규칙으로 직접 이스케이프한다.
    """
    lines = [f"title = {_toml_string(chart.title)}"]
    if not chart.sections:
        lines.append("sections = []")
    for section in chart.sections:
        lines.append("")
        lines.append("[[sections]]")
        lines.append(f"name = {_toml_string(section.name)}")
        lines.append(f"content = {_toml_string(section.content)}")
    return "\n".join(lines) + "\n"


def _toml_string(value: str) -> str:
    escaped = []
    for ch in value:
        if ch == "\\":
            escaped.append("\\\\")
        elif ch == '"':
            escaped.append('\\"')
        elif ch == "\n":
            escaped.append("\\n")
        elif ch == "\t":
            escaped.append("\\t")
        elif ch == "\r":
            escaped.append("\\r")
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            escaped.append(f"\\u{ord(ch):04X}")
        else:
            escaped.append(ch)
    return '"' + "".join(escaped) + '"'


@pytest.fixture
def chart_toml() -> Callable[[Chart], str]:
    """Chart → TOML 텍스트 헬퍼."""
    return dump_chart
