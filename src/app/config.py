"""
설정 로드: default.yaml → AppConfig.

파일이 없으면 기본값. 환경 변수/CLI 플래그는 사용하지 않는다.

default.yaml 예:
    server:
      host: "0.0.0.0"
      port: 3000
    gantt:
      dir_name: "gantt"
      desktop_dir: null
    locale: "ja"
    logging:
      level: "INFO"
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_HOST,
    DEFAULT_LOCALE,
    DEFAULT_PORT,
    GANTT_DIR_NAME,
)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


@dataclass
class AppConfig:
    """애플리케이션 설정."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    gantt_dir_name: str = GANTT_DIR_NAME
    desktop_dir: Path | None = None  # None → 플랫폼 바탕화면
    locale: str = DEFAULT_LOCALE
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppConfig":
        server = data.get("server") or {}
        gantt = data.get("gantt") or {}
        logging_cfg = data.get("logging") or {}

        desktop_dir = gantt.get("desktop_dir")

        return cls(
            host=str(server.get("host", DEFAULT_HOST)),
            port=int(server.get("port", DEFAULT_PORT)),
            gantt_dir_name=str(gantt.get("dir_name", GANTT_DIR_NAME)),
            desktop_dir=Path(desktop_dir).expanduser() if desktop_dir else None,
            locale=str(data.get("locale", DEFAULT_LOCALE)),
            log_level=str(logging_cfg.get("level", "INFO")).upper(),
        )


def load_config(config_path: Path | None = None) -> AppConfig:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return AppConfig()

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return AppConfig.from_dict(data)
