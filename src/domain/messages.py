"""
Message catalog: 에러 코드 → 현지화된 사용자 문구.

messages.yaml 참조:
- locale 별 카탈로그 (ja 기본)
- 문구 안의 {key} 는 에러 context 로 치환
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import DEFAULT_LOCALE
from src.domain.errors import GanttError

logger = logging.getLogger(__name__)

MESSAGES_PATH = Path(__file__).parent / "messages.yaml"


class MessageCatalog:
    """
    에러 메시지 카탈로그.

    Usage:
        catalog = MessageCatalog.load(locale="ja")
        text = catalog.format(error)
    """

    def __init__(
        self,
        catalogs: dict[str, dict[str, str]],
        locale: str = DEFAULT_LOCALE,
    ):
        if DEFAULT_LOCALE not in catalogs:
            raise ValueError(f"message catalog must define '{DEFAULT_LOCALE}'")

        if locale not in catalogs:
            logger.warning(
                f"Unknown locale '{locale}', falling back to '{DEFAULT_LOCALE}'"
            )
            locale = DEFAULT_LOCALE

        self.locale = locale
        self._catalogs = catalogs

    @classmethod
    def load(
        cls,
        locale: str = DEFAULT_LOCALE,
        path: Path | None = None,
    ) -> "MessageCatalog":
        """YAML 파일에서 카탈로그 로드."""
        with open(path or MESSAGES_PATH, encoding="utf-8") as f:
            data: dict[str, dict[str, str]] = yaml.safe_load(f) or {}
        return cls(data, locale=locale)

    def get(self, code: str) -> str:
        """코드의 문구 (현재 locale → 기본 locale → 코드 자체)."""
        text = self._catalogs[self.locale].get(code)
        if text is None:
            text = self._catalogs[DEFAULT_LOCALE].get(code, code)
        return text

    def format(self, error: GanttError) -> str:
        """에러를 사용자 문구로 변환."""
        template = self.get(error.code)
        context: dict[str, Any] = {k: str(v) for k, v in error.context.items()}
        try:
            return template.format(**context)
        except (KeyError, IndexError, ValueError):
            logger.warning(f"Message for {error.code} could not be formatted")
            return template
