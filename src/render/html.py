"""
HTML 렌더러: Jinja2 기반.

- 번들된 index.html 을 "index" 이름으로 등록, 시작 시 1회 컴파일
- 컴파일 실패 → TemplateCompileError (프로세스 시작 중단)
- 렌더링 실패 → RenderError (엔진 진단 메시지 포함)
- 컴파일된 템플릿은 읽기 전용으로 모든 요청이 공유
- 페이지 언어 (lang) 와 빈 목록 문구는 메시지 카탈로그에서 (전역 변수)
"""

from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateError

from src.domain.constants import (
    INDEX_TEMPLATE_FILENAME,
    INDEX_TEMPLATE_NAME,
    NO_CHARTS_MESSAGE,
)
from src.domain.errors import RenderError, TemplateCompileError
from src.domain.messages import MessageCatalog
from src.domain.schemas import PageContext

TEMPLATES_DIR = Path(__file__).parent / "templates"


class HtmlRenderer:
    """
    인덱스 페이지 렌더러.

    Usage:
        renderer = HtmlRenderer.from_package()
        html = renderer.render(PageContext(charts=(chart,)))
    """

    def __init__(self, template: Template):
        self._template = template

    @classmethod
    def from_string(
        cls,
        source: str,
        name: str = INDEX_TEMPLATE_NAME,
        page_globals: dict[str, Any] | None = None,
    ) -> "HtmlRenderer":
        """
        템플릿 문자열을 컴파일하여 렌더러 생성.

        Args:
            source: 템플릿 문자열
            name: 등록 이름
            page_globals: 모든 렌더링에 공통인 템플릿 전역 변수

        Raises:
            TemplateCompileError: 템플릿 문법 오류
        """
        env = Environment(
            loader=DictLoader({name: source}),
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        env.globals.update(page_globals or {})
        try:
            template = env.get_template(name)
        except TemplateError as e:
            raise TemplateCompileError(name, str(e)) from e
        return cls(template)

    @classmethod
    def from_package(cls, catalog: MessageCatalog | None = None) -> "HtmlRenderer":
        """
        번들된 index.html 로 렌더러 생성.

        Args:
            catalog: 페이지 언어/문구용 카탈로그 (None 이면 기본 locale)
        """
        catalog = catalog or MessageCatalog.load()
        source = (TEMPLATES_DIR / INDEX_TEMPLATE_FILENAME).read_text(encoding="utf-8")
        return cls.from_string(
            source,
            page_globals={
                "lang": catalog.locale,
                "empty_text": catalog.get(NO_CHARTS_MESSAGE),
            },
        )

    def render(self, context: PageContext) -> str:
        """
        컨텍스트를 HTML 로 렌더링.

        Raises:
            RenderError: 템플릿 평가 실패
        """
        try:
            return self._template.render(context.to_dict())
        except TemplateError as e:
            raise RenderError(str(e)) from e
