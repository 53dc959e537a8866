"""
Data schemas for the gantt board.

규칙:
- 필드명은 TOML 파일 키와 동일 (title, sections, name, content)
- sections 순서 = 파일 선언 순서 (타임라인 의미가 있으므로 재정렬/중복제거 금지)
- 요청마다 새로 생성, 생성 후 변경 없음 (frozen)
"""

from dataclasses import dataclass, field
from typing import Any

# =============================================================================
# Core Schemas
# =============================================================================


@dataclass(frozen=True)
class Section:
    """차트의 이름 붙은 구간. content 는 자유 텍스트 (Mermaid 작업 줄)."""
    name: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "content": self.content}


@dataclass(frozen=True)
class Chart:
    """
    파일 하나에 해당하는 간트 차트.

    TOML 형식:
        title = "Alpha"

        [[sections]]
        name = "S1"
        content = "task1 :a1, 2024-01-01, 3d"
    """
    title: str
    sections: tuple[Section, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """템플릿 컨텍스트/직렬화용."""
        return {
            "title": self.title,
            "sections": [s.to_dict() for s in self.sections],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Chart":
        """
        파싱된 dict 를 검증하여 Chart 생성.

        알 수 없는 키는 무시한다.

        Raises:
            ValueError: 첫 번째 스키마 위반 내용
        """
        if not isinstance(data, dict):
            raise ValueError("chart must be a table")

        title = data.get("title")
        if title is None:
            raise ValueError("missing field `title`")
        if not isinstance(title, str):
            raise ValueError("`title` must be a string")

        raw_sections = data.get("sections")
        if raw_sections is None:
            raise ValueError("missing field `sections`")
        if not isinstance(raw_sections, list):
            raise ValueError("`sections` must be an array")

        sections: list[Section] = []
        for i, raw in enumerate(raw_sections):
            if not isinstance(raw, dict):
                raise ValueError(f"sections[{i}] must be a table")
            for key in ("name", "content"):
                if key not in raw:
                    raise ValueError(f"sections[{i}]: missing field `{key}`")
                if not isinstance(raw[key], str):
                    raise ValueError(f"sections[{i}]: `{key}` must be a string")
            sections.append(Section(name=raw["name"], content=raw["content"]))

        return cls(title=title, sections=tuple(sections))


@dataclass(frozen=True)
class PageContext:
    """인덱스 페이지 렌더링 컨텍스트. 요청 단위로 생성 후 폐기."""
    charts: tuple[Chart, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"charts": [c.to_dict() for c in self.charts]}
