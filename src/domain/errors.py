"""
Error definitions for the gantt board.

규칙:
- 요청 경로의 모든 실패는 GanttError 계열로 명시적으로 발생
- 엔드포인트 경계에서 복구되어 현지화된 HTML 메시지로 변환
- 템플릿 컴파일 실패만은 시작 시점 치명 에러 (프로세스 중단)
"""

from typing import Any


class GanttError(Exception):
    """
    간트 보드 처리 중 발생하는 에러의 기반 클래스.

    code 로 메시지 카탈로그의 문구를 고르고, context 의 값으로 치환한다.

    Usage:
        raise GanttError(ErrorCodes.PARSE_ERROR, path="/home/u/Desktop/gantt/a.toml")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수. 새 코드 추가 시 messages.yaml 에도 문구 추가."""

    # === Directory ===
    MISSING_DESKTOP_DIR = "MISSING_DESKTOP_DIR"
    TARGET_DIR_NOT_FOUND = "TARGET_DIR_NOT_FOUND"

    # === File ===
    PARSE_ERROR = "PARSE_ERROR"
    FILE_READ_ERROR = "FILE_READ_ERROR"

    # === Render ===
    RENDER_FAILED = "RENDER_FAILED"
    TEMPLATE_COMPILE_FAILED = "TEMPLATE_COMPILE_FAILED"  # startup only


# =============================================================================
# Concrete Errors
# =============================================================================

class MissingBaseDirectory(GanttError):
    """플랫폼에서 데스크톱 폴더를 찾지 못함."""

    def __init__(self, **context: Any) -> None:
        super().__init__(ErrorCodes.MISSING_DESKTOP_DIR, **context)


class TargetDirectoryNotFound(GanttError):
    """데스크톱 아래에 대상 폴더가 없거나 읽을 수 없음."""

    def __init__(self, dir_name: str, **context: Any) -> None:
        self.dir_name = dir_name
        super().__init__(ErrorCodes.TARGET_DIR_NOT_FOUND, dir=dir_name, **context)


class ParseError(GanttError):
    """파일 내용이 차트 스키마/TOML 문법에 맞지 않음."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        super().__init__(ErrorCodes.PARSE_ERROR, path=path, reason=reason)


class FileReadError(GanttError):
    """목록에는 있었지만 파일 내용을 읽지 못함 (권한, 삭제, 인코딩 등)."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        super().__init__(ErrorCodes.FILE_READ_ERROR, path=path, reason=reason)


class RenderError(GanttError):
    """요청 시점 템플릿 평가 실패. error 에 엔진 진단 메시지를 담는다."""

    def __init__(self, error: str) -> None:
        super().__init__(ErrorCodes.RENDER_FAILED, error=error)


TemplateRenderError = RenderError


class TemplateCompileError(GanttError):
    """시작 시점 템플릿 컴파일 실패. 요청 경로에서는 발생하지 않는다."""

    def __init__(self, name: str, error: str) -> None:
        super().__init__(ErrorCodes.TEMPLATE_COMPILE_FAILED, name=name, error=error)
