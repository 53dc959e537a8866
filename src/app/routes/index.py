"""
Index Route: 간트 차트 페이지.

- GET / → 바탕화면 gantt 폴더의 차트를 렌더링한 HTML
- 실패 시에도 200 + 현지화된 에러 문구 (상태 코드로 구분하지 않음)
"""

import html
import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from src.app.config import AppConfig
from src.app.services.gantt import GanttService
from src.domain.errors import GanttError
from src.domain.messages import MessageCatalog
from src.render.html import HtmlRenderer

logger = logging.getLogger(__name__)

router = APIRouter()


def build_error_html(catalog: MessageCatalog, error: GanttError) -> str:
    """에러 → HTML 조각 (값은 이스케이프)."""
    return html.escape(catalog.format(error))


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """간트 차트 페이지."""
    config: AppConfig = request.app.state.config
    renderer: HtmlRenderer = request.app.state.renderer
    catalog: MessageCatalog = request.app.state.catalog

    service = GanttService(
        desktop_dir=config.desktop_dir,
        dir_name=config.gantt_dir_name,
    )

    try:
        context = await run_in_threadpool(service.collect)
        rendered = renderer.render(context)
    except GanttError as e:
        logger.warning(f"Index render failed: {e}")
        return HTMLResponse(content=build_error_html(catalog, e))

    return HTMLResponse(content=rendered)
