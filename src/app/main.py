"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload --port 3000
- 프로덕션: uv run python -m src.app.main  (default.yaml 의 host/port)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.config import AppConfig, load_config

# Routes
from src.app.routes import index
from src.domain.messages import MessageCatalog
from src.render.html import HtmlRenderer

logger = logging.getLogger(__name__)

# =============================================================================
# Lifespan
# =============================================================================


def configure_logging(config: AppConfig) -> None:
    """루트 로거 레벨/포맷 설정."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 메시지 카탈로그 로드, 템플릿 컴파일 (실패하면 시작 중단)
    종료 시: 정리할 리소스 없음
    """
    # Startup
    config = load_config()
    configure_logging(config)

    app.state.config = config
    app.state.catalog = MessageCatalog.load(locale=config.locale)
    app.state.renderer = HtmlRenderer.from_package(app.state.catalog)
    logger.info(
        f"Serving <desktop>/{config.gantt_dir_name} (locale={app.state.catalog.locale})"
    )

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Gantt Board",
    description="바탕화면 gantt 폴더의 TOML 차트 → HTML 페이지",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# =============================================================================
# Routes
# =============================================================================

app.include_router(index.router, tags=["Index"])


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """default.yaml 의 host/port 로 서버 실행."""
    import uvicorn

    config = load_config()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run()
