"""
Domain Constants: 간트 보드 전역 상수.

폴더명, 템플릿 이름, 서버 기본값 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Source Folder (입력 폴더)
# =============================================================================
# <desktop>/gantt/
# ├── a.toml
# └── b.toml
# 파일명 사전순 = 페이지 표시 순서

GANTT_DIR_NAME = "gantt"

# =============================================================================
# Template (템플릿)
# =============================================================================

INDEX_TEMPLATE_NAME = "index"
INDEX_TEMPLATE_FILENAME = "index.html"

# =============================================================================
# Server (서버 기본값)
# =============================================================================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# =============================================================================
# Locale (메시지 언어)
# =============================================================================

DEFAULT_LOCALE = "ja"

# 에러가 아닌 페이지 문구 (messages.yaml 키)
NO_CHARTS_MESSAGE = "NO_CHARTS"
