"""
App layer: 웹 서버 (FastAPI).

역할:
- GET / 하나, 바탕화면 gantt 폴더를 요청마다 다시 읽어 렌더링
- 설정/템플릿/메시지 카탈로그는 시작 시 1회 로드

주의: 폴더 구분
- src/render/templates/ → Jinja2 HTML (index.html)
- src/domain/messages.yaml → 에러 문구 카탈로그
- default.yaml (루트) → 서버 설정
"""
