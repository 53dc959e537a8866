"""
Desktop 폴더 해석: 플랫폼별 사용자 바탕화면 경로.

규칙:
- 설정의 desktop_dir 가 있으면 그대로 사용
- Linux/BSD: user-dirs.dirs 의 XDG_DESKTOP_DIR (없으면 실패, 대체 경로 없음)
- macOS: ~/Desktop
- Windows: Known Folder API (FOLDERID_Desktop, 폴더 리디렉션 반영)
- 해석 불가 → MissingBaseDirectory
"""

import logging
import os
import sys
import uuid
from pathlib import Path

from src.domain.errors import MissingBaseDirectory

logger = logging.getLogger(__name__)

XDG_PLATFORM_PREFIXES = ("linux", "freebsd", "openbsd", "netbsd", "dragonfly")
FOLDERID_DESKTOP = "B4BFCC3A-DB2C-424C-B029-7FE99A87C641"


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def _windows_desktop_dir() -> Path | None:
    """
    SHGetKnownFolderPath(FOLDERID_Desktop) 로 바탕화면 조회.

    폴더 리디렉션 (OneDrive 바탕화면 백업 등)을 따른다. 실패 시 None.
    """
    import ctypes

    class GUID(ctypes.Structure):
        _fields_ = [
            ("Data1", ctypes.c_ulong),
            ("Data2", ctypes.c_ushort),
            ("Data3", ctypes.c_ushort),
            ("Data4", ctypes.c_ubyte * 8),
        ]

    try:
        shell32 = ctypes.windll.shell32  # type: ignore[attr-defined]
        ole32 = ctypes.windll.ole32  # type: ignore[attr-defined]
    except AttributeError:
        return None

    folder_id = GUID.from_buffer_copy(uuid.UUID(FOLDERID_DESKTOP).bytes_le)
    path_ptr = ctypes.c_wchar_p()
    result = shell32.SHGetKnownFolderPath(
        ctypes.byref(folder_id), 0, None, ctypes.byref(path_ptr)
    )
    try:
        if result != 0 or not path_ptr.value:
            logger.warning(f"SHGetKnownFolderPath failed: HRESULT {result:#x}")
            return None
        return Path(path_ptr.value)
    finally:
        ole32.CoTaskMemFree(path_ptr)


def _user_dirs_path(home: Path) -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home and Path(config_home).is_absolute():
        return Path(config_home) / "user-dirs.dirs"
    return home / ".config" / "user-dirs.dirs"


def read_xdg_user_dir(name: str, home: Path, user_dirs: Path | None = None) -> Path | None:
    """
    user-dirs.dirs 에서 XDG_<name>_DIR 항목 읽기.

    형식 (xdg-user-dirs):
        XDG_DESKTOP_DIR="$HOME/Desktop"

    Args:
        name: 항목 이름 (예: "DESKTOP")
        home: 홈 디렉터리
        user_dirs: user-dirs.dirs 경로 (None 이면 XDG_CONFIG_HOME 기준)

    Returns:
        경로, 항목이 없거나 홈과 같으면 (비활성) None
    """
    path = user_dirs or _user_dirs_path(home)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None

    key = f"XDG_{name}_DIR"
    result: Path | None = None

    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, _, value = line.partition("=")
        if k.strip() != key:
            continue

        value = value.strip().strip('"')
        if value == "$HOME":
            resolved = home
        elif value.startswith("$HOME/"):
            resolved = home / value[len("$HOME/"):]
        elif value.startswith("/"):
            resolved = Path(value)
        else:
            # $HOME/ 또는 절대 경로만 허용
            continue
        # 마지막 항목이 우선
        result = resolved

    if result is None or result == home:
        return None
    return result


def resolve_desktop_dir(
    override: Path | None = None,
    platform: str | None = None,
    home: Path | None = None,
) -> Path:
    """
    바탕화면 폴더 경로 해석.

    Args:
        override: 설정으로 지정된 경로 (있으면 우선)
        platform: sys.platform 대체값 (테스트용)
        home: 홈 디렉터리 대체값 (테스트용)

    Returns:
        바탕화면 경로 (존재 여부는 확인하지 않음)

    Raises:
        MissingBaseDirectory: 플랫폼/환경에서 해석 불가
    """
    if override is not None:
        return Path(override).expanduser()

    platform = platform or sys.platform
    home = home or _home_dir()
    if home is None:
        raise MissingBaseDirectory(reason="home directory unknown")

    if platform.startswith(XDG_PLATFORM_PREFIXES):
        desktop = read_xdg_user_dir("DESKTOP", home)
        if desktop is None:
            raise MissingBaseDirectory(reason="XDG_DESKTOP_DIR not configured")
        return desktop

    if platform == "darwin":
        return home / "Desktop"

    if platform == "win32":
        desktop = _windows_desktop_dir()
        if desktop is None:
            raise MissingBaseDirectory(reason="FOLDERID_Desktop lookup failed")
        return desktop

    logger.warning(f"Unsupported platform for desktop lookup: {platform}")
    raise MissingBaseDirectory(reason=f"unsupported platform {platform}")
