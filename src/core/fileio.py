"""
파일 I/O: 원자적 JSON 쓰기.

- 중간 상태 없음: temp → replace
- 가능한 환경에서 fsync (파일 + 디렉토리), 실패 시 경고만
- 권한: 기존 파일 mode 유지, 새 파일은 umask 적용 (0o666 & ~umask)
- package.json은 플랫폼 줄바꿈으로 끝나야 함
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

NEW_FILE_MODE = 0o666


def _fsync_dir(dir_path: Path) -> None:
    """
    디렉토리 fsync (가능한 환경에서).

    Linux에서 주로 유효하며, Windows 등에서는 조용히 건너뜀.
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        logger.debug(f"Directory fsync skipped for {dir_path}: {e}")


def _target_mode(path: Path) -> int:
    """기존 파일이면 그 mode, 새 파일이면 umask를 적용한 기본 mode."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        # umask는 설정해야만 읽을 수 있음 (단일 스레드 CLI)
        umask = os.umask(0)
        os.umask(umask)
        return NEW_FILE_MODE & ~umask


def dump_json(data: Any) -> str:
    """2칸 들여쓰기 JSON + 플랫폼 줄바꿈."""
    return json.dumps(data, indent=2, ensure_ascii=False) + os.linesep


def atomic_write_json(path: Path, data: Any) -> None:
    """
    원자적 JSON 쓰기.

    실패 시 temp 파일을 정리하고 예외를 그대로 올림.
    기존 파일은 replace 성공 전까지 보존됨.

    Args:
        path: 저장할 파일 경로
        data: JSON 직렬화할 데이터
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)

    temp_path = None
    try:
        # newline="" → os.linesep을 그대로 기록 (Windows에서 \r\r\n 방지)
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
            newline="",
        ) as f:
            temp_path = Path(f.name)
            f.write(dump_json(data))
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(f"File fsync failed for {path}: {e}")

        # NamedTemporaryFile은 0o600으로 생성됨
        os.chmod(temp_path, mode)
        os.replace(temp_path, path)
        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise
