"""
외부 프로세스 실행: execute(command, args) → exit status

- 동기 실행, timeout/재시도 없음
- 출력은 부모 프로세스에 상속 (quiet=True면 버림)
- 실행 파일이 없으면 127 반환 (셸과 동일)
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND_STATUS = 127


class CommandRunner(Protocol):
    """외부 명령 실행 인터페이스 (테스트에서 fake로 교체)."""

    def execute(
        self,
        command: str,
        args: list[str],
        cwd: Path | None = None,
        quiet: bool = False,
    ) -> int:
        """
        명령 실행 후 종료 코드 반환.

        Args:
            command: 실행 파일 (npm, yarnpkg, git, hg)
            args: 인자 목록
            cwd: 작업 디렉터리
            quiet: True면 stdout/stderr 버림 (probe용)

        Returns:
            종료 코드 (0 = 성공)
        """
        ...


@dataclass
class SubprocessRunner:
    """subprocess 기반 CommandRunner."""

    def execute(
        self,
        command: str,
        args: list[str],
        cwd: Path | None = None,
        quiet: bool = False,
    ) -> int:
        argv = [command, *args]
        logger.debug(f"exec: {' '.join(argv)} (cwd={cwd})")
        stream = subprocess.DEVNULL if quiet else None
        try:
            proc = subprocess.run(
                argv,
                cwd=str(cwd) if cwd else None,
                stdout=stream,
                stderr=stream,
                check=False,
            )
        except FileNotFoundError:
            logger.debug(f"command not found: {command}")
            return COMMAND_NOT_FOUND_STATUS
        return proc.returncode
