"""
VCS 초기화: git init + 최초 커밋.

상태: uninitialized → initialized (1회)
- 이미 git/hg 저장소 안이면 초기화하지 않음
- git이 없거나 init 실패 → 경고, uninitialized 유지
- 커밋 실패 (author 미설정 등) → 경고 + .git 삭제 (반쯤 만든 저장소를 남기지 않음)
  .git 삭제 실패는 무시
"""

import logging
import shutil
from enum import Enum
from pathlib import Path

from src.core.logging import emit_warning
from src.core.process import CommandRunner
from src.domain.constants import DEFAULT_COMMIT_MESSAGE, GIT_DIR_NAME
from src.domain.errors import ErrorCodes
from src.domain.schemas import InitRunLog

logger = logging.getLogger(__name__)


class VcsState(str, Enum):
    """VCS 초기화 상태."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class GitInitializer:
    """
    앱 디렉터리의 git 저장소 초기화/커밋.

    모든 git 호출은 quiet (출력 버림), cwd = app_path.
    """

    def __init__(
        self,
        runner: CommandRunner,
        app_path: Path,
        run_log: InitRunLog | None = None,
    ):
        self.runner = runner
        self.app_path = app_path
        self.run_log = run_log
        self.state = VcsState.UNINITIALIZED
        self._init_attempted = False
        self._commit_attempted = False

    # =========================================================================
    # Probes
    # =========================================================================

    def _ok(self, command: str, args: list[str]) -> bool:
        return self.runner.execute(command, args, cwd=self.app_path, quiet=True) == 0

    def git_available(self) -> bool:
        return self._ok("git", ["--version"])

    def is_in_git_repository(self) -> bool:
        return self._ok("git", ["rev-parse", "--is-inside-work-tree"])

    def is_in_mercurial_repository(self) -> bool:
        return self._ok("hg", ["--cwd", ".", "root"])

    # =========================================================================
    # Transitions
    # =========================================================================

    def try_init(self) -> bool:
        """
        git init 시도.

        Returns:
            이번 호출로 저장소를 초기화했으면 True
        """
        if self._init_attempted:
            return False
        self._init_attempted = True

        if not self.git_available():
            self._warn(ErrorCodes.GIT_INIT_FAILED, "git_init", "Git repo not initialized", "git is not available")
            return False

        if self.is_in_git_repository() or self.is_in_mercurial_repository():
            logger.debug(f"{self.app_path} is already under version control")
            return False

        if not self._ok("git", ["init"]):
            self._warn(ErrorCodes.GIT_INIT_FAILED, "git_init", "Git repo not initialized", "`git init` failed")
            return False

        self.state = VcsState.INITIALIZED
        return True

    def try_commit(self, message: str = DEFAULT_COMMIT_MESSAGE) -> bool:
        """
        전체 파일 커밋 시도 (initialized 상태에서만).

        실패 시 .git을 삭제해 반쯤 만든 저장소를 남기지 않음.

        Returns:
            커밋 성공 여부
        """
        if self.state is not VcsState.INITIALIZED or self._commit_attempted:
            return False
        self._commit_attempted = True

        if self._ok("git", ["add", "-A"]) and self._ok("git", ["commit", "-m", message]):
            return True

        # author 설정이 없는 환경 등
        self._warn(
            ErrorCodes.GIT_COMMIT_FAILED,
            "git_commit",
            "Git commit not created",
            "Removing .git directory...",
        )
        self._remove_git_dir()
        self.state = VcsState.UNINITIALIZED
        return False

    def _remove_git_dir(self) -> None:
        try:
            shutil.rmtree(self.app_path / GIT_DIR_NAME)
        except OSError:
            pass

    def _warn(self, code: str, step: str, message: str, detail: str) -> None:
        if self.run_log is not None:
            emit_warning(self.run_log, code=code, step=step, message=message, detail=detail)
        else:
            logger.warning(f"{message}: {detail}")
