"""
Run logging: init run log schema, steps, warnings

규칙:
- 경고 필수 컨텍스트: level, code, step, message, detail
- VCS 실패 등 비치명적 실패는 경고로 기록하고 계속 진행
- 치명적 실패는 error_code + error_context로 complete
"""

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from src.core.fileio import atomic_write_json
from src.core.ids import generate_run_id
from src.domain.constants import RUN_LOG_FILENAME_PREFIX
from src.domain.schemas import InitRunLog, StepLog, WarningLog

logger = logging.getLogger(__name__)

# =============================================================================
# Console Logging Setup
# =============================================================================

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: str = "INFO",
    fmt: str = DEFAULT_LOG_FORMAT,
    datefmt: str = DEFAULT_DATE_FORMAT,
) -> None:
    """CLI용 루트 로거 설정."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt,
        datefmt=datefmt,
    )


# =============================================================================
# Run Log Management
# =============================================================================


def create_run_log(
    app_name: str,
    app_path: Path,
    template_name: str | None = None,
) -> InitRunLog:
    """
    새 InitRunLog 생성.

    Args:
        app_name: 앱 이름
        app_path: 앱 디렉터리
        template_name: 템플릿 패키지 이름

    Returns:
        초기화된 InitRunLog
    """
    now = datetime.now(UTC).isoformat()

    return InitRunLog(
        run_id=generate_run_id(),
        app_name=app_name,
        app_path=str(app_path),
        template_name=template_name,
        started_at=now,
        result="pending",
    )


def record_step(
    run_log: InitRunLog,
    step: str,
    status: str = "done",
    detail: str | None = None,
) -> None:
    """워크플로 단계 기록."""
    run_log.steps.append(
        StepLog(
            step=step,
            status=status,
            timestamp=datetime.now(UTC).isoformat(),
            detail=detail,
        )
    )
    logger.debug(f"step {step}: {status}" + (f" ({detail})" if detail else ""))


def emit_warning(
    run_log: InitRunLog,
    code: str,
    step: str,
    message: str,
    detail: str | None = None,
) -> None:
    """
    경고 이벤트 기록 + 콘솔 경고 출력.

    Args:
        run_log: InitRunLog 인스턴스
        code: 경고 코드 (ErrorCodes)
        step: 발생 단계 (git_init, git_commit 등)
        message: 경고 메시지
        detail: 원인 상세
    """
    run_log.warnings.append(
        WarningLog(
            level="warning",
            code=code,
            step=step,
            message=message,
            detail=detail,
        )
    )
    logger.warning(message + (f": {detail}" if detail else ""))


def complete_run_log(
    run_log: InitRunLog,
    success: bool,
    error_code: str | None = None,
    error_context: dict[str, Any] | None = None,
) -> None:
    """
    InitRunLog 완료 처리.

    Args:
        run_log: InitRunLog 인스턴스
        success: 성공 여부
        error_code: 에러 코드 (실패 시)
        error_context: 에러 컨텍스트 (실패 시)
    """
    run_log.finished_at = datetime.now(UTC).isoformat()
    run_log.result = "success" if success else "failed"

    if not success:
        run_log.error_code = error_code
        run_log.error_context = error_context


def save_run_log(run_log: InitRunLog, logs_dir: Path) -> Path:
    """
    InitRunLog를 파일로 저장.

    Returns:
        저장된 파일 경로
    """
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{RUN_LOG_FILENAME_PREFIX}{run_log.run_id}.json"
    atomic_write_json(log_path, run_log.to_dict())
    return log_path
