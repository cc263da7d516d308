"""
Error definitions for the init workflow.

분류:
- (a) 입력 누락 (템플릿 이름 없음) → 부작용 전에 중단
- (b) 리소스 누락 (템플릿 디렉터리 없음) → 파일 복사 전에 중단
- (c) 외부 프로세스 실패 (패키지 매니저 non-zero) → 중단, 롤백 없음
- (d) VCS 실패 → 경고로 격하 (InitAbortError 아님)
- (e) 부가 I/O 실패 (README 재작성) → 조용히 무시
"""

from typing import Any


class InitAbortError(Exception):
    """
    초기화 워크플로를 즉시 중단시키는 에러.

    재시도 없음. 이미 설치된 패키지/복사된 파일은 롤백하지 않음.

    Usage:
        raise InitAbortError("INSTALL_FAILED", command="npm", status=1)
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
    """에러/경고 코드 상수."""

    # === Input ===
    TEMPLATE_NAME_MISSING = "TEMPLATE_NAME_MISSING"

    # === Template ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    TEMPLATE_DESCRIPTOR_INVALID = "TEMPLATE_DESCRIPTOR_INVALID"

    # === Manifest ===
    MANIFEST_READ_FAILED = "MANIFEST_READ_FAILED"

    # === Package manager ===
    INSTALL_FAILED = "INSTALL_FAILED"
    UNINSTALL_FAILED = "UNINSTALL_FAILED"

    # === VCS (warning, not abort) ===
    GIT_INIT_FAILED = "GIT_INIT_FAILED"
    GIT_COMMIT_FAILED = "GIT_COMMIT_FAILED"
