"""
Data schemas for the init workflow and the session reducer.

- 매니페스트는 dict 그대로 다룸 (JSON 왕복 시 키 순서 보존)
- 템플릿 descriptor, 설치 명령, 실행 로그는 dataclass
- 세션 상태는 불변 (frozen) → reducer가 새 객체 반환
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ProjectManifest = dict[str, Any]

# =============================================================================
# Package Manager
# =============================================================================


class PackageManager(str, Enum):
    """패키지 매니저 종류. yarn.lock 유무로 결정."""

    NPM = "npm"
    YARN = "yarn"

    @property
    def executable(self) -> str:
        """실행 파일 이름 (yarn은 yarnpkg로 호출)."""
        return "yarnpkg" if self is PackageManager.YARN else "npm"

    @property
    def display_command(self) -> str:
        """안내 메시지에 표시할 명령 이름."""
        return self.value


# =============================================================================
# Template Schemas
# =============================================================================


@dataclass(frozen=True)
class TemplateDescriptor:
    """
    템플릿 선언 (template.json).

    package: 앱 package.json에 병합될 부분 매니페스트
    dependencies / devDependencies: 이름 → 버전
    """

    package: dict[str, Any] = field(default_factory=dict)
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    legacy_scripts: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TemplateDescriptor":
        package = data.get("package") or {}
        # 구버전 템플릿: dependencies/scripts를 최상위에 선언
        dependencies = package.get("dependencies") or data.get("dependencies") or {}
        dev_dependencies = package.get("devDependencies") or data.get("devDependencies") or {}
        return cls(
            package=dict(package),
            dependencies=dict(dependencies),
            dev_dependencies=dict(dev_dependencies),
            legacy_scripts=dict(data.get("scripts") or {}),
        )

    @property
    def scripts(self) -> dict[str, str]:
        """템플릿 스크립트 (package.scripts 우선, 없으면 최상위 scripts)."""
        return dict(self.package.get("scripts") or self.legacy_scripts)


@dataclass
class MaterializeResult:
    """템플릿 파일 복사 결과."""

    template_dir: str
    readme_renamed: bool = False
    readme_rewritten: bool = False
    gitignore_merged: bool = False
    copied_files: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class InstallCommand:
    """
    패키지 매니저 호출 명령.

    argv = [subcommand, *extra_args, *packages]
    """

    executable: str
    subcommand: str
    extra_args: tuple[str, ...] = ()

    def argv(self, packages: list[str] | None = None) -> list[str]:
        return [self.subcommand, *self.extra_args, *(packages or [])]

    def display(self, packages: list[str] | None = None) -> str:
        return " ".join([self.executable, *self.argv(packages)])


# =============================================================================
# Session Schemas (Profile Adapter)
# =============================================================================


@dataclass(frozen=True)
class UserSessionProfile:
    """OAuth 사용자 프로필 (외부 입력, 불변)."""

    email: str
    given_name: str
    family_name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserSessionProfile":
        return cls(
            email=data["email"],
            given_name=data["givenName"],
            family_name=data["familyName"],
        )


@dataclass(frozen=True)
class LegacyUserInfo:
    """
    구 "whoami" 응답 형태.

    roles는 항상 빈 값. 신규 IAM에서 role 정보가 제거될 예정이라
    채우지 않음 (알려진 제약, 버그 아님).
    """

    email: str
    first_name: str
    last_name: str
    roles: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "roles": list(self.roles),
        }


@dataclass(frozen=True)
class SessionState:
    """로그인 세션 상태."""

    error_message: str = ""
    has_user_info: bool = False
    is_logged_in: bool = False
    show_error: bool = False
    user_info: LegacyUserInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "errorMessage": self.error_message,
            "hasUserInfo": self.has_user_info,
            "isLoggedIn": self.is_logged_in,
            "showError": self.show_error,
            "userInfo": self.user_info.to_dict() if self.user_info else None,
        }


@dataclass(frozen=True)
class Action:
    """reducer 이벤트."""

    type: str
    payload: Any = None


# =============================================================================
# Run Log Schemas
# =============================================================================


@dataclass
class WarningLog:
    """
    경고 로그.

    경고 필수 컨텍스트: level, code, step, message, detail
    """

    level: str = "warning"
    code: str = ""
    step: str = ""
    message: str = ""
    detail: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "code": self.code,
            "step": self.step,
            "message": self.message,
            "detail": self.detail,
        }


@dataclass
class StepLog:
    """워크플로 단계 기록."""

    step: str
    status: str  # done, skipped
    timestamp: str
    detail: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "step": self.step,
            "status": self.status,
            "timestamp": self.timestamp,
            "detail": self.detail,
        }


@dataclass
class InitRunLog:
    """
    초기화 실행 로그.

    invocation 단위 결과 및 메타데이터.
    """

    run_id: str
    app_name: str
    app_path: str
    started_at: str  # ISO 8601
    template_name: str | None = None
    package_manager: str | None = None
    finished_at: str | None = None
    result: str = "pending"  # pending, success, failed

    steps: list[StepLog] = field(default_factory=list)
    warnings: list[WarningLog] = field(default_factory=list)

    error_code: str | None = None
    error_context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "app_name": self.app_name,
            "app_path": self.app_path,
            "template_name": self.template_name,
            "package_manager": self.package_manager,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "result": self.result,
            "steps": [s.to_dict() for s in self.steps],
            "warnings": [w.to_dict() for w in self.warnings],
            "error_code": self.error_code,
            "error_context": self.error_context,
        }
