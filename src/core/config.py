"""
설정: default.yaml + 실행 컨텍스트.

- InitConfig: YAML에서 로드되는 정적 설정 (없으면 기본값)
- InitContext: 실행마다 달라지는 값 (앱 경로, 패키지 매니저 등)
  → 각 컴포넌트에 명시적으로 전달, cwd/환경을 직접 읽지 않음
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.core.logging import DEFAULT_DATE_FORMAT, DEFAULT_LOG_FORMAT
from src.domain.constants import (
    DEFAULT_BROWSERSLIST,
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_ESLINT_CONFIG,
    YARN_LOCK_FILENAME,
)
from src.domain.schemas import PackageManager

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


@dataclass
class InitConfig:
    """초기화 설정."""

    commit_message: str = DEFAULT_COMMIT_MESSAGE
    browserslist: list[str] = field(default_factory=lambda: list(DEFAULT_BROWSERSLIST))
    eslint_config: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_ESLINT_CONFIG))
    banner_title: str = "RIO starter template"
    banner_text: str = (
        "You are using the RIO starter template which is a fork of the "
        "original create-react-app templates"
    )
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    log_datefmt: str = DEFAULT_DATE_FORMAT
    run_log_dir: Path | None = None


@dataclass(frozen=True)
class InitContext:
    """
    실행 컨텍스트.

    Attributes:
        app_path: 앱 디렉터리 (절대 경로)
        app_name: 앱 이름
        template_name: 템플릿 패키지 이름 (없으면 중단)
        package_manager: npm 또는 yarn
        verbose: npm --verbose 전달 여부
        original_directory: 생성기를 실행한 디렉터리 (구버전 호출자용)
    """

    app_path: Path
    app_name: str
    template_name: str | None
    package_manager: PackageManager = PackageManager.NPM
    verbose: bool = False
    original_directory: Path | None = None

    @property
    def use_yarn(self) -> bool:
        return self.package_manager is PackageManager.YARN


def detect_package_manager(app_path: Path) -> PackageManager:
    """yarn.lock이 있으면 Yarn, 아니면 npm."""
    if (app_path / YARN_LOCK_FILENAME).exists():
        return PackageManager.YARN
    return PackageManager.NPM


def build_context(
    app_path: Path,
    app_name: str,
    template_name: str | None,
    verbose: bool = False,
    original_directory: Path | None = None,
) -> InitContext:
    """CLI 인자로부터 InitContext 생성 (패키지 매니저는 여기서 한 번만 결정)."""
    app_path = app_path.resolve()
    return InitContext(
        app_path=app_path,
        app_name=app_name,
        template_name=template_name or None,
        package_manager=detect_package_manager(app_path),
        verbose=verbose,
        original_directory=original_directory.resolve() if original_directory else None,
    )


def load_config(config_path: Path | None = None) -> InitConfig:
    """
    설정 파일 로드.

    파일이 없으면 기본값. 알 수 없는 키는 무시.

    Args:
        config_path: YAML 경로 (None이면 프로젝트 루트의 default.yaml)
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return InitConfig()

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    init_section = data.get("init", {}) or {}
    logging_section = data.get("logging", {}) or {}
    defaults = InitConfig()

    run_log_dir = logging_section.get("run_log_dir")

    return InitConfig(
        commit_message=init_section.get("commit_message", defaults.commit_message),
        browserslist=list(init_section.get("browserslist", defaults.browserslist)),
        eslint_config=dict(init_section.get("eslint_config", defaults.eslint_config)),
        banner_title=init_section.get("banner_title", defaults.banner_title),
        banner_text=init_section.get("banner_text", defaults.banner_text),
        log_level=logging_section.get("level", defaults.log_level),
        log_format=logging_section.get("format", defaults.log_format),
        log_datefmt=logging_section.get("datefmt", defaults.log_datefmt),
        run_log_dir=Path(run_log_dir) if run_log_dir else None,
    )
