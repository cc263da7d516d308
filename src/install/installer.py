"""
의존성 설치: 패키지 매니저 호출.

단계:
1. install: 템플릿 런타임 의존성 (react/react-dom 제외) + 미설치 시 react/react-dom
2. dev-install: 템플릿 devDependencies
3. (설치 인자에 typescript 포함 시) TypeScript 설정 검증
4. uninstall: 템플릿 패키지 제거 (스캐폴딩 전용, 런타임 의존성으로 남기지 않음)

어느 단계든 non-zero 종료 → InitAbortError (재시도/롤백 없음)
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from src.core.process import CommandRunner
from src.domain.constants import FRAMEWORK_CORE_PACKAGES, TYPESCRIPT_MARKER
from src.domain.errors import ErrorCodes, InitAbortError
from src.domain.schemas import (
    InstallCommand,
    PackageManager,
    ProjectManifest,
    TemplateDescriptor,
)

logger = logging.getLogger(__name__)

TypeScriptVerifier = Callable[[Path], None]

# =============================================================================
# Commands
# =============================================================================


def install_command(
    package_manager: PackageManager,
    verbose: bool = False,
    dev: bool = False,
) -> InstallCommand:
    """
    설치 명령 생성.

    npm:  npm install --save[-dev] [--verbose]
    yarn: yarnpkg add [--dev]
    """
    if package_manager is PackageManager.YARN:
        extra = ("--dev",) if dev else ()
        return InstallCommand(package_manager.executable, "add", extra)

    extra_args = ["--save-dev" if dev else "--save"]
    if verbose:
        extra_args.append("--verbose")
    return InstallCommand(package_manager.executable, "install", tuple(extra_args))


def uninstall_command(package_manager: PackageManager) -> InstallCommand:
    """npm uninstall / yarnpkg remove."""
    subcommand = "remove" if package_manager is PackageManager.YARN else "uninstall"
    return InstallCommand(package_manager.executable, subcommand)


# =============================================================================
# Package Selection
# =============================================================================


def framework_core_installed(manifest: ProjectManifest) -> bool:
    """react, react-dom 둘 다 앱 dependencies에 있는지."""
    dependencies = manifest.get("dependencies") or {}
    return all(name in dependencies for name in FRAMEWORK_CORE_PACKAGES)


def _pinned(dependencies: dict[str, str]) -> list[str]:
    return [f"{name}@{version}" for name, version in dependencies.items()]


def template_install_packages(
    descriptor: TemplateDescriptor,
    manifest: ProjectManifest,
) -> list[str]:
    """
    install 단계 패키지 인자.

    템플릿 의존성에서 react/react-dom은 제외 (별도 설치).
    앱에 react/react-dom이 없으면 버전 없이 추가.
    """
    runtime = {
        name: version
        for name, version in descriptor.dependencies.items()
        if name not in FRAMEWORK_CORE_PACKAGES
    }
    packages = _pinned(runtime)
    if not framework_core_installed(manifest):
        packages.extend(FRAMEWORK_CORE_PACKAGES)
    return packages


def template_dev_packages(descriptor: TemplateDescriptor) -> list[str]:
    """dev-install 단계 패키지 인자."""
    return _pinned(descriptor.dev_dependencies)


def mentions_typescript(args: Iterable[str]) -> bool:
    return any(TYPESCRIPT_MARKER in arg for arg in args)


# =============================================================================
# Installer
# =============================================================================


class DependencyInstaller:
    """
    패키지 매니저 호출기.

    Usage:
        installer = DependencyInstaller(runner, app_path, PackageManager.NPM)
        installed = installer.install(descriptor, manifest)
        installed += installer.install_dev(descriptor)
        installer.verify_typescript_if_needed(installed)
        installer.uninstall_template("cra-template-rio")
    """

    def __init__(
        self,
        runner: CommandRunner,
        app_path: Path,
        package_manager: PackageManager = PackageManager.NPM,
        verbose: bool = False,
        verify_typescript: TypeScriptVerifier | None = None,
    ):
        self.runner = runner
        self.app_path = app_path
        self.package_manager = package_manager
        self.verbose = verbose
        self.verify_typescript = verify_typescript

    @property
    def executable(self) -> str:
        return self.package_manager.executable

    def install(self, descriptor: TemplateDescriptor, manifest: ProjectManifest) -> list[str]:
        """
        템플릿 런타임 의존성 설치.

        Returns:
            전달한 패키지 인자 (없으면 호출하지 않고 빈 목록)

        Raises:
            InitAbortError: INSTALL_FAILED
        """
        packages = template_install_packages(descriptor, manifest)
        if not packages:
            logger.debug("no template dependencies to install")
            return []

        logger.info(f"Installing template dependencies using {self.executable}...")
        self._run(install_command(self.package_manager, self.verbose), packages, ErrorCodes.INSTALL_FAILED)
        return packages

    def install_dev(self, descriptor: TemplateDescriptor) -> list[str]:
        """
        템플릿 devDependencies 설치.

        Raises:
            InitAbortError: INSTALL_FAILED
        """
        packages = template_dev_packages(descriptor)
        if not packages:
            logger.debug("no template devDependencies to install")
            return []

        logger.info(f"Installing additional RIO dev dependencies using {self.executable}...")
        self._run(
            install_command(self.package_manager, self.verbose, dev=True),
            packages,
            ErrorCodes.INSTALL_FAILED,
        )
        return packages

    def verify_typescript_if_needed(self, installed: list[str]) -> bool:
        """설치 인자에 typescript가 있으면 검증기 실행."""
        if self.verify_typescript is None or not mentions_typescript(installed):
            return False
        self.verify_typescript(self.app_path)
        return True

    def uninstall_template(self, template_name: str) -> None:
        """
        템플릿 패키지 제거.

        Raises:
            InitAbortError: UNINSTALL_FAILED
        """
        logger.info(f"Removing template package using {self.executable}...")
        self._run(uninstall_command(self.package_manager), [template_name], ErrorCodes.UNINSTALL_FAILED)

    def _run(self, command: InstallCommand, packages: list[str], error_code: str) -> None:
        status = self.runner.execute(command.executable, command.argv(packages), cwd=self.app_path)
        if status != 0:
            logger.error(f"`{command.display(packages)}` failed")
            raise InitAbortError(
                error_code,
                command=command.display(packages),
                status=status,
            )
