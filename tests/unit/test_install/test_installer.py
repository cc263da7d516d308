"""
test_installer.py - 의존성 설치 테스트

검증:
- npm / yarn 명령 형태
- react/react-dom 제외 + 미설치 시 추가
- 빈 목록이면 호출하지 않음
- non-zero 종료 → InitAbortError
- typescript 포함 시 검증기 실행
"""

import json
from pathlib import Path

import pytest

from src.domain.errors import ErrorCodes, InitAbortError
from src.domain.schemas import PackageManager, TemplateDescriptor
from src.install.installer import (
    DependencyInstaller,
    framework_core_installed,
    install_command,
    mentions_typescript,
    template_dev_packages,
    template_install_packages,
    uninstall_command,
)
from src.install.typescript import DEFAULT_TSCONFIG, verify_typescript_setup
from src.testing import FakeRunner


@pytest.fixture
def descriptor() -> TemplateDescriptor:
    return TemplateDescriptor(
        dependencies={"react": "^16.12.0", "react-dom": "^16.12.0", "redux": "^4.0.5"},
        dev_dependencies={"prettier": "^1.19.1"},
    )


# =============================================================================
# 명령 생성 테스트
# =============================================================================

class TestCommands:
    """install_command / uninstall_command."""

    def test_npm_install(self):
        cmd = install_command(PackageManager.NPM)

        assert cmd.display(["redux@^4.0.5"]) == "npm install --save redux@^4.0.5"

    def test_npm_install_verbose(self):
        assert install_command(PackageManager.NPM, verbose=True).argv() == ["install", "--save", "--verbose"]

    def test_npm_dev_install(self):
        assert install_command(PackageManager.NPM, dev=True).argv() == ["install", "--save-dev"]

    def test_yarn_add(self):
        cmd = install_command(PackageManager.YARN, verbose=True)

        assert cmd.executable == "yarnpkg"
        assert cmd.argv(["redux"]) == ["add", "redux"]

    def test_yarn_dev_add(self):
        assert install_command(PackageManager.YARN, dev=True).argv() == ["add", "--dev"]

    def test_uninstall(self):
        assert uninstall_command(PackageManager.NPM).display(["x"]) == "npm uninstall x"
        assert uninstall_command(PackageManager.YARN).display(["x"]) == "yarnpkg remove x"


# =============================================================================
# 패키지 선택 테스트
# =============================================================================

class TestPackageSelection:
    """install 인자 계산."""

    def test_framework_core_installed(self):
        assert framework_core_installed({"dependencies": {"react": "1", "react-dom": "1"}})
        assert not framework_core_installed({"dependencies": {"react": "1"}})
        assert not framework_core_installed({})

    def test_core_excluded_when_installed(self, descriptor: TemplateDescriptor, app_package: dict):
        packages = template_install_packages(descriptor, app_package)

        assert packages == ["redux@^4.0.5"]

    def test_core_added_unpinned_when_missing(self, descriptor: TemplateDescriptor):
        packages = template_install_packages(descriptor, {"dependencies": {}})

        assert packages == ["redux@^4.0.5", "react", "react-dom"]
        assert not any(p.startswith("react@") for p in packages)

    def test_dev_packages_pinned(self, descriptor: TemplateDescriptor):
        assert template_dev_packages(descriptor) == ["prettier@^1.19.1"]

    def test_mentions_typescript(self):
        assert mentions_typescript(["typescript@^3.7.0"])
        assert mentions_typescript(["@types/node", "typescript"])
        assert not mentions_typescript(["redux"])


# =============================================================================
# DependencyInstaller 테스트
# =============================================================================

class TestDependencyInstaller:
    """러너 호출 검증."""

    def test_install_runs_in_app_dir(self, app_dir: Path, descriptor, app_package: dict):
        runner = FakeRunner()
        installer = DependencyInstaller(runner, app_dir)

        installed = installer.install(descriptor, app_package)

        assert installed == ["redux@^4.0.5"]
        assert runner.lines == ["npm install --save redux@^4.0.5"]
        assert runner.calls[0].cwd == app_dir

    def test_install_skipped_when_nothing_to_install(self, app_dir: Path, app_package: dict):
        runner = FakeRunner()

        installed = DependencyInstaller(runner, app_dir).install(TemplateDescriptor(), app_package)

        assert installed == []
        assert runner.calls == []

    def test_dev_install_skipped_without_dev_dependencies(self, app_dir: Path):
        runner = FakeRunner()

        assert DependencyInstaller(runner, app_dir).install_dev(TemplateDescriptor()) == []
        assert runner.calls == []

    def test_yarn_dev_install(self, app_dir: Path, descriptor):
        runner = FakeRunner()

        DependencyInstaller(runner, app_dir, PackageManager.YARN).install_dev(descriptor)

        assert runner.lines == ["yarnpkg add --dev prettier@^1.19.1"]

    def test_install_failure_aborts(self, app_dir: Path, descriptor, app_package: dict):
        runner = FakeRunner(statuses={"npm install": 1})

        with pytest.raises(InitAbortError) as exc_info:
            DependencyInstaller(runner, app_dir).install(descriptor, app_package)

        assert exc_info.value.code == ErrorCodes.INSTALL_FAILED
        assert exc_info.value.context["command"] == "npm install --save redux@^4.0.5"
        assert exc_info.value.context["status"] == 1

    def test_uninstall(self, app_dir: Path):
        runner = FakeRunner()

        DependencyInstaller(runner, app_dir, PackageManager.YARN).uninstall_template("cra-template-rio")

        assert runner.lines == ["yarnpkg remove cra-template-rio"]

    def test_uninstall_failure_aborts(self, app_dir: Path):
        runner = FakeRunner(statuses={"npm uninstall": 2})

        with pytest.raises(InitAbortError) as exc_info:
            DependencyInstaller(runner, app_dir).uninstall_template("cra-template-rio")

        assert exc_info.value.code == ErrorCodes.UNINSTALL_FAILED

    def test_typescript_verifier_called(self, app_dir: Path):
        seen: list[Path] = []
        installer = DependencyInstaller(FakeRunner(), app_dir, verify_typescript=seen.append)

        assert installer.verify_typescript_if_needed(["typescript@^3.7.0"]) is True
        assert seen == [app_dir]

    def test_typescript_verifier_not_called(self, app_dir: Path):
        seen: list[Path] = []
        installer = DependencyInstaller(FakeRunner(), app_dir, verify_typescript=seen.append)

        assert installer.verify_typescript_if_needed(["redux@^4.0.5"]) is False
        assert seen == []


# =============================================================================
# verify_typescript_setup 테스트
# =============================================================================

class TestVerifyTypescriptSetup:
    """기본 tsconfig 생성."""

    def test_writes_defaults(self, app_dir: Path):
        (app_dir / "src").mkdir()

        verify_typescript_setup(app_dir)

        tsconfig = json.loads((app_dir / "tsconfig.json").read_text(encoding="utf-8"))
        assert tsconfig == DEFAULT_TSCONFIG
        assert (app_dir / "src" / "react-app-env.d.ts").exists()

    def test_keeps_existing_tsconfig(self, app_dir: Path):
        (app_dir / "tsconfig.json").write_text('{"custom": true}', encoding="utf-8")

        verify_typescript_setup(app_dir)

        assert json.loads((app_dir / "tsconfig.json").read_text(encoding="utf-8")) == {"custom": True}
