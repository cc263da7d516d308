"""
test_config.py - 설정/컨텍스트 테스트
"""

from pathlib import Path

from src.core.config import (
    InitConfig,
    build_context,
    detect_package_manager,
    load_config,
)
from src.domain.constants import DEFAULT_BROWSERSLIST, DEFAULT_COMMIT_MESSAGE
from src.domain.schemas import PackageManager


class TestLoadConfig:
    """load_config 함수 테스트."""

    def test_default_yaml_matches_code_defaults(self, default_config_path: Path):
        config = load_config(default_config_path)

        assert config.commit_message == DEFAULT_COMMIT_MESSAGE
        assert config.browserslist == DEFAULT_BROWSERSLIST
        assert config.eslint_config == {"extends": "react-app"}
        assert config.banner_title == "RIO starter template"
        assert config.run_log_dir is None

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.yaml") == InitConfig()

    def test_partial_override(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        path.write_text(
            "init:\n  commit_message: Initial commit\nlogging:\n  run_log_dir: logs\n",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.commit_message == "Initial commit"
        assert config.browserslist == DEFAULT_BROWSERSLIST
        assert config.run_log_dir == Path("logs")

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == InitConfig()


class TestContext:
    """패키지 매니저 감지 / 컨텍스트 생성."""

    def test_npm_without_lockfile(self, app_dir: Path):
        assert detect_package_manager(app_dir) is PackageManager.NPM

    def test_yarn_with_lockfile(self, app_dir: Path):
        (app_dir / "yarn.lock").write_text("", encoding="utf-8")

        assert detect_package_manager(app_dir) is PackageManager.YARN

    def test_build_context(self, app_dir: Path):
        (app_dir / "yarn.lock").write_text("", encoding="utf-8")

        context = build_context(app_dir, "my-app", "cra-template-rio", verbose=True)

        assert context.app_path.is_absolute()
        assert context.use_yarn is True
        assert context.verbose is True

    def test_empty_template_name_normalized(self, app_dir: Path):
        assert build_context(app_dir, "my-app", "").template_name is None
