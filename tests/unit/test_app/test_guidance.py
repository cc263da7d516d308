"""
test_guidance.py - 성공 안내 출력 테스트
"""

import io
from pathlib import Path

from rich.console import Console

from src.app.guidance import display_cd_path, guidance_commands, print_guidance
from src.core.config import InitConfig, InitContext


class TestDisplayCdPath:
    """cd 안내 경로."""

    def test_app_name_when_under_original_directory(self, tmp_path: Path):
        context = InitContext(
            app_path=tmp_path / "my-app",
            app_name="my-app",
            template_name="t",
            original_directory=tmp_path,
        )

        assert display_cd_path(context) == "my-app"

    def test_absolute_path_otherwise(self, tmp_path: Path):
        context = InitContext(
            app_path=tmp_path / "nested" / "my-app",
            app_name="my-app",
            template_name="t",
            original_directory=tmp_path,
        )

        assert display_cd_path(context) == str(tmp_path / "nested" / "my-app")

    def test_absolute_path_without_original_directory(self, npm_context: InitContext):
        assert display_cd_path(npm_context) == str(npm_context.app_path)


class TestGuidanceCommands:
    """명령 목록."""

    def test_npm_uses_run(self, npm_context: InitContext):
        commands = [cmd for cmd, _ in guidance_commands(npm_context)]

        assert commands == ["npm start", "npm run build", "npm test", "npm run eject"]

    def test_yarn_omits_run(self, yarn_context: InitContext):
        commands = [cmd for cmd, _ in guidance_commands(yarn_context)]

        assert commands == ["yarn start", "yarn build", "yarn test", "yarn eject"]


class TestPrintGuidance:
    """print_guidance 출력."""

    def test_output(self, npm_context: InitContext, console: Console, console_buffer: io.StringIO):
        print_guidance(npm_context, InitConfig(), console=console)

        output = console_buffer.getvalue()
        assert f"Success! Created my-app at {npm_context.app_path}" in output
        assert "RIO starter template" in output
        assert "npm run build" in output
        assert "We suggest that you begin by typing:" in output
        assert "npm start" in output
        assert "README.old.md" not in output
        assert output.rstrip().endswith("Happy hacking!")

    def test_readme_notice(self, npm_context: InitContext, console: Console, console_buffer: io.StringIO):
        print_guidance(npm_context, InitConfig(), readme_renamed=True, console=console)

        assert "we renamed it to `README.old.md`" in console_buffer.getvalue()

    def test_yarn_output(self, yarn_context: InitContext, console: Console, console_buffer: io.StringIO):
        print_guidance(yarn_context, InitConfig(), console=console)

        output = console_buffer.getvalue()
        assert "yarn build" in output
        assert "npm" not in output
