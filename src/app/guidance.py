"""
성공 안내 출력.

앱 생성 후 사용할 수 있는 명령과 cd 경로를 안내.
Yarn이면 `yarn build`, npm이면 `npm run build` 형태로 표시.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from src.core.config import InitConfig, InitContext


def display_cd_path(context: InitContext) -> str:
    """
    안내할 cd 경로.

    생성기를 실행한 디렉터리 바로 아래에 앱이 만들어졌으면 앱 이름만,
    아니면 절대 경로. original_directory가 없는 구버전 호출자도 지원.
    """
    original = context.original_directory
    if original is not None and Path(original) / context.app_name == context.app_path:
        return context.app_name
    return str(context.app_path)


def guidance_commands(context: InitContext) -> list[tuple[str, list[str]]]:
    """(명령, 설명 줄) 목록."""
    cmd = context.package_manager.display_command
    run = "" if context.use_yarn else "run "
    return [
        (f"{cmd} start", ["Starts the development server."]),
        (f"{cmd} {run}build", ["Bundles the app into static files for production."]),
        (f"{cmd} test", ["Starts the test runner."]),
        (
            f"{cmd} {run}eject",
            [
                "Removes this tool and copies build dependencies, configuration files",
                "and scripts into the app directory. If you do this, you can’t go back!",
            ],
        ),
    ]


def print_guidance(
    context: InitContext,
    config: InitConfig,
    readme_renamed: bool = False,
    console: Console | None = None,
) -> None:
    """성공 메시지 + 사용 가능한 명령 안내."""
    if console is None:
        console = Console()

    cmd = context.package_manager.display_command

    console.print()
    console.print(f"Success! Created {escape(context.app_name)} at {escape(str(context.app_path))}")
    console.print()
    console.print(f"[red]{escape(config.banner_title)}[/red]")
    console.print(escape(config.banner_text))
    console.print()
    console.print("Inside that directory, you can run several commands:")
    console.print()
    for command, lines in guidance_commands(context):
        console.print(f"[cyan]  {command}[/cyan]")
        for line in lines:
            console.print(f"    {line}")
        console.print()
    console.print("We suggest that you begin by typing:")
    console.print()
    console.print(f"[cyan]  cd[/cyan] {escape(display_cd_path(context))}")
    console.print(f"  [cyan]{cmd} start[/cyan]")
    if readme_renamed:
        console.print()
        console.print("[yellow]You had a `README.md` file, we renamed it to `README.old.md`[/yellow]")
    console.print()
    console.print("Happy hacking!")
