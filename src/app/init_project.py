"""
프로젝트 초기화 워크플로.

순서 (단일 스레드, 동기):
1. 입력 검증 (템플릿 이름)
2. 앱 package.json 로드
3. 템플릿 해석 + template.json 로드 + template/ 존재 확인
4. 매니페스트 병합 → package.json 저장
5. 템플릿 파일 복사 (README 보존, gitignore 처리)
6. git init
7. 의존성 설치 → dev 의존성 설치 → TypeScript 검증
8. 템플릿 패키지 제거
9. git commit
10. 안내 출력

InitAbortError는 run log에 기록 후 호출자에게 전달.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from src.app.guidance import print_guidance
from src.core.config import InitConfig, InitContext
from src.core.logging import complete_run_log, create_run_log, record_step, save_run_log
from src.core.process import CommandRunner, SubprocessRunner
from src.domain.errors import ErrorCodes, InitAbortError
from src.domain.schemas import InitRunLog, MaterializeResult
from src.install.installer import DependencyInstaller, TypeScriptVerifier
from src.install.typescript import verify_typescript_setup
from src.templates.manifest import merge_manifest, read_manifest, write_manifest
from src.templates.materializer import (
    TemplateMaterializer,
    resolve_template_root,
    template_package_name,
)
from src.vcs.git import GitInitializer

logger = logging.getLogger(__name__)


@dataclass
class InitResult:
    """초기화 결과."""

    run_log: InitRunLog
    materialized: MaterializeResult | None = None
    installed: list[str] = field(default_factory=list)
    git_initialized: bool = False
    git_committed: bool = False
    run_log_path: Path | None = None


def init_project(
    context: InitContext,
    config: InitConfig | None = None,
    runner: CommandRunner | None = None,
    verify_typescript: TypeScriptVerifier | None = verify_typescript_setup,
    console: Console | None = None,
) -> InitResult:
    """
    템플릿 기반 프로젝트 초기화.

    Args:
        context: 실행 컨텍스트 (앱 경로, 템플릿, 패키지 매니저)
        config: 설정 (None이면 기본값)
        runner: 외부 명령 실행기 (None이면 subprocess)
        verify_typescript: TypeScript 설정 검증기 (None이면 건너뜀)
        console: 안내 출력용 콘솔

    Returns:
        InitResult

    Raises:
        InitAbortError: 입력 누락, 템플릿 없음, 패키지 매니저 실패
    """
    if config is None:
        config = InitConfig()
    if runner is None:
        runner = SubprocessRunner()
    if console is None:
        console = Console()

    run_log = create_run_log(context.app_name, context.app_path, context.template_name)
    run_log.package_manager = context.package_manager.value
    result = InitResult(run_log=run_log)

    try:
        _run_workflow(context, config, runner, verify_typescript, console, result)
    except InitAbortError as e:
        logger.error(f"Project initialization aborted: {e}")
        complete_run_log(run_log, success=False, error_code=e.code, error_context=e.context)
        raise
    else:
        complete_run_log(run_log, success=True)
    finally:
        if config.run_log_dir is not None:
            result.run_log_path = save_run_log(run_log, config.run_log_dir)

    return result


def _run_workflow(
    context: InitContext,
    config: InitConfig,
    runner: CommandRunner,
    verify_typescript: TypeScriptVerifier | None,
    console: Console,
    result: InitResult,
) -> None:
    run_log = result.run_log
    app_path = context.app_path

    # (a) 입력 누락: 부작용 전에 중단
    if not context.template_name:
        logger.error(
            "A template was not provided. This is likely because you're using "
            "an outdated version of create-react-app."
        )
        logger.error("Please note that global installs of create-react-app are no longer supported.")
        raise InitAbortError(ErrorCodes.TEMPLATE_NAME_MISSING, app_path=str(app_path))
    template_name = context.template_name

    app_package = read_manifest(app_path)
    record_step(run_log, "read_manifest")

    # (b) 리소스 누락: 파일 복사 전에 중단
    template_root = resolve_template_root(template_name, app_path)
    materializer = TemplateMaterializer(template_root, app_path, context.package_manager)
    descriptor = materializer.descriptor
    try:
        materializer.ensure_template_dir()
    except InitAbortError:
        logger.error(f"Could not locate supplied template: {materializer.template_dir}")
        raise
    record_step(run_log, "resolve_template", detail=str(template_root))

    merged = merge_manifest(
        app_package,
        descriptor.package,
        template_scripts=descriptor.scripts,
        package_manager=context.package_manager,
        eslint_config=config.eslint_config,
        browserslist=config.browserslist,
    )
    write_manifest(app_path, merged)
    record_step(run_log, "write_manifest")

    result.materialized = materializer.materialize()
    record_step(run_log, "copy_template", detail=f"{len(result.materialized.copied_files)} files")

    git = GitInitializer(runner, app_path, run_log=run_log)
    result.git_initialized = git.try_init()
    record_step(run_log, "git_init", status="done" if result.git_initialized else "skipped")
    if result.git_initialized:
        console.print()
        console.print("Initialized a git repository.")

    # (c) 외부 프로세스 실패: 중단, 롤백 없음
    installer = DependencyInstaller(
        runner,
        app_path,
        package_manager=context.package_manager,
        verbose=context.verbose,
        verify_typescript=verify_typescript,
    )
    result.installed = installer.install(descriptor, merged)
    record_step(run_log, "install", status="done" if result.installed else "skipped")

    dev_installed = installer.install_dev(descriptor)
    record_step(run_log, "install_dev", status="done" if dev_installed else "skipped")
    result.installed.extend(dev_installed)

    if installer.verify_typescript_if_needed(result.installed):
        record_step(run_log, "verify_typescript")

    installer.uninstall_template(template_package_name(template_root, template_name))
    record_step(run_log, "uninstall_template")

    # (d) VCS 실패: 경고만
    result.git_committed = git.try_commit(config.commit_message)
    record_step(run_log, "git_commit", status="done" if result.git_committed else "skipped")
    if result.git_committed:
        console.print()
        console.print("Created git commit.")

    print_guidance(
        context,
        config,
        readme_renamed=result.materialized.readme_renamed,
        console=console,
    )
