"""
react-app-init CLI.

사용법:
    # 생성기가 만든 앱 디렉터리에 템플릿 적용
    react-app-init ./my-app my-app --template cra-template-rio

    # 생성기를 실행한 디렉터리 전달 (cd 안내를 짧게)
    react-app-init /work/my-app my-app --template cra-template-rio --original-directory /work

    # 실행 로그 저장
    react-app-init ./my-app my-app --template cra-template-rio --run-log-dir ./logs
"""

import argparse
import logging
import sys
from pathlib import Path

from src.app.init_project import init_project
from src.core.config import build_context, load_config
from src.core.logging import configure_logging
from src.domain.errors import InitAbortError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="react-app-init",
        description="템플릿 패키지로 React 앱 초기화",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("app_path", type=Path, help="앱 디렉터리 (package.json 포함)")
    parser.add_argument("app_name", help="앱 이름")
    parser.add_argument(
        "--template",
        dest="template_name",
        default=None,
        help="템플릿 패키지 이름 (예: cra-template-rio, file:../my-template)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="패키지 매니저 상세 출력 + DEBUG 로그",
    )
    parser.add_argument(
        "--original-directory",
        type=Path,
        default=None,
        help="생성기를 실행한 디렉터리",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="설정 파일 경로 (기본: default.yaml)",
    )
    parser.add_argument(
        "--run-log-dir",
        type=Path,
        default=None,
        help="실행 로그(init_<run_id>.json) 저장 디렉터리",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.run_log_dir is not None:
        config.run_log_dir = args.run_log_dir
    configure_logging(
        level="DEBUG" if args.verbose else config.log_level,
        fmt=config.log_format,
        datefmt=config.log_datefmt,
    )

    context = build_context(
        app_path=args.app_path,
        app_name=args.app_name,
        template_name=args.template_name,
        verbose=args.verbose,
        original_directory=args.original_directory,
    )

    try:
        result = init_project(context, config=config)
    except InitAbortError as e:
        logger.debug(f"abort context: {e.to_dict()}")
        return 1

    if result.run_log_path is not None:
        logger.info(f"Run log saved: {result.run_log_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
