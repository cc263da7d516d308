"""
Core layer: 설정, 파일 I/O, 외부 프로세스, 실행 로그.

역할:
- default.yaml 설정 + 실행 컨텍스트 (config.py)
- 원자적 JSON 쓰기 (fileio.py)
- execute(command, args) → exit status (process.py)
- run log (logging.py, ids.py)
"""

from .config import InitConfig, InitContext, build_context, detect_package_manager, load_config
from .fileio import atomic_write_json
from .ids import generate_run_id
from .logging import complete_run_log, create_run_log, emit_warning, record_step, save_run_log
from .process import CommandRunner, SubprocessRunner

__all__ = [
    # config
    "InitConfig",
    "InitContext",
    "build_context",
    "detect_package_manager",
    "load_config",
    # fileio
    "atomic_write_json",
    # ids
    "generate_run_id",
    # logging
    "create_run_log",
    "record_step",
    "emit_warning",
    "complete_run_log",
    "save_run_log",
    # process
    "CommandRunner",
    "SubprocessRunner",
]
