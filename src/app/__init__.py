"""
App layer: CLI 진입점 + 초기화 워크플로.

실행:
- react-app-init <app_path> <app_name> --template <name>
- python -m src.app.cli <app_path> <app_name> --template <name>
"""

from .init_project import InitResult, init_project

__all__ = [
    "InitResult",
    "init_project",
]
