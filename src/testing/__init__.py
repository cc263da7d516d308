"""
Testing utilities: 외부 명령 없이 초기화 워크플로를 검증하기 위한 fake.
"""

from .fakes import NOT_IN_REPOSITORY, FakeCall, FakeRunner, make_template_package

__all__ = [
    "NOT_IN_REPOSITORY",
    "FakeCall",
    "FakeRunner",
    "make_template_package",
]
