"""VCS layer: 생성된 앱의 git 저장소 초기화."""

from .git import GitInitializer, VcsState

__all__ = [
    "GitInitializer",
    "VcsState",
]
