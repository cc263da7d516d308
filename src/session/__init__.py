"""Session layer: 로그인 세션 상태 reducer."""

from .reducer import (
    INITIAL_STATE,
    USER_PROFILE_OBTAINED,
    session_reducer,
    to_legacy_user_info,
    user_profile_obtained,
)

__all__ = [
    "INITIAL_STATE",
    "USER_PROFILE_OBTAINED",
    "session_reducer",
    "to_legacy_user_info",
    "user_profile_obtained",
]
