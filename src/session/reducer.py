"""
세션 reducer: OAuth 사용자 프로필 → 구 "whoami" 사용자 정보.

신규 OAuth 프로필을 구 whoami 응답 구조로 옮겨주는 어댑터.
roles는 제공하지 않음 (IAM 개편으로 제거 예정). 이 호환 계층이
필요 없다면 제거하고 프로필 정보를 직접 사용하는 것을 권장.
"""

from dataclasses import replace
from typing import Any

from src.domain.schemas import (
    Action,
    LegacyUserInfo,
    SessionState,
    UserSessionProfile,
)

USER_PROFILE_OBTAINED = "USER_PROFILE_OBTAINED"

INITIAL_STATE = SessionState()


def user_profile_obtained(profile: UserSessionProfile | dict[str, Any]) -> Action:
    """USER_PROFILE_OBTAINED 액션 생성."""
    return Action(type=USER_PROFILE_OBTAINED, payload=profile)


def to_legacy_user_info(profile: UserSessionProfile | dict[str, Any]) -> LegacyUserInfo:
    """프로필 → LegacyUserInfo (roles는 항상 빈 값)."""
    if not isinstance(profile, UserSessionProfile):
        profile = UserSessionProfile.from_dict(profile)
    return LegacyUserInfo(
        email=profile.email,
        first_name=profile.given_name,
        last_name=profile.family_name,
        roles=(),
    )


def session_reducer(state: SessionState | None, action: Action) -> SessionState:
    """
    세션 상태 전이.

    state가 None이면 INITIAL_STATE에서 시작.
    USER_PROFILE_OBTAINED 외의 액션은 입력 state 객체를 그대로 반환.
    """
    if state is None:
        state = INITIAL_STATE

    if action.type == USER_PROFILE_OBTAINED:
        return replace(
            state,
            has_user_info=True,
            is_logged_in=True,
            user_info=to_legacy_user_info(action.payload),
        )

    return state
