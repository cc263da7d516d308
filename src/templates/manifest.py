"""
매니페스트 병합: 앱 package.json + 템플릿 package 필드.

키 정책 (KEY_POLICIES):
- ignore: 식별/배포 메타데이터 → 항상 앱 값 유지
- merge: dependencies (앱 값 유지, 템플릿 의존성은 설치 단계에서 누적),
         scripts (기본 4개 + 템플릿 스크립트로 덮어쓰기)
- replace: 그 외 모든 키 → 템플릿 값으로 교체 (마지막에 적용)

고정 주입: eslintConfig, browserslist (앱 기존 값 덮어씀)
"""

import json
import logging
from pathlib import Path
from typing import Any

from src.core.fileio import atomic_write_json
from src.domain.constants import (
    DEFAULT_BROWSERSLIST,
    DEFAULT_ESLINT_CONFIG,
    DEFAULT_SCRIPTS,
    KEY_POLICIES,
    NPM_INVOCATION_PATTERN,
    PACKAGE_JSON_FILENAME,
    POLICY_IGNORE,
    POLICY_MERGE,
    POLICY_REPLACE,
    YARN_INVOCATION,
)
from src.domain.errors import ErrorCodes, InitAbortError
from src.domain.schemas import PackageManager, ProjectManifest

logger = logging.getLogger(__name__)

# =============================================================================
# Policy Lookup
# =============================================================================


def key_policy(key: str, policies: dict[str, str] | None = None) -> str:
    """키의 병합 정책 (표에 없으면 replace)."""
    if policies is None:
        policies = KEY_POLICIES
    return policies.get(key, POLICY_REPLACE)


def keys_with_policy(
    template_package: dict[str, Any],
    policy: str,
    policies: dict[str, str] | None = None,
) -> list[str]:
    """템플릿 package에서 주어진 정책에 해당하는 키 목록 (선언 순서 유지)."""
    return [k for k in template_package if key_policy(k, policies) == policy]


# =============================================================================
# Script Rules
# =============================================================================


def rewrite_for_yarn(command: str) -> str:
    """첫 번째 `npm run ` / `npm ` 호출을 `yarn `으로 교체."""
    return NPM_INVOCATION_PATTERN.sub(YARN_INVOCATION, command, count=1)


def rewrite_all_for_yarn(text: str) -> str:
    """텍스트 전체의 npm 호출을 yarn으로 교체 (README용)."""
    return NPM_INVOCATION_PATTERN.sub(YARN_INVOCATION, text)


def merge_scripts(
    template_scripts: dict[str, str],
    package_manager: PackageManager = PackageManager.NPM,
) -> dict[str, str]:
    """
    기본 스크립트 + 템플릿 스크립트.

    같은 이름은 템플릿이 우선. Yarn이면 모든 값의 호출 접두사를 yarn으로.
    """
    scripts = {**DEFAULT_SCRIPTS, **template_scripts}
    if package_manager is PackageManager.YARN:
        scripts = {name: rewrite_for_yarn(value) for name, value in scripts.items()}
    return scripts


# =============================================================================
# Merge
# =============================================================================


def merge_manifest(
    app_package: ProjectManifest,
    template_package: dict[str, Any],
    template_scripts: dict[str, str] | None = None,
    package_manager: PackageManager = PackageManager.NPM,
    eslint_config: dict[str, Any] | None = None,
    browserslist: list[str] | None = None,
    policies: dict[str, str] | None = None,
) -> ProjectManifest:
    """
    앱 매니페스트와 템플릿 package 필드 병합.

    입력 dict는 수정하지 않고 새 dict를 반환.

    Args:
        app_package: 현재 앱 package.json
        template_package: template.json의 package 필드
        template_scripts: 템플릿 스크립트 (None이면 template_package["scripts"])
        package_manager: Yarn이면 스크립트 접두사 재작성
        eslint_config: 주입할 eslintConfig (None이면 기본값)
        browserslist: 주입할 browserslist (None이면 기본값)
        policies: 키 정책 표 (None이면 KEY_POLICIES)

    Returns:
        병합된 매니페스트
    """
    merged: ProjectManifest = dict(app_package)

    if template_scripts is None:
        template_scripts = template_package.get("scripts") or {}

    # 템플릿 런타임 의존성은 설치 단계에서 패키지 매니저가 기록
    merged["dependencies"] = dict(app_package.get("dependencies") or {})
    merged["scripts"] = merge_scripts(template_scripts, package_manager)

    merged["eslintConfig"] = dict(eslint_config if eslint_config is not None else DEFAULT_ESLINT_CONFIG)
    merged["browserslist"] = list(browserslist if browserslist is not None else DEFAULT_BROWSERSLIST)

    for key in keys_with_policy(template_package, POLICY_REPLACE, policies):
        merged[key] = template_package[key]

    ignored = keys_with_policy(template_package, POLICY_IGNORE, policies)
    if ignored:
        logger.debug(f"template package keys ignored: {ignored}")

    extra_merge = [
        k for k in keys_with_policy(template_package, POLICY_MERGE, policies)
        if k not in ("dependencies", "scripts")
    ]
    for key in extra_merge:
        # 표에 추가된 merge 키: dict는 얕은 병합, 그 외는 교체
        current = merged.get(key)
        incoming = template_package[key]
        if isinstance(current, dict) and isinstance(incoming, dict):
            merged[key] = {**current, **incoming}
        else:
            merged[key] = incoming

    return merged


# =============================================================================
# Read / Write
# =============================================================================


def read_manifest(app_path: Path) -> ProjectManifest:
    """
    앱 package.json 로드.

    Raises:
        InitAbortError: MANIFEST_READ_FAILED
    """
    manifest_path = app_path / PACKAGE_JSON_FILENAME
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InitAbortError(
            ErrorCodes.MANIFEST_READ_FAILED,
            path=str(manifest_path),
            cause=str(e),
        ) from e

    if not isinstance(data, dict):
        raise InitAbortError(
            ErrorCodes.MANIFEST_READ_FAILED,
            path=str(manifest_path),
            cause="package.json must contain a JSON object",
        )
    return data


def write_manifest(app_path: Path, manifest: ProjectManifest) -> Path:
    """package.json 저장 (2칸 들여쓰기 + 플랫폼 줄바꿈)."""
    manifest_path = app_path / PACKAGE_JSON_FILENAME
    atomic_write_json(manifest_path, manifest)
    return manifest_path
