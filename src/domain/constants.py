"""
Domain Constants: 초기화 워크플로 전역 상수.

파일명 정책, 매니페스트 키 정책, 기본 스크립트 등
시스템 전반에서 사용되는 값들.
"""

import re

# =============================================================================
# App Directory Files (앱 디렉터리 파일명)
# =============================================================================
# <app>/
# ├── package.json
# ├── yarn.lock         # 있으면 Yarn 사용
# ├── README.md         # 기존 파일은 README.old.md로 보존
# └── .gitignore        # 템플릿의 gitignore → .gitignore

PACKAGE_JSON_FILENAME = "package.json"
YARN_LOCK_FILENAME = "yarn.lock"
README_FILENAME = "README.md"
README_OLD_FILENAME = "README.old.md"
GITIGNORE_FILENAME = ".gitignore"
GIT_DIR_NAME = ".git"
TSCONFIG_FILENAME = "tsconfig.json"

# =============================================================================
# Template Package Structure (템플릿 패키지 구조)
# =============================================================================
# node_modules/<template>/
# ├── template/        # 앱 디렉터리로 복사되는 트리
# │   └── gitignore    # npm이 .gitignore → .npmignore로 바꾸는 문제 회피
# └── template.json    # package / dependencies / devDependencies

TEMPLATE_DIR_NAME = "template"
TEMPLATE_JSON_FILENAME = "template.json"
TEMPLATE_GITIGNORE_FILENAME = "gitignore"
LEGACY_TEMPLATE_JSON_FILENAME = ".template.dependencies.json"
NODE_MODULES_DIR_NAME = "node_modules"
FILE_SPEC_PREFIX = "file:"

# =============================================================================
# Manifest Key Policies (매니페스트 병합 정책)
# =============================================================================
# 템플릿 package 필드 → 앱 package.json 병합 규칙:
# - ignore: 앱 값 유지 (배포/식별 메타데이터)
# - merge: 병합 (dependencies, scripts)
# - replace: 템플릿 값으로 교체 (나머지 전부, 기본값)

POLICY_IGNORE = "ignore"
POLICY_MERGE = "merge"
POLICY_REPLACE = "replace"

KEY_POLICIES = {
    "name": POLICY_IGNORE,
    "version": POLICY_IGNORE,
    "description": POLICY_IGNORE,
    "keywords": POLICY_IGNORE,
    "bugs": POLICY_IGNORE,
    "license": POLICY_IGNORE,
    "author": POLICY_IGNORE,
    "contributors": POLICY_IGNORE,
    "files": POLICY_IGNORE,
    "browser": POLICY_IGNORE,
    "bin": POLICY_IGNORE,
    "man": POLICY_IGNORE,
    "directories": POLICY_IGNORE,
    "repository": POLICY_IGNORE,
    "peerDependencies": POLICY_IGNORE,
    "bundledDependencies": POLICY_IGNORE,
    "optionalDependencies": POLICY_IGNORE,
    "engineStrict": POLICY_IGNORE,
    "os": POLICY_IGNORE,
    "cpu": POLICY_IGNORE,
    "preferGlobal": POLICY_IGNORE,
    "private": POLICY_IGNORE,
    "publishConfig": POLICY_IGNORE,
    "dependencies": POLICY_MERGE,
    "scripts": POLICY_MERGE,
}

DEFAULT_SCRIPTS = {
    "start": "react-scripts start",
    "build": "react-scripts build",
    "test": "react-scripts test",
    "eject": "react-scripts eject",
}

DEFAULT_ESLINT_CONFIG = {"extends": "react-app"}

DEFAULT_BROWSERSLIST = [
    "last 2 versions",
    "last 5 Chrome versions",
    "Firefox >= 60",
    "Edge >= 15",
    "Safari >= 10",
    "IE >= 11",
]

# npm 호출 접두사 → yarn (스크립트는 첫 번째만, README는 전체)
NPM_INVOCATION_PATTERN = re.compile(r"(npm run |npm )")
YARN_INVOCATION = "yarn "

# =============================================================================
# Dependencies (의존성 설치)
# =============================================================================

# 별도로 설치되는 프레임워크 코어 패키지
FRAMEWORK_CORE_PACKAGES = ("react", "react-dom")

# 설치 인자에 포함되면 TypeScript 설정 검증 실행
TYPESCRIPT_MARKER = "typescript"

# =============================================================================
# VCS
# =============================================================================

DEFAULT_COMMIT_MESSAGE = "Initialize project using Create React App"

# =============================================================================
# Run Log / ID Prefixes
# =============================================================================

RUN_ID_PREFIX = "RUN-"
RUN_LOG_FILENAME_PREFIX = "init_"
