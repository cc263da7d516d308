"""
TypeScript 설정 검증 (기본 구현).

typescript 패키지가 설치된 앱에 tsconfig.json, src/react-app-env.d.ts가
없으면 기본값으로 생성. 이미 있으면 건드리지 않음.
"""

import logging
from pathlib import Path

from src.core.fileio import atomic_write_json
from src.domain.constants import NODE_MODULES_DIR_NAME, TSCONFIG_FILENAME

logger = logging.getLogger(__name__)

DEFAULT_TSCONFIG = {
    "compilerOptions": {
        "target": "es5",
        "lib": ["dom", "dom.iterable", "esnext"],
        "allowJs": True,
        "skipLibCheck": True,
        "esModuleInterop": True,
        "allowSyntheticDefaultImports": True,
        "strict": True,
        "forceConsistentCasingInFileNames": True,
        "module": "esnext",
        "moduleResolution": "node",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react",
    },
    "include": ["src"],
}

REACT_APP_ENV_DTS = '/// <reference types="react-scripts" />\n'


def verify_typescript_setup(app_path: Path) -> None:
    """tsconfig.json / react-app-env.d.ts 기본값 보장."""
    if not (app_path / NODE_MODULES_DIR_NAME / "typescript").is_dir():
        logger.warning(
            "typescript is not installed in node_modules; "
            "tsconfig.json is written but type checking will fail until it is installed"
        )

    tsconfig = app_path / TSCONFIG_FILENAME
    if not tsconfig.exists():
        atomic_write_json(tsconfig, DEFAULT_TSCONFIG)
        logger.info(f"We detected TypeScript in your project and created a {TSCONFIG_FILENAME} file for you.")

    env_dts = app_path / "src" / "react-app-env.d.ts"
    if (app_path / "src").is_dir() and not env_dts.exists():
        env_dts.write_text(REACT_APP_ENV_DTS, encoding="utf-8")
