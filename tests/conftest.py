"""
Pytest fixtures for the init workflow tests.

구성:
- 경로/설정 fixture
- 앱 디렉터리 (package.json 포함), 템플릿 패키지
- FakeRunner (npm/yarn/git 대역), 출력 캡처용 콘솔
"""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from src.core.config import InitConfig, InitContext
from src.domain.schemas import PackageManager
from src.testing import NOT_IN_REPOSITORY, FakeRunner, make_template_package

# =============================================================================
# Path / Config Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def init_config() -> InitConfig:
    """기본 설정."""
    return InitConfig()


# =============================================================================
# App / Template Fixtures
# =============================================================================

@pytest.fixture
def app_package() -> dict:
    """생성기가 만든 직후의 package.json."""
    return {
        "name": "my-app",
        "version": "0.1.0",
        "private": True,
        "dependencies": {
            "react": "^16.12.0",
            "react-dom": "^16.12.0",
            "react-scripts": "3.3.0",
        },
    }


@pytest.fixture
def app_dir(tmp_path: Path, app_package: dict) -> Path:
    """package.json이 있는 앱 디렉터리."""
    app = tmp_path / "my-app"
    app.mkdir()
    (app / "package.json").write_text(json.dumps(app_package, indent=2), encoding="utf-8")
    return app


@pytest.fixture
def template_json() -> dict:
    """RIO 스타일 template.json."""
    return {
        "package": {
            "name": "should-be-ignored",
            "license": "UNLICENSED",
            "dependencies": {
                "react": "^16.12.0",
                "react-dom": "^16.12.0",
                "redux": "^4.0.5",
            },
            "devDependencies": {
                "prettier": "^1.19.1",
            },
            "scripts": {
                "lint": "npm run eslint",
            },
            "jest": {"collectCoverageFrom": ["src/**/*.js"]},
        },
    }


@pytest.fixture
def template_files() -> dict[str, str]:
    """template/ 디렉터리 내용."""
    return {
        "README.md": "# App\n\nRun `npm start` or `npm run build`.\n",
        "gitignore": "node_modules\n/build\n",
        "src/index.js": "console.log('hello');\n",
        "public/index.html": "<html></html>\n",
    }


@pytest.fixture
def template_root(app_dir: Path, template_json: dict, template_files: dict[str, str]) -> Path:
    """app_dir/node_modules/cra-template-rio."""
    return make_template_package(app_dir, files=template_files, template_json=template_json)


# =============================================================================
# Runner / Context Fixtures
# =============================================================================

@pytest.fixture
def fake_runner() -> FakeRunner:
    """저장소 밖의 깨끗한 환경을 흉내내는 FakeRunner."""
    return FakeRunner(statuses=dict(NOT_IN_REPOSITORY))


@pytest.fixture
def npm_context(app_dir: Path) -> InitContext:
    """npm 사용 컨텍스트."""
    return InitContext(
        app_path=app_dir,
        app_name="my-app",
        template_name="cra-template-rio",
        package_manager=PackageManager.NPM,
    )


@pytest.fixture
def yarn_context(app_dir: Path) -> InitContext:
    """Yarn 사용 컨텍스트 (yarn.lock 포함)."""
    (app_dir / "yarn.lock").write_text("", encoding="utf-8")
    return InitContext(
        app_path=app_dir,
        app_name="my-app",
        template_name="cra-template-rio",
        package_manager=PackageManager.YARN,
    )


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """출력을 버퍼에 모으는 콘솔 (색상 없음)."""
    return Console(file=console_buffer, force_terminal=False, no_color=True, width=200)
