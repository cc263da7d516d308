"""
템플릿 Materializer: 템플릿 패키지 → 앱 디렉터리.

구조:
node_modules/<template>/
├── template/        # 앱 디렉터리로 복사
│   └── gitignore    # 복사 후 .gitignore로 이름 변경 (기존 파일이 있으면 append)
└── template.json    # 없으면 앱의 .template.dependencies.json, 그것도 없으면 빈 descriptor

규칙:
- template/ 가 없으면 아무 파일도 건드리기 전에 중단 (TEMPLATE_NOT_FOUND)
- 기존 README.md는 README.old.md로 보존
- Yarn 사용자: README.md의 npm 명령을 yarn으로 (실패해도 무시)
"""

import json
import logging
import shutil
from pathlib import Path

from src.domain.constants import (
    FILE_SPEC_PREFIX,
    GITIGNORE_FILENAME,
    LEGACY_TEMPLATE_JSON_FILENAME,
    NODE_MODULES_DIR_NAME,
    PACKAGE_JSON_FILENAME,
    README_FILENAME,
    README_OLD_FILENAME,
    TEMPLATE_DIR_NAME,
    TEMPLATE_GITIGNORE_FILENAME,
    TEMPLATE_JSON_FILENAME,
)
from src.domain.errors import ErrorCodes, InitAbortError
from src.domain.schemas import MaterializeResult, PackageManager, TemplateDescriptor
from src.templates.manifest import rewrite_all_for_yarn

logger = logging.getLogger(__name__)

# =============================================================================
# Resolution
# =============================================================================


def resolve_template_root(template_name: str, app_path: Path) -> Path:
    """
    템플릿 패키지 루트 경로 찾기.

    Node 모듈 해석과 동일하게 app_path에서 위로 올라가며
    <ancestor>/node_modules/<template_name> 디렉터리를 찾음.
    `file:` 접두사나 실제 경로가 주어지면 그대로 사용.

    Args:
        template_name: 템플릿 패키지 이름 (예: cra-template-rio)
        app_path: 앱 디렉터리

    Returns:
        템플릿 패키지 루트

    Raises:
        InitAbortError: TEMPLATE_NOT_FOUND
    """
    if template_name.startswith(FILE_SPEC_PREFIX):
        candidate = Path(template_name[len(FILE_SPEC_PREFIX):])
        if not candidate.is_absolute():
            candidate = app_path / candidate
        if candidate.is_dir():
            return candidate.resolve()
    else:
        direct = Path(template_name)
        if direct.is_absolute() and direct.is_dir():
            return direct

        for ancestor in [app_path, *app_path.parents]:
            candidate = ancestor / NODE_MODULES_DIR_NAME / template_name
            if candidate.is_dir():
                return candidate

    raise InitAbortError(
        ErrorCodes.TEMPLATE_NOT_FOUND,
        template=template_name,
        searched_from=str(app_path),
    )


def template_package_name(template_root: Path, template_name: str) -> str:
    """
    제거(uninstall)에 사용할 패키지 이름.

    템플릿 루트의 package.json name이 있으면 그 값, 아니면 template_name.
    """
    package_json = template_root / PACKAGE_JSON_FILENAME
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return template_name
    name = data.get("name") if isinstance(data, dict) else None
    return name if isinstance(name, str) and name else template_name


def load_template_descriptor(template_root: Path, app_path: Path) -> TemplateDescriptor:
    """
    template.json 로드.

    Raises:
        InitAbortError: TEMPLATE_DESCRIPTOR_INVALID (파싱 실패)
    """
    descriptor_path = template_root / TEMPLATE_JSON_FILENAME
    if not descriptor_path.exists():
        # 구버전 생성기 호환
        descriptor_path = app_path / LEGACY_TEMPLATE_JSON_FILENAME

    if not descriptor_path.exists():
        logger.debug(f"no template descriptor under {template_root}, using empty")
        return TemplateDescriptor()

    try:
        data = json.loads(descriptor_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InitAbortError(
            ErrorCodes.TEMPLATE_DESCRIPTOR_INVALID,
            path=str(descriptor_path),
            cause=str(e),
        ) from e

    if not isinstance(data, dict):
        raise InitAbortError(
            ErrorCodes.TEMPLATE_DESCRIPTOR_INVALID,
            path=str(descriptor_path),
            cause="descriptor must be a JSON object",
        )
    return TemplateDescriptor.from_dict(data)


# =============================================================================
# Materializer
# =============================================================================


class TemplateMaterializer:
    """
    템플릿 파일 트리를 앱 디렉터리에 펼침.

    사용 순서:
        materializer.ensure_template_dir()   # 앞단계에서 존재 확인
        ... package.json 병합/저장 ...
        materializer.materialize()
    """

    def __init__(
        self,
        template_root: Path,
        app_path: Path,
        package_manager: PackageManager = PackageManager.NPM,
    ):
        """
        Args:
            template_root: 템플릿 패키지 루트
            app_path: 앱 디렉터리
            package_manager: Yarn이면 README 명령 재작성
        """
        self.template_root = template_root
        self.app_path = app_path
        self.package_manager = package_manager
        self._descriptor: TemplateDescriptor | None = None

    @property
    def template_dir(self) -> Path:
        return self.template_root / TEMPLATE_DIR_NAME

    @property
    def descriptor(self) -> TemplateDescriptor:
        """template.json 로드 (lazy)."""
        if self._descriptor is None:
            self._descriptor = load_template_descriptor(self.template_root, self.app_path)
        return self._descriptor

    def ensure_template_dir(self) -> Path:
        """
        template/ 디렉터리 존재 확인.

        Raises:
            InitAbortError: TEMPLATE_NOT_FOUND
        """
        if not self.template_dir.is_dir():
            raise InitAbortError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                template_dir=str(self.template_dir),
            )
        return self.template_dir

    def materialize(self) -> MaterializeResult:
        """
        템플릿 트리 복사 + README/gitignore 처리.

        Returns:
            MaterializeResult
        """
        template_dir = self.ensure_template_dir()
        result = MaterializeResult(template_dir=str(template_dir))

        result.readme_renamed = self._preserve_readme()
        result.copied_files = self._copy_tree(template_dir)

        if self.package_manager is PackageManager.YARN:
            result.readme_rewritten = self._rewrite_readme_for_yarn()

        result.gitignore_merged = self._install_gitignore()
        logger.debug(f"copied {len(result.copied_files)} files from {template_dir}")
        return result

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _preserve_readme(self) -> bool:
        """기존 README.md → README.old.md."""
        readme = self.app_path / README_FILENAME
        if not readme.exists():
            return False
        readme.replace(self.app_path / README_OLD_FILENAME)
        return True

    def _copy_tree(self, template_dir: Path) -> list[str]:
        """template/ 트리를 앱 디렉터리에 덮어쓰기 복사."""
        copied: list[str] = []

        def _copy(src: str, dst: str) -> str:
            copied.append(Path(dst).relative_to(self.app_path).as_posix())
            return shutil.copy2(src, dst)

        # 최상위 항목 단위로 복사: 앱 디렉터리 자체의 mode/mtime은 유지
        for entry in sorted(template_dir.iterdir()):
            target = self.app_path / entry.name
            if entry.is_dir():
                shutil.copytree(entry, target, copy_function=_copy, dirs_exist_ok=True)
            else:
                _copy(str(entry), str(target))
        return copied

    def _rewrite_readme_for_yarn(self) -> bool:
        """README.md의 npm 명령을 yarn으로. 실패하면 npm 명령 그대로 둠."""
        readme = self.app_path / README_FILENAME
        try:
            content = readme.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as e:
            logger.debug(f"README yarn rewrite skipped: {e}")
            return False

        try:
            readme.write_text(rewrite_all_for_yarn(content), encoding="utf-8")
        except OSError as e:
            logger.debug(f"README yarn rewrite skipped: {e}")
            return False
        return True

    def _install_gitignore(self) -> bool:
        """
        gitignore → .gitignore.

        npm이 패키지 배포 시 .gitignore를 .npmignore로 바꾸므로
        템플릿은 gitignore로 보관하고 복사 후 이름을 바꿈.

        Returns:
            기존 .gitignore에 append했으면 True
        """
        shipped = self.app_path / TEMPLATE_GITIGNORE_FILENAME
        target = self.app_path / GITIGNORE_FILENAME

        if not shipped.exists():
            return False

        if target.exists():
            with open(target, "ab") as f:
                f.write(shipped.read_bytes())
            shipped.unlink()
            return True

        shipped.replace(target)
        return False
