"""
Templates layer: 템플릿 패키지 적용.

역할:
- 템플릿 해석 + 파일 트리 복사 (materializer.py)
- 앱 package.json 병합 (manifest.py)
"""

from .manifest import (
    merge_manifest,
    merge_scripts,
    read_manifest,
    write_manifest,
)
from .materializer import (
    TemplateMaterializer,
    load_template_descriptor,
    resolve_template_root,
    template_package_name,
)

__all__ = [
    # manifest
    "merge_manifest",
    "merge_scripts",
    "read_manifest",
    "write_manifest",
    # materializer
    "TemplateMaterializer",
    "load_template_descriptor",
    "resolve_template_root",
    "template_package_name",
]
