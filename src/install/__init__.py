"""
Install layer: 패키지 매니저를 통한 의존성 설치/제거.
"""

from .installer import (
    DependencyInstaller,
    framework_core_installed,
    install_command,
    template_install_packages,
    uninstall_command,
)
from .typescript import verify_typescript_setup

__all__ = [
    "DependencyInstaller",
    "framework_core_installed",
    "install_command",
    "template_install_packages",
    "uninstall_command",
    "verify_typescript_setup",
]
