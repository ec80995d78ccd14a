"""
Architecture Guard

Pull Request diff를 아키텍처/보안 규칙으로 검사하는 GitHub Action 구현체
"""

__version__ = "1.0.0"

from .api import ArchitectureGuard, GuardOutcome

__all__ = ["ArchitectureGuard", "GuardOutcome"]
