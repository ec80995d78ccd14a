"""
Review Data Models

검사 실행 결과 데이터 모델
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class GuardOutcome:
    """한 번의 PR 검사 결과"""
    status: str  # 'passed', 'failed', 'warned'
    message: str
    report: Optional[str] = None
    violation_count: int = 0
    comment_posted: bool = False
    engines_run: List[str] = field(default_factory=list)

    def __post_init__(self):
        """데이터 검증"""
        valid_statuses = {'passed', 'failed', 'warned'}
        if self.status not in valid_statuses:
            raise ValueError(f"Invalid status: {self.status}")

        if self.violation_count < 0:
            raise ValueError("Violation count must be non-negative")

    @property
    def is_clean(self) -> bool:
        """위반 없이 통과했는지 확인"""
        return self.status == 'passed'

    @property
    def exit_code(self) -> int:
        """프로세스 종료 코드 (경고는 실패로 취급하지 않음)"""
        return 1 if self.status == 'failed' else 0
