"""
Rule Data Models

아키텍처 규칙과 규칙 위반 데이터 모델들
"""

import re
from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Rule:
    """이름이 붙은 정규식 규칙"""
    id: str
    name: str
    pattern: re.Pattern
    message: str
    guidance: str

    def __post_init__(self):
        """데이터 검증"""
        if not self.id.strip():
            raise ValueError("Rule id cannot be empty")
        if not self.name.strip():
            raise ValueError("Rule name cannot be empty")
        if not self.pattern.flags & re.IGNORECASE:
            raise ValueError(f"Rule pattern must be case-insensitive: {self.id}")

    def matches(self, text: str) -> bool:
        """패턴이 텍스트 어딘가에 일치하는지 확인"""
        return self.pattern.search(text) is not None


@dataclass(frozen=True)
class Violation:
    """한 줄에서 발견된 규칙 위반"""
    rule: Rule
    file: str
    line: int
    snippet: str

    @property
    def location(self) -> str:
        """`path:line` 형식의 위치 문자열"""
        return f"{self.file}:{self.line}"


class RuleHit(NamedTuple):
    """diff 전체에 대한 규칙 검사 결과"""
    rule: Rule
    matched: bool
