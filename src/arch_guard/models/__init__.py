"""
Data Models

Architecture Guard의 핵심 데이터 모델들
"""

from .diff import DiffLine
from .rule import Rule, Violation, RuleHit
from .event import PullRequestEvent, PullRequestRef, RepositoryRef
from .review import GuardOutcome

__all__ = [
    "DiffLine",
    "Rule",
    "Violation",
    "RuleHit",
    "PullRequestEvent",
    "PullRequestRef",
    "RepositoryRef",
    "GuardOutcome",
]
