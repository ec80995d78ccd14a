"""
Event Data Models

GitHub pull_request 이벤트 payload 검증용 모델들
"""

from typing import Optional
from pydantic import BaseModel, field_validator


class PullRequestRef(BaseModel):
    """payload의 pull_request 객체"""
    number: int

    @field_validator('number')
    @classmethod
    def validate_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v


class RepositoryRef(BaseModel):
    """payload의 repository 객체"""
    full_name: str

    @field_validator('full_name')
    @classmethod
    def validate_full_name(cls, v):
        if '/' not in v:
            raise ValueError('Repository must be in format "owner/repo"')
        return v


class PullRequestEvent(BaseModel):
    """pull_request 이벤트 payload (사용하는 필드만)"""
    pull_request: Optional[PullRequestRef] = None
    repository: Optional[RepositoryRef] = None
