"""
Diff Data Models

Pull Request diff 관련 데이터 모델들
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffLine:
    """새 버전 파일에 추가된 한 줄"""
    file: str
    line: int  # 1-based line number in the new version of `file`
    content: str

    def __post_init__(self):
        """데이터 검증"""
        if self.line <= 0:
            raise ValueError("Line number must be positive")

    @property
    def location(self) -> str:
        """`path:line` 형식의 위치 문자열"""
        return f"{self.file}:{self.line}"
