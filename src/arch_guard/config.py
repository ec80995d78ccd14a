"""
Configuration Management

액션 입력(INPUT_*)과 환경 변수 기반 설정 관리
"""

import os
import yaml
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, Mapping
from pathlib import Path
import logging

from .errors import ConfigurationError


class Engine(Enum):
    """실행할 분석 엔진"""
    BUILTIN = "builtin"
    AI = "ai"
    HYBRID = "hybrid"

    @property
    def runs_builtin(self) -> bool:
        return self in (Engine.BUILTIN, Engine.HYBRID)

    @property
    def runs_ai(self) -> bool:
        return self in (Engine.AI, Engine.HYBRID)

    @property
    def is_strict(self) -> bool:
        """위반 시 실행을 실패 처리하는지 (AI가 포함되면 경고만)"""
        return self is Engine.BUILTIN


class MatchMode(Enum):
    """builtin 엔진의 규칙 적용 방식"""
    LINE = "line"
    WHOLE = "whole"


def get_input(name: str, environ: Optional[Mapping[str, str]] = None, default: str = "") -> str:
    """액션 입력값 조회 (INPUT_<NAME>, 공백은 '_'로 치환)"""
    environ = os.environ if environ is None else environ
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    value = environ.get(key, "").strip()
    return value or default


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"true", "1", "yes"}


def _parse_enum(enum_cls, value: str, input_name: str):
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(f"Invalid {input_name}: {value!r} (expected one of: {allowed})")


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30
    max_retries: int = 0


@dataclass
class AIConfig:
    """생성형 AI 리뷰 설정"""
    api_key: Optional[str] = None
    model: str = "gemini-2.0-flash"
    user_rules: str = ""
    temperature: float = 0.1

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)


@dataclass
class ReviewConfig:
    """검사 실행 설정"""
    engine: Engine = Engine.BUILTIN
    match_mode: MatchMode = MatchMode.LINE
    dry_run: bool = False


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class GuardConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    review: ReviewConfig = field(default_factory=ReviewConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GuardConfig":
        """액션 입력과 환경 변수에서 설정 로드"""
        env = os.environ if environ is None else environ

        return cls(
            github=GitHubConfig(
                token=get_input("github-token", env) or env.get("GITHUB_TOKEN") or None,
                api_base_url=env.get("GITHUB_API_URL", "https://api.github.com"),
                timeout_seconds=int(env.get("GITHUB_TIMEOUT", "30")),
                max_retries=int(env.get("GITHUB_MAX_RETRIES", "0")),
            ),
            ai=AIConfig(
                api_key=get_input("ai-api-key", env) or env.get("GEMINI_API_KEY") or None,
                model=get_input("ai-model", env, "gemini-2.0-flash"),
                user_rules=get_input("architecture-rules", env),
                temperature=float(env.get("AI_TEMPERATURE", "0.1")),
            ),
            review=ReviewConfig(
                engine=_parse_enum(Engine, get_input("engine", env, "builtin"), "engine"),
                match_mode=_parse_enum(MatchMode, get_input("match-mode", env, "line"), "match-mode"),
                dry_run=_parse_bool(get_input("dry-run", env, "false")),
            ),
            logging=LoggingConfig(
                level=get_input("log-level", env) or env.get("LOG_LEVEL", "INFO"),
                format=env.get("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=env.get("LOG_FILE"),
                max_file_size=int(env.get("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(env.get("LOG_BACKUP_COUNT", "5")),
            ),
        )

    @classmethod
    def from_yaml(cls, config_path: str, environ: Optional[Mapping[str, str]] = None) -> "GuardConfig":
        """YAML 파일에서 설정 로드 (토큰과 API 키는 환경 변수 우선)"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        review_data = dict(config_data.get('review', {}))
        if 'engine' in review_data:
            review_data['engine'] = _parse_enum(Engine, str(review_data['engine']), "engine")
        if 'match_mode' in review_data:
            review_data['match_mode'] = _parse_enum(MatchMode, str(review_data['match_mode']), "match-mode")

        config = cls(
            github=GitHubConfig(**config_data.get('github', {})),
            ai=AIConfig(**config_data.get('ai', {})),
            review=ReviewConfig(**review_data),
            logging=LoggingConfig(**config_data.get('logging', {})),
        )

        # 비밀 값은 파일보다 환경 변수가 우선
        env_config = cls.from_env(environ)
        if env_config.github.token:
            config.github.token = env_config.github.token
        if env_config.ai.api_key:
            config.ai.api_key = env_config.ai.api_key

        return config

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        # GitHub 토큰 필수 확인
        if not self.github.token:
            errors.append("GitHub token is required")

        if self.github.timeout_seconds <= 0:
            errors.append("GitHub timeout must be positive")

        if self.github.max_retries < 0:
            errors.append("GitHub max retries must be non-negative")

        if not 0.0 <= self.ai.temperature <= 2.0:
            errors.append("AI temperature must be between 0.0 and 2.0")

        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                'max_retries': self.github.max_retries,
                # 보안상 토큰은 제외
            },
            'ai': {
                'enabled': self.ai.enabled,
                'model': self.ai.model,
                'has_user_rules': bool(self.ai.user_rules.strip()),
                'temperature': self.ai.temperature,
            },
            'review': {
                'engine': self.review.engine.value,
                'match_mode': self.review.match_mode.value,
                'dry_run': self.review.dry_run,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
        }


class ConfigManager:
    """설정 관리자"""

    def __init__(self, config: Optional[GuardConfig] = None):
        self._config = config or GuardConfig.from_env()
        self._config.validate()
        self._setup_logging()

    @property
    def config(self) -> GuardConfig:
        """현재 설정 반환"""
        return self._config

    def _setup_logging(self) -> None:
        """로깅 설정"""
        logging.basicConfig(
            level=getattr(logging, self._config.logging.level.upper()),
            format=self._config.logging.format,
        )

        # 파일 로깅이 설정된 경우 로테이션 설정
        if self._config.logging.file_path:
            from logging.handlers import RotatingFileHandler

            handler = RotatingFileHandler(
                self._config.logging.file_path,
                maxBytes=self._config.logging.max_file_size,
                backupCount=self._config.logging.backup_count,
            )
            handler.setFormatter(logging.Formatter(self._config.logging.format))

            # 루트 로거에 핸들러 추가
            root_logger = logging.getLogger()
            root_logger.addHandler(handler)
