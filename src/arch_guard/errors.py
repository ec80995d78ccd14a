"""
Error Types

Architecture Guard 실행 중 발생하는 예외 계층
"""


class ArchGuardError(Exception):
    """Base class for every error raised by Architecture Guard."""


class ConfigurationError(ArchGuardError):
    """Missing or invalid configuration (raised before any network call)."""
