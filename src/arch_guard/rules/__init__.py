"""
Rule Engine

This module provides the built-in regex rule tables and the matcher
that applies them to indexed diff lines or to a whole diff.
"""

from .builtin import BUILTIN_RULES, WHOLE_DIFF_RULES, get_rule
from .matcher import RuleMatcher, match, match_whole

__all__ = ['BUILTIN_RULES', 'WHOLE_DIFF_RULES', 'get_rule', 'RuleMatcher', 'match', 'match_whole']
