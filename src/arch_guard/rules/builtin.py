"""
Built-in Rule Tables

The fixed architecture and security heuristics applied by the builtin
engine. Rules are declared once at import time; declaration order is
report order.
"""

import re
from typing import Dict, Tuple

from ..models.rule import Rule


LAYERING_VIOLATION = Rule(
    id="layering-violation",
    name="Layering Violation: Direct DB Access",
    pattern=re.compile(
        r"""(import|require).*from.*(['"])(db|mysql|pg|prisma|mongoose|sql)""",
        re.IGNORECASE,
    ),
    message="Controllers and UI layers must not access database drivers directly.",
    guidance="Go through a Service or Repository layer to keep business logic free of persistence details.",
)

HARDCODED_SECRET = Rule(
    id="hardcoded-secret",
    name="Security: Hardcoded Secret",
    pattern=re.compile(
        r"""(password|secret|api_key|token|access_key)\s*[:=]\s*['"][a-zA-Z0-9_-]+['"]""",
        re.IGNORECASE,
    ),
    message="A value that looks like a hardcoded credential was committed.",
    guidance="Move the value to GitHub Secrets and inject it through an environment variable.",
)

UNSAFE_SINGLETON = Rule(
    id="unsafe-singleton",
    name="Pattern: Dangerous Singleton",
    pattern=re.compile(r"this\.instance\s*=\s*new", re.IGNORECASE),
    message="Singleton instance is created with a non-atomic assignment.",
    guidance="Export a module-level constant or make the initialization idempotent.",
)

UPWARD_IMPORT_HINT = Rule(
    id="upward-import-hint",
    name="Dependency: Upward Relative Import",
    pattern=re.compile(r"""(import|require).*(['"])\.\./""", re.IGNORECASE),
    message="Deep relative imports into parent directories hint at circular dependencies.",
    guidance="Import through the module's public entry point or a path alias instead of '../'.",
)

FAT_INTERFACE = Rule(
    id="fat-interface",
    name="Maintainability: Fat Interface",
    pattern=re.compile(r"interface.*\{[\s\S]{500,}\}", re.IGNORECASE),
    message="Interface declaration is too large.",
    guidance="This breaks interface segregation; split it into smaller role-specific interfaces.",
)


# Per-line mode
BUILTIN_RULES: Tuple[Rule, ...] = (
    LAYERING_VIOLATION,
    HARDCODED_SECRET,
    UNSAFE_SINGLETON,
    FAT_INTERFACE,
)

# Whole-diff mode
WHOLE_DIFF_RULES: Tuple[Rule, ...] = (
    LAYERING_VIOLATION,
    HARDCODED_SECRET,
    UNSAFE_SINGLETON,
    UPWARD_IMPORT_HINT,
    FAT_INTERFACE,
)

_RULES_BY_ID: Dict[str, Rule] = {rule.id: rule for rule in WHOLE_DIFF_RULES}


def get_rule(rule_id: str) -> Rule:
    """
    Look up a built-in rule by id.

    Raises:
        KeyError: If no built-in rule has that id
    """
    return _RULES_BY_ID[rule_id]
