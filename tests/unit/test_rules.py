"""
Unit tests for the built-in rule tables and the rule matcher.
"""

import re
import pytest

from arch_guard.models.diff import DiffLine
from arch_guard.models.rule import Rule, RuleHit, Violation
from arch_guard.rules import BUILTIN_RULES, WHOLE_DIFF_RULES, RuleMatcher, get_rule, match, match_whole


FAT_INTERFACE_LINE = "export interface Repo { " + "find(id: string): Item; " * 25 + "}"


class TestBuiltinRules:
    """Unit tests for the rule definitions."""

    def test_rule_tables(self):
        """Test table contents and declaration order."""
        assert [r.id for r in BUILTIN_RULES] == [
            "layering-violation", "hardcoded-secret", "unsafe-singleton", "fat-interface",
        ]
        assert [r.id for r in WHOLE_DIFF_RULES] == [
            "layering-violation", "hardcoded-secret", "unsafe-singleton",
            "upward-import-hint", "fat-interface",
        ]

    def test_rule_ids_are_unique(self):
        ids = [r.id for r in WHOLE_DIFF_RULES]
        assert len(ids) == len(set(ids))

    def test_get_rule(self):
        assert get_rule("hardcoded-secret").name == "Security: Hardcoded Secret"
        with pytest.raises(KeyError):
            get_rule("no-such-rule")

    @pytest.mark.parametrize("rule_id, text", [
        ("layering-violation", "import db from 'db-driver';"),
        ("layering-violation", "const { Pool } = require('x') from 'pg'"),
        ("layering-violation", "import { PrismaClient } from \"prisma/client\";"),
        ("layering-violation", "IMPORT Mongo FROM 'MONGOOSE'"),
        ("hardcoded-secret", "const password = \"abc123\";"),
        ("hardcoded-secret", "api_key: 'sk-live_42'"),
        ("hardcoded-secret", "ACCESS_KEY='AKIA1234'"),
        ("unsafe-singleton", "this.instance = new Logger();"),
        ("unsafe-singleton", "THIS.INSTANCE=NEW Cache()"),
        ("upward-import-hint", "import util from '../../shared/util';"),
        ("upward-import-hint", "const x = require(\"../config\")"),
        ("fat-interface", FAT_INTERFACE_LINE),
    ])
    def test_rule_matches(self, rule_id, text):
        """Test each rule against text it must flag."""
        assert get_rule(rule_id).matches(text)

    @pytest.mark.parametrize("rule_id, text", [
        ("layering-violation", "import { UserService } from './services/user';"),
        ("layering-violation", "// talk to the db through the repository"),
        ("hardcoded-secret", "const password = process.env.DB_PASSWORD;"),
        ("hardcoded-secret", "token = getToken()"),
        ("unsafe-singleton", "const instance = new Logger();"),
        ("upward-import-hint", "import util from './util';"),
        ("fat-interface", "interface Small { id: string; }"),
    ])
    def test_rule_does_not_match(self, rule_id, text):
        """Test each rule against compliant text."""
        assert not get_rule(rule_id).matches(text)

    def test_rules_require_case_insensitive_patterns(self):
        """Test that a case-sensitive pattern is rejected."""
        with pytest.raises(ValueError):
            Rule(id="x", name="X", pattern=re.compile("x"), message="m", guidance="g")


class TestMatch:
    """Unit tests for per-line matching."""

    def test_scenario_two_violations(self):
        """Test the controller scenario: one secret, one layering violation."""
        lines = [
            DiffLine("src/controller.js", 2, 'const password = "abc123";'),
            DiffLine("src/controller.js", 3, "import db from 'db-driver';"),
        ]

        violations = match(lines, BUILTIN_RULES)

        assert [(v.rule.id, v.file, v.line) for v in violations] == [
            ("hardcoded-secret", "src/controller.js", 2),
            ("layering-violation", "src/controller.js", 3),
        ]

    def test_multiple_rules_on_one_line(self):
        """Test that a line triggering two rules yields two violations."""
        line = 'interface Creds { token: "abc123"; ' + "field: string; " * 40 + "}"
        violations = match([DiffLine("types.ts", 8, line)], BUILTIN_RULES)

        assert [v.rule.id for v in violations] == ["hardcoded-secret", "fat-interface"]
        assert {(v.file, v.line) for v in violations} == {("types.ts", 8)}

    def test_order_is_lines_then_rules(self):
        """Test outer iteration over lines, inner over rules."""
        lines = [
            DiffLine("a.js", 1, "this.instance = new A(); const secret = 'x1';"),
            DiffLine("a.js", 2, "import sql from 'sql-lib';"),
        ]

        violations = match(lines, BUILTIN_RULES)

        assert [(v.line, v.rule.id) for v in violations] == [
            (1, "hardcoded-secret"),
            (1, "unsafe-singleton"),
            (2, "layering-violation"),
        ]

    def test_snippet_is_stripped(self):
        violations = match([DiffLine("a.js", 1, "    this.instance = new A();   ")], BUILTIN_RULES)
        assert violations[0].snippet == "this.instance = new A();"
        assert violations[0].location == "a.js:1"

    def test_no_lines_no_violations(self):
        assert match([], BUILTIN_RULES) == []

    def test_compliant_lines(self):
        lines = [DiffLine("a.js", 1, "const total = items.length;")]
        assert match(lines, BUILTIN_RULES) == []


class TestMatchWhole:
    """Unit tests for whole-diff matching."""

    def test_one_hit_per_rule(self):
        hits = match_whole("+import util from '../util';\n", WHOLE_DIFF_RULES)

        assert [hit.rule.id for hit in hits] == [r.id for r in WHOLE_DIFF_RULES]
        assert [hit.rule.id for hit in hits if hit.matched] == ["upward-import-hint"]

    def test_fat_interface_across_lines(self):
        """Test a 600+ character interface spanning many lines triggers once."""
        body = "\n".join(f"+  field{i:02d}: string;" for i in range(40))
        diff = f"+++ b/types.ts\n@@ -0,0 +1,42 @@\n+interface Foo {{\n{body}\n+}}\n"
        assert len(body) >= 600

        hits = match_whole(diff, WHOLE_DIFF_RULES)
        fat_hits = [hit for hit in hits if hit.rule.id == "fat-interface"]

        assert fat_hits == [RuleHit(rule=get_rule("fat-interface"), matched=True)]

    def test_hit_unpacks_as_pair(self):
        rule, matched = match_whole("", WHOLE_DIFF_RULES)[0]
        assert rule.id == "layering-violation"
        assert matched is False


class TestRuleMatcher:
    """Unit tests for RuleMatcher class."""

    def test_defaults(self):
        matcher = RuleMatcher()
        assert matcher.line_rules == BUILTIN_RULES
        assert matcher.whole_rules == WHOLE_DIFF_RULES

    def test_line_mode_ignores_upward_imports(self):
        """Test that the upward import hint only exists in whole-diff mode."""
        matcher = RuleMatcher()
        line = DiffLine("a.js", 1, "import util from '../util';")

        assert matcher.match_lines([line]) == []
        assert any(hit.matched for hit in matcher.match_diff(line.content))

    def test_custom_rules(self):
        rule = Rule(
            id="no-console",
            name="Console",
            pattern=re.compile(r"console\.log", re.IGNORECASE),
            message="m",
            guidance="g",
        )
        matcher = RuleMatcher(line_rules=[rule], whole_rules=[rule])

        violations = matcher.match_lines([DiffLine("a.js", 3, "Console.Log('x')")])

        assert violations == [Violation(rule=rule, file="a.js", line=3, snippet="Console.Log('x')")]
