"""Tests for configuration models."""

import pytest
from logsweep.config.models import RuleEntry, RuleSet
from pydantic import ValidationError


class TestRuleEntry:
    """Tests for RuleEntry."""

    def test_to_rule(self) -> None:
        """Fields map onto RetentionRule."""
        rule = RuleEntry(path="/var/log", regex="x", day=3, name="sys").to_rule()
        assert rule.directory == "/var/log"
        assert rule.pattern == "x"
        assert rule.retention_days == 3
        assert rule.name == "sys"

    def test_zero_days_allowed(self) -> None:
        """Zero is a valid retention age."""
        assert RuleEntry(path="/x", regex="x", day=0).day == 0

    def test_negative_days_rejected(self) -> None:
        """Negative ages are rejected."""
        with pytest.raises(ValidationError):
            RuleEntry(path="/x", regex="x", day=-1)

    def test_blank_path_rejected(self) -> None:
        """Whitespace-only values are rejected."""
        with pytest.raises(ValidationError, match="must not be blank"):
            RuleEntry(path="  ", regex="x", day=1)


class TestRuleSet:
    """Tests for RuleSet."""

    def test_default_empty(self) -> None:
        """A RuleSet without rules is empty."""
        assert RuleSet().to_rules() == []

    def test_order_preserved(self) -> None:
        """Rules keep configuration order."""
        rule_set = RuleSet.model_validate(
            {"rules": [{"path": p, "regex": "x", "day": 1} for p in ("/c", "/a", "/b")]}
        )
        assert [r.directory for r in rule_set.to_rules()] == ["/c", "/a", "/b"]
