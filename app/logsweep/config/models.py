"""Configuration models for retention rules.

This module defines the Pydantic models that validate raw rule
records before they are turned into RetentionRule instances.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from logsweep.sweep.models import RetentionRule


class RuleEntry(BaseModel):
    """One rule record as written in the configuration file.

    Attributes:
        path: Directory whose immediate entries are swept.
        regex: Regular expression matched against each file's full path.
        day: Minimum age in whole days.
        name: Optional display label.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Annotated[str, Field(min_length=1, description="Directory to sweep")]
    regex: Annotated[str, Field(min_length=1, description="Pattern matched against full paths")]
    day: Annotated[StrictInt, Field(ge=0, description="Retention age in days")]
    name: Annotated[str | None, Field(description="Display label")] = None

    @field_validator("path", "regex")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject values made only of whitespace."""
        if not v.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return v

    def to_rule(self) -> RetentionRule:
        """Convert to the immutable rule consumed by the sweep core."""
        return RetentionRule(
            directory=self.path,
            pattern=self.regex,
            retention_days=self.day,
            name=self.name,
        )


class RuleSet(BaseModel):
    """Ordered collection of rule records.

    Attributes:
        rules: Rules in configuration order.
    """

    model_config = ConfigDict(extra="forbid")

    rules: Annotated[list[RuleEntry], Field(default_factory=list)]

    def to_rules(self) -> list[RetentionRule]:
        """Convert every entry, keeping configuration order."""
        return [entry.to_rule() for entry in self.rules]
