"""Validation schema for Euchre rules configuration."""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, Field, model_validator

WINNING_SCORE = 10


class ScoringConfig(BaseModel):
    made: int = Field(1, gt=0, description="Points for makers taking three or four tricks.")
    march: int = Field(2, gt=0, description="Points for makers taking all five tricks.")
    lone_march: int = Field(4, gt=0, description="Points for a lone hand taking all five tricks.")
    euchred: int = Field(2, gt=0, description="Points awarded to the defenders when the makers are euchred.")

    @model_validator(mode="after")
    def ensure_march_pays_more(self) -> "ScoringConfig":
        if self.march < self.made:
            raise ValueError("A march must be worth at least as much as a made hand.")
        if self.lone_march < self.march:
            raise ValueError("A lone march must be worth at least as much as a march.")
        return self


class DealingConfig(BaseModel):
    style: Literal["block", "round_robin"] = Field(
        "block",
        description="'block' deals five contiguous cards per seat; 'round_robin' deals one card at a time.",
    )


class RuleSet(BaseModel):
    winning_score: int = Field(WINNING_SCORE, gt=0, description="Score that ends the game.")
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    dealing: DealingConfig = Field(default_factory=DealingConfig)


DEFAULT_RULES = RuleSet()


def load_rules(payload: Mapping[str, Any]) -> RuleSet:
    """Validate a plain mapping (e.g. parsed JSON) into a ``RuleSet``."""
    return RuleSet.model_validate(dict(payload))
