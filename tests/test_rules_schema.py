import pytest
from pydantic import ValidationError

from euchre.rules_schema import DEFAULT_RULES, WINNING_SCORE, load_rules


def test_default_rules():
    assert DEFAULT_RULES.winning_score == WINNING_SCORE == 10
    assert DEFAULT_RULES.scoring.made == 1
    assert DEFAULT_RULES.scoring.march == 2
    assert DEFAULT_RULES.scoring.lone_march == 4
    assert DEFAULT_RULES.scoring.euchred == 2
    assert DEFAULT_RULES.dealing.style == "block"


def test_load_rules_overrides_nested_values():
    rules = load_rules({"winning_score": 11, "scoring": {"lone_march": 5}, "dealing": {"style": "round_robin"}})
    assert rules.winning_score == 11
    assert rules.scoring.lone_march == 5
    assert rules.scoring.made == 1
    assert rules.dealing.style == "round_robin"


@pytest.mark.parametrize(
    "payload",
    [
        {"winning_score": 0},
        {"scoring": {"made": 3, "march": 2}},
        {"scoring": {"march": 5}},
        {"scoring": {"euchred": -1}},
        {"dealing": {"style": "shuffle"}},
    ],
)
def test_invalid_rules_are_rejected(payload):
    with pytest.raises(ValidationError):
        load_rules(payload)
