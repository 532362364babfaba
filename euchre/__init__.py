"""Core engine package for the Euchre rules engine."""

__all__ = [
    "cards",
    "deck",
    "errors",
    "seating",
    "messages",
    "state",
    "dealing",
    "bidding",
    "go_alone",
    "trick",
    "mechanics",
    "play",
    "scoring",
    "rules_schema",
    "service",
]
