"""twentyfour package: digit corpus, expression evaluator, game rounds and CLI for the 24 game."""

__all__ = [
    "config",
    "corpus",
    "operators",
    "parser",
    "exact",
    "game",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "validate_expression",
    "check_solution",
    "new_round",
]
