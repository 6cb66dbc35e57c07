from __future__ import annotations


EMPTY_EXPRESSION = "EMPTY_EXPRESSION"
INVALID_FLAT_MODIFIER = "INVALID_FLAT_MODIFIER"
MALFORMED_TERM = "MALFORMED_TERM"
INVALID_COUNT = "INVALID_COUNT"
INVALID_SIDES = "INVALID_SIDES"
NON_POSITIVE_VALUE = "NON_POSITIVE_VALUE"
NOTHING_TO_ROLL = "NOTHING_TO_ROLL"


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, no roll performed)."""


class ParseError(DiceError):
    """An expression that could not be parsed.

    The message always starts with the bracketed ``code`` so callers that
    only see the string (CLI, MCP clients) can still tell the cases apart.
    """

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(f"[{code}] {message}")
