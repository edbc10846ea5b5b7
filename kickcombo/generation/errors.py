"""Canonical Combo Error Types.

Standard error codes (carried in ``details``):
- WRONG_LENGTH: Combo length differs from the clamped requested count
- LEVEL_EXCEEDED: A move is above the requested skill level
- MODE_VIOLATION: A leg-based move appeared in boxing mode
- STANCE_VIOLATION: A stance-restricted or forward-leg move used for the wrong stance
- MISSING_PUNCH: Combo contains no punch
- ADJACENT_RESTRICTED_CATEGORY: Two consecutive kick/knee/defense slots
"""


class ComboInvariantError(RuntimeError):
    """Raised when a generated combo violates an invariant.

    Attributes:
        code: Error code (e.g., "INVALID_COMBO")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class CatalogError(ValueError):
    """Raised when a move catalog is built from inconsistent entries."""

    pass
