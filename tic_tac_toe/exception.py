class GameError(Exception):
    pass


class ContractViolation(GameError):
    """Raised when a caller breaks the engine's contract, e.g. an out-of-range cell index."""
