class InvalidTicketError(ValueError):
    """Ticket or game content outside the lottery rules."""


class RoundMismatchError(ValueError):
    """A draw result was applied to a ticket of another round."""


class DrawResultError(RuntimeError):
    """Draw result payload could not be mapped."""
