class OrderDeskError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(OrderDeskError):
    """Client input is missing, malformed or outside the allowed vocabulary.

    Always raised before anything is written.
    """

    status_code = 400


class StoreFailure(OrderDeskError):
    """The backing store was unreachable or rejected a statement.

    Any transaction that was open has already been rolled back.
    """

    status_code = 500
