"""Errors raised by the product mapping components."""


class InvalidInput(ValueError):
    """A mapping operation received no record to map.

    Raised to the caller and never recovered by the mapper itself.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message
