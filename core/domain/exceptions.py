from typing import Any


class TxResultError(Exception):
    """Base class for transaction result errors."""


class InvalidResponseShape(TxResultError):
    """The value is not a Horizon submission response of any known shape."""

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response
