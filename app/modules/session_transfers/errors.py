# app/modules/session_transfers/errors.py
from enum import Enum


class TransferErrorKind(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    ITEM_TRANSFER_FAILURE = "ITEM_TRANSFER_FAILURE"
    UNEXPECTED_FAILURE = "UNEXPECTED_FAILURE"


class TransferError(Exception):
    """
    Failure raised inside the transfer workflow.

    Callers branch on `kind`, there are no subclasses:
    - INVALID_REQUEST: bad branch pair, missing ids or dates, unknown type
    - ITEM_TRANSFER_FAILURE: one offering could not be copied or disposed of
    - UNEXPECTED_FAILURE: anything else escaping validation or selection
    """

    def __init__(self, kind: TransferErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def invalid_request(cls, message: str) -> "TransferError":
        return cls(TransferErrorKind.INVALID_REQUEST, message)

    def __repr__(self) -> str:
        return f"TransferError({self.kind.value}, {self.message!r})"
