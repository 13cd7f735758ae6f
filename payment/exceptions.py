from __future__ import annotations


class PaymentError(Exception):
    """Base class for payment gate failures."""


class InvalidPaymentHeader(PaymentError):
    """The X-PAYMENT header could not be decoded into a payment payload."""


class FacilitatorError(PaymentError):
    """The facilitator answered with an error status or an unreadable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
