"""Payment checks for the paywalled endpoints.

A verifier turns the raw ``X-PAYMENT`` header into a decision. The default
verifier accepts any non-empty header without calling out anywhere; the
facilitator verifier asks the configured facilitator to verify the payment and
then to settle it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config import Settings
from payment.exceptions import InvalidPaymentHeader
from payment.facilitator_client import FacilitatorClient, SettlementResult
from payment.x402 import PaymentRequirement, decode_payment_header
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PaymentDecision:
    paid: bool
    reason: str | None = None
    settlement: SettlementResult | None = None


class PaymentVerifier(Protocol):
    def check(self, header: str | None, requirement: PaymentRequirement) -> PaymentDecision:
        ...


class AcceptAnyPaymentVerifier:
    """Dev mode: any non-empty header counts as paid."""

    def check(self, header: str | None, requirement: PaymentRequirement) -> PaymentDecision:
        if not header:
            return PaymentDecision(paid=False)
        return PaymentDecision(paid=True)


class FacilitatorPaymentVerifier:
    def __init__(self, client: FacilitatorClient) -> None:
        self.client = client

    def check(self, header: str | None, requirement: PaymentRequirement) -> PaymentDecision:
        if not header:
            return PaymentDecision(paid=False)
        try:
            payload = decode_payment_header(header)
        except InvalidPaymentHeader as e:
            logger.warning("Rejected payment header: %s", e)
            return PaymentDecision(paid=False, reason=str(e))

        verification = self.client.verify(payload, requirement)
        if not verification.valid:
            logger.warning("Payment verification failed: %s", verification.reason)
            return PaymentDecision(paid=False, reason=verification.reason or "payment verification failed")

        settlement = self.client.settle(payload, requirement)
        if not settlement.success:
            logger.warning("Payment settlement failed: %s", settlement.reason)
            return PaymentDecision(paid=False, reason=settlement.reason or "payment settlement failed")

        logger.info("Payment settled: payer=%s tx=%s", settlement.payer or verification.payer, settlement.transaction)
        return PaymentDecision(paid=True, settlement=settlement)


def get_verifier(settings: Settings) -> PaymentVerifier:
    if settings.payment_verification == "facilitator":
        client = FacilitatorClient(base_url=settings.facilitator_url, timeout_s=settings.facilitator_timeout_s)
        return FacilitatorPaymentVerifier(client)
    return AcceptAnyPaymentVerifier()
