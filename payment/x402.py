from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any

from config import Settings
from payment.exceptions import InvalidPaymentHeader

X402_VERSION = "1"
SCHEME = "exact"
NETWORK = "base"
USDC_BASE_ADDRESS = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"

# USDC has 6 decimals, so one cent is 10_000 base units.
UNITS_PER_CENT = 10000


@dataclass(frozen=True)
class PaymentRequirement:
    version: str
    scheme: str
    network: str
    asset: str
    amount: str
    pay_to: str
    facilitator: str

    def as_dict(self) -> dict[str, str]:
        return {
            "version": self.version,
            "scheme": self.scheme,
            "network": self.network,
            "asset": self.asset,
            "amount": self.amount,
            "payTo": self.pay_to,
            "facilitator": self.facilitator,
        }


def amount_for_cents(price_cents: int) -> str:
    return str(price_cents * UNITS_PER_CENT)


def price_message(price_cents: int) -> str:
    return f"Search AI Indigo tools for ${price_cents / 100:.2f} USDC"


def build_requirement(settings: Settings) -> PaymentRequirement:
    return PaymentRequirement(
        version=X402_VERSION,
        scheme=SCHEME,
        network=NETWORK,
        asset=USDC_BASE_ADDRESS,
        amount=amount_for_cents(settings.price_cents),
        pay_to=settings.wallet_address,
        facilitator=settings.facilitator_url,
    )


def payment_required_body(
    requirement: PaymentRequirement,
    price_cents: int,
    *,
    reason: str | None = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "error": "Payment Required",
        "x402": requirement.as_dict(),
        "message": price_message(price_cents),
    }
    if reason:
        body["reason"] = reason
    return body


def decode_payment_header(value: str) -> dict[str, Any]:
    """Decode an X-PAYMENT header (base64 of a JSON payment payload)."""
    value = value.strip()
    if not value:
        raise InvalidPaymentHeader("empty payment header")
    try:
        raw = base64.b64decode(value, validate=True)
        payload = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise InvalidPaymentHeader(f"payment header is not base64 JSON: {e}") from e
    if not isinstance(payload, dict):
        raise InvalidPaymentHeader("payment payload must be a JSON object")
    return payload


def encode_settlement(settlement: dict[str, Any]) -> str:
    raw = json.dumps(settlement, separators=(",", ":")).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")
