from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from payment.exceptions import FacilitatorError
from payment.x402 import PaymentRequirement


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str | None = None
    payer: str | None = None


@dataclass(frozen=True)
class SettlementResult:
    success: bool
    reason: str | None = None
    transaction: str | None = None
    network: str | None = None
    payer: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "errorReason": self.reason,
            "transaction": self.transaction,
            "network": self.network,
            "payer": self.payer,
        }


@dataclass(frozen=True)
class FacilitatorClient:
    base_url: str
    timeout_s: float = 10.0

    def _post(self, path: str, *, payload: dict[str, Any], requirement: PaymentRequirement) -> dict[str, Any]:
        body = {
            "x402Version": int(requirement.version),
            "paymentPayload": payload,
            "paymentRequirements": requirement.as_dict(),
        }
        url = f"{self.base_url.rstrip('/')}{path}"
        try:
            resp = requests.post(url, json=body, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise FacilitatorError(f"facilitator {path} unreachable: {e}") from e
        if resp.status_code >= 400:
            raise FacilitatorError(
                f"facilitator {path} returned HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise FacilitatorError(f"facilitator {path} returned non-JSON body") from e
        if not isinstance(data, dict):
            raise FacilitatorError(f"Unexpected facilitator {path} response: {data!r}")
        return data

    def verify(self, payload: dict[str, Any], requirement: PaymentRequirement) -> VerificationResult:
        data = self._post("/verify", payload=payload, requirement=requirement)
        return VerificationResult(
            valid=bool(data.get("isValid", False)),
            reason=data.get("invalidReason"),
            payer=data.get("payer"),
        )

    def settle(self, payload: dict[str, Any], requirement: PaymentRequirement) -> SettlementResult:
        data = self._post("/settle", payload=payload, requirement=requirement)
        return SettlementResult(
            success=bool(data.get("success", False)),
            reason=data.get("errorReason"),
            transaction=data.get("transaction"),
            network=data.get("network"),
            payer=data.get("payer"),
        )
