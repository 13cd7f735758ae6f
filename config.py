from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from utils.logger import apply_log_level, get_logger

logger = get_logger(__name__)

PRICE_CENTS = 1  # $0.01 per query

DEFAULT_PORT = 3000
DEFAULT_WALLET_ADDRESS = "0xA6Bba2453673196ae22fb249C7eA9FA118a87150"
DEFAULT_FACILITATOR_URL = "https://pay.openfacilitator.io"
DEFAULT_FACILITATOR_TIMEOUT_S = 10.0

VERIFICATION_MODES = ("stub", "facilitator")

DOTENV_PATH = Path(__file__).parent / ".env"


@dataclass(frozen=True)
class Settings:
    port: int
    wallet_address: str
    facilitator_url: str
    payment_verification: str
    facilitator_timeout_s: float
    price_cents: int = PRICE_CENTS


def load_env() -> None:
    if DOTENV_PATH.exists():
        load_dotenv(dotenv_path=DOTENV_PATH, override=True)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=True)
    apply_log_level()


def _env_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def load_settings() -> Settings:
    mode = _env_str("PAYMENT_VERIFICATION", "stub").lower()
    if mode not in VERIFICATION_MODES:
        logger.warning("Unknown PAYMENT_VERIFICATION=%r, using stub", mode)
        mode = "stub"
    return Settings(
        port=_env_int("PORT", DEFAULT_PORT),
        wallet_address=_env_str("WALLET_ADDRESS", DEFAULT_WALLET_ADDRESS),
        facilitator_url=_env_str("FACILITATOR_URL", DEFAULT_FACILITATOR_URL).rstrip("/"),
        payment_verification=mode,
        facilitator_timeout_s=_env_float("FACILITATOR_TIMEOUT_S", DEFAULT_FACILITATOR_TIMEOUT_S),
    )
