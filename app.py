from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import BaseModel, Field

from config import Settings, load_env, load_settings
from landing import LANDING_PAGE
from payment.exceptions import FacilitatorError
from payment.verifier import PaymentVerifier, get_verifier
from payment.x402 import build_requirement, encode_settlement, payment_required_body, price_message
from tools.registry import get_categories
from tools.search import normalize_query, search_tools
from utils.logger import get_logger

load_env()

logger = get_logger("ai_indigo.app")

_settings = load_settings()


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class CategoriesResponse(BaseModel):
    success: bool = True
    categories: list[str]


class ToolOut(BaseModel):
    id: str
    name: str
    category: str
    description: str
    url: str


class ToolsResponse(BaseModel):
    success: bool = True
    query: str
    count: int
    tools: list[ToolOut] = Field(default_factory=list)
    note: str = "Full dataset available at aiindigo.com"


def get_settings() -> Settings:
    return _settings


def get_payment_verifier(settings: Settings = Depends(get_settings)) -> PaymentVerifier:
    return get_verifier(settings)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logger.info("AI Indigo x402 API running on port %s", _settings.port)
    logger.info("Price: $%.2f per query", _settings.price_cents / 100)
    logger.info("Wallet: %s", _settings.wallet_address)
    logger.info("Payment verification: %s", _settings.payment_verification)
    yield


app = FastAPI(title="AI Indigo x402 API", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return LANDING_PAGE


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=_utc_timestamp())


@app.get("/api/categories", response_model=CategoriesResponse)
def categories() -> CategoriesResponse:
    return CategoriesResponse(categories=get_categories())


@app.get(
    "/api/tools",
    response_model=ToolsResponse,
    responses={402: {"description": "Payment Required (x402 requirements in body)"}},
)
def search(
    response: Response,
    q: str | None = None,
    category: str | None = None,
    x_payment: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
    verifier: PaymentVerifier = Depends(get_payment_verifier),
) -> Any:
    requirement = build_requirement(settings)

    try:
        decision = verifier.check(x_payment, requirement)
    except FacilitatorError as e:
        logger.error("Facilitator request failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Facilitator request failed: {e}") from e

    if not decision.paid:
        logger.info("402 for /api/tools q=%r category=%r (%s)", q, category, price_message(settings.price_cents))
        return JSONResponse(
            status_code=402,
            content=payment_required_body(requirement, settings.price_cents, reason=decision.reason),
        )

    if decision.settlement is not None:
        response.headers["X-PAYMENT-RESPONSE"] = encode_settlement(decision.settlement.as_dict())

    results = search_tools(q, category)
    logger.info("Paid search q=%r category=%r -> %d result(s)", q, category, len(results))
    return ToolsResponse(
        query=normalize_query(q),
        count=len(results),
        tools=[ToolOut(**t.as_dict()) for t in results],
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=_settings.port)
