# app.py
import os, time, logging
from dataclasses import asdict
from typing import Dict, Any, List
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.middleware.gzip import GZipMiddleware
from pydantic import BaseModel
from dotenv import load_dotenv
load_dotenv()

from menu_data import MENU_ITEMS, CATEGORY_NAMES, CATEGORY_ORDER, DRINKS_CATEGORY
from website import render_menu, build_page
from interactions import DEFAULT_SLIDE_PERIOD_MS
from reservation import (
    BookingRequest, BookingValidationError, MailSettings, BaseRelay, MailtoRelay,
    SubmissionGuard, SubmissionInFlight, relay_for, DEFAULT_RECIPIENT, MIN_PARTY_SIZE,
)

# ────────────────────────────────────────────────────────────────────────────
# Env & Config
# ────────────────────────────────────────────────────────────────────────────
RESERVATION_RECIPIENT = os.getenv("RESERVATION_RECIPIENT", DEFAULT_RECIPIENT)
MAIL_FROM      = os.getenv("MAIL_FROM", "")
SMTP_HOST      = os.getenv("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT      = int(os.getenv("SMTP_PORT", "587"))
SMTP_USER      = os.getenv("SMTP_USER", "")
SMTP_PASSWORD  = os.getenv("SMTP_PASSWORD", "")
SMTP_STARTTLS  = os.getenv("SMTP_STARTTLS", "1").lower() not in ("0", "false", "no")

IMAGE_BASE_DIR  = os.getenv("IMAGE_BASE_DIR", "./assets/images")
FALLBACK_IMAGE  = os.getenv("FALLBACK_IMAGE", f"{IMAGE_BASE_DIR}/menu-1.jpeg")
SLIDE_PERIOD_MS = int(os.getenv("SLIDE_PERIOD_MS", str(DEFAULT_SLIDE_PERIOD_MS)))
SITE_NAME       = os.getenv("SITE_NAME", "Bella Biladi Pizza")

ALLOWED_ORIGINS    = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",")]
RATE_LIMIT_PER_MIN = int(os.getenv("RATE_LIMIT_PER_MIN", "60"))
LOG_LEVEL          = os.getenv("LOG_LEVEL", "INFO").upper()

MAIL_SETTINGS = MailSettings(
    recipient=RESERVATION_RECIPIENT,
    sender=MAIL_FROM or SMTP_USER,
    smtp_host=SMTP_HOST,
    smtp_port=SMTP_PORT,
    smtp_user=SMTP_USER,
    smtp_password=SMTP_PASSWORD,
    use_tls=SMTP_STARTTLS,
)

# Logging
log = logging.getLogger("uvicorn.error")
log.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))


# ────────────────────────────────────────────────────────────────────────────
# App (lifespan renders the static menu page once)
# ────────────────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    entries = render_menu(
        MENU_ITEMS, CATEGORY_NAMES, CATEGORY_ORDER,
        image_base=IMAGE_BASE_DIR, fallback_image=FALLBACK_IMAGE, drinks_category=DRINKS_CATEGORY,
    )
    app.state.menu_entries = entries
    app.state.page_html, app.state.page_meta = build_page(
        entries, name=SITE_NAME, image_base=IMAGE_BASE_DIR,
        slide_period_ms=SLIDE_PERIOD_MS, min_party_size=MIN_PARTY_SIZE,
    )
    app.state.relay = relay_for("server", MAIL_SETTINGS)
    app.state.mailto_relay = MailtoRelay(MAIL_SETTINGS)
    app.state.guard = SubmissionGuard()
    # Warn (don't crash) if mail credentials are missing
    if not SMTP_USER or not SMTP_PASSWORD:
        log.warning("SMTP_USER/SMTP_PASSWORD not set; /send-email will fail at the transport.")
    log.info("Menu rendered: %d categories, %d items", len(app.state.page_meta["categories"]), app.state.page_meta["items"])
    yield

app = FastAPI(title="Bella Biladi Backend", version="1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)
# Compression
app.add_middleware(GZipMiddleware, minimum_size=500)


# ────────────────────────────────────────────────────────────────────────────
# Utilities: rate limiting, request parsing, dependencies
# ────────────────────────────────────────────────────────────────────────────
_ip_hits: Dict[str, List[float]] = {}
MAX_IP_BUCKETS = 10_000

def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"

def rate_limit(request: Request):
    ip = client_key(request)
    now = time.time()
    window_start = now - 60.0

    if len(_ip_hits) > MAX_IP_BUCKETS and ip not in _ip_hits:
        # basic protection against memory bloat
        raise HTTPException(503, "Server busy")

    bucket = _ip_hits.setdefault(ip, [])
    while bucket and bucket[0] < window_start:
        bucket.pop(0)
    if len(bucket) >= RATE_LIMIT_PER_MIN:
        raise HTTPException(429, "Rate limit exceeded.")
    bucket.append(now)

def get_relay(request: Request) -> BaseRelay:
    return request.app.state.relay

def get_mailto_relay(request: Request) -> BaseRelay:
    return request.app.state.mailto_relay

def get_guard(request: Request) -> SubmissionGuard:
    return request.app.state.guard

async def read_booking(request: Request) -> BookingRequest:
    """Parse a booking from a JSON or form-encoded body."""
    ctype = (request.headers.get("content-type") or "").lower()
    try:
        if "application/json" in ctype:
            data = await request.json()
            if not isinstance(data, dict):
                raise HTTPException(400, "Expected a JSON object")
        else:
            data = dict(await request.form())
        return BookingRequest.model_validate(data)
    except ValueError as e:
        # covers malformed JSON and pydantic ValidationError
        log.info("send-email: unreadable body (%s)", e)
        raise HTTPException(400, "Invalid booking payload")


# ────────────────────────────────────────────────────────────────────────────
# Models
# ────────────────────────────────────────────────────────────────────────────
class MailtoOut(BaseModel):
    mailto: str


# ────────────────────────────────────────────────────────────────────────────
# Endpoints
# ────────────────────────────────────────────────────────────────────────────
@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def root(request: Request):
    """The site page with the menu mounted."""
    return HTMLResponse(request.app.state.page_html)

@app.get("/healthz", summary="Liveness probe")
async def healthz():
    return {"ok": True, "ts": time.time()}

@app.get("/menu", summary="Rendered menu as display records")
async def menu(request: Request) -> List[Dict[str, Any]]:
    return [asdict(e) for e in request.app.state.menu_entries]

@app.post("/send-email", response_class=PlainTextResponse, summary="Relay a booking request by email")
async def send_email(
    request: Request,
    _: None = Depends(rate_limit),
    relay: BaseRelay = Depends(get_relay),
    guard: SubmissionGuard = Depends(get_guard),
):
    booking = await read_booking(request)
    try:
        async with guard.hold(client_key(request)):
            result = await relay.submit(booking)
    except BookingValidationError as e:
        log.info("send-email: rejected booking (%s): %s", e.field, e.message)
        return PlainTextResponse(e.message, status_code=400)
    except SubmissionInFlight:
        return PlainTextResponse("Submission already in progress", status_code=429)

    if not result.ok:
        return PlainTextResponse(result.detail, status_code=500)
    return PlainTextResponse(result.detail, status_code=200)

@app.post("/reservation/mailto", response_model=MailtoOut, summary="Build a mailto handoff link for a booking")
async def reservation_mailto(
    request: Request,
    _: None = Depends(rate_limit),
    relay: BaseRelay = Depends(get_mailto_relay),
):
    booking = await read_booking(request)
    try:
        result = await relay.submit(booking)
    except BookingValidationError as e:
        raise HTTPException(400, e.message)
    return MailtoOut(mailto=result.mailto)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")))
