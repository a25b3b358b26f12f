import asyncio
import logging
import smtplib
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Any, Callable, List, Literal, Optional, Set, Tuple
from urllib.parse import quote

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from website import safe

log = logging.getLogger("uvicorn.error")

MIN_PARTY_SIZE = 50
BOOKING_SUBJECT = "Booking Request"
DEFAULT_RECIPIENT = "bellabiladipizza@gmail.com"

MISSING_FIELDS_MSG = "Bitte füllen Sie alle Pflichtfelder aus."
PARTY_SIZE_MSG = "Die Anzahl der Personen muss mindestens {min} betragen."


class BookingValidationError(ValueError):
    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.message = message
        self.field = field


class SubmissionInFlight(RuntimeError):
    pass


# ────────────────────────────────────────────────────────────────────────────
# Models
# ────────────────────────────────────────────────────────────────────────────
class BookingRequest(BaseModel):
    """Booking form fields. Accepts the form ids used by the site as aliases."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = ""
    phone: str = ""
    person: int = Field(0, validation_alias=AliasChoices("person", "personCount", "persons"))
    date: str = Field("", validation_alias=AliasChoices("date", "reservationDate", "startDate"))
    time: str = Field("", validation_alias=AliasChoices("time", "reservationTime"))
    address: Optional[str] = None
    message: str = ""

    @field_validator("person", mode="before")
    @classmethod
    def _coerce_person(cls, v: Any) -> int:
        # empty or garbage input counts as zero persons and fails the minimum
        try:
            return int(float(str(v).strip())) if v not in (None, "") else 0
        except (ValueError, OverflowError):
            return 0

    @field_validator("name", "phone", "date", "time", "message", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


@dataclass(frozen=True)
class MailSettings:
    recipient: str = DEFAULT_RECIPIENT
    sender: str = ""
    subject: str = BOOKING_SUBJECT
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    use_tls: bool = True
    timeout: float = 15.0


@dataclass
class RelayResult:
    ok: bool
    detail: str
    mailto: Optional[str] = None


# ────────────────────────────────────────────────────────────────────────────
# Validation & composition
# ────────────────────────────────────────────────────────────────────────────
def validate_booking(
    booking: BookingRequest,
    *,
    require_address: bool = False,
    min_party_size: int = MIN_PARTY_SIZE,
) -> BookingRequest:
    required = ["name", "phone", "date", "time"]
    if require_address:
        required.append("address")
    for field in required:
        if not (getattr(booking, field) or "").strip():
            raise BookingValidationError(MISSING_FIELDS_MSG, field)
    if booking.person < min_party_size:
        raise BookingValidationError(PARTY_SIZE_MSG.format(min=min_party_size), "person")
    return booking


def booking_lines(booking: BookingRequest, *, with_address: bool = True) -> List[Tuple[str, str]]:
    lines = [
        ("Name", booking.name),
        ("Phone", booking.phone),
        ("Persons", str(booking.person)),
        ("Date", booking.date),
        ("Time", booking.time),
    ]
    if with_address:
        lines.append(("Address", booking.address or ""))
    lines.append(("Message", booking.message))
    return lines


def compose_mailto(booking: BookingRequest, recipient: str = DEFAULT_RECIPIENT, subject: str = BOOKING_SUBJECT) -> str:
    body = "\r\n".join(f"{label}: {value}" for label, value in booking_lines(booking))
    return f"mailto:{recipient}?subject={quote(subject, safe='')}&body={quote(body, safe='')}"


def compose_email(booking: BookingRequest, settings: MailSettings) -> EmailMessage:
    lines = booking_lines(booking, with_address=bool(booking.address))
    msg = EmailMessage()
    msg["From"] = settings.sender or settings.smtp_user or settings.recipient
    msg["To"] = settings.recipient
    msg["Subject"] = settings.subject
    msg.set_content("\n".join(f"{label}: {value}" for label, value in lines))
    msg.add_alternative(
        "\n".join(f"<p><strong>{label}:</strong> {safe(value)}</p>" for label, value in lines),
        subtype="html",
    )
    return msg


# ────────────────────────────────────────────────────────────────────────────
# Relays
# ────────────────────────────────────────────────────────────────────────────
class BaseRelay(ABC):
    """One way of turning a booking into an outbound email."""

    require_address = False

    def check(self, booking: BookingRequest) -> BookingRequest:
        return validate_booking(booking, require_address=self.require_address)

    @abstractmethod
    async def submit(self, booking: BookingRequest) -> RelayResult:
        """Validate and dispatch. Raises BookingValidationError before any dispatch."""
        pass


class MailtoRelay(BaseRelay):
    """Client handoff: hands back a pre-filled mailto URI, no server involved."""

    require_address = True

    def __init__(self, settings: MailSettings = MailSettings()):
        self.settings = settings

    async def submit(self, booking: BookingRequest) -> RelayResult:
        self.check(booking)
        uri = compose_mailto(booking, self.settings.recipient, self.settings.subject)
        return RelayResult(ok=True, detail="mailto handoff", mailto=uri)


# Thread pool for blocking SMTP sessions
mail_executor = ThreadPoolExecutor(max_workers=2)


class SmtpRelay(BaseRelay):
    """Server relay: sends one email over authenticated SMTP. Never retries."""

    def __init__(
        self,
        settings: MailSettings,
        *,
        smtp_factory: Callable[..., smtplib.SMTP] = smtplib.SMTP,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self.settings = settings
        self.smtp_factory = smtp_factory
        self.executor = executor or mail_executor

    def _send(self, msg: EmailMessage):
        s = self.settings
        with self.smtp_factory(s.smtp_host, s.smtp_port, timeout=s.timeout) as smtp:
            if s.use_tls:
                smtp.starttls()
            if s.smtp_user:
                smtp.login(s.smtp_user, s.smtp_password)
            return smtp.send_message(msg)

    async def submit(self, booking: BookingRequest) -> RelayResult:
        self.check(booking)
        msg = compose_email(booking, self.settings)
        loop = asyncio.get_running_loop()
        try:
            refused = await loop.run_in_executor(self.executor, self._send, msg)
        except (smtplib.SMTPException, OSError) as e:
            log.error("send-email: dispatch to %s failed: %s", self.settings.recipient, e)
            return RelayResult(ok=False, detail="Error sending email")
        if refused:
            log.warning("send-email: recipients refused: %s", refused)
        log.info("send-email: booking for %s (%d persons) sent to %s", booking.name, booking.person, self.settings.recipient)
        return RelayResult(ok=True, detail="Email sent successfully")


def relay_for(context: Literal["client", "server"], settings: MailSettings, **kwargs) -> BaseRelay:
    if context == "client":
        return MailtoRelay(settings)
    if context == "server":
        return SmtpRelay(settings, **kwargs)
    raise ValueError(f"unknown relay context: {context!r}")


class SubmissionGuard:
    """Allows one in-flight submission per session key."""

    def __init__(self):
        self._in_flight: Set[str] = set()

    def busy(self, key: str) -> bool:
        return key in self._in_flight

    @asynccontextmanager
    async def hold(self, key: str):
        if key in self._in_flight:
            raise SubmissionInFlight(key)
        self._in_flight.add(key)
        try:
            yield
        finally:
            self._in_flight.discard(key)
