"""
Lead capture form: field bookkeeping and the consultation request submission.

A form is built around an injected store. Its submission state is one of
Idle, Submitting, Succeeded or Failed(message), and every error raised while
talking to the store ends up as Failed rather than propagating.
"""
import logging
import re
from dataclasses import dataclass

from models import CONSULTATION_REQUESTS_TABLE, INTEREST_TYPES

logger = logging.getLogger(__name__)

CONFIGURATION_ERROR_MESSAGE = (
    "Supabase is not configured. Please set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
)
FALLBACK_ERROR_MESSAGE = "Failed to submit consultation request."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

TEXT_FIELDS = ("full_name", "company_name", "email", "challenge_description")
FIELDS = TEXT_FIELDS + ("interest_type",)
REQUIRED_FIELDS = ("full_name", "email", "challenge_description")
OPTIONAL_FIELDS = ("company_name", "interest_type")
ASCII_WHITESPACE = " \t\n\r\f"

# Same rule browsers apply to <input type="email">
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


class FormError(Exception):
    pass


class FormValidationError(FormError):
    def __init__(self, fields, message=None):
        self.fields = list(fields)
        super().__init__(message or f"Invalid or missing fields: {', '.join(self.fields)}")


class InvalidChoiceError(FormError, ValueError):
    pass


class SubmissionInProgress(FormError):
    pass


class SubmissionState:
    name = None


@dataclass(frozen=True)
class Idle(SubmissionState):
    name = "idle"


@dataclass(frozen=True)
class Submitting(SubmissionState):
    name = "submitting"


@dataclass(frozen=True)
class Succeeded(SubmissionState):
    name = "succeeded"


@dataclass(frozen=True)
class Failed(SubmissionState):
    message: str
    kind: str = "unexpected"  # "configuration", "store" or "unexpected"
    name = "failed"


def is_valid_email(value):
    return bool(EMAIL_PATTERN.match(value))


class LeadCaptureForm:
    def __init__(self, store):
        self.store = store
        self.values = {name: "" for name in FIELDS}
        self.state = Idle()
        self._listeners = []

    @property
    def submitting(self):
        return isinstance(self.state, Submitting)

    def subscribe(self, callback):
        """Call `callback(form)` after every field update or state change."""
        self._listeners.append(callback)
        return callback

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    def _set_state(self, state):
        self.state = state
        self._notify()

    def update_field(self, name, value):
        if name == "interest_type":
            self.select_interest_type(value)
            return
        if name not in TEXT_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        if name == "email":
            # Browsers sanitize type=email values this way before submitting
            value = value.strip(ASCII_WHITESPACE)
        self.values[name] = value
        self._notify()

    def select_interest_type(self, value):
        if value and value not in INTEREST_TYPES:
            raise InvalidChoiceError(f"Unknown engagement type: {value}")
        self.values["interest_type"] = value or ""
        self._notify()

    def missing_fields(self):
        return [name for name in REQUIRED_FIELDS if not self.values[name]]

    def validate(self):
        missing = self.missing_fields()
        if missing:
            raise FormValidationError(missing, f"Missing required fields: {', '.join(missing)}")
        if not is_valid_email(self.values["email"]):
            raise FormValidationError(["email"], "Please enter a valid email address.")

    def to_row(self):
        """The row sent to the store; empty optional fields become None."""
        row = {name: self.values[name] for name in FIELDS}
        for name in OPTIONAL_FIELDS:
            row[name] = row[name] or None
        return row

    def submit(self):
        self.validate()

        if self.submitting:
            raise SubmissionInProgress("A consultation request is already being submitted.")

        if not self.store.is_configured():
            self._set_state(Failed(CONFIGURATION_ERROR_MESSAGE, kind="configuration"))
            return self.state

        self._set_state(Submitting())

        try:
            response = self.store.insert(CONSULTATION_REQUESTS_TABLE, [self.to_row()])
        except Exception as e:
            logger.exception(f"Consultation request submission failed: {e}")
            self._set_state(Failed(UNEXPECTED_ERROR_MESSAGE, kind="unexpected"))
            return self.state

        if response.error is not None:
            message = response.error.message or FALLBACK_ERROR_MESSAGE
            logger.info(f"Store rejected consultation request: {message}")
            self._set_state(Failed(message, kind="store"))
            return self.state

        logger.info("Consultation request submitted")
        self.values = {name: "" for name in FIELDS}
        self._set_state(Succeeded())
        return self.state
