# checklist/models.py
"""
Records returned by GET /api/responses/{id}.

The backend wraps the payload as {"data": {"response": {...}, "answers": [...]}}.
parse_response_data() validates that envelope and builds immutable records;
anything missing or of the wrong shape raises MalformedPayloadError.
"""

from dataclasses import dataclass
from datetime import datetime

LANGUAGES = ("EN", "ID")

YES = "Yes"
NO  = "No"
NA  = "N/A"


class MalformedPayloadError(ValueError):
    """The load response did not match the expected envelope."""


@dataclass(frozen=True)
class AssessmentResponse:
    id: str
    email: str
    language: str
    timestamp: datetime


@dataclass(frozen=True)
class Answer:
    id: str | None
    area: str | None
    activity: str
    criteria: str
    answer: str
    remarks: str | None = None


@dataclass(frozen=True)
class ResponseData:
    response: AssessmentResponse
    answers: tuple


@dataclass(frozen=True)
class Stats:
    yes: int = 0
    no: int = 0
    na: int = 0

    @property
    def total(self) -> int:
        return self.yes + self.no + self.na


# ── Parsing ───────────────────────────────────────────────────────────────────

def _require(obj: dict, key: str, kind=str):
    if key not in obj or obj[key] is None:
        raise MalformedPayloadError(f"missing field '{key}'")
    value = obj[key]
    if not isinstance(value, kind):
        raise MalformedPayloadError(f"field '{key}' has type {type(value).__name__}")
    return value


def _optional_str(obj: dict, key: str):
    value = obj.get(key)
    if value is None:
        return None
    return str(value)


def _parse_timestamp(raw) -> datetime:
    if isinstance(raw, (int, float)):
        return datetime.fromtimestamp(raw / 1000)
    if not isinstance(raw, str):
        raise MalformedPayloadError("field 'timestamp' is not a string")
    try:
        # JS-style ISO strings end in "Z"
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as e:
        raise MalformedPayloadError(f"bad timestamp {raw!r}") from e


def parse_response(raw: dict) -> AssessmentResponse:
    if not isinstance(raw, dict):
        raise MalformedPayloadError("'response' is not an object")
    if raw.get("id") is None:
        raise MalformedPayloadError("missing field 'id'")
    language = _require(raw, "language")
    if language not in LANGUAGES:
        raise MalformedPayloadError(f"unsupported language {language!r}")
    return AssessmentResponse(
        id=str(raw["id"]),
        email=_require(raw, "email"),
        language=language,
        timestamp=_parse_timestamp(raw.get("timestamp")),
    )


def parse_answer(raw: dict) -> Answer:
    if not isinstance(raw, dict):
        raise MalformedPayloadError("answer entry is not an object")
    return Answer(
        id=_optional_str(raw, "id"),
        area=_optional_str(raw, "area"),
        activity=_require(raw, "activity"),
        criteria=_require(raw, "criteria"),
        # unanswered items come back as null; they never match a counted literal
        answer=_optional_str(raw, "answer") or "",
        remarks=_optional_str(raw, "remarks"),
    )


def parse_response_data(body) -> ResponseData:
    """Build ResponseData from the full JSON body of the load endpoint."""
    if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
        raise MalformedPayloadError("body has no 'data' object")
    data = body["data"]
    answers = data.get("answers")
    if not isinstance(answers, list):
        raise MalformedPayloadError("'answers' is not a list")
    return ResponseData(
        response=parse_response(data.get("response")),
        answers=tuple(parse_answer(a) for a in answers),
    )
