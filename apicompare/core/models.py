"""Core data models for API comparison requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

BodyKind = Literal["structured", "textual"]
Side = Literal["reference", "target"]

DEFAULT_METHOD = "GET"


@dataclass(frozen=True, slots=True)
class ResponseBody:
    """Response payload tagged as structured JSON or raw text.

    Structured bodies hold a JSON object or array. Textual bodies hold a
    string, or ``None`` when the transport produced no body at all.
    """

    kind: BodyKind
    value: Any = None

    def __post_init__(self) -> None:
        if self.kind == "structured":
            if not isinstance(self.value, (dict, list)):
                raise ValueError("structured body must be a JSON object or array")
        elif self.kind == "textual":
            if self.value is not None and not isinstance(self.value, str):
                raise ValueError("textual body must be a string or None")
        else:
            raise ValueError(f"Unsupported body kind: {self.kind}")

    @classmethod
    def structured(cls, value: dict[str, Any] | list[Any]) -> "ResponseBody":
        return cls(kind="structured", value=value)

    @classmethod
    def textual(cls, text: str | None) -> "ResponseBody":
        return cls(kind="textual", value=text)

    @classmethod
    def empty(cls) -> "ResponseBody":
        return cls(kind="textual", value=None)

    @classmethod
    def from_value(cls, raw: Any) -> "ResponseBody":
        """Tag a decoded JSON value; objects and arrays are structured."""
        if isinstance(raw, (dict, list)):
            return cls.structured(raw)
        if raw is None or isinstance(raw, str):
            return cls.textual(raw)
        return cls.textual(str(raw))

    @property
    def is_structured(self) -> bool:
        return self.kind == "structured"

    def describe(self) -> str:
        return "JSON" if self.is_structured else "string"


@dataclass(slots=True)
class Request:
    """A logical request issued against both environments."""

    url: str | None = None
    method: str = DEFAULT_METHOD
    body: str | dict[str, Any] | list[Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    name: str | None = None
    reference_url: str | None = None
    target_url: str | None = None

    def __post_init__(self) -> None:
        self.method = (self.method or DEFAULT_METHOD).upper()

    def url_for(self, side: Side) -> str | None:
        """Return the URL template for a side, preferring its override."""
        override = self.reference_url if side == "reference" else self.target_url
        return override or self.url

    @property
    def display_url(self) -> str:
        return self.url or self.reference_url or self.target_url or ""

    @property
    def display_name(self) -> str:
        return self.name or self.display_url

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"method": self.method}
        if self.url is not None:
            payload["url"] = self.url
        if self.reference_url is not None:
            payload["referenceUrl"] = self.reference_url
        if self.target_url is not None:
            payload["targetUrl"] = self.target_url
        if self.body is not None:
            payload["body"] = self.body
        if self.headers:
            payload["headers"] = dict(self.headers)
        if self.name is not None:
            payload["name"] = self.name
        return payload

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Request":
        return cls(
            url=raw.get("url"),
            method=raw.get("method") or DEFAULT_METHOD,
            body=raw.get("body"),
            headers={str(key): str(value) for key, value in (raw.get("headers") or {}).items()},
            name=raw.get("name"),
            reference_url=raw.get("referenceUrl"),
            target_url=raw.get("targetUrl"),
        )


@dataclass(slots=True)
class ResponseRecord:
    """Outcome of one HTTP call; status code 0 marks a transport failure."""

    status_code: int
    status_text: str
    body: ResponseBody
    duration_ms: float
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.status_code == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "status_code": self.status_code,
            "status_text": self.status_text,
            "body_kind": self.body.kind,
            "body": self.body.value,
            "duration_ms": self.duration_ms,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ResponseRecord":
        kind = raw.get("body_kind")
        body_value = raw.get("body")
        if kind is None:
            body = ResponseBody.from_value(body_value)
        else:
            body = ResponseBody(kind=kind, value=body_value)
        return cls(
            status_code=int(raw["status_code"]),
            status_text=str(raw.get("status_text", "")),
            body=body,
            duration_ms=raw.get("duration_ms", 0.0),
            error=raw.get("error"),
        )
