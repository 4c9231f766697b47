"""Retrieval request and response models."""

from dataclasses import dataclass, field

from citesearch.errors import InvalidRequestError
from citesearch.models.citation import Citation

DEFAULT_MAX_RESULTS = 5


@dataclass(frozen=True)
class RetrievalRequest:
    """A request for citations about a topic from one user's collections."""

    user_id: str
    topic: str
    platform: str | None = None
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self):
        if not self.user_id or not str(self.user_id).strip():
            raise InvalidRequestError("user_id and topic are required")
        if not isinstance(self.topic, str) or not self.topic.strip():
            raise InvalidRequestError("user_id and topic are required")
        if self.platform is not None and not isinstance(self.platform, str):
            raise InvalidRequestError(f"platform must be a string, got {self.platform!r}")
        if isinstance(self.max_results, bool) or not isinstance(self.max_results, int):
            raise InvalidRequestError(f"max_results must be an integer, got {self.max_results!r}")
        if self.max_results < 0:
            raise InvalidRequestError(f"max_results must not be negative, got {self.max_results}")

    @classmethod
    def from_payload(cls, payload: dict, default_max_results: int = DEFAULT_MAX_RESULTS) -> "RetrievalRequest":
        """Build a request from a decoded JSON payload."""
        if not isinstance(payload, dict):
            raise InvalidRequestError("request body must be a JSON object")
        max_results = payload.get("max_results")
        if max_results is None:
            max_results = default_max_results
        return cls(
            user_id=payload.get("user_id") or "",
            topic=payload.get("topic") or "",
            platform=payload.get("platform") or None,
            max_results=max_results,
        )


@dataclass(frozen=True)
class RetrievalResponse:
    """Ranked citations returned for one request."""

    citations: tuple[Citation, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {"citations": [c.to_dict() for c in self.citations]}
