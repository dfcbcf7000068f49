"""Exception hierarchy for the botapi binding."""

from typing import Any, Dict, List, Optional


class UnionDecodeError(ValueError):
    """Raised when a value matches none of a tagged union's candidates.

    Attributes:
        union_name: Name of the union type being decoded.
        candidates: Variant tags that were attempted, in priority order.
        value: The original input.
        errors: Rejection reason per attempted tag.
    """

    def __init__(
        self,
        union_name: str,
        candidates: List[str],
        value: Any,
        errors: Optional[Dict[str, Exception]] = None,
    ) -> None:
        """Initialise with the union name, attempted tags and raw input."""
        self.union_name = union_name
        self.candidates = list(candidates)
        self.value = value
        self.errors = errors or {}
        super().__init__(
            f"No matching variant for {union_name} "
            f"(tried: {', '.join(self.candidates) or '-'}): {value!r}"
        )


class APIException(Exception):
    """Raised for an unsuccessful Telegram Bot API response envelope.

    Attributes:
        error_code: Error code reported by the API.
        description: Human-readable description, when available.
        parameters: ``ResponseParameters`` model, when the API sent one.
        response_body: Raw response body as a dict.
    """

    def __init__(
        self,
        error_code: int,
        response_body: Optional[Dict[str, Any]] = None,
        parameters: Any = None,
    ) -> None:
        """Initialise with the error code and optional body."""
        self.error_code = error_code
        self.response_body = response_body or {}
        self.description = self.response_body.get("description", "Unknown error")
        self.parameters = parameters
        super().__init__(f"API error {error_code}: {self.description}")
