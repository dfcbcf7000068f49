"""Request values and wire helpers.

A :class:`Request` pairs a Bot API method name with its parameter mapping.
Builders in :mod:`botapi.methods` produce them through :func:`build_request`,
which drops absent (``None``) parameters so the body never carries null
placeholders.  Sending a request is the caller's transport's job;
:meth:`Request.prepare` only builds the ``requests`` object for it.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field

from botapi import config
from botapi.exceptions import APIException
from botapi.logger import BotApiLogger
from botapi.models import ResponseParameters
from botapi.unions import TaggedUnion, type_adapter

logger = BotApiLogger.get_logger()


class Request(BaseModel):
    """One Bot API call: the method name and its parameters.

    ``body`` holds parameter values as passed to the builder: primitives,
    models and tagged unions.  Use :meth:`payload` for the JSON-ready form.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    body: Dict[str, Any] = Field(default_factory=dict)

    def payload(self) -> Dict[str, Any]:
        """Return the body encoded for the wire."""
        return to_wire(self.body)

    def prepare(self, token: str, api_url: Optional[str] = None) -> requests.PreparedRequest:
        """Build an unsent ``POST {api_url}/bot{token}/{method}`` with a JSON body.

        Args:
            token: Bot token.  Never logged.
            api_url: Bot API server root; defaults to :data:`botapi.config.API_URL`.
        """
        root = (api_url or config.API_URL).rstrip("/")
        prepared = requests.Request(
            "POST",
            f"{root}/bot{token}/{self.method}",
            json=self.payload(),
        ).prepare()
        logger.debug("Request prepared", extra={"api_method": self.method})
        return prepared


def build_request(method: str, **params: Any) -> Request:
    """Build a :class:`Request`, dropping every parameter whose value is ``None``.

    Keyword order is kept, so the body lists parameters in declaration order.
    """
    body = {name: value for name, value in params.items() if value is not None}
    logger.debug(
        "Request built",
        extra={"api_method": method, "params": list(body)},
    )
    return Request(method=method, body=body)


def to_wire(value: Any) -> Any:
    """Convert a body value into JSON-ready data.

    Models dump with their wire names and without absent optionals; tagged
    unions flatten to their held value; containers are converted recursively.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, TaggedUnion):
        return value.encode()
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    return value


def decode_response(body: Dict[str, Any], result_type: Any = Any) -> Any:
    """Read a Bot API response envelope and return its validated ``result``.

    Args:
        body: The parsed JSON envelope ``{ok, result, description, error_code, parameters}``.
        result_type: Any pydantic-compatible type, e.g. ``Message`` or ``List[Update]``.

    Raises:
        APIException: If the envelope reports ``ok: false``.
        pydantic.ValidationError: If ``result`` does not fit *result_type*.
    """
    if body.get("ok"):
        return type_adapter(result_type).validate_python(body.get("result"))

    raw_parameters = body.get("parameters")
    parameters = ResponseParameters.model_validate(raw_parameters) if raw_parameters else None
    error_code = body.get("error_code", 0)
    logger.warning(
        "Bot API returned an error",
        extra={"error_code": error_code, "description": body.get("description")},
    )
    raise APIException(error_code, body, parameters)
