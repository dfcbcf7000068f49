"""Telegram Bot API binding: Pydantic models, tagged unions and request builders.

Targets Bot API 5.2.  Builders in :mod:`botapi.methods` return a
:class:`Request` (method name plus parameter mapping); sending it is left
to the caller's transport.

Usage::

    from botapi import methods, decode_response
    from botapi.models import Message, InlineQueryResult

    req = methods.send_message(chat_id=42, text="hello")
    prepared = req.prepare(token)        # unsent requests.PreparedRequest
    message = decode_response(envelope, Message)
"""

from botapi import config  # noqa: F401  (loads .env and configures logging first)
from botapi.exceptions import APIException, UnionDecodeError
from botapi.request import Request, build_request, decode_response, to_wire
from botapi.unions import Either, TaggedUnion
from botapi import methods, models  # noqa: E402

__version__ = "5.2.0"

__all__ = [
    "APIException",
    "Either",
    "Request",
    "TaggedUnion",
    "UnionDecodeError",
    "build_request",
    "decode_response",
    "methods",
    "models",
    "to_wire",
]
