"""Tests for the Bot API Pydantic data models."""

import sys
import os
from typing import Union, get_args, get_origin

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi import models
from botapi.models import (
    CallbackQuery,
    Chat,
    ChatInviteLink,
    ChatMemberUpdated,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InlineQuery,
    InlineQueryResultArticle,
    InputInvoiceMessageContent,
    InputMediaDocument,
    InputMessageContent,
    Invoice,
    LabeledPrice,
    Location,
    Message,
    MessageEntity,
    PassportElementErrorDataField,
    TelegramObject,
    Update,
    User,
    VoiceChatStarted,
    WebhookInfo,
)
from botapi.unions import TaggedUnion


USER = {"id": 42, "is_bot": False, "first_name": "Ada"}
CHAT = {"id": -100, "type": "supergroup", "title": "Lab"}


# ── User ─────────────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_minimal_user(self) -> None:
        u = User(id=42, is_bot=False, first_name="Ada")
        assert u.id == 42
        assert u.last_name is None
        assert u.username is None

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User(id=1, is_bot=False)

    def test_encode_omits_absent_optionals(self) -> None:
        assert User(**USER).encode() == USER


# ── Message ──────────────────────────────────────────────────────────────────


class TestMessageModel:
    """Validate Message decoding and the ``from`` alias."""

    def test_from_alias_decodes(self) -> None:
        msg = Message.decode({"message_id": 1, "date": 0, "chat": CHAT, "from": USER, "text": "hi"})
        assert msg.from_field is not None
        assert msg.from_field.first_name == "Ada"
        assert msg.chat.title == "Lab"

    def test_from_alias_encodes(self) -> None:
        msg = Message(message_id=1, date=0, chat=Chat(**CHAT), from_field=User(**USER))
        encoded = msg.encode()
        assert encoded["from"] == USER
        assert "from_field" not in encoded
        assert "text" not in encoded

    def test_round_trip(self) -> None:
        data = {
            "message_id": 7,
            "from": USER,
            "date": 1620000000,
            "chat": CHAT,
            "text": "/start",
            "entities": [{"type": "bot_command", "offset": 0, "length": 6}],
            "reply_markup": {"inline_keyboard": [[{"text": "go", "callback_data": "go"}]]},
        }
        msg = Message.decode(data)
        assert msg.encode() == data
        assert Message.decode(msg.encode()) == msg

    def test_reply_to_message_nests(self) -> None:
        data = {
            "message_id": 2,
            "date": 0,
            "chat": CHAT,
            "reply_to_message": {"message_id": 1, "date": 0, "chat": CHAT},
        }
        msg = Message.decode(data)
        assert msg.reply_to_message is not None
        assert msg.reply_to_message.message_id == 1

    def test_voice_chat_service_fields(self) -> None:
        msg = Message.decode(
            {
                "message_id": 3,
                "date": 0,
                "chat": CHAT,
                "voice_chat_started": {},
                "message_auto_delete_timer_changed": {"message_auto_delete_time": 86400},
            }
        )
        assert msg.voice_chat_started == VoiceChatStarted()
        assert msg.message_auto_delete_timer_changed.message_auto_delete_time == 86400


# ── Update ───────────────────────────────────────────────────────────────────


class TestUpdateModel:
    """Validate Update and the chat-member events."""

    def test_my_chat_member(self) -> None:
        member = {"user": USER, "status": "member"}
        update = Update.decode(
            {
                "update_id": 10,
                "my_chat_member": {
                    "chat": CHAT,
                    "from": USER,
                    "date": 0,
                    "old_chat_member": {**member, "status": "left"},
                    "new_chat_member": member,
                },
            }
        )
        assert isinstance(update.my_chat_member, ChatMemberUpdated)
        assert update.my_chat_member.new_chat_member.status == "member"
        assert update.message is None

    def test_inline_query_chat_type(self) -> None:
        query = InlineQuery.decode({"id": "q", "from": USER, "query": "cats", "offset": "", "chat_type": "sender"})
        assert query.chat_type == "sender"

    def test_callback_query_requires_from(self) -> None:
        with pytest.raises(ValidationError):
            CallbackQuery.decode({"id": "c", "chat_instance": "i"})


# ── Misc types ───────────────────────────────────────────────────────────────


class TestMiscModels:
    """Spot checks for the remaining object types."""

    def test_webhook_info(self) -> None:
        info = WebhookInfo(url="", has_custom_certificate=False, pending_update_count=0)
        assert info.encode() == {"url": "", "has_custom_certificate": False, "pending_update_count": 0}

    def test_invite_link(self) -> None:
        link = ChatInviteLink.decode(
            {"invite_link": "https://t.me/+abc", "creator": USER, "is_primary": False, "is_revoked": False, "member_limit": 5}
        )
        assert link.member_limit == 5
        assert link.expire_date is None

    def test_invoice_requires_start_parameter(self) -> None:
        with pytest.raises(ValidationError):
            Invoice(title="t", description="d", currency="USD", total_amount=100)

    def test_location_accepts_integer_coordinates(self) -> None:
        loc = Location.decode({"longitude": 10, "latitude": 20})
        assert loc.latitude == 20.0

    def test_inline_keyboard(self) -> None:
        markup = InlineKeyboardMarkup(
            inline_keyboard=[[InlineKeyboardButton(text="a", url="https://example.com")]]
        )
        assert markup.encode() == {"inline_keyboard": [[{"text": "a", "url": "https://example.com"}]]}

    def test_entity(self) -> None:
        entity = MessageEntity(type="text_link", offset=0, length=4, url="https://x")
        assert entity.encode()["url"] == "https://x"

    def test_document_thumb_string(self) -> None:
        doc = InputMediaDocument(type="document", media="attach://doc", thumb="attach://thumb")
        assert doc.thumb.tag == "right"

    def test_passport_error_field(self) -> None:
        err = PassportElementErrorDataField(
            source="data", type="passport", field_name="number", data_hash="h", message="bad"
        )
        assert err.encode()["field_name"] == "number"


# ── Union-typed fields ───────────────────────────────────────────────────────


class TestUnionFields:
    """Models holding a closed union decode and encode through it."""

    def test_article_decodes_content_union(self) -> None:
        article = InlineQueryResultArticle.decode(
            {
                "type": "article",
                "id": "1",
                "title": "T",
                "input_message_content": {"message_text": "hello"},
            }
        )
        assert isinstance(article.input_message_content, InputMessageContent)
        assert article.input_message_content.tag == "text"

    def test_invoice_content(self) -> None:
        content = InputMessageContent.decode(
            {
                "title": "Coffee",
                "description": "Hot",
                "payload": "p",
                "provider_token": "tok",
                "currency": "EUR",
                "prices": [{"label": "Cup", "amount": 300}],
            }
        )
        assert content.tag == "invoice"
        assert isinstance(content.value, InputInvoiceMessageContent)
        assert content.value.prices == [LabeledPrice(label="Cup", amount=300)]


# ── Every model round-trips ──────────────────────────────────────────────────

_PRIMITIVES = {int: 1, float: 1.5, bool: True, str: "x"}


def _sample(tp, depth: int):
    """Build a value of annotation *tp*; models below depth 2 get every field."""
    origin = get_origin(tp)
    if origin is Union:
        return _sample(next(arg for arg in get_args(tp) if arg is not type(None)), depth)
    if origin is list:
        return [_sample(get_args(tp)[0], depth)]
    if tp in _PRIMITIVES:
        return _PRIMITIVES[tp]
    if issubclass(tp, TelegramObject):
        return tp(**_fields(tp, full=depth < 2, depth=depth + 1))
    if issubclass(tp, TaggedUnion):
        tag, candidate = tp.variants[0]
        return tp(tag, _sample(candidate, depth))
    raise TypeError(f"no sample for {tp!r}")


def _fields(cls, full: bool, depth: int = 0) -> dict:
    return {
        name: _sample(field.annotation, depth)
        for name, field in cls.model_fields.items()
        if full or field.is_required()
    }


_MODEL_NAMES = sorted(
    name
    for name, obj in vars(models).items()
    if isinstance(obj, type) and issubclass(obj, TelegramObject) and obj is not TelegramObject
)


class TestEveryModelRoundTrip:
    """decode(encode(m)) == m for each model, bare and fully populated."""

    @pytest.mark.parametrize("name", _MODEL_NAMES)
    @pytest.mark.parametrize("full", [False, True], ids=["required", "full"])
    def test_round_trip(self, name: str, full: bool) -> None:
        cls = getattr(models, name)
        obj = cls(**_fields(cls, full=full))
        encoded = obj.encode()
        assert cls.decode(encoded) == obj
        if full:
            assert len(encoded) == len(cls.model_fields)

    def test_covers_every_model(self) -> None:
        assert len(_MODEL_NAMES) > 100
        assert "InputInvoiceMessageContent" in _MODEL_NAMES
        assert "TelegramObject" not in _MODEL_NAMES
