"""Tests for the request builders in botapi.methods."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi import methods
from botapi.models import (
    BotCommand,
    ChatPermissions,
    ForceReply,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InlineQueryResultPhoto,
    InputFile,
    InputMedia,
    InputMediaPhoto,
    InputMediaVideo,
    LabeledPrice,
    PassportElementError,
    PassportElementErrorSelfie,
    ReplyMarkup,
)
from botapi.request import Request


PHOTO_MEDIA = InputMediaPhoto(type="photo", media="file_id")
PHOTO_RESULT = InlineQueryResultPhoto(type="photo", id="1", photo_url="u", thumb_url="t")
SELFIE_ERROR = PassportElementErrorSelfie(source="selfie", type="passport", file_hash="h", message="m")

# Required parameters of every builder, keyed by wire method name.
REQUIRED_ARGS = {
    "getUpdates": {},
    "setWebhook": {"url": "https://example.com/hook"},
    "deleteWebhook": {},
    "getWebhookInfo": {},
    "getMe": {},
    "logOut": {},
    "close": {},
    "sendMessage": {"chat_id": 1, "text": "hi"},
    "forwardMessage": {"chat_id": 1, "from_chat_id": "@src", "message_id": 5},
    "copyMessage": {"chat_id": 1, "from_chat_id": 2, "message_id": 5},
    "sendPhoto": {"chat_id": 1, "photo": "file_id"},
    "sendAudio": {"chat_id": 1, "audio": "file_id"},
    "sendDocument": {"chat_id": 1, "document": InputFile()},
    "sendVideo": {"chat_id": 1, "video": "file_id"},
    "sendAnimation": {"chat_id": 1, "animation": "file_id"},
    "sendVoice": {"chat_id": 1, "voice": "file_id"},
    "sendVideoNote": {"chat_id": 1, "video_note": "file_id"},
    "sendMediaGroup": {"chat_id": 1, "media": [PHOTO_MEDIA, PHOTO_MEDIA]},
    "sendLocation": {"chat_id": 1, "latitude": 1.0, "longitude": 2.0},
    "editMessageLiveLocation": {"latitude": 1.0, "longitude": 2.0},
    "stopMessageLiveLocation": {},
    "sendVenue": {"chat_id": 1, "latitude": 1.0, "longitude": 2.0, "title": "t", "address": "a"},
    "sendContact": {"chat_id": 1, "phone_number": "+1", "first_name": "Ada"},
    "sendPoll": {"chat_id": 1, "question": "q?", "options": ["a", "b"]},
    "sendDice": {"chat_id": 1},
    "sendChatAction": {"chat_id": 1, "action": "typing"},
    "getUserProfilePhotos": {"user_id": 7},
    "getFile": {"file_id": "f"},
    "kickChatMember": {"chat_id": 1, "user_id": 7},
    "unbanChatMember": {"chat_id": 1, "user_id": 7},
    "restrictChatMember": {"chat_id": 1, "user_id": 7, "permissions": ChatPermissions()},
    "promoteChatMember": {"chat_id": 1, "user_id": 7},
    "setChatAdministratorCustomTitle": {"chat_id": 1, "user_id": 7, "custom_title": "boss"},
    "setChatPermissions": {"chat_id": 1, "permissions": ChatPermissions(can_send_messages=True)},
    "exportChatInviteLink": {"chat_id": 1},
    "createChatInviteLink": {"chat_id": 1},
    "editChatInviteLink": {"chat_id": 1, "invite_link": "https://t.me/+x"},
    "revokeChatInviteLink": {"chat_id": 1, "invite_link": "https://t.me/+x"},
    "setChatPhoto": {"chat_id": 1, "photo": InputFile()},
    "deleteChatPhoto": {"chat_id": 1},
    "setChatTitle": {"chat_id": 1, "title": "t"},
    "setChatDescription": {"chat_id": 1},
    "pinChatMessage": {"chat_id": 1, "message_id": 5},
    "unpinChatMessage": {"chat_id": 1},
    "unpinAllChatMessages": {"chat_id": 1},
    "leaveChat": {"chat_id": 1},
    "getChat": {"chat_id": "@channel"},
    "getChatAdministrators": {"chat_id": 1},
    "getChatMembersCount": {"chat_id": 1},
    "getChatMember": {"chat_id": 1, "user_id": 7},
    "setChatStickerSet": {"chat_id": 1, "sticker_set_name": "set"},
    "deleteChatStickerSet": {"chat_id": 1},
    "answerCallbackQuery": {"callback_query_id": "cb"},
    "setMyCommands": {"commands": [BotCommand(command="start", description="Start")]},
    "getMyCommands": {},
    "editMessageText": {"text": "new"},
    "editMessageCaption": {},
    "editMessageMedia": {"media": PHOTO_MEDIA},
    "editMessageReplyMarkup": {},
    "stopPoll": {"chat_id": 1, "message_id": 5},
    "deleteMessage": {"chat_id": 1, "message_id": 5},
    "sendSticker": {"chat_id": 1, "sticker": "file_id"},
    "getStickerSet": {"name": "set"},
    "uploadStickerFile": {"user_id": 7, "png_sticker": InputFile()},
    "createNewStickerSet": {"user_id": 7, "name": "set_by_bot", "title": "Set", "emojis": "🙂"},
    "addStickerToSet": {"user_id": 7, "name": "set_by_bot", "emojis": "🙂"},
    "setStickerPositionInSet": {"sticker": "file_id", "position": 0},
    "deleteStickerFromSet": {"sticker": "file_id"},
    "setStickerSetThumb": {"name": "set_by_bot", "user_id": 7},
    "answerInlineQuery": {"inline_query_id": "q", "results": [PHOTO_RESULT]},
    "sendInvoice": {
        "chat_id": 1,
        "title": "t",
        "description": "d",
        "payload": "p",
        "provider_token": "tok",
        "currency": "USD",
        "prices": [LabeledPrice(label="x", amount=100)],
    },
    "answerShippingQuery": {"shipping_query_id": "s", "ok": True},
    "answerPreCheckoutQuery": {"pre_checkout_query_id": "p", "ok": False},
    "setPassportDataErrors": {"user_id": 7, "errors": [SELFIE_ERROR]},
    "sendGame": {"chat_id": 1, "game_short_name": "g"},
    "setGameScore": {"user_id": 7, "score": 10},
    "getGameHighScores": {"user_id": 7},
}


# ── Registry ─────────────────────────────────────────────────────────────────


class TestRegistry:
    """ALL_METHODS covers the whole Bot API 5.2 method set."""

    def test_method_count(self) -> None:
        assert len(methods.ALL_METHODS) == 77

    def test_webhook_info_documented(self) -> None:
        assert "WebhookInfo" in methods.get_webhook_info.__doc__

    def test_required_table_matches_registry(self) -> None:
        assert set(REQUIRED_ARGS) == set(methods.ALL_METHODS)

    @pytest.mark.parametrize("method", sorted(REQUIRED_ARGS))
    def test_builder_sets_wire_name(self, method: str) -> None:
        request = methods.ALL_METHODS[method](**REQUIRED_ARGS[method])
        assert isinstance(request, Request)
        assert request.method == method


# ── Absent optionals ─────────────────────────────────────────────────────────


class TestAbsentOptionals:
    """Builders called with only required parameters emit only those keys."""

    @pytest.mark.parametrize("method", sorted(REQUIRED_ARGS))
    def test_only_required_keys(self, method: str) -> None:
        request = methods.ALL_METHODS[method](**REQUIRED_ARGS[method])
        assert set(request.body) == set(REQUIRED_ARGS[method])
        assert None not in request.body.values()
        assert None not in request.payload().values()

    def test_send_message_body(self) -> None:
        request = methods.send_message(chat_id=42, text="hello")
        assert request.body == {"chat_id": 42, "text": "hello"}

    def test_false_is_kept(self) -> None:
        request = methods.answer_callback_query("cb", show_alert=False)
        assert request.body == {"callback_query_id": "cb", "show_alert": False}

    def test_zero_is_kept(self) -> None:
        request = methods.get_updates(offset=0, timeout=0)
        assert request.body == {"offset": 0, "timeout": 0}


# ── Union-typed parameters ───────────────────────────────────────────────────


class TestUnionParameters:
    """Union parameters are tagged by the caller's class and flatten on the wire."""

    def test_reply_markup_is_tagged(self) -> None:
        request = methods.send_message(chat_id=1, text="x", reply_markup=ForceReply(force_reply=True))
        markup = request.body["reply_markup"]
        assert isinstance(markup, ReplyMarkup)
        assert markup.tag == "force_reply"
        assert request.payload()["reply_markup"] == {"force_reply": True}

    def test_inline_only_markup_is_passed_through(self) -> None:
        markup = InlineKeyboardMarkup(inline_keyboard=[])
        request = methods.edit_message_reply_markup(chat_id=1, message_id=2, reply_markup=markup)
        assert request.body["reply_markup"] is markup

    def test_edit_message_media_keeps_photo(self) -> None:
        request = methods.edit_message_media(media=PHOTO_MEDIA, chat_id=1, message_id=2)
        media = request.body["media"]
        assert isinstance(media, InputMedia)
        assert media.tag == "photo"
        assert request.payload()["media"] == {"type": "photo", "media": "file_id"}

    def test_inline_query_results(self) -> None:
        request = methods.answer_inline_query("q", [PHOTO_RESULT], cache_time=0)
        results = request.body["results"]
        assert [r.tag for r in results] == ["photo"]
        assert all(isinstance(r, InlineQueryResult) for r in results)
        assert request.payload()["results"] == [
            {"type": "photo", "id": "1", "photo_url": "u", "thumb_url": "t"}
        ]

    def test_media_group_keeps_each_class(self) -> None:
        video = InputMediaVideo(type="video", media="v")
        request = methods.send_media_group(1, [PHOTO_MEDIA, video, PHOTO_MEDIA])
        media = request.body["media"]
        assert all(isinstance(m, InputMedia) for m in media)
        assert [m.tag for m in media] == ["photo", "video", "photo"]
        assert request.payload()["media"] == [
            {"type": "photo", "media": "file_id"},
            {"type": "video", "media": "v"},
            {"type": "photo", "media": "file_id"},
        ]

    def test_passport_errors(self) -> None:
        request = methods.set_passport_data_errors(7, [SELFIE_ERROR])
        errors = request.body["errors"]
        assert isinstance(errors[0], PassportElementError)
        assert errors[0].tag == "selfie"

    def test_non_candidate_reply_markup_rejected(self) -> None:
        with pytest.raises(TypeError):
            methods.send_message(chat_id=1, text="x", reply_markup="keyboard")


# ── Selected builders ────────────────────────────────────────────────────────


class TestSelectedBuilders:
    """Parameter naming for builders that changed in Bot API 5.1 and 5.2."""

    def test_kick_chat_member_revoke(self) -> None:
        request = methods.kick_chat_member(1, 7, revoke_messages=True)
        assert request.body == {"chat_id": 1, "user_id": 7, "revoke_messages": True}

    def test_promote_chat_member_voice_chats(self) -> None:
        request = methods.promote_chat_member(1, 7, can_manage_chat=True, can_manage_voice_chats=False)
        assert request.body == {
            "chat_id": 1,
            "user_id": 7,
            "can_manage_chat": True,
            "can_manage_voice_chats": False,
        }

    def test_create_chat_invite_link(self) -> None:
        request = methods.create_chat_invite_link("@group", expire_date=1700000000, member_limit=10)
        assert request.method == "createChatInviteLink"
        assert request.body == {"chat_id": "@group", "expire_date": 1700000000, "member_limit": 10}

    def test_send_invoice_tips(self) -> None:
        request = methods.send_invoice(
            chat_id=1,
            title="t",
            description="d",
            payload="p",
            provider_token="tok",
            currency="USD",
            prices=[LabeledPrice(label="x", amount=100)],
            max_tip_amount=500,
            suggested_tip_amounts=[100, 200],
        )
        payload = request.payload()
        assert payload["prices"] == [{"label": "x", "amount": 100}]
        assert payload["suggested_tip_amounts"] == [100, 200]
        assert "start_parameter" not in payload

    def test_send_audio_thumb_file(self) -> None:
        request = methods.send_audio(1, "file_id", thumb=InputFile())
        assert request.payload() == {"chat_id": 1, "audio": "file_id", "thumb": {}}
