"""Request builders, one per Telegram Bot API method.

Each function is pure: it takes the method's documented parameters
(required first, optional ones defaulting to ``None``) and returns a
:class:`~botapi.request.Request`.  Parameters left as ``None`` are omitted
from the body.

Union-typed parameters (``reply_markup``, inline query ``results``, passport
``errors``, the ``media`` of ``send_media_group`` and ``edit_message_media``)
are tagged with their union type from the value's own class, so the payload
encodes exactly what the caller passed.

Usage::

    from botapi import methods

    req = methods.send_message(chat_id=42, text="hi")
    req.method   # "sendMessage"
    req.body     # {"chat_id": 42, "text": "hi"}
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

from botapi.models import (
    BotCommand,
    ChatPermissions,
    ForceReply,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InputFile,
    InputMedia,
    InputMediaAnimation,
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
    LabeledPrice,
    MaskPosition,
    MessageEntity,
    PassportElementError,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
    ShippingOption,
)
from botapi.request import Request, build_request
from botapi.unions import TaggedUnion

ChatId = Union[int, str]
FileOrPath = Union[InputFile, str]
AnyReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply, ReplyMarkup]
AlbumMedia = Union[InputMediaAudio, InputMediaDocument, InputMediaPhoto, InputMediaVideo]

U = TypeVar("U", bound=TaggedUnion)


def _tagged(union: Type[U], value: Any) -> Optional[U]:
    return None if value is None else union.wrap(value)


def _tagged_list(union: Type[U], values: Optional[List[Any]]) -> Optional[List[U]]:
    return None if values is None else [union.wrap(value) for value in values]


# ── Getting updates ──────────────────────────────────────────────────────────


def get_updates(
    offset: Optional[int] = None,
    limit: Optional[int] = None,
    timeout: Optional[int] = None,
    allowed_updates: Optional[List[str]] = None,
) -> Request:
    """Receive incoming updates using long polling. Returns an array of ``Update``."""
    return build_request(
        "getUpdates",
        offset=offset,
        limit=limit,
        timeout=timeout,
        allowed_updates=allowed_updates,
    )


def set_webhook(
    url: str,
    certificate: Optional[InputFile] = None,
    ip_address: Optional[str] = None,
    max_connections: Optional[int] = None,
    allowed_updates: Optional[List[str]] = None,
    drop_pending_updates: Optional[bool] = None,
) -> Request:
    """Specify a URL to receive incoming updates via an outgoing webhook."""
    return build_request(
        "setWebhook",
        url=url,
        certificate=certificate,
        ip_address=ip_address,
        max_connections=max_connections,
        allowed_updates=allowed_updates,
        drop_pending_updates=drop_pending_updates,
    )


def delete_webhook(drop_pending_updates: Optional[bool] = None) -> Request:
    """Remove the webhook integration."""
    return build_request("deleteWebhook", drop_pending_updates=drop_pending_updates)


def get_webhook_info() -> Request:
    """Current webhook status as a ``WebhookInfo``; ``url`` is empty under getUpdates."""
    return build_request("getWebhookInfo")


# ── Bot lifecycle ────────────────────────────────────────────────────────────


def get_me() -> Request:
    """Basic information about the bot as a ``User``."""
    return build_request("getMe")


def log_out() -> Request:
    """Log out from the cloud Bot API server before launching the bot locally."""
    return build_request("logOut")


def close() -> Request:
    """Close the bot instance before moving it from one local server to another."""
    return build_request("close")


# ── Sending messages ─────────────────────────────────────────────────────────


def send_message(
    chat_id: ChatId,
    text: str,
    parse_mode: Optional[str] = None,
    entities: Optional[List[MessageEntity]] = None,
    disable_web_page_preview: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send a text message. Returns the sent ``Message``."""
    return build_request(
        "sendMessage",
        chat_id=chat_id,
        text=text,
        parse_mode=parse_mode,
        entities=entities,
        disable_web_page_preview=disable_web_page_preview,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def forward_message(
    chat_id: ChatId,
    from_chat_id: ChatId,
    message_id: int,
    disable_notification: Optional[bool] = None,
) -> Request:
    """Forward a message of any kind."""
    return build_request(
        "forwardMessage",
        chat_id=chat_id,
        from_chat_id=from_chat_id,
        disable_notification=disable_notification,
        message_id=message_id,
    )


def copy_message(
    chat_id: ChatId,
    from_chat_id: ChatId,
    message_id: int,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Copy a message without a link to the original. Returns its ``MessageId``."""
    return build_request(
        "copyMessage",
        chat_id=chat_id,
        from_chat_id=from_chat_id,
        message_id=message_id,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_photo(
    chat_id: ChatId,
    photo: FileOrPath,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    return build_request(
        "sendPhoto",
        chat_id=chat_id,
        photo=photo,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_audio(
    chat_id: ChatId,
    audio: FileOrPath,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    duration: Optional[int] = None,
    performer: Optional[str] = None,
    title: Optional[str] = None,
    thumb: Optional[FileOrPath] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send an .MP3 or .M4A file to be shown in the music player."""
    return build_request(
        "sendAudio",
        chat_id=chat_id,
        audio=audio,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        duration=duration,
        performer=performer,
        title=title,
        thumb=thumb,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_document(
    chat_id: ChatId,
    document: FileOrPath,
    thumb: Optional[FileOrPath] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_content_type_detection: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send a general file."""
    return build_request(
        "sendDocument",
        chat_id=chat_id,
        document=document,
        thumb=thumb,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        disable_content_type_detection=disable_content_type_detection,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_video(
    chat_id: ChatId,
    video: FileOrPath,
    duration: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    thumb: Optional[FileOrPath] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    supports_streaming: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send an MPEG4 video file."""
    return build_request(
        "sendVideo",
        chat_id=chat_id,
        video=video,
        duration=duration,
        width=width,
        height=height,
        thumb=thumb,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        supports_streaming=supports_streaming,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_animation(
    chat_id: ChatId,
    animation: FileOrPath,
    duration: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    thumb: Optional[FileOrPath] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send a GIF or an H.264/MPEG-4 AVC video without sound."""
    return build_request(
        "sendAnimation",
        chat_id=chat_id,
        animation=animation,
        duration=duration,
        width=width,
        height=height,
        thumb=thumb,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_voice(
    chat_id: ChatId,
    voice: FileOrPath,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    duration: Optional[int] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send an .OGG file encoded with OPUS, displayed as a playable voice message."""
    return build_request(
        "sendVoice",
        chat_id=chat_id,
        voice=voice,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        duration=duration,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_video_note(
    chat_id: ChatId,
    video_note: FileOrPath,
    duration: Optional[int] = None,
    length: Optional[int] = None,
    thumb: Optional[FileOrPath] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send a rounded square MPEG4 video of up to one minute."""
    return build_request(
        "sendVideoNote",
        chat_id=chat_id,
        video_note=video_note,
        duration=duration,
        length=length,
        thumb=thumb,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_media_group(
    chat_id: ChatId,
    media: List[AlbumMedia],
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
) -> Request:
    """Send a group of photos, videos, documents or audios as an album.

    Documents and audio files can only be grouped with messages of the same
    type.  Returns an array of the sent ``Message`` objects.
    """
    return build_request(
        "sendMediaGroup",
        chat_id=chat_id,
        media=_tagged_list(InputMedia, media),
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
    )


def send_location(
    chat_id: ChatId,
    latitude: float,
    longitude: float,
    horizontal_accuracy: Optional[float] = None,
    live_period: Optional[int] = None,
    heading: Optional[int] = None,
    proximity_alert_radius: Optional[int] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send a point on the map."""
    return build_request(
        "sendLocation",
        chat_id=chat_id,
        latitude=latitude,
        longitude=longitude,
        horizontal_accuracy=horizontal_accuracy,
        live_period=live_period,
        heading=heading,
        proximity_alert_radius=proximity_alert_radius,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def edit_message_live_location(
    latitude: float,
    longitude: float,
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    horizontal_accuracy: Optional[float] = None,
    heading: Optional[int] = None,
    proximity_alert_radius: Optional[int] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit a live location message.

    Either ``chat_id`` and ``message_id`` or ``inline_message_id`` identify
    the message.
    """
    return build_request(
        "editMessageLiveLocation",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        latitude=latitude,
        longitude=longitude,
        horizontal_accuracy=horizontal_accuracy,
        heading=heading,
        proximity_alert_radius=proximity_alert_radius,
        reply_markup=reply_markup,
    )


def stop_message_live_location(
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Stop updating a live location message before ``live_period`` expires."""
    return build_request(
        "stopMessageLiveLocation",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        reply_markup=reply_markup,
    )


def send_venue(
    chat_id: ChatId,
    latitude: float,
    longitude: float,
    title: str,
    address: str,
    foursquare_id: Optional[str] = None,
    foursquare_type: Optional[str] = None,
    google_place_id: Optional[str] = None,
    google_place_type: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send information about a venue."""
    return build_request(
        "sendVenue",
        chat_id=chat_id,
        latitude=latitude,
        longitude=longitude,
        title=title,
        address=address,
        foursquare_id=foursquare_id,
        foursquare_type=foursquare_type,
        google_place_id=google_place_id,
        google_place_type=google_place_type,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_contact(
    chat_id: ChatId,
    phone_number: str,
    first_name: str,
    last_name: Optional[str] = None,
    vcard: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send a phone contact."""
    return build_request(
        "sendContact",
        chat_id=chat_id,
        phone_number=phone_number,
        first_name=first_name,
        last_name=last_name,
        vcard=vcard,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_poll(
    chat_id: ChatId,
    question: str,
    options: List[str],
    is_anonymous: Optional[bool] = None,
    type: Optional[str] = None,
    allows_multiple_answers: Optional[bool] = None,
    correct_option_id: Optional[int] = None,
    explanation: Optional[str] = None,
    explanation_parse_mode: Optional[str] = None,
    explanation_entities: Optional[List[MessageEntity]] = None,
    open_period: Optional[int] = None,
    close_date: Optional[int] = None,
    is_closed: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send a native poll."""
    return build_request(
        "sendPoll",
        chat_id=chat_id,
        question=question,
        options=options,
        is_anonymous=is_anonymous,
        type=type,
        allows_multiple_answers=allows_multiple_answers,
        correct_option_id=correct_option_id,
        explanation=explanation,
        explanation_parse_mode=explanation_parse_mode,
        explanation_entities=explanation_entities,
        open_period=open_period,
        close_date=close_date,
        is_closed=is_closed,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_dice(
    chat_id: ChatId,
    emoji: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send an animated emoji that will display a random value."""
    return build_request(
        "sendDice",
        chat_id=chat_id,
        emoji=emoji,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def send_chat_action(chat_id: ChatId, action: str) -> Request:
    """Tell the user that something is happening on the bot's side."""
    return build_request("sendChatAction", chat_id=chat_id, action=action)


# ── Files and profile photos ─────────────────────────────────────────────────


def get_user_profile_photos(
    user_id: int,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
) -> Request:
    return build_request("getUserProfilePhotos", user_id=user_id, offset=offset, limit=limit)


def get_file(file_id: str) -> Request:
    """Basic info about a file and a path to download it."""
    return build_request("getFile", file_id=file_id)


# ── Chat administration ──────────────────────────────────────────────────────


def kick_chat_member(
    chat_id: ChatId,
    user_id: int,
    until_date: Optional[int] = None,
    revoke_messages: Optional[bool] = None,
) -> Request:
    """Ban a user in a group, a supergroup or a channel."""
    return build_request(
        "kickChatMember",
        chat_id=chat_id,
        user_id=user_id,
        until_date=until_date,
        revoke_messages=revoke_messages,
    )


def unban_chat_member(chat_id: ChatId, user_id: int, only_if_banned: Optional[bool] = None) -> Request:
    """Unban a previously kicked user in a supergroup or channel."""
    return build_request("unbanChatMember", chat_id=chat_id, user_id=user_id, only_if_banned=only_if_banned)


def restrict_chat_member(
    chat_id: ChatId,
    user_id: int,
    permissions: ChatPermissions,
    until_date: Optional[int] = None,
) -> Request:
    """Restrict a user in a supergroup."""
    return build_request(
        "restrictChatMember",
        chat_id=chat_id,
        user_id=user_id,
        permissions=permissions,
        until_date=until_date,
    )


def promote_chat_member(
    chat_id: ChatId,
    user_id: int,
    is_anonymous: Optional[bool] = None,
    can_manage_chat: Optional[bool] = None,
    can_post_messages: Optional[bool] = None,
    can_edit_messages: Optional[bool] = None,
    can_delete_messages: Optional[bool] = None,
    can_manage_voice_chats: Optional[bool] = None,
    can_restrict_members: Optional[bool] = None,
    can_promote_members: Optional[bool] = None,
    can_change_info: Optional[bool] = None,
    can_invite_users: Optional[bool] = None,
    can_pin_messages: Optional[bool] = None,
) -> Request:
    """Promote or demote a user in a supergroup or a channel.

    Pass ``False`` for every boolean to demote a user.
    """
    return build_request(
        "promoteChatMember",
        chat_id=chat_id,
        user_id=user_id,
        is_anonymous=is_anonymous,
        can_manage_chat=can_manage_chat,
        can_post_messages=can_post_messages,
        can_edit_messages=can_edit_messages,
        can_delete_messages=can_delete_messages,
        can_manage_voice_chats=can_manage_voice_chats,
        can_restrict_members=can_restrict_members,
        can_promote_members=can_promote_members,
        can_change_info=can_change_info,
        can_invite_users=can_invite_users,
        can_pin_messages=can_pin_messages,
    )


def set_chat_administrator_custom_title(chat_id: ChatId, user_id: int, custom_title: str) -> Request:
    return build_request(
        "setChatAdministratorCustomTitle",
        chat_id=chat_id,
        user_id=user_id,
        custom_title=custom_title,
    )


def set_chat_permissions(chat_id: ChatId, permissions: ChatPermissions) -> Request:
    """Set default chat permissions for all members."""
    return build_request("setChatPermissions", chat_id=chat_id, permissions=permissions)


def export_chat_invite_link(chat_id: ChatId) -> Request:
    """Generate a new primary invite link; the previous one is revoked."""
    return build_request("exportChatInviteLink", chat_id=chat_id)


def create_chat_invite_link(
    chat_id: ChatId,
    expire_date: Optional[int] = None,
    member_limit: Optional[int] = None,
) -> Request:
    """Create an additional invite link. Returns a ``ChatInviteLink``."""
    return build_request(
        "createChatInviteLink",
        chat_id=chat_id,
        expire_date=expire_date,
        member_limit=member_limit,
    )


def edit_chat_invite_link(
    chat_id: ChatId,
    invite_link: str,
    expire_date: Optional[int] = None,
    member_limit: Optional[int] = None,
) -> Request:
    """Edit a non-primary invite link created by the bot."""
    return build_request(
        "editChatInviteLink",
        chat_id=chat_id,
        invite_link=invite_link,
        expire_date=expire_date,
        member_limit=member_limit,
    )


def revoke_chat_invite_link(chat_id: ChatId, invite_link: str) -> Request:
    """Revoke an invite link created by the bot."""
    return build_request("revokeChatInviteLink", chat_id=chat_id, invite_link=invite_link)


def set_chat_photo(chat_id: ChatId, photo: InputFile) -> Request:
    return build_request("setChatPhoto", chat_id=chat_id, photo=photo)


def delete_chat_photo(chat_id: ChatId) -> Request:
    return build_request("deleteChatPhoto", chat_id=chat_id)


def set_chat_title(chat_id: ChatId, title: str) -> Request:
    return build_request("setChatTitle", chat_id=chat_id, title=title)


def set_chat_description(chat_id: ChatId, description: Optional[str] = None) -> Request:
    return build_request("setChatDescription", chat_id=chat_id, description=description)


def pin_chat_message(chat_id: ChatId, message_id: int, disable_notification: Optional[bool] = None) -> Request:
    """Add a message to the list of pinned messages in a chat."""
    return build_request(
        "pinChatMessage",
        chat_id=chat_id,
        message_id=message_id,
        disable_notification=disable_notification,
    )


def unpin_chat_message(chat_id: ChatId, message_id: Optional[int] = None) -> Request:
    """Remove a message from the pinned list; the most recent pin when ``message_id`` is omitted."""
    return build_request("unpinChatMessage", chat_id=chat_id, message_id=message_id)


def unpin_all_chat_messages(chat_id: ChatId) -> Request:
    return build_request("unpinAllChatMessages", chat_id=chat_id)


def leave_chat(chat_id: ChatId) -> Request:
    return build_request("leaveChat", chat_id=chat_id)


def get_chat(chat_id: ChatId) -> Request:
    """Up-to-date information about the chat."""
    return build_request("getChat", chat_id=chat_id)


def get_chat_administrators(chat_id: ChatId) -> Request:
    return build_request("getChatAdministrators", chat_id=chat_id)


def get_chat_members_count(chat_id: ChatId) -> Request:
    return build_request("getChatMembersCount", chat_id=chat_id)


def get_chat_member(chat_id: ChatId, user_id: int) -> Request:
    return build_request("getChatMember", chat_id=chat_id, user_id=user_id)


def set_chat_sticker_set(chat_id: ChatId, sticker_set_name: str) -> Request:
    """Set a new group sticker set for a supergroup."""
    return build_request("setChatStickerSet", chat_id=chat_id, sticker_set_name=sticker_set_name)


def delete_chat_sticker_set(chat_id: ChatId) -> Request:
    return build_request("deleteChatStickerSet", chat_id=chat_id)


# ── Callback queries and commands ────────────────────────────────────────────


def answer_callback_query(
    callback_query_id: str,
    text: Optional[str] = None,
    show_alert: Optional[bool] = None,
    url: Optional[str] = None,
    cache_time: Optional[int] = None,
) -> Request:
    """Answer a callback query sent from an inline keyboard."""
    return build_request(
        "answerCallbackQuery",
        callback_query_id=callback_query_id,
        text=text,
        show_alert=show_alert,
        url=url,
        cache_time=cache_time,
    )


def set_my_commands(commands: List[BotCommand]) -> Request:
    """Change the list of the bot's commands."""
    return build_request("setMyCommands", commands=commands)


def get_my_commands() -> Request:
    return build_request("getMyCommands")


# ── Updating messages ────────────────────────────────────────────────────────


def edit_message_text(
    text: str,
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    parse_mode: Optional[str] = None,
    entities: Optional[List[MessageEntity]] = None,
    disable_web_page_preview: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit text and game messages."""
    return build_request(
        "editMessageText",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        text=text,
        parse_mode=parse_mode,
        entities=entities,
        disable_web_page_preview=disable_web_page_preview,
        reply_markup=reply_markup,
    )


def edit_message_caption(
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit captions of messages."""
    return build_request(
        "editMessageCaption",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        reply_markup=reply_markup,
    )


def edit_message_media(
    media: Union[InputMedia, InputMediaAnimation, InputMediaDocument, InputMediaAudio, InputMediaPhoto, InputMediaVideo],
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit animation, audio, document, photo or video messages.

    *media* is tagged by its own ``InputMedia*`` class, so an
    ``InputMediaPhoto`` stays a photo even though decoding the same payload
    would pick the first ``InputMedia`` variant.
    """
    return build_request(
        "editMessageMedia",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        media=_tagged(InputMedia, media),
        reply_markup=reply_markup,
    )


def edit_message_reply_markup(
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    return build_request(
        "editMessageReplyMarkup",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        reply_markup=reply_markup,
    )


def stop_poll(chat_id: ChatId, message_id: int, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Stop a poll sent by the bot. Returns the stopped ``Poll``."""
    return build_request("stopPoll", chat_id=chat_id, message_id=message_id, reply_markup=reply_markup)


def delete_message(chat_id: ChatId, message_id: int) -> Request:
    """Delete a message, including service messages, sent less than 48 hours ago."""
    return build_request("deleteMessage", chat_id=chat_id, message_id=message_id)


# ── Stickers ─────────────────────────────────────────────────────────────────


def send_sticker(
    chat_id: ChatId,
    sticker: FileOrPath,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[AnyReplyMarkup] = None,
) -> Request:
    """Send a static .WEBP or animated .TGS sticker."""
    return build_request(
        "sendSticker",
        chat_id=chat_id,
        sticker=sticker,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=_tagged(ReplyMarkup, reply_markup),
    )


def get_sticker_set(name: str) -> Request:
    return build_request("getStickerSet", name=name)


def upload_sticker_file(user_id: int, png_sticker: InputFile) -> Request:
    """Upload a .PNG file for later use in sticker set methods."""
    return build_request("uploadStickerFile", user_id=user_id, png_sticker=png_sticker)


def create_new_sticker_set(
    user_id: int,
    name: str,
    title: str,
    emojis: str,
    png_sticker: Optional[FileOrPath] = None,
    tgs_sticker: Optional[InputFile] = None,
    contains_masks: Optional[bool] = None,
    mask_position: Optional[MaskPosition] = None,
) -> Request:
    """Create a new sticker set owned by a user.

    Exactly one of ``png_sticker`` or ``tgs_sticker`` must be used.
    """
    return build_request(
        "createNewStickerSet",
        user_id=user_id,
        name=name,
        title=title,
        png_sticker=png_sticker,
        tgs_sticker=tgs_sticker,
        emojis=emojis,
        contains_masks=contains_masks,
        mask_position=mask_position,
    )


def add_sticker_to_set(
    user_id: int,
    name: str,
    emojis: str,
    png_sticker: Optional[FileOrPath] = None,
    tgs_sticker: Optional[InputFile] = None,
    mask_position: Optional[MaskPosition] = None,
) -> Request:
    """Add a new sticker to a set created by the bot."""
    return build_request(
        "addStickerToSet",
        user_id=user_id,
        name=name,
        png_sticker=png_sticker,
        tgs_sticker=tgs_sticker,
        emojis=emojis,
        mask_position=mask_position,
    )


def set_sticker_position_in_set(sticker: str, position: int) -> Request:
    return build_request("setStickerPositionInSet", sticker=sticker, position=position)


def delete_sticker_from_set(sticker: str) -> Request:
    return build_request("deleteStickerFromSet", sticker=sticker)


def set_sticker_set_thumb(name: str, user_id: int, thumb: Optional[FileOrPath] = None) -> Request:
    """Set the thumbnail of a sticker set."""
    return build_request("setStickerSetThumb", name=name, user_id=user_id, thumb=thumb)


# ── Inline mode ──────────────────────────────────────────────────────────────


def answer_inline_query(
    inline_query_id: str,
    results: List[Any],
    cache_time: Optional[int] = None,
    is_personal: Optional[bool] = None,
    next_offset: Optional[str] = None,
    switch_pm_text: Optional[str] = None,
    switch_pm_parameter: Optional[str] = None,
) -> Request:
    """Send answers to an inline query. No more than 50 results are allowed.

    Each entry of *results* is an ``InlineQueryResult*`` model or an
    already-tagged :class:`~botapi.models.InlineQueryResult`.
    """
    return build_request(
        "answerInlineQuery",
        inline_query_id=inline_query_id,
        results=_tagged_list(InlineQueryResult, results),
        cache_time=cache_time,
        is_personal=is_personal,
        next_offset=next_offset,
        switch_pm_text=switch_pm_text,
        switch_pm_parameter=switch_pm_parameter,
    )


# ── Payments ─────────────────────────────────────────────────────────────────


def send_invoice(
    chat_id: ChatId,
    title: str,
    description: str,
    payload: str,
    provider_token: str,
    currency: str,
    prices: List[LabeledPrice],
    max_tip_amount: Optional[int] = None,
    suggested_tip_amounts: Optional[List[int]] = None,
    start_parameter: Optional[str] = None,
    provider_data: Optional[str] = None,
    photo_url: Optional[str] = None,
    photo_size: Optional[int] = None,
    photo_width: Optional[int] = None,
    photo_height: Optional[int] = None,
    need_name: Optional[bool] = None,
    need_phone_number: Optional[bool] = None,
    need_email: Optional[bool] = None,
    need_shipping_address: Optional[bool] = None,
    send_phone_number_to_provider: Optional[bool] = None,
    send_email_to_provider: Optional[bool] = None,
    is_flexible: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Send an invoice. Returns the sent ``Message``."""
    return build_request(
        "sendInvoice",
        chat_id=chat_id,
        title=title,
        description=description,
        payload=payload,
        provider_token=provider_token,
        currency=currency,
        prices=prices,
        max_tip_amount=max_tip_amount,
        suggested_tip_amounts=suggested_tip_amounts,
        start_parameter=start_parameter,
        provider_data=provider_data,
        photo_url=photo_url,
        photo_size=photo_size,
        photo_width=photo_width,
        photo_height=photo_height,
        need_name=need_name,
        need_phone_number=need_phone_number,
        need_email=need_email,
        need_shipping_address=need_shipping_address,
        send_phone_number_to_provider=send_phone_number_to_provider,
        send_email_to_provider=send_email_to_provider,
        is_flexible=is_flexible,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


def answer_shipping_query(
    shipping_query_id: str,
    ok: bool,
    shipping_options: Optional[List[ShippingOption]] = None,
    error_message: Optional[str] = None,
) -> Request:
    """Reply to a shipping query for an invoice with a flexible price."""
    return build_request(
        "answerShippingQuery",
        shipping_query_id=shipping_query_id,
        ok=ok,
        shipping_options=shipping_options,
        error_message=error_message,
    )


def answer_pre_checkout_query(
    pre_checkout_query_id: str,
    ok: bool,
    error_message: Optional[str] = None,
) -> Request:
    """Respond to a pre-checkout query within 10 seconds."""
    return build_request(
        "answerPreCheckoutQuery",
        pre_checkout_query_id=pre_checkout_query_id,
        ok=ok,
        error_message=error_message,
    )


# ── Telegram Passport ────────────────────────────────────────────────────────


def set_passport_data_errors(user_id: int, errors: List[Any]) -> Request:
    """Report errors in Telegram Passport elements the user provided.

    The user can't re-submit the Passport until the errors are fixed.
    """
    return build_request(
        "setPassportDataErrors",
        user_id=user_id,
        errors=_tagged_list(PassportElementError, errors),
    )


# ── Games ────────────────────────────────────────────────────────────────────


def send_game(
    chat_id: int,
    game_short_name: str,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    return build_request(
        "sendGame",
        chat_id=chat_id,
        game_short_name=game_short_name,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


def set_game_score(
    user_id: int,
    score: int,
    force: Optional[bool] = None,
    disable_edit_message: Optional[bool] = None,
    chat_id: Optional[int] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
) -> Request:
    """Set the score of a user in a game."""
    return build_request(
        "setGameScore",
        user_id=user_id,
        score=score,
        force=force,
        disable_edit_message=disable_edit_message,
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
    )


def get_game_high_scores(
    user_id: int,
    chat_id: Optional[int] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
) -> Request:
    """High score data for a user and their neighbours in a game."""
    return build_request(
        "getGameHighScores",
        user_id=user_id,
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
    )


ALL_METHODS: Dict[str, Callable[..., Request]] = {
    "getUpdates": get_updates,
    "setWebhook": set_webhook,
    "deleteWebhook": delete_webhook,
    "getWebhookInfo": get_webhook_info,
    "getMe": get_me,
    "logOut": log_out,
    "close": close,
    "sendMessage": send_message,
    "forwardMessage": forward_message,
    "copyMessage": copy_message,
    "sendPhoto": send_photo,
    "sendAudio": send_audio,
    "sendDocument": send_document,
    "sendVideo": send_video,
    "sendAnimation": send_animation,
    "sendVoice": send_voice,
    "sendVideoNote": send_video_note,
    "sendMediaGroup": send_media_group,
    "sendLocation": send_location,
    "editMessageLiveLocation": edit_message_live_location,
    "stopMessageLiveLocation": stop_message_live_location,
    "sendVenue": send_venue,
    "sendContact": send_contact,
    "sendPoll": send_poll,
    "sendDice": send_dice,
    "sendChatAction": send_chat_action,
    "getUserProfilePhotos": get_user_profile_photos,
    "getFile": get_file,
    "kickChatMember": kick_chat_member,
    "unbanChatMember": unban_chat_member,
    "restrictChatMember": restrict_chat_member,
    "promoteChatMember": promote_chat_member,
    "setChatAdministratorCustomTitle": set_chat_administrator_custom_title,
    "setChatPermissions": set_chat_permissions,
    "exportChatInviteLink": export_chat_invite_link,
    "createChatInviteLink": create_chat_invite_link,
    "editChatInviteLink": edit_chat_invite_link,
    "revokeChatInviteLink": revoke_chat_invite_link,
    "setChatPhoto": set_chat_photo,
    "deleteChatPhoto": delete_chat_photo,
    "setChatTitle": set_chat_title,
    "setChatDescription": set_chat_description,
    "pinChatMessage": pin_chat_message,
    "unpinChatMessage": unpin_chat_message,
    "unpinAllChatMessages": unpin_all_chat_messages,
    "leaveChat": leave_chat,
    "getChat": get_chat,
    "getChatAdministrators": get_chat_administrators,
    "getChatMembersCount": get_chat_members_count,
    "getChatMember": get_chat_member,
    "setChatStickerSet": set_chat_sticker_set,
    "deleteChatStickerSet": delete_chat_sticker_set,
    "answerCallbackQuery": answer_callback_query,
    "setMyCommands": set_my_commands,
    "getMyCommands": get_my_commands,
    "editMessageText": edit_message_text,
    "editMessageCaption": edit_message_caption,
    "editMessageMedia": edit_message_media,
    "editMessageReplyMarkup": edit_message_reply_markup,
    "stopPoll": stop_poll,
    "deleteMessage": delete_message,
    "sendSticker": send_sticker,
    "getStickerSet": get_sticker_set,
    "uploadStickerFile": upload_sticker_file,
    "createNewStickerSet": create_new_sticker_set,
    "addStickerToSet": add_sticker_to_set,
    "setStickerPositionInSet": set_sticker_position_in_set,
    "deleteStickerFromSet": delete_sticker_from_set,
    "setStickerSetThumb": set_sticker_set_thumb,
    "answerInlineQuery": answer_inline_query,
    "sendInvoice": send_invoice,
    "answerShippingQuery": answer_shipping_query,
    "answerPreCheckoutQuery": answer_pre_checkout_query,
    "setPassportDataErrors": set_passport_data_errors,
    "sendGame": send_game,
    "setGameScore": set_game_score,
    "getGameHighScores": get_game_high_scores,
}
