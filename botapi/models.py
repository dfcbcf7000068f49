"""Pydantic data models for the Telegram Bot API (5.2 object set).

Every class corresponds to an object documented under "Available types".
Field names are the wire's snake_case names; the only renaming is the
Python keyword ``from``, exposed as ``from_field``.  Required wire fields are
required model fields, optional ones default to ``None``.

Fields that may hold one of several shapes are typed with the closed unions
declared at the bottom of this module (``InputMedia``, ``InlineQueryResult``,
``InputMessageContent``, ``PassportElementError``, ``ReplyMarkup``) or with
:class:`~botapi.unions.Either`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from botapi.unions import Either, TaggedUnion


class TelegramObject(BaseModel):
    """Base class of every Bot API object."""

    model_config = ConfigDict(populate_by_name=True)

    def encode(self) -> Dict[str, Any]:
        """Return the wire payload: aliased names, absent optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def decode(cls, data: Any) -> "TelegramObject":
        """Validate a wire payload into this model."""
        return cls.model_validate(data)


# ── Updates ──────────────────────────────────────────────────────────────────


class Update(TelegramObject):
    """An incoming update. At most one of the optional fields is present."""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None
    callback_query: Optional[CallbackQuery] = None
    shipping_query: Optional[ShippingQuery] = None
    pre_checkout_query: Optional[PreCheckoutQuery] = None
    poll: Optional[Poll] = None
    poll_answer: Optional[PollAnswer] = None
    my_chat_member: Optional[ChatMemberUpdated] = None
    chat_member: Optional[ChatMemberUpdated] = None


class WebhookInfo(TelegramObject):
    """Current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Users, chats and messages ────────────────────────────────────────────────


class User(TelegramObject):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class Chat(TelegramObject):
    """A chat: private, group, supergroup or channel."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional[Message] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    message_auto_delete_time: Optional[int] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional[ChatLocation] = None


class Message(TelegramObject):
    """A message, including service messages."""

    message_id: int
    from_field: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    date: int
    chat: Chat
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional[Message] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    new_chat_members: Optional[List[User]] = None
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List[PhotoSize]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    message_auto_delete_timer_changed: Optional[MessageAutoDeleteTimerChanged] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional[Message] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    connected_website: Optional[str] = None
    passport_data: Optional[PassportData] = None
    proximity_alert_triggered: Optional[ProximityAlertTriggered] = None
    voice_chat_scheduled: Optional[VoiceChatScheduled] = None
    voice_chat_started: Optional[VoiceChatStarted] = None
    voice_chat_ended: Optional[VoiceChatEnded] = None
    voice_chat_participants_invited: Optional[VoiceChatParticipantsInvited] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class MessageId(TelegramObject):
    """A unique message identifier."""

    message_id: int


class MessageEntity(TelegramObject):
    """One special entity in a text message: hashtag, username, URL, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(TelegramObject):
    """One size of a photo or a file/sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramObject):
    """An animation file (GIF or H.264/MPEG-4 AVC video without sound)."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    """An audio file treated as music by Telegram clients."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramObject):
    """A general file, as opposed to photos, voice messages and audio files."""

    file_id: str
    file_unique_id: str
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramObject):
    """A video file."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramObject):
    """A round video message."""

    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    """A voice note."""

    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Contact(TelegramObject):
    """A phone contact."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramObject):
    """An animated emoji that displays a random value."""

    emoji: str
    value: int


class PollOption(TelegramObject):
    """One answer option in a poll."""

    text: str
    voter_count: int


class PollAnswer(TelegramObject):
    """An answer of a user in a non-anonymous poll."""

    poll_id: str
    user: User
    option_ids: List[int]


class Poll(TelegramObject):
    """A poll."""

    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Location(TelegramObject):
    """A point on the map."""

    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramObject):
    """A venue."""

    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


# ── Service messages ─────────────────────────────────────────────────────────


class ProximityAlertTriggered(TelegramObject):
    """Service message: a user in the chat triggered another user's proximity alert."""

    traveler: User
    watcher: User
    distance: int


class MessageAutoDeleteTimerChanged(TelegramObject):
    """Service message: the chat's auto-delete timer settings changed."""

    message_auto_delete_time: int


class VoiceChatScheduled(TelegramObject):
    """Service message: a voice chat was scheduled."""

    start_date: int


class VoiceChatStarted(TelegramObject):
    """Service message: a voice chat started. Holds no information."""


class VoiceChatEnded(TelegramObject):
    """Service message: a voice chat ended."""

    duration: int


class VoiceChatParticipantsInvited(TelegramObject):
    """Service message: new participants were invited to a voice chat."""

    users: Optional[List[User]] = None


class UserProfilePhotos(TelegramObject):
    """A user's profile pictures."""

    total_count: int
    photos: List[List[PhotoSize]]


class File(TelegramObject):
    """A file ready to be downloaded via ``/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


# ── Keyboards ────────────────────────────────────────────────────────────────


class ReplyKeyboardMarkup(TelegramObject):
    """A custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None


class KeyboardButton(TelegramObject):
    """One button of the reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional[KeyboardButtonPollType] = None


class KeyboardButtonPollType(TelegramObject):
    """Type of a poll allowed to be created when the button is pressed."""

    type: Optional[str] = None


class ReplyKeyboardRemove(TelegramObject):
    """Asks clients to remove the current custom keyboard."""

    remove_keyboard: bool
    selective: Optional[bool] = None


class InlineKeyboardMarkup(TelegramObject):
    """An inline keyboard that appears right next to its message."""

    inline_keyboard: List[List[InlineKeyboardButton]]


class InlineKeyboardButton(TelegramObject):
    """One button of an inline keyboard. Exactly one optional field must be used."""

    text: str
    url: Optional[str] = None
    login_url: Optional[LoginUrl] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional[CallbackGame] = None
    pay: Optional[bool] = None


class LoginUrl(TelegramObject):
    """Inline keyboard button parameter used to authorize a user automatically."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class CallbackQuery(TelegramObject):
    """An incoming callback query from a callback button in an inline keyboard."""

    id: str
    from_field: User = Field(..., alias="from")
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    chat_instance: str
    data: Optional[str] = None
    game_short_name: Optional[str] = None


class ForceReply(TelegramObject):
    """Asks clients to display a reply interface to the user."""

    force_reply: bool
    selective: Optional[bool] = None


# ── Chat administration ──────────────────────────────────────────────────────


class ChatPhoto(TelegramObject):
    """A chat photo."""

    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatInviteLink(TelegramObject):
    """An invite link for a chat."""

    invite_link: str
    creator: User
    is_primary: bool
    is_revoked: bool
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None


class ChatMember(TelegramObject):
    """Information about one member of a chat."""

    user: User
    status: str
    custom_title: Optional[str] = None
    is_anonymous: Optional[bool] = None
    can_be_edited: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_voice_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    until_date: Optional[int] = None


class ChatMemberUpdated(TelegramObject):
    """Changes in the status of a chat member."""

    chat: Chat
    from_field: User = Field(..., alias="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional[ChatInviteLink] = None


class ChatPermissions(TelegramObject):
    """Actions that a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class ChatLocation(TelegramObject):
    """A location to which a chat is connected."""

    location: Location
    address: str


class BotCommand(TelegramObject):
    """A bot command."""

    command: str
    description: str


class ResponseParameters(TelegramObject):
    """Why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


# ── Input media ──────────────────────────────────────────────────────────────


class InputFile(TelegramObject):
    """The contents of a file to be uploaded with multipart/form-data.

    Holds no fields; the upload itself belongs to the transport.
    """


class InputMediaPhoto(TelegramObject):
    """A photo to be sent."""

    type: str
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None


class InputMediaVideo(TelegramObject):
    """A video to be sent."""

    type: str
    media: str
    thumb: Optional[Either[InputFile, str]] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(TelegramObject):
    """An animation file (GIF or H.264/MPEG-4 AVC video without sound) to be sent."""

    type: str
    media: str
    thumb: Optional[Either[InputFile, str]] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(TelegramObject):
    """An audio file to be treated as music to be sent."""

    type: str
    media: str
    thumb: Optional[Either[InputFile, str]] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(TelegramObject):
    """A general file to be sent."""

    type: str
    media: str
    thumb: Optional[Either[InputFile, str]] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None


# ── Stickers ─────────────────────────────────────────────────────────────────


class Sticker(TelegramObject):
    """A sticker."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional[MaskPosition] = None
    file_size: Optional[int] = None


class StickerSet(TelegramObject):
    """A sticker set."""

    name: str
    title: str
    is_animated: bool
    contains_masks: bool
    stickers: List[Sticker]
    thumb: Optional[PhotoSize] = None


class MaskPosition(TelegramObject):
    """Where on faces a mask should be placed by default."""

    point: str
    x_shift: float
    y_shift: float
    scale: float


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramObject):
    """An incoming inline query."""

    id: str
    from_field: User = Field(..., alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional[Location] = None


class InlineQueryResultArticle(TelegramObject):
    """A link to an article or web page."""

    type: str
    id: str
    title: str
    input_message_content: InputMessageContent
    reply_markup: Optional[InlineKeyboardMarkup] = None
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultPhoto(TelegramObject):
    """A link to a photo."""

    type: str
    id: str
    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultGif(TelegramObject):
    """A link to an animated GIF file."""

    type: str
    id: str
    gif_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_url: str
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultMpeg4Gif(TelegramObject):
    """A link to a video animation (H.264/MPEG-4 AVC video without sound)."""

    type: str
    id: str
    mpeg4_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumb_url: str
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVideo(TelegramObject):
    """A link to a page with an embedded video player or a video file."""

    type: str
    id: str
    video_url: str
    mime_type: str
    thumb_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultAudio(TelegramObject):
    """A link to an MP3 audio file."""

    type: str
    id: str
    audio_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVoice(TelegramObject):
    """A link to a voice recording in an .OGG container encoded with OPUS."""

    type: str
    id: str
    voice_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    voice_duration: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultDocument(TelegramObject):
    """A link to a file (PDF or ZIP)."""

    type: str
    id: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    document_url: str
    mime_type: str
    description: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(TelegramObject):
    """A location on a map."""

    type: str
    id: str
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultVenue(TelegramObject):
    """A venue."""

    type: str
    id: str
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultContact(TelegramObject):
    """A contact with a phone number."""

    type: str
    id: str
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultGame(TelegramObject):
    """A game."""

    type: str
    id: str
    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup] = None


class InlineQueryResultCachedPhoto(TelegramObject):
    """A link to a photo stored on the Telegram servers."""

    type: str
    id: str
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedGif(TelegramObject):
    """A link to an animated GIF file stored on the Telegram servers."""

    type: str
    id: str
    gif_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedMpeg4Gif(TelegramObject):
    """A link to a video animation stored on the Telegram servers."""

    type: str
    id: str
    mpeg4_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedSticker(TelegramObject):
    """A link to a sticker stored on the Telegram servers."""

    type: str
    id: str
    sticker_file_id: str
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedDocument(TelegramObject):
    """A link to a file stored on the Telegram servers."""

    type: str
    id: str
    title: str
    document_file_id: str
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVideo(TelegramObject):
    """A link to a video file stored on the Telegram servers."""

    type: str
    id: str
    video_file_id: str
    title: str
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVoice(TelegramObject):
    """A link to a voice message stored on the Telegram servers."""

    type: str
    id: str
    voice_file_id: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedAudio(TelegramObject):
    """A link to an MP3 audio file stored on the Telegram servers."""

    type: str
    id: str
    audio_file_id: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InputTextMessageContent(TelegramObject):
    """Content of a text message sent as the result of an inline query."""

    message_text: str
    parse_mode: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(TelegramObject):
    """Content of a location message sent as the result of an inline query."""

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(TelegramObject):
    """Content of a venue message sent as the result of an inline query."""

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(TelegramObject):
    """Content of a contact message sent as the result of an inline query."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InputInvoiceMessageContent(TelegramObject):
    """Content of an invoice message sent as the result of an inline query."""

    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None


class ChosenInlineResult(TelegramObject):
    """An inline query result chosen by a user and sent to their chat partner."""

    result_id: str
    from_field: User = Field(..., alias="from")
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None
    query: str


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(TelegramObject):
    """A portion of the price for goods or services."""

    label: str
    amount: int


class Invoice(TelegramObject):
    """Basic information about an invoice."""

    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    """A shipping address."""

    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    """Information about an order."""

    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class ShippingOption(TelegramObject):
    """One shipping option."""

    id: str
    title: str
    prices: List[LabeledPrice]


class SuccessfulPayment(TelegramObject):
    """Basic information about a successful payment."""

    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class ShippingQuery(TelegramObject):
    """An incoming shipping query."""

    id: str
    from_field: User = Field(..., alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject):
    """An incoming pre-checkout query."""

    id: str
    from_field: User = Field(..., alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportData(TelegramObject):
    """Telegram Passport data shared with the bot by the user."""

    data: List[EncryptedPassportElement]
    credentials: EncryptedCredentials


class PassportFile(TelegramObject):
    """A file uploaded to Telegram Passport."""

    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramObject):
    """Documents or other Telegram Passport elements shared with the bot."""

    type: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List[PassportFile]] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: Optional[List[PassportFile]] = None
    hash: str


class EncryptedCredentials(TelegramObject):
    """Data required for decrypting and authenticating passport elements."""

    data: str
    hash: str
    secret: str


class PassportElementErrorDataField(TelegramObject):
    """An issue in one of the data fields provided by the user."""

    source: str
    type: str
    field_name: str
    data_hash: str
    message: str


class PassportElementErrorFrontSide(TelegramObject):
    """An issue with the front side of a document."""

    source: str
    type: str
    file_hash: str
    message: str


class PassportElementErrorReverseSide(TelegramObject):
    """An issue with the reverse side of a document."""

    source: str
    type: str
    file_hash: str
    message: str


class PassportElementErrorSelfie(TelegramObject):
    """An issue with the selfie with a document."""

    source: str
    type: str
    file_hash: str
    message: str


class PassportElementErrorFile(TelegramObject):
    """An issue with a document scan."""

    source: str
    type: str
    file_hash: str
    message: str


class PassportElementErrorFiles(TelegramObject):
    """An issue with a list of scans."""

    source: str
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorTranslationFile(TelegramObject):
    """An issue with one of the files of a document translation."""

    source: str
    type: str
    file_hash: str
    message: str


class PassportElementErrorTranslationFiles(TelegramObject):
    """An issue with the translated version of a document."""

    source: str
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorUnspecified(TelegramObject):
    """An issue in an unspecified place."""

    source: str
    type: str
    element_hash: str
    message: str


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramObject):
    """A game. Short names act as unique identifiers."""

    title: str
    description: str
    photo: List[PhotoSize]
    text: Optional[str] = None
    text_entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None


class CallbackGame(TelegramObject):
    """A placeholder, currently holds no information."""


class GameHighScore(TelegramObject):
    """One row of the high scores table for a game."""

    position: int
    user: User
    score: int


# ── Closed unions ────────────────────────────────────────────────────────────
#
# Candidate order is decode priority; keep it stable.


class InputMedia(TaggedUnion):
    """Content of a media message to be sent."""

    variants = (
        ("animation", InputMediaAnimation),
        ("document", InputMediaDocument),
        ("audio", InputMediaAudio),
        ("photo", InputMediaPhoto),
        ("video", InputMediaVideo),
    )


class InlineQueryResult(TaggedUnion):
    """One result of an inline query."""

    variants = (
        ("cached_audio", InlineQueryResultCachedAudio),
        ("cached_document", InlineQueryResultCachedDocument),
        ("cached_gif", InlineQueryResultCachedGif),
        ("cached_mpeg4_gif", InlineQueryResultCachedMpeg4Gif),
        ("cached_photo", InlineQueryResultCachedPhoto),
        ("cached_sticker", InlineQueryResultCachedSticker),
        ("cached_video", InlineQueryResultCachedVideo),
        ("cached_voice", InlineQueryResultCachedVoice),
        ("article", InlineQueryResultArticle),
        ("audio", InlineQueryResultAudio),
        ("contact", InlineQueryResultContact),
        ("game", InlineQueryResultGame),
        ("document", InlineQueryResultDocument),
        ("gif", InlineQueryResultGif),
        ("location", InlineQueryResultLocation),
        ("mpeg4_gif", InlineQueryResultMpeg4Gif),
        ("photo", InlineQueryResultPhoto),
        ("venue", InlineQueryResultVenue),
        ("video", InlineQueryResultVideo),
        ("voice", InlineQueryResultVoice),
    )


class InputMessageContent(TaggedUnion):
    """Content of a message to be sent as the result of an inline query."""

    variants = (
        ("text", InputTextMessageContent),
        ("location", InputLocationMessageContent),
        ("venue", InputVenueMessageContent),
        ("contact", InputContactMessageContent),
        ("invoice", InputInvoiceMessageContent),
    )


class PassportElementError(TaggedUnion):
    """An error in a submitted Telegram Passport element."""

    variants = (
        ("data_field", PassportElementErrorDataField),
        ("front_side", PassportElementErrorFrontSide),
        ("reverse_side", PassportElementErrorReverseSide),
        ("selfie", PassportElementErrorSelfie),
        ("file", PassportElementErrorFile),
        ("files", PassportElementErrorFiles),
        ("translation_file", PassportElementErrorTranslationFile),
        ("translation_files", PassportElementErrorTranslationFiles),
        ("unspecified", PassportElementErrorUnspecified),
    )


class ReplyMarkup(TaggedUnion):
    """Additional interface options attached to a sent message."""

    variants = (
        ("inline_keyboard", InlineKeyboardMarkup),
        ("reply_keyboard", ReplyKeyboardMarkup),
        ("reply_keyboard_remove", ReplyKeyboardRemove),
        ("force_reply", ForceReply),
    )


for _model in list(globals().values()):
    if isinstance(_model, type) and issubclass(_model, TelegramObject):
        _model.model_rebuild()
del _model
