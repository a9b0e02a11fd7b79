"""Chat model: outgoing message drafts, messages, chats and a message client."""

from __future__ import annotations

import itertools
import secrets
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable


class ParseMode(Enum):
    """How the text of a message is to be interpreted."""

    TEXT = "text"
    HTML = "html"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class UrlButton:
    """An inline keyboard button that opens a URL."""

    text: str
    url: str


@dataclass(frozen=True)
class InputMessage:
    """A message to be sent; builder methods return modified copies."""

    text: str
    parse_mode: ParseMode = ParseMode.TEXT
    reply_to: int | None = None
    buttons: tuple[tuple[UrlButton, ...], ...] = ()
    photo_url: str | None = None

    @classmethod
    def html(cls, text: str) -> InputMessage:
        return cls(text, ParseMode.HTML)

    @classmethod
    def markdown(cls, text: str) -> InputMessage:
        return cls(text, ParseMode.MARKDOWN)

    @classmethod
    def text(cls, text: str) -> InputMessage:
        return cls(text, ParseMode.TEXT)

    def with_reply_to(self, message_id: int | None) -> InputMessage:
        return replace(self, reply_to=message_id)

    def with_buttons(self, rows: Iterable[Iterable[UrlButton]]) -> InputMessage:
        return replace(self, buttons=tuple(tuple(row) for row in rows))

    def with_photo_url(self, url: str) -> InputMessage:
        return replace(self, photo_url=url)


def _as_input(content: str | InputMessage) -> InputMessage:
    if isinstance(content, InputMessage):
        return content
    return InputMessage.text(content)


@dataclass(frozen=True)
class Sender:
    """The author of a message."""

    id: int
    name: str = ""


@dataclass(frozen=True)
class Chat:
    """A conversation that messages belong to."""

    id: int
    name: str = ""


@dataclass(eq=False)
class Message:
    """A message that exists in a chat."""

    id: int
    chat: Chat
    content: InputMessage
    sender: Sender | None = None
    outgoing: bool = False
    client: Client | None = field(default=None, repr=False)

    @property
    def text(self) -> str:
        return self.content.text

    @property
    def reply_to_message_id(self) -> int | None:
        return self.content.reply_to

    def _client(self) -> Client:
        if self.client is None:
            raise RuntimeError("message is not bound to a client")
        return self.client

    async def reply(self, content: str | InputMessage) -> Message:
        """Send a message to the same chat in reply to this one."""
        return await self._client().send_message(
            self.chat, _as_input(content).with_reply_to(self.id)
        )

    async def edit(self, content: str | InputMessage) -> None:
        """Replace the content of this message, keeping what it replies to."""
        self._client()
        self.content = _as_input(content).with_reply_to(self.content.reply_to)


class Client:
    """Keeps every message it has seen or sent, grouped by chat."""

    def __init__(self, me: Sender | None = None) -> None:
        self.me = me
        self.messages: list[Message] = []
        self._by_key: dict[tuple[int, int], Message] = {}
        self._ids = itertools.count(1)

    def _store(self, message: Message) -> Message:
        self.messages.append(message)
        self._by_key[(message.chat.id, message.id)] = message
        return message

    def receive(
        self,
        chat: Chat,
        text: str,
        sender: Sender | None = None,
        reply_to: int | None = None,
    ) -> Message:
        """Record an incoming message and return it."""
        content = InputMessage.text(text).with_reply_to(reply_to)
        return self._store(Message(next(self._ids), chat, content, sender, False, self))

    async def send_message(self, chat: Chat, content: str | InputMessage) -> Message:
        """Send a message to a chat and return it."""
        message = Message(next(self._ids), chat, _as_input(content), self.me, True, self)
        return self._store(message)

    async def get_reply_to_message(self, message: Message) -> Message | None:
        """Return the message that the given one replies to, if known."""
        target = message.reply_to_message_id
        if target is None:
            return None
        return self._by_key.get((message.chat.id, target))


async def answer(client: Client, message: Message, content: str | InputMessage) -> Message:
    """Respond to a command.

    If the command itself replies to a message, the response replies to that
    message instead of the command.
    """
    content = _as_input(content)
    target = message.reply_to_message_id
    if target is not None:
        return await client.send_message(message.chat, content.with_reply_to(target))
    return await message.reply(content)


def random(modulo: int) -> int:
    """Return one random byte reduced modulo ``modulo`` (1 to 255)."""
    if not 1 <= modulo <= 255:
        raise ValueError("modulo must be between 1 and 255")
    return secrets.token_bytes(1)[0] % modulo