"""The /urb command: definitions from Urban Dictionary."""

from __future__ import annotations

import json
from typing import Any

from knightbot import req
from knightbot.chat import InputMessage, Message

DEFINE_URL = "https://api.urbandictionary.com/v0/define"
RANDOM_URL = "http://api.urbandictionary.com/v0/random"

NO_DEFINITION_TEXT = "No definition found!"
FAILURE_TEXT = "Something went wrong!"
RANDOM_WORKING_TEXT = "<b>Getting definition of random word from urban dictionary...</b>"
WORD_WORKING_TEXT = "<b>Getting definition of word from urban dictionary...</b>"


def _lookup(value: Any, *keys: str | int) -> Any:
    for key in keys:
        if isinstance(key, int) and isinstance(value, list) and 0 <= key < len(value):
            value = value[key]
        elif isinstance(key, str) and isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return None
    return value


def _json_text(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).strip('"')


async def get_definition(word: str) -> str | None:
    """Return the first definition of ``word``, or None if the request failed.

    The text keeps the escapes of its JSON form. Raises ValueError when the
    response holds no definition list.
    """
    response = await req.make_request(f"{DEFINE_URL}?term={word}")
    if response is None:
        return None
    entries = _lookup(response, "list")
    if not isinstance(entries, list):
        raise ValueError("response holds no definition list")
    if not entries:
        return NO_DEFINITION_TEXT
    return _json_text(_lookup(entries, 0, "definition"))


def format_definition(word: str, definition: str) -> str:
    """Render a definition as HTML, dropping escaped line breaks."""
    cleaned = definition.replace("\\r\\n", "")
    return f"Definition for <b>{word}</b> : <i>{cleaned}</i>"


async def knightcmd_urb(message: Message, word: str) -> Message:
    """Gets the definition of word from urban dictionary.

    Without a word a random one is looked up; RuntimeError is raised if
    that lookup fails.
    """
    if not word.strip():
        reply = await message.reply(InputMessage.html(RANDOM_WORKING_TEXT))
        response = await req.make_request(RANDOM_URL)
        if response is None:
            raise RuntimeError("could not fetch a random definition")
        term = _json_text(_lookup(response, "list", 0, "word"))
        definition = _json_text(_lookup(response, "list", 0, "definition"))
        await reply.edit(InputMessage.html(format_definition(term, definition)))
        return reply

    reply = await message.reply(InputMessage.html(WORD_WORKING_TEXT))
    definition = await get_definition(word)
    if definition is None:
        await reply.edit(FAILURE_TEXT)
    else:
        await reply.edit(InputMessage.html(format_definition(word, definition)))
    return reply