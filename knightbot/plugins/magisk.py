"""The /magisk command: links to the latest Magisk releases."""

from __future__ import annotations

import json
from typing import Any

from knightbot import req
from knightbot.chat import Client, InputMessage, Message, UrlButton, answer

MAGISK_FILES_URL = "https://raw.githubusercontent.com/topjohnwu/magisk-files/master/"
CHANNELS = ("Stable", "Beta", "Canary")
HEADER_TEXT = "<b>Latest Magisk Releases</b>:"


def _lookup(value: Any, *keys: str) -> Any:
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return None
    return value


def _json_text(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).strip('"')


def release_button(label: str, data: Any) -> UrlButton:
    """Build the button for one release channel from its JSON document.

    Missing fields show up as ``null``, as their JSON rendering does.
    """
    version = _json_text(_lookup(data, "magisk", "version"))
    link = _json_text(_lookup(data, "magisk", "link"))
    return UrlButton(f"{label}: {version}", link)


async def knightcmd_magisk(client: Client, message: Message) -> Message:
    """Gets the latest Magisk release according to the variant."""
    documents = [
        await req.make_request(f"{MAGISK_FILES_URL}{channel.lower()}.json")
        for channel in CHANNELS
    ]
    rows = []
    for channel, data in zip(CHANNELS, documents):
        if data is None:
            return await message.reply(
                InputMessage.html(f"Failed to get Magisk release information! ({channel})")
            )
        rows.append([release_button(channel, data)])
    content = InputMessage.html(HEADER_TEXT).with_buttons(rows)
    return await answer(client, message, content)