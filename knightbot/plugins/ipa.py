"""The /ipa command: details about an IP address."""

from __future__ import annotations

import json
from typing import Any

from knightbot import req
from knightbot.chat import InputMessage, Message

IPINFO_URL = "https://ipinfo.io/"

BAD_ADDRESS_TEXT = "Send a <b>proper IP Address</b>!"
WORKING_TEXT = "<b>Extracting info from ip addr........</b>"
FAILURE_TEXT = "Something went wrong! Please try again"

_FIELDS = (
    ("Hostname", "hostname"),
    ("City", "city"),
    ("Region", "region"),
    ("Country", "country"),
    ("Lat/Long", "loc"),
    ("Org", "org"),
    ("Postal", "postal"),
    ("Timezone", "timezone"),
)


def _field(data: Any, key: str) -> str:
    value = data.get(key) if isinstance(data, dict) else None
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).strip('"')


def format_ipinfo(addr: str, data: Any) -> str:
    """Render an ipinfo document as the HTML reply text."""
    lines = [f"<b>IP</b>: <code>{addr}</code>"]
    lines.extend(f"<b>{label}</b>: {_field(data, key)}" for label, key in _FIELDS)
    return "\n".join(lines)


async def knightcmd_ipa(message: Message, addr: str) -> Message:
    """Sends info about an IP Address."""
    if not addr.strip():
        return await message.reply(InputMessage.html(BAD_ADDRESS_TEXT))
    reply = await message.reply(InputMessage.html(WORKING_TEXT))
    data = await req.make_request(f"{IPINFO_URL}{addr}")
    if data is None:
        await reply.edit(FAILURE_TEXT)
    elif _field(data, "status") == "404":
        await reply.edit(InputMessage.html(BAD_ADDRESS_TEXT))
    else:
        await reply.edit(InputMessage.html(format_ipinfo(addr, data)))
    return reply