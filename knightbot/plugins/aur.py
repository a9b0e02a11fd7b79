"""The /aur command: package details from the Arch User Repository."""

from __future__ import annotations

from typing import Any, Mapping

from knightbot import req
from knightbot.chat import InputMessage, Message

AUR_RPC_URL = "https://aur.archlinux.org/rpc/"

MISSING_PACKAGE_TEXT = "Give me a package to provide info about!"
NO_PACKAGE_TEXT = "No package found!"

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _string(info: Mapping[str, Any], key: str) -> str:
    value = info.get(key)
    return value if isinstance(value, str) else ""


def _strings(info: Mapping[str, Any], key: str) -> list[str]:
    value = info.get(key)
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else "" for item in value]


def _quoted(text: str) -> str:
    escaped = []
    for ch in text:
        if ch in _ESCAPES:
            escaped.append(_ESCAPES[ch])
        elif not ch.isprintable():
            escaped.append(f"\\u{{{ord(ch):x}}}")
        else:
            escaped.append(ch)
    return '"' + "".join(escaped) + '"'


def _listing(items: list[str]) -> str:
    return "[" + ", ".join(_quoted(item) for item in items) + "]"


def format_package(info: Any) -> str:
    """Render one AUR package record as the HTML reply text.

    Missing or mistyped scalar fields become empty strings; missing list
    fields become empty lists, and non-string list items empty strings.
    """
    fields: Mapping[str, Any] = info if isinstance(info, Mapping) else {}
    lines = [
        f"<b>Name</b>: <code>{_string(fields, 'Name')}</code>",
        f"<b>Version</b>: <code>{_string(fields, 'Version')}</code>",
        f"<b>Description</b>: {_string(fields, 'Description')}",
        f"<b>URL</b>: {_string(fields, 'URL')}",
        f"<b>Groups</b>: {_listing(_strings(fields, 'Groups'))}",
        f"<b>Licenses</b>: {_listing(_strings(fields, 'License'))}",
        f"<b>Provides</b>: {_listing(_strings(fields, 'Provides'))}",
        f"<b>Depends On</b>: {_listing(_strings(fields, 'Depends'))}",
        f"<b>Make Deps</b>: {_listing(_strings(fields, 'MakeDepends'))}",
        f"<b>Check Deps</b>: {_listing(_strings(fields, 'CheckDepends'))}",
        f"<b>Optional Deps</b>: {_listing(_strings(fields, 'OptDepends'))}",
        f"<b>Conflicts With</b>: {_listing(_strings(fields, 'Conflicts'))}",
        f"<b>Maintainer</b>: {_string(fields, 'Maintainer')}",
    ]
    return "\n".join(lines) + "\n"


async def knightcmd_aur(message: Message, pkg: str) -> Message | None:
    """Gets package information from AUR.

    Returns the reply, or None when the service gave no usable answer.
    """
    if not pkg:
        return await message.reply(MISSING_PACKAGE_TEXT)
    response = await req.make_request(f"{AUR_RPC_URL}?v=5&type=info&arg={pkg}")
    if not isinstance(response, dict) or "results" not in response:
        return None
    results = response["results"]
    if not isinstance(results, list) or not results:
        return await message.reply(NO_PACKAGE_TEXT)
    return await message.reply(InputMessage.html(format_package(results[0])))