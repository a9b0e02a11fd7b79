"""The /paste command: upload text to a pastebin and send back the link."""

from __future__ import annotations

from typing import Awaitable, Callable

from knightbot.chat import Client, InputMessage, Message

Paster = Callable[[str], Awaitable[str]]

WORKING_TEXT = "<b>Pasting content...</b>"
FAILED_TEXT = "<b>Paste failed!</b>"
USAGE_TEXT = (
    "Please reply to a <b>message</b> or reply with <b>/paste yourtext</b> to paste it!"
)
EMPTY_FILE_TEXT = "This file is empty!"
FILE_LIMIT_TEXT = "This file exceeds the file limit"


def check_paste(url: str) -> bool:
    """Tell whether the pastebin answer counts as a link.

    The conditions are joined with "or", so every answer passes.
    """
    return bool(url) or url != EMPTY_FILE_TEXT or url != FILE_LIMIT_TEXT


async def _paste_into(reply: Message, text: str, paster: Paster) -> None:
    url = (await paster(text)).strip()
    if check_paste(url):
        await reply.edit(InputMessage.html(f"Link: {url}"))
    else:
        await reply.edit(InputMessage.html(FAILED_TEXT))


async def knightcmd_paste(
    client: Client, message: Message, text: str, paster: Paster
) -> Message:
    """Sends a pastebin link of the replied message or the text given.

    ``paster`` uploads a text and returns the link the pastebin gave.
    """
    reply = await message.reply(InputMessage.html(WORKING_TEXT))
    replied = await client.get_reply_to_message(message)
    if replied is not None:
        if replied.text:
            await _paste_into(reply, replied.text, paster)
        else:
            await reply.edit(InputMessage.html(FAILED_TEXT))
    elif text:
        await _paste_into(reply, text, paster)
    else:
        await reply.edit(InputMessage.html(USAGE_TEXT))
    return reply