"""The /link command: find where a link finally leads."""

from __future__ import annotations

import httpx

from knightbot.chat import InputMessage, Message

MAX_REDIRECTS = 10

EMPTY_URL_TEXT = "Send a <b>proper URL</b>!"
INVALID_URL_TEXT = "<b>Invalid URL!</b>"
WORKING_TEXT = "<b>Extracting redirected URL from given link...</b>"
FAILURE_TEXT = "<b>Error! Could not extract redirected URL!</b>"


async def resolve_redirects(url: str) -> str | None:
    """Follow the redirects of ``url`` with HEAD requests.

    Returns the final URL if it answers with success, otherwise None.
    Network errors propagate as httpx exceptions.
    """
    async with httpx.AsyncClient(
        follow_redirects=True, max_redirects=MAX_REDIRECTS
    ) as client:
        response = await client.head(url)
        while 300 <= response.status_code < 400:
            location = response.headers.get("location")
            if location is None:
                return None
            response = await client.head(response.url.join(location))
        return str(response.url) if response.is_success else None


async def knightcmd_link(message: Message, url: str) -> Message:
    """Extracts redirected URL from given link."""
    if not url.strip():
        return await message.reply(InputMessage.html(EMPTY_URL_TEXT))
    if not url.startswith(("http://", "https://")):
        return await message.reply(InputMessage.html(INVALID_URL_TEXT))
    reply = await message.reply(InputMessage.html(WORKING_TEXT))
    final = await resolve_redirects(url)
    if final is None:
        await reply.edit(InputMessage.html(FAILURE_TEXT))
    else:
        await reply.edit(final)
    return reply