"""Commands that send a picture matching an HTTP status code."""

from __future__ import annotations

from knightbot.chat import Client, InputMessage, Message

CAT_SITE = "httpcats.com"
DOG_SITE = "http.dog"
PLANT_SITE = "http.garden"

DEFAULT_CODE = 404


def status_picture_url(site: str, code: int) -> str:
    """Return the picture URL for ``code`` on ``site``; 0 means 404."""
    if code == 0:
        code = DEFAULT_CODE
    return f"https://{site}/{code}.jpg"


async def _send_picture(client: Client, message: Message, site: str, code: int) -> Message:
    photo = InputMessage.text("").with_photo_url(status_picture_url(site, code))
    return await client.send_message(message.chat, photo)


async def knightcmd_cat(client: Client, message: Message, code: int) -> Message:
    """Sends cat pic according to the HTTP status code."""
    return await _send_picture(client, message, CAT_SITE, code)


async def knightcmd_dog(client: Client, message: Message, code: int) -> Message:
    """Sends dog pic according to the HTTP status code."""
    return await _send_picture(client, message, DOG_SITE, code)


async def knightcmd_plant(client: Client, message: Message, code: int) -> Message:
    """Sends plant pic according to http code."""
    return await _send_picture(client, message, PLANT_SITE, code)