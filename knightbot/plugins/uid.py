"""The /uid command: report user and chat identifiers."""

from __future__ import annotations

from knightbot.chat import Client, InputMessage, Message


async def knightcmd_uid(client: Client, message: Message) -> Message | None:
    """Gets UserID and ChatID.

    When the command replies to a message, the author of that message is
    reported too; nothing is sent if that message or its author is unknown.
    Raises ValueError if the command itself has no sender.
    """
    if message.sender is None:
        raise ValueError("message has no sender")
    own = (
        f"Your ID: <code>{message.sender.id}</code>\n"
        f"ChatID: <code>-100{message.chat.id}</code>"
    )
    target = message.reply_to_message_id
    if target is None:
        return await message.reply(InputMessage.html(own))
    replied = await client.get_reply_to_message(message)
    if replied is None or replied.sender is None:
        return None
    author = replied.sender
    text = f"{own}\n{author.name}'s ID: <code>{author.id}</code>"
    return await client.send_message(
        message.chat, InputMessage.html(text).with_reply_to(target)
    )