"""Commands that answer without consulting any outside service."""

from __future__ import annotations

import time

from knightbot.chat import Client, InputMessage, Message, UrlButton, answer, random

ANYONE_URL = "https://dontasktoask.com"
RTFM_URL = "https://readthefuckingmanual.com"
SOURCE_URL = "https://example.com/knightbot"

EIGHTBALL_ANSWERS = ("Yes, it is the truth!", "No, this is a prepostrous lie!")
COIN_SIDES = ("Heads!", "Tails!")
RUN_LINES = (
    "The winter dog is running......",
    "Run away and never come back......",
    "Let's keep running folks!",
)
START_TEXT = "Heya! Type /help to see what I can do!"


async def knightcmd_anyone(client: Client, message: Message) -> Message:
    """Sends a why do you ask text."""
    content = InputMessage.html("Hmm.").with_buttons(
        [[UrlButton("Why do you ask?", ANYONE_URL)]]
    )
    return await answer(client, message, content)


async def knightcmd_eightball(client: Client, message: Message) -> Message:
    """Rolls an eightball to say yes or no."""
    return await answer(client, message, EIGHTBALL_ANSWERS[random(2)])


async def knightcmd_flipcoin(client: Client, message: Message) -> Message:
    """Flips a coin to say heads or tails."""
    return await answer(client, message, COIN_SIDES[random(2)])


async def knightcmd_luck(client: Client, message: Message) -> Message:
    """Says your lucky number."""
    number = random(101)
    return await answer(
        client, message, InputMessage.html(f"Your lucky number is: <code>{number}</code>")
    )


async def knightcmd_rtfm(client: Client, message: Message) -> Message:
    """Sends a RTFM text."""
    content = InputMessage.html("How bout you...").with_buttons(
        [[UrlButton("Read the fucking manual", RTFM_URL)]]
    )
    return await answer(client, message, content)


async def knightcmd_sauce(client: Client, message: Message) -> Message:
    """Provides the link to the source code of this bot."""
    content = InputMessage.html("You asked for it, so here you go!").with_buttons(
        [[UrlButton("sauce", SOURCE_URL)]]
    )
    return await answer(client, message, content)


async def knightcmd_start(message: Message) -> Message:
    """Checks if I'm alive."""
    return await message.reply(START_TEXT)


async def knightcmd_run(message: Message) -> Message:
    """Runnns :)"""
    start = time.perf_counter_ns()
    elapsed = time.perf_counter_ns() - start
    line = RUN_LINES[elapsed % len(RUN_LINES)]
    return await message.reply(InputMessage.html(f"<b>{line}</b>"))


async def knightcmd_ping(message: Message) -> Message:
    """Checks how fast I can respond."""
    start = time.monotonic()
    reply = await message.reply("Pinging........")
    elapsed_ms = int((time.monotonic() - start) * 1000)
    await reply.edit(f"Pong! {elapsed_ms}ms")
    return reply


async def knightcmd_msg(client: Client, message: Message, text: str) -> Message:
    """Sends text."""
    if not text.strip():
        return await message.reply(
            InputMessage.html("Send what? Give me <b>any text</b> to send!")
        )
    body = text.strip().replace("\\n", "  \n")
    return await answer(client, message, InputMessage.markdown(body))