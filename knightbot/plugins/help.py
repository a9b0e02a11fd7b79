"""The /help command: list the commands the bot understands."""

from __future__ import annotations

from typing import Iterable, Mapping

from knightbot.chat import Message

HEADER = (
    "Hello There!, I am a bot.\n"
    "Here's a list of my commands (sorted alphabetically):\n"
)


def build_help(descriptions: Mapping[str, str] | Iterable[tuple[str, str]]) -> str:
    """Render the help text from command names and their descriptions."""
    entries = dict(descriptions)
    lines = "".join(f"/{name} - {entries[name]}\n" for name in sorted(entries))
    return HEADER + lines


async def knightcmd_help(
    message: Message, descriptions: Mapping[str, str] | Iterable[tuple[str, str]]
) -> Message:
    """Displays this text."""
    return await message.reply(build_help(descriptions))