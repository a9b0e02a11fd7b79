"""Recognising bot commands in incoming messages and running their handlers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from knightbot.chat import Client, Message
from knightbot.plugins import aur, help, ipa, link, magisk, paste, pictures, simple
from knightbot.plugins import system, uid, urb

log = logging.getLogger(__name__)

BOT_USERNAME = "ThekNIGHT_bot"
OWNER_ID = 607425846
SHELL_TRIGGER = "k.sh"

Paster = Callable[[str], Awaitable[str]]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class CommandKind(Enum):
    """Every command the bot understands, by name."""

    ANYONE = "anyone"
    AUR = "aur"
    CAT = "cat"
    DOG = "dog"
    EIGHTBALL = "eightball"
    FLIPCOIN = "flipcoin"
    HELP = "help"
    IPA = "ipa"
    LINK = "link"
    LUCK = "luck"
    MAGISK = "magisk"
    MAN = "man"
    MSG = "msg"
    NEO = "neo"
    PASTE = "paste"
    PING = "ping"
    PLANT = "plant"
    RTFM = "rtfm"
    RUN = "run"
    SAUCE = "sauce"
    SH = "sh"
    START = "start"
    UID = "uid"
    URB = "urb"
    WHOIS = "whois"


_TEXT_ARGUMENT = frozenset(
    {
        CommandKind.AUR,
        CommandKind.IPA,
        CommandKind.LINK,
        CommandKind.MAN,
        CommandKind.MSG,
        CommandKind.PASTE,
        CommandKind.URB,
        CommandKind.WHOIS,
        CommandKind.SH,
    }
)
_NUMBER_ARGUMENT = frozenset({CommandKind.CAT, CommandKind.DOG, CommandKind.PLANT})
_SLASH_COMMANDS = {kind.value: kind for kind in CommandKind if kind is not CommandKind.SH}

_DESCRIPTIONS = {
    CommandKind.ANYONE: "Sends a why do you ask text.",
    CommandKind.AUR: "Gets package information from AUR.",
    CommandKind.CAT: "Sends cat pic according to the HTTP status code.",
    CommandKind.DOG: "Sends dog pic according to the HTTP status code.",
    CommandKind.EIGHTBALL: "Rolls an eightball to say yes or no.",
    CommandKind.FLIPCOIN: "Flips a coin to say heads or tails.",
    CommandKind.HELP: "Displays this text.",
    CommandKind.IPA: "Sends info about an IP Address.",
    CommandKind.LINK: "Extracts redirected URL from given link.",
    CommandKind.LUCK: "Says your lucky number.",
    CommandKind.MAGISK: "Gets the latest Magisk release according to the variant.",
    CommandKind.MAN: "Gets information about a command from manpages.",
    CommandKind.MSG: "Sends text.",
    CommandKind.NEO: "Sends neofetch output.",
    CommandKind.PASTE: "Sends a pastebin link of the replied message or the text given.",
    CommandKind.PING: "Checks how fast I can respond.",
    CommandKind.PLANT: "Sends plant pic according to http code.",
    CommandKind.RTFM: "Sends a RTFM text.",
    CommandKind.RUN: "Runnns :)",
    CommandKind.SAUCE: "Provides the link to the source code of this bot.",
    CommandKind.START: "Checks if I'm alive.",
    CommandKind.UID: "Gets UserID and ChatID.",
    CommandKind.URB: "Gets the definition of word from urban dictionary.",
    CommandKind.WHOIS: "Checks WHOIS information of a given URL.",
}


@dataclass(frozen=True)
class Command:
    """A recognised command with its argument, if it takes one."""

    kind: CommandKind
    argument: str | int | None = None


def _parse_number(text: str) -> int:
    """Parse a 64-bit integer strictly; anything else counts as 0."""
    if not _INTEGER.fullmatch(text):
        return 0
    value = int(text)
    return value if _I64_MIN <= value <= _I64_MAX else 0


def _lookup_kind(word: str) -> CommandKind | None:
    if word == SHELL_TRIGGER:
        return CommandKind.SH
    if not word.startswith("/"):
        return None
    name, sep, target = word[1:].partition("@")
    if sep and target != BOT_USERNAME:
        return None
    return _SLASH_COMMANDS.get(name)


def parse_command(text: str) -> Command | None:
    """Recognise the command at the start of ``text``.

    Returns None if the first word is not a command. Raises ValueError if
    the text holds no word at all.
    """
    words = text.split()
    if not words:
        raise ValueError("message holds no command word")
    kind = _lookup_kind(words[0])
    if kind is None:
        return None
    argument = " ".join(words[1:])
    if kind in _TEXT_ARGUMENT:
        return Command(kind, argument)
    if kind in _NUMBER_ARGUMENT:
        return Command(kind, _parse_number(argument))
    return Command(kind)


def check_msg(message: Message) -> bool:
    """Tell whether a message looks like a command meant for the bot."""
    text = message.text
    return (
        not message.outgoing and text.startswith("/") and not text.startswith("/ ")
    ) or text.endswith(f"@{BOT_USERNAME}")


def check_cmd(message: Message) -> bool:
    """Tell whether an incoming message comes from the bot's owner.

    Raises ValueError if an incoming message has no sender.
    """
    if message.outgoing:
        return False
    if message.sender is None:
        raise ValueError("message has no sender")
    return message.sender.id == OWNER_ID


def command_descriptions() -> dict[str, str]:
    """Return the public commands and what they do, as listed by /help."""
    return {kind.value: text for kind, text in _DESCRIPTIONS.items()}


async def handle_msg(
    client: Client, message: Message, paster: Paster | None = None
) -> Message | None:
    """Run the command in ``message`` and return what the handler returned.

    Returns None if the message is not a command. ``paster`` uploads text
    for /paste; ValueError is raised if /paste arrives without one.
    """
    command = parse_command(message.text)
    if command is None:
        return None
    arg = command.argument
    match command.kind:
        case CommandKind.ANYONE:
            return await simple.knightcmd_anyone(client, message)
        case CommandKind.AUR:
            return await aur.knightcmd_aur(message, arg)
        case CommandKind.CAT:
            return await pictures.knightcmd_cat(client, message, arg)
        case CommandKind.DOG:
            return await pictures.knightcmd_dog(client, message, arg)
        case CommandKind.EIGHTBALL:
            return await simple.knightcmd_eightball(client, message)
        case CommandKind.FLIPCOIN:
            return await simple.knightcmd_flipcoin(client, message)
        case CommandKind.HELP:
            return await help.knightcmd_help(message, command_descriptions())
        case CommandKind.IPA:
            return await ipa.knightcmd_ipa(message, arg)
        case CommandKind.LINK:
            return await link.knightcmd_link(message, arg)
        case CommandKind.LUCK:
            return await simple.knightcmd_luck(client, message)
        case CommandKind.MAGISK:
            return await magisk.knightcmd_magisk(client, message)
        case CommandKind.MAN:
            return await system.knightcmd_man(client, message, arg)
        case CommandKind.MSG:
            return await simple.knightcmd_msg(client, message, arg)
        case CommandKind.NEO:
            return await system.knightcmd_neo(message)
        case CommandKind.PASTE:
            if paster is None:
                raise ValueError("no pastebin configured")
            return await paste.knightcmd_paste(client, message, arg, paster)
        case CommandKind.PING:
            return await simple.knightcmd_ping(message)
        case CommandKind.PLANT:
            return await pictures.knightcmd_plant(client, message, arg)
        case CommandKind.RTFM:
            return await simple.knightcmd_rtfm(client, message)
        case CommandKind.RUN:
            return await simple.knightcmd_run(message)
        case CommandKind.SAUCE:
            return await simple.knightcmd_sauce(client, message)
        case CommandKind.SH:
            return await system.knightcmd_sh(message, arg)
        case CommandKind.START:
            return await simple.knightcmd_start(message)
        case CommandKind.UID:
            return await uid.knightcmd_uid(client, message)
        case CommandKind.URB:
            return await urb.knightcmd_urb(message, arg)
        case CommandKind.WHOIS:
            return await system.knightcmd_whois(message, arg)
    return None


async def handle_update(
    client: Client, message: Message, paster: Paster | None = None
) -> Message | None:
    """Handle a new message if it is a command or comes from the owner."""
    if check_msg(message) or check_cmd(message):
        log.info("Responding to %s", message.chat.name)
        return await handle_msg(client, message, paster)
    return None