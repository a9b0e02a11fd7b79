"""Commands that run programs on the host: man, neofetch, bash and whois."""

from __future__ import annotations

import asyncio
import signal
from dataclasses import dataclass

from knightbot.chat import Client, InputMessage, Message, answer

MAN_MISSING_TEXT = "<code>Provide a command to check its manual entry!</code>"
MAN_NOT_FOUND_TEXT = "No manual entry found for this command."
SH_MISSING_TEXT = (
    "Dude! With all due respect that you're my maker and all, "
    "give me a <b>proper command</b> to run!"
)
WHOIS_MISSING_TEXT = "Send a <b>proper URL</b> to get WHOIS information!"
WHOIS_WORKING_TEXT = "<b>Extracting WHOIS information from given link...</b>"
WHOIS_NOT_FOUND_TEXT = "No WHOIS information found!"

REGISTRAR_PATTERN = "Registrar"


@dataclass(frozen=True)
class _Output:
    stdout: str
    stderr: str
    returncode: int


async def _run(*argv: str) -> _Output:
    """Run a program to completion and collect what it wrote.

    Raises OSError (such as FileNotFoundError) if it cannot be started.
    """
    process = await asyncio.create_subprocess_exec(
        *argv,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    return _Output(
        stdout.decode("utf-8", errors="replace"),
        stderr.decode("utf-8", errors="replace"),
        process.returncode if process.returncode is not None else 0,
    )


def _describe_status(returncode: int) -> str:
    if returncode >= 0:
        return f"exit status: {returncode}"
    number = -returncode
    try:
        name = signal.Signals(number).name
    except ValueError:
        return f"signal: {number}"
    return f"signal: {number} ({name})"


async def knightcmd_man(client: Client, message: Message, cmd: str) -> Message:
    """Gets information about a command from manpages."""
    if not cmd.strip():
        return await message.reply(InputMessage.html(MAN_MISSING_TEXT))
    result = await _run("man", "-f", cmd)
    summary = result.stdout.strip()
    if not summary:
        return await message.reply(MAN_NOT_FOUND_TEXT)
    return await answer(client, message, InputMessage.html(f"<code>{summary}</code>"))


async def knightcmd_neo(message: Message) -> Message:
    """Sends neofetch output."""
    result = await _run("neofetch", "--stdout")
    return await message.reply(InputMessage.html(f"<code>{result.stdout.strip()}</code>"))


async def knightcmd_sh(message: Message, kcmd: str) -> Message:
    """Runs a shell command and reports its output and exit status."""
    if not kcmd.strip():
        return await message.reply(InputMessage.html(SH_MISSING_TEXT))
    result = await _run("bash", "-c", kcmd)
    text = (
        f"<code>{result.stdout.strip()}</code>\n\n"
        f"<b>{_describe_status(result.returncode)}</b>\n\n"
        f"<code>{result.stderr.strip()}</code>"
    )
    return await message.reply(InputMessage.html(text))


def filter_registrar(text: str) -> str:
    """Keep only the lines that mention the registrar, each ending in a newline."""
    lines = [line for line in text.splitlines() if REGISTRAR_PATTERN in line]
    return "".join(f"{line}\n" for line in lines)


async def knightcmd_whois(message: Message, site: str) -> Message:
    """Checks WHOIS information of a given URL."""
    if not site.strip():
        return await message.reply(InputMessage.html(WHOIS_MISSING_TEXT))
    reply = await message.reply(InputMessage.html(WHOIS_WORKING_TEXT))
    result = await _run("whois", site)
    found = filter_registrar(result.stdout)
    await reply.edit(found if found else WHOIS_NOT_FOUND_TEXT)
    return reply