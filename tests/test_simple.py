import re
from unittest.mock import patch

import pytest

from knightbot.chat import Chat, Client, ParseMode, Sender, UrlButton
from knightbot.plugins.simple import (
    RUN_LINES,
    SOURCE_URL,
    START_TEXT,
    knightcmd_anyone,
    knightcmd_eightball,
    knightcmd_flipcoin,
    knightcmd_luck,
    knightcmd_msg,
    knightcmd_ping,
    knightcmd_rtfm,
    knightcmd_run,
    knightcmd_sauce,
    knightcmd_start,
)

CHAT = Chat(-100, "group")
USER = Sender(42, "alice")


@pytest.fixture
def client():
    return Client(me=Sender(1, "bot"))


@pytest.mark.asyncio
async def test_anyone_replies_with_button(client):
    command = client.receive(CHAT, "/anyone", sender=USER)
    sent = await knightcmd_anyone(client, command)
    assert sent.text == "Hmm."
    assert sent.content.parse_mode is ParseMode.HTML
    assert sent.content.buttons == (
        (UrlButton("Why do you ask?", "https://dontasktoask.com"),),
    )
    assert sent.reply_to_message_id == command.id


@pytest.mark.asyncio
async def test_anyone_follows_reply_target(client):
    original = client.receive(CHAT, "can anyone help?")
    command = client.receive(CHAT, "/anyone", reply_to=original.id)
    sent = await knightcmd_anyone(client, command)
    assert sent.reply_to_message_id == original.id


@pytest.mark.asyncio
async def test_rtfm_button(client):
    command = client.receive(CHAT, "/rtfm")
    sent = await knightcmd_rtfm(client, command)
    assert sent.text == "How bout you..."
    assert sent.content.buttons[0][0].url == "https://readthefuckingmanual.com"


@pytest.mark.asyncio
async def test_sauce_button(client):
    original = client.receive(CHAT, "where is the code?")
    command = client.receive(CHAT, "/sauce", reply_to=original.id)
    sent = await knightcmd_sauce(client, command)
    assert sent.content.buttons == ((UrlButton("sauce", SOURCE_URL),),)
    assert sent.reply_to_message_id == original.id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("byte", "expected"),
    [(b"\x00", "Yes, it is the truth!"), (b"\x01", "No, this is a prepostrous lie!")],
)
async def test_eightball(client, byte, expected):
    command = client.receive(CHAT, "/eightball")
    with patch("secrets.token_bytes", return_value=byte):
        sent = await knightcmd_eightball(client, command)
    assert sent.text == expected


@pytest.mark.asyncio
@pytest.mark.parametrize(("byte", "expected"), [(b"\x00", "Heads!"), (b"\x01", "Tails!")])
async def test_flipcoin(client, byte, expected):
    command = client.receive(CHAT, "/flipcoin")
    with patch("secrets.token_bytes", return_value=byte):
        sent = await knightcmd_flipcoin(client, command)
    assert sent.text == expected


@pytest.mark.asyncio
async def test_luck_fixed_number(client):
    command = client.receive(CHAT, "/luck")
    with patch("secrets.token_bytes", return_value=b"\x07"):
        sent = await knightcmd_luck(client, command)
    assert sent.text == "Your lucky number is: <code>7</code>"
    assert sent.content.parse_mode is ParseMode.HTML


@pytest.mark.asyncio
async def test_luck_range(client):
    command = client.receive(CHAT, "/luck")
    for _ in range(50):
        sent = await knightcmd_luck(client, command)
        number = int(re.search(r"<code>(\d+)</code>", sent.text).group(1))
        assert 0 <= number <= 100


@pytest.mark.asyncio
async def test_start(client):
    command = client.receive(CHAT, "/start")
    sent = await knightcmd_start(command)
    assert sent.text == START_TEXT
    assert sent.reply_to_message_id == command.id


@pytest.mark.asyncio
async def test_run_picks_a_known_line(client):
    command = client.receive(CHAT, "/run")
    sent = await knightcmd_run(command)
    assert sent.text in {f"<b>{line}</b>" for line in RUN_LINES}


@pytest.mark.asyncio
async def test_ping_edits_reply(client):
    command = client.receive(CHAT, "/ping")
    sent = await knightcmd_ping(command)
    assert re.fullmatch(r"Pong! \d+ms", sent.text)
    assert sent.reply_to_message_id == command.id
    assert client.messages[-1] is sent


@pytest.mark.asyncio
async def test_msg_empty_prompts(client):
    command = client.receive(CHAT, "/msg")
    sent = await knightcmd_msg(client, command, "   ")
    assert sent.text == "Send what? Give me <b>any text</b> to send!"


@pytest.mark.asyncio
async def test_msg_converts_escaped_newlines(client):
    command = client.receive(CHAT, "/msg")
    sent = await knightcmd_msg(client, command, "  first\\nsecond  ")
    assert sent.text == "first  \nsecond"
    assert sent.content.parse_mode is ParseMode.MARKDOWN


@pytest.mark.asyncio
async def test_msg_follows_reply_target(client):
    original = client.receive(CHAT, "hi")
    command = client.receive(CHAT, "/msg hello", reply_to=original.id)
    sent = await knightcmd_msg(client, command, "hello")
    assert sent.reply_to_message_id == original.id
    assert sent.text == "hello"