import httpx
import pytest
import respx

from knightbot.chat import Chat, Client, ParseMode, Sender
from knightbot.plugins.urb import (
    DEFINE_URL,
    FAILURE_TEXT,
    NO_DEFINITION_TEXT,
    RANDOM_URL,
    format_definition,
    get_definition,
    knightcmd_urb,
)


def _incoming(text="/urb"):
    client = Client(me=Sender(1, "bot"))
    message = client.receive(Chat(100, "group"), text, Sender(2, "user"))
    return client, message


def _entries(*pairs):
    return {"list": [{"word": word, "definition": definition} for word, definition in pairs]}


def test_format_definition():
    assert format_definition("yeet", "to throw") == "Definition for <b>yeet</b> : <i>to throw</i>"


def test_format_drops_escaped_line_breaks():
    assert format_definition("w", "a\\r\\nb") == format_definition("w", "ab")


def test_format_keeps_word_untouched():
    assert "<b>a\\r\\nb</b>" in format_definition("a\\r\\nb", "d")


@pytest.mark.asyncio
async def test_get_definition_first_entry():
    with respx.mock(assert_all_called=True) as router:
        route = router.get(url__startswith=DEFINE_URL).mock(
            return_value=httpx.Response(200, json=_entries(("yeet", "to throw"), ("yeet", "other")))
        )
        definition = await get_definition("yeet")
    assert definition == "to throw"
    assert route.calls.last.request.url.params["term"] == "yeet"


@pytest.mark.asyncio
async def test_get_definition_keeps_json_escapes():
    with respx.mock(assert_all_called=True) as router:
        router.get(url__startswith=DEFINE_URL).mock(
            return_value=httpx.Response(200, json=_entries(("w", 'say "hi"\r\nnow')))
        )
        definition = await get_definition("w")
    assert definition == 'say \\"hi\\"\\r\\nnow'
    assert "\\r\\n" not in format_definition("w", definition)


@pytest.mark.asyncio
async def test_get_definition_empty_list():
    with respx.mock(assert_all_called=True) as router:
        router.get(url__startswith=DEFINE_URL).mock(
            return_value=httpx.Response(200, json={"list": []})
        )
        assert await get_definition("zzz") == NO_DEFINITION_TEXT


@pytest.mark.asyncio
async def test_get_definition_without_list_raises():
    with respx.mock(assert_all_called=True) as router:
        router.get(url__startswith=DEFINE_URL).mock(
            return_value=httpx.Response(200, json={"error": "oops"})
        )
        with pytest.raises(ValueError):
            await get_definition("zzz")


@pytest.mark.asyncio
async def test_get_definition_request_failure():
    with respx.mock(assert_all_called=True) as router:
        router.get(url__startswith=DEFINE_URL).mock(side_effect=httpx.ConnectError)
        assert await get_definition("zzz") is None


@pytest.mark.asyncio
async def test_command_with_word():
    client, message = _incoming()
    with respx.mock(assert_all_called=True) as router:
        router.get(url__startswith=DEFINE_URL).mock(
            return_value=httpx.Response(200, json=_entries(("yeet", "to throw")))
        )
        reply = await knightcmd_urb(message, "yeet")
    assert reply.text == format_definition("yeet", "to throw")
    assert reply.content.parse_mode is ParseMode.HTML
    assert reply.reply_to_message_id == message.id


@pytest.mark.asyncio
async def test_command_with_word_failure():
    client, message = _incoming()
    with respx.mock(assert_all_called=True) as router:
        router.get(url__startswith=DEFINE_URL).mock(side_effect=httpx.ConnectError)
        reply = await knightcmd_urb(message, "yeet")
    assert reply.text == FAILURE_TEXT


@pytest.mark.asyncio
async def test_command_random_word():
    client, message = _incoming()
    with respx.mock(assert_all_called=True) as router:
        router.get(RANDOM_URL).mock(
            return_value=httpx.Response(200, json=_entries(("snack", "a small meal")))
        )
        reply = await knightcmd_urb(message, "  ")
    assert reply.text == format_definition("snack", "a small meal")


@pytest.mark.asyncio
async def test_command_random_failure_raises():
    client, message = _incoming()
    with respx.mock(assert_all_called=True) as router:
        router.get(RANDOM_URL).mock(side_effect=httpx.ConnectError)
        with pytest.raises(RuntimeError):
            await knightcmd_urb(message, "")