# knightbot

Asynchronous command handlers for a chat bot. Each command lives in a small
plugin under `knightbot.plugins`, and `knightbot.dispatch` recognises
commands in incoming messages and routes them to the right plugin.

## Commands

| Command         | What it does                                                     |
|-----------------|------------------------------------------------------------------|
| `/anyone`       | Replies "Hmm." with a "Why do you ask?" link button              |
| `/aur <pkg>`    | Shows package information from the Arch User Repository          |
| `/cat <code>`   | Sends a cat picture for an HTTP status code (404 by default)     |
| `/dog <code>`   | Sends a dog picture for an HTTP status code (404 by default)     |
| `/eightball`    | Answers yes or no                                                |
| `/flipcoin`     | Heads or tails                                                   |
| `/help`         | Lists the commands with their descriptions                       |
| `/ipa <ip>`     | Shows information about an IP address from ipinfo                |
| `/link <url>`   | Follows redirects with HEAD requests and reports the final URL   |
| `/luck`         | Gives a lucky number between 0 and 100                           |
| `/magisk`       | Lists the latest Magisk stable, beta and canary releases         |
| `/man <cmd>`    | Shows the short manual-page description (`man -f`) of a command  |
| `/msg <text>`   | Repeats the given text as Markdown (`\n` becomes a line break)   |
| `/neo`          | Sends `neofetch --stdout` output                                 |
| `/paste [text]` | Pastes the replied-to message, or the given text, to a pastebin  |
| `/ping`         | Measures how fast the bot answers                                |
| `/plant <code>` | Sends a plant picture for an HTTP status code (404 by default)   |
| `/rtfm`         | Points at the manual                                             |
| `/run`          | Runs                                                             |
| `/sauce`        | Links to the bot's source code                                   |
| `/start`        | Checks that the bot is alive                                     |
| `/uid`          | Shows your user ID, the chat ID and the replied-to user's ID     |
| `/urb [word]`   | Looks a word up in Urban Dictionary, or a random one             |
| `/whois <site>` | Shows the lines of a WHOIS lookup that mention "Registrar"       |

Every command also answers when addressed as `/command@ThekNIGHT_bot`.
A number argument that is missing or not a 64-bit integer counts as 0.
The trigger `k.sh <command>` runs the command with `bash -c` and reports its
output, exit status and error output.

Some commands start other programs and need them on the `PATH`:
`man`, `neofetch`, `bash` and `whois`.

## Configuration

`knightbot.config.Config` reads credentials from a TOML file
(`./config.toml` by default):

```toml
api_id = 12345
api_hash = "placeholder"
bot_token = "token"
```

```python
from knightbot.config import Config

config = Config.read("config.toml")
print(config.api_id)
```

`Config.read` raises `OSError` if the file cannot be opened,
`tomllib.TOMLDecodeError` for invalid TOML and `ValueError` if a field is
missing, has the wrong type, or `api_id` does not fit in 32 bits.

## Handling messages

`knightbot.chat` holds the chat model the plugins work with:

- `InputMessage` – an outgoing message draft. Build it with
  `InputMessage.text`, `InputMessage.html` or `InputMessage.markdown`, then
  `with_reply_to`, `with_buttons` (rows of `UrlButton`) and `with_photo_url`.
- `Chat`, `Sender` and `Message` – a message in a chat; `Message.reply` and
  `Message.edit` act through the client the message belongs to.
- `Client` – keeps every message it has received or sent in `messages`.
  `receive` records an incoming message, `send_message` sends one and
  `get_reply_to_message` looks up the message another one replies to.
- `answer` – responds to a command, replying to the message the command
  itself replied to, if any.

`knightbot.dispatch.handle_update` checks whether a message is meant for the
bot (`check_msg`, or `check_cmd` for messages from the owner, `OWNER_ID`)
and, if so, calls `handle_msg`, which parses the text with `parse_command`
and runs the matching plugin. Both return what the plugin returned, usually
the reply message, or `None`.

```python
import asyncio

from knightbot.chat import Chat, Client, Sender
from knightbot.dispatch import handle_update


async def demo():
    client = Client(me=Sender(1, "bot"))
    chat = Chat(42, "test chat")
    incoming = client.receive(chat, "/flipcoin", sender=Sender(7, "alice"))
    reply = await handle_update(client, incoming)
    print(reply.text)  # "Heads!" or "Tails!"


asyncio.run(demo())
```

`/paste` needs a `paster`: an async callable that uploads a text and returns
the link the pastebin gave. Pass it to `handle_update` or `handle_msg`;
without one, `/paste` raises `ValueError`.

```python
async def paster(text: str) -> str:
    ...  # upload text, return the link

await handle_update(client, message, paster)
```

`command_descriptions()` returns each command's one-line description, and
`knightbot.plugins.help.build_help` turns them into the `/help` text.
JSON lookups go through `knightbot.req.make_request`, which returns the
decoded body or `None` when the request or decoding fails.

## What this package does not do

- It does not connect to Telegram. There is no login, no network client for
  the chat service and no update loop; `Client` keeps messages in memory, and
  the credentials in `Config` are only loaded, not used.
- It has no command that starts a bot; embed `handle_update` in your own
  program.
- It ships no pastebin client; `/paste` works only with a `paster` you supply.