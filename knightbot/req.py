"""Fetching JSON documents over HTTP."""

from __future__ import annotations

import json
from typing import Any

import httpx


async def make_request(url: str) -> Any | None:
    """GET ``url`` and decode the body as JSON.

    Returns None if the request fails or the body is not JSON. The status
    code is not checked: an error page with a JSON body is still returned.
    """
    try:
        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL):
        return None
    try:
        return json.loads(response.text.strip())
    except ValueError:
        return None