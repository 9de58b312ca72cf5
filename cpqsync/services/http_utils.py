"""Helpers shared by the platform HTTP clients."""

from typing import Any

import httpx


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def response_detail(response: httpx.Response) -> Any:
    """Response body, parsed as JSON when possible"""
    try:
        return response.json()
    except ValueError:
        return response.text
