import json
from typing import Any, Optional
from unittest.mock import MagicMock

from requests.structures import CaseInsensitiveDict


def make_response(
    payload: Any = None,
    status_code: int = 200,
    headers: Optional[dict] = None,
    text: Optional[str] = None,
) -> MagicMock:
    """构造一个模拟的 requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers or {})
    if text is not None:
        response.text = text
        response.content = text.encode()
        response.json.side_effect = ValueError("not json")
    else:
        response.text = json.dumps(payload) if payload is not None else ""
        response.content = response.text.encode()
        response.json.return_value = payload
    return response
