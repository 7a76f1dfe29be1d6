"""
测试公共 fixture

会话对象与 requests.Session 全部使用 MagicMock，不发起任何网络请求。
"""

from unittest.mock import MagicMock

import pytest

from binance_spot import BinanceClient, BinanceSpot
from tests.helpers import make_response


@pytest.fixture
def fake_client() -> MagicMock:
    """只暴露 BinanceClient 真实属性的会话替身"""
    client = MagicMock(spec=BinanceClient)
    client.sign_request.return_value = {"signed": True}
    client.limit_request.return_value = {"signed": False}
    return client


@pytest.fixture
def spot(fake_client: MagicMock) -> BinanceSpot:
    return BinanceSpot(fake_client)


@pytest.fixture
def http_session() -> MagicMock:
    session = MagicMock()
    session.headers = {}
    session.request.return_value = make_response({})
    return session


@pytest.fixture
def hmac_client(http_session: MagicMock) -> BinanceClient:
    return BinanceClient(
        "test_api_key",
        "test_secret_key",
        "https://api.binance.com",
        session=http_session,
    )
