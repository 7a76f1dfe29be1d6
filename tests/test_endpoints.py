"""
接口绑定测试

对描述表中的每个绑定方法验证：派发路径、HTTP 方法、签名通道与参数合并，
以及必需参数缺失 / 为空时在任何网络请求之前抛出 MissingRequiredParameterError。
"""

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

from binance_spot import BinanceSpot, MissingRequiredParameterError
from tests.endpoints import ALL_ENDPOINTS, NO_KWARGS, Endpoint

REQUIRED_CASES = [
    pytest.param(endpoint, name, id=f"{endpoint.method}-{name}")
    for endpoint in ALL_ENDPOINTS
    for name in endpoint.required
]


def _dispatched(client: MagicMock, endpoint: Endpoint) -> Dict[str, Any]:
    """断言只派发了一次请求，并返回实际传入的参数"""
    if endpoint.signed:
        client.sign_request.assert_called_once()
        client.limit_request.assert_not_called()
        args, kwargs = client.sign_request.call_args
        assert args == (endpoint.verb, endpoint.path)
    else:
        client.limit_request.assert_called_once()
        client.sign_request.assert_not_called()
        args, kwargs = client.limit_request.call_args
        assert args == (endpoint.path,)
        assert kwargs.get("method", "GET") == endpoint.verb
    return kwargs.get("params") or {}


class TestDispatch:
    """派发测试"""

    @pytest.mark.parametrize("endpoint", ALL_ENDPOINTS, ids=lambda e: e.method)
    def test_required_params_dispatch(self, spot: BinanceSpot, fake_client: MagicMock, endpoint: Endpoint) -> None:
        """仅提供必需参数"""
        result = getattr(spot, endpoint.method)(**endpoint.required)

        assert _dispatched(fake_client, endpoint) == endpoint.required
        expected = fake_client.sign_request.return_value if endpoint.signed else fake_client.limit_request.return_value
        assert result is expected

    @pytest.mark.parametrize(
        "endpoint",
        [e for e in ALL_ENDPOINTS if e.method not in NO_KWARGS],
        ids=lambda e: e.method,
    )
    def test_optional_params_are_merged(self, spot: BinanceSpot, fake_client: MagicMock, endpoint: Endpoint) -> None:
        """可选参数原样透传并与必需参数合并"""
        optional = {"recvWindow": 5000, "startTime": None, "isIsolated": "TRUE"}
        optional = {k: v for k, v in optional.items() if k not in endpoint.required}

        getattr(spot, endpoint.method)(**endpoint.required, **optional)

        assert _dispatched(fake_client, endpoint) == {**optional, **endpoint.required}


class TestRequiredParams:
    """必需参数校验测试"""

    @pytest.mark.parametrize("endpoint, missing", REQUIRED_CASES)
    def test_missing_param_raises(
        self,
        spot: BinanceSpot,
        fake_client: MagicMock,
        endpoint: Endpoint,
        missing: str,
    ) -> None:
        """缺少任一必需参数"""
        kwargs = {k: v for k, v in endpoint.required.items() if k != missing}

        with pytest.raises(MissingRequiredParameterError) as exc_info:
            getattr(spot, endpoint.method)(**kwargs)

        assert exc_info.value.param_name == missing
        fake_client.sign_request.assert_not_called()
        fake_client.limit_request.assert_not_called()

    @pytest.mark.parametrize("endpoint, missing", REQUIRED_CASES)
    @pytest.mark.parametrize("empty", [None, ""])
    def test_empty_param_raises(
        self,
        spot: BinanceSpot,
        fake_client: MagicMock,
        endpoint: Endpoint,
        missing: str,
        empty: Any,
    ) -> None:
        """必需参数为 None 或空字符串"""
        kwargs = {**endpoint.required, missing: empty}

        with pytest.raises(MissingRequiredParameterError):
            getattr(spot, endpoint.method)(**kwargs)

        fake_client.sign_request.assert_not_called()
        fake_client.limit_request.assert_not_called()

    def test_first_missing_param_is_reported(self, spot: BinanceSpot) -> None:
        """按声明顺序报告第一个缺失的参数"""
        with pytest.raises(MissingRequiredParameterError) as exc_info:
            spot.margin_borrow_repay(asset="BNB", amount="1")

        assert exc_info.value.param_name == "isIsolated"

    def test_zero_is_a_valid_value(self, spot: BinanceSpot, fake_client: MagicMock) -> None:
        """数值 0 不视为空"""
        spot.sub_account_transfer_log_sub_account(startTime=0, endTime=1, page=1, limit=10)

        fake_client.sign_request.assert_called_once()


class TestDocumentedExamples:
    """文档示例"""

    def test_margin_price_index(self, spot: BinanceSpot, fake_client: MagicMock) -> None:
        spot.margin_price_index(symbol="BNBUSDT")

        fake_client.limit_request.assert_called_once_with(
            "/sapi/v1/margin/priceIndex",
            params={"symbol": "BNBUSDT"},
        )
        fake_client.sign_request.assert_not_called()

    def test_margin_new_order_without_type(self, spot: BinanceSpot, fake_client: MagicMock) -> None:
        with pytest.raises(MissingRequiredParameterError, match="type"):
            spot.margin_new_order(symbol="BNBUSDT", side="BUY", quantity=1)

        fake_client.sign_request.assert_not_called()
        fake_client.limit_request.assert_not_called()

    def test_sub_account_transfer_to_master(self, spot: BinanceSpot, fake_client: MagicMock) -> None:
        spot.sub_account_transfer_to_master(asset="USDT", amount=10)

        fake_client.sign_request.assert_called_once_with(
            "POST",
            "/sapi/v1/sub-account/transfer/subToMaster",
            params={"asset": "USDT", "amount": 10},
        )

    def test_margin_new_order_full(self, spot: BinanceSpot, fake_client: MagicMock) -> None:
        spot.margin_new_order(
            symbol="BNBUSDT",
            side="SELL",
            type="LIMIT",
            quantity="0.5",
            price="310.1",
            timeInForce="GTC",
            sideEffectType="AUTO_REPAY",
        )

        fake_client.sign_request.assert_called_once_with(
            "POST",
            "/sapi/v1/margin/order",
            params={
                "symbol": "BNBUSDT",
                "side": "SELL",
                "type": "LIMIT",
                "quantity": "0.5",
                "price": "310.1",
                "timeInForce": "GTC",
                "sideEffectType": "AUTO_REPAY",
            },
        )


class TestSpotFacade:
    """聚合类测试"""

    def test_every_endpoint_is_exposed(self, spot: BinanceSpot) -> None:
        for endpoint in ALL_ENDPOINTS:
            assert callable(getattr(spot, endpoint.method))

    def test_groups_share_client(self, fake_client: MagicMock) -> None:
        from binance_spot import BinanceMargin, BinanceSubAccount

        margin = BinanceMargin(fake_client)
        sub_account = BinanceSubAccount(fake_client)
        margin.margin_account()
        sub_account.sub_account_status()

        assert fake_client.sign_request.call_count == 2
