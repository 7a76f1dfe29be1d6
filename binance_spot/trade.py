from typing import Any, Optional

from .client import BinanceClient
from .utils import require_params


class BinanceTrade:
    """现货交易相关接口封装。"""

    def __init__(self, client: BinanceClient) -> None:
        self.client = client

    def commission_rate(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询交易对的佣金费率 (USER_DATA)，对应 GET /api/v3/account/commission，权重 20。

        Args:
            symbol: 交易对，例如 `BNBUSDT`。
        """

        params = require_params(symbol=symbol)
        return self.client.sign_request("GET", "/api/v3/account/commission", params={**kwargs, **params})
