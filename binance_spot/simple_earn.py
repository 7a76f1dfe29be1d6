from typing import Any, Optional

from .client import BinanceClient
from .utils import require_params


class BinanceSimpleEarn:
    """简单赚币 (Simple Earn) 接口封装。"""

    def __init__(self, client: BinanceClient) -> None:
        self.client = client

    def locked_redeem_option(
        self,
        *,
        positionId: Optional[str] = None,
        redeemTo: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """
        设置定期产品到期赎回方式 (USER_DATA)，对应 POST /sapi/v1/simple-earn/locked/setRedeemOption。
        https://developers.binance.com/docs/simple_earn/earn/Set-Locked-Redeem-Option

        Args:
            positionId: 持仓 ID。
            redeemTo: SPOT 或 FLEXIBLE。
        """

        params = require_params(positionId=positionId, redeemTo=redeemTo)
        return self.client.sign_request(
            "POST",
            "/sapi/v1/simple-earn/locked/setRedeemOption",
            params={**kwargs, **params},
        )
