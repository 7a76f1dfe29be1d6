from typing import Any, Optional

from .client import BinanceClient
from .utils import require_params


class BinanceStaking:
    """质押 (Staking) 接口封装。"""

    def __init__(self, client: BinanceClient) -> None:
        self.client = client

    def staking_personal_quota_remain(
        self,
        *,
        product: Optional[str] = None,
        productId: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """
        查询个人剩余申购额度 (USER_DATA)，对应 GET /sapi/v1/staking/personalLeftQuota。

        Args:
            product: STAKING、F_DEFI 或 L_DEFI。
            productId: 产品 ID，例如 `Matic*90`。
        """

        params = require_params(product=product, productId=productId)
        return self.client.sign_request("GET", "/sapi/v1/staking/personalLeftQuota", params={**kwargs, **params})
