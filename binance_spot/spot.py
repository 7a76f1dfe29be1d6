from .client import BinanceClient
from .margin import BinanceMargin
from .simple_earn import BinanceSimpleEarn
from .staking import BinanceStaking
from .subaccount import BinanceSubAccount
from .trade import BinanceTrade


class BinanceSpot(BinanceMargin, BinanceSubAccount, BinanceStaking, BinanceSimpleEarn, BinanceTrade):
    """聚合所有接口分组，共用同一个 :class:`BinanceClient` 会话。"""

    def __init__(self, client: BinanceClient) -> None:
        self.client = client
