from .client import BinanceClient, build_client_from_env
from .exceptions import BinanceAPIError, MissingRequiredParameterError
from .margin import BinanceMargin
from .simple_earn import BinanceSimpleEarn
from .spot import BinanceSpot
from .staking import BinanceStaking
from .subaccount import BinanceSubAccount
from .trade import BinanceTrade

__all__ = [
    "BinanceAPIError",
    "BinanceClient",
    "BinanceMargin",
    "BinanceSimpleEarn",
    "BinanceSpot",
    "BinanceStaking",
    "BinanceSubAccount",
    "BinanceTrade",
    "MissingRequiredParameterError",
    "build_client_from_env",
]
