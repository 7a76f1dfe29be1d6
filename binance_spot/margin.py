from typing import Any, Optional

from .client import BinanceClient
from .utils import require_params


class BinanceMargin:
    """杠杆账户 (全仓 / 逐仓) 接口封装。

    https://developers.binance.com/docs/margin_trading/Introduction

    所有可选参数通过 ``**kwargs`` 原样透传，参数名与官方字段保持一致 (如 ``isIsolated``、``recvWindow``)。
    """

    def __init__(self, client: BinanceClient) -> None:
        self.client = client

    # --- Market Data ---

    def margin_all_assets(self) -> Any:
        """获取所有杠杆资产 (MARKET_DATA)，对应 GET /sapi/v1/margin/allAssets。"""

        return self.client.limit_request("/sapi/v1/margin/allAssets")

    def margin_all_pairs(self) -> Any:
        """获取所有全仓杠杆交易对 (MARKET_DATA)，对应 GET /sapi/v1/margin/allPairs。"""

        return self.client.limit_request("/sapi/v1/margin/allPairs")

    def margin_price_index(self, *, symbol: Optional[str] = None) -> Any:
        """
        查询杠杆价格指数 (MARKET_DATA)，对应 GET /sapi/v1/margin/priceIndex。
        https://developers.binance.com/docs/margin_trading/market-data/Query-Margin-PriceIndex

        Args:
            symbol: 交易对，必需，例如 `BNBUSDT`。
        """

        params = require_params(symbol=symbol)
        return self.client.limit_request("/sapi/v1/margin/priceIndex", params=params)

    def margin_available_inventory(self, *, type: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询杠杆可借库存 (USER_DATA)，对应 GET /sapi/v1/margin/available-inventory。

        Args:
            type: MARGIN 或 ISOLATED。
        """

        params = require_params(type=type)
        return self.client.sign_request("GET", "/sapi/v1/margin/available-inventory", params={**kwargs, **params})

    def margin_leverage_bracket(self) -> Any:
        """查询全仓 Pro 模式下负债币种的杠杆档位 (MARKET_DATA)，对应 GET /sapi/v1/margin/leverageBracket。"""

        return self.client.limit_request("/sapi/v1/margin/leverageBracket")

    # --- Trade ---

    def margin_new_order(
        self,
        *,
        symbol: Optional[str] = None,
        side: Optional[str] = None,
        type: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """
        杠杆账户下单 (TRADE)，对应 POST /sapi/v1/margin/order。
        https://developers.binance.com/docs/margin_trading/trade/Margin-Account-New-Order

        Args:
            symbol: 交易对。
            side: BUY / SELL。
            type: 订单类型，LIMIT、MARKET、STOP_LOSS、STOP_LOSS_LIMIT、TAKE_PROFIT、TAKE_PROFIT_LIMIT、LIMIT_MAKER。

        可选参数:
            isIsolated: 是否逐仓，"TRUE" / "FALSE"，默认 "FALSE"。
            quantity: 下单数量。
            quoteOrderQty: 按报价资产计的下单金额 (MARKET)。
            price: 委托价格。
            stopPrice: STOP_LOSS、STOP_LOSS_LIMIT、TAKE_PROFIT、TAKE_PROFIT_LIMIT 使用。
            newClientOrderId: 用户自定义订单号。
            icebergQty: 冰山单数量，仅 LIMIT、STOP_LOSS_LIMIT、TAKE_PROFIT_LIMIT 可用。
            newOrderRespType: ACK、RESULT、FULL。
            sideEffectType: NO_SIDE_EFFECT、MARGIN_BUY、AUTO_REPAY，默认 NO_SIDE_EFFECT。
            timeInForce: GTC、IOC、FOK。
            recvWindow: 不能大于 60000。
        """

        params = require_params(symbol=symbol, side=side, type=type)
        return self.client.sign_request("POST", "/sapi/v1/margin/order", params={**kwargs, **params})

    def margin_cancel_order(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """
        杠杆账户撤销订单 (TRADE)，对应 DELETE /sapi/v1/margin/order。

        Args:
            symbol: 交易对。

        可选参数:
            isIsolated: 是否逐仓。
            orderId / origClientOrderId: 二者至少提供其一。
            newClientOrderId: 撤单后使用的新订单号。
            recvWindow: 不能大于 60000。
        """

        params = require_params(symbol=symbol)
        return self.client.sign_request("DELETE", "/sapi/v1/margin/order", params={**kwargs, **params})

    def margin_cancel_all_order(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """撤销交易对的全部杠杆挂单 (TRADE)，对应 DELETE /sapi/v1/margin/openOrders。"""

        params = require_params(symbol=symbol)
        return self.client.sign_request("DELETE", "/sapi/v1/margin/openOrders", params={**kwargs, **params})

    # --- Transfer / Borrow & Repay ---

    def margin_transfer_history(self, **kwargs: Any) -> Any:
        """
        查询全仓杠杆划转历史 (USER_DATA)，对应 GET /sapi/v1/margin/transfer。

        可选参数:
            asset, type, startTime, endTime。
            current: 当前页，从 1 开始，默认 1。
            size: 默认 10，最大 100。
            archived: 默认 false，为 true 时查询 6 个月前的归档数据。
            recvWindow: 不能大于 60000。
        """

        return self.client.sign_request("GET", "/sapi/v1/margin/transfer", params=kwargs)

    def margin_interest_history(self, **kwargs: Any) -> Any:
        """
        查询利息历史 (USER_DATA)，对应 GET /sapi/v1/margin/interestHistory。

        可选参数: asset, isolatedSymbol, startTime, endTime, current, size, archived, recvWindow。
        """

        return self.client.sign_request("GET", "/sapi/v1/margin/interestHistory", params=kwargs)

    def margin_borrow_repay(
        self,
        *,
        asset: Optional[str] = None,
        isIsolated: Optional[str] = None,
        symbol: Optional[str] = None,
        amount: Optional[Any] = None,
        type: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """
        杠杆账户借贷 / 归还 (MARGIN)，对应 POST /sapi/v1/margin/borrow-repay。
        https://developers.binance.com/docs/margin_trading/borrow-and-repay/Margin-Account-Borrow-Repay

        Args:
            asset: 资产。
            isIsolated: "TRUE" 为逐仓，"FALSE" 为全仓。
            symbol: 交易对。
            amount: 数量。
            type: BORROW 或 REPAY。
        """

        params = require_params(asset=asset, isIsolated=isIsolated, symbol=symbol, amount=amount, type=type)
        return self.client.sign_request("POST", "/sapi/v1/margin/borrow-repay", params={**kwargs, **params})

    def margin_borrow_repay_record(self, *, type: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询借贷 / 归还记录 (USER_DATA)，对应 GET /sapi/v1/margin/borrow-repay。

        Args:
            type: BORROW 或 REPAY。

        可选参数: asset, isIsolated, txId, startTime, endTime, current, size, recvWindow。
        """

        params = require_params(type=type)
        return self.client.sign_request("GET", "/sapi/v1/margin/borrow-repay", params={**kwargs, **params})

    def margin_force_liquidation_record(self, **kwargs: Any) -> Any:
        """获取强制平仓记录 (USER_DATA)，对应 GET /sapi/v1/margin/forceLiquidationRec。"""

        return self.client.sign_request("GET", "/sapi/v1/margin/forceLiquidationRec", params=kwargs)

    # --- Account / Orders ---

    def margin_account(self, **kwargs: Any) -> Any:
        """查询全仓杠杆账户详情 (USER_DATA)，对应 GET /sapi/v1/margin/account。"""

        return self.client.sign_request("GET", "/sapi/v1/margin/account", params=kwargs)

    def margin_order(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询杠杆账户订单 (USER_DATA)，对应 GET /sapi/v1/margin/order。

        Args:
            symbol: 交易对。

        可选参数: isIsolated, orderId, origClientOrderId, recvWindow。
        """

        params = require_params(symbol=symbol)
        return self.client.sign_request("GET", "/sapi/v1/margin/order", params={**kwargs, **params})

    def margin_open_orders(self, **kwargs: Any) -> Any:
        """查询杠杆账户挂单 (USER_DATA)，对应 GET /sapi/v1/margin/openOrders。"""

        return self.client.sign_request("GET", "/sapi/v1/margin/openOrders", params=kwargs)

    def margin_all_orders(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询杠杆账户所有订单 (USER_DATA)，对应 GET /sapi/v1/margin/allOrders。

        Args:
            symbol: 交易对。

        可选参数:
            isIsolated, orderId, startTime, endTime。
            limit: 默认 500，最大 1000。
            recvWindow: 不能大于 60000。
        """

        params = require_params(symbol=symbol)
        return self.client.sign_request("GET", "/sapi/v1/margin/allOrders", params={**kwargs, **params})

    # --- OCO ---

    def margin_oco_order(
        self,
        *,
        symbol: Optional[str] = None,
        side: Optional[str] = None,
        quantity: Optional[Any] = None,
        price: Optional[Any] = None,
        stopPrice: Optional[Any] = None,
        **kwargs: Any,
    ) -> Any:
        """
        杠杆账户 OCO 下单 (TRADE)，对应 POST /sapi/v1/margin/order/oco。
        https://developers.binance.com/docs/margin_trading/trade/Margin-Account-New-OCO

        Args:
            symbol: 交易对。
            side: BUY / SELL。
            quantity: 数量。
            price: 限价单价格。
            stopPrice: 止损触发价。

        可选参数:
            isIsolated, listClientOrderId, limitClientOrderId, limitIcebergQty, stopClientOrderId。
            stopLimitPrice: 若提供则必须同时提供 stopLimitTimeInForce。
            stopIcebergQty。
            stopLimitTimeInForce: GTC / FOK / IOC。
            newOrderRespType。
            sideEffectType: NO_SIDE_EFFECT、MARGIN_BUY、AUTO_REPAY。
            recvWindow: 不能大于 60000。
        """

        params = require_params(symbol=symbol, side=side, quantity=quantity, price=price, stopPrice=stopPrice)
        return self.client.sign_request("POST", "/sapi/v1/margin/order/oco", params={**kwargs, **params})

    def margin_cancel_oco(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """
        杠杆账户撤销 OCO 订单 (TRADE)，对应 DELETE /sapi/v1/margin/orderList。
        撤销其中任意一腿都会撤销整个 OCO。

        可选参数:
            isIsolated。
            orderListId / listClientOrderId: 二者至少提供其一。
            newClientOrderId, recvWindow。
        """

        params = require_params(symbol=symbol)
        return self.client.sign_request("DELETE", "/sapi/v1/margin/orderList", params={**kwargs, **params})

    def margin_get_oco(self, **kwargs: Any) -> Any:
        """查询杠杆账户特定 OCO (USER_DATA)，对应 GET /sapi/v1/margin/orderList。"""

        return self.client.sign_request("GET", "/sapi/v1/margin/orderList", params=kwargs)

    def margin_get_all_oco(self, **kwargs: Any) -> Any:
        """
        查询杠杆账户所有 OCO (USER_DATA)，对应 GET /sapi/v1/margin/allOrderList。

        可选参数:
            symbol, isIsolated。
            fromId: 提供时不可同时传 startTime / endTime。
            startTime, endTime, limit, recvWindow。
        """

        return self.client.sign_request("GET", "/sapi/v1/margin/allOrderList", params=kwargs)

    def margin_get_open_oco(self, **kwargs: Any) -> Any:
        return self.client.sign_request("GET", "/sapi/v1/margin/openOrderList", params=kwargs)

    def margin_my_trades(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询杠杆账户成交历史 (USER_DATA)，对应 GET /sapi/v1/margin/myTrades。

        可选参数: isIsolated, orderId, startTime, endTime, fromId, limit (默认 500，最大 1000), recvWindow。
        """

        params = require_params(symbol=symbol)
        return self.client.sign_request("GET", "/sapi/v1/margin/myTrades", params={**kwargs, **params})

    def margin_manual_liquidation(self, *, type: Optional[str] = None, **kwargs: Any) -> Any:
        """
        杠杆手动清算 (MARGIN)，对应 POST /sapi/v1/margin/manual-liquidation。

        Args:
            type: MARGIN 或 ISOLATED；选 ISOLATED 时需要在 kwargs 中提供 symbol。
        """

        params = require_params(type=type)
        return self.client.sign_request("POST", "/sapi/v1/margin/manual-liquidation", params={**kwargs, **params})

    def margin_max_borrowable(self, *, asset: Optional[str] = None, **kwargs: Any) -> Any:
        """查询最大可借 (USER_DATA)，对应 GET /sapi/v1/margin/maxBorrowable。可选 isolatedSymbol。"""

        params = require_params(asset=asset)
        return self.client.sign_request("GET", "/sapi/v1/margin/maxBorrowable", params={**kwargs, **params})

    def margin_max_transferable(self, *, asset: Optional[str] = None, **kwargs: Any) -> Any:
        """查询最大可转出额 (USER_DATA)，对应 GET /sapi/v1/margin/maxTransferable。可选 isolatedSymbol。"""

        params = require_params(asset=asset)
        return self.client.sign_request("GET", "/sapi/v1/margin/maxTransferable", params={**kwargs, **params})

    # --- Isolated Margin ---

    def get_isolated_margin_account(self, **kwargs: Any) -> Any:
        """
        查询逐仓杠杆账户信息 (USER_DATA)，对应 GET /sapi/v1/margin/isolated/account。

        可选参数:
            symbols: 最多 5 个交易对，逗号分隔，例如 "BTCUSDT,BNBUSDT,ADAUSDT"。
            recvWindow: 不能大于 60000。
        """

        return self.client.sign_request("GET", "/sapi/v1/margin/isolated/account", params=kwargs)

    def disable_isolated_margin_account(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """停用逐仓杠杆账户 (TRADE)，对应 DELETE /sapi/v1/margin/isolated/account。"""

        params = require_params(symbol=symbol)
        return self.client.sign_request("DELETE", "/sapi/v1/margin/isolated/account", params={**kwargs, **params})

    def enable_isolated_margin_account(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """启用逐仓杠杆账户 (TRADE)，对应 POST /sapi/v1/margin/isolated/account。"""

        params = require_params(symbol=symbol)
        return self.client.sign_request("POST", "/sapi/v1/margin/isolated/account", params={**kwargs, **params})

    def get_isolated_margin_account_limit(self, **kwargs: Any) -> Any:
        return self.client.sign_request("GET", "/sapi/v1/margin/isolated/accountLimit", params=kwargs)

    def get_all_isolated_margin_pairs(self, **kwargs: Any) -> Any:
        """获取所有逐仓杠杆交易对 (USER_DATA)，对应 GET /sapi/v1/margin/isolated/allPairs。"""

        return self.client.sign_request("GET", "/sapi/v1/margin/isolated/allPairs", params=kwargs)

    # --- BNB Burn ---

    def toggle_bnb_burn(self, **kwargs: Any) -> Any:
        """
        开关现货手续费与杠杆利息的 BNB 抵扣 (USER_DATA)，对应 POST /sapi/v1/bnbBurn。

        spotBNBBurn 与 interestBNBBurn 至少发送其一，取值 "true" / "false"。
        """

        return self.client.sign_request("POST", "/sapi/v1/bnbBurn", params=kwargs)

    def get_bnb_burn(self, **kwargs: Any) -> Any:
        """获取 BNB 抵扣状态 (USER_DATA)，对应 GET /sapi/v1/bnbBurn。"""

        return self.client.sign_request("GET", "/sapi/v1/bnbBurn", params=kwargs)

    # --- Fee / Tier Data ---

    def get_margin_interest_rate_history(self, *, asset: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询杠杆利率历史 (USER_DATA)，对应 GET /sapi/v1/margin/interestRateHistory。

        Args:
            asset: 资产。

        可选参数:
            vipLevel: 默认为用户当前 VIP 等级。
            startTime: 默认 7 天前。
            endTime: 默认当前时间，最大跨度 3 个月。
            limit: 默认 20，最大 100。
            recvWindow: 不能大于 60000。
        """

        params = require_params(asset=asset)
        return self.client.sign_request("GET", "/sapi/v1/margin/interestRateHistory", params={**kwargs, **params})

    def get_cross_margin_data(self, **kwargs: Any) -> Any:
        """查询全仓杠杆费率数据 (USER_DATA)，对应 GET /sapi/v1/margin/crossMarginData。可选 vipLevel、coin。"""

        return self.client.sign_request("GET", "/sapi/v1/margin/crossMarginData", params=kwargs)

    def get_isolated_margin_data(self, **kwargs: Any) -> Any:
        """查询逐仓杠杆费率数据 (USER_DATA)，对应 GET /sapi/v1/margin/isolatedMarginData。可选 vipLevel、symbol。"""

        return self.client.sign_request("GET", "/sapi/v1/margin/isolatedMarginData", params=kwargs)

    def get_isolated_margin_tier(self, *, symbol: Optional[str] = None, **kwargs: Any) -> Any:
        """查询逐仓杠杆档位数据 (USER_DATA)，对应 GET /sapi/v1/margin/isolatedMarginTier。可选 tier。"""

        params = require_params(symbol=symbol)
        return self.client.sign_request("GET", "/sapi/v1/margin/isolatedMarginTier", params={**kwargs, **params})

    def get_margin_order_usage(self, **kwargs: Any) -> Any:
        """查询杠杆账户当前下单计数 (TRADE)，对应 GET /sapi/v1/margin/rateLimit/order。可选 isIsolated、symbol。"""

        return self.client.sign_request("GET", "/sapi/v1/margin/rateLimit/order", params=kwargs)
