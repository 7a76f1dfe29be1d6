from typing import Any, Optional

from .client import BinanceClient
from .utils import require_params


class BinanceSubAccount:
    """子账户与托管子账户接口封装，全部为签名请求。

    https://developers.binance.com/docs/sub_account/Introduction
    """

    def __init__(self, client: BinanceClient) -> None:
        self.client = client

    # --- Account Management ---

    def create_virtual_sub_account(self, *, subAccountString: Optional[str] = None, **kwargs: Any) -> Any:
        """
        创建虚拟子账户 (母账户)，对应 POST /sapi/v1/sub-account/virtualSubAccount。
        请求所用的 API Key 需要开启交易权限。

        Args:
            subAccountString: 任意字符串，用于生成虚拟子账户邮箱。
        """

        params = require_params(subAccountString=subAccountString)
        return self.client.sign_request("POST", "/sapi/v1/sub-account/virtualSubAccount", params={**kwargs, **params})

    def get_sub_account_list(self, **kwargs: Any) -> Any:
        """
        查询子账户列表 (母账户)，对应 GET /sapi/v1/sub-account/list。

        可选参数: email, isFreeze ("true" / "false"), page, limit, recvWindow。
        """

        return self.client.sign_request("GET", "/sapi/v1/sub-account/list", params=kwargs)

    def sub_account_status(self, **kwargs: Any) -> Any:
        """查询子账户杠杆 / 合约开通状态 (母账户)，对应 GET /sapi/v1/sub-account/status。可选 email。"""

        return self.client.sign_request("GET", "/sapi/v1/sub-account/status", params=kwargs)

    def sub_account_enable_margin(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """为子账户开通杠杆 (母账户)，对应 POST /sapi/v1/sub-account/margin/enable。"""

        params = require_params(email=email)
        return self.client.sign_request("POST", "/sapi/v1/sub-account/margin/enable", params={**kwargs, **params})

    def sub_account_enable_options(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """为子账户开通期权 (母账户)，对应 POST /sapi/v1/sub-account/eoptions/enable。"""

        params = require_params(email=email)
        return self.client.sign_request("POST", "/sapi/v1/sub-account/eoptions/enable", params={**kwargs, **params})

    def sub_account_enable_futures(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """为子账户开通合约 (母账户)，对应 POST /sapi/v1/sub-account/futures/enable。"""

        params = require_params(email=email)
        return self.client.sign_request("POST", "/sapi/v1/sub-account/futures/enable", params={**kwargs, **params})

    def sub_account_enable_blvt(
        self,
        *,
        email: Optional[str] = None,
        enableBlvt: Optional[bool] = None,
        **kwargs: Any,
    ) -> Any:
        """
        为子账户开通杠杆代币 (母账户)，对应 POST /sapi/v1/sub-account/blvt/enable。

        Args:
            email: 子账户邮箱。
            enableBlvt: 目前只能为 True。
        """

        params = require_params(email=email, enableBlvt=enableBlvt)
        return self.client.sign_request("POST", "/sapi/v1/sub-account/blvt/enable", params={**kwargs, **params})

    def sub_account_futures_position_risk(
        self,
        *,
        email: Optional[str] = None,
        futuresType: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """
        查询子账户合约持仓风险 (母账户)，对应 GET /sapi/v2/sub-account/futures/positionRisk。

        Args:
            email: 子账户邮箱。
            futuresType: 1 为 U 本位合约，2 为币本位合约。
        """

        params = require_params(email=email, futuresType=futuresType)
        return self.client.sign_request("GET", "/sapi/v2/sub-account/futures/positionRisk", params={**kwargs, **params})

    def sub_account_transaction_statistics(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """查询子账户交易量统计 (母账户)，对应 GET /sapi/v1/sub-account/transaction-statistics。"""

        params = require_params(email=email)
        return self.client.sign_request(
            "GET",
            "/sapi/v1/sub-account/transaction-statistics",
            params={**kwargs, **params},
        )

    # --- Asset Management ---

    def get_sub_account_spot_transfer_history(self, **kwargs: Any) -> Any:
        """
        查询子账户现货资产划转历史 (母账户)，对应 GET /sapi/v1/sub-account/sub/transfer/history。

        fromEmail 与 toEmail 不能同时发送；都不传时默认 fromEmail 为母账户邮箱。

        可选参数:
            fromEmail, toEmail: 子账户邮箱。
            startTime, endTime。
            page: 默认 1。
            limit: 默认 500。
            recvWindow: 不能大于 60000。
        """

        return self.client.sign_request("GET", "/sapi/v1/sub-account/sub/transfer/history", params=kwargs)

    def get_sub_account_futures_transfer_history(
        self,
        *,
        email: Optional[str] = None,
        futuresType: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """
        查询子账户合约资产划转历史 (母账户)，对应 GET /sapi/v1/sub-account/futures/internalTransfer。

        Args:
            email: 子账户邮箱。
            futuresType: 1 为 U 本位合约，2 为币本位合约。

        可选参数:
            startTime, endTime: 默认返回最近 100 天。
            page: 默认 1。
            limit: 默认 50，最大 500。
            recvWindow: 不能大于 60000。
        """

        params = require_params(email=email, futuresType=futuresType)
        return self.client.sign_request(
            "GET",
            "/sapi/v1/sub-account/futures/internalTransfer",
            params={**kwargs, **params},
        )

    def sub_account_futures_internal_transfer(
        self,
        *,
        fromEmail: Optional[str] = None,
        toEmail: Optional[str] = None,
        futuresType: Optional[int] = None,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        **kwargs: Any,
    ) -> Any:
        """
        子账户间合约资产划转 (母账户)，对应 POST /sapi/v1/sub-account/futures/internalTransfer。

        Args:
            fromEmail: 转出子账户邮箱。
            toEmail: 转入子账户邮箱。
            futuresType: 1 为 U 本位合约，2 为币本位合约。
            asset: 资产。
            amount: 数量。
        """

        params = require_params(
            fromEmail=fromEmail,
            toEmail=toEmail,
            futuresType=futuresType,
            asset=asset,
            amount=amount,
        )
        return self.client.sign_request(
            "POST",
            "/sapi/v1/sub-account/futures/internalTransfer",
            params={**kwargs, **params},
        )

    def get_sub_account_assets(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """查询子账户资产 V3 (母账户)，对应 GET /sapi/v3/sub-account/assets。"""

        params = require_params(email=email)
        return self.client.sign_request("GET", "/sapi/v3/sub-account/assets", params={**kwargs, **params})

    def get_sub_account_assets_v4(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """查询子账户资产 V4 (母账户)，对应 GET /sapi/v4/sub-account/assets。"""

        params = require_params(email=email)
        return self.client.sign_request("GET", "/sapi/v4/sub-account/assets", params={**kwargs, **params})

    def get_sub_account_spot_summary(self, **kwargs: Any) -> Any:
        """
        查询子账户现货资产汇总 (母账户)，对应 GET /sapi/v1/sub-account/spotSummary。
        返回以 BTC 计价的资产汇总。

        可选参数: email, page (默认 1), size (默认 10，最大 20), recvWindow。
        """

        return self.client.sign_request("GET", "/sapi/v1/sub-account/spotSummary", params=kwargs)

    def sub_account_deposit_address(
        self,
        *,
        email: Optional[str] = None,
        coin: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """
        获取子账户充值地址 (母账户)，对应 GET /sapi/v1/capital/deposit/subAddress。

        可选参数: network, recvWindow。
        """

        params = require_params(email=email, coin=coin)
        return self.client.sign_request("GET", "/sapi/v1/capital/deposit/subAddress", params={**kwargs, **params})

    def sub_account_deposit_history(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """
        获取子账户充值记录 (母账户)，对应 GET /sapi/v1/capital/deposit/subHisrec。

        可选参数: coin, status, startTime, endTime, limit, offset, recvWindow。
        """

        params = require_params(email=email)
        return self.client.sign_request("GET", "/sapi/v1/capital/deposit/subHisrec", params={**kwargs, **params})

    def sub_account_margin_account(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """查询子账户杠杆账户详情 (母账户)，对应 GET /sapi/v1/sub-account/margin/account。"""

        params = require_params(email=email)
        return self.client.sign_request("GET", "/sapi/v1/sub-account/margin/account", params={**kwargs, **params})

    def sub_account_margin_account_summary(self, **kwargs: Any) -> Any:
        return self.client.sign_request("GET", "/sapi/v1/sub-account/margin/accountSummary", params=kwargs)

    def sub_account_futures_account(
        self,
        *,
        email: Optional[str] = None,
        futuresType: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """查询子账户合约账户详情 V2 (母账户)，对应 GET /sapi/v2/sub-account/futures/account。"""

        params = require_params(email=email, futuresType=futuresType)
        return self.client.sign_request("GET", "/sapi/v2/sub-account/futures/account", params={**kwargs, **params})

    def sub_account_futures_account_summary(self, *, futuresType: Optional[int] = None, **kwargs: Any) -> Any:
        """
        查询子账户合约账户汇总 V2 (母账户)，对应 GET /sapi/v2/sub-account/futures/accountSummary。

        Args:
            futuresType: 1 为 U 本位合约，2 为币本位合约。

        可选参数: page (默认 1), limit (默认 10，最大 20), recvWindow。
        """

        params = require_params(futuresType=futuresType)
        return self.client.sign_request(
            "GET",
            "/sapi/v2/sub-account/futures/accountSummary",
            params={**kwargs, **params},
        )

    def sub_account_futures_transfer(
        self,
        *,
        email: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        type: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """
        子账户合约资金划转 (母账户)，对应 POST /sapi/v1/sub-account/futures/transfer。

        Args:
            email: 子账户邮箱。
            asset: 资产。
            amount: 数量。
            type: 划转方向。
                1: 子账户现货 -> U 本位合约
                2: U 本位合约 -> 子账户现货
                3: 子账户现货 -> 币本位合约
                4: 币本位合约 -> 子账户现货
        """

        params = require_params(email=email, asset=asset, amount=amount, type=type)
        return self.client.sign_request("POST", "/sapi/v1/sub-account/futures/transfer", params={**kwargs, **params})

    def sub_account_margin_transfer(
        self,
        *,
        email: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        type: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """
        子账户杠杆资金划转 (母账户)，对应 POST /sapi/v1/sub-account/margin/transfer。

        Args:
            type: 1 为子账户现货转入杠杆账户，2 为杠杆账户转回现货。
        """

        params = require_params(email=email, asset=asset, amount=amount, type=type)
        return self.client.sign_request("POST", "/sapi/v1/sub-account/margin/transfer", params={**kwargs, **params})

    def sub_account_transfer_to_sub(
        self,
        *,
        toEmail: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        **kwargs: Any,
    ) -> Any:
        """向同一母账户下的其他子账户划转 (子账户)，对应 POST /sapi/v1/sub-account/transfer/subToSub。"""

        params = require_params(toEmail=toEmail, asset=asset, amount=amount)
        return self.client.sign_request("POST", "/sapi/v1/sub-account/transfer/subToSub", params={**kwargs, **params})

    def sub_account_transfer_to_master(
        self,
        *,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        **kwargs: Any,
    ) -> Any:
        """
        向母账户划转 (子账户)，对应 POST /sapi/v1/sub-account/transfer/subToMaster。

        Args:
            asset: 资产，例如 `USDT`。
            amount: 数量。
        """

        params = require_params(asset=asset, amount=amount)
        return self.client.sign_request(
            "POST",
            "/sapi/v1/sub-account/transfer/subToMaster",
            params={**kwargs, **params},
        )

    def sub_account_transfer_sub_account_history(self, **kwargs: Any) -> Any:
        """
        查询子账户划转历史 (子账户)，对应 GET /sapi/v1/sub-account/transfer/subUserHistory。

        可选参数: asset, type (1 转入，2 转出), startTime, endTime, limit, recvWindow。
        """

        return self.client.sign_request("GET", "/sapi/v1/sub-account/transfer/subUserHistory", params=kwargs)

    def universal_transfer(
        self,
        *,
        fromAccountType: Optional[str] = None,
        toAccountType: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        **kwargs: Any,
    ) -> Any:
        """
        万向划转 (母账户)，对应 POST /sapi/v1/sub-account/universalTransfer。
        https://developers.binance.com/docs/sub_account/asset-management/Universal-Transfer

        请求所用的 API Key 需要开启内部划转权限，不支持合约账户之间的划转。

        Args:
            fromAccountType: "SPOT"、"USDT_FUTURE"、"COIN_FUTURE" 等。
            toAccountType: 同上。
            asset: 资产。
            amount: 数量。

        可选参数:
            fromEmail: 不传时默认从母账户转出。
            toEmail: 不传时默认转入母账户。
            clientTranId: 用户自定义划转 ID。
            recvWindow: 不能大于 60000。
        """

        params = require_params(
            fromAccountType=fromAccountType,
            toAccountType=toAccountType,
            asset=asset,
            amount=amount,
        )
        return self.client.sign_request("POST", "/sapi/v1/sub-account/universalTransfer", params={**kwargs, **params})

    def universal_transfer_history(self, **kwargs: Any) -> Any:
        """
        查询万向划转历史 (母账户)，对应 GET /sapi/v1/sub-account/universalTransfer。

        可选参数: fromEmail, toEmail, clientTranId, startTime, endTime, page, limit (默认 500，最大 500), recvWindow。
        """

        return self.client.sign_request("GET", "/sapi/v1/sub-account/universalTransfer", params=kwargs)

    # --- Managed Sub-account ---

    def deposit_to_sub_account(
        self,
        *,
        toEmail: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        **kwargs: Any,
    ) -> Any:
        """向托管子账户充值资产 (投资人母账户)，对应 POST /sapi/v1/managed-subaccount/deposit。"""

        params = require_params(toEmail=toEmail, asset=asset, amount=amount)
        return self.client.sign_request("POST", "/sapi/v1/managed-subaccount/deposit", params={**kwargs, **params})

    def sub_account_asset_details(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """查询托管子账户资产详情 (投资人母账户)，对应 GET /sapi/v1/managed-subaccount/asset。"""

        params = require_params(email=email)
        return self.client.sign_request("GET", "/sapi/v1/managed-subaccount/asset", params={**kwargs, **params})

    def sub_account_margin_asset_details(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询托管子账户杠杆资产详情 (投资人母账户)，对应 GET /sapi/v1/managed-subaccount/marginAsset。

        可选参数:
            accountType: 不传或传 "MARGIN" 查询全仓，传 "ISOLATED_MARGIN" 查询逐仓。
        """

        params = require_params(email=email)
        return self.client.sign_request("GET", "/sapi/v1/managed-subaccount/marginAsset", params={**kwargs, **params})

    def sub_account_futures_asset_details(self, *, email: Optional[str] = None, **kwargs: Any) -> Any:
        """
        查询托管子账户合约资产详情 (投资人母账户)，对应 GET /sapi/v1/managed-subaccount/fetch-future-asset。

        可选参数:
            accountType: 不传或传 "USDT_FUTURE" 查询 U 本位，传 "COIN_FUTURE" 查询币本位。
        """

        params = require_params(email=email)
        return self.client.sign_request(
            "GET",
            "/sapi/v1/managed-subaccount/fetch-future-asset",
            params={**kwargs, **params},
        )

    def withdraw_from_sub_account(
        self,
        *,
        fromEmail: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        **kwargs: Any,
    ) -> Any:
        """
        从托管子账户提取资产 (投资人母账户)，对应 POST /sapi/v1/managed-subaccount/withdraw。

        可选参数: transferDate (提取时间，毫秒时间戳), recvWindow。
        """

        params = require_params(fromEmail=fromEmail, asset=asset, amount=amount)
        return self.client.sign_request("POST", "/sapi/v1/managed-subaccount/withdraw", params={**kwargs, **params})

    def sub_account_transfer_log(
        self,
        *,
        email: Optional[str] = None,
        startTime: Optional[int] = None,
        endTime: Optional[int] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """
        查询托管子账户划转记录 (交易团队母账户)，
        对应 GET /sapi/v1/managed-subaccount/queryTransLogForTradeParent。

        Args:
            email: 托管子账户邮箱。
            startTime, endTime: 毫秒时间戳。
            page: 页码。
            limit: 最大 500。

        可选参数:
            transfers: 划转方向 FROM / TO。
            transferFunctionAccountType: SPOT、MARGIN、ISOLATED_MARGIN、USDT_FUTURE、COIN_FUTURE。
        """

        params = require_params(email=email, startTime=startTime, endTime=endTime, page=page, limit=limit)
        return self.client.sign_request(
            "GET",
            "/sapi/v1/managed-subaccount/queryTransLogForTradeParent",
            params={**kwargs, **params},
        )

    def sub_account_transfer_log_sub_account(
        self,
        *,
        startTime: Optional[int] = None,
        endTime: Optional[int] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """查询托管子账户划转记录 (交易团队子账户)，对应 GET /sapi/v1/managed-subaccount/query-trans-log。"""

        params = require_params(startTime=startTime, endTime=endTime, page=page, limit=limit)
        return self.client.sign_request(
            "GET",
            "/sapi/v1/managed-subaccount/query-trans-log",
            params={**kwargs, **params},
        )

    def sub_account_transfer_log_investor(
        self,
        *,
        email: Optional[str] = None,
        startTime: Optional[int] = None,
        endTime: Optional[int] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """查询托管子账户划转记录 (投资人母账户)，对应 GET /sapi/v1/managed-subaccount/queryTransLogForInvestor。"""

        params = require_params(email=email, startTime=startTime, endTime=endTime, page=page, limit=limit)
        return self.client.sign_request(
            "GET",
            "/sapi/v1/managed-subaccount/queryTransLogForInvestor",
            params={**kwargs, **params},
        )

    def sub_account_list(self, **kwargs: Any) -> Any:
        """
        查询托管子账户列表 (投资人)，对应 GET /sapi/v1/managed-subaccount/info。

        可选参数: email, page (默认 1), limit (默认 10，最大 20), recvWindow。
        """

        return self.client.sign_request("GET", "/sapi/v1/managed-subaccount/info", params=kwargs)

    # --- API Management ---

    def sub_account_toggle_ip_restriction(
        self,
        *,
        email: Optional[str] = None,
        subAccountApiKey: Optional[str] = None,
        status: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """
        开启或关闭子账户 API Key 的 IP 白名单 (母账户)，
        对应 POST /sapi/v2/sub-account/subAccountApi/ipRestriction。

        Args:
            status: "1" 为不限制 IP，"2" 为仅限白名单 IP。

        可选参数:
            ipAddress: 批量添加的静态 IP，逗号分隔。
            recvWindow: 不能大于 60000。
        """

        params = require_params(email=email, subAccountApiKey=subAccountApiKey, status=status)
        return self.client.sign_request(
            "POST",
            "/sapi/v2/sub-account/subAccountApi/ipRestriction",
            params={**kwargs, **params},
        )

    def sub_account_ip_list(
        self,
        *,
        email: Optional[str] = None,
        subAccountApiKey: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """查询子账户 API Key 的 IP 白名单 (母账户)，对应 GET /sapi/v1/sub-account/subAccountApi/ipRestriction。"""

        params = require_params(email=email, subAccountApiKey=subAccountApiKey)
        return self.client.sign_request(
            "GET",
            "/sapi/v1/sub-account/subAccountApi/ipRestriction",
            params={**kwargs, **params},
        )

    def sub_account_delete_ip_list(
        self,
        *,
        email: Optional[str] = None,
        subAccountApiKey: Optional[str] = None,
        ipAddress: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """删除子账户 API Key 的 IP 白名单 (母账户)，对应 DELETE /sapi/v1/sub-account/subAccountApi/ipRestriction/ipList。"""

        params = require_params(email=email, subAccountApiKey=subAccountApiKey, ipAddress=ipAddress)
        return self.client.sign_request(
            "DELETE",
            "/sapi/v1/sub-account/subAccountApi/ipRestriction/ipList",
            params={**kwargs, **params},
        )
