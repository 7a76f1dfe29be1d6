import logging
import os
import time
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote, urlencode

import requests
from dotenv import load_dotenv

from .exceptions import BinanceAPIError
from .signing import (
    PrivateKey,
    hmac_signature,
    load_private_key,
    load_private_key_file,
    private_key_signature,
)
from .utils import drop_none, stringify

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.binance.com"
_LIMIT_HEADER_PREFIXES = ("x-mbx-used-weight", "x-mbx-order-count", "x-sapi-used")


class BinanceClient:
    """币安现货 / 杠杆 / 子账户 HTTP 会话，负责签名、限频统计与请求发送。

    未传入 ``private_key`` 时使用 ``api_secret`` 做 HMAC-SHA256 签名；
    传入 PEM 私钥时按密钥类型使用 Ed25519 或 RSA 签名。
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: str = DEFAULT_BASE_URL,
        *,
        private_key: Optional[Union[str, bytes]] = None,
        private_key_pass: Optional[str] = None,
        timeout: int = 10,
        recv_window: Optional[int] = None,
        show_limit_usage: bool = False,
        show_header: bool = False,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.recv_window = recv_window
        self.show_limit_usage = show_limit_usage
        self.show_header = show_header
        self.private_key: Optional[PrivateKey] = None
        if private_key:
            self.private_key = load_private_key(private_key, private_key_pass)
        self.time_offset = 0
        self.session = session or requests.Session()
        if self.api_key:
            self.session.headers.update({"X-MBX-APIKEY": self.api_key})

    def _sign(self, query_string: str) -> str:
        if self.private_key is not None:
            return private_key_signature(self.private_key, query_string)
        if not self.api_secret:
            raise RuntimeError("签名请求需要 api_secret 或 private_key。")
        return hmac_signature(self.api_secret, query_string)

    def get_timestamp(self) -> int:
        return int(time.time() * 1000) + self.time_offset

    def sync_time(self) -> int:
        """
        同步服务器时间，记录 serverTime 与本地时间的差值 (毫秒)。
        之后所有签名请求的 timestamp 都会加上该偏移。
        """

        data, _ = self._request("GET", "/api/v3/time")
        if not isinstance(data, Mapping) or "serverTime" not in data:
            raise RuntimeError(f"服务器时间格式错误: {data}")
        local_time = int(time.time() * 1000)
        self.time_offset = int(data["serverTime"]) - local_time
        logger.debug("server time synced, offset=%sms", self.time_offset)
        return self.time_offset

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Any, Mapping[str, str]]:
        """发送请求并返回 (解码后的数据, 响应头)。"""

        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, path.split("?", 1)[0])
        response = self.session.request(method, url, params=params, timeout=self.timeout)
        if response.status_code >= 400:
            payload: Any
            try:
                payload = response.json()
                message = (payload.get("msg") if isinstance(payload, Mapping) else None) or payload
            except ValueError:
                payload = response.text
                message = payload
            logger.warning("binance error %s on %s %s: %s", response.status_code, method, path.split("?", 1)[0], message)
            raise BinanceAPIError(response.status_code, str(message), payload=payload, headers=response.headers)

        data: Any = None
        if response.content:
            try:
                data = response.json()
            except ValueError:
                data = response.text
        return data, response.headers

    def _wrap(self, data: Any, headers: Mapping[str, str]) -> Any:
        limit_usage = self._limit_usage(headers)
        if limit_usage:
            logger.debug("limit usage: %s", limit_usage)
        if not (self.show_limit_usage or self.show_header):
            return data
        result: Dict[str, Any] = {"data": data}
        if self.show_limit_usage:
            result["limit_usage"] = limit_usage
        if self.show_header:
            result["header"] = dict(headers)
        return result

    @staticmethod
    def _limit_usage(headers: Mapping[str, str]) -> Dict[str, str]:
        return {
            key.lower(): value
            for key, value in headers.items()
            if key.lower().startswith(_LIMIT_HEADER_PREFIXES)
        }

    def limit_request(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
    ) -> Any:
        formatted_params = {k: stringify(v) for k, v in drop_none(params or {}).items()}
        return self._wrap(*self._request(method, path, params=formatted_params))

    def sign_request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        params_dict = dict(params) if params else {}
        if self.recv_window is not None:
            params_dict.setdefault("recvWindow", self.recv_window)
        params_dict["timestamp"] = self.get_timestamp()

        formatted_params = {k: stringify(v) for k, v in drop_none(params_dict).items()}
        query_string = urlencode(formatted_params, doseq=True)
        signature = quote(self._sign(query_string), safe="")

        # signature 必须位于最后，直接拼到 path 上避免 requests 重新排序或编码
        if query_string:
            full_query = f"{query_string}&signature={signature}"
        else:
            full_query = f"signature={signature}"
        return self._wrap(*self._request(method, f"{path}?{full_query}", params=None))


def build_client_from_env(env_file: str = ".env.local", **kwargs: Any) -> BinanceClient:
    load_dotenv(env_file)
    api_key = os.getenv("BINANCE_API_KEY", "")
    api_secret = os.getenv("BINANCE_API_SECRET", "")
    private_key_path = os.getenv("BINANCE_PRIVATE_KEY_PATH", "")
    private_key_pass = os.getenv("BINANCE_PRIVATE_KEY_PASS") or None
    base_url = os.getenv("BINANCE_BASE_URL", DEFAULT_BASE_URL)

    if not api_key or not (api_secret or private_key_path):
        raise RuntimeError(f"缺少 API Key 或签名密钥 (Secret / 私钥文件)，请检查 {env_file} 配置。")

    kwargs.setdefault("base_url", base_url)
    client = BinanceClient(api_key, api_secret, **kwargs)
    if private_key_path:
        client.private_key = load_private_key_file(private_key_path, private_key_pass)
    return client
