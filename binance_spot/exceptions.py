from typing import Any, Mapping, Optional


class BinanceAPIError(Exception):
    """API 错误响应包装。"""

    def __init__(
        self,
        status_code: int,
        message: str,
        payload: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload
        self.headers = dict(headers) if headers else {}
        self.error_code: Optional[int] = None
        if isinstance(payload, Mapping):
            self.error_code = payload.get("code")


class MissingRequiredParameterError(ValueError):
    """必需参数缺失或为空，在发起网络请求之前抛出。"""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"缺少必需参数: {param_name}")
        self.param_name = param_name
