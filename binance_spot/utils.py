from decimal import Decimal
from typing import Any, Dict, Mapping

from .exceptions import MissingRequiredParameterError


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        normalized = value.normalize()
        text = format(normalized, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text or "0"
    return str(value)


def drop_none(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


def is_empty(value: Any) -> bool:
    # 0 和 False 是合法取值
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


def require_param(name: str, value: Any) -> None:
    if is_empty(value):
        raise MissingRequiredParameterError(name)


def require_params(**params: Any) -> Dict[str, Any]:
    """按声明顺序校验必需参数，全部通过后原样返回参数字典。"""

    for name, value in params.items():
        require_param(name, value)
    return params
