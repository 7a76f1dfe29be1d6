from decimal import Decimal

import pytest

from binance_spot.exceptions import MissingRequiredParameterError
from binance_spot.utils import drop_none, require_param, require_params, stringify


class TestStringify:
    def test_bool(self) -> None:
        assert stringify(True) == "true"
        assert stringify(False) == "false"

    def test_decimal(self) -> None:
        assert stringify(Decimal("0.00100")) == "0.001"
        assert stringify(Decimal("1E+2")) == "100"
        assert stringify(Decimal("0")) == "0"

    def test_other(self) -> None:
        assert stringify(10) == "10"
        assert stringify("BNBUSDT") == "BNBUSDT"


def test_drop_none() -> None:
    assert drop_none({"a": 1, "b": None, "c": 0}) == {"a": 1, "c": 0}


class TestRequireParam:
    @pytest.mark.parametrize("value", [None, "", [], {}])
    def test_empty_values(self, value) -> None:
        with pytest.raises(MissingRequiredParameterError) as exc_info:
            require_param("symbol", value)

        assert exc_info.value.param_name == "symbol"
        assert "symbol" in str(exc_info.value)

    @pytest.mark.parametrize("value", [0, False, "0", Decimal("0"), ["BNB"]])
    def test_valid_values(self, value) -> None:
        require_param("amount", value)

    def test_require_params_returns_mapping(self) -> None:
        assert require_params(asset="USDT", amount=10) == {"asset": "USDT", "amount": 10}

    def test_missing_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            require_params(asset="USDT", amount=None)
