#!/usr/bin/env python3
import json
import logging

from binance_spot import BinanceClient, BinanceSimpleEarn


def main():
    logging.basicConfig(level=logging.INFO)

    # 在此填写 key / secret
    client = BinanceClient("", "")
    simple_earn = BinanceSimpleEarn(client)

    print("--- 设置定期产品到期赎回至现货账户 ---")
    result = simple_earn.locked_redeem_option(positionId="1234", redeemTo="SPOT")
    print(json.dumps(result, indent=4))


if __name__ == "__main__":
    main()
