#!/usr/bin/env python3
import json
import logging

from binance_spot import BinanceClient, BinanceStaking


def main():
    logging.basicConfig(level=logging.DEBUG)

    # 在此填写 key / secret
    client = BinanceClient("", "")
    client.sync_time()
    staking = BinanceStaking(client)

    quota = staking.staking_personal_quota_remain(product="STAKING", productId="Matic*90")
    print(json.dumps(quota, indent=4))


if __name__ == "__main__":
    main()
