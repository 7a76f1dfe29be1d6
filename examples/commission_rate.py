#!/usr/bin/env python3
import json
import logging

from binance_spot import BinanceClient, BinanceTrade


def main():
    logging.basicConfig(level=logging.DEBUG)

    # 在此填写测试网 key / secret
    client = BinanceClient("", "", "https://testnet.binance.vision")
    client.sync_time()
    trade = BinanceTrade(client)

    print(json.dumps(trade.commission_rate(symbol="BNBUSDT"), indent=4))


if __name__ == "__main__":
    main()
