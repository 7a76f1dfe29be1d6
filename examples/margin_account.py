#!/usr/bin/env python3
import json

from binance_spot import BinanceSpot, build_client_from_env


def main():
    # .env.local 中配置 BINANCE_API_KEY / BINANCE_API_SECRET
    spot = BinanceSpot(build_client_from_env(recv_window=5000))

    print("--- 查询 BNBUSDT 杠杆价格指数 ---")
    print(json.dumps(spot.margin_price_index(symbol="BNBUSDT"), indent=4))

    print("\n--- 查询全仓杠杆账户 ---")
    account = spot.margin_account()
    print(f"marginLevel: {account.get('marginLevel')}")
    for asset in account.get("userAssets", []):
        if float(asset.get("netAsset", 0)) != 0:
            print(json.dumps(asset, indent=4))

    print("\n--- 查询 BNBUSDT 挂单 ---")
    print(json.dumps(spot.margin_open_orders(symbol="BNBUSDT"), indent=4))


if __name__ == "__main__":
    main()
