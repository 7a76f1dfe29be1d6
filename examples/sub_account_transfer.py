#!/usr/bin/env python3
import json

from binance_spot import BinanceAPIError, BinanceSpot, build_client_from_env


def main():
    # 使用子账户的 API Key
    spot = BinanceSpot(build_client_from_env(show_limit_usage=True))

    print("--- 子账户向母账户划转 10 USDT ---")
    try:
        result = spot.sub_account_transfer_to_master(asset="USDT", amount=10)
    except BinanceAPIError as exc:
        print(f"划转失败: {exc} (code={exc.error_code})")
        return
    print(json.dumps(result, indent=4))

    print("\n--- 查询子账户划转历史 ---")
    history = spot.sub_account_transfer_sub_account_history(asset="USDT", limit=10)
    print(json.dumps(history, indent=4))


if __name__ == "__main__":
    main()
