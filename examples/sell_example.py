import asyncio
import logging

import p2pb2b


logging.basicConfig(level=logging.DEBUG)

# Reads P2PB2B_API_KEY and P2PB2B_API_SECRET, or the config file
# 'p2pb2b/p2pb2b-api-config.json' if they aren't set
client = p2pb2b.Client()


async def main():
    try:
        balance = await client.account_balance("ETH")
        print(balance)

        order = await client.create_order("ETH_BTC", "sell", "0.001", "100000.00")
        print(order)

    except p2pb2b.HttpError as e:
        print(f"Exchange rejected the request ({e.status_code}): {e.body}")

    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
