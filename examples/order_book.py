import asyncio

import p2pb2b


async def main():
    # Public endpoints don't need any credentials
    async with p2pb2b.Client() as client:
        book = await client.book("ETH_BTC", "sell", limit=10)
        print(book)

        depth = await client.depth("ETH_BTC", 0.001)
        print(depth)


if __name__ == "__main__":
    asyncio.run(main())
