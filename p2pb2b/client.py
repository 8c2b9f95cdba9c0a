import asyncio
import logging
from decimal import Decimal
from typing import Literal, Optional, Union

import aiohttp

from .errors import *
from .util.credentials import Credentials, resolve_credentials
from .util.enums import Endpoints as ENDPOINT
from .util.enums import KLINE_INTERVALS, SIDES
from .util.enums import Paths as PATH
from .util.helpers import validate_depth_interval, validate_option
from .util.request import Request, build_private, build_public
from .util.sig import serialise


_DEPTH_TYPEHINT = Union[int, float, str, Decimal]
_INTERVALS_TYPEHINT = Literal["1m", "1h", "1d"]
_SIDE = Literal["sell", "buy"]

TIMEOUT = 10.0


class Client:
    """The main class interacting with P2PB2B's API endpoints.

    Credentials are resolved once, when the client is created:

    * ``Client(api_key, api_secret)`` uses them as given.
    * ``Client("path/to/config.json")`` reads ``api-key`` and ``api-secret``
      from a JSON file.
    * ``Client()`` reads the ``P2PB2B_API_KEY`` and ``P2PB2B_API_SECRET``
      environment variables, or the default config file if they aren't set.

    Public endpoints work without credentials.  Private endpoints raise
    :class:`~p2pb2b.errors.AuthenticationError` if either is missing.

    Every endpoint returns the raw response body as a :py:class:`str`.

    Args:
        *args: Nothing, a config file path, or an API key and secret.
        config (dict): A dictionary-based version of the positional \
            arguments, with `api_key` and `api_secret` keys.
        endpoint (:class:`~p2pb2b.util.enums.Endpoints`): The API endpoint \
            to interact with.
        handle_errors (bool): Whether non-success responses should raise \
            :class:`~p2pb2b.errors.HttpError`.  `False` would mean the raw \
            error body is returned like any other response.
        session (:class:`aiohttp.ClientSession`): A session to send requests \
            with.  The client won't close a session it didn't create.
        timeout (float): The total time in seconds allowed for each request.

    Raises:
        ConfigurationError: Too many positional arguments, or both positional \
            arguments and `config` were supplied.

    """

    endpoint: str
    handle_errors: bool
    timeout: float

    def __init__(self,
            *args,
            config: dict=None,
            endpoint: Union[ENDPOINT, str]=ENDPOINT.MAINNET,
            handle_errors: bool=True,
            session: aiohttp.ClientSession=None,
            timeout: float=TIMEOUT
        ):
        if config is not None:
            if args:
                raise ConfigurationError(
                    "Supply credentials either positionally or via `config`, not both."
                )
            args = (config.get("api_key", ""), config.get("api_secret", ""))

        self.__credentials = resolve_credentials(*args)

        self.endpoint = endpoint
        self.handle_errors = handle_errors
        self.timeout = timeout

        self._owns_session = session is None
        self._session: Optional[aiohttp.ClientSession] = session

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @property
    def credentials(self) -> Credentials:
        """The API key and secret this client signs private requests with."""
        return self.__credentials

    async def close(self) -> None:
        """Close the client's active connection session."""

        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        return self._session

    async def _public(self, endpoint: PATH, params: dict=None) -> str:
        request = build_public(self.endpoint, endpoint, params)

        return await self._send(request)

    async def _private(self, endpoint: PATH, params: dict=None) -> str:
        request = build_private(self.endpoint, endpoint, params, self.credentials)

        return await self._send(request)

    async def _send(self, request: Request) -> str:
        """Send a request and return the raw response body.

        Raises:
            HttpError: The response status wasn't 2xx (unless `handle_errors` \
                is disabled).
            TransportError: No response was received, including timeouts.

        """

        session = self._get_session()

        data = None
        if request.payload is not None:
            data = serialise(request.payload)

        logging.debug(f"Sending {request.method} request to {request.url}")

        try:
            async with session.request(
                request.method,
                request.url,
                data=data,
                headers=request.headers,
                params=request.params or None,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as r:
                raw_content = await r.read()
                status = r.status

        except asyncio.TimeoutError as e:
            raise TransportError(
                f"Request to {request.url} timed out after {self.timeout}s."
            ) from e

        except aiohttp.ClientError as e:
            raise TransportError(
                f"Request to {request.url} failed: {e!r}"
            ) from e

        content = raw_content.decode(errors="replace")

        logging.debug(f"Received {status} from {request.url}")

        if self.handle_errors and not 200 <= status < 300:
            raise HttpError(status, content)

        return content

    async def markets(self) -> str:
        """Get info on all markets."""

        return await self._public(PATH.MARKETS)

    async def market(self, market: str) -> str:
        """Get info on a single market.

        Args:
            market: A market name, e.g. `ETH_BTC`.

        """

        return await self._public(PATH.MARKET, {"market": market})

    async def tickers(self) -> str:
        """Get trade details for all tickers."""

        return await self._public(PATH.TICKERS)

    async def ticker(self, market: str) -> str:
        """Get trade details for a single market's ticker."""

        return await self._public(PATH.TICKER, {"market": market})

    async def book(self,
            market: str,
            side: _SIDE,
            limit: int=50,
            offset: int=0
        ) -> str:
        """Get all unexecuted orders on one side of a market's book.

        Args:
            market: A market name, e.g. `ETH_BTC`.
            side: Either `sell` or `buy`.
            limit: Defaults to 50.  Minimum of 1.
            offset: Defaults to 0.

        Raises:
            ValidationError: `side` isn't `sell` or `buy`.

        """

        validate_option(side, SIDES)

        params = {
            "market": market,
            "side": side,
            "limit": limit,
            "offset": offset
        }

        return await self._public(PATH.BOOK, params)

    async def history(self, market: str, last_id: int, limit: int=50) -> str:
        """Get a market's trade history, starting from a trade ID.

        Args:
            market: A market name, e.g. `ETH_BTC`.
            last_id: The executed order ID to start from.
            limit: Defaults to 50.  Minimum of 1.

        """

        params = {
            "market": market,
            "lastId": last_id,
            "limit": limit
        }

        return await self._public(PATH.HISTORY, params)

    async def depth(self,
            market: str,
            interval: _DEPTH_TYPEHINT=0,
            limit: int=50
        ) -> str:
        """Get the order depth of a market.

        Args:
            market: A market name, e.g. `ETH_BTC`.
            interval: The price aggregation step.  One of `0`, `0.1`, `0.01`, \
                `0.001`, `0.0001`, `0.00001`, `0.000001`, `0.0000001`, \
                `0.00000001` or `1`.  Defaults to 0.
            limit: Defaults to 50.  Minimum of 1.

        Raises:
            ValidationError: `interval` isn't one of the allowed steps.

        """

        params = {
            "market": market,
            "interval": validate_depth_interval(interval),
            "limit": limit
        }

        return await self._public(PATH.DEPTH, params)

    async def kline(self,
            market: str,
            interval: _INTERVALS_TYPEHINT,
            limit: int=50,
            offset: int=0
        ) -> str:
        """Get kline (candlestick) bars for a market.

        Klines are identified by their opening time.

        Args:
            market: A market name, e.g. `ETH_BTC`.
            interval: One of `1m`, `1h` or `1d`.
            limit: Defaults to 50.  Minimum of 1.
            offset: Defaults to 0.

        Raises:
            ValidationError: `interval` isn't `1m`, `1h` or `1d`.

        """

        validate_option(interval, KLINE_INTERVALS)

        params = {
            "market": market,
            "interval": interval,
            "limit": limit,
            "offset": offset
        }

        return await self._public(PATH.KLINE, params)

    async def account_balances(self) -> str:
        """Get the user's balances for all currencies.

        Raises:
            AuthenticationError: No API key or secret is configured.

        """

        return await self._private(PATH.ACCOUNT_BALANCES)

    async def account_balance(self, currency: str) -> str:
        """Get the user's balance for a single currency.

        Raises:
            AuthenticationError: No API key or secret is configured.

        """

        return await self._private(PATH.ACCOUNT_BALANCE, {"currency": currency})

    async def account_order_history(self) -> str:
        """Get the user's executed orders."""

        return await self._private(PATH.ACCOUNT_ORDER_HISTORY)

    async def account_order_deals(self,
            order_id: int,
            limit: int=50,
            offset: int=0
        ) -> str:
        """Get the deals of an executed order."""

        params = {
            "orderId": order_id,
            "limit": limit,
            "offset": offset
        }

        return await self._private(PATH.ACCOUNT_ORDER, params)

    async def account_executed_history(self,
            market: str,
            limit: int=50,
            offset: int=0
        ) -> str:
        """Get the user's executed orders in a market."""

        params = {
            "market": market,
            "limit": limit,
            "offset": offset
        }

        return await self._private(PATH.ACCOUNT_EXECUTED_HISTORY, params)

    async def account_all_executed_history(self, limit: int=50, offset: int=0) -> str:
        """Get the user's executed orders across all markets."""

        params = {
            "limit": limit,
            "offset": offset
        }

        return await self._private(PATH.ACCOUNT_EXECUTED_HISTORY_ALL, params)

    async def orders(self, market: str, limit: int=50, offset: int=0) -> str:
        """Get the user's unexecuted orders in a market."""

        params = {
            "market": market,
            "limit": limit,
            "offset": offset
        }

        return await self._private(PATH.ORDERS, params)

    async def create_order(self,
            market: str,
            side: _SIDE,
            amount: str,
            price: str
        ) -> str:
        """Submit a limit order.

        Args:
            market: A market name, e.g. `ETH_BTC`.
            side: Either `sell` or `buy`.
            amount: The amount, as a numeric string (e.g. `"0.001"`).
            price: The price, as a numeric string (e.g. `"100000.00"`).

        Raises:
            AuthenticationError: No API key or secret is configured.
            ValidationError: `side` isn't `sell` or `buy`.

        """

        validate_option(side, SIDES)

        params = {
            "market": market,
            "side": side,
            "amount": amount,
            "price": price
        }

        return await self._private(PATH.ORDER_NEW, params)

    async def cancel_order(self, market: str, order_id: int) -> str:
        """Cancel an active order in a market by its ID."""

        params = {
            "market": market,
            "orderId": order_id
        }

        return await self._private(PATH.ORDER_CANCEL, params)

    async def cancel_all_orders(self, market: str) -> str:
        """Cancel all of the user's active orders in a market."""

        return await self._private(PATH.ORDER_CANCEL_ALL, {"market": market})
