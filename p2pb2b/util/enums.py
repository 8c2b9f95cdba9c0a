from enum import Enum


PATH_PREFIX = "/api/v2"


class Endpoints(str, Enum):
    MAINNET = "https://api.p2pb2b.io"


class Paths(str, Enum):
    """All paths available on the API, relative to :data:`PATH_PREFIX`."""

    # Public
    BOOK = "/public/book"
    DEPTH = "/public/depth/result"
    HISTORY = "/public/history"
    KLINE = "/public/market/kline"
    MARKET = "/public/market"
    MARKETS = "/public/markets"
    TICKER = "/public/ticker"
    TICKERS = "/public/tickers"

    # Private
    ACCOUNT_BALANCE = "/account/balance"
    ACCOUNT_BALANCES = "/account/balances"
    ACCOUNT_EXECUTED_HISTORY = "/account/executed_history"
    ACCOUNT_EXECUTED_HISTORY_ALL = "/account/executed_history/all"
    ACCOUNT_ORDER = "/account/order"
    ACCOUNT_ORDER_HISTORY = "/account/order_history"
    ORDER_CANCEL = "/order/cancel"
    ORDER_CANCEL_ALL = "/order/cancel/all"
    ORDER_NEW = "/order/new"
    ORDERS = "/orders"


# Enumerated request parameters, in the order the exchange documents them
SIDES = ("sell", "buy")

KLINE_INTERVALS = ("1m", "1h", "1d")

DEPTH_INTERVALS = (
    "0", "0.1", "0.01", "0.001", "0.0001", "0.00001",
    "0.000001", "0.0000001", "0.00000001", "1"
)
