from typing import Callable

from ..errors import AuthenticationError
from .credentials import Credentials
from .enums import PATH_PREFIX
from .helpers import clean_params, current_nonce
from .sig import HMACSign


class Request:

    __slots__ = [
        "headers",
        "host",
        "method",
        "params",
        "path",
        "payload"
    ]

    def __init__(
        self,
        method: str,
        host: str,
        path: str,
        *,
        headers: dict=None,
        params: dict=None,
        payload: dict=None
    ):
        self.headers = headers or {}
        self.host = host
        self.method = method.upper()
        self.params = params
        self.path = path
        self.payload = payload

    @property
    def url(self) -> str:
        return self.host.rstrip("/") + self.path

    def __repr__(self) -> str:
        return f"<method='{self.method}' url='{self.url}'>"


def build_public(host: str, endpoint: str, params: dict=None) -> Request:
    """Build an unsigned GET request, passing `params` as the query string."""

    return Request(
        "get",
        host,
        PATH_PREFIX + endpoint,
        params=clean_params(params or {})
    )


def build_private(
        host: str,
        endpoint: str,
        params: dict,
        credentials: Credentials,
        *,
        nonce: Callable[[], int]=current_nonce
    ) -> Request:
    """Build a signed POST request.

    The JSON body is `params` plus the prefixed endpoint path as `request`
    and a millisecond `nonce`.  Any `request` or `nonce` already in `params`
    is replaced.

    Raises:
        AuthenticationError: The API key or secret is empty.

    """

    if not credentials.complete:
        raise AuthenticationError()

    path = PATH_PREFIX + endpoint

    payload = {
        k: v for k, v in clean_params(params or {}).items()
        if k not in ("request", "nonce")
    }
    payload["request"] = path
    payload["nonce"] = nonce()

    helper = HMACSign(credentials.api_secret)
    x_txc_payload, x_txc_signature = helper.sign(payload)

    headers = {
        "Content-Type": "application/json",
        "X-TXC-APIKEY": credentials.api_key,
        "X-TXC-PAYLOAD": x_txc_payload,
        "X-TXC-SIGNATURE": x_txc_signature
    }

    return Request(
        "post",
        host,
        path,
        headers=headers,
        payload=payload
    )
