import base64
import hashlib
import hmac
import json
from typing import Tuple


def serialise(body: dict) -> bytes:
    """Serialise a request body exactly as it gets signed and sent.

    Compact separators and insertion order, with forward slashes left
    unescaped (``"/api/v2/orders"``, not ``"\\/api\\/v2\\/orders"``).

    """

    return json.dumps(body, separators=(",", ":")).encode()


def sign(secret: str, body: dict) -> Tuple[str, str]:
    """Sign a private request body.

    The body is serialised to JSON and base64-encoded to form the payload.
    The HMAC-SHA512 signature is then taken over the *base64 payload*, not
    the raw JSON, using the API secret as the key.

    Args:
        secret: The API secret.
        body: The request body, already containing `request` and `nonce`.

    Returns:
        A `(payload, signature)` pair, where `payload` is the base64 string
        and `signature` its lowercase hex HMAC-SHA512 digest.

    """

    payload = base64.b64encode(serialise(body)).decode("ascii")
    signature = hmac.new(
        secret.encode(), payload.encode("ascii"), hashlib.sha512
    ).hexdigest()

    return payload, signature


class HMACSign:

    def __init__(self, secret: str):
        self.secret = secret

    def sign(self, body: dict) -> Tuple[str, str]:
        return sign(self.secret, body)
