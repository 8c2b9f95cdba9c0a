import base64
import hashlib
import hmac
import json

from p2pb2b.util.sig import HMACSign, serialise, sign


BODY = {"market": "ETH_BTC", "request": "/api/v2/orders", "nonce": 1634567890123}


def test_sign_is_deterministic():
    assert sign("secret", BODY) == sign("secret", dict(BODY))


def test_payload_is_base64_of_compact_json():
    payload, _ = sign("secret", BODY)

    decoded = base64.b64decode(payload).decode()
    assert decoded == '{"market":"ETH_BTC","request":"/api/v2/orders","nonce":1634567890123}'
    assert json.loads(decoded) == BODY


def test_forward_slashes_are_not_escaped():
    assert b"\\/" not in serialise(BODY)


def test_signature_is_hmac_sha512_over_base64_payload():
    payload, signature = sign("secret", BODY)

    expected = hmac.new(b"secret", payload.encode(), hashlib.sha512).hexdigest()
    over_raw_json = hmac.new(b"secret", serialise(BODY), hashlib.sha512).hexdigest()

    assert signature == expected
    assert signature != over_raw_json
    assert signature == signature.lower()
    assert len(signature) == 128


def test_signature_depends_on_secret_and_body():
    _, first = sign("secret", BODY)
    _, other_secret = sign("other", BODY)
    _, other_body = sign("secret", {**BODY, "nonce": BODY["nonce"] + 1})

    assert len({first, other_secret, other_body}) == 3


def test_hmac_sign_helper_matches_sign():
    assert HMACSign("secret").sign(BODY) == sign("secret", BODY)
