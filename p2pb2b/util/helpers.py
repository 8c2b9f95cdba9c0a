import time
from decimal import Decimal, InvalidOperation
from typing import Sequence, Union

from ..errors import ValidationError
from .enums import DEPTH_INTERVALS


def clean_params(params: dict) -> dict:
    """Clean all NoneType parameters from a given dict.

    The API doesn't always require all the possible parameters to be passed
    to it when making a request, so this helper function should help to
    remove any parameters that won't be needed.

    Note:
        Only `None` is removed.  Other falsy values such as `0` or `""`
        are legitimate parameters (e.g. an `offset` of `0`) and remain.

    Returns:
        dict: A clean parameter dictionary, removing all pairs with `None` values.

    """

    return {k: v for k, v in params.items() if v is not None}


def current_nonce() -> int:
    """The current UNIX time in milliseconds.

    Two calls within the same millisecond return the same value.

    """

    return int(time.time() * 1000)


def validate_option(value: str, allowed: Sequence[str]) -> str:
    """Check that `value` is one of the `allowed` values.

    Raises:
        ValidationError: `value` isn't in `allowed`.

    """

    if value not in allowed:
        raise ValidationError(allowed)

    return value


def validate_depth_interval(interval: Union[int, float, str, Decimal]) -> str:
    """Validate a depth aggregation interval and return its canonical form.

    Intervals are compared numerically, so `1e-08`, `"0.00000001"` and
    `Decimal("1E-8")` are all the same interval.  The returned string is in
    plain decimal notation, which is how the API expects to receive it.

    Examples:
        >>> validate_depth_interval(1e-08)
        '0.00000001'
        >>> validate_depth_interval(0)
        '0'

    Raises:
        ValidationError: The interval isn't one of :data:`DEPTH_INTERVALS`.

    """

    if isinstance(interval, bool):
        raise ValidationError(DEPTH_INTERVALS)

    try:
        wanted = Decimal(str(interval))
    except InvalidOperation:
        raise ValidationError(DEPTH_INTERVALS) from None

    # Comparing against a signalling NaN traps
    if not wanted.is_finite():
        raise ValidationError(DEPTH_INTERVALS)

    for allowed in DEPTH_INTERVALS:
        if Decimal(allowed) == wanted:
            return allowed

    raise ValidationError(DEPTH_INTERVALS)
