from .credentials import Credentials, load_config, resolve_credentials
from .enums import DEPTH_INTERVALS, Endpoints, KLINE_INTERVALS, PATH_PREFIX, Paths, SIDES
from .helpers import clean_params, current_nonce, validate_depth_interval, validate_option
from .request import Request, build_private, build_public
from .sig import HMACSign, serialise, sign
