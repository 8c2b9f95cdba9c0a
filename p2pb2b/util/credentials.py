import json
import logging
import os
from pathlib import Path
from typing import Callable, Mapping, NamedTuple, Optional

from ..errors import ConfigurationError


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "p2pb2b-api-config.json"

ENV_API_KEY = "P2PB2B_API_KEY"
ENV_API_SECRET = "P2PB2B_API_SECRET"


class Credentials(NamedTuple):
    """An API key and secret pair.  Empty strings mean 'not set'."""

    api_key: str = ""
    api_secret: str = ""

    @property
    def complete(self) -> bool:
        return bool(self.api_key and self.api_secret)

    def __repr__(self) -> str:
        hidden = "***" if self.api_secret else ""
        return f"<api_key='{self.api_key}' api_secret='{hidden}'>"


def read_file(path) -> Optional[str]:
    """Return the contents of `path`, or `None` if there's no such file."""

    try:
        with open(path, "r", encoding="utf-8") as fp:
            return fp.read()
    except FileNotFoundError:
        return None


def load_config(
        path,
        reader: Callable[[str], Optional[str]]=read_file
    ) -> Credentials:
    """Load credentials from a JSON config file.

    The file looks like ``{"api-key": "...", "api-secret": "..."}``.  Both keys
    are optional, and a missing file is fine too: absent credentials only
    become a problem once a private request is made.

    """

    try:
        contents = reader(path)
    except (OSError, UnicodeDecodeError) as e:
        logging.warning(f"Couldn't read config file '{path}' ({e}), ignoring it")
        return Credentials()

    if contents is None:
        logging.debug(f"No config file found at '{path}'")
        return Credentials()

    try:
        cfg = json.loads(contents)
    except ValueError:
        logging.warning(f"Config file '{path}' isn't valid JSON, ignoring it")
        return Credentials()

    if not isinstance(cfg, dict):
        logging.warning(f"Config file '{path}' doesn't contain a JSON object, ignoring it")
        return Credentials()

    return Credentials(
        str(cfg.get("api-key") or ""),
        str(cfg.get("api-secret") or "")
    )


def resolve_credentials(
        *args,
        env: Mapping[str, str]=None,
        reader: Callable[[str], Optional[str]]=None
    ) -> Credentials:
    """Work out which credentials a client should use.

    Two arguments are taken as the API key and secret.  A single argument is
    the path to a config file.  With no arguments, the ``P2PB2B_API_KEY``
    and ``P2PB2B_API_SECRET`` environment variables are used, falling back to
    the default config file next to the package if either isn't set.

    Args:
        *args: Nothing, a config file path, or an API key and secret.
        env: The environment to read from.  Defaults to :data:`os.environ`.
        reader: Reads a file's contents, returning `None` if it doesn't exist.

    Raises:
        ConfigurationError: More than two arguments were supplied.

    """

    if env is None:
        env = os.environ

    if reader is None:
        reader = read_file

    if len(args) == 2:
        logging.info("Using API credentials from arguments")
        return Credentials(*args)

    if len(args) == 1:
        logging.info(f"Using API credentials from config file '{args[0]}'")
        return load_config(args[0], reader)

    if len(args) == 0:
        key = env.get(ENV_API_KEY)
        secret = env.get(ENV_API_SECRET)

        if key and secret:
            logging.info("Using API credentials from environment")
            return Credentials(key, secret)

        logging.info(f"Using API credentials from config file '{DEFAULT_CONFIG_PATH}'")
        return load_config(DEFAULT_CONFIG_PATH, reader)

    raise ConfigurationError(
        f"Invalid constructor parameters (expected 0, 1 or 2, got {len(args)})."
    )
