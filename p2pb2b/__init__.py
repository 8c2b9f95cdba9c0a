from .client import Client
from .errors import *
from .util.credentials import Credentials
