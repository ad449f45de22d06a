import logging

from .errors import (
    EndOfInput,
    HTTPFileError,
    InvalidHeaderName,
    InvalidHeaderValue,
    IOFailure,
    NoMethod,
    NoUrl,
    ParseError,
)
from .http import DEFAULT_VERSION, Header, HTTPRequest
from .parser import Parser, ParseResult, State, parse, parse_file, parse_text
from .reader import LineSource

logging.basicConfig(
    level=logging.INFO,
    datefmt="%Y-%m-%d %H:%M:%S",
    format="%(asctime)15s %(levelname)-8s %(message)s",
)
