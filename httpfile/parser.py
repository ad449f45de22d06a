import enum
import io
import logging
import re
from typing import IO, Iterator, List, NamedTuple, Optional

from .errors import EndOfInput, HTTPFileError, ParseError
from .http import Header, HTTPRequest
from .reader import LineSource

logger = logging.getLogger(__name__)

SEPARATOR_PATTERN = re.compile(r"#{3,}")


class State(enum.Enum):
    URL_LINE = enum.auto()
    HEADERS = enum.auto()
    BODY = enum.auto()


class ParseResult(NamedTuple):
    request: Optional[HTTPRequest] = None
    error: Optional[HTTPFileError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_separator(line: str) -> bool:
    return SEPARATOR_PATTERN.fullmatch(line) is not None


class Parser:
    """Iterator of the requests in a .http file.

    Each ``next()`` scans forward from the current read position until one
    request is complete. A failed attempt raises from that ``next()`` call
    only; calling ``next()`` again starts a new attempt wherever the previous
    one stopped reading, which may be in the middle of the broken request.
    """

    def __init__(self, stream: IO, encoding: str = "utf-8"):
        self.source = LineSource(stream, encoding=encoding)

    def __iter__(self) -> "Parser":
        return self

    def __next__(self) -> HTTPRequest:
        try:
            return self.parse()
        except EndOfInput:
            raise StopIteration

    def results(self) -> Iterator[ParseResult]:
        while True:
            try:
                request = next(self)
            except StopIteration:
                return
            except HTTPFileError as err:
                yield ParseResult(error=err)
            else:
                yield ParseResult(request=request)

    def parse(self) -> HTTPRequest:
        http_request = HTTPRequest()
        state = State.URL_LINE

        if not self.source.has_data():
            raise EndOfInput()

        while True:
            line = self.source.next_line()
            if line is None:
                if http_request.is_empty():
                    raise EndOfInput()
                logger.debug(f"Parsed request at end of input: {http_request.method} {http_request.url}")
                return http_request

            line = line.strip()

            if state is State.URL_LINE:
                if not line or is_separator(line):
                    continue
                if line.startswith("#"):
                    http_request.comment += line
                    continue

                try:
                    http_request.parse_method_url_version(line)
                except ParseError as err:
                    raise self._fail(err)
                state = State.HEADERS

            elif state is State.HEADERS:
                if not line:
                    state = State.BODY
                    continue

                try:
                    http_request.headers.append(Header.parse(line))
                except ParseError as err:
                    raise self._fail(err)

            elif state is State.BODY:
                if not line:
                    continue
                if is_separator(line):
                    logger.debug(f"Parsed request: {http_request.method} {http_request.url}")
                    return http_request

                http_request.body += line

    def _fail(self, err: ParseError) -> ParseError:
        err.line_number = self.source.line_number
        logger.debug(f"Parse failed: {err}")
        return err


def parse(stream: IO, encoding: str = "utf-8") -> List[HTTPRequest]:
    return list(Parser(stream, encoding=encoding))


def parse_text(text: str) -> List[HTTPRequest]:
    return parse(io.StringIO(text))


def parse_file(path: str, encoding: str = "utf-8") -> List[HTTPRequest]:
    with open(path, "r", encoding=encoding) as fh:
        return parse(fh)
