import logging
from typing import IO, Optional, Union

from .errors import IOFailure

logger = logging.getLogger(__name__)


class LineSource:
    """Line reader over a text or binary stream with one line of lookahead.

    Binary streams are split on ``b"\\n"`` before decoding, so ``encoding``
    must be ASCII compatible. Open UTF-16 or UTF-32 files in text mode.
    """

    def __init__(self, stream: IO, encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding
        self.line_number = 0
        self.__pending = None  # type: Optional[str]
        self.__eof = False

    def has_data(self) -> bool:
        if self.__pending is None and not self.__eof:
            self.__pending = self._readline()
        return self.__pending is not None

    def next_line(self) -> Optional[str]:
        if self.has_data():
            line = self.__pending
            self.__pending = None
            self.line_number += 1
            return line
        return None

    def _readline(self) -> Optional[str]:
        try:
            raw = self.stream.readline()  # type: Union[str, bytes]
            if isinstance(raw, bytes):
                raw = raw.decode(self.encoding)
        except (OSError, UnicodeDecodeError) as err:
            logger.debug(f"Read failed after line {self.line_number}: {err}")
            raise IOFailure(err) from err

        if raw == "":
            self.__eof = True
            return None
        if raw.endswith("\n"):
            raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
        return raw
