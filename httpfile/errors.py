class HTTPFileError(Exception):
    """Base class for everything the .http parser raises."""


class EndOfInput(HTTPFileError):
    """No request left in the input."""

    def __init__(self):
        super().__init__("EOF before a request was parsed")


class IOFailure(HTTPFileError):
    def __init__(self, err: Exception):
        super().__init__(f"input/output error: {err}")
        self.err = err


class ParseError(HTTPFileError):
    """A malformed request ended the current parse attempt.

    ``line_number`` is filled in by the parser with the number of the line
    that failed, counting from 1. It stays 0 when the error was raised
    outside of a parser, e.g. by calling ``Header.parse`` directly.
    """

    line_number = 0

    def __str__(self):
        message = super().__str__()
        if self.line_number:
            return f"line {self.line_number}: {message}"
        return message


class NoMethod(ParseError):
    def __init__(self):
        super().__init__("couldn't parse http method")


class NoUrl(ParseError):
    def __init__(self):
        super().__init__("couldn't parse http url")


class InvalidHeaderName(ParseError):
    def __init__(self, line: str = ""):
        super().__init__(f"invalid header name: {line!r}")
        self.line = line


class InvalidHeaderValue(ParseError):
    def __init__(self, line: str = ""):
        super().__init__(f"invalid header value: {line!r}")
        self.line = line
