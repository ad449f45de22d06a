import json
from dataclasses import dataclass, field
from typing import List

from .errors import InvalidHeaderName, InvalidHeaderValue, NoMethod, NoUrl
from .typings import RequestDict

DEFAULT_VERSION = "HTTP/1.1"
HEADER_SEPARATOR = ": "


@dataclass(frozen=True)
class Header:
    name: str
    value: str

    @classmethod
    def parse(cls, line: str) -> "Header":
        """Split a ``Name: Value`` line.

        Only the text between the first and the second ``": "`` is kept as
        the value, so ``"Referer: a: b"`` gives the value ``"a"``. Header
        values containing ``": "`` are truncated.
        """
        parts = line.split(HEADER_SEPARATOR)
        if len(parts) < 2:
            # "Name: " loses its trailing space when the line is trimmed
            if len(line) > 1 and line.endswith(":"):
                raise InvalidHeaderValue(line)
            raise InvalidHeaderName(line)

        name, value = parts[0], parts[1]
        if not name:
            raise InvalidHeaderName(line)
        if not value:
            raise InvalidHeaderValue(line)
        return cls(name, value)

    def __str__(self):
        return f"{self.name}{HEADER_SEPARATOR}{self.value}"


@dataclass
class HTTPRequest:
    comment: str = ""
    method: str = ""
    url: str = ""
    version: str = DEFAULT_VERSION
    headers: List[Header] = field(default_factory=list)
    body: str = ""

    def is_empty(self) -> bool:
        return not self.method or not self.url

    def parse_method_url_version(self, line: str):
        parts = line.split()
        if len(parts) < 1:
            raise NoMethod()
        if len(parts) < 2:
            raise NoUrl()

        self.method = parts[0]
        self.url = parts[1]
        if len(parts) > 2:
            self.version = parts[2]

    def pretty_body(self, indent: int = 2) -> str:
        if not self.body:
            return self.body
        try:
            return json.dumps(json.loads(self.body), indent=indent, ensure_ascii=False)
        except ValueError:
            return self.body

    def as_dict(self) -> RequestDict:
        return {
            "comment": self.comment,
            "method": self.method,
            "url": self.url,
            "version": self.version,
            "headers": [{"name": h.name, "value": h.value} for h in self.headers],
            "body": self.body,
        }

    def to_http(self, pretty_body: bool = False) -> str:
        http_request = []
        if self.comment:
            http_request.append(self.comment)
        http_request.append(f"{self.method} {self.url} {self.version}")
        for header in self.headers:
            http_request.append(str(header))
        http_request.append("")
        if self.body:
            http_request.append(self.pretty_body() if pretty_body else self.body)
        return "\n".join(http_request)

    def __str__(self):
        return self.to_http()
