from typing import List, TypedDict


class HeaderDict(TypedDict):
    name: str
    value: str


class RequestDict(TypedDict):
    comment: str
    method: str
    url: str
    version: str
    headers: List[HeaderDict]
    body: str


class ConfigDict(TypedDict):
    path: str
    encoding: str
    output: str
    pretty_body: bool
    keep_going: bool
