import argparse
import json
import logging
from typing import List, Optional

from .errors import IOFailure
from .http import HTTPRequest
from .parser import Parser
from .typings import ConfigDict

logger = logging.getLogger(__name__)

REQUEST_SEPARATOR = "###"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="List the requests of a .http file")
    parser.add_argument("path", help="path to a .http file", type=str)
    parser.add_argument("--encoding", help="file encoding", default="utf-8", type=str)
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        help="print the requests as a json array",
        action="store_const",
        dest="output",
        const="json",
        default="http",
    )
    output.add_argument(
        "--list",
        help="print one line per request",
        action="store_const",
        dest="output",
        const="list",
    )
    parser.add_argument(
        "--pretty-body",
        help="indent bodies that are valid json",
        action="store_true",
    )
    parser.add_argument(
        "--keep-going",
        help="report malformed requests and continue with the rest of the file. "
             "Note: parsing resumes right after the failed line, "
             "not at the next ### separator",
        action="store_true",
    )
    parser.add_argument("-v", "--verbose", help="debug logging", action="store_true")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = {
        "path": args.path,
        "encoding": args.encoding,
        "output": args.output,
        "pretty_body": args.pretty_body,
        "keep_going": args.keep_going,
    }  # type: ConfigDict
    logger.debug(f"httpfile setting: {config}")
    return run(config)


def run(config: ConfigDict) -> int:
    try:
        fh = open(config["path"], "r", encoding=config["encoding"])
    except (OSError, LookupError) as err:
        logger.error(f"Couldn't open {config['path']}: {err}")
        return 1

    requests = []
    with fh:
        for result in Parser(fh).results():
            if result.ok:
                requests.append(result.request)
                continue
            if not config["keep_going"] or isinstance(result.error, IOFailure):
                logger.error(f"{config['path']}: {result.error}")
                return 1
            logger.warning(f"{config['path']}: skipped malformed request: {result.error}")

    logger.debug(f"Parsed {len(requests)} request(s) from {config['path']}")
    print(render(requests, config["output"], config["pretty_body"]))
    return 0


def render(requests: List[HTTPRequest], output: str = "http", pretty_body: bool = False) -> str:
    if output == "json":
        http_requests = []
        for request in requests:
            http_request = request.as_dict()
            if pretty_body:
                http_request["body"] = request.pretty_body()
            http_requests.append(http_request)
        return json.dumps(http_requests, indent=2, ensure_ascii=False)

    if output == "list":
        lines = []
        for index, request in enumerate(requests, 1):
            line = f"{index:>3} {request.method} {request.url} {request.version}"
            if request.comment:
                line = f"{line}  {request.comment}"
            lines.append(line)
        return "\n".join(lines)

    blocks = []
    for request in requests:
        blocks.append(request.to_http(pretty_body=pretty_body))
    return f"\n{REQUEST_SEPARATOR}\n".join(blocks)
