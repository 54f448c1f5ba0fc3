from __future__ import annotations

import logging
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, TextIO, overload

import aiohttp
import xmltodict
from dotmap import DotMap

from .settings import settings

logger = logging.getLogger(__name__)

UPNP_DEVICE_NS = "urn:schemas-upnp-org:device-1-0"
UPNP_SERVICE_NS = "urn:schemas-upnp-org:service-1-0"


class UpnpDigError(Exception):
    pass


@dataclass
class G:
    http: aiohttp.ClientSession = field(init=False)
    verify_ssl: bool = field(default=settings.verify_ssl, init=False)

    def create_session(self):
        self.http = aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(ssl=self.verify_ssl),
            timeout=aiohttp.ClientTimeout(total=settings.http_timeout),
            headers={"User-Agent": settings.user_agent},
        )


g = G()


@overload
def xml2dict(xml: str | bytes, as_dotmap: bool = True) -> DotMap:
    ...


@overload
def xml2dict(xml: str | bytes, as_dotmap: bool = False) -> dict:
    ...


def xml2dict(xml: str | bytes, as_dotmap: bool = True) -> DotMap | dict:
    parsed = xmltodict.parse(
        xml,
        process_namespaces=True,
        namespaces={
            UPNP_DEVICE_NS: None,
            UPNP_SERVICE_NS: None,
        },
    )
    if as_dotmap:
        return DotMap(parsed, _dynamic=False)
    else:
        return parsed


def ensure_list(value: Any) -> list:
    """xmltodict collapses a single child element into a scalar."""
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


class TabWriter:
    """Buffer tab-separated cells and pad them into aligned columns on flush.

    A cell is text terminated by a tab; the last cell of a line is never
    padded. Consecutive lines sharing a column form a column block whose
    width is the widest cell in the block plus ``padding``. This is the
    layout of Go's ``text/tabwriter`` with a space pad character.
    """

    def __init__(self, output: TextIO, minwidth: int = 0, padding: int = 1):
        self.output = output
        self.minwidth = minwidth
        self.padding = padding
        self._buffer = StringIO()

    def write(self, text: str) -> int:
        return self._buffer.write(text)

    def flush(self):
        text = self._buffer.getvalue()
        self._buffer = StringIO()
        self.output.write(align_columns(text, self.minwidth, self.padding))
        self.output.flush()


def align_columns(text: str, minwidth: int = 0, padding: int = 1) -> str:
    lines = text.split("\n")
    # text after the last newline is passed through untouched
    tail = lines.pop()
    cells = [line.split("\t") for line in lines]
    out: list[str] = []

    def write_lines(start: int, end: int, widths: list[int]):
        for row in cells[start:end]:
            parts = []
            for j, cell in enumerate(row):
                if j < len(widths):
                    parts.append(cell.ljust(widths[j]))
                else:
                    parts.append(cell)
            out.append("".join(parts))

    def format_block(line0: int, line1: int, widths: list[int]):
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(cells[this]) - 1:
                this += 1
                continue

            write_lines(line0, this, widths)
            line0 = this

            width = minwidth
            while this < line1 and column < len(cells[this]) - 1:
                width = max(width, len(cells[this][column]) + padding)
                this += 1

            format_block(line0, this, widths + [width])
            line0 = this

        write_lines(line0, line1, widths)

    format_block(0, len(cells), [])
    return "".join(line + "\n" for line in out) + tail
