from __future__ import annotations

import asyncio
import logging
import socket
from asyncio.protocols import DatagramProtocol
from asyncio.transports import DatagramTransport
from dataclasses import dataclass, field
from typing import Type

import aiohttp

from ..utils import UpnpDigError
from .description import FetchError, get_device_from_url
from .models import DeviceSummary

logger = logging.getLogger(__name__)

SSDP_BROADCAST_PORT = 1900
SSDP_BROADCAST_ADDR = "239.255.255.250"
SSDP_SEARCH_TARGET = "upnp:rootdevice"

SEND_COUNT = 3
SEND_INTERVAL_SECS = 1


class DiscoveryError(UpnpDigError):
    pass


def search_message(search_target: str, mx: int) -> bytes:
    params = [
        "M-SEARCH * HTTP/1.1",
        f"HOST: {SSDP_BROADCAST_ADDR}:{SSDP_BROADCAST_PORT}",
        'MAN: "ssdp:discover"',
        f"MX: {mx}",
        f"ST: {search_target}",
        "",
        "",
    ]
    return "\r\n".join(params).encode("UTF-8")


def parse_ssdp_response(data: bytes) -> dict[str, str]:
    """Header names are lower-cased, the status line is dropped."""
    info = [a.split(":", 1) for a in data.decode("UTF-8", "replace").split("\r\n")[1:]]
    return dict([(a[0].strip().lower(), a[1].strip()) for a in info if len(a) >= 2])


def get_protocol(discover: SsdpDiscover) -> Type[DatagramProtocol]:
    @dataclass
    class SsdpProtocol(DatagramProtocol):
        transport: DatagramTransport | None = None
        is_connected: bool = False
        send_task: asyncio.Task | None = None

        def __post_init__(self):
            discover.protocol = self

        def connection_made(self, transport: DatagramTransport):
            self.transport = transport
            self.is_connected = True
            logger.debug("ssdp search socket open")
            self.send_task = asyncio.create_task(self.send_loop())

        async def send_loop(self):
            for _ in range(SEND_COUNT):
                if not self.is_connected or self.transport is None:
                    return
                self.transport.sendto(
                    discover.message, (SSDP_BROADCAST_ADDR, SSDP_BROADCAST_PORT)
                )
                await asyncio.sleep(SEND_INTERVAL_SECS)

        def datagram_received(self, data: bytes, addr: tuple[str, int]):
            headers = parse_ssdp_response(data)
            location = headers.get("location")
            if not location:
                logger.debug("ssdp response without location from %s", addr[0])
                return
            discover.on_location(location)

        def error_received(self, exc: Exception):
            logger.error("ssdp error received %s", exc)

        def connection_lost(self, exc: Exception | None):
            logger.debug("ssdp search socket closed")
            if exc:
                logger.error("ssdp connection lost %s", exc)
            self.is_connected = False
            self.transport = None
            if self.send_task is not None:
                self.send_task.cancel()
                self.send_task = None

    return SsdpProtocol


@dataclass
class SsdpDiscover:
    timeout: float
    search_target: str = SSDP_SEARCH_TARGET

    device_locations: list[str] = field(default_factory=list, init=False)
    protocol: DatagramProtocol | None = field(default=None, init=False)
    socket: socket.socket | None = field(default=None, init=False)

    @property
    def message(self) -> bytes:
        mx = max(1, min(int(self.timeout), 5))
        return search_message(self.search_target, mx)

    def on_location(self, location_url: str):
        if location_url not in self.device_locations:
            logger.debug("ssdp found %s", location_url)
            self.device_locations.append(location_url)

    def init_socket(self):
        self.socket = socket.socket(
            socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP
        )
        self.socket.bind(("", 0))
        self.socket.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, 4)
        self.socket.setblocking(False)

    async def search(self) -> list[str]:
        loop = asyncio.get_running_loop()
        try:
            self.init_socket()
            transport, _ = await loop.create_datagram_endpoint(
                get_protocol(self), sock=self.socket
            )
        except OSError as exc:
            if self.socket is not None:
                self.socket.close()
            raise DiscoveryError(f"cannot open ssdp socket: {exc}") from exc

        try:
            await asyncio.sleep(self.timeout)
        finally:
            transport.close()

        return list(self.device_locations)


async def discover(
    timeout: float, client: aiohttp.ClientSession | None = None
) -> list[DeviceSummary]:
    """Search for root devices and summarize each one's description.

    Locations whose description cannot be fetched are logged and left out.
    """
    locations = await SsdpDiscover(timeout).search()
    logger.info("ssdp discovered %s locations", len(locations))

    results = await asyncio.gather(
        *[get_device_from_url(location, client) for location in locations],
        return_exceptions=True,
    )

    devices = []
    for location, result in zip(locations, results):
        if isinstance(result, FetchError):
            logger.warning("skip %s %s", location, result)
            continue
        if isinstance(result, BaseException):
            raise result
        device, url = result
        devices.append(DeviceSummary.from_device(device, url))
    return devices
