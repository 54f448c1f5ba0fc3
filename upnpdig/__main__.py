"""upnpdig: discover and describe UPnP devices on your network.

* discover: find UPnP devices on the local network
* describe: show a device description tree, or one service's actions and
  state variables, from a device description URL
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Awaitable, TextIO

from .settings import settings
from .upnp import (
    discover,
    get_device_from_url,
    get_service_from_url,
    locate_service,
    print_device,
    print_discovered,
    print_service,
)
from .utils import TabWriter, UpnpDigError, g

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upnpdig", description="UPnP device browser"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    describe_parser = commands.add_parser(
        "describe",
        help="Describe UPnP devices and services on your network",
        description="Show properties of a UPnP device, or the actions and "
        "state variables of one of its services",
    )
    describe_parser.add_argument(
        "-d",
        "--device",
        default=settings.device_url,
        help="Device description URL (default: %(default)s)",
    )
    describe_parser.add_argument(
        "-s", "--service", default="", help="ServiceId to describe"
    )

    discover_parser = commands.add_parser(
        "discover", help="Discover UPnP devices on your network"
    )
    discover_parser.add_argument(
        "-t",
        "--timeout",
        type=int,
        default=settings.discover_timeout,
        help="Discovery timeout in seconds (default: %(default)s)",
    )
    return parser


async def describe(device_url: str, service_id: str, w: TextIO):
    device, location = await get_device_from_url(device_url)
    if not service_id:
        print_device(w, device)
        return

    service_location = locate_service(location, device, service_id)
    logger.info("service %s described at %s", service_id, service_location.url)
    service = await get_service_from_url(service_location.url)
    print_service(w, service)


async def discover_devices(timeout: int, w: TextIO):
    print_discovered(w, await discover(timeout))


async def run(command: Awaitable[None]):
    g.create_session()
    try:
        await command
    finally:
        await g.http.close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    w = TabWriter(sys.stdout)
    if args.command == "describe":
        command = describe(args.device, args.service, w)
    else:
        command = discover_devices(args.timeout, w)

    try:
        asyncio.run(run(command))
    except UpnpDigError as exc:
        logger.error("%s", exc)
        return 1

    w.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
