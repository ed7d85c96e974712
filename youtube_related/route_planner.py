"""Egress IP rotation across configured IP blocks."""

from __future__ import annotations

import ipaddress
import logging
import random
from collections.abc import Iterable

from .schemas import LogSink

MAX_ATTEMPTS = 64

IPNetwork = ipaddress.IPv4Network | ipaddress.IPv6Network
IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class RoutePlannerError(RuntimeError):
    """Raised when no usable egress address can be selected."""


class RoutePlanner:
    """Pick a random source address from a set of IP blocks.

    Blocks are weighted by size so every address is equally likely. The
    planner is immutable after construction and safe to share between
    concurrent requests.
    """

    def __init__(self, ip_blocks: Iterable[str], exclude_ips: Iterable[str] | None = None, log: LogSink | None = None):
        self.log = log or logging.getLogger(__name__)
        self.blocks: tuple[IPNetwork, ...] = tuple(ipaddress.ip_network(block.strip(), strict=False) for block in ip_blocks)
        if not self.blocks:
            raise ValueError("RoutePlanner requires at least one IP block")
        self.excluded: frozenset[IPAddress] = frozenset(ipaddress.ip_address(ip.strip()) for ip in exclude_ips or ())
        self._weights = [block.num_addresses for block in self.blocks]
        self._random = random.SystemRandom()

        self.log.debug(f"Loaded {len(self.blocks)} IP blocks ({self.total_addresses} addresses, {len(self.excluded)} excluded)")

    @property
    def total_addresses(self) -> int:
        return sum(self._weights)

    def next_address(self) -> str:
        for _ in range(MAX_ATTEMPTS):
            block = self._random.choices(self.blocks, weights=self._weights, k=1)[0]
            address = block[self._random.randrange(block.num_addresses)]
            if address not in self.excluded:
                self.log.debug(f"Selected egress address {address}")
                return str(address)

        raise RoutePlannerError(f"No available address after {MAX_ATTEMPTS} attempts; check EXCLUDE_IP_ADDRESSES")
