"""Network properties of nodes and interfaces: addresses, masks and MACs."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass, field
from typing import Any, Union

NODE_NAME_SIZE = 16
IF_NAME_SIZE = 16
IP_ADDR_SIZE = 16
MAC_SIZE = 48

_U32 = 0xFFFFFFFF


@dataclass
class NodeNetworkProp:
    """Layer 3 properties of a node: its loopback address."""

    is_loopback: bool = False
    loopback_addr: str = ""


@dataclass
class InterfaceNetworkProp:
    """Properties of an interface: MAC address and optional IP address and mask."""

    mac: bytes = field(default_factory=lambda: bytes(MAC_SIZE))
    is_ip: bool = False
    ip_addr: str = ""
    mask: int = 0


def _fit(text: str, size: int) -> str:
    return text[: size - 1]


def hash_code(data: Union[str, bytes], size: int) -> int:
    """Hash ``size`` bytes of ``data`` (zero padded) into an unsigned 32-bit value."""
    raw = data.encode() if isinstance(data, str) else bytes(data)
    raw = raw[:size].ljust(size, b"\0")
    value = 0
    for byte in raw:
        signed = byte - 256 if byte >= 128 else byte
        value = ((value + signed) * 97) & _U32
    return value


def set_loopback_address(node: Any, ip_addr: str) -> None:
    """Give ``node`` a loopback address."""
    if not ip_addr:
        raise ValueError("loopback address must not be empty")
    node.network.is_loopback = True
    node.network.loopback_addr = _fit(ip_addr, IP_ADDR_SIZE)


def _interface(node: Any, if_name: str) -> Any:
    interface = node.interface_by_name(if_name)
    if interface is None:
        raise KeyError(f"node {node.name!r} has no interface {if_name!r}")
    return interface


def set_interface_ip_address(node: Any, if_name: str, ip_addr: str, mask: int) -> None:
    """Put the interface ``if_name`` of ``node`` into layer 3 mode with an address."""
    interface = _interface(node, if_name)
    if not 0 <= mask <= 32:
        raise ValueError(f"mask must be between 0 and 32, not {mask}")
    prop = interface.network
    prop.ip_addr = _fit(ip_addr, IP_ADDR_SIZE)
    prop.mask = mask
    prop.is_ip = True


def remove_interface_ip_address(node: Any, if_name: str) -> None:
    """Clear the IP address and mask of the interface ``if_name`` of ``node``."""
    prop = _interface(node, if_name).network
    prop.ip_addr = ""
    prop.mask = 0
    prop.is_ip = False


def assign_mac_address(interface: Any) -> None:
    """Derive a MAC address for ``interface`` from its node's and its own name."""
    node = interface.node
    if node is None:
        return
    value = hash_code(node.name, NODE_NAME_SIZE)
    value = (value * hash_code(interface.name, IF_NAME_SIZE)) & _U32
    interface.network.mac = struct.pack("<I", value).ljust(MAC_SIZE, b"\0")


def apply_mask(prefix: str, mask: int) -> str:
    """Return the network address of ``prefix`` under a mask of ``mask`` bits."""
    network = ipaddress.IPv4Network(f"{prefix}/{mask}", strict=False)
    return str(network.network_address)