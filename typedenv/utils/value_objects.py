import re
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Union

IPAddress = Union[IPv4Address, IPv6Address]

_PORT_RE = re.compile(r"\d{1,5}", re.ASCII)


@dataclass(frozen=True)
class AddrPort:
    """
    IP address paired with a TCP/UDP port.
    IPv6 addresses are written in brackets: [::1]:8080.
    """
    address: IPAddress
    port: int

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")

    @staticmethod
    def parse(text: str) -> "AddrPort":
        s = str(text or "").strip()
        host, sep, port = s.rpartition(":")
        if not sep or not _PORT_RE.fullmatch(port):
            raise ValueError(f"invalid address/port: {text!r}")
        if host.startswith("["):
            if not host.endswith("]"):
                raise ValueError(f"invalid address/port: {text!r}")
            addr = ip_address(host[1:-1])
            if addr.version != 6:
                raise ValueError(f"bracketed address must be IPv6: {text!r}")
        else:
            addr = ip_address(host)
            if addr.version != 4:
                raise ValueError(f"IPv6 address must be bracketed: {text!r}")
        return AddrPort(addr, int(port))

    def __str__(self) -> str:
        if self.address.version == 6:
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"
