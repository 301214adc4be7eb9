import ipaddress
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from miniserve.errors import ConfigurationError

DEFAULT_PORT = 8080
DEFAULT_INTERFACE = "0.0.0.0"

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def validate_path(path) -> Path:
    path = Path(path)
    if path.is_file() or path.is_dir():
        return path
    raise ConfigurationError(
        f"{path}: path either doesn't exist or is not a regular file or a directory"
    )


def validate_port(port) -> int:
    try:
        value = int(port)
    except (TypeError, ValueError):
        raise ConfigurationError(f"invalid port: {port!r}") from None
    if not 0 <= value <= 65535:
        raise ConfigurationError(f"port out of range: {value}")
    return value


def validate_interface(interface) -> IPAddress:
    try:
        return ipaddress.ip_address(interface)
    except ValueError as e:
        raise ConfigurationError(str(e)) from None


@dataclass(frozen=True)
class ServerConfig:
    verbose: bool
    path: Path
    port: int
    interface: IPAddress

    @classmethod
    def create(
        cls,
        path,
        port=DEFAULT_PORT,
        interface=DEFAULT_INTERFACE,
        verbose: bool = False,
    ) -> "ServerConfig":
        """Validate raw values once and build the immutable config"""
        return cls(
            verbose=bool(verbose),
            path=validate_path(path),
            port=validate_port(port),
            interface=validate_interface(interface),
        )

    @property
    def display_host(self) -> str:
        # 0.0.0.0 is not clickable on every platform
        if self.interface.is_unspecified:
            return "localhost"
        if self.interface.version == 6:
            return f"[{self.interface}]"
        return str(self.interface)

    @property
    def url(self) -> str:
        return f"http://{self.display_host}:{self.port}"
