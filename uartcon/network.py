"""Network state: the stored SSID credentials and the latest WiFi status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

SSID_NAME_MAX_LENGTH = 25
SSID_PASS_MAX_LENGTH = 25


class WifiStatus(Enum):
    """Status reported by the WiFi module."""

    IDLE = 0
    NO_SSID_AVAIL = 1
    SCAN_COMPLETED = 2
    CONNECTED = 3
    CONNECT_FAILED = 4
    CONNECTION_LOST = 5
    DISCONNECTED = 6
    AP_LISTENING = 7
    AP_CONNECTED = 8
    AP_FAILED = 9
    NO_MODULE = 255
    NO_SHIELD = 255


class EncryptionType(Enum):
    """Encryption used by a scanned network."""

    TKIP = 2
    CCMP = 4
    WEP = 5
    NONE = 7
    AUTO = 8
    UNKNOWN = 255


class PingResult(Enum):
    """Outcome of pinging a host."""

    SUCCESS = 0
    DEST_UNREACHABLE = -1
    TIMEOUT = -2
    UNKNOWN_HOST = -3
    ERROR = -4


@dataclass(frozen=True)
class ScanResult:
    """One network found by a scan."""

    ssid: str
    rssi: int
    encryption: EncryptionType


class WifiBackend(Protocol):
    """The WiFi module the network layer talks to."""

    def status(self) -> WifiStatus:
        """Return the module's current status."""

    def begin(self, ssid: str, password: str) -> None:
        """Start connecting to the network ``ssid``."""

    def local_ip(self) -> str:
        """Return the module's IP address as dotted text."""

    def ping(self, address: str) -> PingResult:
        """Ping ``address`` and report the outcome."""

    def scan(self) -> list[ScanResult]:
        """Scan for networks in range."""


@dataclass
class SsidInfo:
    """Credentials of the network to join."""

    name: str = ""
    password: str = ""

    def clear(self) -> None:
        self.name = ""
        self.password = ""


class Network:
    """Keeps the WiFi status and SSID credentials for the commands."""

    def __init__(self, backend: WifiBackend) -> None:
        self.backend = backend
        self.ssid = SsidInfo()
        self.status = WifiStatus.NO_MODULE

    def configure(self) -> SsidInfo:
        """Read the current status and reset the stored credentials."""
        self.status = self.backend.status()
        self.ssid.clear()
        return self.ssid

    def action(self) -> None:
        """Refresh the stored WiFi status."""
        self.status = self.backend.status()