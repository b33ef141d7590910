"""The ``ntwrk`` command group: WiFi status, credentials, scans and pings."""

from __future__ import annotations

from typing import Callable, Sequence

from ..network import (
    SSID_NAME_MAX_LENGTH,
    SSID_PASS_MAX_LENGTH,
    EncryptionType,
    Network,
    PingResult,
    WifiStatus,
)
from ..tokens import (
    CommandSyntax,
    Keyword,
    SyntaxToken,
    Token,
    TokenCategory,
    match_syntax,
)

Printer = Callable[..., object]

_IP_TEXT_LIMIT = 28

_STATUS_MESSAGES: dict[WifiStatus, str] = {
    WifiStatus.NO_SHIELD: "No WiFi shield has been detected\r\n",
    WifiStatus.IDLE: "WiFi is idle\r\n",
    WifiStatus.NO_SSID_AVAIL: "No network SSID are available\r\n",
    WifiStatus.SCAN_COMPLETED: "Scan of WiFi networks has completed\r\n",
    WifiStatus.CONNECTED: "Connected to a WiFi network\r\n",
    WifiStatus.CONNECT_FAILED: "All attempts to connect to a network failed\r\n",
    WifiStatus.CONNECTION_LOST: "WiFi connection has been lost\r\n",
    WifiStatus.DISCONNECTED: "Wifi has disconnected from a network\r\n",
    WifiStatus.AP_LISTENING: "WiFi is listening for connections\r\n",
    WifiStatus.AP_CONNECTED: "A device connected to our WiFi\r\n",
}
_STATUS_FALLBACK = "WL_AP_FAILED\r\n"

_PING_MESSAGES: dict[PingResult, str] = {
    PingResult.DEST_UNREACHABLE: "Destination unreachable",
    PingResult.TIMEOUT: "Timed out",
    PingResult.UNKNOWN_HOST: "Unable to resolve host",
    PingResult.ERROR: "Error",
}
_PING_SUCCESS = "Successful"

_ENCRYPTION_NAMES: dict[EncryptionType, str] = {
    EncryptionType.WEP: "WEP",
    EncryptionType.TKIP: "WPA",
    EncryptionType.CCMP: "WPA2",
    EncryptionType.NONE: "None",
    EncryptionType.AUTO: "Auto",
}
_ENCRYPTION_FALLBACK = "Unknown"


def _keyword(code: Keyword) -> SyntaxToken:
    return SyntaxToken(TokenCategory.KEYWORD, code)


def _overlay(current: str, new: str) -> str:
    """Write ``new`` over the start of ``current``, keeping what lies beyond."""
    return new + current[len(new):]


class NetworkCommands:
    """Runs ``ntwrk ...`` command lines against a :class:`Network`.

    ``out`` passed to the methods is a printf-style callable taking a
    format string and its arguments, such as ``Console.printf``.
    """

    def __init__(self, network: Network) -> None:
        self.network = network
        ntwrk = _keyword(Keyword.NTWRK)
        get = _keyword(Keyword.GET)
        put = _keyword(Keyword.SET)
        ssid = _keyword(Keyword.SSID)
        text = SyntaxToken(TokenCategory.STRING)
        self._syntax = (
            CommandSyntax((ntwrk, _keyword(Keyword.CONNECT)), self._connect),
            CommandSyntax((ntwrk, _keyword(Keyword.HELP)), self._help),
            CommandSyntax((ntwrk, _keyword(Keyword.SCAN)), self._scan),
            CommandSyntax((ntwrk, _keyword(Keyword.STATUS)), self._status),
            CommandSyntax((ntwrk, get, ssid), self._get_ssid),
            CommandSyntax((ntwrk, get, _keyword(Keyword.IP)), self._get_ip),
            CommandSyntax(
                (ntwrk, _keyword(Keyword.PING), SyntaxToken(TokenCategory.DECIMAL)),
                self._ping,
            ),
            CommandSyntax(
                (ntwrk, get, ssid, _keyword(Keyword.NAME)), self._get_ssid_name
            ),
            CommandSyntax(
                (ntwrk, get, ssid, _keyword(Keyword.PASS)), self._get_ssid_pass
            ),
            CommandSyntax(
                (ntwrk, put, ssid, _keyword(Keyword.NAME), text), self._set_ssid_name
            ),
            CommandSyntax(
                (ntwrk, put, ssid, _keyword(Keyword.PASS), text), self._set_ssid_pass
            ),
        )

    def root_help(self, out: Printer) -> None:
        """Print the group's line of the root help."""
        out("      ntwrk - Issue commands to the network module")
        out("\r\n")

    def dispatch(self, tokens: Sequence[Token], out: Printer) -> bool:
        """Run the command ``tokens`` form, if any; report whether one ran."""
        entry = match_syntax(self._syntax, tokens)
        if entry is None:
            return False
        entry.action(tokens, out)
        return True

    def _connect(self, tokens: Sequence[Token], out: Printer) -> None:
        ssid = self.network.ssid
        if not ssid.name:
            out("ERROR: Network SSID name not set\r\n")
        elif not ssid.password:
            out("ERROR: Network password not set\r\n")
        else:
            out("Connecting to %s\r\n", ssid.name)
            self.network.backend.begin(ssid.name, ssid.password)

    def _get_ip(self, tokens: Sequence[Token], out: Printer) -> None:
        address = self.network.backend.local_ip()[:_IP_TEXT_LIMIT]
        out("Board's IP: %s\r\n", address)

    def _get_ssid(self, tokens: Sequence[Token], out: Printer) -> None:
        out("    SSID Name: %s\r\n", self.network.ssid.name)
        out("SSID Password: %s\r\n", self.network.ssid.password)

    def _get_ssid_pass(self, tokens: Sequence[Token], out: Printer) -> None:
        out("SSID Password: %s\r\n", self.network.ssid.password)

    def _get_ssid_name(self, tokens: Sequence[Token], out: Printer) -> None:
        out("SSID Name: %s\r\n", self.network.ssid.name)

    def _help(self, tokens: Sequence[Token], out: Printer) -> None:
        out("ntwrk command actions\r\n\r\n")
        out("status - Retrieve the current network status\r\n")

    def _ping(self, tokens: Sequence[Token], out: Printer) -> None:
        host = tokens[2].text
        out("Pinging: %s : ", host)
        result = self.network.backend.ping(host)
        out(_PING_MESSAGES.get(result, _PING_SUCCESS))

    def _scan(self, tokens: Sequence[Token], out: Printer) -> None:
        found = self.network.backend.scan()
        out("WiFi networksFound: %d\r\n", len(found))
        for number, result in enumerate(found, start=1):
            out(
                "\r\n%d) %s\r\nSignal %d dBm\tEncryption: ",
                number,
                result.ssid,
                result.rssi,
            )
            out(_ENCRYPTION_NAMES.get(result.encryption, _ENCRYPTION_FALLBACK))
            out("\r\n")

    def _set_ssid_name(self, tokens: Sequence[Token], out: Printer) -> None:
        value = tokens[4].text
        if len(value) > SSID_NAME_MAX_LENGTH:
            out(
                "Supplied SSID Name is more than the %d character alloted.\r\n",
                SSID_NAME_MAX_LENGTH,
            )
            return
        ssid = self.network.ssid
        ssid.name = _overlay(ssid.name, value)
        out("Network SSID Name has been updated.\r\n")

    def _set_ssid_pass(self, tokens: Sequence[Token], out: Printer) -> None:
        value = tokens[4].text
        if len(value) > SSID_PASS_MAX_LENGTH:
            out(
                "Supplied SSID password is more than the %d character alloted.\r\n",
                SSID_PASS_MAX_LENGTH,
            )
            return
        ssid = self.network.ssid
        ssid.password = _overlay(ssid.password, value)
        out("Network SSID Password has been updated.\r\n")

    def _status(self, tokens: Sequence[Token], out: Printer) -> None:
        out(_STATUS_MESSAGES.get(self.network.status, _STATUS_FALLBACK))