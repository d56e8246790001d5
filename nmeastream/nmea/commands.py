"""Outgoing NMEA command sentences.

Each command renders only its body (the comma separated fields after the
name); ``add_checksum`` wraps any body into the wire format::

    $<name>,<body>*<HH>\\r\\n

where HH is the two-digit uppercase hex XOR of everything between '$' and
'*'. The subclasses cover the SiRF configuration messages:

    $PSRF100,1,9600,8,1,0*0D    Set serial port (Table 2-4)
    $PSRF103,00,01,00,01*25     Query/rate control (Table 2-9)
"""

from dataclasses import dataclass, field
from enum import IntEnum

from nmeastream.nmea.checksum import calculate_checksum, format_checksum
from nmeastream.nmea.types import MessageID

__all__ = [
    "NMEACommand",
    "QueryRateCommand",
    "QueryRateMode",
    "SerialConfigurationCommand",
    "add_checksum",
]


def add_checksum(name: str, body: str) -> str:
    """Build a complete, terminated command sentence.

    Example:
        >>> add_checksum("PSRF103", "00,01,00,01")
        '$PSRF103,00,01,00,01*25\\r\\n'
    """
    content = f"{name},{body}"
    return f"${content}*{format_checksum(calculate_checksum(content))}\r\n"


@dataclass
class NMEACommand:
    """A generic command whose body is given verbatim in ``message``.

    Attributes:
        name: Sentence name without '$' (e.g. "PSRF100").
        message: Body text for generic commands; rewritten by subclasses on
            every ``to_string()`` call.
        checksum: Checksum of the most recent rendering.
    """

    name: str
    message: str = ""
    checksum: int = field(default=0, init=False)

    def render_body(self) -> str:
        return self.message

    def to_string(self) -> str:
        """Render the command with checksum and "\\r\\n" terminator."""
        self.message = self.render_body()
        self.checksum = calculate_checksum(f"{self.name},{self.message}")
        return add_checksum(self.name, self.message)

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class SerialConfigurationCommand(NMEACommand):
    """$PSRF100: switch the receiver's serial port settings (NMEA protocol).

    Attributes:
        baud: 4800, 9600, 19200 or 38400.
        databits: 7 or 8.
        stopbits: 0 or 1.
        parity: 0=none, 1=odd, 2=even.
    """

    name: str = "PSRF100"
    baud: int = 4800
    databits: int = 8
    stopbits: int = 1
    parity: int = 0

    def render_body(self) -> str:
        # Leading 1 selects the NMEA protocol (0 would be SiRF binary)
        return f"1,{self.baud},{self.databits},{self.stopbits},{self.parity}"


class QueryRateMode(IntEnum):
    SETRATE = 0
    QUERY = 1


@dataclass
class QueryRateCommand(NMEACommand):
    """$PSRF103: query a message once, or set its output rate.

    Attributes:
        message_id: Which sentence to query or rate-control.
        mode: ``QueryRateMode.SETRATE`` or ``QueryRateMode.QUERY``.
        rate: Output period in seconds, 0 = off, max 255.
        checksum_enable: 1 to have the receiver append checksums.
    """

    name: str = "PSRF103"
    message_id: MessageID = MessageID.UNKNOWN
    mode: QueryRateMode = QueryRateMode.SETRATE
    rate: int = 0
    checksum_enable: int = 1

    def render_body(self) -> str:
        return ",".join(
            f"{int(value):02d}"
            for value in (self.message_id, self.mode, self.rate, self.checksum_enable)
        )
