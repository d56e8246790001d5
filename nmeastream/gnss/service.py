"""GPSService: aggregate GPS sentences from an NMEAParser into a GPSFix.

The service registers itself as the named handler for the GPS sentences it
understands. Each decoded sentence updates ``service.fix`` and then raises
two events:

* ``on_lock_state_changed(locked)`` - only when the lock state flipped
* ``on_update()`` - after every successfully decoded sentence

Example::

    parser = NMEAParser()
    gps = GPSService(parser)
    gps.on_lock_state_changed += lambda locked: print("lock" if locked else "lost")
    gps.on_update += lambda: print(gps.fix.latitude, gps.fix.longitude)

    with open("nmea_log.txt") as log:
        for line in log:
            parser.read_line(line.rstrip("\\r\\n"))

Decoding failures surface through the parser's ``read_*`` call as
``NMEAParseError``, tagged with the sentence name.
"""

from collections.abc import Callable

from nmeastream.gnss.gga import decode_gga
from nmeastream.gnss.gsa import decode_gsa
from nmeastream.gnss.gsv import decode_gsv
from nmeastream.gnss.psrf150 import decode_psrf150
from nmeastream.gnss.rmc import decode_rmc
from nmeastream.gnss.types import GPSFix
from nmeastream.gnss.vtg import decode_vtg
from nmeastream.nmea.errors import NMEAParseError, NumberConversionError
from nmeastream.nmea.events import Event
from nmeastream.nmea.types import NMEASentence
from nmeastream.parser import NMEAParser

__all__ = ["GPSService"]

Decoder = Callable[[GPSFix, NMEASentence], bool]

_DECODERS: dict[str, Decoder] = {
    "PSRF150": decode_psrf150,
    "GPGGA": decode_gga,
    "GPGSA": decode_gsa,
    "GPGSV": decode_gsv,
    "GPRMC": decode_rmc,
    "GPVTG": decode_vtg,
}


class GPSService:
    """Keeps ``fix`` current from the sentences of one or more parsers.

    Args:
        parser: Parser to attach to immediately.

    Attributes:
        fix: The aggregated fix state.
        on_lock_state_changed: ``Event`` called with the new lock state.
        on_update: ``Event`` called with no arguments after each update.
    """

    def __init__(self, parser: NMEAParser) -> None:
        self.fix = GPSFix()
        self.on_lock_state_changed = Event()
        self.on_update = Event()
        self.attach_to_parser(parser)

    def attach_to_parser(self, parser: NMEAParser) -> None:
        """Install this service's handlers on ``parser``, replacing others."""
        for name, decoder in _DECODERS.items():
            parser.set_sentence_handler(name, self._handler_for(name, decoder))

    def _handler_for(self, name: str, decoder: Decoder) -> Callable[[NMEASentence], None]:
        def handle(nmea: NMEASentence) -> None:
            self._apply(name, decoder, nmea)

        return handle

    def _apply(self, name: str, decoder: Decoder, nmea: NMEASentence) -> None:
        try:
            lock_changed = decoder(self.fix, nmea)
        except NumberConversionError as e:
            raise NMEAParseError(f"GPS Number Bad Format [${name}] :: {e}", nmea) from e
        except NMEAParseError as e:
            raise NMEAParseError(
                f"GPS Data Bad Format [${name}] :: {e.message}", nmea
            ) from e

        if lock_changed:
            self.on_lock_state_changed(self.fix.locked())
        self.on_update()
