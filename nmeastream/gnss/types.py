"""GPS fix state assembled from decoded NMEA sentences.

Design Decisions:
    1. Zero rather than None for unset numbers: receivers send empty fields
       while searching and the decoders store those as 0, so a fresh
       ``GPSFix`` and one fed only empty sentences look the same.

    2. Lock is private: ``GPSFix.locked()`` only changes through
       ``set_lock()``, which reports whether the state actually flipped so
       ``GPSService`` can raise ``on_lock_state_changed`` exactly once per
       transition.
"""

import math
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_COMPASS_ABBREVIATIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
_COMPASS_NAMES = (
    "North",
    "North East",
    "East",
    "South East",
    "South",
    "South West",
    "West",
    "North West",
)

_FIX_STATUS_NAMES = {"A": "Active", "V": "Void"}
_FIX_TYPE_NAMES = {1: "None", 2: "2D", 3: "3D"}
_FIX_QUALITY_NAMES = {
    0: "Invalid",
    1: "Standard",
    2: "DGPS",
    3: "PPS fix",
    4: "Real Time Kinetic",
    5: "Real Time Kinetic (float)",
    6: "Estimate",
}

# 2drms 95% accuracy per unit of dilution, from GPS chip datasheets
_HORIZONTAL_ACCURACY_FACTOR = 4.0
_VERTICAL_ACCURACY_FACTOR = 6.0


@dataclass
class GPSSatellite:
    """One satellite entry from a GSV page.

    Attributes:
        prn: Satellite id.
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees true (0-359).
        snr: Signal to noise ratio in dB (0-99), 0 when not tracking.
    """

    prn: int = 0
    elevation: float = 0.0
    azimuth: float = 0.0
    snr: float = 0.0

    def __str__(self) -> str:
        return (
            f"[PRN: {self.prn:>3}   SNR: {self.snr:>3g} dB"
            f"    Azimuth: {self.azimuth:>3g} deg"
            f"    Elevation: {self.elevation:>3g} deg  ]"
        )


@dataclass
class GPSAlmanac:
    """Satellites in view, collected over the pages of a GSV cycle."""

    satellites: list[GPSSatellite] = field(default_factory=list)
    visible_size: int = 0
    last_page: int = 0
    total_pages: int = 0
    processed_pages: int = 0

    def clear(self) -> None:
        """Forget every satellite and the page bookkeeping."""
        self.last_page = 0
        self.total_pages = 0
        self.processed_pages = 0
        self.visible_size = 0
        self.satellites.clear()

    def update_satellite(self, satellite: GPSSatellite) -> None:
        # More satellites than announced means the first page of a new cycle
        # was missed; start over.
        if len(self.satellites) > self.visible_size:
            self.clear()
        self.satellites.append(satellite)

    def percent_complete(self) -> float:
        if self.total_pages == 0:
            return 0.0
        return self.processed_pages / self.total_pages * 100.0

    def _tracked_snrs(self) -> list[float]:
        return [satellite.snr for satellite in self.satellites if satellite.snr > 0]

    def average_snr(self) -> float:
        """Mean SNR over satellites with a signal, 0 if there are none."""
        snrs = self._tracked_snrs()
        if not snrs:
            return 0.0
        return sum(snrs) / len(snrs)

    def min_snr(self) -> float:
        return min(self._tracked_snrs(), default=0.0)

    def max_snr(self) -> float:
        return max(self._tracked_snrs(), default=0.0)


@dataclass
class GPSTimestamp:
    """UTC time and date as reported by the receiver.

    ``raw_time`` (hhmmss.sss) and ``raw_date`` (ddmmyy) keep the values
    exactly as received; the broken-down fields are derived from them.
    """

    hour: int = 0
    minute: int = 0
    second: float = 0.0
    month: int = 1
    day: int = 1
    year: int = 1970
    raw_time: float = 0.0
    raw_date: int = 0

    @staticmethod
    def month_name(index: int) -> str:
        """English month name for a 1-based month index."""
        if not 1 <= index <= 12:
            return f"[month:{index}]"
        return _MONTH_NAMES[index - 1]

    def set_time(self, raw_time: float) -> None:
        """Set from an NMEA time stamp, hhmmss.sss."""
        self.raw_time = raw_time
        self.hour = math.trunc(raw_time / 10000.0)
        self.minute = math.trunc((raw_time - self.hour * 10000) / 100.0)
        self.second = raw_time - self.minute * 100 - self.hour * 10000

    def set_date(self, raw_date: int) -> None:
        """Set from an NMEA date stamp, ddmmyy; 0 means 1970-01-01."""
        self.raw_date = raw_date
        if raw_date == 0:
            self.month = 1
            self.day = 1
            self.year = 1970
            return
        self.day = raw_date // 10000
        self.month = (raw_date - 10000 * self.day) // 100
        self.year = raw_date - 10000 * self.day - 100 * self.month + 2000

    def get_time(self) -> int:
        """Seconds since the Unix epoch for this UTC timestamp.

        Out of range fields carry over instead of raising: month 13 is January
        of the next year and day 0 is the last day of the previous month.
        Returns -1 if the result is not representable.
        """
        year = self.year + (self.month - 1) // 12
        month = (self.month - 1) % 12 + 1
        try:
            moment = datetime(year, month, 1, tzinfo=timezone.utc) + timedelta(
                days=self.day - 1,
                hours=self.hour,
                minutes=self.minute,
                seconds=int(self.second),
            )
        except (OverflowError, ValueError):
            return -1
        return int(moment.timestamp())

    def __str__(self) -> str:
        return (
            f"{self.hour}h {self.minute}m {self.second:g}s"
            f"  {self.month_name(self.month)} {self.day} {self.year}"
        )


@dataclass
class GPSFix:
    """Current position fix, aggregated by ``GPSService``.

    Attributes:
        status: RMC status, 'A' = active, 'V' = void (no lock).
        type: GSA fix type, 1 = none, 2 = 2D, 3 = 3D.
        quality: GGA fix quality:
            0 = invalid, 1 = GPS (SPS), 2 = DGPS, 3 = PPS,
            4 = RTK, 5 = float RTK, 6 = estimated (dead reckoning)
        dilution: Position dilution of precision (PDOP).
        horizontal_dilution: HDOP, best = 1, worst > 20.
        vertical_dilution: VDOP.
        altitude: Meters above mean sea level.
        latitude: Decimal degrees, positive north.
        longitude: Decimal degrees, positive east.
        speed: Ground speed in km/h.
        travel_angle: Track in degrees true (0-360).
        tracking_satellites: Satellites used in the fix.
        visible_satellites: Satellites in view.
        ok_to_send: Last PSRF150 readiness flag from a SiRF receiver.
    """

    almanac: GPSAlmanac = field(default_factory=GPSAlmanac)
    timestamp: GPSTimestamp = field(default_factory=GPSTimestamp)
    status: str = "V"
    type: int = 1
    quality: int = 0
    dilution: float = 0.0
    horizontal_dilution: float = 0.0
    vertical_dilution: float = 0.0
    altitude: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    speed: float = 0.0
    travel_angle: float = 0.0
    tracking_satellites: int = 0
    visible_satellites: int = 0
    ok_to_send: bool = False
    _has_lock: bool = field(default=False, init=False, repr=False)

    def locked(self) -> bool:
        return self._has_lock

    def set_lock(self, locked: bool) -> bool:
        """Set the lock state; returns True only if it changed."""
        if self._has_lock != locked:
            self._has_lock = locked
            return True
        return False

    def horizontal_accuracy(self) -> float:
        """Horizontal accuracy estimate in meters."""
        return _HORIZONTAL_ACCURACY_FACTOR * self.horizontal_dilution

    def vertical_accuracy(self) -> float:
        """Vertical accuracy estimate in meters."""
        return _VERTICAL_ACCURACY_FACTOR * self.vertical_dilution

    def has_estimate(self) -> bool:
        """True if there is a position or a dead reckoning estimate."""
        return (self.latitude != 0 and self.longitude != 0) or self.quality == 6

    def time_since_last_update(self) -> float:
        """Seconds between the fix timestamp and now."""
        return time.time() - self.timestamp.get_time()

    @staticmethod
    def travel_angle_to_compass_direction(degrees: float, abbreviate: bool = False) -> str:
        """Name the 8-point compass direction nearest to ``degrees``.

        Example:
            >>> GPSFix.travel_angle_to_compass_direction(92.0)
            'East'
            >>> GPSFix.travel_angle_to_compass_direction(-45.0, abbreviate=True)
            'NW'
        """
        # Halves round away from zero; the modulo folds negative angles.
        eighths = degrees / 360.0 * 8.0
        sector = int(math.copysign(math.floor(abs(eighths) + 0.5), eighths)) % 8
        names = _COMPASS_ABBREVIATIONS if abbreviate else _COMPASS_NAMES
        return names[sector]

    def __str__(self) -> str:
        almanac = self.almanac
        lines = [
            "========================== GPS FIX ================================",
            f" Status: \t\t{'LOCK!' if self._has_lock else 'SEARCHING...'}",
            f" Satellites: \t\t{self.tracking_satellites} (tracking) of "
            f"{self.visible_satellites} (visible)",
            " < Fix Details >",
            f"   Age:                {int(self.time_since_last_update())} s",
            f"   Timestamp:          {self.timestamp}   UTC   \n\t\t\t"
            f"(raw: {self.timestamp.raw_time:g} time, {self.timestamp.raw_date} date)",
            f"   Raw Status:         {self.status}  "
            f"({_FIX_STATUS_NAMES.get(self.status, 'Unknown')})",
            f"   Type:               {self.type}  "
            f"({_FIX_TYPE_NAMES.get(self.type, 'Unknown')})",
            f"   Quality:            {self.quality}  "
            f"({_FIX_QUALITY_NAMES.get(self.quality, 'Unknown')})",
            f"   Lat/Lon (N,E):      {self.latitude:.6f}' N, {self.longitude:.6f}' E",
            f"   DOP (P,H,V):        {self.dilution:g},   {self.horizontal_dilution:g},"
            f"   {self.vertical_dilution:g}",
            f"   Accuracy(H,V):      {self.horizontal_accuracy():g} m,"
            f"   {self.vertical_accuracy():g} m",
            f"   Altitude:           {self.altitude:g} m",
            f"   Speed:              {self.speed:g} km/h",
            f"   Travel Dir:         {self.travel_angle:g} deg  "
            f"[{self.travel_angle_to_compass_direction(self.travel_angle)}]",
            f"   SNR:                avg: {almanac.average_snr():g} dB   "
            f"[min: {almanac.min_snr():g} dB,  max:{almanac.max_snr():g} dB]",
            f" < Almanac ({almanac.percent_complete():g}%) >",
        ]
        if not almanac.satellites:
            lines.append(" > No satellite info in almanac.")
        for index, satellite in enumerate(almanac.satellites, start=1):
            lines.append(f"   [{index:>2}]   {satellite}")
        return "\n".join(lines) + "\n"
