"""GPS fix aggregation on top of the NMEA parser."""

from nmeastream.gnss.service import GPSService
from nmeastream.gnss.types import GPSAlmanac, GPSFix, GPSSatellite, GPSTimestamp

__all__ = ["GPSAlmanac", "GPSFix", "GPSSatellite", "GPSService", "GPSTimestamp"]
