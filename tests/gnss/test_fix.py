"""Tests for GPS fix data types."""

from datetime import datetime, timezone

import pytest

from nmeastream.gnss import GPSFix
from nmeastream.gnss.types import GPSAlmanac, GPSSatellite, GPSTimestamp


class TestGPSTimestamp:
    """Tests for GPSTimestamp class."""

    def test_defaults_to_epoch(self):
        assert GPSTimestamp().get_time() == 0

    def test_set_time(self):
        timestamp = GPSTimestamp()
        timestamp.set_time(123519.5)
        assert timestamp.hour == 12
        assert timestamp.minute == 35
        assert timestamp.second == pytest.approx(19.5)

    def test_set_date(self):
        timestamp = GPSTimestamp()
        timestamp.set_date(191024)
        assert (timestamp.day, timestamp.month, timestamp.year) == (19, 10, 2024)

    def test_zero_date_is_epoch(self):
        timestamp = GPSTimestamp()
        timestamp.set_date(191024)
        timestamp.set_date(0)
        assert (timestamp.day, timestamp.month, timestamp.year) == (1, 1, 1970)

    def test_get_time_is_utc(self):
        timestamp = GPSTimestamp()
        timestamp.set_date(191024)
        timestamp.set_time(81836.0)
        expected = datetime(2024, 10, 19, 8, 18, 36, tzinfo=timezone.utc)
        assert timestamp.get_time() == int(expected.timestamp())

    @pytest.mark.parametrize(
        "raw_date, expected",
        [
            (11300, datetime(2001, 1, 1, tzinfo=timezone.utc)),
            (10000, datetime(1999, 12, 1, tzinfo=timezone.utc)),
            (1024, datetime(2024, 9, 30, tzinfo=timezone.utc)),
        ],
    )
    def test_out_of_range_date_carries_over(self, raw_date, expected):
        timestamp = GPSTimestamp()
        timestamp.set_date(raw_date)
        assert timestamp.get_time() == int(expected.timestamp())

    def test_unrepresentable_time(self):
        timestamp = GPSTimestamp()
        timestamp.set_time(1e30)
        assert timestamp.get_time() == -1

    def test_month_name(self):
        assert GPSTimestamp.month_name(1) == "January"
        assert GPSTimestamp.month_name(12) == "December"
        assert GPSTimestamp.month_name(13) == "[month:13]"


class TestGPSAlmanac:
    """Tests for GPSAlmanac class."""

    def test_empty(self):
        almanac = GPSAlmanac()
        assert almanac.percent_complete() == 0.0
        assert almanac.average_snr() == 0.0
        assert almanac.min_snr() == 0.0
        assert almanac.max_snr() == 0.0

    def test_snr_ignores_untracked(self):
        almanac = GPSAlmanac(visible_size=3)
        almanac.update_satellite(GPSSatellite(prn=1, snr=40.0))
        almanac.update_satellite(GPSSatellite(prn=2, snr=0.0))
        almanac.update_satellite(GPSSatellite(prn=3, snr=30.0))
        assert almanac.average_snr() == pytest.approx(35.0)
        assert almanac.min_snr() == pytest.approx(30.0)
        assert almanac.max_snr() == pytest.approx(40.0)

    def test_overfull_almanac_restarts(self):
        almanac = GPSAlmanac(visible_size=1)
        for prn in (1, 2, 3):
            almanac.update_satellite(GPSSatellite(prn=prn))
        assert [s.prn for s in almanac.satellites] == [3]


class TestGPSFix:
    """Tests for GPSFix class."""

    def test_defaults(self):
        fix = GPSFix()
        assert fix.locked() is False
        assert fix.status == "V"
        assert fix.type == 1
        assert fix.has_estimate() is False

    def test_set_lock_reports_change(self):
        fix = GPSFix()
        assert fix.set_lock(True) is True
        assert fix.set_lock(True) is False
        assert fix.set_lock(False) is True

    def test_lock_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            GPSFix(_has_lock=True)

    def test_has_estimate(self):
        assert GPSFix(latitude=48.1, longitude=11.5).has_estimate() is True
        assert GPSFix(quality=6).has_estimate() is True

    @pytest.mark.parametrize(
        "degrees, name",
        [
            (0.0, "North"),
            (22.5, "North East"),
            (92.0, "East"),
            (180.0, "South"),
            (337.5, "North"),
            (360.0, "North"),
            (-90.0, "West"),
        ],
    )
    def test_compass_direction(self, degrees, name):
        assert GPSFix.travel_angle_to_compass_direction(degrees) == name

    def test_compass_abbreviation(self):
        assert GPSFix.travel_angle_to_compass_direction(-45.0, abbreviate=True) == "NW"

    def test_report(self):
        fix = GPSFix(latitude=48.1173, longitude=11.516667, travel_angle=84.4)
        fix.almanac.satellites.append(GPSSatellite(prn=12, snr=39.0))
        report = str(fix)
        assert "SEARCHING..." in report
        assert "48.117300' N" in report
        assert "[East]" in report
        assert "PRN:  12" in report

    def test_report_with_bad_month(self):
        fix = GPSFix()
        fix.timestamp.set_date(11300)
        assert "[month:13] 1 2000" in str(fix)

    def test_report_without_satellites(self):
        assert "No satellite info in almanac." in str(GPSFix())
