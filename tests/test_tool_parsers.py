import unittest

from synctime.tools.chrony import ChronyTracking
from synctime.tools.ntpdate import NtpdateQuery
from synctime.tools.timedatectl import TimedatectlStatus
from synctime.utils.exceptions import NotSynchronized, ServerUnreachable

from fakes import (
    CHRONY_TRACKING_SYNCED, CHRONY_TRACKING_UNSYNCED,
    NTPDATE_QUERY, NTPDATE_NO_SERVER, NTPDATE_QUERY_UNREACHABLE_FIRST, TIMEDATECTL_STATUS,
)


class TestChronyTracking(unittest.TestCase):
    def test_synced_report(self):
        t = ChronyTracking.parse(CHRONY_TRACKING_SYNCED)
        self.assertAlmostEqual(t.offset, 0.000012345)
        self.assertEqual(t.ref_time, "Mon Jan 01 00:00:00 2024")
        self.assertEqual(t.reference_id, "A29FC87B (time.cloudflare.com)")
        self.assertEqual(t.leap_status, "Normal")

    def test_slow_clock_is_negative(self):
        text = CHRONY_TRACKING_SYNCED.replace(
            "0.000012345 seconds fast of NTP time", "7.250000000 seconds slow of NTP time"
        )
        self.assertAlmostEqual(ChronyTracking.parse(text).offset, -7.25)

    def test_not_synchronised(self):
        with self.assertRaises(NotSynchronized):
            ChronyTracking.parse(CHRONY_TRACKING_UNSYNCED)

    def test_missing_system_time(self):
        text = "\n".join(
            line for line in CHRONY_TRACKING_SYNCED.splitlines()
            if not line.startswith("System time")
        )
        with self.assertRaises(NotSynchronized):
            ChronyTracking.parse(text)


class TestNtpdateQuery(unittest.TestCase):
    def test_classic_output(self):
        q = NtpdateQuery.parse(NTPDATE_QUERY)
        self.assertAlmostEqual(q.raw_offset, -7.401234)
        self.assertAlmostEqual(q.offset, 7.401234)

    def test_skips_stratum_zero_servers(self):
        q = NtpdateQuery.parse(NTPDATE_QUERY_UNREACHABLE_FIRST)
        self.assertAlmostEqual(q.raw_offset, -42.401234)

    def test_server_lines_without_summary(self):
        text = "\n".join(NTPDATE_QUERY_UNREACHABLE_FIRST.splitlines()[:4])
        self.assertAlmostEqual(NtpdateQuery.parse(text).raw_offset, -42.401234)

    def test_only_stratum_zero_servers(self):
        text = "\n".join(NTPDATE_QUERY_UNREACHABLE_FIRST.splitlines()[:2])
        with self.assertRaises(ServerUnreachable):
            NtpdateQuery.parse(text)

    def test_ntpsec_output(self):
        text = ("2024-01-01 00:00:00.123456 (+0000) +0.012345 +/- 0.023456 "
                "pool.ntp.org 162.159.200.1 s3 no-leap\n")
        self.assertAlmostEqual(NtpdateQuery.parse(text).raw_offset, 0.012345)

    def test_no_server_suitable(self):
        with self.assertRaises(ServerUnreachable):
            NtpdateQuery.parse(NTPDATE_NO_SERVER)

    def test_no_offset(self):
        with self.assertRaises(ServerUnreachable):
            NtpdateQuery.parse("ntpdate: command not found\n")


class TestTimedatectlStatus(unittest.TestCase):
    def test_keeps_only_known_fields_in_order(self):
        status = TimedatectlStatus.parse(
            TIMEDATECTL_STATUS + "                Other key: ignored\nno separator here\n"
        )
        labels = [label for label, _ in status.fields]
        self.assertEqual(labels, [
            "Local time", "Universal time", "RTC time", "Time zone",
            "System clock synchronized", "NTP service", "RTC in local TZ",
        ])
        self.assertEqual(status.get("Time zone"), "Europe/Berlin (CET, +0100)")
        self.assertEqual(status.get("Universal time"), "Mon 2024-01-01 00:00:00 UTC")
        self.assertIsNone(status.get("Other key"))

    def test_empty(self):
        self.assertFalse(TimedatectlStatus.parse(""))


if __name__ == "__main__":
    unittest.main()
