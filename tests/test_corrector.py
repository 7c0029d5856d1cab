import unittest

from synctime.core.config import SyncConfig
from synctime.core.corrector import HOST_INSTRUCTIONS, correct_time
from synctime.core.environment import Environment, HostInfo
from synctime.utils.constants import Method
from synctime.utils.exceptions import CorrectionFailed, ManualActionRequired

from fakes import FakeRunner, NTPDATE_NO_SERVER


WSL = SyncConfig(HostInfo(Environment.VIRTUALIZED))
NATIVE = SyncConfig(HostInfo(Environment.NATIVE))


class TestCorrector(unittest.TestCase):
    def test_virtualized_emits_manual_instructions(self):
        runner = FakeRunner(tools={"chronyc", "ntpdate"})
        correction = correct_time(WSL, runner)

        self.assertFalse(correction.attempted)
        self.assertFalse(correction.succeeded)
        self.assertIsInstance(correction.error, ManualActionRequired)
        self.assertEqual(correction.instructions, HOST_INSTRUCTIONS)
        self.assertIn("Run: w32tm /resync", correction.instructions)
        self.assertEqual(runner.calls, [])

    def test_chrony_makestep(self):
        runner = FakeRunner(tools={"chronyc", "ntpdate"}, results={
            ("chronyc", "makestep"): (0, "200 OK\n"),
        })
        correction = correct_time(NATIVE, runner)

        self.assertTrue(correction.succeeded)
        self.assertIs(correction.method, Method.CHRONY_MAKESTEP)
        self.assertEqual(runner.calls, [("sudo", "chronyc", "makestep")])

    def test_chrony_makestep_failure_is_not_retried(self):
        runner = FakeRunner(tools={"chronyc"}, results={
            ("chronyc", "makestep"): (1, "501 Not authorised\n"),
        })
        correction = correct_time(NATIVE, runner)

        self.assertTrue(correction.attempted)
        self.assertFalse(correction.succeeded)
        self.assertIsInstance(correction.error, CorrectionFailed)
        self.assertEqual(len(runner.calls), 1)

    def test_ntpdate_step_when_no_daemon(self):
        runner = FakeRunner(tools={"ntpdate"}, results={
            ("ntpdate", "pool.ntp.org"): (0, "step time server 1.2.3.4 offset -7.4 sec\n"),
        })
        correction = correct_time(NATIVE, runner)
        self.assertTrue(correction.succeeded)
        self.assertIs(correction.method, Method.NTPDATE)
        self.assertEqual(runner.calls, [("sudo", "ntpdate", "pool.ntp.org")])

    def test_ntpdate_unreachable_fails_gracefully(self):
        runner = FakeRunner(tools={"ntpdate"}, results={
            ("ntpdate", "pool.ntp.org"): (1, NTPDATE_NO_SERVER),
        })
        correction = correct_time(NATIVE, runner)
        self.assertFalse(correction.succeeded)
        self.assertIn("no server suitable", correction.output)


if __name__ == "__main__":
    unittest.main()
