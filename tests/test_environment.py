import os
import tempfile
import unittest

from synctime.core.environment import (
    Environment, detect_environment, detect_host,
    parse_os_release, os_display_name,
)


WSL_KERNEL = "Linux version 5.15.153.1-microsoft-standard-WSL2 (root@941d701f84f1) (gcc (GCC) 11.2.0)"
NATIVE_KERNEL = "Linux version 6.5.0-21-generic (buildd@lcy02-amd64-091) (x86_64-linux-gnu-gcc-12)"


class TestDetectEnvironment(unittest.TestCase):
    def test_microsoft_marker_means_virtualized(self):
        self.assertIs(detect_environment(WSL_KERNEL), Environment.VIRTUALIZED)

    def test_marker_is_case_insensitive(self):
        self.assertIs(detect_environment("Linux 4.4.0-19041-MICROSOFT"), Environment.VIRTUALIZED)
        self.assertIs(detect_environment("Linux 4.4.0-Microsoft"), Environment.VIRTUALIZED)

    def test_no_marker_means_native(self):
        self.assertIs(detect_environment(NATIVE_KERNEL), Environment.NATIVE)
        self.assertIs(detect_environment(""), Environment.NATIVE)
        self.assertIs(detect_environment(None), Environment.NATIVE)

    def test_repeated_calls_are_stable(self):
        results = {detect_environment(WSL_KERNEL) for _ in range(5)}
        self.assertEqual(results, {Environment.VIRTUALIZED})


class TestOsRelease(unittest.TestCase):
    def test_quotes_and_comments(self):
        fields = parse_os_release(
            '# comment\n'
            'NAME="Ubuntu"\n'
            "VERSION_ID='22.04'\n"
            'PRETTY_NAME="Ubuntu 22.04.4 LTS"\n'
            '\n'
            'ID=ubuntu\n'
        )
        self.assertEqual(fields["NAME"], "Ubuntu")
        self.assertEqual(fields["VERSION_ID"], "22.04")
        self.assertEqual(fields["ID"], "ubuntu")
        self.assertEqual(os_display_name(fields), "Ubuntu 22.04.4 LTS")

    def test_display_name_fallbacks(self):
        self.assertEqual(os_display_name({"NAME": "Debian GNU/Linux"}), "Debian GNU/Linux")
        self.assertEqual(os_display_name({}), "Linux")


class TestDetectHost(unittest.TestCase):
    def test_reads_files(self):
        with tempfile.TemporaryDirectory() as d:
            proc = os.path.join(d, "version")
            rel = os.path.join(d, "os-release")
            with open(proc, "w") as f:
                f.write(WSL_KERNEL + "\n")
            with open(rel, "w") as f:
                f.write('PRETTY_NAME="Ubuntu 24.04 LTS"\n')

            host = detect_host(proc, (rel,))
            self.assertIs(host.environment, Environment.VIRTUALIZED)
            self.assertEqual(host.os_name, "Ubuntu 24.04 LTS")
            self.assertEqual(host.kernel, WSL_KERNEL)

    def test_missing_files_default_to_native(self):
        with tempfile.TemporaryDirectory() as d:
            missing = os.path.join(d, "nope")
            fallback = os.path.join(d, "lib-os-release")
            with open(fallback, "w") as f:
                f.write('NAME="Fedora Linux"\n')

            host = detect_host(missing, (missing, fallback))
            self.assertIs(host.environment, Environment.NATIVE)
            self.assertEqual(host.os_name, "Fedora Linux")

            host = detect_host(missing, (missing,))
            self.assertEqual(host.os_name, "Linux")


if __name__ == "__main__":
    unittest.main()
