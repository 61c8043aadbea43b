import unittest

from urlpinger.checks.results import FailureKind, PingResult
from urlpinger.formatting import format_result, format_summary


class FormattingTests(unittest.TestCase):
    def test_reachable_line_has_status_duration_and_url(self) -> None:
        line = format_result(
            PingResult(url="https://example.com", status_code=200, duration_ns=12_345_678)
        )
        self.assertIn("200", line)
        self.assertIn("12.3 ms", line)
        self.assertTrue(line.endswith("https://example.com"))

    def test_failure_line_names_the_cause(self) -> None:
        line = format_result(
            PingResult(
                url="htx:example.com",
                status_code=404,
                duration_ns=1_000,
                failure=FailureKind.INVALID_URL,
            )
        )
        self.assertTrue(line.startswith("404"))
        self.assertIn("(unreachable: invalid_url)", line)

    def test_summary_counts_reachable(self) -> None:
        results = [
            PingResult(url="a", status_code=200, duration_ns=1),
            PingResult(url="b", status_code=404, duration_ns=1),
            PingResult(url="c", status_code=404, duration_ns=1, failure=FailureKind.TIMEOUT),
        ]
        self.assertEqual(
            format_summary(results, 1.5), "3 URL(s) pinged, 2 reachable, 1.500s total"
        )


if __name__ == "__main__":
    unittest.main()
