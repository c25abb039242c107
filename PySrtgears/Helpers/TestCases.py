from datetime import timedelta
import unittest
from collections.abc import Sequence
from typing import Any

from PySrtgears.Helpers.Tests import log_input_expected_result, log_test_name
from PySrtgears.SubsPack import SubsPack
from PySrtgears.Subtitle import Subtitle
from PySrtgears.SubtitlePosition import Pos

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the test names and the values compared by the assertLogged* helpers
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, description : str, expected : Any, result : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, result)
        self.assertEqual(expected, result, description)

    def assertLoggedSequenceEqual(self, description : str, expected : Sequence, result : Sequence, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, result)
        self.assertSequenceEqual(expected, result, description)

    def assertLoggedIsInstance(self, description : str, value : Any, expected_type : type) -> None:
        log_input_expected_result(description, expected_type.__name__, type(value).__name__)
        self.assertIsInstance(value, expected_type, description)

    def assertLoggedIsNone(self, description : str, value : Any) -> None:
        log_input_expected_result(description, None, value)
        self.assertIsNone(value, description)

    def assertLoggedIsNotNone(self, description : str, value : Any) -> None:
        log_input_expected_result(description, "not None", value)
        self.assertIsNotNone(value, description)

    def assertLoggedTrue(self, description : str, value : Any) -> None:
        log_input_expected_result(description, True, value)
        self.assertTrue(value, description)

    def assertLoggedFalse(self, description : str, value : Any) -> None:
        log_input_expected_result(description, False, value)
        self.assertFalse(value, description)

    def assertLoggedIn(self, description : str, member : Any, container : Any) -> None:
        log_input_expected_result(description, member, container)
        self.assertIn(member, container, description)

    def assertLoggedNotIn(self, description : str, member : Any, container : Any) -> None:
        log_input_expected_result(description, f"not {member}", container)
        self.assertNotIn(member, container, description)

    def assertSortedByTimeIn(self, pack : SubsPack) -> None:
        times = [ sub.time_in for sub in pack.subs ]
        log_input_expected_result("time_in order", sorted(times), times)
        self.assertSequenceEqual(sorted(times), times)


def ms(milliseconds : int) -> timedelta:
    return timedelta(milliseconds=milliseconds)

def BuildSubtitle(time_in_ms : int, time_out_ms : int, *lines : str, pos : Pos = Pos.PosNotSpecified, color : str = "") -> Subtitle:
    """
    Helper to create a subtitle with millisecond timestamps
    """
    return Subtitle(ms(time_in_ms), ms(time_out_ms), list(lines), pos=pos, color=color)

def BuildSubsPack(*cues : tuple[int, int, str]) -> SubsPack:
    """
    Helper to create a pack from (time_in_ms, time_out_ms, text) tuples, text lines separated by newlines
    """
    return SubsPack([ BuildSubtitle(time_in, time_out, *text.split("\n")) for time_in, time_out, text in cues ])
