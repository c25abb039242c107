import os
import tempfile
import unittest

from PySrtgears import compose_subtitles, init_executor, parse_subtitles, read_subtitles, write_subtitles
from PySrtgears.ExecutorEvents import ExecutorEvents
from PySrtgears.Executor import Executor, Operation
from PySrtgears.Helpers import GetValueName
from PySrtgears.Helpers.TestCases import BuildSubsPack, LoggedTestCase, ms
from PySrtgears.SubtitleError import UnsupportedFormatError


class TestPySrtgears(LoggedTestCase):
    def test_ParseAndCompose(self):
        pack = parse_subtitles("1\n00:00:01,000 --> 00:00:02,000\nHello\n\n")
        pack.Shift(ms(500))
        composed = compose_subtitles(pack)
        self.assertLoggedEqual("composed", "1\r\n00:00:01,500 --> 00:00:02,500\r\nHello\r\n\r\n", composed)

    def test_ComposeSSA(self):
        composed = compose_subtitles(BuildSubsPack((0, 1000, "Hello")), format='.ssa')
        self.assertLoggedTrue("ssa", composed.startswith("[Script Info]\r\n"))

    def test_ParseUnknownFormat(self):
        with self.assertRaises(UnsupportedFormatError):
            parse_subtitles("WEBVTT\n", format='.vtt')

    def test_ReadAndWrite(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "movie.srt")
            write_subtitles(BuildSubsPack((1000, 2000, "One"), (3000, 4000, "Two")), path)
            pack = read_subtitles(path)
            self.assertLoggedSequenceEqual("texts", ["One", "Two"], [ sub.text for sub in pack ])

    def test_InitExecutorWithoutLoading(self):
        executor = init_executor({'in': "does-not-exist.srt"}, load_inputs=False)
        self.assertLoggedIsInstance("executor", executor, Executor)
        self.assertLoggedIsNone("not loaded", executor.sp1)
        self.assertLoggedEqual("input path", "does-not-exist.srt", executor.input_path)


class TestExecutorEvents(LoggedTestCase):
    def test_DefaultLoggers(self):
        events = ExecutorEvents()
        events.connect_default_loggers()
        try:
            with self.assertLogs(level='INFO') as logs:
                events.operation_applied.send(self, operation=Operation.RemoveHI)
                events.warning.send(self, message="Careful")
                events.info.send(self, message="Done")
        finally:
            events.disconnect_default_loggers()

        self.assertLoggedSequenceEqual("messages", ["INFO:root:Applied Remove HI", "WARNING:root:Careful", "INFO:root:Done"], logs.output)

    def test_GetValueName(self):
        self.assertLoggedEqual("enum", "Set Color", GetValueName(Operation.SetColor))
        self.assertLoggedEqual("other", "42", GetValueName(42))


if __name__ == '__main__':
    unittest.main()
