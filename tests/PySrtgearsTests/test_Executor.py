import os
import tempfile
import unittest

from PySrtgears import init_executor, read_subtitles
from PySrtgears.Executor import Executor, ExecutorOutput, ExecutorResult, FormatStats, Operation
from PySrtgears.Helpers.TestCases import BuildSubsPack, BuildSubtitle, LoggedTestCase, ms
from PySrtgears.Helpers.Tests import log_input_expected_error
from PySrtgears.SubsPack import SubsPack
from PySrtgears.SubtitleError import ExecutorError
from PySrtgears.SubtitlePosition import Pos


class TestExecutor(LoggedTestCase):
    def _create_executor(self, options : dict, sp1 : SubsPack|None = None, sp2 : SubsPack|None = None) -> Executor:
        executor = Executor(options)
        executor.sp1 = sp1 if sp1 is not None else BuildSubsPack((1000, 2000, "Hello"), (4000, 5000, "<i>World</i>"))
        executor.sp2 = sp2
        return executor

    def _assert_executor_error(self, executor : Executor, description : str) -> ExecutorError:
        with self.assertRaises(ExecutorError) as e:
            executor.GearIt()
        log_input_expected_error(description, ExecutorError, e.exception)
        return e.exception

    def test_OperationOrder(self):
        options = {
            'stats': True,
            'shift_by': 1000,
            'split_at': "00:00:30,000",
            'scale': 1.5,
            'color': "red",
            'pos': "T",
            'remove_html': True,
            'remove_hi': True,
            'remove_ctrl': True,
            'lengthen': 1.1,
            'concat': "00:01:00,000",
            'out': "first.srt",
            'out2': "second.srt",
        }
        executor = self._create_executor(options, sp2=BuildSubsPack((0, 1000, "Second part")))

        applied = []
        def on_operation_applied(sender, operation):
            applied.append(operation)
        executor.events.operation_applied.connect(on_operation_applied)

        result = executor.GearIt()

        expected = [
            Operation.Concatenate,
            Operation.Lengthen,
            Operation.RemoveControl,
            Operation.RemoveHI,
            Operation.RemoveHTML,
            Operation.SetPos,
            Operation.SetColor,
            Operation.Scale,
            Operation.Shift,
            Operation.Split,
            Operation.Stats,
        ]
        self.assertLoggedSequenceEqual("operations", expected, result.operations)
        self.assertLoggedSequenceEqual("applied", expected, applied)
        self.assertLoggedTrue("modified", result.modified)
        self.assertLoggedIsNotNone("stats", result.stats)

    def test_ShiftAndScale(self):
        executor = self._create_executor({'scale': 2.0, 'shift_by': "-500", 'out': "out.srt"})
        result = executor.GearIt()

        pack = result.outputs[0].pack
        self.assertLoggedSequenceEqual("time_in", [ms(1500), ms(7500)], [ sub.time_in for sub in pack ])
        self.assertLoggedSequenceEqual("time_out", [ms(2500), ms(8500)], [ sub.time_out for sub in pack ])

    def test_Merge(self):
        executor = self._create_executor({'merge': True, 'out': "dual.srt"}, sp2=BuildSubsPack((1500, 2500, "Szia")))
        result = executor.GearIt()

        pack = result.outputs[0].pack
        self.assertLoggedSequenceEqual("texts", ["Hello", "Szia", "<i>World</i>"], [ sub.text for sub in pack ])
        self.assertLoggedSequenceEqual("positions", [Pos.PosNotSpecified, Pos.Top, Pos.PosNotSpecified], [ sub.pos for sub in pack ])

    def test_Split(self):
        executor = self._create_executor({'split_at': 3000, 'out': "part1.srt", 'out2': "part2.ssa"})
        result = executor.GearIt()

        self.assertLoggedSequenceEqual("output paths", ["part1.srt", "part2.ssa"], [ output.path for output in result.outputs ])
        self.assertLoggedSequenceEqual("first part", ["Hello"], [ sub.text for sub in result.outputs[0].pack ])
        self.assertLoggedSequenceEqual("second part", [ms(1000)], [ sub.time_in for sub in result.outputs[1].pack ])
        self.assertLoggedTrue("second pack kept", executor.sp2 is result.outputs[1].pack)

    def test_SetPosAndColor(self):
        executor = self._create_executor({'pos': "br", 'color': "#ffff00", 'out': "out.ssa"})
        result = executor.GearIt()

        pack = result.outputs[0].pack
        self.assertLoggedSequenceEqual("positions", [Pos.BottomRight, Pos.BottomRight], [ sub.pos for sub in pack ])
        self.assertLoggedSequenceEqual("colors", ["#ffff00", "#ffff00"], [ sub.color for sub in pack ])

    def test_StatsDoesNotModifyOutput(self):
        executor = self._create_executor({'stats': True, 'remove_hi': True, 'out': "out.srt"},
                                         sp1=BuildSubsPack((1000, 2000, "{\\an8}<i>Hello</i>"), (3000, 4000, "(sighs)\nWorld")))
        result = executor.GearIt()

        self.assertLoggedIsNotNone("stats", result.stats)
        self.assertLoggedEqual("htmls", 1, result.stats.htmls)
        self.assertLoggedEqual("controls", 1, result.stats.controls)
        self.assertLoggedEqual("his", 0, result.stats.his)

        pack = result.outputs[0].pack
        self.assertLoggedSequenceEqual("formatting kept", ["{\\an8}<i>Hello</i>"], pack[0].lines)
        self.assertLoggedSequenceEqual("hearing impaired removed", ["World"], pack[1].lines)

    def test_StatsWithoutOutput(self):
        executor = self._create_executor({'stats': True})
        result = executor.GearIt()

        self.assertLoggedFalse("modified", result.modified)
        self.assertLoggedSequenceEqual("outputs", [], result.outputs)
        self.assertLoggedEqual("subs", 2, result.stats.subs)

    def test_StatsWithModificationWithoutOutput(self):
        executor = self._create_executor({'stats': True, 'shift_by': 100})
        result = executor.GearIt()
        self.assertLoggedTrue("modified", result.modified)
        self.assertLoggedIsNotNone("stats", result.stats)

    def test_MissingInput(self):
        executor = Executor({'shift_by': 100, 'out': "out.srt"})
        self._assert_executor_error(executor, "no input")

    def test_MissingSecondInput(self):
        for options in [{'merge': True, 'out': "out.srt"}, {'concat': "00:59:00,000", 'out': "out.srt"}]:
            with self.subTest(options=options):
                executor = self._create_executor(options)
                self._assert_executor_error(executor, "no second input")

    def test_MissingOutput(self):
        executor = self._create_executor({'shift_by': 100})
        self._assert_executor_error(executor, "no output")

    def test_SplitWithoutSecondOutput(self):
        executor = self._create_executor({'split_at': 3000, 'out': "out.srt"})
        self._assert_executor_error(executor, "split without out2")

    def test_UnsupportedOutput(self):
        executor = self._create_executor({'shift_by': 100, 'out': "out.txt"})
        self._assert_executor_error(executor, "unsupported output extension")

    def test_SameOutputs(self):
        executor = self._create_executor({'split_at': 3000, 'out': "out.srt", 'out2': "out.srt"})
        self._assert_executor_error(executor, "same output files")

    def test_InvalidValues(self):
        for options in [
            {'pos': "middle", 'out': "out.srt"},
            {'split_at': "later", 'out': "out.srt", 'out2': "out2.srt"},
            {'concat': "soon", 'out': "out.srt"},
            {'scale': "fast", 'out': "out.srt"},
            {'shift_by': "1.5", 'out': "out.srt"},
        ]:
            with self.subTest(options=options):
                executor = self._create_executor(options, sp2=BuildSubsPack((0, 1000, "Other")))
                self._assert_executor_error(executor, str(options))

    def test_ValidationBeforeModification(self):
        sp1 = BuildSubsPack((1000, 2000, "Hello"))
        executor = self._create_executor({'lengthen': 2.0, 'shift_by': 500, 'pos': "X", 'out': "out.srt"}, sp1=sp1)
        self._assert_executor_error(executor, "invalid pos")
        self.assertLoggedEqual("unchanged", BuildSubtitle(1000, 2000, "Hello"), sp1[0])

        executor = self._create_executor({'shift_by': 500, 'split_at': 1500, 'out': "out.srt"}, sp1=sp1)
        self._assert_executor_error(executor, "missing out2")
        self.assertLoggedEqual("still unchanged", BuildSubtitle(1000, 2000, "Hello"), sp1[0])

    def test_SecondOutputWithoutSplit(self):
        executor = self._create_executor({'shift_by': 100, 'out': "out.srt", 'out2': "out2.srt"})
        warnings = []
        def on_warning(sender, message):
            warnings.append(message)
        executor.events.warning.connect(on_warning)

        result = executor.GearIt()
        self.assertLoggedSequenceEqual("outputs", ["out.srt"], [ output.path for output in result.outputs ])
        self.assertLoggedEqual("warnings", 1, len(warnings))

    def test_NothingToDo(self):
        executor = self._create_executor({})
        messages = []
        def on_info(sender, message):
            messages.append(message)
        executor.events.info.connect(on_info)

        result = executor.GearIt()
        self.assertLoggedFalse("modified", result.modified)
        self.assertLoggedSequenceEqual("operations", [], result.operations)
        self.assertLoggedSequenceEqual("info", ["Nothing to do"], messages)

    def test_CopyWithoutModification(self):
        executor = self._create_executor({'out': "copy.ssa"})
        result = executor.GearIt()
        self.assertLoggedFalse("modified", result.modified)
        self.assertLoggedSequenceEqual("outputs", ["copy.ssa"], [ output.path for output in result.outputs ])

    def test_FormatStats(self):
        stats = BuildSubsPack((0, 2000, "Hello world")).Stats()
        report = FormatStats(stats, "movie.srt")
        lines = report.split("\n")
        self.assertLoggedEqual("header", "STATS of movie.srt:", lines[0])
        self.assertLoggedIn("subs", "Total # of subtitles         : 1", lines)
        self.assertLoggedIn("words", "Words                        : 2", lines)


class TestExecutorFiles(LoggedTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)

    def _write(self, name : str, content : str) -> str:
        path = os.path.join(self.temp_dir.name, name)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        return path

    def test_ConcatenateFiles(self):
        first = self._write("part1.srt", "1\n00:00:01,000 --> 00:00:02,000\nFirst\n")
        second = self._write("part2.srt", "1\n00:00:01,000 --> 00:00:02,000\nSecond\n")
        out = os.path.join(self.temp_dir.name, "full.srt")

        executor = init_executor({'in': first, 'in2': second, 'concat': "00:59:00,000", 'out': out})
        result = executor.GearIt()
        executor.WriteOutputs(result)

        pack = read_subtitles(out)
        self.assertLoggedSequenceEqual("texts", ["First", "Second"], [ sub.text for sub in pack ])
        self.assertLoggedEqual("second time_in", ms((59 * 60 + 1) * 1000), pack[1].time_in)

    def test_WriteSSA(self):
        source = self._write("movie.srt", "1\n00:00:01,185 --> 00:00:06,857\nLike an angel\nwith pity on nobody\n")
        out = os.path.join(self.temp_dir.name, "movie.ssa")

        executor = init_executor({'in': source, 'out': out, 'color': "red"})
        executor.WriteOutputs(executor.GearIt())

        with open(out, 'r', encoding='utf-8', newline='') as f:
            content = f.read()

        self.assertLoggedIn("style", "Style: 1,Arial,28,255,255,255,", content)
        self.assertLoggedIn("dialogue", "Dialogue: Marked=0,0:00:01.18,0:00:06.85,1,,0000,0000,0000,,Like an angel\\nwith pity on nobody\r\n", content)

    def test_InvalidDebugValue(self):
        source = self._write("movie.srt", "1\n00:00:01,000 --> 00:00:02,000\nHello\n")
        executor = Executor({'in': source, 'debug': "maybe"})

        with self.assertRaises(ExecutorError) as e:
            executor.LoadInputs()
        log_input_expected_error("debug: maybe", ExecutorError, e.exception)

        executor.sp1 = BuildSubsPack((1000, 2000, "Hello"))
        result = ExecutorResult(outputs=[ ExecutorOutput(os.path.join(self.temp_dir.name, "out.srt"), executor.sp1) ])
        with self.assertRaises(ExecutorError) as e:
            executor.WriteOutputs(result)
        log_input_expected_error("debug: maybe", ExecutorError, e.exception)

    def test_WriteOutputsEmptyResult(self):
        executor = Executor({})
        executor.WriteOutputs(ExecutorResult())
        self.assertLoggedSequenceEqual("no files written", [], os.listdir(self.temp_dir.name))


if __name__ == '__main__':
    unittest.main()
