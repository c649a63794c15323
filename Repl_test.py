# Repl_test.py
import io, os, tempfile, unittest
from contextlib import redirect_stdout

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

import argparser
import Repl

class TestProcessLine(unittest.TestCase):
    def setUp(self):
        self._cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        os.chdir(self._tmp.name)
        self.options = argparser.build_parser().parse_args([])

    def tearDown(self):
        os.chdir(self._cwd)
        self._tmp.cleanup()

    def run_line(self, line, options=None):
        buf = io.StringIO()
        with redirect_stdout(buf):
            result = Repl.process_line(line, options or self.options)
        return result, buf.getvalue()

    def test_blank_line(self):
        self.assertEqual(self.run_line("   "), (None, ""))

    def test_valid_command_executes(self):
        ok, out = self.run_line("create file a.txt")
        self.assertTrue(ok)
        self.assertIn("Syntax Analysis: Valid command", out)
        self.assertTrue(os.path.exists("a.txt"))

    def test_invalid_command_reports_reason(self):
        ok, out = self.run_line("create report.txt")
        self.assertFalse(ok)
        self.assertIn("Syntax Analysis: Invalid command: expected 'file' marker", out)
        self.assertFalse(os.path.exists("report.txt"))

    def test_show_tokens(self):
        options = argparser.build_parser().parse_args(["--show-tokens"])
        _, out = self.run_line("delete file a.txt", options)
        self.assertIn("Tokens: [Keyword(delete), Filename(file), Filename(a.txt), EndOfInput]", out)

    def test_exit(self):
        for line in ("exit", "  EXIT  ", "exit now"):
            with self.assertRaises(SystemExit):
                self.run_line(line)

    def test_strict_exit_rejects_trailing_words(self):
        options = argparser.build_parser().parse_args(["--strict-exit"])
        ok, out = self.run_line("exit now", options)
        self.assertFalse(ok)
        self.assertIn("unexpected 'now' after command", out)

    def test_run_script_stops_at_exit(self):
        with open("cmds.fsh", "w", encoding="utf-8") as f:
            f.write("# setup\n\ncreate file a.txt\nlaunch file a.txt\n"
                    "copy file a.txt to b.txt\nexit\ncreate file c.txt\n")
        buf = io.StringIO()
        with redirect_stdout(buf), self.assertRaises(SystemExit):
            Repl.run_script("cmds.fsh", self.options)
        self.assertTrue(os.path.exists("b.txt"))
        self.assertFalse(os.path.exists("c.txt"))
        self.assertIn("unknown command 'launch'", buf.getvalue())

    def test_main_single_command(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            rc = Repl.main(["-c", "create file one.txt"])
        self.assertEqual(rc, 0)
        self.assertTrue(os.path.exists("one.txt"))

    def test_banner_lists_every_shape(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            Repl.print_banner()
        out = buf.getvalue()
        self.assertIn("- rename file <filename> to <filename>", out)
        self.assertIn("- exit (to end the session)", out)


class TestShellCompleter(unittest.TestCase):
    def setUp(self):
        self._cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        os.chdir(self._tmp.name)
        for name in ("alpha.txt", "beta.txt"):
            open(name, "w").close()
        os.mkdir("adir")

    def tearDown(self):
        os.chdir(self._cwd)
        self._tmp.cleanup()

    def complete(self, text):
        doc = Document(text, len(text))
        return [c.text for c in Repl.ShellCompleter().get_completions(doc, CompleteEvent())]

    def test_keywords(self):
        self.assertEqual(self.complete("c"), ["copy", "create"])
        self.assertEqual(self.complete(""), ["copy", "create", "delete", "exit", "rename"])

    def test_file_marker(self):
        self.assertEqual(self.complete("delete "), ["file"])
        self.assertEqual(self.complete("delete f"), ["file"])

    def test_operand_suggests_files_only(self):
        self.assertEqual(self.complete("copy file a"), ["alpha.txt"])

    def test_connector(self):
        self.assertEqual(self.complete("rename file alpha.txt "), ["to"])

    def test_nothing_past_shape(self):
        self.assertEqual(self.complete("create file a.txt "), [])
        self.assertEqual(self.complete("launch "), [])

if __name__ == "__main__":
    unittest.main(verbosity=2)
