"""
Tests for the minilang-lex command and file tokenization.

Author: xwest
"""

import unittest
import sys
import os
import io
import json
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.cli import main
from minilang.lexer.lexer import tokenize_file
from minilang.lexer.errors import LexerError, UnexpectedCharacterError
from minilang.lexer.tokens import TokenKind


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, source, name="prog.ml"):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(source)
        return path

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_plain_output(self):
        path = self._write("fn x\n# hi")
        status, out, err = self._run(path)
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            "1:1\tFUNCTION",
            "1:4\tIDENTIFIER\t'x'",
            "1:5\tNEWLINE",
            "2:1\tCOMMENT\t' hi'",
        ])
        self.assertEqual(err, "")

    def test_json_output(self):
        path = self._write("val n = 3i64")
        status, out, _ = self._run(path, "--json")
        self.assertEqual(status, 0)
        tokens = json.loads(out)
        self.assertEqual([t["kind"] for t in tokens], ["VAL", "IDENTIFIER", "EQUAL", "INT64"])
        self.assertEqual(tokens[3]["value"], 3)
        self.assertEqual(tokens[3]["position"], 8)

    def test_no_comments(self):
        path = self._write("x # note\n")
        _, out, _ = self._run(path, "--no-comments")
        self.assertNotIn("COMMENT", out)
        self.assertIn("NEWLINE", out)

    def test_first_error_stops(self):
        path = self._write("a $ b")
        status, out, err = self._run(path)
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("Unexpected character: '$'", err)
        self.assertIn("prog.ml:1:3", err)

    def test_keep_going(self):
        path = self._write("a $ b 99999999999999999999u64 c")
        status, out, err = self._run(path, "--keep-going")
        self.assertEqual(status, 1)
        self.assertEqual(len(out.splitlines()), 3)
        self.assertIn("Unexpected character", err)
        self.assertIn("out of range for u64", err)

    def test_missing_file(self):
        status, out, err = self._run(os.path.join(self.tmpdir.name, "missing.ml"))
        self.assertEqual(status, 2)
        self.assertIn("cannot read", err)

    def test_carriage_return_in_file(self):
        path = os.path.join(self.tmpdir.name, "cr.ml")
        with open(path, 'wb') as f:
            f.write(b"a\rb")
        status, out, err = self._run(path)
        self.assertEqual(status, 1)
        self.assertIn("Unexpected character", err)
        self.assertIn("cr.ml:1:2", err)


class TestTokenizeFile(unittest.TestCase):

    def test_tokenize_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "ok.ml")
            with open(path, 'w', encoding='utf-8') as f:
                f.write('extern fn puts(s: str) -> i64\nputs("héllo")\n')
            tokens = tokenize_file(path)

        self.assertEqual(tokens[0].kind, TokenKind.EXTERN)
        self.assertIn("héllo", [t.value for t in tokens])
        self.assertEqual(sum(1 for t in tokens if t.kind == TokenKind.NEWLINE), 2)

    def test_tokenize_file_error_names_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "bad.ml")
            with open(path, 'w', encoding='utf-8') as f:
                f.write("ok\n  @")
            with self.assertRaises(LexerError) as ctx:
                tokenize_file(path)

        self.assertEqual(ctx.exception.location.filename, path)
        self.assertEqual(ctx.exception.location.line, 2)

    def test_tokenize_file_keeps_crlf(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "crlf.ml")
            with open(path, 'wb') as f:
                f.write(b"a\r\nb")
            with self.assertRaises(UnexpectedCharacterError) as ctx:
                tokenize_file(path)

        self.assertEqual(ctx.exception.position, 1)
        self.assertEqual(ctx.exception.char, "\r")


if __name__ == '__main__':
    unittest.main()
