"""
Tests for loading source files and the errors raised when that fails.
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from nulo.lexer.errors import ERROR_CODES, NuloError, SourceReadError
from nulo.lexer.scanner import tokenize_file
from nulo.lexer.tokens import TokenType
from nulo.source import DEFAULT_SOURCE, read_source


class TestReadSource(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, data: bytes) -> str:
        path = os.path.join(self.tmpdir, name)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def test_reads_text(self):
        path = self._write("hello.nulo", b"func main() {}\n")
        self.assertEqual(read_source(path), "func main() {}\n")

    def test_keeps_carriage_returns(self):
        path = self._write("crlf.nulo", b"a\r\nb\r\n")
        self.assertEqual(read_source(path), "a\r\nb\r\n")

    def test_accepts_path_objects(self):
        from pathlib import Path
        path = self._write("p.nulo", b"x")
        self.assertEqual(read_source(Path(path)), "x")

    def test_other_encoding(self):
        path = self._write("latin.nulo", "café".encode("latin-1"))
        self.assertEqual(read_source(path, encoding="latin-1"), "café")

    def test_missing_file(self):
        path = os.path.join(self.tmpdir, "missing.nulo")
        with self.assertRaises(SourceReadError) as ctx:
            read_source(path)
        self.assertEqual(ctx.exception.code, "S001")
        self.assertEqual(ctx.exception.path, path)
        self.assertIn("no such file", ctx.exception.message)

    def test_name_too_long(self):
        path = os.path.join(self.tmpdir, "x" * 300 + ".nulo")
        with self.assertRaises(SourceReadError) as ctx:
            read_source(path)
        self.assertEqual(ctx.exception.code, "S005")
        self.assertEqual(ctx.exception.path, path)

    def test_file_used_as_directory(self):
        parent = self._write("plain.nulo", b"x")
        with self.assertRaises(SourceReadError):
            read_source(os.path.join(parent, "child.nulo"))

    def test_directory(self):
        with self.assertRaises(SourceReadError) as ctx:
            read_source(self.tmpdir)
        self.assertEqual(ctx.exception.code, "S002")

    def test_undecodable_bytes(self):
        path = self._write("bad.nulo", b"ok \xff\xfe")
        with self.assertRaises(SourceReadError) as ctx:
            read_source(path)
        self.assertEqual(ctx.exception.code, "S004")
        self.assertIn("byte 3", ctx.exception.message)

    def test_unknown_encoding(self):
        path = self._write("x.nulo", b"x")
        with self.assertRaises(SourceReadError) as ctx:
            read_source(path, encoding="no-such-codec")
        self.assertEqual(ctx.exception.code, "S005")
        self.assertIn("no-such-codec", ctx.exception.message)

    def test_errors_are_nulo_errors(self):
        with self.assertRaises(NuloError):
            read_source(os.path.join(self.tmpdir, "missing.nulo"))

    def test_tokenize_file(self):
        path = self._write("hello.nulo", b"func f\n42")
        tokens = tokenize_file(path)
        self.assertEqual([(t.type, t.text, t.line) for t in tokens], [
            (TokenType.FUNC, "func", 1),
            (TokenType.IDENTIFIER, "f", 1),
            (TokenType.NUMBER, "42", 2),
            (TokenType.EOF, "", 2),
        ])

    def test_default_source_name(self):
        self.assertEqual(DEFAULT_SOURCE, "hello.nulo")


class TestDiagnostics(unittest.TestCase):

    def test_str_includes_code_path_and_help(self):
        error = SourceReadError("a.nulo", "no such file", code="S001", help_text="Check the path.")
        text = str(error)
        self.assertTrue(text.startswith("ERROR: Cannot read source file 'a.nulo': no such file [S001]"))
        self.assertIn("--> a.nulo", text)
        self.assertIn("help: Check the path.", text)

    def test_default_code(self):
        error = SourceReadError("a.nulo", "disk on fire")
        self.assertEqual(error.code, "S005")
        self.assertEqual(error.reason, "disk on fire")

    def test_codes_documented(self):
        for code in ["S001", "S002", "S003", "S004", "S005"]:
            self.assertIn(code, ERROR_CODES)


if __name__ == '__main__':
    unittest.main()
