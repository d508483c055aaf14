import io
import os
import tempfile
import unittest
from unittest import mock
from pot import __main__ as cli
from pot.support.interfaces import Location, ParseError
from pot.support.failureprone import SourceText, illustration


class TestFailureProne(unittest.TestCase):
	def test_illustration(self):
		self.assertEqual("{ foo: }\n       ^ near here", illustration("{ foo: }", 7))
	
	def test_complaint(self):
		source = SourceText(b"{\n  bad_key: x\n}", filename="conf.pot")
		error = ParseError(Location(1, 5), "invalid character '_' in key")
		lines = source.complaint(error).split("\n")
		self.assertEqual("conf.pot:2:5: invalid character '_' in key", lines[0])
		self.assertEqual(" >>>   bad_key: x", lines[1])
		self.assertEqual(" " * 10 + "^ near here", lines[2])
	
	def test_line_past_end(self):
		self.assertEqual("", SourceText(b"x").line_of_text(3))


class TestCommandLine(unittest.TestCase):
	def setUp(self):
		self.folder = tempfile.TemporaryDirectory()
		self.addCleanup(self.folder.cleanup)
	
	def path(self, name):
		return os.path.join(self.folder.name, name)
	
	def source(self, text: bytes):
		path = self.path("input.pot")
		with open(path, 'wb') as fh: fh.write(text)
		return path
	
	def run_main(self, *argv):
		with mock.patch('sys.stderr', new_callable=io.StringIO) as stderr:
			status = cli.main(cli.parse_arguments(list(argv)))
		return status, stderr.getvalue()
	
	def test_pretty_print_to_file(self):
		output = self.path("output.pot")
		status, stderr = self.run_main(self.source(b"{ fruit: orange price: 10.5 }"), "-o", output)
		self.assertEqual(0, status)
		self.assertEqual("", stderr)
		with open(output, 'rb') as fh:
			self.assertEqual(b"{\n    fruit: orange\n    price: 10.5\n}\n", fh.read())
	
	def test_refuses_to_overwrite(self):
		output = self.path("output.pot")
		with open(output, 'wb') as fh: fh.write(b"keep")
		status, stderr = self.run_main(self.source(b"x"), "-o", output)
		self.assertEqual(1, status)
		self.assertIn("--force", stderr)
		status, _ = self.run_main(self.source(b"x"), "-o", output, "--force")
		self.assertEqual(0, status)
		with open(output, 'rb') as fh:
			self.assertEqual(b"x\n", fh.read())
	
	def test_parse_error(self):
		path = self.source(b"{ foo: }")
		status, stderr = self.run_main(path, "-o", self.path("output.pot"))
		self.assertEqual(1, status)
		self.assertIn("%s:1:7: key without value in dictionary" % path, stderr)
		self.assertFalse(os.path.exists(self.path("output.pot")))
	
	def test_missing_input(self):
		status, stderr = self.run_main(self.path("missing.pot"))
		self.assertEqual(1, status)
		self.assertIn("Failed to read", stderr)
	
	def test_standard_input(self):
		stdin = mock.Mock()
		stdin.buffer = io.BytesIO(b"[ a  b ]")
		output = self.path("output.pot")
		with mock.patch('sys.stdin', stdin):
			status, _ = self.run_main("-o", output)
		self.assertEqual(0, status)
		with open(output, 'rb') as fh:
			self.assertEqual(b"[ a b ]\n", fh.read())


if __name__ == '__main__':
	unittest.main()
