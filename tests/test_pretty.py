import io
import unittest
from pot.support.interfaces import ErrorSink, ParseError
from pot.support.pretty import TabWriter, PrintBuffer
from pot.printer import pretty_print

EXAMPLE = b"""
words as root parser strings [ and a list ]

{ a: dictionary that: { should: be indented: [ properly { and: { dictionaries: [ in a ] list: that } }  [ should\\ not  ] ] } }

{ a: dictionary that: contains an: empty dictionary: {} }
{}
"""

EXPECT = b"""words
as
root
parser
strings
[ and a list ]
{
    a: dictionary
    that: {
        should:   be
        indented: [ properly { and: { dictionaries: [ in a ] list: that } } [ "should not" ] ]
    }
}
{
    a:          dictionary
    that:       contains
    an:         empty
    dictionary: { }
}
{
}"""


def tabulate(text: bytes) -> bytes:
	out = io.BytesIO()
	tw = TabWriter(out)
	tw.write(text)
	tw.flush()
	return out.getvalue()


class TestTabWriter(unittest.TestCase):
	def test_column_block(self):
		self.assertEqual(b"a      b\nlonger c\n", tabulate(b"a\tb\nlonger\tc\n"))
	
	def test_min_width(self):
		self.assertEqual(b"a   b", tabulate(b"a\tb"))
	
	def test_line_without_cell_ends_block(self):
		self.assertEqual(b"a   x\nbreak\nlonger y", tabulate(b"a\tx\nbreak\nlonger\ty"))
	
	def test_several_columns(self):
		self.assertEqual(b"a   b     c\nxx  yyyyy z", tabulate(b"a\tb\tc\nxx\tyyyyy\tz"))
	
	def test_nothing(self):
		self.assertEqual(b"", tabulate(b""))


class TestPrintBuffer(unittest.TestCase):
	def test_term_goes_before_next_write(self):
		buf = PrintBuffer()
		buf.write(b"a").term(b" ")
		buf.term(b"\n")
		buf.write(b"b")
		buf.term(b" ")
		buf.flush()
		self.assertEqual(b"a\nb", buf.getvalue())
	
	def test_no_output_after_error(self):
		sink = ErrorSink()
		buf = PrintBuffer(sink)
		buf.write(b"test")
		buf.flush()
		sink.send(ValueError("test"))
		self.assertIsNone(buf.getvalue())
		self.assertIs(sink.error, buf.error)


class TestPrettyPrint(unittest.TestCase):
	def test_example(self):
		self.assertEqual(EXPECT, pretty_print(EXAMPLE))
	
	def test_idempotent(self):
		self.assertEqual(EXPECT, pretty_print(pretty_print(EXAMPLE)))
	
	def test_nested_balance(self):
		expect = b'{\n    a: {\n        aa: [ ]\n        ab: { }\n    }\n    b: ""\n}'
		self.assertEqual(expect, pretty_print(b'{ a: { aa: [] ab: {} } b: "" }'))
	
	def test_quoting(self):
		self.assertEqual(b'"should not"\norange', pretty_print('should\\ not orange'))
	
	def test_duplicate_keys(self):
		self.assertEqual(b"{\n    a: 1\n    a: 2\n}", pretty_print(b"{ a: 1 a: 2 }"))
	
	def test_empty(self):
		self.assertEqual(b"", pretty_print(b""))
		self.assertEqual(b"[ ]", pretty_print(b"[]"))
	
	def test_first_error_is_raised(self):
		with self.assertRaises(ParseError) as cm:
			pretty_print(b"{ a: { b: [ c: ] } } { d: }")
		self.assertEqual("1:13: invalid character ':' in string", str(cm.exception))


if __name__ == '__main__':
	unittest.main()
