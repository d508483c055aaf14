"""
Canonical pretty printing of POT text.

Root level strings and lists go one per line. Dictionaries are spread over
several lines, one entry per line, with the values of each dictionary body
aligned in a column; nested non-empty dictionaries are indented one level.
Lists, and everything inside them, are printed on a single line.
"""

from .parsing.nodes import Root, Dict, DictKey, List
from .parsing.scanner import NodeScanner
from .support.pretty import PrintBuffer

# Number of space characters used per indentation level.
INDENT_SIZE = 4

def indent_space(level: int) -> bytes:
	return b' ' * (level * INDENT_SIZE)


def pretty_print(text) -> bytes:
	"""
	Pretty print a POT text buffer (bytes, or str taken as UTF-8).
	Returns the formatted bytes; raises the first ParseError encountered.
	"""
	buf = PrintBuffer()
	for node in NodeScanner(Root(text), buf.sink):
		if isinstance(node, Dict):
			pretty_print_dict(buf, node, 0)
		elif isinstance(node, List):
			print_list(buf, node)
		else:
			buf.write(node.formatted())
		buf.term(b'\n')
	buf.flush()
	if buf.error is not None:
		raise buf.error
	return buf.getvalue()


def pretty_print_dict(buf: PrintBuffer, node: Dict, level: int):
	""" Print a dictionary over several lines. Errors go to the buffer's sink. """
	key = None
	outer, inner = indent_space(level), indent_space(level + 1)
	buf.write(b'{\n')
	for child in NodeScanner(node, buf.sink):
		if isinstance(child, DictKey):
			key = child.formatted()
		elif isinstance(child, Dict):
			if child.is_empty():
				buf.write(inner, key, b'\t{ }\n')
			else:
				buf.write(inner, key, b' ')
				pretty_print_dict(buf, child, level + 1)
		elif isinstance(child, List):
			buf.write(inner, key, b'\t')
			print_list(buf, child)
			buf.term(b'\n')
		else:
			buf.write(inner, key, b'\t', child.formatted(), b'\n')
	buf.write(outer, b'}').term(b'\n')


def print_dict(buf: PrintBuffer, node: Dict):
	""" Print a dictionary on a single line. """
	key = None
	buf.write(b'{ ')
	for child in NodeScanner(node, buf.sink):
		if isinstance(child, DictKey):
			key = child.formatted()
		elif isinstance(child, Dict):
			buf.write(key, b' ')
			print_dict(buf, child)
		elif isinstance(child, List):
			buf.write(key, b' ')
			print_list(buf, child)
		else:
			buf.write(key, b' ', child.formatted(), b' ')
	buf.write(b'}').term(b' ')


def print_list(buf: PrintBuffer, node: List):
	""" Print a list on a single line. """
	buf.write(b'[ ')
	for child in NodeScanner(node, buf.sink):
		if isinstance(child, Dict):
			print_dict(buf, child)
		elif isinstance(child, List):
			print_list(buf, child)
		else:
			buf.write(child.formatted(), b' ')
	buf.write(b']').term(b' ')
