"""
The lazy, pull-based node stream.

Every node wraps a Cursor over its own span of the input and offers `next()`,
which scans and returns the next child node, None when there are no more, or
raises ParseError. Nothing is scanned before it is asked for: a caller may
recurse into a compound child or simply drop it. Nodes never refer to their
parent; each child owns a span that was split off its parent's cursor.

	root = Root(b"{ fruit: orange price: 10.5 }")
	for node in root:
		if isinstance(node, Dict):
			for child in node: print(child)
"""

from abc import ABC, abstractmethod
from typing import Optional, Iterator

from ..support.interfaces import Location
from ..scanning.cursor import Cursor
from ..scanning import lexical
from ..scanning.lexical import LBRACE, RBRACE, LBRACKET, RBRACKET


class Node(ABC):
	""" Interface implemented by Root, Dict, DictKey, List and String. """
	
	name: str
	
	@abstractmethod
	def next(self) -> Optional["Node"]:
		""" Get the next child node, or None at the end. Raises ParseError. """
	
	def __iter__(self) -> Iterator["Node"]:
		while True:
			node = self.next()
			if node is None: return
			yield node
	
	@property
	def bytes(self) -> bytes:
		""" Text the node was initialised with. """
		return self._origin.bytes
	
	@property
	def location(self) -> Location:
		""" Start location in the original text input. """
		return self._origin.location


class Root(Node):
	"""
	Root level node, capable of yielding several root level values from the same
	text input. It behaves like a list without delimiters.
	"""
	name = "root"
	
	def __init__(self, text):
		self._cursor = Cursor(text)
		self._origin = self._cursor.copy()
	
	def next(self):
		return scan_value(self._cursor)


class Dict(Node):
	"""
	Dictionary node. Even pulls yield a DictKey, odd pulls yield the value, which
	may be a Dict, List or String. Keys may repeat; order is kept.
	"""
	name = "dictionary"
	
	def __init__(self, cursor: Cursor):
		self._origin = cursor.copy()
		self._cursor = cursor
		self._count = 0
		cursor.strip_block(LBRACE, RBRACE)
		# Trim space so that is_empty() works before the first pull.
		cursor.trim_space_left()
	
	@classmethod
	def from_text(cls, text) -> "Dict":
		return cls(Cursor(text))
	
	def next(self):
		if self._count % 2 == 0:
			span = lexical.scan_key(self._cursor)
			node = None if span is None else DictKey(span)
		else:
			node = scan_value(self._cursor)
			if node is None:
				raise self._cursor.error("key without value in dictionary")
		if node is not None:
			self._count += 1
		return node
	
	def is_empty(self) -> bool:
		""" Check if the node has consumed all its text. """
		return not len(self._cursor)


class List(Node):
	""" List node. Every pull yields a Dict, List or String. """
	name = "list"
	
	def __init__(self, cursor: Cursor):
		self._origin = cursor.copy()
		self._cursor = cursor
		cursor.strip_block(LBRACKET, RBRACKET)
	
	@classmethod
	def from_text(cls, text) -> "List":
		return cls(Cursor(text))
	
	def next(self):
		return scan_value(self._cursor)


class _Leaf(Node):
	""" Leaves hold their (already evaluated) bytes and have no children. """
	
	def __init__(self, cursor: Cursor):
		self._origin = cursor
	
	def next(self):
		return None
	
	def __str__(self):
		return self.formatted().decode('utf-8', 'replace')
	
	def __repr__(self):
		return "<%s %s %r>" % (type(self).__name__, self.location, self.bytes)
	
	@abstractmethod
	def formatted(self) -> bytes:
		""" The leaf formatted as POT text. """


class String(_Leaf):
	""" String value. `bytes` is the semantic value: quotes and escapes are resolved. """
	name = "string"
	
	def formatted(self):
		return lexical.format_string(self.bytes)


class DictKey(_Leaf):
	""" Dictionary key; a distinct type so keys and string values can be told apart. """
	name = "dictionary-key"
	
	def formatted(self):
		return self.bytes + b':'


def scan_value(cursor: Cursor) -> Optional[Node]:
	"""
	Scan a Dict, List or String off the front of a cursor.
	Returns None when there is no more input.
	"""
	cursor.trim_space_left()
	if not len(cursor):
		return None
	first = cursor.at(0)
	if first == LBRACE:
		return Dict(lexical.scan_block(cursor, LBRACE, RBRACE))
	if first == LBRACKET:
		return List(lexical.scan_block(cursor, LBRACKET, RBRACKET))
	return String(lexical.scan_string(cursor))
