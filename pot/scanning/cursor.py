"""
The Cursor is the only thing that consumes input.

A cursor is a window (start, end) onto an immutable bytes object together with
the Location of its first unconsumed byte. Consuming moves `start` forward and
folds the consumed bytes into the location. Splitting hands the first n bytes
to a new cursor without copying anything; the new cursor keeps the location the
parent had before the split.
"""

from ..support.interfaces import Location, ORIGIN, ParseError


def as_bytes(text) -> bytes:
	""" Accept str for convenience; everything downstream works on UTF-8 bytes. """
	if isinstance(text, str):
		return text.encode('utf-8')
	return bytes(text)

def is_continuation(c: int) -> bool:
	return c & 0xC0 == 0x80

def fold_location(location: Location, chunk) -> Location:
	""" The location reached after consuming `chunk` starting at `location`. """
	line, column = location
	line += chunk.count(b'\n')
	last_break = max(chunk.rfind(b'\n'), chunk.rfind(b'\r'))
	if last_break >= 0:
		column = 0
		chunk = chunk[last_break + 1:]
	return Location(line, column + sum(1 for c in chunk if not is_continuation(c)))

def _sequence_length(lead: int) -> int:
	if lead < 0x80: return 1
	if lead >= 0xF0: return 4
	if lead >= 0xE0: return 3
	return 2

def _space_width(view, i: int) -> int:
	""" Byte length of the white-space character starting at view[i], or zero. """
	c = view[i]
	if c < 0x80:
		return 1 if chr(c).isspace() else 0
	n = _sequence_length(c)
	try: char = bytes(view[i:i+n]).decode('utf-8')
	except UnicodeDecodeError: return 0
	return n if char.isspace() else 0

def _trailing_space_width(view) -> int:
	""" Byte length of the white-space character ending the view, or zero. """
	i = len(view) - 1
	while i > 0 and is_continuation(view[i]) and len(view) - i < 4:
		i -= 1
	width = _space_width(view, i)
	return width if i + width == len(view) else 0


class Cursor:
	"""
	Owned view over the remaining unconsumed bytes of the input plus the location
	of the first of them. Consumption is monotonic: nothing is ever rewound.
	"""
	
	def __init__(self, text, location: Location = ORIGIN, start: int = 0, end: int = None):
		self.__text = as_bytes(text)
		self.__start = start
		self.__end = len(self.__text) if end is None else end
		self.location = location
	
	def __len__(self):
		return self.__end - self.__start
	
	def __repr__(self):
		return "<Cursor %s %r>" % (self.location, self.bytes)
	
	def at(self, n: int) -> int:
		return self.__text[self.__start + n]
	
	def view(self) -> memoryview:
		""" Unconsumed bytes, without copying them. """
		return memoryview(self.__text)[self.__start:self.__end]
	
	@property
	def bytes(self) -> bytes:
		""" Unconsumed bytes as a bytes object. """
		return self.__text[self.__start:self.__end]
	
	def copy(self) -> "Cursor":
		return Cursor(self.__text, self.location, self.__start, self.__end)
	
	def advance(self, n: int):
		""" Consume n bytes from the left. """
		assert 0 <= n <= len(self)
		self.location = fold_location(self.location, self.__text[self.__start:self.__start + n])
		self.__start += n
	
	def advance_all(self):
		self.advance(len(self))
	
	def trim_right(self, n: int):
		""" Drop n bytes from the right. This does not move the location. """
		assert 0 <= n <= len(self)
		self.__end -= n
	
	def trim_space_left(self):
		view, n = self.view(), 0
		while n < len(view):
			width = _space_width(view, n)
			if not width: break
			n += width
		self.advance(n)
	
	def trim_space_right(self):
		while len(self):
			width = _trailing_space_width(self.view())
			if not width: break
			self.trim_right(width)
	
	def trim_space(self):
		self.trim_space_left()
		self.trim_space_right()
	
	def strip_block(self, open_char: int, close_char: int):
		"""
		Trim surrounding space, then strip one leading/trailing delimiter pair
		if (and only if) both are present.
		"""
		self.trim_space()
		size = len(self)
		if size >= 2 and self.at(0) == open_char and self.at(size - 1) == close_char:
			self.advance(1)
			self.trim_right(1)
	
	def split(self, n: int) -> "Cursor":
		""" Hand the first n bytes to a new cursor and consume them here. """
		head = Cursor(self.__text, self.location, self.__start, self.__start + n)
		self.advance(n)
		return head
	
	def error(self, message: str) -> ParseError:
		""" A ParseError at the current (already advanced) location. """
		return ParseError(self.location, message)
