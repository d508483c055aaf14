"""
This file aggregates the small value types and exception types which POT deals in.

Everything the scanner reports about *where* something happened is a Location.
Everything that can go wrong while reading POT text is a ParseError. The ErrorSink
is the latch which lets a deep recursive walk over the node stream give up cleanly
on the first failure without checking a return value in every frame.
"""

from typing import NamedTuple, Optional


class Location(NamedTuple):
	"""
	Position in the original text input. Both fields count from zero.
	Columns count UTF-8 sequences, not bytes.
	"""
	line: int = 0
	column: int = 0
	
	def __str__(self):
		# For presentation the line number is adjusted to count from one.
		return "%d:%d" % (self.line + 1, self.column)
	
	def add(self, other: "Location") -> "Location":
		""" Component-wise sum; handy to rebase a location found in a sub-buffer. """
		return Location(self.line + other.line, self.column + other.column)

ORIGIN = Location(0, 0)


class LanguageError(ValueError):
	""" Base class of all exceptions arising from the POT machinery. """

class ParseError(LanguageError):
	"""
	Malformed POT text. Carries the location where the problem was detected and,
	optionally, an identifier (a file name or similar) used only for display.
	"""
	def __init__(self, location: Location, message: str, identifier: Optional[str] = None):
		super().__init__(location, message, identifier)
		self.location, self.message, self.identifier = location, message, identifier
	
	def __str__(self):
		if self.identifier:
			return "%s:%s: %s" % (self.identifier, self.location, self.message)
		return "%s: %s" % (self.location, self.message)
	
	def with_identifier(self, identifier: str) -> "ParseError":
		return ParseError(self.location, self.message, identifier)


class ErrorSink:
	"""
	Error sink used to implement "abort on first error" functionality with ease.
	A function would check if the sink already contains an error and if it does
	do nothing. The first error sent wins; later ones are dropped.
	"""
	def __init__(self):
		self.__error = None
	
	@property
	def error(self) -> Optional[Exception]:
		return self.__error
	
	def ok(self) -> bool:
		return self.__error is None
	
	def send(self, error: Optional[Exception]):
		""" Does nothing if an error is already stored in the sink (or if error is None). """
		if self.__error is None:
			self.__error = error
