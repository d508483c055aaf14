"""
A bufio.Scanner-like wrapper around a node, for easy pull loops:

	scanner = NodeScanner(node)
	while scanner.scan():
		visit(scanner.node)
	if scanner.error: ...

The first error is latched in an ErrorSink, which may be shared among the
scanners of a whole recursive walk; once any of them (or the caller, through
inject_error) has recorded an error, every scanner sharing the sink stops.
"""

from typing import Optional

from ..support.interfaces import ErrorSink, ParseError
from .nodes import Node


class NodeScanner:
	def __init__(self, parent: Node, sink: ErrorSink = None):
		self.__parent = parent
		self.__node = None
		self.__sink = ErrorSink() if sink is None else sink
	
	@property
	def sink(self) -> ErrorSink:
		return self.__sink
	
	def scan(self) -> bool:
		""" Pull the next child node. Returns True if there was one. """
		if not self.__sink.ok():
			return False
		try:
			self.__node = self.__parent.next()
		except ParseError as e:
			self.__node = None
			self.__sink.send(e)
			return False
		return self.__node is not None
	
	def __iter__(self):
		while self.scan():
			yield self.__node
	
	@property
	def node(self) -> Optional[Node]:
		""" The node found by the previous scan(); None once an error is recorded. """
		return self.__node if self.__sink.ok() else None
	
	@property
	def error(self) -> Optional[Exception]:
		""" The first error that occurred. Check it once scan() has returned False. """
		return self.__sink.error
	
	def inject_error(self, error: Exception):
		""" Abort iteration: scan() returns False from now on and `error` reports this. """
		self.__sink.send(error)
