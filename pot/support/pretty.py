""" Bits and bobs in support of printing POT text in neat columns. """

import io
from typing import Optional

from .interfaces import ErrorSink

TAB, NEWLINE = b'\t', b'\n'


class TabWriter:
	"""
	Elastic tab stops, after the fashion of Go's text/tabwriter.
	
	Text is a sequence of lines; within a line, every tab terminates a cell. The
	last piece of a line is not a cell and takes no part in alignment. A column
	block is a run of consecutive lines which all have a cell in that column, and
	every cell in a block is padded to max(min_width, widest cell + padding).
	Cell width is byte length. Nothing reaches the stream until flush().
	"""
	
	def __init__(self, stream, min_width=4, padding=1, pad_char=b' '):
		self.__stream = stream
		self.min_width = min_width
		self.padding = padding
		self.pad_char = pad_char
		self.__pending = bytearray()
	
	def write(self, data: bytes):
		self.__pending += data
	
	def flush(self):
		lines = [line.split(TAB) for line in bytes(self.__pending).split(NEWLINE)]
		self.__pending.clear()
		self.__format(lines, [], 0, len(lines))
	
	def __format(self, lines, widths, line0, line1):
		column = len(widths)
		this = line0
		while this < line1:
			if column >= len(lines[this]) - 1:
				this += 1
				continue
			# This line has a cell in this column: a column block starts here.
			self.__write_lines(lines, widths, line0, this)
			line0 = this
			width = self.min_width
			while this < line1 and column < len(lines[this]) - 1:
				width = max(width, len(lines[this][column]) + self.padding)
				this += 1
			self.__format(lines, widths + [width], line0, this)
			line0 = this
		self.__write_lines(lines, widths, line0, line1)
	
	def __write_lines(self, lines, widths, line0, line1):
		for i in range(line0, line1):
			for j, cell in enumerate(lines[i]):
				self.__stream.write(cell)
				if j < len(widths):
					self.__stream.write(self.pad_char * (widths[j] - len(cell)))
			if i + 1 < len(lines):
				self.__stream.write(NEWLINE)


class PrintBuffer:
	"""
	Helper type used for pretty printing.
	Once an error is in the sink it silently ignores any write requests, so the
	error sink can be used to share "abort on first error" behavior with the
	node scanners of the walk that feeds it.
	"""
	
	def __init__(self, sink: ErrorSink = None):
		self.__out = io.BytesIO()
		self.__tw = TabWriter(self.__out)
		self.__sink = ErrorSink() if sink is None else sink
		self.__term = b''
	
	@property
	def sink(self) -> ErrorSink:
		return self.__sink
	
	@property
	def error(self) -> Optional[Exception]:
		return self.__sink.error
	
	def getvalue(self) -> Optional[bytes]:
		""" The printed text, or None if an error has occurred. """
		if self.__sink.ok():
			return self.__out.getvalue()
		return None
	
	def flush(self):
		if self.__sink.ok():
			self.__tw.flush()
	
	def term(self, c: bytes):
		"""
		Set a character to add to the buffer when write is next called, before
		that write's data. A later term() replaces one not yet written.
		"""
		self.__term = c
	
	def write(self, *chunks: bytes) -> "PrintBuffer":
		""" Does nothing if an error has already occurred. """
		if self.__sink.ok():
			self.__tw.write(self.__term)
			self.__term = b''
			for chunk in chunks:
				self.__tw.write(chunk)
		return self
