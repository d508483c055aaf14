"""
This module is all about easing over the process to display where things go wrong.

A ParseError knows its Location, which is as much as the scanner needs to know.
A person reading the complaint would also like to see the offending line, with
the spot marked. The SourceText wraps the original input to provide exactly that,
and the `illustration` function makes the picture.

Lines break the same way Locations count them: at '\n'. Columns count UTF-8
sequences, so the line is decoded before the marker is placed.
"""

import sys

from .interfaces import ParseError

def illustration(single_line:str, start:int, width:int=1, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline = '^'*max(1, width)
	return prefix + single_line.rstrip() + '\n' + blanks + underline + " " + caption

class SourceText:
	""" Wrapper for POT input text: participates in half-respectable error-display with context. """
	def __init__(self, content:bytes, filename:str=None):
		self.content = content
		self.filename = filename
	
	def line_of_text(self, line:int) -> str:
		""" Zero-based, like Location.line. Empty past the end of the text. """
		lines = self.content.split(b'\n')
		if line >= len(lines): return ''
		return lines[line].rstrip(b'\r').decode('utf-8', 'replace')
	
	def complaint(self, error:ParseError) -> str:
		if self.filename and not error.identifier:
			error = error.with_identifier(self.filename)
		line = self.line_of_text(error.location.line)
		illustrated = illustration(line, error.location.column, prefix=' >>> ')
		return "%s\n%s" % (error, illustrated)
	
	def complain(self, error:ParseError):
		print(self.complaint(error), file=sys.stderr)
