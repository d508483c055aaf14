"""
Lexical scanning over a Cursor.

Each function here recognises one thing at the front of a cursor: a dictionary
key, a delimiter-balanced block, or a string. They return the recognised span as
a new Cursor split off the front of the given one (so the given cursor moves past
it), or None at end of input where that is legal, and raise ParseError otherwise.

The quote/escape/depth flags are local variables of each scanning loop.
"""

from typing import Optional

from .cursor import Cursor

BACKSLASH, QUOTE, COLON, MINUS = b'\\":-'
LBRACE, RBRACE, LBRACKET, RBRACKET = b'{}[]'

# Characters which end an unquoted, unescaped string.
STRING_TERMINATORS = frozenset(b'{}[] \n\r\t')
# Characters which pass through escape evaluation literally, escaped or not.
LITERAL_CHARACTERS = frozenset(b'{}[]: ')
ESCAPE_CODE_TO_CHAR = {ord('n'): ord('\n'), ord('r'): ord('\r'), ord('t'): ord('\t')}
CHAR_TO_ESCAPE_CODE = {ord('\n'): b'\\n', ord('\r'): b'\\r', ord('\t'): b'\\t', BACKSLASH: b'\\\\', QUOTE: b'\\"'}
# Characters which force a string value to be quoted when formatted.
QUOTE_REQUIRED = frozenset(b'{}[]: ')


def is_key_char(i: int, c: int) -> bool:
	""" Check if `c` is a valid key character at index `i`. """
	if 0x61 <= c <= 0x7A or 0x41 <= c <= 0x5A or 0x30 <= c <= 0x39:
		return True
	return i > 0 and c == MINUS


def scan_key(cursor: Cursor) -> Optional[Cursor]:
	"""
	Scan a dictionary key. The returned span excludes the ':', which is consumed.
	Returns None when there is no more input.
	"""
	cursor.trim_space_left()
	if not len(cursor):
		return None
	for i, c in enumerate(cursor.view()):
		if is_key_char(i, c):
			continue
		if c == COLON and i > 0:
			key = cursor.split(i)
			cursor.advance(1) # Eat ':'
			return key
		cursor.advance(i)
		raise cursor.error("invalid character '%s' in key" % chr(c))
	cursor.advance_all()
	raise cursor.error("end of input while parsing key")


def scan_block(cursor: Cursor, open_char: int, close_char: int) -> Cursor:
	""" Scan a dictionary or list block, delimiters included. """
	quoted = escaped = False
	depth = 0
	for i, c in enumerate(cursor.view()):
		if c == BACKSLASH:
			escaped = not escaped
			continue
		if c == QUOTE:
			if not escaped: quoted = not quoted
		elif c == open_char:
			if not quoted and not escaped: depth += 1
		elif c == close_char:
			if not quoted and not escaped:
				depth -= 1
				if depth == 0:
					return cursor.split(i + 1)
		escaped = False
	cursor.advance_all()
	raise cursor.error("end of input while parsing '%s%s' block" % (chr(open_char), chr(close_char)))


def scan_string(cursor: Cursor) -> Cursor:
	"""
	Scan a string value. If the span holds no quote or escape characters it is
	returned as is; otherwise the returned cursor holds the evaluated bytes.
	"""
	quoted = escaped = evaluate = False
	end = len(cursor)
	for i, c in enumerate(cursor.view()):
		if c == BACKSLASH:
			escaped = not escaped
			evaluate = True
			continue
		if c == QUOTE:
			if not escaped: quoted = not quoted
			evaluate = True
		elif c in STRING_TERMINATORS:
			if not quoted and not escaped:
				if i == 0:
					raise cursor.error("invalid character '%s' in string" % chr(c))
				end = i
				break
		elif c == COLON:
			if not quoted and not escaped:
				cursor.advance(i)
				raise cursor.error("invalid character '%s' in string" % chr(c))
		escaped = False
	
	span = cursor.split(end)
	return eval_string_buffer(span) if evaluate else span


def eval_string_buffer(span: Cursor) -> Cursor:
	"""
	Evaluate escape codes and quotes in a raw string span.
	Returns a new cursor over the semantic bytes, located where the span begins.
	"""
	quoted = escaped = False
	out = bytearray()
	for i, c in enumerate(span.view()):
		if c == BACKSLASH:
			if escaped: out.append(c)
			escaped = not escaped
			continue
		if c == QUOTE:
			if escaped: out.append(c)
			else: quoted = not quoted
		elif c in ESCAPE_CODE_TO_CHAR:
			out.append(ESCAPE_CODE_TO_CHAR[c] if escaped else c)
		elif c in LITERAL_CHARACTERS:
			out.append(c)
		elif escaped:
			span.advance(i)
			raise span.error("invalid escape code \\%s" % chr(c))
		else:
			out.append(c)
		escaped = False
	
	if quoted:
		span.advance_all()
		raise span.error("miss-matched quotes in string")
	if escaped:
		span.advance_all()
		raise span.error("unterminated escape code in string")
	return Cursor(bytes(out), span.location)


def format_string(value: bytes) -> bytes:
	"""
	Format semantic bytes as a POT string value: quoted when empty or when a
	structural character is present, with newline, carriage return, tab,
	backslash and quote escaped. Parsing the result yields `value` again.
	"""
	quote = not value
	out = bytearray()
	for c in value:
		if c in QUOTE_REQUIRED:
			quote = True
		if c in CHAR_TO_ESCAPE_CODE:
			out += CHAR_TO_ESCAPE_CODE[c]
		else:
			out.append(c)
	if quote:
		return b'"' + bytes(out) + b'"'
	return bytes(out)
