"""
POT (Pieces of Text) is a lightweight text notation, similar to JSON but with
some differences:

There are two compound types, a dictionary and a list, and two string types. The
dictionary type may hold duplicate keys and the key order is maintained, which
makes it more of an itemized list than a dictionary. The list type simply holds
a sequence of other values.

There are no numeric or boolean types: all parsing eventually produces strings,
and it is up to the application to interpret them. Strings are separated by
space; they may contain space if quoted or escaped.

Dictionary keys are limited like variable names: a-z, A-Z and 0-9 anywhere,
'-' anywhere but first. A key is separated from its value by ':'.

	{ fruit: orange price: 10.5 }

	{ animal:       zebra
	  class:        mammal
	  weight-range: [ 240kg 370kg ] }

	[ this is a list with seven strings ]
	[ "this is a list with one string" ]

	this-is-a-string
	"this is a string"

The escape character is '\\'. Characters '{', '}', '[', ']', ':' and ' ' must be
quoted or escaped in strings; '\\' and '"' must be escaped. Additionally '\\n'
produces a new-line, '\\r' a carriage return and '\\t' a tab.

Create a Root over the text and pull nodes from it (see pot.parsing.nodes), or
wrap any node in a NodeScanner for a scan()/node/error loop.
"""

from .support.interfaces import Location, LanguageError, ParseError, ErrorSink
from .parsing.nodes import Node, Root, Dict, DictKey, List, String
from .parsing.scanner import NodeScanner
from .printer import pretty_print
