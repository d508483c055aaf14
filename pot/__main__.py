"""
Pretty print POT (Pieces of Text) from a file or standard input.

Dictionaries are spread over lines with their values aligned; lists and strings
stay on one line. Exit status is 1 if the input is not valid POT.
"""

import sys, os, argparse

from pot.printer import pretty_print
from pot.support.interfaces import ParseError
from pot.support.failureprone import SourceText

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m pot', description=__doc__,)
	parser.add_argument('source_path', nargs='?', default='-', help='path to input file (default: standard input)')
	parser.add_argument('-o', '--output', help='path to output file (default: standard output)')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing file')
	return parser.parse_args(argv)

def log_error(*parts):
	""" Simple place to override if you'd rather use a logging framework. """
	print(*parts, file=sys.stderr)

def read_source(path) -> bytes:
	if path == '-': return sys.stdin.buffer.read()
	with open(path, 'rb') as fh: return fh.read()

def main(args) -> int:
	if args.output and os.path.exists(args.output) and not args.force:
		log_error('Target file already exists and --force command-line argument was not given.')
		return 1
	try:
		document = read_source(args.source_path)
	except OSError as e:
		log_error('Failed to read %s: %s' % (args.source_path, e))
		return 1
	try:
		text = pretty_print(document)
	except ParseError as e:
		filename = None if args.source_path == '-' else args.source_path
		log_error('Failed to pretty print POT:')
		log_error(SourceText(document, filename=filename).complaint(e))
		return 1
	if args.output:
		with open(args.output, 'wb') as fh: fh.write(text + b'\n')
	else:
		sys.stdout.buffer.write(text + b'\n')
		sys.stdout.flush()
	return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
