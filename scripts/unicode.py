import csv
import re
from collections import namedtuple

MAX_CODEPOINT = 0x10FFFF

HEX_RE = re.compile(r"[0-9A-Fa-f]+")

# C: common, S: simple, F: full, T: Turkic
SIMPLE_STATUSES = ("C", "S")
IGNORED_STATUSES = ("F", "T")


class CaseFoldingDecodeError(Exception):
	def __init__(self, message, filename, line):
		error = f'File "{filename}", line {line}: {message}'
		super().__init__(error)
		self.filename = filename
		self.line = line


CaseFolding = namedtuple("CaseFolding", "code status mapping line")


def unhex(s):
	s = s.strip()
	if not HEX_RE.fullmatch(s):
		raise ValueError(f"invalid codepoint {s!r}")
	value = int(s, 16)
	if value > MAX_CODEPOINT:
		raise ValueError(f"codepoint {s} out of range")
	return value


def unhex_sequence(s):
	return [unhex(x) for x in s.split()]


def casefolding(filename):
	result = []
	with open(filename, encoding='utf-8-sig') as f:
		# Filter comments, keep one row per physical line for line numbers
		reader = csv.reader((line.split('#')[0] for line in f), delimiter=';', quoting=csv.QUOTE_NONE)
		for row in reader:
			if not "".join(row).strip():
				continue
			if len(row) < 3:
				raise CaseFoldingDecodeError("Expected at least 3 fields", filename, reader.line_num)
			code, status, mapping = (field.strip() for field in row[:3])
			if not status:
				raise CaseFoldingDecodeError("Missing status", filename, reader.line_num)
			try:
				result.append(CaseFolding(unhex(code), status, unhex_sequence(mapping), reader.line_num))
			except ValueError as e:
				raise CaseFoldingDecodeError(str(e), filename, reader.line_num) from e
	return result


def simple_case_mappings(records, filename="<CaseFolding.txt>"):
	"""Return the (lower, upper) pairs of the common and simple foldings.

	File order is kept: the generated tables are indexed positionally.
	"""
	cases = []
	for record in records:
		if record.status in IGNORED_STATUSES:
			continue
		if record.status not in SIMPLE_STATUSES:
			raise CaseFoldingDecodeError(f"Unknown status {record.status!r}", filename, record.line)
		if len(record.mapping) != 1:
			raise CaseFoldingDecodeError("Simple folding must map to exactly one codepoint", filename, record.line)
		cases.append((record.mapping[0], record.code))
	return cases


def utf8_encode(cp):
	if cp <= 0x7F:
		return (cp, 0, 0, 0), 1
	elif cp <= 0x7FF:
		return (0xC0 | ((cp >> 6) & 0x1F), 0x80 | (cp & 0x3F), 0, 0), 2
	elif cp <= 0xFFFF:
		return (0xE0 | ((cp >> 12) & 0x0F), 0x80 | ((cp >> 6) & 0x3F), 0x80 | (cp & 0x3F), 0), 3
	return (0xF0 | ((cp >> 18) & 0x07), 0x80 | ((cp >> 12) & 0x3F), 0x80 | ((cp >> 6) & 0x3F), 0x80 | (cp & 0x3F)), 4
