#!/usr/bin/env python3
# Needs CaseFolding.txt, see scripts/download_unicode_data.py.
#
# It can be obtained from unicode.org:
# - http://www.unicode.org/Public/<VERSION>/ucd/CaseFolding.txt
#
# If executed as a script, it will generate the case tables header
# python3 scripts/generate_unicode_casefold.py CaseFolding.txt src/core/string/UnicodeTables.h

import argparse
import io
import sys
import unicode

HEADER_INCLUDES = ("core/MinInclude.h", "StringUtilTypes.h")
NAMESPACE = "Core::Unicode"
CODEPOINTS_PER_ROW = 8
UTF8_CHARS_PER_ROW = 4

def generate_cases(filename):
	return unicode.simple_case_mappings(unicode.casefolding(filename), filename)

def chunks(l, n):
	return [l[i:i + n] for i in range(0, len(l), n)]

def format_codepoint(cp):
	return f"0x{cp:05X}"

def format_utf8_char(cp):
	data, size = unicode.utf8_encode(cp)
	return "{{ {{ {} }}, {} }}".format(", ".join(f"0x{b:02X}" for b in data), size)

def gen_table(f, type_name, name, values, per_row):
	print(f"\tconstexpr {type_name} {name}[UnicodeCaseTableSize] =", file=f)
	print("\t{", file=f)
	for row in chunks(values, per_row):
		print("\t\t" + " ".join(f"{value}," for value in row), file=f)
	print("\t};", file=f)

def gen_header(cases, f):
	lower = [lower_code for lower_code, _ in cases]
	upper = [upper_code for _, upper_code in cases]

	print("/* AUTO GENERATED! DO NOT EDIT MANUALLY! See scripts/generate_unicode_casefold.py */", file=f)
	print("#pragma once", file=f)
	for include in HEADER_INCLUDES:
		print(f"#include \"{include}\"", file=f)
	print(file=f)
	print(f"namespace {NAMESPACE}", file=f)
	print("{", file=f)
	print(f"\tconstexpr usize UnicodeCaseTableSize = {len(cases)};", file=f)
	print(file=f)
	gen_table(f, "UCodepoint", "UnicodeCaseLowerTable", [format_codepoint(c) for c in lower], CODEPOINTS_PER_ROW)
	print(file=f)
	gen_table(f, "UCodepoint", "UnicodeCaseUpperTable", [format_codepoint(c) for c in upper], CODEPOINTS_PER_ROW)
	print(file=f)
	gen_table(f, "Utf8Char", "Utf8CaseLowerTable", [format_utf8_char(c) for c in lower], UTF8_CHARS_PER_ROW)
	print(file=f)
	gen_table(f, "Utf8Char", "Utf8CaseUpperTable", [format_utf8_char(c) for c in upper], UTF8_CHARS_PER_ROW)
	print("}", file=f)

def main():
	p = argparse.ArgumentParser(description="Generate the simple case folding tables header from CaseFolding.txt")
	p.add_argument("casefolding", metavar="CASEFOLDING_TXT", help="Path to the Unicode CaseFolding.txt")
	p.add_argument("output", metavar="OUTPUT", help="Header file to write, overwritten if it exists")
	args = p.parse_args()

	cases = generate_cases(args.casefolding)
	if not cases:
		raise ValueError(f"No simple case mappings found in {args.casefolding}")

	# Render fully before touching the output file
	header = io.StringIO()
	gen_header(cases, header)
	with open(args.output, "w", encoding="utf-8", newline="\n") as f:
		f.write(header.getvalue())
	print(f"wrote {len(cases)} case mappings to {args.output}", file=sys.stderr)

if __name__ == '__main__':
	main()
