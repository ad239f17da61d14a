#!/usr/bin/env python3
# Fetches CaseFolding.txt from unicode.org for generate_unicode_casefold.py.
#
# python3 scripts/download_unicode_data.py --version 15.1.0 --output CaseFolding.txt

import argparse
import sys
import requests

UNICODE_VERSION = "latest"
DEFAULT_OUTPUT = "CaseFolding.txt"
TIMEOUT = 30

def casefolding_url(version):
	if version == "latest":
		return "https://www.unicode.org/Public/UCD/latest/ucd/CaseFolding.txt"
	return f"https://www.unicode.org/Public/{version}/ucd/CaseFolding.txt"

def download(version, filename):
	url = casefolding_url(version)
	try:
		response = requests.get(url, timeout=TIMEOUT)
		response.raise_for_status()
	except requests.HTTPError as e:
		print(repr(e), file=sys.stderr)
		raise
	with open(filename, "wb") as f:
		f.write(response.content)
	return url

def main():
	p = argparse.ArgumentParser(description="Download the Unicode CaseFolding.txt")
	p.add_argument("--version", default=UNICODE_VERSION, help=f"Unicode version, e.g. 15.1.0 (default: {UNICODE_VERSION})")
	p.add_argument("--output", default=DEFAULT_OUTPUT, help=f"Output filename (default: {DEFAULT_OUTPUT})")
	args = p.parse_args()

	url = download(args.version, args.output)
	print(f"downloaded {url} to {args.output}", file=sys.stderr)

if __name__ == '__main__':
	main()
