#!/usr/bin/env python3
"""
Translate a Python contract class to Cairo.

Usage:
    py2cairo counter.py
    py2cairo counter.py -o counter.cairo
    py2cairo counter.py --strict --json report.json
"""

import argparse
import logging
import sys
from pathlib import Path

from py2cairo.core.errors import TranspileError
from py2cairo.core.transpiler import transpile
from py2cairo.output import TranslationJSONFormatter


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Translate a Python contract class to a Starknet Cairo contract",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Print the Cairo contract
    py2cairo examples/counter.py

    # Write it to a file and keep a JSON report
    py2cairo examples/counter.py -o counter.cairo --json counter.json

    # Fail on functions that need a state read but access no field
    py2cairo examples/counter.py --strict
        """
    )

    parser.add_argument("file", help="Python file holding the contract class")
    parser.add_argument("-o", "--output", help="Write Cairo code to this file instead of stdout")
    parser.add_argument("--strict", action="store_true",
                        help="Report functions that need a state read but access no field")
    parser.add_argument("--json", dest="json_output", help="Save a JSON translation report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Check file exists
    source_path = Path(args.file)
    if not source_path.exists():
        print(f"❌ Error: File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        source = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Error: Could not read {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        result = transpile(source, strict=args.strict)
    except SyntaxError as e:
        print(f"❌ Syntax error in {args.file}: {e}", file=sys.stderr)
        return 1
    except TranspileError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    contract = result["contract"]
    cairo_source = result["cairo_source"]

    if not contract.name:
        print(f"⚠️  No class found in {args.file}", file=sys.stderr)

    if args.output:
        Path(args.output).write_text(cairo_source, encoding="utf-8")
        if args.verbose:
            print(f"💾 Cairo contract saved to: {args.output}")
    else:
        print(cairo_source)

    if args.json_output:
        formatter = TranslationJSONFormatter(args.file, strict=args.strict)
        formatter.set_result(contract, source, cairo_source, cairo_file=args.output)
        formatter.save_to_file(args.json_output)
        if args.verbose:
            print(f"💾 JSON report saved to: {args.json_output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
