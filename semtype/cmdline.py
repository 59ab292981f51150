"""
This is a reader and checker for semantic-type notation.

{0}

For example:

    semtype show "(e=>t)_v^2" "{e|t}^x"

will print each type in canonical form, or else try to explain why not.

    semtype compare "{A|B}^2" "{B|A}^2"

says whether two types are compatible (exit status 0) or not (exit status 2).

    semtype -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="semtype",
	description="Read, normalize, and compare semantic types.",
)
parser.add_argument('-v', "--verbose", action="count", help="Explain what is going on, on the standard error stream.")
commands = parser.add_subparsers(dest="command", required=True)

show = commands.add_parser("show", help="Print each type in canonical notation.")
show.add_argument("types", nargs="+", help="try (E=>T)_V^2 for example.")

compare = commands.add_parser("compare", help="Say whether two types are compatible.")
compare.add_argument("left")
compare.add_argument("right")
compare.add_argument('-i', "--ignore-exponent", choices=["shallow", "recursive"], help="Excuse mismatched exponents at the top level only, or all the way down.")

def _read_all(texts, report):
	from .notation import from_string, NotationError
	found = []
	for text in texts:
		report.info("Reading", repr(text))
		try: found.append(from_string(text))
		except NotationError as ex: report.bad_notation(ex, repr(text))
	return found

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .notation import to_string
	report = Report(verbose=args.verbose, max_issues=10)
	try:
		if args.command == "show":
			found = _read_all(args.types, report)
		else:
			found = _read_all([args.left, args.right], report)
	except TooManyIssues:
		report.complain_to_console()
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	if args.command == "show":
		for t in found: print(to_string(t))
		return 0
	from .ontology import IgnoreExponent
	from .compatibility import compatible
	mode = IgnoreExponent(args.ignore_exponent) if args.ignore_exponent else None
	left, right = found
	report.info("Comparing", to_string(left), "with", to_string(right), "ignoring exponents:", mode)
	if compatible(left, right, mode):
		print("compatible")
		return 0
	else:
		print("incompatible")
		return 2

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
