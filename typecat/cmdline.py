"""
Self-check for the typecat functional toolkit.

{0}

For example:

    typecat check

will confirm that identity, composition, and memoization all behave, and

    typecat time -n 100000

will show what memoization buys on a trivial function.

    typecat -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="typecat",
	description="Self-check for the typecat functional toolkit.",
)
subparsers = parser.add_subparsers(dest="command")
check_parser = subparsers.add_parser("check", help="Check that every law holds.")
check_parser.add_argument('-v', "--verbose", action="count", help="Mention each law as it passes.")
time_parser = subparsers.add_parser("time", help="Time un-memoized against memoized application.")
time_parser.add_argument('-n', "--rounds", type=int, default=3, help="How many distinct inputs to apply. (default: %(default)s)")

def run(args):
	if args.command == "check":
		return _check(args)
	elif args.command == "time":
		return _time(args)
	else:
		parser.print_usage(sys.stderr)
		return 2

def _check(args):
	from .diagnostics import Report, TooManyIssues
	from .laws import check_all
	report = Report(verbose=args.verbose)
	try: check_all(report)
	except TooManyIssues:
		report.complain_to_console()
		print("Giving up after too many issues.", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	print("OK")
	return 0

def _time(args):
	from .laws import time_memoization
	if args.rounds < 1:
		parser.error("--rounds must be at least 1, not %d" % args.rounds)
	cold, warm = time_memoization(args.rounds)
	print("un-memoized: %.3fms" % (cold * 1000))
	print("memoized: %.3fms" % (warm * 1000))
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
