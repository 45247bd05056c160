"""
This evaluates expressions written as JSON data.

{0}

For example:

    reckon '["+", 1, 2, 3]'

prints 6, and

    reckon --now 2000-01-20T23:00:28 '["-", "now", [3, "days"]]'

prints "2000-01-17T23:00:28". Dates go in as {{"date": "2000-01-20"}}
and date-times as {{"datetime": "2000-01-20T23:00:28"}}.

    reckon -h

will explain all the arguments.
"""
import sys, argparse
from datetime import datetime

parser = argparse.ArgumentParser(
	prog="reckon",
	description="Evaluate an expression written as JSON data.",
)
parser.add_argument("expression", nargs="?", default="-", help="a JSON expression, or - to read one from stdin.")
parser.add_argument('-f', "--file", help="read the JSON expression from this file instead.")
parser.add_argument("--now", type=datetime.fromisoformat, help="pretend it is this ISO date-time, for \"now\" and \"today\".")
parser.add_argument('-c', "--check", action="store_true", help="Check the expression's shape but do not actually evaluate it.")
parser.add_argument('-v', "--verbose", action="count", help="Show the syntax tree on stderr before evaluating.")

def _obtain(args, report):
	from .interchange import loads
	if args.file:
		source = args.file
		try:
			with open(args.file, "r", encoding="utf-8") as fh: text = fh.read()
		except OSError as ex:
			report.no_such_file(args.file, ex)
			return
	elif args.expression == "-":
		source, text = "stdin", sys.stdin.read()
	else:
		source, text = "the command line", args.expression
	try: return loads(text)
	except ValueError as ex: report.unreadable_json(source, ex)

def run(args):
	from .diagnostics import Report
	from .errors import EvalError, ResourceExhausted
	from .reader import read
	from .evaluator import Evaluator
	from .clock import FixedClock
	from .interchange import dumps
	report = Report(verbose=args.verbose)
	expression = _obtain(args, report)
	if report.sick():
		report.complain_to_console()
		return 1
	clock = FixedClock(args.now) if args.now else None
	try:
		node = read(expression)
		report.info("Read:", node)
		if args.check:
			print("Looks plausible to me.", file=sys.stderr)
			return 0
		result = Evaluator(clock).evaluate_node(node)
	except EvalError as ex:
		report.evaluation_failed(ex)
	except ResourceExhausted as ex:
		report.nested_too_deeply(ex)
	except ArithmeticError as ex:
		report.arithmetic_failed(ex)
	if report.sick():
		report.complain_to_console()
		return 1
	print(dumps(result))
	return 0

def main(argv=None):
	if argv is None and len(sys.argv) == 1 and sys.stdin.isatty():
		print(__doc__.strip().format(parser.format_usage()))
	else:
		sys.exit(run(parser.parse_args(argv)))
