"""
This is a calculator for whitespace-separated integer arithmetic.

{0}

For example:

    yard "( 1 + 3 ) * 2"

will print "( 1 + 3 ) * 2 = 8", or else try to explain why not.

    yard --demo

will run the sample expressions, and

    yard -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

DEMO = [
	"1 + 3",
	"( 1 + 3 ) * 2",
	"( 4 / 2 ) + 6",
	"4 + ( 12 / ( 1 * 2 ) )",
	"( 1 + ( 12 * 2 )",
]

parser = argparse.ArgumentParser(
	prog="yard",
	description="Shunting-yard calculator for integer arithmetic.",
)
parser.add_argument("expression", nargs="*", help='try "( 1 + 3 ) * 2" for example.')
parser.add_argument('-f', "--file", help="Read expressions one per line from this file, or '-' for standard input.")
parser.add_argument("--demo", action="store_true", help="Evaluate the sample expressions.")
parser.add_argument('-p', "--precedence", action="store_true", help="Let * and / bind tighter than + and -.")
parser.add_argument('-s', "--strict", action="store_true", help="Treat an operator with only one operand as an error.")
parser.add_argument('-w', "--word-size", type=int, default=32, choices=(8, 16, 32, 64), help="Bits in an integer (default 32).")
parser.add_argument('-v', "--verbose", action="count", help="Show postfix forms and progress on stderr.")
def _at_least_one(text:str) -> int:
	value = int(text)
	if value < 1: raise argparse.ArgumentTypeError("must be at least 1, not %d" % value)
	return value

parser.add_argument("--max-issues", type=_at_least_one, default=10, help="Give up after this many failed expressions.")

def _read_lines(name:str) -> list[str]:
	if name == "-": text = sys.stdin.read()
	else: text = Path(name).read_text(encoding="utf-8")
	# Blank lines and #-comments are not expressions.
	return [line for line in text.splitlines() if line.strip() and not line.lstrip().startswith("#")]

def gather(args) -> list[str]:
	expressions = list(args.expression)
	if args.file: expressions.extend(_read_lines(args.file))
	if args.demo: expressions.extend(DEMO)
	return expressions

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .executive import each_result
	from .options import Options
	options = Options(
		precedence_aware=args.precedence,
		strict_operands=args.strict,
		word_size=args.word_size,
	)
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	expressions = gather(args)
	if not expressions:
		print("Nothing to evaluate.", file=sys.stderr)
		return 1
	try:
		for expression, result in each_result(expressions, report, options):
			if result is not None:
				print(expression, "=", result)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
