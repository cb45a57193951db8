"""
The arithmetic itself: what each operator glyph does, and how tightly it binds.
Binding strength only matters when the shunter is asked to care about it.
"""
import operator
from typing import Callable, NamedTuple

class Arithmetic(NamedTuple):
	precedence: int
	fn: Callable[[int, int], int]

def truncating_division(dividend:int, divisor:int) -> int:
	""" Integer division that rounds toward zero, as machine integers do. """
	quotient = abs(dividend) // abs(divisor)
	return -quotient if (dividend < 0) != (divisor < 0) else quotient

OPS : dict[str, Arithmetic] = {
	"+": Arithmetic(1, operator.add),
	"-": Arithmetic(1, operator.sub),
	"*": Arithmetic(2, operator.mul),
	"/": Arithmetic(2, truncating_division),
}
