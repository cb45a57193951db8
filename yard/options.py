"""
Knobs. Everything defaults to the long-standing behavior of this calculator,
including the parts that are arguably wrong.
"""
from typing import NamedTuple

class Options(NamedTuple):
	# Pop tighter-binding operators before pushing, as a textbook shunting-yard does.
	precedence_aware: bool = False
	# Refuse to treat a lone value as the answer when an operator wants two.
	strict_operands: bool = False
	# Literals must fit in a signed integer of this many bits.
	word_size: int = 32
	
	def largest_literal(self) -> int:
		return 2 ** (self.word_size - 1) - 1

DEFAULT = Options()
