"""
Splitting a line into tokens. Whitespace separates everything;
there is no quoting and no cleverness about "1+2" meaning three words.
"""
import re
from .lexicon import Token

_word = re.compile(r"\S+")

def tokenize(text:str) -> list[Token]:
	return [Token(m.group(), slice(m.start(), m.end())) for m in _word.finditer(text)]
