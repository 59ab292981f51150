"""
When do two types fit together?

Not quite equality. Alternations don't care about the order of their
options, and an alternation fits a non-alternation if either option
does, once you account for the alternation's exponent multiplying
through. Subscripts only matter when both sides bother to have one.

The ignore_exponent argument is None for a strict check.
IgnoreExponent.SHALLOW excuses a mismatched exponent at the top level only;
IgnoreExponent.RECURSIVE excuses exponents all the way down.
"""
from typing import Optional
from .ontology import IgnoreExponent
from .algebra import SemanticType, Atomic, Functional, Alternation, trampoline

def compatible(x:Optional[SemanticType], y:Optional[SemanticType], ignore_exponent:Optional[IgnoreExponent]=None) -> bool:
	return trampoline(_judge(x, y, ignore_exponent))

def _judge(x, y, ignore_exponent):
	# Everything from here down is a generator: nested questions get
	# yielded to the trampoline, which sends back the answers.
	if x is None or y is None:
		return x is y
	if x.is_alternation() and y.is_alternation():
		return (yield _both_alternations(x, y, ignore_exponent))
	if x.is_alternation():
		return (yield _one_alternation(x, y, ignore_exponent))
	if y.is_alternation():
		return (yield _one_alternation(y, x, ignore_exponent))
	return (yield _neither_alternation(x, y, ignore_exponent))

def _deeper(ignore_exponent):
	# A shallow exemption is spent after one level.
	return ignore_exponent if ignore_exponent is IgnoreExponent.RECURSIVE else None

def _both_alternations(x:Alternation, y:Alternation, ignore_exponent):
	if ignore_exponent is None and x.exponent != y.exponent:
		return False
	mode = _deeper(ignore_exponent)
	return (
		((yield _judge(x.left, y.left, mode)) and (yield _judge(x.right, y.right, mode)))
		or
		((yield _judge(x.left, y.right, mode)) and (yield _judge(x.right, y.left, mode)))
	)

def _one_alternation(alt:Alternation, other:SemanticType, ignore_exponent):
	# The option's own exponent gets checked here, multiplied through,
	# so the next level down must not check it again.
	mode = _deeper(ignore_exponent) or IgnoreExponent.SHALLOW
	for option in alt.options():
		if option is None:
			continue
		if ignore_exponent is None and other.exponent != option.exponent * alt.exponent:
			continue
		if (yield _judge(other, option, mode)):
			return True
	return False

def _neither_alternation(x:SemanticType, y:SemanticType, ignore_exponent):
	if ignore_exponent is None and x.exponent != y.exponent:
		return False
	if type(x) is not type(y):
		return False
	if x.tense != y.tense:
		return False
	if x.subscript and y.subscript and x.subscript != y.subscript:
		return False
	if isinstance(x, Atomic):
		return x.symbol == y.symbol
	if isinstance(x, Functional):
		mode = _deeper(ignore_exponent)
		return (yield _judge(x.domain, y.domain, mode)) and (yield _judge(x.range, y.range, mode))
	assert False, type(x)  # Did we invent something new?
