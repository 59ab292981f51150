"""
Building types out of raw parts.

The constructor is deliberately permissive: it trusts its caller to hand
over well-formed pieces, and it never complains. Garbage in, odd-looking
type out. The notation parser is the place where untrusted text gets
checked, and it calls in here only once it has sensible parts.

The order of business:

1. Exponents which are lists or variables get spelled out into a
   right-leaning chain of alternations, one branch per exponent value.
2. A zero exponent means there is no type at all.
3. Explicit options make an alternation.
4. With a range, make a function type -- except that a domain which is
   itself a plain alternation gets the range pushed through it:
   {A|B}=>C becomes {(A=>C)|(B=>C)}. With no domain, the result is
   just the range, wearing the decorations asked for.
5. Otherwise, an atomic type.
"""
from typing import Optional, Sequence
from .ontology import EMPTY, VARIABLE_EXPANSION, is_concrete_exponent, is_exponent_list
from .algebra import SemanticType, Atomic, Functional, Alternation, copy_type, trampoline

def construct(domain, range, exponent, subscript:Optional[str]=None, tense:Optional[str]=None, options:Optional[Sequence]=None) -> Optional[SemanticType]:
	return trampoline(_construct(domain, range, exponent, subscript, tense, options))

def _construct(domain, range, exponent, subscript, tense, options):
	domain, range = copy_type(domain), copy_type(range)
	if options:
		options = [copy_type(o) for o in options]

	if not is_concrete_exponent(exponent):
		return (yield _spell_out(domain, range, exponent, subscript, tense, options))

	if exponent == 0:
		return EMPTY

	if options:
		# Two alternatives: a missing one is empty, and extras go unused.
		left, right, *_ = (*options, EMPTY, EMPTY)
		return Alternation(left, right, exponent, subscript, tense)

	if range is not EMPTY:
		if isinstance(domain, Alternation) and domain.exponent == 1:
			left = yield _construct(domain.left, range, 1, subscript, tense, None)
			right = yield _construct(domain.right, range, 1, subscript, tense, None)
			return (yield _construct(EMPTY, EMPTY, exponent, None, None, [left, right]))
		elif domain is not EMPTY:
			return Functional(domain, range, exponent, subscript, tense)
		elif isinstance(range, SemanticType):
			return range.redecorate(exponent, subscript, tense)
		else:
			return Atomic(range, exponent, subscript, tense)

	return Atomic(domain, exponent, subscript, tense)

def _spell_out(domain, range, exponent, subscript, tense, options):
	if not is_exponent_list(exponent):
		# Anything neither number nor list is an exponent variable.
		exponent = VARIABLE_EXPANSION
	if len(exponent) == 1:
		return (yield _construct(domain, range, exponent[0], subscript, tense, options))
	first = yield _construct(domain, range, exponent[0], subscript, tense, options)
	rest = yield _construct(domain, range, list(exponent[1:]), subscript, tense, options)
	return (yield _construct(EMPTY, EMPTY, 1, None, None, [first, rest]))
