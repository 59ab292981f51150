"""
The canonical bracketed notation for semantic types, both directions.

	Atomic       E  T_N  E_A_U^2
	Functional   (E=>T)  ((E=>T)=>T)_V^3
	Alternation  {E|T}  {(E=>T)|T}^2

Decorations come in a fixed order: "_" subscript, then "_" tense,
then "^" exponent. Alternations only ever get the exponent.
An exponent of one goes without saying.

Reading is case-insensitive. A single letter in exponent position
is an exponent variable, which the constructor spells out into a
chain of alternations. When such a chain includes the zero exponent,
one alternative comes out empty, and the notation shows that as
nothing at all between the brackets: "{|{A|A^2}}".

The grammar lives in Notation.md, next to this file. The reader is the
one place where untrusted text comes in, so every way it can fail
comes out as a NotationError with a position and a hint.
"""
import sys
from pathlib import Path
from typing import Optional
from boozetools.macroparse.runtime import TypicalApplication, make_tables
from boozetools.scanning.engine import IterableScanner
from boozetools.parsing.interface import ParseError, END_OF_TOKENS
from .ontology import EMPTY, ExponentVariable
from .algebra import SemanticType, TypeVisitor, Atomic, Functional, Alternation, trampoline
from .construction import construct

class NotationError(ParseError):
	""" args are (text, offset, hint), with offset indexing the text as scanned. """
	@property
	def text(self) -> str: return self.args[0]
	@property
	def offset(self) -> int: return self.args[1]
	@property
	def hint(self) -> str: return self.args[2]
	def __str__(self): return "%s at offset %d in %r" % (self.hint, self.offset, self.text)

#########################

class Render(TypeVisitor):
	"""
	Return the canonical notation for the term.
	The compound cases are generators, so they go through the trampoline.
	"""
	def _part(self, t:Optional[SemanticType]):
		return "" if t is None else t.visit(self)
	def on_atomic(self, a: Atomic):
		return str(a.symbol) + _decorations(a) + _power(a)
	def on_functional(self, f: Functional):
		domain = yield self._part(f.domain)
		range = yield self._part(f.range)
		return "(%s=>%s)" % (domain, range) + _decorations(f) + _power(f)
	def on_alternation(self, alt: Alternation):
		left = yield self._part(alt.left)
		right = yield self._part(alt.right)
		return "{%s|%s}" % (left, right) + _power(alt)

def _decorations(t:SemanticType) -> str:
	return "".join("_"+d for d in (t.subscript, t.tense) if d)

def _power(t:SemanticType) -> str:
	return "" if t.exponent == 1 else "^%d" % t.exponent

def to_string(t:Optional[SemanticType]) -> str:
	return trampoline(Render()._part(t))

#########################

_tables = make_tables(Path(__file__).parent/"Notation.md")

_PUNCTUATION = frozenset(["(", ")", "{", "}", "|", "=>"])
_SPOKEN = {
	"symbol": "a symbol",
	"subscript": "a subscript (N, A, V, P)",
	"tense": "a tense (U, T)",
	"exponent": "an exponent",
	END_OF_TOKENS: "the end of the type",
}

class NotationParser(TypicalApplication):

	@staticmethod
	def scan_symbol(yy: IterableScanner): yy.token("symbol", sys.intern(yy.match()))

	@staticmethod
	def scan_subscript(yy: IterableScanner): yy.token("subscript", yy.match()[1:])

	@staticmethod
	def scan_tense(yy: IterableScanner): yy.token("tense", yy.match()[1:])

	@staticmethod
	def scan_exponent(yy: IterableScanner): yy.token("exponent", int(yy.match()[1:]))

	@staticmethod
	def scan_variable(yy: IterableScanner): yy.token("exponent", ExponentVariable(yy.match()[1:]))

	@staticmethod
	def scan_punctuation(yy: IterableScanner):
		punctuation = sys.intern(yy.match())
		yy.token(punctuation, yy.slice())

	@staticmethod
	def parse_atomic(symbol, decoration, power):
		subscript, tense = decoration
		return construct(symbol, EMPTY, power, subscript, tense)

	def parse_functional(self, domain, range, decoration, power):
		# Zero exponents make empty parts, and a function type can't have those.
		if domain is EMPTY or range is EMPTY:
			self._fail(self.yy.left, "A function type needs a non-empty domain and range.")
		subscript, tense = decoration
		return construct(domain, range, power, subscript, tense)

	def parse_alternation(self, left, right, power):
		if left is EMPTY and right is EMPTY:
			self._fail(self.yy.left, "An alternation needs at least one non-empty alternative.")
		return construct(EMPTY, EMPTY, power, options=[left, right])

	@staticmethod
	def parse_empty(): return EMPTY
	@staticmethod
	def parse_plain(): return None, None
	@staticmethod
	def parse_subscript_only(subscript): return subscript, None
	@staticmethod
	def parse_tense_only(tense): return None, tense
	@staticmethod
	def parse_both(subscript, tense): return subscript, tense
	@staticmethod
	def parse_unity(): return 1

	def _fail(self, offset, hint):
		raise NotationError(self.source.content, offset, hint)

	def unexpected_token(self, kind, semantic, pds):
		self._fail(self.yy.left, _expectation(self.expected_tokens(pds)))

	def unexpected_eof(self, pds):
		self._fail(len(self.source.content), _expectation(self.expected_tokens(pds)))

	def on_stuck(self, yy: IterableScanner):
		self._fail(yy.left, "I don't know what to make of %r here." % yy.match())

	def exception_parsing(self, ex: Exception, constructor_id:int, args):
		if isinstance(ex, NotationError): raise ex from None
		super().exception_parsing(ex, constructor_id, args)

	pass

def _expectation(terminals) -> str:
	words = [_SPOKEN[t] if t in _SPOKEN else "'%s'"%t for t in terminals if t in _SPOKEN or t in _PUNCTUATION]
	if not words: return "This doesn't belong here."
	if len(words) == 1: return "Expected %s here." % words[0]
	return "Expected %s or %s here." % (", ".join(words[:-1]), words[-1])

notation_parser = NotationParser(_tables)

def from_string(text:str) -> Optional[SemanticType]:
	"""
	Read a type from its notation. The result is None (the empty marker)
	if the exponent works out to zero, as in "A^0".
	"""
	for offset, glyph in enumerate(text):
		# Upper-casing some letters changes the length of the text.
		if not glyph.isascii():
			raise NotationError(text, offset, "Type notation is plain ASCII; %r is not." % glyph)
	return notation_parser.parse(text.upper())
