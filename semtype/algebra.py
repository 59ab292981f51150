"""
The algebra of semantic types.

Three kinds of type, all decorated alike:

1. Atomic: a single base symbol, such as "E" or "T".
2. Functional: a curried category from a domain type to a range type.
3. Alternation: exactly two alternatives, either of which may fill a position.

Each type also carries an exponent (a positive repetition count),
an optional syntactic-category subscript, and an optional tense marker.

These are value objects. Nothing mutates a type once it exists;
to change decorations, ask for a fresh one with .redecorate(...).
Equality and hashing are structural, which is handy for tests and
dictionaries, but bear in mind that *compatibility* (see compatibility.py)
is the interesting relation, and it is not the same thing.
"""
from types import GeneratorType
from typing import Optional, Iterator

class SemanticType:
	exponent: int
	subscript: Optional[str]
	tense: Optional[str]

	def visit(self, visitor:"TypeVisitor"): raise NotImplementedError(type(self))
	def redecorate(self, exponent:int, subscript:Optional[str], tense:Optional[str]) -> "SemanticType":
		raise NotImplementedError(type(self))
	def is_alternation(self) -> bool: return False

	def __init__(self, exponent, subscript, tense, *key):
		self.exponent, self.subscript, self.tense = exponent, subscript, tense
		self._key = (exponent, subscript, tense) + key
		self._hash = hash(self._key)
	def __hash__(self): return self._hash
	def __eq__(self, other):
		# Walks the two trees side by side with its own stack, however deep they go.
		pending = [(self, other)]
		while pending:
			a, b = pending.pop()
			if a is b: continue
			if type(a) is not type(b) or a._hash != b._hash: return False
			for p, q in zip(a._key, b._key):
				if isinstance(p, SemanticType): pending.append((p, q))
				elif p != q: return False
		return True
	def __repr__(self) -> str:
		from .notation import to_string
		return "<%s %s>" % (type(self).__name__, to_string(self))

class Atomic(SemanticType):
	def __init__(self, symbol:str, exponent:int=1, subscript:Optional[str]=None, tense:Optional[str]=None):
		self.symbol = symbol
		super().__init__(exponent, subscript, tense, symbol)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_atomic(self)
	def redecorate(self, exponent, subscript, tense):
		return Atomic(self.symbol, exponent, subscript, tense)

class Functional(SemanticType):
	def __init__(self, domain:SemanticType, range:SemanticType, exponent:int=1, subscript:Optional[str]=None, tense:Optional[str]=None):
		self.domain, self.range = domain, range
		super().__init__(exponent, subscript, tense, domain, range)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_functional(self)
	def redecorate(self, exponent, subscript, tense):
		return Functional(self.domain, self.range, exponent, subscript, tense)

class Alternation(SemanticType):
	"""
	Either of two types. The subscript and tense are carried along
	but nobody looks at them: neither the checker nor the notation.

	An alternative may be the empty marker (None) when it came from
	spelling out an exponent list that mentions zero.
	"""
	def __init__(self, left:Optional[SemanticType], right:Optional[SemanticType], exponent:int=1, subscript:Optional[str]=None, tense:Optional[str]=None):
		self.left, self.right = left, right
		super().__init__(exponent, subscript, tense, left, right)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_alternation(self)
	def redecorate(self, exponent, subscript, tense):
		return Alternation(self.left, self.right, exponent, subscript, tense)
	def is_alternation(self) -> bool: return True
	def options(self) -> tuple[Optional[SemanticType], Optional[SemanticType]]:
		return self.left, self.right

#########################

class TypeVisitor:
	def on_atomic(self, a:Atomic): raise NotImplementedError(type(self))
	def on_functional(self, f:Functional): raise NotImplementedError(type(self))
	def on_alternation(self, alt:Alternation): raise NotImplementedError(type(self))

class Copier(TypeVisitor):
	""" Rebuild the whole tree, sharing nothing with the original. Run it on the trampoline. """
	def _copy(self, t):
		return None if t is None else t.visit(self)
	def on_atomic(self, a: Atomic):
		return Atomic(a.symbol, a.exponent, a.subscript, a.tense)
	def on_functional(self, f: Functional):
		domain = yield self._copy(f.domain)
		range = yield self._copy(f.range)
		return Functional(domain, range, f.exponent, f.subscript, f.tense)
	def on_alternation(self, alt: Alternation):
		left = yield self._copy(alt.left)
		right = yield self._copy(alt.right)
		return Alternation(left, right, alt.exponent, alt.subscript, alt.tense)

def copy_type(it):
	"""
	Deep copy. Anything that isn't a type comes back exactly as given,
	so the constructor may copy its parameters without first checking
	whether they are types, raw symbols, or the empty marker.
	"""
	if isinstance(it, SemanticType): return trampoline(it.visit(Copier()))
	else: return it

def leaves(it:Optional[SemanticType]) -> Iterator[Optional[SemanticType]]:
	"""
	Walk through alternation nodes left-to-right, yielding whatever is not one.
	Empty alternatives come out as None.
	"""
	stack = [it]
	while stack:
		it = stack.pop()
		if isinstance(it, Alternation): stack.extend((it.right, it.left))
		else: yield it

#########################

def trampoline(task):
	"""
	Run a recursive computation on an explicit stack instead of the
	Python call stack, so that deeply nested types don't blow it.

	A task is a generator. Each time it yields another generator, that one
	runs to completion first and its return value gets sent back in.
	Anything else it yields gets sent straight back, so a task can yield
	the result of a visit without caring whether the visit was a simple
	case (a value) or a compound one (a generator).
	A task that is not a generator is its own result.
	"""
	if not isinstance(task, GeneratorType): return task
	stack, value = [task], None
	while stack:
		try: step = stack[-1].send(value)
		except StopIteration as ex:
			stack.pop()
			value = ex.value
		else:
			if isinstance(step, GeneratorType):
				stack.append(step)
				value = None
			else:
				value = step
	return value
