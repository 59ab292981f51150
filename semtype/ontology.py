"""
The small vocabulary everything else in the package talks about.
These bits live apart from the type algebra proper so that the
notation, the constructor, and the checker can all share them
without circular imports.
"""
from enum import Enum

# Syntactic-category subscripts and tense markers, as they appear after an underscore.
SUBSCRIPTS = frozenset("NAVP")
TENSES = frozenset("UT")

# The "no type at all" marker. Construction with a zero exponent yields this.
EMPTY = None

# What a variable exponent stands for.
VARIABLE_EXPANSION = (0, 1, 2, 3, 4, 5)


class ExponentVariable:
	"""
	A symbolic exponent, such as the X in "A^X".
	These never survive construction: the constructor spells them
	out into a chain of alternations over VARIABLE_EXPANSION.
	"""
	__slots__ = ("name",)
	def __init__(self, name:str):
		assert isinstance(name, str) and name, name
		self.name = name
	def __repr__(self): return "<exponent %s>" % self.name
	def __eq__(self, other): return type(other) is ExponentVariable and other.name == self.name
	def __hash__(self): return hash((ExponentVariable, self.name))


class IgnoreExponent(Enum):
	"""
	How far the compatibility check should look the other way about exponents.
	The strict mode is simply None.
	"""
	SHALLOW = "shallow"      # Only at the top of the comparison.
	RECURSIVE = "recursive"  # All the way down.


def is_concrete_exponent(exponent) -> bool:
	return isinstance(exponent, int) and not isinstance(exponent, bool)

def is_exponent_list(exponent) -> bool:
	return isinstance(exponent, (list, tuple))
