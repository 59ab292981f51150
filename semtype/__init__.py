"""
Semantic types for annotating logical forms:
atomic categories, curried function types, and two-way alternations,
each with an exponent, an optional subscript, and an optional tense.

The public operations are construct, compatible, copy_type, to_string and from_string.
"""
from .ontology import EMPTY, SUBSCRIPTS, TENSES, VARIABLE_EXPANSION, ExponentVariable, IgnoreExponent
from .algebra import SemanticType, Atomic, Functional, Alternation, copy_type, leaves
from .construction import construct
from .compatibility import compatible
from .notation import to_string, from_string, NotationError
