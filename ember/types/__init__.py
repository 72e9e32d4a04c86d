from ember.types.symbol import Symbol
from ember.types.nil import Nil, NilType
from ember.types.environment import Environment
from ember.types.closure import Closure
from ember.types.builtin import Builtin
from ember.types.atom import Atom
from ember.types.tail_call import TailCall

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Environment",
    "Closure",
    "Builtin",
    "Atom",
    "TailCall",
]
