from tinylisp.types.nil import Nil, NilType, is_nil
from tinylisp.types.symbol import Symbol, T, NIL
from tinylisp.types.environment import Environment

__all__ = ["Nil", "NilType", "is_nil", "Symbol", "T", "NIL", "Environment"]
