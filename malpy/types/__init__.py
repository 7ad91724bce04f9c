from malpy.types.nil import Nil, NilType
from malpy.types.symbol import Symbol
from malpy.types.sequences import Vector, HashMap
from malpy.types.native_fn import NativeFunction
from malpy.types.closure import Closure
from malpy.types.environment import Environment, NativeRegistry

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "Vector",
    "HashMap",
    "NativeFunction",
    "Closure",
    "Environment",
    "NativeRegistry",
]
