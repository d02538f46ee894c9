from abc import abstractmethod
from typing import Any, Iterator, TypeVar, Union, Tuple, cast
from typing_extensions import Protocol

import builtins

NOTHING = cast(Any, object())

class Comparable(Protocol):
	@abstractmethod
	def __lt__(self, other: Any) -> bool: ...
	@abstractmethod
	def __eq__(self, other: Any) -> bool: ...

K = TypeVar('K', bound=Comparable)
T = TypeVar('T')

def identity(x:T) -> T:
	return x

def compare_single(x:K, y:K, equality:bool) -> int:
	if x == y: return 0
	if equality or x < y: return -1
	return 1

def compare_next(xs:Iterator[Any], ys:Iterator[Any]) -> Union[int,Tuple[Any,Any]]:
	x = next(xs, NOTHING)
	y = next(ys, NOTHING)
	if x is NOTHING:
		return 0 if y is NOTHING else -1
	if y is NOTHING:
		return 1
	return x, y

def compare_iter(xs:Any, ys:Any, equality:bool) -> int:
	if equality and xs is ys: return 0
	try:
		xs, ys = iter(xs), iter(ys)
	except TypeError:
		return NotImplemented
	while True:
		n = compare_next(xs, ys)
		if isinstance(n, int): return n
		c = compare_single(*n, equality)
		if c != 0: return c

sphinx_build: bool = getattr(builtins, '__sphinx_build__', False)
