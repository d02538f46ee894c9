from __future__ import annotations
from collections.abc import Collection, Hashable, Reversible
from typing import TypeVar, Tuple, Optional, Iterable, Union

from .._utility import sphinx_build
from ._python import PRope, Tree, EMPTY_ROPE

T = TypeVar('T')

Collection.register(PRope)
Reversible.register(PRope)
Hashable.register(PRope)

def prope(iterable:Optional[Iterable[T]]=None) -> PRope[T]:
	r'''
	Create a :class:`PRope` from the given items

	The items are stored in a single leaf.

	:math:`O(n)`

	>>> prope()
	prope([])
	>>> prope([1,2,3,4])
	prope([1, 2, 3, 4])
	'''
	return PRope._fromitems(iterable)

def prope_singleton(value:T) -> PRope[T]:
	r'''
	Create a :class:`PRope` with one item

	:math:`O(1)`

	>>> prope.singleton(5)
	prope([5])
	'''
	return EMPTY_ROPE.appendleft(value)
setattr(prope, 'singleton', prope_singleton)

def rp(*elements:T) -> PRope[T]:
	'''
	Shorthand for :func:`prope`

	>>> rp(1,2,3,4)
	prope([1, 2, 3, 4])
	'''
	return prope(elements)

def concatenate(ropes:Iterable[Union[PRope[T], Iterable[T]]]) -> PRope[T]:
	r'''
	Concatenate a rope (or any iterable) of ropes into a single rope

	Empty ropes are dropped.

	:math:`O(n+m)`

	>>> concatenate(prope([prope([1,2]), prope(), prope([3])]))
	prope([1, 2, 3])
	>>> concatenate([prope(), prope()])
	prope([])
	'''
	return prope(ropes).concatmap(lambda rope: rope)

__all__: Tuple[str, ...] = ('rp', 'prope', 'PRope', 'concatenate', 'EMPTY_ROPE')
if sphinx_build: __all__ += ('Tree',)
