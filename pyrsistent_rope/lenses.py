from __future__ import annotations

from typing import *

from ._pnonempty import PNonEmpty, pnonempty
from ._prope import PRope, prope

from lenses import hooks

T = TypeVar('T')

@hooks.contains_add.register(PRope)
def _prope_contains_add(self:PRope[T], item:T) -> PRope[T]:
	return self.append(item)
@hooks.contains_remove.register(PRope)
def _prope_contains_remove(self:PRope[T], item:T) -> PRope[T]:
	return self.filter(lambda i: item != i)
@hooks.from_iter.register(PRope)
def _prope_from_iter(self:PRope[T], items:Iterator[T]) -> PRope[T]:
	return prope(items)

@hooks.contains_add.register(PNonEmpty)
def _pnonempty_contains_add(self:PNonEmpty[T], item:T) -> PNonEmpty[T]:
	return self.append(item)
@hooks.from_iter.register(PNonEmpty)
def _pnonempty_from_iter(self:PNonEmpty[T], items:Iterator[T]) -> PNonEmpty[T]:
	return cast(Any, pnonempty).fromitems(items)
