from __future__ import annotations
from typing import Iterable, Iterator, ClassVar, \
	TypeVar, Generic, Optional, Callable, Tuple, List, Any, cast

from collections.abc import Hashable, Reversible

import operator

from ._utility import Comparable, compare_iter, sphinx_build

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')
K = TypeVar('K', bound=Comparable)

class PNonEmpty(Generic[T]):
	r'''
	Persistent non-empty sequence

	Meant for cases where an operation is only defined when there is at
	least one element (``sum`` without a zero, ``maximum`` without a
	sentinel, and so on). The emptiness check happens once, when the
	value is built, and every operation after that is total.

	Do not instantiate directly, instead use the factory
	functions :func:`ne` or :func:`pnonempty` to create an instance.

	The value is a head element followed by a tail, stored as a
	persistent singly linked chain:

		- adding an item at the left end is :math:`O(1)`
		  and shares the old sequence as the new tail
		- adding an item at the right end is :math:`O(n)`
		- length, folds, and reversal are :math:`O(n)`

	>>> xs = pnonempty(2, [3, 4])
	>>> xs.appendleft(1)
	pnonempty(1, [2, 3, 4])
	>>> xs
	pnonempty(2, [3, 4])
	>>> xs.sum(), xs.maximum()
	(9, 4)
	'''

	__slots__ = ('_head', '_tail')

	if not sphinx_build:
		_head: T
		_tail: Optional[PNonEmpty[T]]

	# right folds recurse once per chunk of _foldr_chunk items, and
	# fall back to an iterative left fold past _foldr_depth chunks
	_foldr_chunk: ClassVar[int] = 5
	_foldr_depth: ClassVar[int] = 500

	def __new__(cls, _head, _tail):
		self = super().__new__(cls)
		self._head = _head
		self._tail = _tail
		return self

	@staticmethod
	def _fromlist(items:List[T]) -> PNonEmpty[T]:
		# items must not be empty
		node: Optional[PNonEmpty[T]] = None
		for item in reversed(items):
			node = PNonEmpty(item, node)
		return cast(PNonEmpty[T], node)

	@property
	def head(self) -> T:
		r'''
		:math:`O(1)`. The first element.

		>>> pnonempty(1, [2, 3]).head
		1
		'''
		return self._head

	def viewleft(self) -> Tuple[T, List[T]]:
		r'''
		:math:`O(n)`. Split into the head and a list of the remaining items.

		>>> pnonempty(1, [2, 3]).viewleft()
		(1, [2, 3])
		>>> pnonempty(1).viewleft()
		(1, [])
		'''
		if self._tail is None: return self._head, []
		return self._head, self._tail.tolist()

	def appendleft(self, value:T) -> PNonEmpty[T]:
		r'''
		:math:`O(1)`. Add an element to the left end.

		>>> pnonempty(2, [3]).appendleft(1)
		pnonempty(1, [2, 3])
		'''
		return PNonEmpty(value, self)

	def appendright(self, value:T) -> PNonEmpty[T]:
		r'''
		:math:`O(n)`. Add an element to the right end.

		>>> pnonempty(1, [2]).appendright(3)
		pnonempty(1, [2, 3])
		'''
		items = self.tolist()
		items.append(value)
		return PNonEmpty._fromlist(items)

	append = appendright

	def __iter__(self) -> Iterator[T]:
		node: Optional[PNonEmpty[T]] = self
		while node is not None:
			yield node._head
			node = node._tail

	def __reversed__(self) -> Iterator[T]:
		return reversed(self.tolist())

	def __len__(self) -> int:
		r'''
		:math:`O(n)`. Count the elements.

		>>> len(pnonempty(1, [2, 3]))
		3
		'''
		count, node = 1, self._tail
		while node is not None:
			count, node = count + 1, node._tail
		return count

	length = __len__

	def __bool__(self) -> bool:
		return True

	def tolist(self) -> List[T]:
		return list(self)

	def totuple(self) -> Tuple[T, ...]:
		return tuple(self)

	def map(self, func:Callable[[T], U]) -> PNonEmpty[U]:
		r'''
		:math:`O(n)`. Apply a function to every element.

		>>> pnonempty(1, [2, 3]).map(lambda x: x * 10)
		pnonempty(10, [20, 30])
		'''
		return PNonEmpty._fromlist([func(item) for item in self])

	def filtermap(self, func:Callable[[T], Optional[U]]) -> List[U]:
		r'''
		:math:`O(n)`. Apply a function to every element, keeping the
		results that are not ``None``.

		The result may be empty, so it is returned as a plain list.
		An element that maps to ``None`` is always dropped.

		>>> pnonempty(1, [2, 3, 4]).filtermap(lambda x: x * 10 if x % 2 else None)
		[10, 30]
		>>> pnonempty(2).filtermap(lambda x: None)
		[]
		'''
		acc = []
		for item in self:
			value = func(item)
			if value is not None:
				acc.append(value)
		return acc

	def reverse(self) -> PNonEmpty[T]:
		r'''
		:math:`O(n)`. Reverse the sequence.

		>>> pnonempty(1, [2, 3]).reverse()
		pnonempty(3, [2, 1])
		'''
		acc, node = PNonEmpty(self._head, None), self._tail
		while node is not None:
			acc, node = PNonEmpty(node._head, acc), node._tail
		return acc

	def reversemap(self, func:Callable[[T], U]) -> PNonEmpty[U]:
		r'''
		:math:`O(n)`. Reverse the sequence and apply a function
		to every element, in a single pass.

		>>> pnonempty(1, [2, 3]).reversemap(str)
		pnonempty('3', ['2', '1'])
		'''
		acc, node = PNonEmpty(func(self._head), None), self._tail
		while node is not None:
			acc, node = PNonEmpty(func(node._head), acc), node._tail
		return acc

	def foldl(self, func:Callable[[A, T], A], initial:A) -> A:
		r'''
		:math:`O(n)`. Reduce from the left, calling ``func(acc, item)``.

		>>> pnonempty(1, [2, 3]).foldl(lambda acc, x: acc + [x], [0])
		[0, 1, 2, 3]
		'''
		acc = initial
		for item in self:
			acc = func(acc, item)
		return acc

	def foldr(self, func:Callable[[T, A], A], initial:A) -> A:
		r'''
		:math:`O(n)`. Reduce from the right, calling ``func(item, acc)``.

		Long sequences do not exhaust the call stack.

		>>> pnonempty(1, [2, 3]).foldr(lambda x, acc: acc + [x], [0])
		[0, 3, 2, 1]
		'''
		return self._foldr(func, initial, 0)

	def _foldr(self, func, initial, depth):
		chunk = []
		node: Optional[PNonEmpty[T]] = self
		while node is not None and len(chunk) < self._foldr_chunk:
			chunk.append(node._head)
			node = node._tail
		if node is None:
			acc = initial
		elif depth > self._foldr_depth:
			acc = node.reverse().foldl(lambda acc, item: func(item, acc), initial)
		else:
			acc = node._foldr(func, initial, depth + 1)
		for item in reversed(chunk):
			acc = func(item, acc)
		return acc

	def foldlfromfirstmap(self, change:Callable[[T], U],
			func:Callable[[U, U], U]) -> U:
		r'''
		:math:`O(n)`. Reduce from the left, seeding the accumulator
		with the changed first element and calling
		``func(acc, change(item))`` for the rest.

		>>> pnonempty('a', ['bb', 'ccc']).foldlfromfirstmap(len, max)
		3
		'''
		acc, node = change(self._head), self._tail
		while node is not None:
			acc, node = func(acc, change(node._head)), node._tail
		return acc

	def foldlfromfirst(self, func:Callable[[T, T], T]) -> T:
		r'''
		:math:`O(n)`. Reduce from the left, seeding
		the accumulator with the first element.

		>>> pnonempty(1, [2, 3]).foldlfromfirst(lambda x, y: x - y)
		-4
		'''
		acc, node = self._head, self._tail
		while node is not None:
			acc, node = func(acc, node._head), node._tail
		return acc

	def sum(self) -> T:
		return self.foldlfromfirst(operator.add)

	def product(self) -> T:
		return self.foldlfromfirst(operator.mul)

	def maximum(self:PNonEmpty[K]) -> K:
		r'''
		:math:`O(n)`. The largest element; the first one wins ties.

		>>> pnonempty(3, [1, 4, 1, 5]).maximum()
		5
		'''
		return self.foldlfromfirst(lambda x, y: y if x < y else x)

	def minimum(self:PNonEmpty[K]) -> K:
		r'''
		:math:`O(n)`. The smallest element; the first one wins ties.

		>>> pnonempty(3, [1, 4, 1, 5]).minimum()
		1
		'''
		return self.foldlfromfirst(lambda x, y: y if y < x else x)

	def allmap(self, pred:Callable[[T], Any]) -> bool:
		r'''
		:math:`O(n)`. Check that the predicate holds for every element.

		Every element is visited.

		>>> pnonempty(2, [4, 6]).allmap(lambda x: x % 2 == 0)
		True
		'''
		return self.foldlfromfirstmap(lambda x: bool(pred(x)), operator.and_)

	def anymap(self, pred:Callable[[T], Any]) -> bool:
		r'''
		:math:`O(n)`. Check that the predicate holds for some element.

		Every element is visited.

		>>> pnonempty(1, [3, 4]).anymap(lambda x: x % 2 == 0)
		True
		'''
		return self.foldlfromfirstmap(lambda x: bool(pred(x)), operator.or_)

	def __contains__(self, value:Any) -> bool:
		return self.anymap(lambda item: item == value)

	def __eq__(self, other) -> bool:
		result = compare_iter(self, other, True)
		if result is NotImplemented: return NotImplemented
		return result == 0
	def __ne__(self, other) -> bool:
		result = compare_iter(self, other, True)
		if result is NotImplemented: return NotImplemented
		return result != 0
	def __gt__(self, other) -> bool:
		result = compare_iter(self, other, False)
		if result is NotImplemented: return NotImplemented
		return result > 0
	def __ge__(self, other) -> bool:
		result = compare_iter(self, other, False)
		if result is NotImplemented: return NotImplemented
		return result >= 0
	def __lt__(self, other) -> bool:
		result = compare_iter(self, other, False)
		if result is NotImplemented: return NotImplemented
		return result < 0
	def __le__(self, other) -> bool:
		result = compare_iter(self, other, False)
		if result is NotImplemented: return NotImplemented
		return result <= 0

	def __hash__(self) -> int:
		return hash(self.totuple())

	def __repr__(self) -> str:
		head, tail = self.viewleft()
		if not tail: return 'pnonempty({!r})'.format(head)
		return 'pnonempty({!r}, {!r})'.format(head, tail)

	__str__ = __repr__

	def __reduce__(self):
		return pnonempty, self.viewleft()

Hashable.register(PNonEmpty)
Reversible.register(PNonEmpty)

def pnonempty(head:T, tail:Iterable[T]=()) -> PNonEmpty[T]:
	r'''
	Create a :class:`PNonEmpty` from a head and the remaining items

	:math:`O(n)`

	>>> pnonempty(1)
	pnonempty(1)
	>>> pnonempty(1, [2, 3])
	pnonempty(1, [2, 3])
	'''
	rest = list(tail)
	if not rest: return PNonEmpty(head, None)
	return PNonEmpty(head, PNonEmpty._fromlist(rest))

def pnonempty_fromitems(items:Iterable[T]) -> PNonEmpty[T]:
	r'''
	Create a :class:`PNonEmpty` from an iterable

	:math:`O(n)`

	:raises ValueError: if the iterable is empty

	>>> pnonempty.fromitems([1, 2, 3])
	pnonempty(1, [2, 3])
	>>> pnonempty.fromitems([])
	Traceback (most recent call last):
	...
	ValueError: ...
	'''
	if isinstance(items, PNonEmpty): return items
	rest = list(items)
	if not rest:
		raise ValueError('pnonempty from empty iterable')
	return PNonEmpty._fromlist(rest)
setattr(pnonempty, 'fromitems', pnonempty_fromitems)

def ne(head:T, *tail:T) -> PNonEmpty[T]:
	'''
	Shorthand for :func:`pnonempty`

	>>> ne(1, 2, 3)
	pnonempty(1, [2, 3])
	'''
	return pnonempty(head, tail)

__all__: Tuple[str, ...] = ('ne', 'pnonempty', 'PNonEmpty')
