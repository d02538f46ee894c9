from __future__ import annotations
from typing import Generic, Iterable, Iterator, TypeVar, Union, \
	Callable, List, Tuple, Optional, Any
from abc import abstractmethod

from .._utility import Comparable

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')
K = TypeVar('K', bound=Comparable)

# Notable differences from the usual rope, which caches sizes for indexing:
# - sizes are not stored, so length and traversal are O(n)
# - the tree is never rebalanced, it only grows at the edges
# - leaves hold PNonEmpty runs instead of strings,
#   and nodes hold a PNonEmpty of child trees
# - the empty rope has no tree at all, rather than an empty leaf

class PRopeBase(Generic[T]):
	r'''
	Persistent rope

	Meant for cases where a sequence is built up by gluing pieces
	together, and is then consumed front to back.

	Do not instantiate directly, instead use the factory
	functions :func:`rp` or :func:`prope` to create an instance.

	The PRope is a Collection, is Reversible, and is Hashable.
	It has no indexing.

	The following operations are :math:`O(1)`:

		- adding an item at either end
		- concatenating two ropes
		- checking whether the rope is empty

	Everything that has to look at the items, including :func:`len`,
	walks the whole tree and is :math:`O(n)`. The tree is never
	rebalanced; every walk uses an explicit stack, so arbitrarily
	deep trees are fine.

	The following are examples of some common operations on persistent ropes:

	>>> rope1 = prope([1, 2, 3])
	>>> rope2 = rope1.append(4)
	>>> rope3 = rope1 + rope2
	>>> rope1
	prope([1, 2, 3])
	>>> rope2
	prope([1, 2, 3, 4])
	>>> rope3
	prope([1, 2, 3, 1, 2, 3, 4])
	>>> rope3.sum()
	16
	'''

	@abstractmethod
	def __eq__(self, other) -> bool:
		r'''
		:math:`O(n)`. Return self == other.

		 >>> prope([1,2,3]) == prope([1,2,3])
		 True
		 >>> prope([1,2,3]) == [1,2,3]
		 True
		 >>> prope([1,2,3]) == prope([2,3,4])
		 False
		'''

	@abstractmethod
	def __ne__(self, other) -> bool:
		r'''
		:math:`O(n)`. Return self != other.

		 >>> prope([1,2,3]) != prope([1,2,3])
		 False
		 >>> prope([1,2,3]) != prope([2,3,4])
		 True
		'''

	@abstractmethod
	def __le__(self, other) -> bool:
		r'''
		:math:`O(n)`. Return self <= other.

		 >>> prope([1,2,3]) <= prope([1,2,3])
		 True
		 >>> prope([1,2,3]) <= prope([0,1,2])
		 False
		'''

	@abstractmethod
	def __lt__(self, other) -> bool:
		r'''
		:math:`O(n)`. Return self < other.

		 >>> prope([1,2,3]) < prope([1,2,3])
		 False
		 >>> prope([1,2,3]) < prope([2,3,4])
		 True
		'''

	@abstractmethod
	def __ge__(self, other) -> bool:
		r'''
		:math:`O(n)`. Return self >= other.

		 >>> prope([1,2,3]) >= prope([1,2,3])
		 True
		 >>> prope([1,2,3]) >= prope([2,3,4])
		 False
		'''

	@abstractmethod
	def __gt__(self, other) -> bool:
		r'''
		:math:`O(n)`. Return self > other.

		 >>> prope([1,2,3]) > prope([1,2,3])
		 False
		 >>> prope([1,2,3]) > prope([0,1,2])
		 True
		'''

	@abstractmethod
	def appendleft(self, value:T) -> PRopeBase[T]:
		r'''
		:math:`O(1)`. Add an element to the left end of a rope.

		>>> prope([2,3]).appendleft(1)
		prope([1, 2, 3])
		'''

	@abstractmethod
	def appendright(self, value:T) -> PRopeBase[T]:
		r'''
		:math:`O(1)`. Add an element to the right end of a rope.

		>>> prope([2,3]).append(1)
		prope([2, 3, 1])
		>>> prope([2,3]).appendright(1)
		prope([2, 3, 1])
		'''

	append = appendright

	@abstractmethod
	def extendright(self, other:Union[PRopeBase[T], Iterable[T]]) -> PRopeBase[T]:
		r'''
		Concatenate two ropes, with other on the right.

		:math:`O(1)` extend with :class:`PRope`

		:math:`O(k)` extend with iterable

		>>> prope([1,1,2]).extendright(prope([3,5,8]))
		prope([1, 1, 2, 3, 5, 8])
		>>> prope([1,2]).extend([3,4])
		prope([1, 2, 3, 4])
		>>> prope([1,2]) + [3,4]
		prope([1, 2, 3, 4])
		'''

	extend = extendright

	def __add__(self, other:Union[PRopeBase[T], Iterable[T]]) -> PRopeBase[T]:
		return self.extendright(other)

	@abstractmethod
	def extendleft(self, other:Union[PRopeBase[T], Iterable[T]]) -> PRopeBase[T]:
		r'''
		Concatenate two ropes, with other on the left.

		:math:`O(1)` extend with :class:`PRope`

		:math:`O(k)` extend with iterable

		>>> prope([1,2]).extendleft([3,4])
		prope([3, 4, 1, 2])
		>>> [3,4] + prope([1,2])
		prope([3, 4, 1, 2])
		'''

	def __radd__(self, other:Iterable[T]) -> PRopeBase[T]:
		return self.extendleft(other)

	@abstractmethod
	def concatmap(self, func:Callable[[T], Union[PRopeBase[U], Iterable[U]]]) -> PRopeBase[U]:
		r'''
		:math:`O(n+m)`. Map every element to a rope and concatenate the results.

		Empty results are dropped.

		>>> prope([1,2,3]).concatmap(lambda x: [x] * x)
		prope([1, 2, 2, 3, 3, 3])
		>>> prope([1,2,3]).concatmap(lambda x: [])
		prope([])
		'''

	@abstractmethod
	def map(self, func:Callable[[T], U]) -> PRopeBase[U]:
		r'''
		:math:`O(n)`. Apply a function to every element.

		The result has the same tree shape.

		>>> prope([1,2,3]).map(lambda x: x * 2)
		prope([2, 4, 6])
		'''

	@abstractmethod
	def indexedmap(self, func:Callable[[int, T], U]) -> PRopeBase[U]:
		r'''
		:math:`O(n)`. Apply a function to every element and its position.

		>>> prope('abc').indexedmap(lambda i, x: x * (i + 1))
		prope(['a', 'bb', 'ccc'])
		'''

	@abstractmethod
	def filter(self, pred:Callable[[T], Any]) -> PRopeBase[T]:
		r'''
		:math:`O(n)`. Keep the elements where the predicate holds.

		>>> prope([1,2,3,4]).filter(lambda x: x % 2 == 0)
		prope([2, 4])
		'''

	@abstractmethod
	def filtermap(self, func:Callable[[T], Optional[U]]) -> PRopeBase[U]:
		r'''
		:math:`O(n)`. Apply a function to every element,
		dropping the results that are ``None``.

		A ``None`` result can never be kept,
		use :meth:`filter` to keep ``None`` elements.

		>>> prope(['1','x','3']).filtermap(lambda x: int(x) if x.isdigit() else None)
		prope([1, 3])
		'''

	@abstractmethod
	def foldl(self, func:Callable[[A, T], A], initial:A) -> A:
		r'''
		:math:`O(n)`. Reduce from the left, calling ``func(acc, item)``.

		>>> prope([1,2,3]).foldl(lambda acc, x: acc * 10 + x, 0)
		123
		>>> prope().foldl(lambda acc, x: acc * 10 + x, 0)
		0
		'''

	@abstractmethod
	def foldr(self, func:Callable[[T, A], A], initial:A) -> A:
		r'''
		:math:`O(n)`. Reduce from the right, calling ``func(item, acc)``.

		>>> prope([1,2,3]).foldr(lambda x, acc: acc * 10 + x, 0)
		321
		'''

	@abstractmethod
	def reverse(self) -> PRopeBase[T]:
		r'''
		:math:`O(n)`. Reverse the rope.

		>>> prope([1,2,3]).reverse()
		prope([3, 2, 1])
		'''

	@abstractmethod
	def tolist(self) -> List[T]:
		r'''
		:math:`O(n)`. Convert the rope to a :class:`list`.

		>>> prope([1,2,3]).tolist()
		[1, 2, 3]
		'''

	@abstractmethod
	def totuple(self) -> Tuple[T, ...]:
		r'''
		:math:`O(n)`. Convert the rope to a :class:`tuple`.

		>>> prope([1,2,3]).totuple()
		(1, 2, 3)
		'''

	@abstractmethod
	def __len__(self) -> int:
		r'''
		:math:`O(n)`. Get the length of the rope.

		The length is not cached, every call walks the tree.

		>>> len(prope([1,2,3,4]))
		4
		'''

	@abstractmethod
	def isempty(self) -> bool:
		r'''
		:math:`O(1)`. Check if the rope has no elements.

		>>> prope().isempty()
		True
		>>> bool(prope([1]))
		True
		'''

	@abstractmethod
	def member(self, value:Any) -> bool:
		r'''
		:math:`O(n)`. Check if the rope contains an element.

		>>> prope([1,2,3]).member(2)
		True
		>>> 4 in prope([1,2,3])
		False
		'''

	@abstractmethod
	def all(self, pred:Callable[[T], Any]) -> bool:
		r'''
		:math:`O(n)`. Check that the predicate holds for every element.

		>>> prope([2,4]).all(lambda x: x % 2 == 0)
		True
		>>> prope().all(lambda x: False)
		True
		'''

	@abstractmethod
	def any(self, pred:Callable[[T], Any]) -> bool:
		r'''
		:math:`O(n)`. Check that the predicate holds for some element.

		>>> prope([1,2]).any(lambda x: x % 2 == 0)
		True
		>>> prope().any(lambda x: True)
		False
		'''

	@abstractmethod
	def maximum(self:PRopeBase[K], default:Optional[K]=None) -> Optional[K]:
		r'''
		:math:`O(n)`. The largest element, or ``default`` if the rope is empty.
		The first of several equal elements wins.

		>>> prope([3,1,4,1,5]).maximum()
		5
		>>> prope().maximum() is None
		True
		'''

	@abstractmethod
	def minimum(self:PRopeBase[K], default:Optional[K]=None) -> Optional[K]:
		r'''
		:math:`O(n)`. The smallest element, or ``default`` if the rope is empty.
		The first of several equal elements wins.

		>>> prope([3,1,4,1,5]).minimum()
		1
		>>> prope().minimum(0)
		0
		'''

	@abstractmethod
	def sum(self) -> Any:
		r'''
		:math:`O(n)`. Add the elements together, or ``0`` if the rope is empty.

		>>> prope([1,2,3]).sum()
		6
		>>> prope().sum()
		0
		'''

	@abstractmethod
	def product(self) -> Any:
		r'''
		:math:`O(n)`. Multiply the elements together, or ``1`` if the rope is empty.

		>>> prope([2,3,4]).product()
		24
		>>> prope().product()
		1
		'''

	@abstractmethod
	def __iter__(self) -> Iterator[T]:
		r'''
		:math:`O(1)`. Create an iterator.

		Iterating the entire rope is :math:`O(n)`.

		>>> i = iter(prope([1,2]))
		>>> next(i)
		1
		>>> next(i)
		2
		>>> next(i)
		Traceback (most recent call last):
		...
		StopIteration
		'''

	@abstractmethod
	def __reversed__(self) -> Iterator[T]:
		r'''
		:math:`O(1)`. Create a reverse iterator.

		Iterating the entire rope is :math:`O(n)`.

		>>> list(reversed(prope([1,2,3])))
		[3, 2, 1]
		'''

	@abstractmethod
	def __reduce__(self):
		r'''
		:math:`O(n)`. Support method for pickling.

		>>> func, args = prope([1,2,3]).__reduce__()
		>>> func(*args)
		prope([1, 2, 3])
		'''

	@abstractmethod
	def __repr__(self) -> str:
		r'''
		:math:`O(n)`. Get a formatted string representation of the rope.

		>>> repr(prope([1,2,3]))
		'prope([1, 2, 3])'
		'''

	__str__ = __repr__

# for doctest
def prope(*args, **kwargs):
	from pyrsistent_rope import prope as prp
	return prp(*args, **kwargs)
