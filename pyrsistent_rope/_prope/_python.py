from __future__ import annotations
from typing import Any, Iterator, Iterable, TypeVar, Generic, Union, \
	Callable, List, Tuple, Optional

import enum
import itertools

from ._base import PRopeBase
from .._pnonempty import PNonEmpty
from .._utility import Comparable, compare_iter, identity, sphinx_build

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')
R = TypeVar('R')
K = TypeVar('K', bound=Comparable)

class Tree(Generic[T]):
	# Non-empty rope.

	# Leaves are Tree(type=Leaf, items=PNonEmpty[T])
	# Nodes are Tree(type=Node, items=PNonEmpty[Tree[T]])

	# Children of a node read left to right in sequence order.
	# Trees are never rebalanced, and appendright nests to the left,
	# so depth is unbounded and nothing here recurses on the call stack.

	__slots__ = ('_type', '_items')

	if not sphinx_build:
		_type: Tree._Type
		_items: PNonEmpty[Any]

	class _Type(enum.Enum):
		Leaf = 0
		Node = 1

	def __new__(cls, _type, _items):
		self = super().__new__(cls)
		self._type = _type
		self._items = _items
		return self

	@staticmethod
	def _leaf(items:PNonEmpty[T]) -> Tree[T]:
		return Tree(Tree._Type.Leaf, items)
	@staticmethod
	def _leaf1(value:T) -> Tree[T]:
		return Tree(Tree._Type.Leaf, PNonEmpty(value, None))
	@staticmethod
	def _node(children:PNonEmpty[Tree[T]]) -> Tree[T]:
		return Tree(Tree._Type.Node, children)
	@staticmethod
	def _node2(left:Tree[T], right:Tree[T]) -> Tree[T]:
		return Tree(Tree._Type.Node, PNonEmpty(left, PNonEmpty(right, None)))

	def _isleaf(self) -> bool:
		return self._type is Tree._Type.Leaf

	def appendleft(self, value:T) -> Tree[T]:
		if self._isleaf():
			return Tree._leaf(self._items.appendleft(value))
		return Tree._node(self._items.appendleft(Tree._leaf1(value)))

	def appendright(self, value:T) -> Tree[T]:
		return Tree._node2(self, Tree._leaf1(value))

	def extendright(self, other:Tree[T]) -> Tree[T]:
		# node children only grow cheaply on the left,
		# so self is pushed onto other rather than the reverse
		if other._isleaf():
			return Tree._node2(self, other)
		return Tree._node(other._items.appendleft(self))

	def _leaves(self, backwards:bool=False) -> Iterator[PNonEmpty[T]]:
		# pre-order walk yielding the runs of every leaf
		stack = [self]
		while stack:
			tree = stack.pop()
			if tree._isleaf():
				yield tree._items
			elif backwards:
				stack.extend(tree._items)
			else:
				stack.extend(reversed(tree._items))

	def _reduce(self, leaf:Callable[[PNonEmpty[T]], R],
			node:Callable[[PNonEmpty[R]], R]) -> R:
		# post-order walk: leaf results are combined by node, bottom up,
		# with leaves visited left to right
		stack: List[Tuple[Tree[T], int]] = [(self, 0)]
		results: List[R] = []
		while stack:
			tree, count = stack.pop()
			if tree._isleaf():
				results.append(leaf(tree._items))
			elif count == 0:
				children = tree._items.tolist()
				stack.append((tree, len(children)))
				stack.extend((child, 0) for child in reversed(children))
			else:
				values = results[-count:]
				del results[-count:]
				results.append(node(PNonEmpty._fromlist(values)))
		return results[0]

	def foldl(self, func:Callable[[A, T], A], initial:A) -> A:
		acc = initial
		for items in self._leaves():
			acc = items.foldl(func, acc)
		return acc

	def foldr(self, func:Callable[[T, A], A], initial:A) -> A:
		acc = initial
		for items in self._leaves(True):
			acc = items.foldr(func, acc)
		return acc

	def __iter__(self) -> Iterator[T]:
		for items in self._leaves():
			yield from items

	def __reversed__(self) -> Iterator[T]:
		for items in self._leaves(True):
			yield from reversed(items)

	def tolist(self) -> List[T]:
		if self._isleaf(): return self._items.tolist()
		acc: List[T] = []
		for items in self._leaves():
			acc.extend(items)
		return acc

	def length(self) -> int:
		return self._reduce(len, PNonEmpty.sum)

	def reverse(self) -> Tree[T]:
		return self._reduce(
			lambda items: Tree._leaf(items.reverse()),
			lambda children: Tree._node(children.reverse()))

	def map(self, func:Callable[[T], U]) -> Tree[U]:
		return self._reduce(
			lambda items: Tree._leaf(items.map(func)),
			Tree._node)

	def indexedmap(self, func:Callable[[int, T], U]) -> Tree[U]:
		index = itertools.count()
		return self._reduce(
			lambda items: Tree._leaf(items.map(lambda x: func(next(index), x))),
			Tree._node)

	def _filterleaves(self, leaf:Callable[[PNonEmpty[T]], List[U]]) -> Optional[Tree[U]]:
		def filterleaf(items):
			values = leaf(items)
			if not values: return None
			return Tree._leaf(PNonEmpty._fromlist(values))
		def filternode(children):
			kept = children.filtermap(identity)
			if not kept: return None
			return Tree._node(PNonEmpty._fromlist(kept))
		return self._reduce(filterleaf, filternode)

	def filter(self, pred:Callable[[T], Any]) -> Optional[Tree[T]]:
		return self._filterleaves(lambda items: [x for x in items if pred(x)])

	def filtermap(self, func:Callable[[T], Optional[U]]) -> Optional[Tree[U]]:
		return self._filterleaves(lambda items: items.filtermap(func))

	def allmap(self, pred:Callable[[T], Any]) -> bool:
		return self._reduce(lambda items: items.allmap(pred),
			lambda results: results.allmap(identity))

	def anymap(self, pred:Callable[[T], Any]) -> bool:
		return self._reduce(lambda items: items.anymap(pred),
			lambda results: results.anymap(identity))

	def maximum(self:Tree[K]) -> K:
		return self._reduce(PNonEmpty.maximum, PNonEmpty.maximum)

	def minimum(self:Tree[K]) -> K:
		return self._reduce(PNonEmpty.minimum, PNonEmpty.minimum)

	def sum(self) -> Any:
		return self._reduce(PNonEmpty.sum, PNonEmpty.sum)

	def product(self) -> Any:
		return self._reduce(PNonEmpty.product, PNonEmpty.product)

	def _totree(self):
		return self._reduce(
			lambda items: ('Leaf', items.totuple()),
			lambda children: ('Node', *children))

class PRope(PRopeBase[T]):
	# Empty ropes are PRope(tree=None)
	# Filled ropes are PRope(tree=Tree)

	__doc__ = PRopeBase.__doc__

	__slots__ = ('_tree',)

	if not sphinx_build:
		_tree: Optional[Tree[T]]

	def __new__(cls, _tree):
		self = super(PRope, cls).__new__(cls)
		self._tree = _tree
		return self

	@staticmethod
	def _fromitems(iterable:Optional[Iterable[T]]=None) -> PRope[T]:
		if iterable is None: return EMPTY_ROPE
		if isinstance(iterable, PRope): return iterable
		if isinstance(iterable, PNonEmpty): return PRope(Tree._leaf(iterable))
		items = list(iterable)
		if not items: return EMPTY_ROPE
		return PRope(Tree._leaf(PNonEmpty._fromlist(items)))

	@staticmethod
	def _fromtree(tree:Optional[Tree[T]]) -> PRope[T]:
		if tree is None: return EMPTY_ROPE
		return PRope(tree)

	def isempty(self) -> bool:
		return self._tree is None

	def __bool__(self) -> bool:
		return self._tree is not None

	def appendleft(self, value:T) -> PRope[T]:
		if self._tree is None: return PRope(Tree._leaf1(value))
		return PRope(self._tree.appendleft(value))

	def appendright(self, value:T) -> PRope[T]:
		if self._tree is None: return PRope(Tree._leaf1(value))
		return PRope(self._tree.appendright(value))

	append = appendright

	def _extend(self, other:PRope[T]) -> PRope[T]:
		if self._tree is None: return other
		if other._tree is None: return self
		return PRope(self._tree.extendright(other._tree))

	def extendright(self, other:Union[PRope[T], Iterable[T]]) -> PRope[T]:
		return self._extend(PRope._fromitems(other))

	extend = extendright
	__add__ = extendright #: :meta public:

	def extendleft(self, other:Union[PRope[T], Iterable[T]]) -> PRope[T]:
		return PRope._fromitems(other)._extend(self)

	__radd__ = extendleft #: :meta public:

	def concatmap(self, func:Callable[[T], Union[PRope[U], Iterable[U]]]) -> PRope[U]:
		if self._tree is None: return EMPTY_ROPE
		def collect(item, children):
			tree = PRope._fromitems(func(item))._tree
			if tree is None: return children
			return PNonEmpty(tree, children)
		children = self._tree.foldr(collect, None)
		if children is None: return EMPTY_ROPE
		if children._tail is None: return PRope(children._head)
		return PRope(Tree._node(children))

	def map(self, func:Callable[[T], U]) -> PRope[U]:
		if self._tree is None: return EMPTY_ROPE
		return PRope(self._tree.map(func))

	def indexedmap(self, func:Callable[[int, T], U]) -> PRope[U]:
		if self._tree is None: return EMPTY_ROPE
		return PRope(self._tree.indexedmap(func))

	def filter(self, pred:Callable[[T], Any]) -> PRope[T]:
		if self._tree is None: return self
		return PRope._fromtree(self._tree.filter(pred))

	def filtermap(self, func:Callable[[T], Optional[U]]) -> PRope[U]:
		if self._tree is None: return EMPTY_ROPE
		return PRope._fromtree(self._tree.filtermap(func))

	def foldl(self, func:Callable[[A, T], A], initial:A) -> A:
		if self._tree is None: return initial
		return self._tree.foldl(func, initial)

	def foldr(self, func:Callable[[T, A], A], initial:A) -> A:
		if self._tree is None: return initial
		return self._tree.foldr(func, initial)

	def reverse(self) -> PRope[T]:
		if self._tree is None: return self
		return PRope(self._tree.reverse())

	def tolist(self) -> List[T]:
		if self._tree is None: return []
		return self._tree.tolist()

	def totuple(self) -> Tuple[T, ...]:
		return tuple(self.tolist())

	def __len__(self) -> int:
		if self._tree is None: return 0
		return self._tree.length()

	length = __len__

	def member(self, value:Any) -> bool:
		return self.any(lambda item: item == value)

	__contains__ = member

	def all(self, pred:Callable[[T], Any]) -> bool:
		if self._tree is None: return True
		return self._tree.allmap(pred)

	def any(self, pred:Callable[[T], Any]) -> bool:
		if self._tree is None: return False
		return self._tree.anymap(pred)

	def maximum(self:PRope[K], default:Optional[K]=None) -> Optional[K]:
		if self._tree is None: return default
		return self._tree.maximum()

	def minimum(self:PRope[K], default:Optional[K]=None) -> Optional[K]:
		if self._tree is None: return default
		return self._tree.minimum()

	def sum(self) -> Any:
		if self._tree is None: return 0
		return self._tree.sum()

	def product(self) -> Any:
		if self._tree is None: return 1
		return self._tree.product()

	def __iter__(self) -> Iterator[T]:
		if self._tree is None: return iter(())
		return iter(self._tree)

	def __reversed__(self) -> Iterator[T]:
		if self._tree is None: return iter(())
		return reversed(self._tree)

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
		r'''
		Calculate the hash of the rope.

		:math:`O(n)`

		>>> x1 = prope([1,2,3,4])
		>>> x2 = prope([1,2]) + prope([3,4])
		>>> hash(x1) == hash(x2)
		True
		'''
		return hash(self.totuple())

	def __reduce__(self):
		return PRope._fromitems, (self.tolist(),)

	def __repr__(self) -> str:
		return 'prope({})'.format(self.tolist())

	__str__ = __repr__

	def _totree(self):
		if self._tree is None: return None
		return self._tree._totree()

EMPTY_ROPE: PRope[Any] = PRope(None)

# for doctest
def prope(*args, **kwargs):
	from pyrsistent_rope import prope as prp
	return prp(*args, **kwargs)

__all__ = ('PRope', 'Tree')
