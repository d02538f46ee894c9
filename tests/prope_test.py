from __future__ import annotations
from typing import List

from pyrsistent_rope import prope, rp, PRope, concatenate, EMPTY_ROPE, ne
from pyrsistent_rope._prope import Tree
import pyrsistent_rope.lenses

from hypothesis import given, strategies as st

import collections.abc
import functools
import operator
import pickle
import pytest
from lenses import lens

def leaves(elements):
	return st.builds(lambda xs: (prope(xs), xs), st.lists(elements, max_size=4))

def branches(elements):
	def inner(children):
		return st.one_of(
			st.builds(lambda x, y: (x[0] + y[0], x[1] + y[1]),
				children, children),
			st.builds(lambda x, y: (y[0].extendleft(x[0]), x[1] + y[1]),
				children, children),
			st.builds(lambda x, v: (x[0].append(v), x[1] + [v]),
				children, elements),
			st.builds(lambda x, v: (x[0].appendleft(v), [v] + x[1]),
				children, elements),
		)
	return inner

def propes(elements=st.integers(), max_leaves=30):
	'''
	pairs of (rope, expected items), with ropes of any shape
	'''
	return st.recursive(leaves(elements), branches(elements), max_leaves=max_leaves)

smallints = lambda n=4: st.integers(-n, n)

def check_tree(tree, acc):
	'''
	check invariants of Tree
	'''
	assert isinstance(tree, Tree)
	if tree._type == Tree._Type.Leaf:
		acc.extend(tree._items)
		return 1
	depth = 0
	for child in tree._items:
		depth = max(depth, check_tree(child, acc))
	return depth + 1

def check_rope(rope):
	'''
	check invariants of PRope
	'''
	assert isinstance(rope, PRope)
	if rope._tree is None:
		assert rope is EMPTY_ROPE
		return []
	acc = []
	check_tree(rope._tree, acc)
	assert acc
	return acc

@given(propes())
def test_properties(args):
	rope, items = args
	assert check_rope(rope) == items
	assert isinstance(rope, collections.abc.Collection)
	assert isinstance(rope, collections.abc.Reversible)
	assert bool(rope) == bool(items)
	assert rope.isempty() == (not items)
	assert len(rope) == rope.length() == len(items)
	assert rope.tolist() == items
	assert rope.totuple() == tuple(items)
	assert list(rope) == items
	assert list(reversed(rope)) == items[::-1]
	assert rope == items
	assert rope == rp(*items)
	assert hash(rope) == hash(prope(items))
	assert eval(repr(rope)) == rope
	assert pickle.loads(pickle.dumps(rope)) == rope

@given(st.lists(st.integers()))
def test_roundtrip(items:List[int]):
	rope = prope(items)
	assert rope.tolist() == items
	assert check_rope(rope) == items
	assert prope(rope) is rope

def test_empty():
	assert prope() is EMPTY_ROPE
	assert prope([]) is EMPTY_ROPE
	assert rp() is EMPTY_ROPE
	assert EMPTY_ROPE.tolist() == []
	assert len(EMPTY_ROPE) == 0
	assert EMPTY_ROPE.sum() == 0
	assert EMPTY_ROPE.product() == 1
	assert EMPTY_ROPE.maximum() is None
	assert EMPTY_ROPE.minimum() is None
	assert EMPTY_ROPE.maximum(7) == 7
	assert EMPTY_ROPE.all(lambda x: False)
	assert not EMPTY_ROPE.any(lambda x: True)
	assert not EMPTY_ROPE.member(None)
	assert EMPTY_ROPE.foldl(operator.add, 'x') == 'x'
	assert EMPTY_ROPE.foldr(operator.add, 'x') == 'x'
	assert EMPTY_ROPE.reverse() is EMPTY_ROPE
	assert EMPTY_ROPE.map(str) is EMPTY_ROPE
	assert EMPTY_ROPE.filter(bool) is EMPTY_ROPE
	assert EMPTY_ROPE.concatmap(lambda x: [x]) is EMPTY_ROPE

def test_scenarios():
	assert prope.singleton(5).tolist() == [5]
	assert prope([2,3]).appendleft(1).tolist() == [1, 2, 3]
	assert prope([2,3]).append(1).tolist() == [2, 3, 1]
	assert prope([1,1,2]).extendright(prope([3,5,8])).tolist() == [1, 1, 2, 3, 5, 8]
	assert prope([1,2,3]).reverse().tolist() == [3, 2, 1]
	assert prope([]).sum() == 0
	assert prope([]).product() == 1
	assert prope([]).maximum() is None
	assert concatenate(prope([prope([1,2]), EMPTY_ROPE, prope([3])])).tolist() == [1, 2, 3]

def test_shape():
	leaf = prope([2, 3])
	assert leaf._totree() == ('Leaf', (2, 3))
	assert leaf.appendleft(1)._totree() == ('Leaf', (1, 2, 3))
	node = leaf.append(4)
	assert node._totree() == ('Node', ('Leaf', (2, 3)), ('Leaf', (4,)))
	assert node._tree._items._head is leaf._tree
	assert node.appendleft(1)._totree() == \
		('Node', ('Leaf', (1,)), ('Leaf', (2, 3)), ('Leaf', (4,)))
	joined = prope([0]) + node
	assert joined._totree() == \
		('Node', ('Leaf', (0,)), ('Leaf', (2, 3)), ('Leaf', (4,)))
	assert joined._tree._items._tail is node._tree._items
	assert (node + leaf)._totree() == \
		('Node', node._totree(), ('Leaf', (2, 3)))
	assert node.reverse()._totree() == \
		('Node', ('Leaf', (4,)), ('Leaf', (3, 2)))

@given(propes(), propes())
def test_extend(args1, args2):
	(rope1, items1), (rope2, items2) = args1, args2
	assert len(rope1 + rope2) == len(rope1) + len(rope2)
	assert rope1 + rope2 == rope1.extend(rope2) == rope1.extendright(rope2) \
		== rope2.extendleft(rope1) == items1 + items2
	assert rope1 + items2 == items1 + rope2 == items1 + items2
	assert check_rope(rope1 + rope2) == items1 + items2
	assert rope1 == items1 and rope2 == items2

@given(propes())
def test_extend_identity(args):
	rope, items = args
	assert EMPTY_ROPE + rope is rope
	assert rope + EMPTY_ROPE is rope
	assert rope.extendleft(EMPTY_ROPE) is rope

@given(propes(), st.integers())
def test_append(args, value):
	rope, items = args
	assert rope.append(value) == rope.appendright(value) == items + [value]
	assert rope.appendleft(value) == [value] + items
	assert check_rope(rope.appendleft(value)) == [value] + items

@given(propes())
def test_fold(args):
	rope, items = args
	assert rope.foldl(lambda acc, x: acc + [x], []) == items
	assert rope.foldr(lambda x, acc: acc + [x], []) == items[::-1]
	assert rope.foldl(lambda acc, x: acc * 3 - x, 1) \
		== functools.reduce(lambda acc, x: acc * 3 - x, items, 1)
	assert rope.foldr(lambda x, acc: acc * 3 - x, 1) \
		== functools.reduce(lambda acc, x: acc * 3 - x, reversed(items), 1)

@given(propes())
def test_reverse(args):
	rope, items = args
	assert rope.reverse() == items[::-1]
	assert rope.reverse().reverse() == rope
	assert check_rope(rope.reverse()) == items[::-1]

@given(propes())
def test_map(args):
	rope, items = args
	assert rope.map(lambda x: x * 2) == [x * 2 for x in items]
	assert rope.indexedmap(lambda i, x: (i, x)) == list(enumerate(items))
	assert check_rope(rope.map(str)) == [str(x) for x in items]

@given(propes(smallints()))
def test_filter(args):
	rope, items = args
	evens = rope.filter(lambda x: x % 2 == 0)
	assert evens == [x for x in items if x % 2 == 0]
	assert check_rope(evens) == evens.tolist()
	halves = rope.filtermap(lambda x: x // 2 if x % 2 == 0 else None)
	assert halves == [x // 2 for x in items if x % 2 == 0]
	assert check_rope(halves) == halves.tolist()
	assert rope.filter(lambda x: False) is EMPTY_ROPE
	assert rope.filter(lambda x: True) == items

@given(propes(smallints()))
def test_concatmap(args):
	rope, items = args
	func = lambda x: prope([x] * max(x, 0))
	expected = [y for x in items for y in [x] * max(x, 0)]
	assert rope.concatmap(func) == expected
	assert check_rope(rope.concatmap(func)) == expected
	assert rope.concatmap(lambda x: [x, x]) == [y for x in items for y in [x, x]]
	assert concatenate(rope.map(func)) == expected

@given(st.lists(propes(max_leaves=5), max_size=6))
def test_concatenate(args):
	ropes = [rope for rope, _ in args]
	expected = [x for _, items in args for x in items]
	assert concatenate(ropes) == expected
	assert concatenate(prope(ropes)) == expected
	assert check_rope(concatenate(ropes)) == expected

@given(propes(smallints()))
def test_aggregates(args):
	rope, items = args
	assert rope.sum() == sum(items)
	assert rope.product() == functools.reduce(operator.mul, items, 1)
	assert rope.maximum() == (max(items) if items else None)
	assert rope.minimum() == (min(items) if items else None)
	assert rope.all(lambda x: x > 0) == all(x > 0 for x in items)
	assert rope.any(lambda x: x > 0) == any(x > 0 for x in items)
	for value in range(-5, 6):
		assert rope.member(value) == (value in rope) == (value in items)

@given(propes(smallints()), propes(smallints()))
def test_compare(args1, args2):
	(rope1, items1), (rope2, items2) = args1, args2
	for op in [operator.eq, operator.ne, operator.gt, operator.ge, operator.lt, operator.le]:
		assert len(set(op(x, y) for x in [rope1, items1] for y in [rope2, items2])) == 1

def test_compare_other():
	assert prope([1]) != 1
	with pytest.raises(TypeError):
		prope([1]) < 1

def test_nonempty_leaf():
	xs = ne(1, 2, 3)
	rope = prope(xs)
	assert rope._tree._items is xs
	assert rope == [1, 2, 3]

def test_deep():
	size = 100000
	rope = prope()
	for n in range(size):
		rope = rope.append(n)
	items = list(range(size))
	assert len(rope) == size
	assert rope.tolist() == items
	assert list(reversed(rope)) == items[::-1]
	assert rope.foldr(lambda x, acc: x - acc, 0) \
		== functools.reduce(lambda acc, x: x - acc, reversed(items), 0)
	assert rope.foldl(lambda acc, x: acc - x, 0) == -sum(items)
	assert rope.reverse().tolist() == items[::-1]
	assert rope.map(lambda x: x + 1).sum() == sum(items) + size
	assert rope.filter(lambda x: x % 2).length() == size // 2
	assert rope.maximum() == size - 1
	assert rope.minimum() == 0
	assert rope.all(lambda x: x >= 0)
	assert rope.member(size - 1)
	assert rope.concatmap(lambda x: [x]) == items

def test_deep_leaf():
	size = 100000
	rope = prope()
	for n in range(size):
		rope = rope.appendleft(n)
	assert rope._tree._type == Tree._Type.Leaf
	assert rope.foldr(lambda x, acc: acc + 1, 0) == size
	assert rope.foldr(lambda x, acc: x - acc, 0) \
		== rope.reverse().foldl(lambda acc, x: x - acc, 0)

@given(propes(smallints()), smallints())
def test_lenses(args, value):
	rope, items = args
	each = lens.Each().modify(lambda x: x * 2)
	remove = lens.Contains(value).set(False)
	adder = lens.Contains(value).set(True)
	assert each(rope) == [x * 2 for x in items]
	assert isinstance(each(rope), PRope)
	assert remove(rope) == [x for x in items if x != value]
	assert adder(rope) == (items if value in items else items + [value])
	assert rope == items

def test_filtermap_drops_none():
	rope = rp(1, None, 2)
	assert rope.filtermap(lambda x: x) == [1, 2]
	assert rope.filter(lambda x: True) == [1, None, 2]
	assert (rope + rp(None)).filtermap(lambda x: x) == [1, 2]

def test_extremes_keep_first():
	first, second = (1.0,), (1,)
	rope = rp(first) + rp(second)
	assert rope.maximum() is first
	assert rope.minimum() is first
	assert rope.reverse().maximum() is second

# vim: set foldmethod=marker:
