from __future__ import annotations

import pyrsistent_rope._pnonempty
import pyrsistent_rope._prope
import pyrsistent_rope._prope._base
import pyrsistent_rope._prope._python

import doctest
import pytest

@pytest.mark.parametrize('module', [
	pyrsistent_rope._pnonempty,
	pyrsistent_rope._prope,
	pyrsistent_rope._prope._base,
	pyrsistent_rope._prope._python,
], ids=lambda module: module.__name__)
def test_docstrings(module):
	result = doctest.testmod(module, optionflags=doctest.ELLIPSIS)
	assert result.attempted > 0
	assert result.failed == 0
