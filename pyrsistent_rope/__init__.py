from __future__ import annotations

from typing import Tuple

from ._version import __version__
from ._utility import Comparable

from ._pnonempty import PNonEmpty, pnonempty, ne
from ._prope import PRope, prope, rp, concatenate, EMPTY_ROPE

__all__: Tuple[str, ...] = ('PNonEmpty', 'pnonempty', 'ne',
	'PRope', 'prope', 'rp', 'concatenate', 'EMPTY_ROPE')
