"""Pure-function Chess960 back-rank analysis package.

Positions are plain 8-character strings (files a-h, e.g. "RNBQKBNR") and
protection vectors are 8-tuples of 0/1 flags. No global state: the
generator returns a frozenset and the analyzer maps it to vectors.
"""

# Re-export everything so `from fischer_pawns.analysis import X` works
from fischer_pawns.analysis.constants import *  # noqa: F401,F403
from fischer_pawns.analysis.positions import *  # noqa: F401,F403
from fischer_pawns.analysis.protection import *  # noqa: F401,F403
