"""Logical-line segmentation for luaflow.

Architecture:
segmenter/
├── __init__.py          # Re-exports LineSegmenter, build_document, segment
├── core.py              # LineSegmenter (pass 1) and the public functions
├── context.py           # TokenContext: bounded lookups with ^/$ sentinels
└── rules.py             # Boundary tag tables and statement-break pairs

"""

from luaflow.segmenter.context import TokenContext
from luaflow.segmenter.core import LineSegmenter, build_document, segment

__all__ = ["LineSegmenter", "TokenContext", "build_document", "segment"]
