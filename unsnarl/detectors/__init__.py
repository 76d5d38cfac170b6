"""Structural detectors over tree-sitter syntax trees.

Each detector is a pure function ``detect_*(root, <thresholds>, *, spec)``
returning a list of ``Issue``; none of them read files or keep state
between calls.
"""

from .canonical import canonical_shape, literal_serialization
from .complexity import detect_cyclomatic_complexity
from .dead_code import detect_dead_code
from .dupes import detect_duplicate_blocks, detect_duplicate_code
from .facade import DetectorOptions, analyze_tree
from .long_functions import detect_long_functions
from .naming import detect_bad_naming
from .nesting import detect_deep_nesting

__all__ = [
    "DetectorOptions",
    "analyze_tree",
    "canonical_shape",
    "detect_bad_naming",
    "detect_cyclomatic_complexity",
    "detect_dead_code",
    "detect_deep_nesting",
    "detect_duplicate_blocks",
    "detect_duplicate_code",
    "detect_long_functions",
    "literal_serialization",
]
