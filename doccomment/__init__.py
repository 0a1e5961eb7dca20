"""Top-level package for doccomment.

This package converts raw `/** ... */` documentation comments into the
documentation text a tool associates with the following declaration. The main
entry points are `normalize` and `CommentNormalizer`.
"""

from .errors import InvalidCommentFormat
from .text import DEFAULT_POLICY, JAVADOC_POLICY, CommentNormalizer, DecorationPolicy, normalize

__all__ = [
    "CommentNormalizer",
    "DEFAULT_POLICY",
    "DecorationPolicy",
    "InvalidCommentFormat",
    "JAVADOC_POLICY",
    "normalize",
    "__version__",
]

__version__ = "0.1.0"
