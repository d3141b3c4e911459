"""
xmldebug: Developer-facing tree dumps of lxml documents that show both the
structure of a namespaced XML tree and how to navigate to each of its nodes.
"""

from .dumper import TreeDumper, xml_tree
from .formatter import DumpFormatter
from .models import ContentSummary, DumpLine, DumpOptions, RootItem, RootKind
from .namespaces import NamespaceResolver
from .roots import iter_roots
from .summarizer import summarize
from .walker import TreeWalker

__all__ = [
    "xml_tree",
    "TreeDumper",
    "TreeWalker",
    "NamespaceResolver",
    "DumpFormatter",
    "DumpOptions",
    "DumpLine",
    "ContentSummary",
    "RootItem",
    "RootKind",
    "iter_roots",
    "summarize",
]
