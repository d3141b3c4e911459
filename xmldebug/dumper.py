import logging
import os
import sys
from typing import Any, List, Optional, TextIO

from xmldebug.formatter import DumpFormatter
from xmldebug.models import DumpLine, DumpOptions, RootKind
from xmldebug.namespaces import NamespaceResolver
from xmldebug.roots import attribute_line, element_line, iter_roots
from xmldebug.walker import TreeWalker

logger = logging.getLogger(__name__)


class TreeDumper:
    """
    Produces a tree view of an lxml selection that doubles as a hint of the
    accessor syntax needed to reach each node.
    """

    def __init__(self, options: Optional[DumpOptions] = None):
        self.options = options or DumpOptions()
        self.walker = TreeWalker(self.options)

    def dump(self, selection: Any) -> str:
        """
        Renders every item of `selection`.

        Args:
            selection: An lxml element, element tree, attribute result, or a
                       list of those as returned by `xpath()`.

        Returns:
            str: The complete dump, header first.
        """
        lines: List[DumpLine] = []
        item_count = 0

        for item in iter_roots(selection):
            if item_count == 0:
                owner = item.node.getparent() if item.kind is RootKind.ATTRIBUTE else item.node
                logger.debug(f"Document namespaces: {NamespaceResolver.document_namespaces(owner)}")
            item_count += 1

            if item.kind is RootKind.ATTRIBUTE:
                lines.append(attribute_line(item.node))
                continue

            lines.append(element_line(item.node))
            lines.extend(self.walker.walk(item.node, 1))

        logger.debug(f"Dumped {item_count} root item(s), {len(lines)} line(s)")
        return DumpFormatter.format(item_count, lines, self.options)


def xml_tree(
    selection: Any,
    include_attributes_and_content: bool = False,
    return_output: bool = False,
    *,
    indent: str = "\t",
    content_extract_size: int = 15,
    line_terminator: str = os.linesep,
    file: Optional[TextIO] = None,
) -> Optional[str]:
    """
    Outputs a tree view of the node or list of nodes in `selection`.

    Unlike a flat dump, this processes the whole subtree of every item while
    staying more concise than the XML itself.

    Args:
        selection: The lxml node(s) to inspect.
        include_attributes_and_content (bool): Also summarise attributes and
            text content, not just child elements.
        return_output (bool): Return the dump instead of writing it.
        indent (str): Indent unit repeated once per depth level.
        content_extract_size (int): Characters of text shown before truncating.
        line_terminator (str): Appended to every output line.
        file (TextIO): Where to write when not returning; defaults to stdout.

    Returns:
        Optional[str]: The dump when `return_output` is set, otherwise None.
    """
    options = DumpOptions(
        include_attributes_and_content=include_attributes_and_content,
        return_output=return_output,
        indent=indent,
        content_extract_size=content_extract_size,
        line_terminator=line_terminator,
    )
    output = TreeDumper(options).dump(selection)

    if options.return_output:
        return output

    (file or sys.stdout).write(output)
    return None
