from typing import Any, Dict, List, Optional

from xmldebug.models import DumpLine, DumpOptions
from xmldebug.namespaces import NamespaceResolver
from xmldebug.summarizer import summarize


class TreeWalker:
    """
    Depth-first walk of an element subtree, producing the lines that show how
    each attribute and child is reached from its parent.
    """

    def __init__(self, options: Optional[DumpOptions] = None):
        self.options = options or DumpOptions()

    def _describe(self, label: str, raw: str) -> str:
        summary = summarize(raw, self.options.content_extract_size)
        return f"{label} ({summary.raw_length} chars): '{summary.text}'"

    def walk(self, element: Any, depth: int) -> List[DumpLine]:
        """
        Renders `element` and, recursively, everything below it.

        Args:
            element: The lxml element to describe.
            depth (int): Indentation level of this element's own lines.

        Returns:
            List[DumpLine]: Lines in emission order. Each child's subtree is
            rendered two levels deeper than its parent.
        """
        lines: List[DumpLine] = []
        show_detail = self.options.include_attributes_and_content
        name = NamespaceResolver.local_name(element.tag)

        if show_detail:
            # Direct text nodes only, descendants' text is shown at their own level
            text = "".join(element.xpath("text()"))
            if text:
                lines.append(DumpLine(depth, self._describe("string content", text)))

        for alias, uri in NamespaceResolver.scoped_namespaces(element).items():
            attributes, children = NamespaceResolver.resolve(element, alias, uri)

            if show_detail and attributes:
                lines.append(DumpLine(depth, f"->attributes('{alias}', true)"))
                for _, value in attributes:
                    # e.g. ->Foo (3 chars): 'bar'
                    lines.append(DumpLine(depth + 1, self._describe(f"->{name}", value)))

            if children:
                lines.append(DumpLine(depth, f"->children('{alias}', true)"))
                seen: Dict[str, int] = {}
                for child in children:
                    child_name = NamespaceResolver.local_name(child.tag)
                    index = seen.get(child_name, 0)
                    seen[child_name] = index + 1

                    lines.append(DumpLine(depth + 1, f"->{name}[{index}]"))
                    lines.extend(self.walk(child, depth + 2))

        return lines
