from typing import Any, Iterator, Sequence

from lxml import etree

from xmldebug.models import DumpLine, RootItem, RootKind
from xmldebug.namespaces import NamespaceResolver


def _is_element(node: Any) -> bool:
    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def _is_attribute(node: Any) -> bool:
    return isinstance(node, str) and getattr(node, "is_attribute", False)


def _as_sequence(selection: Any) -> Sequence[Any]:
    # Indexing a lone element would address its children, so wrap it first
    if isinstance(selection, etree._ElementTree):
        return [selection.getroot()]
    if _is_element(selection) or _is_attribute(selection):
        return [selection]
    if isinstance(selection, (list, tuple)):
        return selection
    raise TypeError(
        f"Cannot dump {type(selection).__name__!r}: expected an lxml element, "
        "element tree, attribute result or a list of those."
    )


def iter_roots(selection: Any) -> Iterator[RootItem]:
    """
    Yields each item of a root selection tagged as an element or attribute.

    `selection` may be a single element, an element tree, a single attribute
    result from `xpath()`, or a node-set list. Items are fetched by index
    until the index runs past the end.

    Raises:
        TypeError: If the selection or one of its items is not an element
                   or attribute.
    """
    items = _as_sequence(selection)
    index = 0
    while True:
        try:
            node = items[index]
        except IndexError:
            return
        index += 1

        if _is_attribute(node):
            yield RootItem(RootKind.ATTRIBUTE, node)
        elif _is_element(node):
            yield RootItem(RootKind.ELEMENT, node)
        else:
            raise TypeError(
                f"Root item {index - 1} is a {type(node).__name__!r}, "
                "not an element or attribute."
            )


def attribute_line(attribute: Any) -> DumpLine:
    """Renders an attribute root, e.g. `xlink:href="#a"`."""
    alias = NamespaceResolver.attribute_alias(attribute)
    name = NamespaceResolver.local_name(attribute.attrname)
    prefix = f"{alias}:" if alias else ""
    return DumpLine(0, f'{prefix}{name}="{attribute}"')


def element_line(element: Any) -> DumpLine:
    """Renders an element root as an XML-ish tag, e.g. `<soap:Envelope>`."""
    return DumpLine(0, f"<{NamespaceResolver.qualified_name(element)}>")
