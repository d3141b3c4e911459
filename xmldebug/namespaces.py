import logging
from typing import Any, Dict, List, Optional, Tuple

from lxml import etree

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

NamespaceTable = Dict[str, Optional[str]]


class NamespaceResolver:
    """
    Namespace lookups over lxml elements, keyed by alias (prefix) the way a
    developer would spell them when navigating the tree.

    The empty alias "" stands for the default namespace and a URI of None
    for "no namespace".
    """

    @staticmethod
    def local_name(tag: str) -> str:
        return etree.QName(tag).localname

    @staticmethod
    def _attribute_prefix(element: Any, uri: Optional[str]) -> str:
        if uri is None:
            return ""
        if uri == XML_NAMESPACE:
            return "xml"
        for prefix, href in element.nsmap.items():
            if prefix is not None and href == uri:
                return prefix
        return ""

    @staticmethod
    def document_namespaces(element: Any) -> NamespaceTable:
        """
        Returns the namespaces declared on the root element of the document
        that `element` belongs to.
        """
        root = element.getroottree().getroot()
        return {prefix or "": uri for prefix, uri in root.nsmap.items()}

    @staticmethod
    def scoped_namespaces(element: Any) -> NamespaceTable:
        """
        Collects every alias used by `element`, its attributes, and all of
        its descendants, in document order. The first URI seen for an alias
        wins.

        The default alias "" is always present in the result, mapped to
        None when nothing in the subtree uses a default namespace.
        """
        table: NamespaceTable = {}
        for node in element.iter(tag=etree.Element):
            uri = etree.QName(node).namespace
            if uri is not None:
                table.setdefault(node.prefix or "", uri)
            for name in node.attrib:
                attr_uri = etree.QName(name).namespace
                if attr_uri is not None:
                    alias = NamespaceResolver._attribute_prefix(node, attr_uri)
                    table.setdefault(alias, attr_uri)

        if "" not in table:
            table[""] = None
        return table

    @staticmethod
    def children(element: Any, uri: Optional[str]) -> List[Any]:
        """
        Child elements in namespace `uri`. With `uri` None, the children
        written without a prefix are returned, whether or not a default
        namespace applies to them.
        """
        if uri is None:
            return [c for c in element.iterchildren(tag=etree.Element) if c.prefix is None]
        return [
            c for c in element.iterchildren(tag=etree.Element)
            if etree.QName(c).namespace == uri
        ]

    @staticmethod
    def attributes(element: Any, uri: Optional[str]) -> List[Tuple[str, str]]:
        """(name, value) pairs of the attributes of `element` in namespace `uri`."""
        return [
            (name, value) for name, value in element.attrib.items()
            if etree.QName(name).namespace == uri
        ]

    @staticmethod
    def resolve(
        element: Any, alias: str, uri: Optional[str]
    ) -> Tuple[List[Tuple[str, str]], List[Any]]:
        """
        Attributes and children of `element` for one entry of its scoped
        namespace table.

        A default namespace declared only further down the subtree still
        shows up in the scoped table of its ancestors. When the default
        alias resolves to a URI under which this element has neither
        attributes nor children, the lookup is repeated for unprefixed
        nodes instead.
        """
        attributes = NamespaceResolver.attributes(element, uri)
        children = NamespaceResolver.children(element, uri)

        if alias == "" and uri is not None and not children and not attributes:
            logger.debug(
                f"Default namespace '{uri}' does not apply at <{element.tag}>, "
                "falling back to unprefixed nodes"
            )
            attributes = NamespaceResolver.attributes(element, None)
            children = NamespaceResolver.children(element, None)

        return attributes, children

    @staticmethod
    def qualified_name(element: Any) -> str:
        """`alias:localName` for a prefixed element, else just `localName`."""
        name = NamespaceResolver.local_name(element.tag)
        if element.prefix:
            return f"{element.prefix}:{name}"
        return name

    @staticmethod
    def attribute_alias(attribute: Any) -> str:
        """Alias of an lxml attribute result, or "" when it has no namespace."""
        uri = etree.QName(attribute.attrname).namespace
        return NamespaceResolver._attribute_prefix(attribute.getparent(), uri)
