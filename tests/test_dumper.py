import io
import logging
import os

import pytest
from lxml import etree
from pydantic import ValidationError

from xmldebug import DumpOptions, TreeDumper, xml_tree


def dump(selection, **kwargs):
    return xml_tree(selection, return_output=True, line_terminator="\n", **kwargs)


# --- 1. Basic shapes ---


def test_single_empty_element():
    root = etree.fromstring(b"<root/>")
    assert dump(root) == "SimpleXML object (1 item)\n<root>\n"


def test_children_listed_with_accessors():
    root = etree.fromstring(b"<root><a/><a/><b/></root>")

    assert dump(root) == (
        "SimpleXML object (1 item)\n"
        "<root>\n"
        "\t->children('', true)\n"
        "\t\t->root[0]\n"
        "\t\t->root[1]\n"
        "\t\t->root[0]\n"
    )


def test_attribute_root():
    root = etree.fromstring(b'<root id="42"><child/></root>')

    assert dump(root.xpath("@id")) == 'SimpleXML object (1 item)\nid="42"\n'
    assert dump(root.xpath("@id")[0]) == 'SimpleXML object (1 item)\nid="42"\n'


def test_content_extract():
    root = etree.fromstring(b"<root>  hello   world  </root>")

    output = dump(root, include_attributes_and_content=True, content_extract_size=5)

    assert output == (
        "SimpleXML object (1 item)\n"
        "<root>\n"
        "\tstring content (17 chars): 'hello...'\n"
    )


def test_empty_selection():
    assert dump([]) == "SimpleXML object (0 items)\n"


def test_multiple_roots():
    root = etree.fromstring(b"<list><item><x/></item><item/></list>")

    assert dump(root.xpath("item")) == (
        "SimpleXML object (2 items)\n"
        "<item>\n"
        "\t->children('', true)\n"
        "\t\t->item[0]\n"
        "<item>\n"
    )


def test_element_tree_selection():
    tree = etree.ElementTree(etree.fromstring(b"<root/>"))
    assert dump(tree) == "SimpleXML object (1 item)\n<root>\n"


# --- 2. Namespaces ---


def test_namespaced_document():
    xml = b"""<s:Envelope xmlns:s="urn:s" xmlns:m="urn:m">
        <s:Body>
            <m:Order ref="A1">
                <m:Line qty="2">Widget</m:Line>
                <m:Line qty="1">Gadget with a long name</m:Line>
            </m:Order>
        </s:Body>
    </s:Envelope>"""
    root = etree.fromstring(xml)

    output = dump(root, include_attributes_and_content=True)

    assert output.splitlines() == [
        "SimpleXML object (1 item)",
        "<s:Envelope>",
        "\tstring content (14 chars): ''",
        "\t->children('s', true)",
        "\t\t->Envelope[0]",
        "\t\t\tstring content (22 chars): ''",
        "\t\t\t->children('m', true)",
        "\t\t\t\t->Body[0]",
        "\t\t\t\t\tstring content (47 chars): ''",
        "\t\t\t\t\t->children('m', true)",
        "\t\t\t\t\t\t->Order[0]",
        "\t\t\t\t\t\t\tstring content (6 chars): 'Widget'",
        "\t\t\t\t\t\t\t->attributes('', true)",
        "\t\t\t\t\t\t\t\t->Line (1 chars): '2'",
        "\t\t\t\t\t\t->Order[1]",
        "\t\t\t\t\t\t\tstring content (23 chars): 'Gadget with a l...'",
        "\t\t\t\t\t\t\t->attributes('', true)",
        "\t\t\t\t\t\t\t\t->Line (1 chars): '1'",
        "\t\t\t\t\t->attributes('', true)",
        "\t\t\t\t\t\t->Order (2 chars): 'A1'",
    ]


def test_default_namespace_declared_below_root(caplog):
    root = etree.fromstring(b'<root><a><b xmlns="urn:d"/></a></root>')

    with caplog.at_level(logging.DEBUG, logger="xmldebug"):
        output = dump(root)

    assert output == (
        "SimpleXML object (1 item)\n"
        "<root>\n"
        "\t->children('', true)\n"
        "\t\t->root[0]\n"
        "\t\t\t->children('', true)\n"
        "\t\t\t\t->a[0]\n"
    )
    assert "falling back" in caplog.text
    assert "Dumped 1 root item(s)" in caplog.text


def test_default_namespace_document():
    root = etree.fromstring(b'<Document xmlns="urn:d"><Hdr/><Body/></Document>')

    assert dump(root) == (
        "SimpleXML object (1 item)\n"
        "<Document>\n"
        "\t->children('', true)\n"
        "\t\t->Document[0]\n"
        "\t\t->Document[0]\n"
    )


# --- 3. Options and output ---


def test_custom_indent():
    root = etree.fromstring(b"<a><b/></a>")
    assert dump(root, indent="  ") == (
        "SimpleXML object (1 item)\n<a>\n  ->children('', true)\n    ->a[0]\n"
    )


def test_writes_to_file_when_not_returning():
    root = etree.fromstring(b"<root/>")
    sink = io.StringIO()

    result = xml_tree(root, line_terminator="\n", file=sink)

    assert result is None
    assert sink.getvalue() == "SimpleXML object (1 item)\n<root>\n"


def test_writes_to_stdout_by_default(capsys):
    root = etree.fromstring(b"<root/>")

    assert xml_tree(root) is None

    captured = capsys.readouterr()
    assert captured.out == f"SimpleXML object (1 item){os.linesep}<root>{os.linesep}"


def test_invalid_extract_size_rejected():
    with pytest.raises(ValidationError):
        DumpOptions(content_extract_size=-1)


def test_options_are_frozen():
    options = DumpOptions()
    with pytest.raises(ValidationError):
        options.indent = "  "


def test_dump_is_idempotent():
    root = etree.fromstring(b'<r xmlns:x="urn:x" k="v"><x:a>t</x:a><b x:q="1"/></r>')
    dumper = TreeDumper(DumpOptions(include_attributes_and_content=True))

    assert dumper.dump(root) == dumper.dump(root)


def test_invalid_selection_raises():
    with pytest.raises(TypeError):
        xml_tree("not a node", return_output=True)
