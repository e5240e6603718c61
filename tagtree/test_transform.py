import logging
import pytest

from tagtree.document import ElementDescriptor
from tagtree.errors import TransformInvariantViolation
from tagtree.nodes import TextNode, ElementNode
from tagtree.parser import TemplateParser
from tagtree.transform import transform, transform_all, fold_attrs

parser = TemplateParser()


#####################################################################################################################################################
#####
#####  UTILITIES
#####

def count(nodes):
    """Total no. of syntax nodes in a list of subtrees."""
    return sum(1 + count(n.children) if isinstance(n, ElementNode) else 1 for n in nodes)

def shape(node):
    """Structure of a syntax node or element descriptor, as nested tuples: (tag, attribute names, children shapes) or text."""
    if isinstance(node, TextNode):  return node.text
    if isinstance(node, str):       return node
    if isinstance(node, ElementNode):
        return node.tag, tuple(name for name, _ in node.attrs), tuple(map(shape, node.children))
    return node.type, tuple(node.props), tuple(map(shape, node.children))


#####################################################################################################################################################
#####
#####  TESTS
#####

def test_001_text():
    assert transform(TextNode("Ala")) == "Ala"
    assert transform(TextNode("a < b & c")) == "a < b & c"         # no escaping added
    assert transform(TextNode("&amp;")) == "&amp;"                 # ...nor removed
    assert transform(TextNode("")) == ""

def test_002_element():
    node = parser.parse("""<div class="a"><span>hi</span> there</div>""")[0]
    div = transform(node)
    assert div == ElementDescriptor('div', {'class': 'a'}, (ElementDescriptor('span', {}, ("hi",)), " there"))
    assert div.count() == 4
    assert div.depth() == 2

def test_003_props_order():
    node = parser.parse("""<input type="checkbox" name="x" value="1" checked>""")[0]
    elem = transform(node)
    assert list(elem.props) == ['type', 'name', 'value', 'checked']
    assert elem.props['checked'] == ''
    assert elem.children == ()

def test_004_duplicate_attrs():
    # the parser rejects duplicates, but a syntax tree built by other means may contain them
    node = ElementNode('a', (('x', '1'), ('y', '2'), ('x', '3')))
    elem = transform(node)
    assert elem.props == {'x': '3', 'y': '2'}
    assert list(elem.props) == ['x', 'y']
    assert fold_attrs([]) == {}

def test_005_structure_preserved():
    src = """
    <ul id="menu" class="top">
        <li><a href="/" title="Home">Home</a></li>
        <li class=last><a href="/about">About <b>us</b></a><br></li>
    </ul>
    <p>tail &amp; more</p>"""
    nodes = parser.parse(src)
    elems = transform_all(nodes)

    assert isinstance(elems, tuple)
    assert len(elems) == len(nodes)
    assert list(map(shape, elems)) == list(map(shape, nodes))
    assert sum(e.count() if isinstance(e, ElementDescriptor) else 1 for e in elems) == count(nodes)

def test_006_deep():
    node = TextNode("x")
    for i in range(200):
        node = ElementNode('b', (('i', str(i)),), (node,))
    elem = transform(node)
    assert elem.depth() == 200
    assert elem.props == {'i': '199'}

def test_007_fresh_trees():
    nodes = parser.parse("<p>x</p>")
    first, second = transform_all(nodes), transform_all(nodes)
    assert first == second
    assert first[0] is not second[0]
    assert first[0].props is not second[0].props

def test_008_invalid_node(caplog):
    with caplog.at_level(logging.ERROR, logger = 'tagtree.transform'):
        with pytest.raises(TransformInvariantViolation, match = 'unexpected node in syntax tree: dict'):
            transform({'tag': 'p'})
    assert 'unexpected node' in caplog.text

    with pytest.raises(TransformInvariantViolation):
        transform(ElementNode('p', (), ("raw string instead of TextNode",)))
    with pytest.raises(TypeError):
        transform_all([None])
