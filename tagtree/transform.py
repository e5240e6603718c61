"""
Transformation of a syntax tree (nodes.*) into a tree of element descriptors (document.ElementDescriptor).
The mapping is structure-preserving: every syntax node yields exactly one element or string,
children and attributes keep their order.
"""

import logging

from tagtree.document import ElementDescriptor
from tagtree.errors import TransformInvariantViolation
from tagtree.nodes import TextNode, ElementNode

logger = logging.getLogger(__name__)


########################################################################################################################################################

def fold_attrs(attrs):
    """
    Dict of properties built from a list of (name, value) attribute pairs. If a name occurs more than once,
    the last value wins, while the position of the name is the one of its first occurrence.
    """
    props = {}
    for name, value in attrs:
        props[name] = value
    return props

def transform(node):
    """
    Convert a syntax node to an element descriptor. Text is returned as a raw string, unchanged (no escaping).
    :raises TransformInvariantViolation: if `node` is not a syntax node
    """
    if isinstance(node, TextNode):
        return node.text

    if isinstance(node, ElementNode):
        children = tuple(transform(child) for child in node.children)
        return ElementDescriptor(node.tag, fold_attrs(node.attrs), children)

    logger.error("unexpected node in syntax tree: %r", node)
    raise TransformInvariantViolation(f"unexpected node in syntax tree: {type(node).__name__}")

def transform_all(nodes):
    """Transform a sequence of sibling syntax nodes, return a tuple."""
    return tuple(transform(node) for node in nodes)
