"""
Syntax tree of a template, as produced by the parser.

A node is either a TextNode (raw text fragment) or an ElementNode (tag name, attributes, children).
Nodes are immutable and compare structurally; the source offset `pos` is informative only
and doesn't take part in comparisons.
"""

from dataclasses import dataclass, field


########################################################################################################################################################

@dataclass(frozen = True)
class TextNode:
    """A run of text, with character references already decoded."""

    text: str
    pos:  int = field(default = None, compare = False, repr = False)

    def __str__(self):
        return self.text


@dataclass(frozen = True)
class ElementNode:
    """
    A tagged element. `attrs` is a tuple of (name, value) pairs in the order of their occurrence,
    with unique names; `children` is a tuple of TextNode / ElementNode.
    """

    tag:      str
    attrs:    tuple = ()
    children: tuple = ()
    pos:      int   = field(default = None, compare = False, repr = False)

    def __str__(self):
        return "<%s>" % self.tag


SyntaxNode = (TextNode, ElementNode)        # all syntax node classes, for isinstance() checks


def dump(nodes, indent = ''):
    """Multi-line human-readable representation of a sequence of syntax nodes, for debugging."""
    lines = []
    for node in nodes:
        if isinstance(node, TextNode):
            lines.append(indent + repr(node.text))
        else:
            attrs = ''.join(f' {name}={value!r}' for name, value in node.attrs)
            lines.append(f'{indent}<{node.tag}{attrs}>')
            if node.children:
                lines.append(dump(node.children, indent + '  '))
    return '\n'.join(lines)
