"""
Template parser: converts template text to a tree of syntax nodes (nodes.TextNode, nodes.ElementNode).

Parsing is done in two steps:
1) Parsimonious matches the text against the grammar and produces a raw parse tree,
   with one node per every matched expression, including anonymous ones;
2) the raw tree is rewritten bottom-up (NodeVisitor) into syntax nodes: tags and attributes are collected,
   character references decoded, comments dropped and adjacent text runs merged.

Semantic checks that the grammar can't express (matching of closing tags, uniqueness of attribute names)
are performed during rewriting.
"""

import logging
from html import unescape

from parsimonious.exceptions import ParseError, IncompleteParseError
from parsimonious.nodes import NodeVisitor

from tagtree.errors import TemplateSyntaxError
from tagtree.grammar import Grammar
from tagtree.nodes import TextNode, ElementNode

logger = logging.getLogger(__name__)


#####################################################################################################################################################
#####
#####  UTILITIES
#####

def join(parts):
    """Concatenate strings from a (possibly nested) list of visited children."""
    return ''.join(part if isinstance(part, str) else join(part) for part in parts)

def siblings(items):
    """Tuple of syntax nodes from `items`, with None's (dropped nodes) removed and neighboring text nodes merged."""
    nodes = []
    for item in items:
        if item is None: continue
        if isinstance(item, TextNode) and nodes and isinstance(nodes[-1], TextNode):
            nodes[-1] = TextNode(nodes[-1].text + item.text, nodes[-1].pos)
        else:
            nodes.append(item)
    return tuple(nodes)


#####################################################################################################################################################
#####
#####  PARSER
#####

class TemplateParser(NodeVisitor):
    """
    Parser of templates. Stateless apart from the grammar, so a single instance can parse any number of templates.
    Rewriting methods visit_*() are called by NodeVisitor with a raw parse node and a list of already rewritten
    children of this node; generic_visit() handles nodes that have no rule-specific method.
    """

    grammar = None                  # Grammar instance used for matching
    unwrapped_exceptions = (TemplateSyntaxError, RecursionError)

    def __init__(self, grammar = None):
        self.grammar = grammar if grammar is not None else Grammar.default
        self.document = self.grammar['document']

    def parse(self, text):
        """
        Parse template `text` and return a tuple of top-level syntax nodes.
        :raises TemplateSyntaxError: if `text` doesn't conform to the grammar; no partial result is returned
        """
        try:
            tree = self.document.parse(text)
            nodes = self.visit(tree) if tree is not None else ()
        except IncompleteParseError as ex:
            raise TemplateSyntaxError(self._unmatched(text, ex.pos), text, ex.pos) from ex
        except ParseError as ex:
            raise TemplateSyntaxError(f"template doesn't match grammar rule '{ex.expr.name}'", text, ex.pos) from ex
        except RecursionError as ex:
            raise TemplateSyntaxError("elements nested too deeply") from ex

        logger.debug("parsed template of %s characters into %s top-level nodes", len(text), len(nodes))
        return nodes

    @staticmethod
    def _unmatched(text, pos):
        """Description of the construct found at `pos` that the grammar failed to match."""
        if text.startswith('</', pos): return "closing tag without a matching opening tag"
        if text.startswith('<!--', pos): return "unterminated comment"
        if text.startswith('<', pos): return "unclosed or malformed tag"
        return "unexpected text"

    def generic_visit(self, node, visited_children):
        return visited_children

    ###  DOCUMENT  ###

    def visit_document(self, node, visited_children):
        return siblings(visited_children)

    visit_content = visit_document

    def visit_markup(self, node, visited_children):
        return visited_children[0]

    def visit_comment(self, node, _):
        return None

    ###  ELEMENTS  ###

    def visit_element(self, node, visited_children):
        return visited_children[0]

    def visit_void_element(self, node, visited_children):
        _, tag, attrs, _, _, _ = visited_children
        return ElementNode(tag, attrs, (), node.start)

    def visit_empty_element(self, node, visited_children):
        _, tag, attrs, _, _ = visited_children
        return ElementNode(tag, attrs, (), node.start)

    def visit_full_element(self, node, visited_children):
        (tag, attrs), children, closing = visited_children
        if closing != tag:
            end_tag = node.children[2]
            raise TemplateSyntaxError(f"closing tag </{closing}> does not match opening tag <{tag}>", node.full_text, end_tag.start)
        return ElementNode(tag, attrs, children, node.start)

    def visit_start_tag(self, node, visited_children):
        _, tag, attrs, _, _ = visited_children
        return tag, attrs

    def visit_end_tag(self, node, visited_children):
        _, tag, _, _ = visited_children
        return tag

    def visit_tag_name(self, node, _):
        return node.text

    visit_void_name = visit_tag_name
    visit_attr_name = visit_tag_name

    ###  ATTRIBUTES  ###

    def visit_attrs(self, node, visited_children):
        seen = set()
        for attr, (name, _) in zip(node.children, visited_children):
            if name in seen:
                name_node = attr.children[1]
                raise TemplateSyntaxError(f"duplicate attribute '{name}'", node.full_text, name_node.start)
            seen.add(name)
        return tuple(visited_children)

    def visit_attr(self, node, visited_children):
        _, name, value = visited_children
        return name, (value[0] if value else '')         # attribute without a value gets an empty string

    def visit_attr_value(self, node, visited_children):
        _, _, _, (value,) = visited_children
        return value

    def visit_value_dq(self, node, visited_children):
        _, parts, _ = visited_children
        return join(parts)

    visit_value_sq = visit_value_dq

    def visit_value_bare(self, node, visited_children):
        return join(visited_children)

    ###  TEXT  ###

    def visit_text(self, node, visited_children):
        return TextNode(join(visited_children), node.start)

    def visit_chars(self, node, _):
        return node.text

    visit_chars_dq   = visit_chars
    visit_chars_sq   = visit_chars
    visit_chars_bare = visit_chars
    visit_amp        = visit_chars

    def visit_charref(self, node, _):
        return unescape(node.text)
