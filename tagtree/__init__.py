"""
tagtree: a grammar-driven template parser with static rendering to HTML.

    template text  --(parser.TemplateParser)-->  syntax tree (nodes.*)
                   --(transform.transform)-->    element tree (document.ElementDescriptor)
                   --(render.render)-->          markup string

template.compile() binds the first two steps into a reusable Template.
"""

from tagtree.document import ElementDescriptor, FRAGMENT, create_element
from tagtree.errors import TagtreeError, GrammarLoadError, TemplateSyntaxError, TransformInvariantViolation, RenderError, VoidElementError
from tagtree.grammar import Grammar
from tagtree.nodes import TextNode, ElementNode
from tagtree.parser import TemplateParser
from tagtree.render import Renderer, render
from tagtree.template import Template, Engine, compile
from tagtree.transform import transform, transform_all
