"""
Compilation of templates.

A template is parsed once, when compiled, and can be rendered any number of times afterwards:

    >>> template = compile('<div class="a"><span>hi</span> there</div>')
    >>> template.render()
    '<div><div class="a"><span>hi</span> there</div></div>'

Calling a compiled template returns an element tree (document.ElementDescriptor) whose root is a synthetic
container element, `root` (a <div> by default), that wraps all top-level nodes of the template.
The wrapper can be omitted by passing root=FRAGMENT.

Known limitation: the `context` argument of a render call is accepted, but not used; templates contain
literal markup only and render to the same tree regardless of the context.
"""

import logging

from tagtree.config import ROOT_TAG
from tagtree.document import ElementDescriptor, FRAGMENT
from tagtree.nodes import dump
from tagtree.parser import TemplateParser
from tagtree.render import Renderer
from tagtree.transform import transform_all

logger = logging.getLogger(__name__)


#####################################################################################################################################################
#####
#####  TEMPLATE
#####

class Template:
    """
    Compiled template: a syntax tree parsed once from template text, bound to a render operation.
    Calls are independent of each other and produce a fresh element tree every time.
    """

    text   = None       # source text of the template
    nodes  = None       # top-level syntax nodes of the template, as returned by the parser
    root   = None       # type of the synthetic root element: a tag name or FRAGMENT

    def __init__(self, text, parser = None, root = ROOT_TAG, mode = 'HTML', verbose = False):
        """
        :param text: template text; parsed eagerly, so syntax errors are raised from here, not from rendering
        :param parser: TemplateParser instance to be used; a new one with the default grammar if None
        :param root: type of the root element that wraps the template's top-level nodes; FRAGMENT to omit the wrapper
        :param mode: rendering mode for render(), 'HTML' or 'XHTML'
        :param verbose: if True, the syntax tree is logged (DEBUG level) after parsing
        """
        if not (root is FRAGMENT or isinstance(root, str) and root):
            raise TypeError(f"root element type must be a non-empty string or FRAGMENT, not {root!r}")

        self.text = text
        self.root = root
        self.renderer = Renderer(mode)

        parser = parser or TemplateParser()
        self.nodes = parser.parse(text)

        if verbose: logger.debug("syntax tree of the template:\n%s", dump(self.nodes))

    def __call__(self, context = None):
        """
        Transform the syntax tree into a new tree of element descriptors, wrapped up in a root element.
        :param context: reserved for future use; ignored
        """
        return ElementDescriptor(self.root, {}, transform_all(self.nodes))

    def render(self, context = None):
        """Render the template to a markup string."""
        return self.renderer.render(self(context))


#####################################################################################################################################################
#####
#####  ENGINE
#####

class Engine:
    """
    Compiles templates with a given grammar and configuration.
    All templates compiled by one engine share its parser, which is stateless.
    """

    config_default = {
        'root':         ROOT_TAG,       # type of the synthetic root element, or FRAGMENT
        'mode':         'HTML',         # (X)HTML mode of rendering, see render.Renderer
        'verbose':      False,          # if True, syntax trees of compiled templates are logged at DEBUG level
    }
    config = None
    parser = None

    def __init__(self, grammar = None, parser = None, **config):
        """
        :param grammar: Grammar instance; Grammar.default if None; ignored when `parser` is given
        :param parser: TemplateParser instance, for a custom parser or a test double
        :param config: overrides of config_default
        """
        unknown = set(config) - set(self.config_default)
        if unknown: raise TypeError(f"unknown configuration option(s): {', '.join(sorted(unknown))}")

        self.config = self.config_default.copy()
        self.config.update(**config)
        self.parser = parser or TemplateParser(grammar)

    def compile(self, text):
        logger.debug("compiling template of %s characters", len(text))
        return Template(text, self.parser, **self.config)

    def render(self, text, context = None):
        return self.compile(text).render(context)


def compile(text, **config):
    """Compile `text` into a Template with the default grammar; `config` as in Engine.config_default."""
    return Engine(**config).compile(text)


########################################################################################################################################################
#####
#####  MAIN
#####

if __name__ == '__main__':

    logging.basicConfig(level = logging.DEBUG)

    text = """<div class="a"><span>hi</span> there</div>
<ul id=menu>
    <li><a href='/home' title="Home &amp; away">Home</a></li>
    <li><input type="checkbox" checked> <b>A &lt; B</b></li>
</ul>
<!-- not rendered -->"""

    template = compile(text, verbose = True)
    print(template.render())
