"""
Static rendering of an element tree (document.ElementDescriptor) to a markup string.
"""

import re
from xml.sax.saxutils import escape, quoteattr

from tagtree.config import HTML_VOID, HTML_BOOLEAN, MODES
from tagtree.document import ElementDescriptor, FRAGMENT
from tagtree.errors import RenderError, VoidElementError


########################################################################################################################################################
#####
#####  RENDERER
#####

class Renderer:
    """
    Serializes element descriptors to (X)HTML markup. The output is a pure function of the input tree:
    structurally equal trees produce identical strings.
    Text is escaped, attribute values are escaped and quoted. FRAGMENT elements produce their children only.
    """

    mode = 'HTML'       # (X)HTML compatibility mode: either 'HTML' or 'XHTML'; affects rendering of boolean attributes

    re_attr_name = re.compile(r'[^\s"\'<>/=]+')

    def __init__(self, mode = 'HTML'):
        if mode not in MODES: raise ValueError(f"unknown rendering mode '{mode}', expected one of: {', '.join(MODES)}")
        self.mode = mode

    def render(self, element):
        if isinstance(element, str):
            return escape(element)
        if not isinstance(element, ElementDescriptor):
            raise RenderError(f"found {type(element)} instead of an ElementDescriptor or string in element tree")

        name = element.type
        if name is FRAGMENT:
            return self._render_children(element)
        if not isinstance(name, str) or not name:
            raise RenderError(f"incorrect element type: {name!r}")

        # render attributes
        attrs = filter(None, map(self._render_attr, element.props.items()))
        tag = ' '.join([name] + list(attrs))

        # render output
        if name in HTML_VOID:
            if element.children: raise VoidElementError(f"children must be empty for a void element <{name}>")
            return f"<{tag} />"
        else:
            return f"<{tag}>" + self._render_children(element) + f"</{name}>"

    def _render_children(self, element):
        return ''.join(self.render(child) for child in element.children)

    def _render_attr(self, name_value):

        name, value = name_value
        if not isinstance(name, str) or not self.re_attr_name.fullmatch(name):
            raise RenderError(f"incorrect attribute name: {name!r}")

        if value is True or (value == '' and name in HTML_BOOLEAN):
            if self.mode == 'HTML':         # name=True  -- converted to:  name (HTML)  or  name="name" (XHTML)
                return name
            else:
                return f'{name}="{name}"'
        if value is False or value is None: # removed from attr list
            return None

        return f'{name}={quoteattr(str(value))}'


def render(root, mode = 'HTML'):
    """Render element tree rooted at `root` to a markup string."""
    return Renderer(mode).render(root)
