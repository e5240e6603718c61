"""
Element model: a tree of element descriptors (virtual DOM) that the renderer serializes to markup.

ElementDescriptor is a plain description of an element: its type, a dict of properties
and a tuple of children, each child being either a descriptor or a raw string.
Descriptors don't know the syntax that produced them; they can be built by the transformer
from a parsed template, or directly by client code with create_element().
"""

from dataclasses import dataclass, field
from types import GeneratorType


########################################################################################################################################################
#####
#####  ELEMENT TYPES
#####

class Fragment:
    """Type of a structural placeholder element that groups children without producing any markup of its own."""
    def __repr__(self): return 'FRAGMENT'

FRAGMENT = Fragment()


########################################################################################################################################################
#####
#####  ELEMENT DESCRIPTOR
#####

@dataclass(frozen = True)
class ElementDescriptor:

    type:     object                                    # tag name (str), or FRAGMENT
    props:    dict  = field(default_factory = dict)     # property name -> value, in the order of attributes in the source
    children: tuple = ()                                # ElementDescriptor's and/or raw strings

    def __iter__(self):
        return iter(self.children)

    def __len__(self):
        return len(self.children)

    def count(self):
        """Total no. of nodes in the subtree rooted at self, including self and text children."""
        return 1 + sum(c.count() if isinstance(c, ElementDescriptor) else 1 for c in self.children)

    def depth(self):
        """Nesting depth of the subtree rooted at self; an element without child elements has depth 1."""
        return 1 + max((c.depth() for c in self.children if isinstance(c, ElementDescriptor)), default = 0)


def flatten(children):
    """Flatten nested lists of children by concatenating them into a top-level tuple; drop None's."""
    result = []
    for c in children:
        if c is None: continue
        if isinstance(c, (list, tuple, GeneratorType)):
            result += flatten(c)
        elif isinstance(c, (ElementDescriptor, str)):
            result.append(c)
        else:
            raise TypeError(f"found {type(c)} instead of an ElementDescriptor or string as a child element")
    return tuple(result)

def create_element(type_, props = None, *children):
    """
    Create an ElementDescriptor of a given type. Children can be passed as separate arguments
    or in (nested) lists; None's are dropped.
    """
    if not (type_ is FRAGMENT or isinstance(type_, str) and type_):
        raise TypeError(f"element type must be a non-empty string or FRAGMENT, not {type_!r}")
    return ElementDescriptor(type_, dict(props or {}), flatten(children))
