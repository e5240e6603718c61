"""
Exceptions for tagtree.
"""

########################################################################################################################################################

def position(text, pos):
    """Convert a 0-based character offset `pos` in `text` to a (line, column) pair, both 1-based."""
    line = text.count('\n', 0, pos) + 1
    column = pos - text.rfind('\n', 0, pos)
    return line, column


class TagtreeError(Exception):
    """
    Base class for all tagtree exceptions. If `source` and `pos` are given, the message is extended
    with line/column coordinates of `pos` and a short excerpt of the source text found there.
    """
    source = None       # full text that was processed when the error occurred: a template or grammar definition
    pos    = None       # 0-based offset in `source` where the error was detected
    line   = None       # 1-based line number of `pos`
    column = None       # 1-based column number of `pos`

    EXCERPT = 20        # max. no. of characters of `source` quoted in the message

    def __init__(self, msg, source = None, pos = None):
        self.source = source
        self.pos = pos
        if source is not None and pos is not None:
            self.line, self.column = position(source, pos)
            msg = self.make_msg(msg)
        super(TagtreeError, self).__init__(msg)

    def make_msg(self, msg):
        excerpt = self.source[self.pos : self.pos + self.EXCERPT]
        if len(self.source) > self.pos + self.EXCERPT: excerpt += '...'
        return msg + " at line %s, column %s (%r)" % (self.line, self.column, excerpt)

########################################################################################################################################################

class GrammarLoadError(TagtreeError):
    """Grammar definition is malformed or incomplete. Fatal, a parser can't be built from it."""

class TemplateSyntaxError(TagtreeError, SyntaxError):
    """Template text doesn't conform to the grammar."""

class TransformInvariantViolation(TagtreeError, TypeError):
    """Syntax tree contains a node of unexpected shape. Indicates an internal error in the parser or grammar."""

class RenderError(TagtreeError, TypeError):
    """Element tree passed to the renderer contains a node or value that can't be serialized."""

class VoidElementError(RenderError):
    """Raised when a void element (like <br>) is given children."""
    def __init__(self, msg = "children must be empty for a void element"):
        super(VoidElementError, self).__init__(msg)
