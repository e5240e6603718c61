"""
Grammar of tagtree templates: a subset of HTML markup with literal (non-scripted) content.

SYNTAX

Template is a sequence of sibling nodes, each one being either an element or a run of text:

    <div class="a"><span>hi</span> there</div>

Elements:
 <tag attrs...>...</tag>    full element with content; the closing tag must repeat the tag name exactly (case-sensitive)
 <tag attrs.../>            self-closing element, no content; a space before /> is allowed
 <br attrs...>              HTML void element (area base br col embed hr img input link meta param source track wbr),
                            complete without a closing tag; trailing slash is optional: <br/>

Attributes:
 name="value"   name='value'   name=value   name
    - an attribute without a value gets an empty string as its value
    - whitespace is allowed around "="
    - names must be unique within a tag

Text:
 - any characters except "<"; whitespace is significant and preserved, also between elements
 - character references: &amp; &lt; &#60; &#x3C; ... are decoded, in text and in attribute values;
   a lone "&" is taken literally; "<" must be written as &lt;

Comments:
 <!-- ... -->               recognized and dropped from the syntax tree, not rendered

The grammar is written in the notation of Parsimonious (PEG with regular expressions as terminals).
Rule names listed in config.REQUIRED_RULES are referenced by the parser and must be present
in any custom grammar supplied in place of the default one.
"""

import logging, re

from parsimonious.grammar import Grammar as Parsimonious
from parsimonious.exceptions import ParseError, BadGrammar, VisitationError

from tagtree.config import HTML_VOID, REQUIRED_RULES
from tagtree.errors import GrammarLoadError

logger = logging.getLogger(__name__)


#####################################################################################################################################################
#####
#####  GRAMMAR RULES
#####

NAME_StartChar = r"[A-Za-z]"
NAME_Char      = r"[A-Za-z0-9:._-]"

VERSION = "1.0"

grammar = r"""

###  DOCUMENT

document        =  markup*
content         =  markup*
markup          =  comment / element / text

###  ELEMENTS

element         =  void_element / empty_element / full_element

void_element    =  "<" void_name attrs ws? "/"? ">"
empty_element   =  "<" tag_name attrs ws? "/>"
full_element    =  start_tag content end_tag

start_tag       =  "<" tag_name attrs ws? ">"
end_tag         =  "</" tag_name ws? ">"

tag_name        =  ~r"%(NAME_StartChar)s%(NAME_Char)s*"
void_name       =  ~r"(%(VOID_names)s)(?!%(NAME_Char)s)"

###  ATTRIBUTES

attrs           =  attr*
attr            =  ws attr_name attr_value?
attr_name       =  ~r"[^\s\"'<>/=&]+"
attr_value      =  ws? "=" ws? (value_dq / value_sq / value_bare)

value_dq        =  '"' (chars_dq / charref / amp)* '"'
value_sq        =  "'" (chars_sq / charref / amp)* "'"
value_bare      =  (chars_bare / charref / amp)+

chars_dq        =  ~r"[^\"&]+"
chars_sq        =  ~r"[^'&]+"
chars_bare      =  ~r"[^\s\"'=<>`&]+"

###  TEXT & COMMENTS

text            =  (chars / charref / amp)+
chars           =  ~r"[^<&]+"
charref         =  ~r"&(#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);"
amp             =  "&"

comment         =  ~r"<!--.*?-->"s

###  WHITESPACE

ws              =  ~r"\s+"

"""

grammar = grammar % {
    'NAME_StartChar':   NAME_StartChar,
    'NAME_Char':        NAME_Char,
    'VOID_names':       '|'.join(sorted(HTML_VOID)),
}


#####################################################################################################################################################
#####
#####  GRAMMAR
#####

class Grammar(Parsimonious):
    """
    Parsimonious grammar of templates. Once created, an instance is treated as immutable
    and can be shared by any number of parsers.
    """

    default = None      # class-level default instance built from the bundled `grammar` rules
    version = None      # optional version label of the rules, for the client's reference

    def __init__(self, rules = grammar, version = None):
        """
        :param rules: text of grammar rules in Parsimonious notation
        :param version: optional label to tell different grammars apart
        :raises GrammarLoadError: if `rules` are malformed or don't define all of REQUIRED_RULES
        """
        try:
            super(Grammar, self).__init__(rules)
        except ParseError as ex:
            raise GrammarLoadError(f"malformed grammar rule ({ex.expr.name or 'rules'})", rules, ex.pos) from ex
        except (BadGrammar, VisitationError, re.error) as ex:
            raise GrammarLoadError(f"invalid grammar: {ex}") from ex

        missing = [name for name in REQUIRED_RULES if name not in self]
        if missing: raise GrammarLoadError(f"grammar does not define required rule(s): {', '.join(missing)}")

        self.version = version
        logger.debug("grammar %s loaded, %s rules", version or '(unversioned)', len(self))

    @classmethod
    def from_file(cls, path, encoding = 'utf-8', version = None):
        """Load grammar rules from a text file at `path`."""
        with open(path, encoding = encoding) as f:
            rules = f.read()
        return cls(rules, version = version)


Grammar.default = Grammar(grammar, version = VERSION)
