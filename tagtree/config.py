"""
Global configuration.
"""

#####################################################################################################################################################
#####
#####  RENDERING
#####

ROOT_TAG = 'div'            # tag of the synthetic root element that wraps a compiled template's top-level nodes

MODES = ('HTML', 'XHTML')   # output modes of the static renderer; they differ in rendering of boolean attributes

# elements that never have content nor a closing tag; a start tag alone is a complete element
HTML_VOID = frozenset("area base br col embed hr img input link meta param source track wbr".split())

# boolean attributes: presence means true; an empty value in a template is rendered as a bare attribute name in HTML mode
HTML_BOOLEAN = frozenset("allowfullscreen async autofocus autoplay checked controls default defer disabled formnovalidate "
                         "hidden inert ismap itemscope loop multiple muted nomodule novalidate open playsinline readonly "
                         "required reversed selected".split())


#####################################################################################################################################################
#####
#####  PARSING
#####

# names of grammar rules that the parser rewrites into syntax nodes; a custom grammar must define all of them
REQUIRED_RULES = ('document', 'content', 'markup', 'element', 'void_element', 'empty_element', 'full_element',
                  'start_tag', 'end_tag', 'attrs', 'attr', 'attr_value', 'text')
