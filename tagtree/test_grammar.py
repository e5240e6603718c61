import pytest

from tagtree.config import REQUIRED_RULES
from tagtree.errors import GrammarLoadError
from tagtree.grammar import Grammar, grammar, VERSION
from tagtree.parser import TemplateParser


def test_001_default():
    assert isinstance(Grammar.default, Grammar)
    assert Grammar.default.version == VERSION
    assert all(name in Grammar.default for name in REQUIRED_RULES)

def test_002_malformed():
    with pytest.raises(GrammarLoadError, match = 'malformed grammar rule') as ex_info:
        Grammar("document = (markup*\nmarkup = 'x'")
    assert ex_info.value.line is not None

    with pytest.raises(GrammarLoadError, match = 'invalid grammar'):
        Grammar(grammar + "\nbroken = undefined_rule\n")

    with pytest.raises(GrammarLoadError):
        Grammar(grammar.replace('~r"[^<&]+"', '~r"[^<&+"'))          # invalid regular expression

def test_003_missing_rules():
    with pytest.raises(GrammarLoadError, match = 'required rule'):
        Grammar('document = "x"')

    with pytest.raises(GrammarLoadError, match = 'required rule.*: void_element, empty_element'):
        Grammar(grammar.replace('void_element', 'void_elem').replace('empty_element', 'empty_elem'))

def test_004_from_file(tmp_path):
    path = tmp_path / 'grammar.txt'
    path.write_text(grammar, encoding = 'utf-8')
    gram = Grammar.from_file(path, version = 'file')
    assert gram.version == 'file'
    assert TemplateParser(gram).parse("<p>x</p>")[0].tag == 'p'

    path.write_text('document = ', encoding = 'utf-8')
    with pytest.raises(GrammarLoadError):
        Grammar.from_file(path)
