# -*- coding: utf-8 -*-
import pytest
import yaml

from indic_transliteration.sanscript import Transliterator
from indic_transliteration.scheme import SchemeRegistry
from indic_transliteration.scheme_files import (
  SchemeFileError, load_scheme_file, read_scheme_file)

TOY_ROMAN = """\
name: toy
kind: roman
groups:
  vowels: a i
  virama: ['']
  consonants: [k, t]
synonyms:
  i: [ee]
"""

TOY_BRAHMIC = """\
name: glyphs
kind: brahmic
groups:
  vowels: V W
  vowel_marks: [w]
  virama: [_]
  consonants: K T
"""


def _write(tmp_path, filename, text):
  path = tmp_path / filename
  path.write_text(text, encoding='utf-8')
  return path


def test_read_roman_scheme(tmp_path):
  name, scheme = read_scheme_file(_write(tmp_path, 'toy.yaml', TOY_ROMAN))
  assert name == 'toy'
  assert scheme.is_roman
  assert scheme['vowels'] == ['a', 'i']
  assert scheme['vowel_marks'] == ['i']
  assert scheme['virama'] == ['']
  assert scheme.synonym_map == {'i': ['ee']}


def test_null_entries_become_blank(tmp_path):
  path = _write(tmp_path, 'gaps.yaml', """\
name: gaps
kind: brahmic
groups:
  vowels: [V, null, W]
""")
  _, scheme = read_scheme_file(path)
  assert scheme['vowels'] == ['V', '', 'W']
  assert not scheme.is_roman


def test_loaded_schemes_transliterate(tmp_path):
  registry = SchemeRegistry()
  assert load_scheme_file(_write(tmp_path, 'toy.yaml', TOY_ROMAN),
                          registry) == 'toy'
  assert load_scheme_file(_write(tmp_path, 'glyphs.yaml', TOY_BRAHMIC),
                          registry) == 'glyphs'
  transliterator = Transliterator(registry)
  assert transliterator.transliterate('keet', 'toy', 'glyphs') == 'KwT_'
  assert transliterator.transliterate('KwT_', 'glyphs', 'toy') == 'kit'


@pytest.mark.parametrize('text', [
  '- not\n- a mapping\n',
  'kind: roman\ngroups:\n  vowels: a\n',
  'name: x\nkind: cyrillic\ngroups:\n  vowels: a\n',
  'name: x\nkind: roman\n',
  'name: x\nkind: roman\ngroups:\n  vowels: 3\n',
  'name: x\nkind: brahmic\ngroups:\n  vowels: V\nsynonyms:\n  V: [v]\n',
])
def test_invalid_scheme_files(tmp_path, text):
  with pytest.raises(SchemeFileError):
    read_scheme_file(_write(tmp_path, 'bad.yaml', text))


def test_scheme_file_error_is_value_error():
  assert issubclass(SchemeFileError, ValueError)


def test_yaml_syntax_errors_propagate(tmp_path):
  with pytest.raises(yaml.YAMLError):
    read_scheme_file(_write(tmp_path, 'broken.yaml', 'name: [unclosed\n'))
