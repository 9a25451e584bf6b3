# -*- coding: utf-8 -*-
"""
indic_transliteration.scheme_files
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Load scheme definitions from YAML files. A file describes one scheme::

    name: my_hk
    kind: roman
    groups:
      vowels: a A i I u U R RR lR lRR e ai o au
      consonants: [k, kh, g, gh, G]
    synonyms:
      A: [aa]

A group is either a whitespace-separated string or a list. In a list, an
empty entry (``''`` or ``null``) marks a sound the script cannot write.
``synonyms`` is optional.
"""

import logging

import yaml

from indic_transliteration.scheme import Scheme

logger = logging.getLogger(__name__)

BRAHMIC = 'brahmic'
ROMAN = 'roman'


class SchemeFileError(ValueError):
  """Raised when a scheme file is well-formed YAML but not a valid scheme."""


def _tokens(value, path, group):
  if isinstance(value, str):
    return value.split()
  if isinstance(value, list):
    return ['' if v is None else str(v) for v in value]
  raise SchemeFileError('%s: group %r must be a string or a list, not %s'
                        % (path, group, type(value).__name__))


def read_scheme_file(path):
  """Read the scheme in `path`.

  :return: a ``(name, scheme)`` pair
  :raises SchemeFileError: if the document does not describe a scheme
  """
  with open(path, encoding='utf-8') as f:
    doc = yaml.safe_load(f)

  if not isinstance(doc, dict):
    raise SchemeFileError('%s: expected a mapping at the top level' % path)
  name = doc.get('name')
  if not name:
    raise SchemeFileError('%s: missing scheme name' % path)
  kind = doc.get('kind')
  if kind not in (BRAHMIC, ROMAN):
    raise SchemeFileError('%s: kind must be %r or %r, not %r'
                          % (path, BRAHMIC, ROMAN, kind))
  groups = doc.get('groups')
  if not isinstance(groups, dict):
    raise SchemeFileError('%s: missing groups' % path)

  data = dict((group, _tokens(value, path, group))
              for (group, value) in groups.items())
  synonym_map = dict((str(k), _tokens(v, path, 'synonyms'))
                     for (k, v) in (doc.get('synonyms') or {}).items())
  if synonym_map and kind == BRAHMIC:
    raise SchemeFileError('%s: only roman schemes may define synonyms' % path)

  return name, Scheme(data, synonym_map=synonym_map, is_roman=kind == ROMAN)


def load_scheme_file(path, registry):
  """Read the scheme in `path` and add it to `registry`.

  :return: the name of the scheme
  """
  name, scheme = read_scheme_file(path)
  registry.add_scheme(name, scheme)
  logger.debug('Loaded scheme %r from %s', name, path)
  return name
