# -*- coding: utf-8 -*-
"""
indic_transliteration.sanscript
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Transliteration functions for Sanskrit. The most important function is
:func:`transliterate`, which is very easy to use::

    output = transliterate(data, IAST, DEVANAGARI)

By default, the module supports the following scripts:

- Bengali_
- Devanagari_
- Gujarati_
- Gurmukhi_
- Kannada_
- Malayalam_
- Oriya_
- Tamil_
- Telugu_

and the following romanizations:

- Harvard-Kyoto_
- IAST_ (also known as Roman Unicode)
- ITRANS
- Kolkata
- SLP1
- Velthuis

Each of these **schemes** is registered in :data:`SCHEMES`, a
:class:`~indic_transliteration.scheme.SchemeRegistry` keyed by name::

    devanagari_scheme = SCHEMES[DEVANAGARI]

Callers that need their own set of schemes can build a separate registry
and pass it to :class:`Transliterator` or :func:`transliterate`.

Text between a pair of ``##`` markers is copied through unchanged. In a
Brahmic source the marker is spelled ``#`` ``#``.

:license: MIT and BSD

.. _Bengali: http://en.wikipedia.org/wiki/Bengali_alphabet
.. _Devanagari: http://en.wikipedia.org/wiki/Devanagari
.. _Gujarati: http://en.wikipedia.org/wiki/Gujarati_alphabet
.. _Gurmukhi: http://en.wikipedia.org/wiki/Gurmukhi
.. _Kannada: http://en.wikipedia.org/wiki/Kannada_alphabet
.. _Malayalam: http://en.wikipedia.org/wiki/Malayalam_alphabet
.. _Oriya: http://en.wikipedia.org/wiki/Odia_alphabet
.. _Tamil: http://en.wikipedia.org/wiki/Tamil_script
.. _Telugu: http://en.wikipedia.org/wiki/Telugu_alphabet

.. _Harvard-Kyoto: http://en.wikipedia.org/wiki/Harvard-Kyoto
.. _IAST: http://en.wikipedia.org/wiki/IAST
"""

import logging
import re

from indic_transliteration.data import (
  BENGALI, DEVANAGARI, GUJARATI, GURMUKHI, KANNADA, MALAYALAM, ORIYA, TAMIL,
  TELUGU, HK, IAST, ITRANS, KOLKATA, SLP1, VELTHUIS,
  BRAHMIC_SCHEMES, ROMAN_SCHEMES, SYNONYM_MAPS)
from indic_transliteration.scheme import (
  CONSONANT_GROUPS, GROUPS, MARK_GROUPS, Scheme, SchemeNotFoundError,
  SchemeRegistry)

logger = logging.getLogger(__name__)

#: Options accepted by :func:`transliterate`, and their defaults.
#:
#: - ``virama``: close a trailing bare consonant with a virama when the
#:   source is roman.
DEFAULT_OPTIONS = {
  'virama': True,
}

#: Switches transliteration off and on again in roman input.
TOGGLE_MARKER = '##'

#: Half of the toggle marker. Brahmic input is read one character at a time.
BRAHMIC_TOGGLE = '#'

#: The longest token any roman scheme uses.
MAX_TOKEN_LENGTH = 3

SCHEMES = SchemeRegistry()


class SchemeMap(object):
  """Maps one :class:`Scheme` to another. This class grabs the metadata and
  character data required for :func:`transliterate`.

  Tokens are paired by position within each group the two schemes share.
  A group the destination lacks is skipped, so its tokens pass through
  untouched.

  :param from_scheme: the source scheme
  :param to_scheme: the destination scheme
  """

  def __init__(self, from_scheme, to_scheme):
    """Create a mapping from `from_scheme` to `to_scheme`."""
    self.letters = {}
    self.marks = {}
    self.consonants = set()
    self.virama = to_scheme.virama_glyph
    self.from_roman = from_scheme.is_roman
    self.to_roman = to_scheme.is_roman
    self.from_inherent_vowel = from_scheme.inherent_vowel
    self.to_inherent_vowel = to_scheme.inherent_vowel

    synonym_map = from_scheme.synonym_map
    for group in GROUPS:
      if group not in from_scheme or group not in to_scheme:
        continue
      sub_map = self.marks if group in MARK_GROUPS else self.letters
      for (k, v) in zip(from_scheme[group], to_scheme[group]):
        for key in [k] + list(synonym_map.get(k, ())):
          sub_map[key] = v
          if group in CONSONANT_GROUPS:
            self.consonants.add(key)


# Roman tokenizer states.
SCANNING = 'scanning'
CONSONANT_PENDING = 'consonant_pending'
TOGGLE_DISABLED = 'toggle_disabled'
CONSONANT_DISABLED = 'consonant_disabled'

#: States in which the last token was a consonant still waiting for a vowel.
_PENDING_STATES = (CONSONANT_PENDING, CONSONANT_DISABLED)

#: States in which transliteration is switched off.
_DISABLED_STATES = (TOGGLE_DISABLED, CONSONANT_DISABLED)

# Roman tokenizer events.
TOGGLE = 'toggle'
CONSONANT = 'consonant'
LETTER = 'letter'
UNMATCHED = 'unmatched'

_ROMAN_TRANSITIONS = {
  (SCANNING, TOGGLE): TOGGLE_DISABLED,
  (SCANNING, CONSONANT): CONSONANT_PENDING,
  (SCANNING, LETTER): SCANNING,
  (SCANNING, UNMATCHED): SCANNING,
  (CONSONANT_PENDING, TOGGLE): CONSONANT_DISABLED,
  (CONSONANT_PENDING, CONSONANT): CONSONANT_PENDING,
  (CONSONANT_PENDING, LETTER): SCANNING,
  (CONSONANT_PENDING, UNMATCHED): SCANNING,
  (TOGGLE_DISABLED, TOGGLE): SCANNING,
  (TOGGLE_DISABLED, UNMATCHED): TOGGLE_DISABLED,
  (CONSONANT_DISABLED, TOGGLE): CONSONANT_PENDING,
  (CONSONANT_DISABLED, UNMATCHED): TOGGLE_DISABLED,
}


def _next_token(data, i, letters, consonants, enabled):
  """Find the longest token starting at ``data[i]``.

  :return: a ``(token, event)`` pair. An unmatched token is always a single
           character.
  """
  for length in range(MAX_TOKEN_LENGTH, 0, -1):
    token = data[i:i + length]
    if len(token) < length:
      continue
    if token == TOGGLE_MARKER:
      return token, TOGGLE
    if enabled and token in letters:
      return token, CONSONANT if token in consonants else LETTER
  return data[i], UNMATCHED


def _roman(data, scheme_map, virama=True):
  """Transliterate `data` with the given `scheme_map`. This function is used
  when the source scheme is a Roman scheme.

  :param data: the data to transliterate
  :param scheme_map: a :class:`SchemeMap` from a roman scheme
  :param virama: if `True`, end a trailing bare consonant with a virama
  """
  letters = scheme_map.letters
  marks = scheme_map.marks
  to_roman = scheme_map.to_roman
  # Roman output spells every vowel out, so a consonant never stays open.
  consonants = () if to_roman else scheme_map.consonants

  buf = []
  append = buf.append
  state = SCANNING
  i = 0

  while i < len(data):
    token, event = _next_token(data, i, letters, consonants,
                               state not in _DISABLED_STATES)
    pending = state in _PENDING_STATES

    if event == TOGGLE:
      # The marker itself is dropped. An open consonant stays open.
      pass
    elif event == UNMATCHED:
      # Due to the implicit 'a', we must explicitly end any lingering
      # consonant before copying the character.
      if pending:
        append(scheme_map.virama)
      append(token)
    elif to_roman or not pending:
      append(letters[token])
    elif marks.get(token):
      # CV: the vowel becomes a dependent vowel mark.
      append(marks[token])
    elif token != scheme_map.from_inherent_vowel:
      append(scheme_map.virama)
      append(letters[token])

    state = _ROMAN_TRANSITIONS[(state, event)]
    i += len(token)

  if state in _PENDING_STATES and virama:
    append(scheme_map.virama)
  return ''.join(buf)


def _brahmic(data, scheme_map, virama=True):
  """Transliterate `data` with the given `scheme_map`. This function is used
  when the source scheme is a Brahmic scheme.

  Two consonants in a row, with no mark between them, carry the inherent
  vowel. When the destination is roman, that vowel is written out.

  :param data: the data to transliterate
  :param scheme_map: a :class:`SchemeMap` from a Brahmic scheme
  :param virama: unused; Brahmic input spells out its own viramas
  """
  marks = scheme_map.marks
  letters = scheme_map.letters
  consonants = scheme_map.consonants
  to_roman = scheme_map.to_roman
  inherent_vowel = scheme_map.to_inherent_vowel

  buf = []
  append = buf.append
  had_roman_consonant = False
  dangling_hash = False
  toggled = False

  for L in data:
    if L == BRAHMIC_TOGGLE:
      if had_roman_consonant:
        append(inherent_vowel)
        had_roman_consonant = False
      if dangling_hash:
        toggled = not toggled
      dangling_hash = not dangling_hash
      continue

    if dangling_hash:
      append(BRAHMIC_TOGGLE)
      dangling_hash = False

    if toggled:
      append(L)
    elif L in marks:
      append(marks[L])
      had_roman_consonant = False
    else:
      if had_roman_consonant:
        append(inherent_vowel)
      if L in letters:
        append(letters[L])
        had_roman_consonant = to_roman and L in consonants
      else:
        append(L)
        had_roman_consonant = False

  if dangling_hash:
    append(BRAHMIC_TOGGLE)
  if had_roman_consonant:
    append(inherent_vowel)
  return ''.join(buf)


_ITRANS_CANDRABINDU = re.compile(r'\{\\m\+\}')
_ITRANS_ESCAPE = re.compile(r"\\([^'_]|$)")


def _preprocess_itrans(data):
  """Rewrite ITRANS escapes. ``\\x`` copies ``x`` through literally."""
  data = _ITRANS_CANDRABINDU.sub('.h.N', data)
  return _ITRANS_ESCAPE.sub(TOGGLE_MARKER + r'\1' + TOGGLE_MARKER, data)


#: Input rewrites, keyed by source scheme name.
INPUT_PREPROCESSORS = {
  ITRANS: _preprocess_itrans,
}


class Transliterator(object):
  """Transliterates between the schemes of one registry.

  :param registry: the :class:`~indic_transliteration.scheme.SchemeRegistry`
                   to read schemes from. Defaults to an empty registry.
  """

  def __init__(self, registry=None):
    self.registry = SchemeRegistry() if registry is None else registry

  def scheme_map(self, _from, _to):
    """Build a :class:`SchemeMap` from `_from` to `_to`.

    :raises SchemeNotFoundError: if either name is not registered
    """
    return SchemeMap(self.registry[_from], self.registry[_to])

  def transliterate(self, data, _from, _to, **kw):
    """Transliterate `data` from the scheme `_from` to the scheme `_to`.

    A new :class:`SchemeMap` is built on every call. Characters that the
    map does not cover are copied through unchanged.

    :param data: the data to transliterate
    :param _from: the name of a source scheme
    :param _to: the name of a destination scheme
    :param kw: options overriding :data:`DEFAULT_OPTIONS`
    """
    for key in kw:
      if key not in DEFAULT_OPTIONS:
        raise TypeError('Unexpected keyword argument %s' % key)
    options = dict(DEFAULT_OPTIONS)
    options.update(kw)

    scheme_map = self.scheme_map(_from, _to)
    preprocess = INPUT_PREPROCESSORS.get(_from)
    if preprocess is not None:
      data = preprocess(data)

    func = _roman if scheme_map.from_roman else _brahmic
    return func(data, scheme_map, **options)


def transliterate(data, _from=None, _to=None, registry=None, **kw):
  """Transliterate `data` with the given parameters::

      output = transliterate('idam adbhutam', HK, DEVANAGARI)

  :param data: the data to transliterate
  :param _from: the name of a source scheme
  :param _to: the name of a destination scheme
  :param registry: the registry to read schemes from. Defaults to
                   :data:`SCHEMES`.
  :param kw: options overriding :data:`DEFAULT_OPTIONS`
  """
  transliterator = Transliterator(SCHEMES if registry is None else registry)
  return transliterator.transliterate(data, _from, _to, **kw)


def _setup():
  """Add the default schemes."""
  for name, data in BRAHMIC_SCHEMES.items():
    SCHEMES.add_brahmic_scheme(name, data)
  for name, data in ROMAN_SCHEMES.items():
    SCHEMES.add_roman_scheme(name, data, synonym_map=SYNONYM_MAPS.get(name))


_setup()
