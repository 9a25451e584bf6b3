# -*- coding: utf-8 -*-
"""
indic_transliteration.scheme
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Scheme definitions and the registry that holds them.

A scheme is either "Brahmic" or "roman". Brahmic consonants carry an
inherent vowel; roman consonants do not. That is the main difference
between the two kinds, and the reason they are transliterated by separate
algorithms.

A scheme maps a group name to an ordered list of tokens. These are the
groups understood by :class:`~indic_transliteration.sanscript.SchemeMap`,
with examples from Devanagari:

================  =====================================================
``vowels``        अ आ इ ई उ ऊ ऋ ॠ ऌ ॡ ए ऐ ओ औ
``vowel_marks``   ा ि ी ु ू ृ ॄ ॢ ॣ े ै ो ौ
``other_marks``   the anusvara, visarga and candrabindu (ं ः ँ)
``virama``        a single entry (्)
``consonants``    क ख ग ... ळ क्ष ज्ञ
``symbols``       the digits, ॐ, the avagraha and the dandas
``zwj``           the zero-width joiner
``skip``          a "null" letter
``candra``        a plain candra (ॅ)
``accent``        the udatta and anudatta accents
``other``         non-Sanskrit consonants (क़ ख़ ग़ ...)
================  =====================================================
"""

import logging

logger = logging.getLogger(__name__)

VOWELS = 'vowels'
VOWEL_MARKS = 'vowel_marks'
OTHER_MARKS = 'other_marks'
VIRAMA = 'virama'
CONSONANTS = 'consonants'
SYMBOLS = 'symbols'
ZWJ = 'zwj'
SKIP = 'skip'
CANDRA = 'candra'
ACCENT = 'accent'
OTHER = 'other'

#: Groups whose tokens stand on their own.
LETTER_GROUPS = (VOWELS, OTHER_MARKS, CONSONANTS, SYMBOLS)

#: Groups whose tokens attach to a preceding consonant.
MARK_GROUPS = (VOWEL_MARKS, VIRAMA)

#: Optional groups. They are treated as letters.
EXTENSION_GROUPS = (ZWJ, SKIP, CANDRA, ACCENT, OTHER)

#: Groups whose tokens leave a consonant open for a following vowel.
CONSONANT_GROUPS = (CONSONANTS, OTHER)

#: Every group, in the order a scheme map is filled.
GROUPS = LETTER_GROUPS + MARK_GROUPS + EXTENSION_GROUPS


class SchemeNotFoundError(KeyError):
  """Raised when a scheme name has not been registered."""

  def __init__(self, name):
    super(SchemeNotFoundError, self).__init__(name)
    self.name = name

  def __str__(self):
    return 'Unknown scheme %r' % self.name


class Scheme(dict):
  """Represents all of the data associated with a given scheme. In addition
  to storing whether or not a scheme is roman, :class:`Scheme` partitions
  a scheme's characters into important functional groups.

  :class:`Scheme` is just a subclass of :class:`dict`. A roman scheme that
  does not list its ``vowel_marks`` gets them from ``vowels``, minus the
  inherent vowel. `data` itself is never modified.

  :param data: a :class:`dict` of initial values.
  :param synonym_map: A map from keys appearing in `data` to lists of
                      symbols with equal meaning. For example:
                      M -> ['.n', '.m'] in ITRANS.
  :param is_roman: `True` if the scheme is a romanization and `False`
                   otherwise.
  """

  def __init__(self, data=None, synonym_map=None, is_roman=True):
    super(Scheme, self).__init__(data or {})
    self.synonym_map = dict(synonym_map or {})
    self.is_roman = is_roman
    if is_roman and VOWEL_MARKS not in self and VOWELS in self:
      self[VOWEL_MARKS] = list(self[VOWELS][1:])

  @property
  def inherent_vowel(self):
    """The first entry of ``vowels``, or ``''`` if there is none."""
    vowels = self.get(VOWELS) or ['']
    return vowels[0]

  @property
  def virama_glyph(self):
    virama = self.get(VIRAMA) or ['']
    return virama[0]


class SchemeRegistry(object):
  """A named collection of :class:`Scheme` objects.

  Schemes are registered once, usually at startup, and are only read after
  that. Registration is not synchronized: if schemes are added while other
  threads transliterate, the caller must serialize access.
  """

  def __init__(self):
    self._schemes = {}

  def add_scheme(self, name, scheme):
    """Register `scheme` under `name`, replacing any earlier entry."""
    unknown = sorted(set(scheme) - set(GROUPS))
    if unknown:
      logger.warning('Scheme %r has unrecognized groups %s; they will be '
                     'ignored', name, ', '.join(unknown))
    self._schemes[name] = scheme
    logger.debug('Registered %s scheme %r',
                 'roman' if scheme.is_roman else 'Brahmic', name)
    return scheme

  def add_brahmic_scheme(self, name, data):
    """Add a Brahmic scheme. `data` is stored as given."""
    return self.add_scheme(name, Scheme(data, is_roman=False))

  def add_roman_scheme(self, name, data, synonym_map=None):
    """Add a roman scheme. ``vowel_marks`` may be omitted from `data`."""
    return self.add_scheme(name, Scheme(data, synonym_map=synonym_map,
                                        is_roman=True))

  def is_roman(self, name):
    scheme = self._schemes.get(name)
    return scheme is not None and scheme.is_roman

  def __getitem__(self, name):
    try:
      return self._schemes[name]
    except KeyError:
      raise SchemeNotFoundError(name) from None

  def __contains__(self, name):
    return name in self._schemes

  def __iter__(self):
    return iter(self._schemes)

  def __len__(self):
    return len(self._schemes)

  def get(self, name, default=None):
    return self._schemes.get(name, default)
