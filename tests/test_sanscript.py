# -*- coding: utf-8 -*-
import pytest

from indic_transliteration import sanscript
from indic_transliteration.sanscript import (
  DEVANAGARI, HK, IAST, ITRANS, SLP1, TAMIL, TELUGU, VELTHUIS, Transliterator,
  _preprocess_itrans)
from indic_transliteration.scheme import SchemeNotFoundError, SchemeRegistry


def test_roman_to_devanagari():
  assert sanscript.transliterate('namaste', IAST, DEVANAGARI) == 'नमस्ते'


def test_devanagari_to_roman():
  assert sanscript.transliterate('नमस्ते', DEVANAGARI, IAST) == 'namaste'


def test_hk_cluster():
  assert sanscript.transliterate('dharma', HK, DEVANAGARI) == 'धर्म'


def test_trailing_consonant_gets_virama():
  assert sanscript.transliterate('k', IAST, DEVANAGARI, virama=True) == 'क्'
  assert sanscript.transliterate('k', IAST, DEVANAGARI) == 'क्'


def test_trailing_consonant_without_virama():
  assert sanscript.transliterate('k', IAST, DEVANAGARI, virama=False) == 'क'


@pytest.mark.parametrize('brahmic', [DEVANAGARI, TELUGU])
@pytest.mark.parametrize('roman, text', [
  (IAST, 'namaste'),
  (IAST, 'rāmaḥ'),
  (IAST, 'saṃskṛtam'),
  (IAST, 'dharmakṣetre kurukṣetre'),
  (HK, 'dharmakSetre kurukSetre'),
  (SLP1, 'rAmaH saMskftam'),
  (VELTHUIS, 'raama.h sa.msk.rtam'),
  (ITRANS, 'rAmaH guNaiH'),
])
def test_round_trip(roman, text, brahmic):
  output = sanscript.transliterate(text, roman, brahmic)
  assert output != text
  assert sanscript.transliterate(output, brahmic, roman) == text


def test_vowel_after_consonant_becomes_mark():
  assert sanscript.transliterate('saṃskṛtam', IAST, DEVANAGARI) == 'संस्कृतम्'


def test_consecutive_brahmic_consonants_carry_inherent_vowel():
  assert sanscript.transliterate('कख', DEVANAGARI, IAST) == 'kakha'


def test_unmapped_characters_pass_through():
  assert sanscript.transliterate('rāma!', IAST, DEVANAGARI) == 'राम!'
  assert sanscript.transliterate('राम 42', DEVANAGARI, IAST) == 'rāma 42'


def test_unmapped_character_closes_consonant():
  assert sanscript.transliterate('k!', IAST, DEVANAGARI) == 'क्!'


def test_roman_toggle_copies_region():
  assert sanscript.transliterate('##namaste##', IAST, DEVANAGARI) == 'namaste'
  assert sanscript.transliterate('##kṣa##', IAST, HK) == 'kṣa'


def test_roman_toggle_closes_pending_consonant():
  assert sanscript.transliterate('k##x##', IAST, DEVANAGARI) == 'क्x'


def test_roman_toggle_keeps_consonant_open():
  assert sanscript.transliterate('k####a', IAST, DEVANAGARI) == 'क'
  assert sanscript.transliterate('k##', IAST, DEVANAGARI) == 'क्'
  assert sanscript.transliterate('k##', IAST, DEVANAGARI,
                                 virama=False) == 'क'


def test_brahmic_toggle_copies_region():
  assert sanscript.transliterate('##राम##', DEVANAGARI, IAST) == 'राम'
  assert sanscript.transliterate('राम ##राम##', DEVANAGARI, IAST) == 'rāma राम'


def test_brahmic_toggle_closes_roman_consonant():
  assert sanscript.transliterate('क##ख##', DEVANAGARI, IAST) == 'kaख'


def test_single_hash_is_literal():
  assert sanscript.transliterate('क#ख', DEVANAGARI, IAST) == 'ka#kha'
  assert sanscript.transliterate('क#', DEVANAGARI, IAST) == 'ka#'
  assert sanscript.transliterate('##क##ख#', DEVANAGARI, IAST) == 'कkha#'


def test_brahmic_to_brahmic():
  assert sanscript.transliterate('नमस्ते', DEVANAGARI, TELUGU) == 'నమస్తే'


def test_roman_to_roman():
  assert sanscript.transliterate('kRSNa', HK, IAST) == 'kṛṣṇa'
  assert sanscript.transliterate('kṛṣṇa', IAST, ITRANS) == 'kRRiShNa'


def test_roman_to_roman_never_appends_virama():
  assert sanscript.transliterate('k', IAST, ITRANS) == 'k'


def test_brahmic_virama_to_itrans():
  assert sanscript.transliterate('क्', DEVANAGARI, ITRANS) == 'k.h'


def test_itrans_alternate_spellings():
  assert sanscript.transliterate('raama', ITRANS, DEVANAGARI) == 'राम'
  assert sanscript.transliterate('rAma', ITRANS, DEVANAGARI) == 'राम'
  assert sanscript.transliterate('xa', ITRANS, DEVANAGARI) == 'क्ष'


def test_itrans_backslash_escapes_character():
  assert sanscript.transliterate('a\\kb', ITRANS, DEVANAGARI) == 'अkब्'


def test_itrans_preprocessing():
  assert _preprocess_itrans('{\\m+}') == '.h.N'
  assert _preprocess_itrans('\\k') == '##k##'
  assert _preprocess_itrans('\\') == '####'
  assert _preprocess_itrans("\\'") == "\\'"
  assert _preprocess_itrans('\\_') == '\\_'


def test_missing_destination_group_passes_through():
  # IAST has no candra.
  assert sanscript.transliterate('ॅ', DEVANAGARI, IAST) == 'ॅ'


def test_blank_destination_entry_drops_token():
  # Tamil cannot write vocalic r.
  assert sanscript.transliterate('ऋ', DEVANAGARI, TAMIL) == ''


def test_unknown_scheme():
  with pytest.raises(SchemeNotFoundError):
    sanscript.transliterate('namaste', IAST, 'klingon')
  with pytest.raises(KeyError):
    sanscript.transliterate('namaste', 'klingon', IAST)


def test_unknown_option():
  with pytest.raises(TypeError, match='suspend'):
    sanscript.transliterate('namaste', IAST, DEVANAGARI, suspend=True)


def _toy_registry():
  registry = SchemeRegistry()
  registry.add_roman_scheme('toy', {
    'vowels': ['a', 'i'],
    'virama': [''],
    'consonants': ['k', 't'],
  })
  registry.add_brahmic_scheme('glyphs', {
    'vowels': ['V', 'W'],
    'vowel_marks': ['w'],
    'virama': ['_'],
    'consonants': ['K', 'T'],
  })
  return registry


def test_transliterator_uses_own_registry():
  transliterator = Transliterator(_toy_registry())
  assert transliterator.transliterate('kit', 'toy', 'glyphs') == 'KwT_'
  assert transliterator.transliterate('KwT_', 'glyphs', 'toy') == 'kit'
  assert transliterator.transliterate('KT', 'glyphs', 'toy') == 'kata'
  with pytest.raises(SchemeNotFoundError):
    transliterator.transliterate('kit', IAST, 'glyphs')


def test_module_function_accepts_registry():
  registry = _toy_registry()
  assert sanscript.transliterate('ka', 'toy', 'glyphs', registry=registry) == 'K'
  assert 'toy' not in sanscript.SCHEMES
