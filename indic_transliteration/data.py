# -*- coding: utf-8 -*-
"""
indic_transliteration.data
~~~~~~~~~~~~~~~~~~~~~~~~~~

Character tables for the schemes that ship with this package. These are
plain data: :mod:`indic_transliteration.sanscript` registers them into
:data:`~indic_transliteration.sanscript.SCHEMES` at import time.

Within a group, entry *i* of one scheme denotes the same sound as entry *i*
of every other scheme, so all groups are written in the same phonetic order.
Brahmic consonants are stated without a virama and roman consonants without
the vowel ``a``. A blank entry marks a sound the script cannot write.
"""

# Brahmic schemes
# ---------------
#: Internal name of Bengali. Bengali ``ba`` and ``va`` are both rendered
#: as `ব`.
BENGALI = 'bengali'

#: Internal name of Devanagari, the most complete of the Brahmic schemes.
DEVANAGARI = 'devanagari'

#: Internal name of Gujarati.
GUJARATI = 'gujarati'

#: Internal name of Gurmukhi. Lacks the vocalic r and l vowels.
GURMUKHI = 'gurmukhi'

#: Internal name of Kannada. Lacks the vocalic l vowels.
KANNADA = 'kannada'

#: Internal name of Malayalam.
MALAYALAM = 'malayalam'

#: Internal name of Oriya. Lacks the vocalic l vowel marks.
ORIYA = 'oriya'

#: Internal name of Tamil. Lacks the vocalic vowels and the voicing and
#: aspiration distinctions, so it is the least complete scheme here.
TAMIL = 'tamil'

#: Internal name of Telugu.
TELUGU = 'telugu'

# Roman schemes
# -------------
#: Internal name of Harvard-Kyoto.
HK = 'hk'

#: Internal name of IAST.
IAST = 'iast'

#: Internal name of ITRANS. ``_`` is a null letter that keeps adjacent
#: vowels apart.
ITRANS = 'itrans'

#: Internal name of the National Library at Kolkata scheme. Identical to
#: IAST apart from ``ē`` and ``ō``.
KOLKATA = 'kolkata'

#: Internal name of SLP1.
SLP1 = 'slp1'

#: Internal name of Velthuis.
VELTHUIS = 'velthuis'


s = str.split


def gap(text):
  """Split `text` on single spaces, keeping blank entries."""
  return text.split(' ')


BRAHMIC_SCHEMES = {
  BENGALI: {
    'vowels': s('অ আ ই ঈ উ ঊ ঋ ৠ ঌ ৡ এ ঐ ও ঔ'),
    'vowel_marks': s('া ি ী ু ূ ৃ ৄ ৢ ৣ ে ৈ ো ৌ'),
    'other_marks': s('ং ঃ ঁ'),
    'virama': ['্'],
    'consonants': s('ক খ গ ঘ ঙ চ ছ জ ঝ ঞ ট ঠ ড ঢ ণ ত থ দ ধ ন প ফ ব ভ ম য র ল ব শ ষ স হ ळ ক্ষ জ্ঞ'),
    'symbols': s('০ ১ ২ ৩ ৪ ৫ ৬ ৭ ৮ ৯ ॐ ঽ । ॥'),
    'other': gap('    ড ঢ  য ')
  },
  DEVANAGARI: {
    'vowels': s('अ आ इ ई उ ऊ ऋ ॠ ऌ ॡ ए ऐ ओ औ'),
    'vowel_marks': s('ा ि ी ु ू ृ ॄ ॢ ॣ े ै ो ौ'),
    'other_marks': s('ं ः ँ'),
    'virama': ['्'],
    'consonants': s('क ख ग घ ङ च छ ज झ ञ ट ठ ड ढ ण त थ द ध न प फ ब भ म य र ल व श ष स ह ळ क्ष ज्ञ'),
    'symbols': s('० १ २ ३ ४ ५ ६ ७ ८ ९ ॐ ऽ । ॥'),
    'zwj': ['\u200D'],
    'skip': [''],
    'accent': ['\u0951', '\u0952'],
    'candra': ['ॅ'],
    'other': s('क़ ख़ ग़ ज़ ड़ ढ़ फ़ य़ ऱ')
  },
  GUJARATI: {
    'vowels': s('અ આ ઇ ઈ ઉ ઊ ઋ ૠ ઌ ૡ એ ઐ ઓ ઔ'),
    'vowel_marks': s('ા િ ી ુ ૂ ૃ ૄ ૢ ૣ ે ૈ ો ૌ'),
    'other_marks': s('ં ઃ ઁ'),
    'virama': ['્'],
    'consonants': s('ક ખ ગ ઘ ઙ ચ છ જ ઝ ઞ ટ ઠ ડ ઢ ણ ત થ દ ધ ન પ ફ બ ભ મ ય ર લ વ શ ષ સ હ ળ ક્ષ જ્ઞ'),
    'symbols': s('૦ ૧ ૨ ૩ ૪ ૫ ૬ ૭ ૮ ૯ ૐ ઽ ૤ ૥'),
    'candra': ['ૅ']
  },
  GURMUKHI: {
    'vowels': gap('ਅ ਆ ਇ ਈ ਉ ਊ     ਏ ਐ ਓ ਔ'),
    'vowel_marks': gap('ਾ ਿ ੀ ੁ ੂ     ੇ ੈ ੋ ੌ'),
    'other_marks': s('ਂ ਃ ਁ'),
    'virama': ['੍'],
    'consonants': s('ਕ ਖ ਗ ਘ ਙ ਚ ਛ ਜ ਝ ਞ ਟ ਠ ਡ ਢ ਣ ਤ ਥ ਦ ਧ ਨ ਪ ਫ ਬ ਭ ਮ ਯ ਰ ਲ ਵ ਸ਼ ਸ਼ ਸ ਹ ਲ਼ ਕ੍ਸ਼ ਜ੍ਞ'),
    'symbols': s('੦ ੧ ੨ ੩ ੪ ੫ ੬ ੭ ੮ ੯ ॐ ऽ । ॥'),
    'other': gap(' ਖ ਗ ਜ ਡ  ਫ  ')
  },
  KANNADA: {
    'vowels': gap('ಅ ಆ ಇ ಈ ಉ ಊ ಋ ೠ   ಏ ಐ ಓ ಔ'),
    'vowel_marks': gap('ಾ ಿ ೀ ು ೂ ೃ ೄ   ೇ ೈ ೋ ೌ'),
    'other_marks': s('ಂ ಃ ँ'),
    'virama': ['್'],
    'consonants': s('ಕ ಖ ಗ ಘ ಙ ಚ ಛ ಜ ಝ ಞ ಟ ಠ ಡ ಢ ಣ ತ ಥ ದ ಧ ನ ಪ ಫ ಬ ಭ ಮ ಯ ರ ಲ ವ ಶ ಷ ಸ ಹ ಳ ಕ್ಷ ಜ್ಞ'),
    'symbols': s('೦ ೧ ೨ ೩ ೪ ೫ ೬ ೭ ೮ ೯ ಓಂ ಽ । ॥'),
    'other': gap('      ಫ  ಱ')
  },
  MALAYALAM: {
    'vowels': s('അ ആ ഇ ഈ ഉ ഊ ഋ ൠ ഌ ൡ ഏ ഐ ഓ ഔ'),
    'vowel_marks': s('ാ ി ീ ു ൂ ൃ ൄ ൢ ൣ േ ൈ ോ ൌ'),
    'other_marks': s('ം ഃ ँ'),
    'virama': ['്'],
    'consonants': s('ക ഖ ഗ ഘ ങ ച ഛ ജ ഝ ഞ ട ഠ ഡ ഢ ണ ത ഥ ദ ധ ന പ ഫ ബ ഭ മ യ ര ല വ ശ ഷ സ ഹ ള ക്ഷ ജ്ഞ'),
    'symbols': s('൦ ൧ ൨ ൩ ൪ ൫ ൬ ൭ ൮ ൯ ഓം ഽ । ॥'),
    'other': gap('        റ')
  },
  ORIYA: {
    'vowels': s('ଅ ଆ ଇ ଈ ଉ ଊ ଋ ୠ ଌ ୡ ଏ ଐ ଓ ଔ'),
    'vowel_marks': gap('ା ି ୀ ୁ ୂ ୃ ୄ   େ ୈ ୋ ୌ'),
    'other_marks': s('ଂ ଃ ଁ'),
    'virama': ['୍'],
    'consonants': s('କ ଖ ଗ ଘ ଙ ଚ ଛ ଜ ଝ ଞ ଟ ଠ ଡ ଢ ଣ ତ ଥ ଦ ଧ ନ ପ ଫ ବ ଭ ମ ଯ ର ଲ ଵ ଶ ଷ ସ ହ ଳ କ୍ଷ ଜ୍ଞ'),
    'symbols': s('୦ ୧ ୨ ୩ ୪ ୫ ୬ ୭ ୮ ୯ ଓଂ ଽ । ॥'),
    'other': gap('    ଡ ଢ  ଯ ')
  },
  TAMIL: {
    'vowels': gap('அ ஆ இ ஈ உ ஊ     ஏ ஐ ஓ ஔ'),
    'vowel_marks': gap('ா ி ீ ு ூ     ே ை ோ ௌ'),
    'other_marks': gap('ஂ ஃ '),
    'virama': ['்'],
    'consonants': s('க க க க ங ச ச ஜ ச ஞ ட ட ட ட ண த த த த ந ப ப ப ப ம ய ர ல வ ஶ ஷ ஸ ஹ ள க்ஷ ஜ்ஞ'),
    'symbols': s('௦ ௧ ௨ ௩ ௪ ௫ ௬ ௭ ௮ ௯ ௐ ऽ । ॥'),
    'other': gap('        ற')
  },
  TELUGU: {
    'vowels': s('అ ఆ ఇ ఈ ఉ ఊ ఋ ౠ ఌ ౡ ఏ ఐ ఓ ఔ'),
    'vowel_marks': s('ా ి ీ ు ూ ృ ౄ ౢ ౣ ే ై ో ౌ'),
    'other_marks': s('ం ః ఁ'),
    'virama': ['్'],
    'consonants': s('క ఖ గ ఘ ఙ చ ఛ జ ఝ ఞ ట ఠ డ ఢ ణ త థ ద ధ న ప ఫ బ భ మ య ర ల వ శ ష స హ ళ క్ష జ్ఞ'),
    'symbols': s('౦ ౧ ౨ ౩ ౪ ౫ ౬ ౭ ౮ ౯ ఓం ఽ । ॥'),
    'other': gap('క ఖ       ఱ')
  },
}


# `vowel_marks` is derived from `vowels` when the schemes are registered.
ROMAN_SCHEMES = {
  IAST: {
    'vowels': s('a ā i ī u ū ṛ ṝ ḷ ḹ e ai o au'),
    'other_marks': ['ṃ', 'ḥ', '~'],
    'virama': [''],
    'consonants': s('k kh g gh ṅ c ch j jh ñ ṭ ṭh ḍ ḍh ṇ t th d dh n p ph b bh m y r l v ś ṣ s h ḻ kṣ jñ'),
    'symbols': s("0 1 2 3 4 5 6 7 8 9 oṃ ' । ॥")
  },
  ITRANS: {
    'vowels': s('a A i I u U RRi RRI LLi LLI e ai o au'),
    'other_marks': ['M', 'H', '.N'],
    'virama': ['.h'],
    'consonants': s('k kh g gh ~N ch Ch j jh ~n T Th D Dh N t th d dh n p ph b bh m y r l v sh Sh s h L kSh j~n'),
    'symbols': s('0 1 2 3 4 5 6 7 8 9 OM .a | ||'),
    'candra': ['.c'],
    'zwj': ['{}'],
    'skip': ['_'],
    'accent': ["\\'", "\\_"],
    'other': s('q K G z .D .Dh f Y R')
  },
  HK: {
    'vowels': s('a A i I u U R RR lR lRR e ai o au'),
    'other_marks': s('M H ~'),
    'virama': [''],
    'consonants': s('k kh g gh G c ch j jh J T Th D Dh N t th d dh n p ph b bh m y r l v z S s h L kS jJ'),
    'symbols': s("0 1 2 3 4 5 6 7 8 9 OM ' | ||")
  },
  KOLKATA: {
    'vowels': s('a ā i ī u ū ṛ ṝ ḷ ḹ ē ai ō au'),
    'other_marks': ['ṃ', 'ḥ', '~'],
    'virama': [''],
    'consonants': s('k kh g gh ṅ c ch j jh ñ ṭ ṭh ḍ ḍh ṇ t th d dh n p ph b bh m y r l v ś ṣ s h ḻ kṣ jñ'),
    'symbols': s("0 1 2 3 4 5 6 7 8 9 oṃ ' । ॥")
  },
  SLP1: {
    'vowels': s('a A i I u U f F x X e E o O'),
    'other_marks': s('M H ~'),
    'virama': [''],
    'consonants': s('k K g G N c C j J Y w W q Q R t T d D n p P b B m y r l v S z s h L kz jY'),
    'symbols': s("0 1 2 3 4 5 6 7 8 9 oM ' . ..")
  },
  VELTHUIS: {
    'vowels': s('a aa i ii u uu .r .rr .li .ll e ai o au'),
    'other_marks': gap('.m .h '),
    'virama': [''],
    'consonants': s('k kh g gh "n c ch j jh ~n .t .th .d .d .n t th d dh n p ph b bh m y r l v ~s .s s h L k.s j~n'),
    'symbols': s("0 1 2 3 4 5 6 7 8 9 o.m ' | ||")
  },
}

#: Alternate spellings accepted on input, keyed by scheme and then by the
#: canonical token they stand in for.
SYNONYM_MAPS = {
  ITRANS: {
    'A': ['aa'],
    'I': ['ii', 'ee'],
    'U': ['uu', 'oo'],
    'RRi': ['R^i'],
    'RRI': ['R^I'],
    'LLi': ['L^i'],
    'LLI': ['L^I'],
    '.h': [''],
    'M': ['.m', '.n'],
    '~N': ['N^'],
    'ch': ['c'],
    'Ch': ['C', 'chh'],
    '~n': ['JN'],
    'v': ['w'],
    'Sh': ['S', 'shh'],
    'kSh': ['kS', 'x'],
    'j~n': ['GY', 'dny'],
    'OM': ['AUM'],
    '.a': ['~'],
    '|': ['.'],
    '||': ['..'],
    'z': ['J'],
  },
}
