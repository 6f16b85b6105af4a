######################## BEGIN LICENSE BLOCK ########################
# The Original Code is Mozilla Universal charset detector code.
#
# The Initial Developer of the Original Code is
# Netscape Communications Corporation.
# Portions created by the Initial Developer are Copyright (C) 2001
# the Initial Developer. All Rights Reserved.
#
# Contributor(s):
#   Mark Pilgrim - port to Python
#   Shy Shalom - original C code
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see
# <https://www.gnu.org/licenses/>.
######################### END LICENSE BLOCK #########################

from .charsetgroupprober import CharSetGroupProber
from .enums import LanguageFilter
from .sbcharsetprober import SingleByteCharSetModel, SingleByteCharSetProber

# Lowercase letters that together make up well over half of the letters in
# ordinary running text of each language.
RUSSIAN_FREQUENT = frozenset("оеаинтсрвл")
GREEK_FREQUENT = frozenset("αοιετνσηςυ")
HEBREW_FREQUENT = frozenset("יוהלמארבתנ")
ARABIC_FREQUENT = frozenset("اليمونهربت")
THAI_FREQUENT = frozenset("านรอกเงมยลว")

WINDOWS_1251_RUSSIAN_MODEL = SingleByteCharSetModel(
    "windows-1251", "Russian", "cp1251", RUSSIAN_FREQUENT, 0.55
)
KOI8_R_RUSSIAN_MODEL = SingleByteCharSetModel(
    "KOI8-R", "Russian", "koi8_r", RUSSIAN_FREQUENT, 0.55
)
ISO_8859_5_RUSSIAN_MODEL = SingleByteCharSetModel(
    "ISO-8859-5", "Russian", "iso8859_5", RUSSIAN_FREQUENT, 0.55
)
IBM866_RUSSIAN_MODEL = SingleByteCharSetModel(
    "IBM866", "Russian", "cp866", RUSSIAN_FREQUENT, 0.55
)
MACCYRILLIC_RUSSIAN_MODEL = SingleByteCharSetModel(
    "x-mac-cyrillic", "Russian", "mac_cyrillic", RUSSIAN_FREQUENT, 0.55
)
WINDOWS_1253_GREEK_MODEL = SingleByteCharSetModel(
    "windows-1253", "Greek", "cp1253", GREEK_FREQUENT, 0.55
)
ISO_8859_7_GREEK_MODEL = SingleByteCharSetModel(
    "ISO-8859-7", "Greek", "iso8859_7", GREEK_FREQUENT, 0.55
)
WINDOWS_1255_HEBREW_MODEL = SingleByteCharSetModel(
    "windows-1255", "Hebrew", "cp1255", HEBREW_FREQUENT, 0.6
)
ISO_8859_8_HEBREW_MODEL = SingleByteCharSetModel(
    "ISO-8859-8", "Hebrew", "iso8859_8", HEBREW_FREQUENT, 0.6
)
WINDOWS_1256_ARABIC_MODEL = SingleByteCharSetModel(
    "windows-1256", "Arabic", "cp1256", ARABIC_FREQUENT, 0.55
)
TIS_620_THAI_MODEL = SingleByteCharSetModel(
    "TIS-620", "Thai", "tis_620", THAI_FREQUENT, 0.45
)

SBCS_MODELS = (
    WINDOWS_1251_RUSSIAN_MODEL,
    KOI8_R_RUSSIAN_MODEL,
    ISO_8859_5_RUSSIAN_MODEL,
    IBM866_RUSSIAN_MODEL,
    MACCYRILLIC_RUSSIAN_MODEL,
    WINDOWS_1253_GREEK_MODEL,
    ISO_8859_7_GREEK_MODEL,
    WINDOWS_1255_HEBREW_MODEL,
    ISO_8859_8_HEBREW_MODEL,
    WINDOWS_1256_ARABIC_MODEL,
    TIS_620_THAI_MODEL,
)


class SBCSGroupProber(CharSetGroupProber):
    """One prober per single-byte model; empty unless ``NON_CJK`` is allowed."""

    def __init__(self, lang_filter: LanguageFilter = LanguageFilter.ALL) -> None:
        super().__init__(lang_filter=lang_filter)
        if self.lang_filter & LanguageFilter.NON_CJK:
            self.probers = [SingleByteCharSetProber(model) for model in SBCS_MODELS]
        self.reset()
