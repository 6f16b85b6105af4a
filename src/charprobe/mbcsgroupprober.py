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
from .mbcharsetprober import (
    MultiByteCharSetModel,
    MultiByteCharSetProber,
    char_range,
)
from .utf8prober import UTF8Prober

# Hiragana, katakana and the prolonged sound mark make up well over half of
# ordinary Japanese text, and almost none of Chinese or Korean text.
JAPANESE_KANA = char_range(0x3041, 0x3096) | char_range(0x30A1, 0x30FA) | {"ー"}

# Most frequent characters of modern written Chinese.
CHINESE_SIMPLIFIED_FREQUENT = frozenset(
    "的一是不了在人有我他这个们中来上大为和国地到以说时要就出也得里后自会家可下"
    "而过天去能对小多然于心学么之都好看起发当没成只如事把还用第样道想作种开美总从"
    "无情己面最女但现前些所同日手又行意动方期它头经长儿回位分爱老因很给名法间知世"
    "什两次使身者被高已亲其进此话常与活正感见明问力理点文几定本公特做外孩相西果走"
    "将月十实向声车全信重三机工物气每并别真打太新比才便夫再书部水像眼等体却加电主"
    "界门利海受听表少代员许先口由死安写性马光白或住难望教命花结乐色更东神记处让母"
    "父应直字场平报友关放至张认接告入笑内军候民岁往何度山觉路带万男边风解叫任金快"
    "原吃变通师立象数四失满战远格士音轻目条呢"
)

CHINESE_TRADITIONAL_FREQUENT = frozenset(
    "的一是不了在人有我他這個們中來上大為和國地到以說時要就出也得裡後自會家可下"
    "而過天去能對小多然於心學麼之都好看起發當沒成只如事把還用第樣道想作種開美總從"
    "無情己面最女但現前些所同日手又行意動方期它頭經長兒回位分愛老因很給名法間知世"
    "什兩次使身者被高已親其進此話常與活正感見明問力理點文幾定本公特做外孩相西果走"
    "將月十實向聲車全信重三機工物氣每並別真打太新比才便夫再書部水像眼等體卻加電主"
    "界門利海受聽表少代員許先口由死安寫性馬光白或住難望教命花結樂色更東神記處讓母"
    "父應直字場平報友關放至張認接告入笑內軍候民歲往何度山覺路帶萬男邊風解叫任金快"
    "原吃變通師立象數四失滿戰遠格士音輕目條呢"
)

# Most frequent Hangul syllables of modern Korean.
KOREAN_FREQUENT = frozenset(
    "이다의는에을하고가를한지서로기도사들으리자대인수있아시나정해게어적일요것라년"
    "전보부만그주성제상위면비구중무여과와원내되장회소마러거분우문경관께없신니합안"
    "은스트용글생각때계학발동방국민실저세속알모두말음같통오화물반연결미산"
)

SHIFT_JIS_MODEL = MultiByteCharSetModel(
    charset_name="Shift_JIS",
    language="Japanese",
    codec="shift_jis",
    lang_filter=LanguageFilter.JAPANESE,
    frequent_chars=JAPANESE_KANA,
    typical_distribution_ratio=0.8,
)

EUC_JP_MODEL = MultiByteCharSetModel(
    charset_name="EUC-JP",
    language="Japanese",
    codec="euc_jp",
    lang_filter=LanguageFilter.JAPANESE,
    frequent_chars=JAPANESE_KANA,
    typical_distribution_ratio=0.8,
)

GB18030_MODEL = MultiByteCharSetModel(
    charset_name="gb18030",
    language="Chinese",
    codec="gb18030",
    lang_filter=LanguageFilter.CHINESE_SIMPLIFIED,
    frequent_chars=CHINESE_SIMPLIFIED_FREQUENT,
    typical_distribution_ratio=0.5,
)

BIG5_MODEL = MultiByteCharSetModel(
    charset_name="Big5",
    language="Chinese",
    codec="big5",
    lang_filter=LanguageFilter.CHINESE_TRADITIONAL,
    frequent_chars=CHINESE_TRADITIONAL_FREQUENT,
    typical_distribution_ratio=0.5,
)

EUC_KR_MODEL = MultiByteCharSetModel(
    charset_name="EUC-KR",
    language="Korean",
    codec="euc_kr",
    lang_filter=LanguageFilter.KOREAN,
    frequent_chars=KOREAN_FREQUENT,
    typical_distribution_ratio=0.8,
)

MBCS_MODELS = (
    SHIFT_JIS_MODEL,
    EUC_JP_MODEL,
    GB18030_MODEL,
    EUC_KR_MODEL,
    BIG5_MODEL,
)


class MBCSGroupProber(CharSetGroupProber):
    """UTF-8 plus one prober per multi-byte CJK encoding allowed by the filter."""

    def __init__(self, lang_filter: LanguageFilter = LanguageFilter.ALL) -> None:
        super().__init__(lang_filter=lang_filter)
        self.probers = [UTF8Prober()]
        self.probers.extend(
            MultiByteCharSetProber(model)
            for model in MBCS_MODELS
            if self.lang_filter & model.lang_filter
        )
        self.reset()
