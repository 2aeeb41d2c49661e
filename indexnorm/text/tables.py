"""Static character tables shared by width and kana conversions.

Responsibilities:
- Hold the index-aligned half-width/full-width katakana correspondence.
- Hold the voiced/semi-voiced composition tables and full-width sign set.
"""

from __future__ import annotations

# Offset between a full-width ASCII variant and its half-width counterpart.
FULL_WIDTH_OFFSET = ord("Ａ") - ord("A")

# Offset between a hiragana character and its katakana counterpart.
HIRAGANA_OFFSET = ord("ァ") - ord("ぁ")
HIRAGANA_FIRST = "ぁ"
HIRAGANA_LAST = "ん"

FULL_WIDTH_SIGNS = frozenset("！＃＄％＆（）＊＋，－．／：；＜＝＞？＠［］＾＿｛｜｝")

# U+2212 sits below the full-width block, so the offset cannot apply to it.
MINUS_SIGN = "−"

HANKAKU_KATAKANA = (
    "｡｢｣､･ｦｧｨｩｪｫｬｭｮｯｰ"
    "ｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉ"
    "ﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝﾞﾟ"
)
ZENKAKU_KATAKANA = (
    "。「」、・ヲァィゥェォャュョッー"
    "アイウエオカキクケコサシスセソタチツテトナニヌネノ"
    "ハヒフヘホマミムメモヤユヨラリルレロワン゛゜"
)

HANKAKU_KATAKANA_FIRST = HANKAKU_KATAKANA[0]
HANKAKU_KATAKANA_LAST = HANKAKU_KATAKANA[-1]

HANKAKU_VOICED_MARK = "ﾞ"
HANKAKU_SEMI_VOICED_MARK = "ﾟ"

VOICED_BASES = "ｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾊﾋﾌﾍﾎｳ"
VOICED_COMPOSED = "ガギグゲゴザジズゼゾダヂヅデドバビブベボヴ"
SEMI_VOICED_BASES = "ﾊﾋﾌﾍﾎ"
SEMI_VOICED_COMPOSED = "パピプペポ"

IDEOGRAPHIC_SPACE = "\u3000"
NO_BREAK_SPACE = "\u00a0"

assert len(HANKAKU_KATAKANA) == len(ZENKAKU_KATAKANA)
assert ord(HANKAKU_KATAKANA_LAST) - ord(HANKAKU_KATAKANA_FIRST) + 1 == len(HANKAKU_KATAKANA)
assert len(VOICED_BASES) == len(VOICED_COMPOSED)
assert len(SEMI_VOICED_BASES) == len(SEMI_VOICED_COMPOSED)
