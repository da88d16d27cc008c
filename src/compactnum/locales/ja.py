"""Japanese compact-notation rules.

Japanese has no singular form, and groups by 10^4 rather than 10^3, so the
thousands tier carries no symbol.
"""

from __future__ import annotations

from compactnum.types import FormatRules, Locale

_DECIMAL = FormatRules([
    [1000, {"one": ["", 0], "other": ["0", 1]}],
    [10000, {"one": ["", 0], "other": ["0万", 1]}],
    [100000, {"one": ["", 0], "other": ["00万", 2]}],
    [1000000, {"one": ["", 0], "other": ["000万", 3]}],
    [10000000, {"one": ["", 0], "other": ["0000万", 4]}],
    [100000000, {"one": ["", 0], "other": ["0億", 1]}],
    [1000000000, {"one": ["", 0], "other": ["00億", 2]}],
    [10000000000, {"one": ["", 0], "other": ["000億", 3]}],
    [100000000000, {"one": ["", 0], "other": ["0000億", 4]}],
    [1000000000000, {"one": ["", 0], "other": ["0兆", 1]}],
    [10000000000000, {"one": ["", 0], "other": ["00兆", 2]}],
    [100000000000000, {"one": ["", 0], "other": ["000兆", 3]}],
    [1000000000000000, {"one": ["", 0], "other": ["0000兆", 4]}],
])

ja: dict[str, Locale] = {
    "ja": Locale(locale="ja", short=_DECIMAL, long=_DECIMAL),
}
