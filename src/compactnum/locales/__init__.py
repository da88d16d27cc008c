"""Bundled locale data.

Each module exposes a bundle named after its locale, ready for
``store.register()``. Only ``en`` is registered by default.

Example:
    from compactnum import store
    from compactnum.locales import de, es

    store.register([de, es])
"""

from compactnum.locales.de import de
from compactnum.locales.en import en
from compactnum.locales.es import es
from compactnum.locales.fr import fr
from compactnum.locales.ja import ja
from compactnum.locales.zh import zh

ALL_LOCALES = [en, de, es, fr, ja, zh]

__all__ = [
    "ALL_LOCALES",
    "de",
    "en",
    "es",
    "fr",
    "ja",
    "zh",
]
