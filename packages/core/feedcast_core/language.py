"""
RSS language codes.

The set of language identifiers allowed in an RSS 2.0 ``<language>`` element.
JSON Feed reuses the codes for its RFC 5646 ``language`` field.
"""

from enum import Enum


class RssLanguage(Enum):
    """Language allowed in an RSS channel, as (display name, code)."""

    LANG_AFRIKAANS = ("Afrikaans", "af")
    LANG_ALBANIAN = ("Albanian", "sq")
    LANG_BASQUE = ("Basque", "eu")
    LANG_BELARUSIAN = ("Belarusian", "be")
    LANG_BULGARIAN = ("Bulgarian", "bg")
    LANG_CATALAN = ("Catalan", "ca")
    LANG_CHINESE_SIMPLIFIED = ("Chinese (Simplified)", "zh-cn")
    LANG_CHINESE_TRADITIONAL = ("Chinese (Traditional)", "zh-tw")
    LANG_CROATIAN = ("Croatian", "hr")
    LANG_CZECH = ("Czech", "cs")
    LANG_DANISH = ("Danish", "da")
    LANG_DUTCH = ("Dutch", "nl")
    LANG_DUTCH_BELGIUM = ("Dutch (Belgium)", "nl-be")
    LANG_DUTCH_NETHERLANDS = ("Dutch (Netherlands)", "nl-nl")
    LANG_ENGLISH = ("English", "en")
    LANG_ENGLISH_AUSTRALIA = ("English (Australia)", "en-au")
    LANG_ENGLISH_BELIZE = ("English (Belize)", "en-bz")
    LANG_ENGLISH_CANADA = ("English (Canada)", "en-ca")
    LANG_ENGLISH_IRELAND = ("English (Ireland)", "en-ie")
    LANG_ENGLISH_JAMAICA = ("English (Jamaica)", "en-jm")
    LANG_ENGLISH_NEW_ZEALAND = ("English (New Zealand)", "en-nz")
    LANG_ENGLISH_PHILIPPINES = ("English (Philippines)", "en-ph")
    LANG_ENGLISH_SOUTH_AFRICA = ("English (South Africa)", "en-za")
    LANG_ENGLISH_TRINIDAD = ("English (Trinidad)", "en-tt")
    LANG_ENGLISH_UNITED_KINGDOM = ("English (United Kingdom)", "en-gb")
    LANG_ENGLISH_UNITED_STATES = ("English (United States)", "en-us")
    LANG_ENGLISH_ZIMBABWE = ("English (Zimbabwe)", "en-zw")
    LANG_ESTONIAN = ("Estonian", "et")
    LANG_FAEROESE = ("Faeroese", "fo")
    LANG_FINNISH = ("Finnish", "fi")
    LANG_FRENCH = ("French", "fr")
    LANG_FRENCH_BELGIUM = ("French (Belgium)", "fr-be")
    LANG_FRENCH_CANADA = ("French (Canada)", "fr-ca")
    LANG_FRENCH_FRANCE = ("French (France)", "fr-fr")
    LANG_FRENCH_LUXEMBOURG = ("French (Luxembourg)", "fr-lu")
    LANG_FRENCH_MONACO = ("French (Monaco)", "fr-mc")
    LANG_FRENCH_SWITZERLAND = ("French (Switzerland)", "fr-ch")
    LANG_GALICIAN = ("Galician", "gl")
    LANG_GAELIC = ("Gaelic", "gd")
    LANG_GERMAN = ("German", "de")
    LANG_GERMAN_AUSTRIA = ("German (Austria)", "de-at")
    LANG_GERMAN_GERMANY = ("German (Germany)", "de-de")
    LANG_GERMAN_LIECHTENSTEIN = ("German (Liechtenstein)", "de-li")
    LANG_GERMAN_LUXEMBOURG = ("German (Luxembourg)", "de-lu")
    LANG_GERMAN_SWITZERLAND = ("German (Switzerland)", "de-ch")
    LANG_GREEK = ("Greek", "el")
    LANG_HAWAIIAN = ("Hawaiian", "haw")
    LANG_HUNGARIAN = ("Hungarian", "hu")
    LANG_ICELANDIC = ("Icelandic", "is")
    LANG_INDONESIAN = ("Indonesian", "in")
    LANG_IRISH = ("Irish", "ga")
    LANG_ITALIAN = ("Italian", "it")
    LANG_ITALIAN_ITALY = ("Italian (Italy)", "it-it")
    LANG_ITALIAN_SWITZERLAND = ("Italian (Switzerland)", "it-ch")
    LANG_JAPANESE = ("Japanese", "ja")
    LANG_KOREAN = ("Korean", "ko")
    LANG_MACEDONIAN = ("Macedonian", "mk")
    LANG_NORWEGIAN = ("Norwegian", "no")
    LANG_POLISH = ("Polish", "pl")
    LANG_PORTUGUESE = ("Portuguese", "pt")
    LANG_PORTUGUESE_BRAZIL = ("Portuguese (Brazil)", "pt-br")
    LANG_PORTUGUESE_PORTUGAL = ("Portuguese (Portugal)", "pt-pt")
    LANG_ROMANIAN = ("Romanian", "ro")
    LANG_ROMANIAN_MOLDOVA = ("Romanian (Moldova)", "ro-mo")
    LANG_ROMANIAN_ROMANIA = ("Romanian (Romania)", "ro-ro")
    LANG_RUSSIAN = ("Russian", "ru")
    LANG_RUSSIAN_MOLDOVA = ("Russian (Moldova)", "ru-mo")
    LANG_RUSSIAN_RUSSIA = ("Russian (Russia)", "ru-ru")
    LANG_SERBIAN = ("Serbian", "sr")
    LANG_SLOVAK = ("Slovak", "sk")
    LANG_SLOVENIAN = ("Slovenian", "sl")
    LANG_SPANISH = ("Spanish", "es")
    LANG_SPANISH_ARGENTINA = ("Spanish (Argentina)", "es-ar")
    LANG_SPANISH_BOLIVIA = ("Spanish (Bolivia)", "es-bo")
    LANG_SPANISH_CHILE = ("Spanish (Chile)", "es-cl")
    LANG_SPANISH_COLOMBIA = ("Spanish (Colombia)", "es-co")
    LANG_SPANISH_COSTA_RICA = ("Spanish (Costa Rica)", "es-cr")
    LANG_SPANISH_DOMINICAN_REPUBLIC = ("Spanish (Dominican Republic)", "es-do")
    LANG_SPANISH_ECUADOR = ("Spanish (Ecuador)", "es-ec")
    LANG_SPANISH_EL_SALVADOR = ("Spanish (El Salvador)", "es-sv")
    LANG_SPANISH_GUATEMALA = ("Spanish (Guatemala)", "es-gt")
    LANG_SPANISH_HONDURAS = ("Spanish (Honduras)", "es-hn")
    LANG_SPANISH_MEXICO = ("Spanish (Mexico)", "es-mx")
    LANG_SPANISH_NICARAGUA = ("Spanish (Nicaragua)", "es-ni")
    LANG_SPANISH_PANAMA = ("Spanish (Panama)", "es-pa")
    LANG_SPANISH_PARAGUAY = ("Spanish (Paraguay)", "es-py")
    LANG_SPANISH_PERU = ("Spanish (Peru)", "es-pe")
    LANG_SPANISH_PUERTO_RICO = ("Spanish (Puerto Rico)", "es-pr")
    LANG_SPANISH_SPAIN = ("Spanish (Spain)", "es-es")
    LANG_SPANISH_URUGUAY = ("Spanish (Uruguay)", "es-uy")
    LANG_SPANISH_VENEZUELA = ("Spanish (Venezuela)", "es-ve")
    LANG_SWEDISH = ("Swedish", "sv")
    LANG_SWEDISH_FINLAND = ("Swedish (Finland)", "sv-fi")
    LANG_SWEDISH_SWEDEN = ("Swedish (Sweden)", "sv-se")
    LANG_TURKISH = ("Turkish", "tr")
    LANG_UKRAINIAN = ("Ukrainian", "uk")

    def __init__(self, language_name: str, language_code: str):
        self.language_name = language_name
        self.language_code = language_code

    @classmethod
    def of(cls, language_code: str) -> "RssLanguage | None":
        """Find the language for a code, or None if the code is unknown."""
        for language in cls:
            if language.language_code == language_code:
                return language
        return None

    def to_dict(self) -> dict[str, str]:
        return {"name": self.language_name, "code": self.language_code}
