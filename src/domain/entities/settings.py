"""Settings domain entities."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Theme(StrEnum):
    """UI colour theme."""

    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True, slots=True)
class Language:
    """A language the translator supports."""

    code: str
    name: str
    flag: str


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("en", "English", "🇺🇸"),
    Language("es", "Spanish", "🇪🇸"),
    Language("fr", "French", "🇫🇷"),
    Language("de", "German", "🇩🇪"),
    Language("it", "Italian", "🇮🇹"),
    Language("pt", "Portuguese", "🇵🇹"),
    Language("ru", "Russian", "🇷🇺"),
    Language("zh", "Chinese", "🇨🇳"),
    Language("ja", "Japanese", "🇯🇵"),
    Language("ko", "Korean", "🇰🇷"),
    Language("ar", "Arabic", "🇸🇦"),
    Language("hi", "Hindi", "🇮🇳"),
    Language("uz", "Uzbek", "🇺🇿"),
    Language("kk", "Kazakh", "🇰🇿"),
    Language("tr", "Turkish", "🇹🇷"),
    Language("pl", "Polish", "🇵🇱"),
    Language("nl", "Dutch", "🇳🇱"),
    Language("sv", "Swedish", "🇸🇪"),
    Language("no", "Norwegian", "🇳🇴"),
    Language("da", "Danish", "🇩🇰"),
    Language("fi", "Finnish", "🇫🇮"),
    Language("el", "Greek", "🇬🇷"),
    Language("he", "Hebrew", "🇮🇱"),
    Language("th", "Thai", "🇹🇭"),
    Language("vi", "Vietnamese", "🇻🇳"),
    Language("id", "Indonesian", "🇮🇩"),
    Language("ms", "Malay", "🇲🇾"),
    Language("uk", "Ukrainian", "🇺🇦"),
    Language("cs", "Czech", "🇨🇿"),
    Language("ro", "Romanian", "🇷🇴"),
)

LANGUAGES_BY_CODE: dict[str, Language] = {lang.code: lang for lang in SUPPORTED_LANGUAGES}


@dataclass(frozen=True)
class SettingsRecord:
    """User preferences. Always fully populated."""

    theme: Theme = Theme.DARK
    language: str = "en"
    target_language: str = "es"
    notifications: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the persisted (camelCase) field names."""
        return {
            "theme": Theme(self.theme).value,
            "language": self.language,
            "targetLanguage": self.target_language,
            "notifications": self.notifications,
        }


DEFAULT_SETTINGS = SettingsRecord()

# Persisted name -> attribute name
SETTINGS_FIELD_ALIASES: dict[str, str] = {
    "theme": "theme",
    "language": "language",
    "targetLanguage": "target_language",
    "notifications": "notifications",
}
