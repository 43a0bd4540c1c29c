from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple


class UnsupportedLanguageError(ValueError):
    def __init__(self, language: str) -> None:
        super().__init__(f"Unsupported language: {language}")
        self.language = language


class Language(str, Enum):
    PYTHON = "python"
    JAVASCRIPT = "javascript"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def template(self) -> str:
        return TEMPLATE_REGISTRY[self]


_EXTENSIONS = {
    Language.PYTHON: ".py",
    Language.JAVASCRIPT: ".js",
}

TEMPLATE_REGISTRY: Mapping[Language, str] = MappingProxyType({
    Language.PYTHON: (
        "def {name}({params}):\n"
        "    # Your code here\n"
        "    return"
    ),
    Language.JAVASCRIPT: (
        "function {name}({params}) {{\n"
        "    // Your code here\n"
        "    return;\n"
        "}}"
    ),
})


def supported_languages() -> Tuple[str, ...]:
    return tuple(lang.value for lang in Language)


def parse_language(language: str | Language) -> Language:
    """
    Case-insensitive lookup of a supported language.
    Raises UnsupportedLanguageError for anything outside the fixed set.
    """
    if isinstance(language, Language):
        return language
    try:
        return Language(language.lower())
    except ValueError:
        raise UnsupportedLanguageError(language) from None


def generate(function_name: str, language: str | Language, parameters: Iterable[str]) -> str:
    """
    Render the stub for `function_name` in `language`.
    Parameters are joined with ", " in the order given.
    """
    lang = parse_language(language)
    return lang.template.format(name=function_name, params=", ".join(parameters))
