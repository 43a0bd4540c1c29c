from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import regex

from .templates import Language, parse_language

_INPUT_SEPARATOR = regex.compile(r"\s*,\s*")


@dataclass(frozen=True)
class GenerationRequest:
    function_name: str
    language: Language
    parameters: Tuple[str, ...] = ()


def split_inputs(text: str) -> List[str]:
    """
    Split a comma-separated --inputs value into trimmed parameter names.
    A blank value means no parameters; empty tokens between commas are kept.
    """
    stripped = text.strip()
    if not stripped:
        return []
    return _INPUT_SEPARATOR.split(stripped)


def build_request(name: str, language: str, inputs: str) -> GenerationRequest:
    function_name = name.strip()
    if not function_name:
        raise ValueError("Function name must not be empty.")
    return GenerationRequest(
        function_name=function_name,
        language=parse_language(language),
        parameters=tuple(split_inputs(inputs)),
    )
