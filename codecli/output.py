from __future__ import annotations

from pathlib import Path

from .parsing import GenerationRequest
from .templates import generate


def output_path_for(request: GenerationRequest, output_dir: Path) -> Path:
    return output_dir / f"{request.function_name}{request.language.extension}"


def write_boilerplate(request: GenerationRequest, output_dir: Path) -> Path:
    """
    Generate the stub for `request` and write it under `output_dir`.
    An existing file at the target path is overwritten.
    """
    code = generate(request.function_name, request.language, request.parameters)
    path = output_path_for(request, output_dir)
    path.write_text(code, encoding="utf-8")
    return path
