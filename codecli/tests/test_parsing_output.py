import pytest

from codecli.output import output_path_for, write_boilerplate
from codecli.parsing import GenerationRequest, build_request, split_inputs
from codecli.templates import Language, UnsupportedLanguageError

# --- Input Parsing Tests ---

def test_split_inputs_trims_tokens():
    assert split_inputs(" a , b,c ") == ["a", "b", "c"]

def test_split_inputs_blank_means_no_parameters():
    assert split_inputs("") == []
    assert split_inputs("   ") == []

def test_split_inputs_keeps_empty_tokens():
    assert split_inputs("a,,b") == ["a", "", "b"]

def test_build_request():
    request = build_request(" add ", "Python", "a, b")
    assert request == GenerationRequest("add", Language.PYTHON, ("a", "b"))

def test_build_request_rejects_unsupported_language():
    with pytest.raises(UnsupportedLanguageError):
        build_request("add", "ruby", "a")

def test_build_request_rejects_empty_name():
    with pytest.raises(ValueError, match="must not be empty"):
        build_request("  ", "python", "a")

# --- Output Tests ---

def test_output_path_for(tmp_path):
    assert output_path_for(GenerationRequest("add", Language.PYTHON), tmp_path) == tmp_path / "add.py"
    assert output_path_for(GenerationRequest("sum", Language.JAVASCRIPT), tmp_path) == tmp_path / "sum.js"

def test_write_boilerplate_overwrites(tmp_path):
    target = tmp_path / "sum.js"
    target.write_text("old contents", encoding="utf-8")

    path = write_boilerplate(GenerationRequest("sum", Language.JAVASCRIPT, ()), tmp_path)

    assert path == target
    assert target.read_text(encoding="utf-8") == "function sum() {\n    // Your code here\n    return;\n}"

def test_write_boilerplate_propagates_write_errors(tmp_path):
    missing = tmp_path / "does" / "not" / "exist"
    with pytest.raises(FileNotFoundError):
        write_boilerplate(GenerationRequest("add", Language.PYTHON, ("a",)), missing)
