from label_commands.core.errors import (
    CommandLoadError,
    CommandValidationError,
    CommandWriteError,
)


def test_error_str_with_location():
    e = CommandValidationError(code="E_REQUIRED_FIELD", message="bad", file="a.json", path="[0].name")
    assert str(e) == "a.json:[0].name: E_REQUIRED_FIELD: bad"


def test_error_str_without_location():
    e = CommandWriteError(code="E_FILE_WRITE", message="nope")
    assert str(e) == "<commands>: E_FILE_WRITE: nope"


def test_error_to_item_source_follows_class():
    assert CommandLoadError(code="E_JSON_PARSE", message="x").to_item()["source"] == "load"
    assert CommandWriteError(code="E_FILE_WRITE", message="x").to_item()["source"] == "write"
    item = CommandValidationError(code="E_INVALID_TYPE", message="x", file="f", path="[1]").to_item()
    assert item == {
        "code": "E_INVALID_TYPE",
        "message": "x",
        "file": "f",
        "path": "[1]",
        "severity": "error",
        "source": "validate",
    }
