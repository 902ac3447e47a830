from __future__ import annotations

import pytest

from orgrepair.config import ConfigurationError, RepairConfig, get_repair_config


def test_get_repair_config_defaults() -> None:
    config = get_repair_config()

    assert config == RepairConfig()
    assert config.export_filename == "sei_developers.csv"
    assert config.csv_delimiter == ","
    assert config.preview_rows == 5
    assert config.max_iterations is None


def test_get_repair_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORGREPAIR_EXPORT_FILENAME", " fixed.csv ")
    monkeypatch.setenv("ORGREPAIR_CSV_DELIMITER", ";")
    monkeypatch.setenv("ORGREPAIR_PREVIEW_ROWS", "0")
    monkeypatch.setenv("ORGREPAIR_MAX_ITERATIONS", "12")

    config = get_repair_config()

    assert config.export_filename == "fixed.csv"
    assert config.csv_delimiter == ";"
    assert config.preview_rows == 0
    assert config.max_iterations == 12


def test_blank_environment_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORGREPAIR_EXPORT_FILENAME", "   ")
    monkeypatch.setenv("ORGREPAIR_MAX_ITERATIONS", "")

    config = get_repair_config()

    assert config.export_filename == "sei_developers.csv"
    assert config.max_iterations is None


@pytest.mark.parametrize("delimiter", ["\t", " ", "|"])
def test_delimiter_is_read_verbatim(monkeypatch: pytest.MonkeyPatch, delimiter: str) -> None:
    monkeypatch.setenv("ORGREPAIR_CSV_DELIMITER", delimiter)

    assert get_repair_config().csv_delimiter == delimiter


def test_export_encoding_is_separate_from_input_encoding(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ORGREPAIR_CSV_ENCODING", "latin-1")

    config = get_repair_config()

    assert config.csv_encoding == "latin-1"
    assert config.export_encoding == "utf-8"

    monkeypatch.setenv("ORGREPAIR_EXPORT_ENCODING", " cp1252 ")

    assert get_repair_config().export_encoding == "cp1252"


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("ORGREPAIR_PREVIEW_ROWS", "many", "must be an integer"),
        ("ORGREPAIR_PREVIEW_ROWS", "-1", "must be >= 0"),
        ("ORGREPAIR_MAX_ITERATIONS", "0", "must be >= 1"),
        ("ORGREPAIR_CSV_DELIMITER", ";;", "single character"),
        ("ORGREPAIR_CSV_DELIMITER", "\t\t", "single character"),
    ],
)
def test_invalid_environment_values_raise(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str, message: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError, match=message):
        get_repair_config()
