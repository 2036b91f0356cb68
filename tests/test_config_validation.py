import argparse

import pytest

from passgen.config import (
    Capitalization,
    OutputMode,
    PassphraseConfig,
    Settings,
    build_config,
    get_settings,
    validate_config,
)
from passgen.errors import InvalidConfiguration


def make_args(**overrides) -> argparse.Namespace:
    values = {
        "length": None,
        "separator": None,
        "case": None,
        "salt_length": None,
        "salt_chars": None,
        "wordlist": None,
        "wait": None,
        "terminal": False,
        "info": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def test_defaults():
    config = build_config(make_args(), Settings())

    assert config == PassphraseConfig()
    assert config.length == 7
    assert config.separator == " "
    assert config.case == Capitalization.FIRST
    assert config.salt_length == 0
    assert config.output == OutputMode.CLIPBOARD
    assert config.wait == 10.0


def test_validate_config_accepts_valid_values():
    validate_config(PassphraseConfig(length=1, salt_length=2, salt_chars="ab", wait=0))


@pytest.mark.parametrize(
    "overrides,field",
    [
        ({"length": 0}, "length"),
        ({"salt_length": -1}, "salt length"),
        ({"salt_length": 1, "salt_chars": ""}, "salt characters"),
        ({"salt_length": 1, "salt_chars": "aab"}, "must not repeat"),
        ({"wait": -1}, "wait"),
        ({"wait": float("nan")}, "wait"),
        ({"wait": float("inf")}, "wait"),
        ({"wait": 1e300}, "wait must be <="),
    ],
)
def test_validate_config_rejects_invalid_values(overrides, field):
    with pytest.raises(InvalidConfiguration) as exc:
        validate_config(PassphraseConfig(**overrides))

    assert field in str(exc.value)


def test_validate_config_reports_all_errors():
    with pytest.raises(InvalidConfiguration) as exc:
        validate_config(PassphraseConfig(length=0, wait=-5))

    assert "length" in str(exc.value)
    assert "wait" in str(exc.value)


def test_repeated_salt_chars_allowed_without_salt():
    validate_config(PassphraseConfig(salt_length=0, salt_chars="aa"))


def test_environment_supplies_defaults(monkeypatch):
    monkeypatch.setenv("PASSGEN_LENGTH", "4")
    monkeypatch.setenv("PASSGEN_SEPARATOR", "_")
    monkeypatch.setenv("PASSGEN_CASE", "upper")
    monkeypatch.setenv("PASSGEN_WAIT", "3")

    config = build_config(make_args(), get_settings())

    assert config.length == 4
    assert config.separator == "_"
    assert config.case == Capitalization.UPPER
    assert config.wait == 3.0


def test_cli_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("PASSGEN_LENGTH", "4")

    config = build_config(make_args(length=9, case="none"), get_settings())

    assert config.length == 9
    assert config.case == Capitalization.NONE


def test_output_mode_selection():
    assert build_config(make_args(terminal=True), Settings()).output == OutputMode.TERMINAL
    assert build_config(make_args(info=True), Settings()).output == OutputMode.INFO


def test_build_config_validates():
    with pytest.raises(InvalidConfiguration):
        build_config(make_args(length=0), Settings())


@pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
def test_non_finite_wait_from_environment_rejected(monkeypatch, value):
    monkeypatch.setenv("PASSGEN_WAIT", value)

    with pytest.raises(InvalidConfiguration) as exc:
        build_config(make_args(), get_settings())

    assert "wait" in str(exc.value)
