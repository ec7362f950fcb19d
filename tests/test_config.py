"""Tests for bk config module."""

import pytest

from bk.config import get_description_width, get_env_var
from bk.config.constants import DESCRIPTION_WIDTH
from bk.config.settings import validate_env_var


class TestDescriptionWidth:

    def test_default(self):
        assert get_description_width() == DESCRIPTION_WIDTH

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("BK_DESCRIPTION_WIDTH", "40")
        assert get_description_width() == 40

    def test_surrounding_whitespace_ignored(self, monkeypatch):
        monkeypatch.setenv("BK_DESCRIPTION_WIDTH", " 72 ")
        assert get_description_width() == 72

    @pytest.mark.parametrize("value", ["wide", "", "19", "201", "-5", "4.5"])
    def test_invalid_values_fall_back(self, monkeypatch, value):
        monkeypatch.setenv("BK_DESCRIPTION_WIDTH", value)
        assert get_description_width() == DESCRIPTION_WIDTH

    def test_invalid_value_logs_warning(self, monkeypatch, caplog):
        monkeypatch.setenv("BK_DESCRIPTION_WIDTH", "wide")
        with caplog.at_level("WARNING", logger="bk.config.settings"):
            get_description_width()
        assert "BK_DESCRIPTION_WIDTH" in caplog.text


class TestEnvVars:

    def test_unknown_variable_is_valid(self):
        assert validate_env_var("BK_SOMETHING_ELSE", "x") == (True, None)

    def test_unset_is_valid(self):
        assert validate_env_var("BK_DESCRIPTION_WIDTH", None) == (True, None)

    def test_range_bounds(self):
        assert validate_env_var("BK_DESCRIPTION_WIDTH", "20")[0]
        assert validate_env_var("BK_DESCRIPTION_WIDTH", "200")[0]
        assert not validate_env_var("BK_DESCRIPTION_WIDTH", "201")[0]

    def test_get_env_var_default(self):
        assert get_env_var("BK_DESCRIPTION_WIDTH") == str(DESCRIPTION_WIDTH)

    def test_get_env_var_raises_on_invalid(self, monkeypatch):
        monkeypatch.setenv("BK_DESCRIPTION_WIDTH", "0")
        with pytest.raises(ValueError, match="Valid range"):
            get_env_var("BK_DESCRIPTION_WIDTH")

    def test_get_env_var_without_validation(self, monkeypatch):
        monkeypatch.setenv("BK_DESCRIPTION_WIDTH", "0")
        assert get_env_var("BK_DESCRIPTION_WIDTH", validate=False) == "0"
