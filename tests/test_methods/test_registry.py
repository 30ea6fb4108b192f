"""Tests for the ranking method registry."""

import pytest

from judging import engine  # noqa: F401
from judging.methods import (
    DEFAULT_METHOD,
    UnknownMethodError,
    get_all_ranking_methods,
    get_ranking_method,
)
from judging.methods.general import GeneralMethod
from judging.methods.spearman import SpearmanMethod


class TestRegistry:
    def test_default_is_spearman(self):
        assert DEFAULT_METHOD == "spearman"
        assert isinstance(get_ranking_method(), SpearmanMethod)

    def test_lookup_by_key(self):
        assert isinstance(get_ranking_method("spearman"), SpearmanMethod)
        assert isinstance(get_ranking_method("general"), GeneralMethod)

    def test_instance_passes_through(self):
        method = GeneralMethod()
        assert get_ranking_method(method) is method

    def test_unknown_key(self):
        with pytest.raises(UnknownMethodError, match="available: general, spearman"):
            get_ranking_method("borda")

    def test_unknown_method_is_value_error(self):
        with pytest.raises(ValueError):
            get_ranking_method("")

    def test_all_methods(self):
        keys = {m.key for m in get_all_ranking_methods()}
        assert keys == {"spearman", "general"}

    def test_every_method_has_description(self):
        for method in get_all_ranking_methods():
            assert method.description
