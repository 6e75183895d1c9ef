"""Tests for palette_extractor.core.env — algorithm resolution from CLI and environment."""

import pytest
from palette_extractor.core.env import ALGORITHM_ENV_VAR, parse_algorithm, resolve_algorithm
from palette_extractor.core.errors import InvalidAlgorithm
from palette_extractor.core.types import Algorithm


class TestParseAlgorithm:
    def test_kmeans(self) -> None:
        assert parse_algorithm('kmeans') is Algorithm.KMEANS

    def test_median_cut_spellings(self) -> None:
        assert parse_algorithm('median-cut') is Algorithm.MEDIAN_CUT
        assert parse_algorithm('MEDIAN_CUT') is Algorithm.MEDIAN_CUT
        assert parse_algorithm(' Median-Cut ') is Algorithm.MEDIAN_CUT

    def test_unknown(self) -> None:
        with pytest.raises(InvalidAlgorithm) as exc_info:
            parse_algorithm('octree')
        assert exc_info.value.value == 'octree'


class TestResolveAlgorithm:
    def test_default_is_kmeans(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ALGORITHM_ENV_VAR, raising=False)
        assert resolve_algorithm() is Algorithm.KMEANS

    def test_env_used_when_no_cli_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ALGORITHM_ENV_VAR, 'median-cut')
        assert resolve_algorithm(None) is Algorithm.MEDIAN_CUT

    def test_cli_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ALGORITHM_ENV_VAR, 'median-cut')
        assert resolve_algorithm('kmeans') is Algorithm.KMEANS

    def test_blank_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ALGORITHM_ENV_VAR, '   ')
        assert resolve_algorithm() is Algorithm.KMEANS

    def test_bad_env_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ALGORITHM_ENV_VAR, 'octree')
        with pytest.raises(InvalidAlgorithm):
            resolve_algorithm()
