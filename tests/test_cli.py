"""End-to-end tests: run palette_extractor.__main__.main() against small images on disk."""

import json
from pathlib import Path

import pytest
from palette_extractor.__main__ import main
from palette_extractor.core.env import ALGORITHM_ENV_VAR
from PIL import Image


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ALGORITHM_ENV_VAR, raising=False)


def _run_failing(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestTextOutput:
    def test_solid_red(self, red_png: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(red_png), '-q', '10', '-m', '2'])
        out = capsys.readouterr().out
        assert out.splitlines() == ['#ff0000']

    def test_defaults(self, red_png: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(red_png)])
        assert capsys.readouterr().out == '#ff0000\n'

    def test_rgb_and_prefix(self, two_tone_png: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(two_tone_png), '--quality', '1', '--rgb', '--prefix', 'Color'])
        assert capsys.readouterr().out.splitlines() == [
            'Color 1: rgb(0, 0, 255)',
            'Color 2: rgb(255, 255, 0)',
        ]

    def test_verbose_keeps_stdout_clean(self, red_png: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(red_png), '--verbose'])
        assert capsys.readouterr().out == '#ff0000\n'

    def test_algorithm_from_env(
        self, two_tone_png: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(ALGORITHM_ENV_VAR, 'median-cut')
        main([str(two_tone_png), '-q', '1', '--json'])
        assert json.loads(capsys.readouterr().out)['algorithm'] == 'median-cut'


class TestGridOutput:
    def test_grid_saved_and_confirmed(self, two_tone_png: Path, tmp_path: Path, capsys) -> None:
        out_path = tmp_path / 'grid.png'
        main([str(two_tone_png), '-q', '1', '--grid-output', str(out_path)])
        lines = capsys.readouterr().out.splitlines()
        assert lines == ['#0000ff', '#ffff00', f'Saved palette grid to {out_path}']

        img = Image.open(out_path).convert('RGB')
        assert img.size == (50, 100)
        assert img.getpixel((25, 25)) == (0, 0, 255)
        assert img.getpixel((25, 75)) == (255, 255, 0)

    def test_no_grid_without_flag(self, red_png: Path, tmp_path: Path) -> None:
        main([str(red_png)])
        assert not list(tmp_path.glob('*grid*'))

    def test_save_failure_after_text_output(self, red_png: Path, tmp_path: Path, capsys) -> None:
        code = _run_failing([str(red_png), '--grid-output', str(tmp_path / 'grid.unknownext')])
        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == '#ff0000\n'
        assert 'Error: Failed to save palette grid' in captured.err
        assert 'Hint:' in captured.err

    def test_json_includes_grid(self, red_png: Path, tmp_path: Path, capsys) -> None:
        out_path = tmp_path / 'grid.png'
        main([str(red_png), '--json', '-g', str(out_path)])
        parsed = json.loads(capsys.readouterr().out)
        assert parsed['colors'] == [{'index': 1, 'hex': '#ff0000', 'rgb': [255, 0, 0]}]
        assert parsed['grid'] == str(out_path)
        assert out_path.exists()


class TestErrors:
    def test_bad_quality(self, red_png: Path, capsys) -> None:
        assert _run_failing([str(red_png), '-q', '0']) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert "Error: The quality provided isn't valid: 0" in captured.err

    def test_bad_max_colors(self, red_png: Path, capsys) -> None:
        assert _run_failing([str(red_png), '-m', '1']) == 1
        assert 'The maximum colours provided are incorrect: 1' in capsys.readouterr().err

    def test_missing_image(self, tmp_path: Path, capsys) -> None:
        assert _run_failing([str(tmp_path / 'missing.png')]) == 1
        assert 'The image path does not exist' in capsys.readouterr().err

    def test_undecodable_image(self, not_an_image: Path, capsys) -> None:
        assert _run_failing([str(not_an_image)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert f'Error: Failed to open image at {not_an_image}' in captured.err
        assert 'cannot identify' not in captured.err

    def test_bad_env_algorithm(self, red_png: Path, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ALGORITHM_ENV_VAR, 'octree')
        assert _run_failing([str(red_png)]) == 1
        assert 'Unknown palette algorithm' in capsys.readouterr().err

    def test_unknown_algorithm_flag_rejected_by_argparse(self, red_png: Path) -> None:
        assert _run_failing([str(red_png), '--algorithm', 'octree']) == 2
