"""End-to-end tests for the median-palette command line."""

import json
from pathlib import Path

import pytest
from median_palette.__main__ import build_palette, clamp_iterations, main
from median_palette.core.color import Color
from median_palette.core.env import ITERATIONS_VAR, OUT_VAR
from PIL import Image


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from a directory with no .env above it."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ITERATIONS_VAR, raising=False)
    monkeypatch.delenv(OUT_VAR, raising=False)


@pytest.fixture
def image_path(tmp_path: Path) -> Path:
    # Three distinct colours in one row
    img = Image.new('RGBA', (3, 1))
    img.putpixel((0, 0), (100, 120, 120, 0))
    img.putpixel((1, 0), (150, 150, 150, 0))
    img.putpixel((2, 0), (255, 255, 255, 0))
    path = tmp_path / 'three.png'
    img.save(path)
    return path


class TestClampIterations:
    def test_in_range(self):
        assert clamp_iterations(3) == 3

    def test_too_high(self, capsys: pytest.CaptureFixture[str]):
        assert clamp_iterations(9) == 4
        assert 'maximum number of iterations of 4' in capsys.readouterr().err

    def test_too_low(self, capsys: pytest.CaptureFixture[str]):
        assert clamp_iterations(0) == 1
        assert 'minimum number of iterations of 1' in capsys.readouterr().err


class TestBuildPalette:
    def test_no_pixels(self):
        assert build_palette([], 2) is None

    def test_palette(self):
        assert build_palette([Color(1, 1, 1, 1)], 2) == [Color(1, 1, 1, 1)]


class TestMain:
    def test_prints_palette(self, image_path: Path, capsys: pytest.CaptureFixture[str]):
        main(['-f', str(image_path), '-i', '3'])
        out = capsys.readouterr().out
        lines = out.splitlines()
        first = lines.index('{ R: 255, G: 255, B: 255, A: 0 }')
        assert lines[first + 1] == '{ R: 150, G: 150, B: 150, A: 0 }'
        assert lines[first + 2] == '{ R: 100, G: 120, B: 120, A: 0 }'
        assert 'Finished reading 3 pixel values' in out

    def test_json_report(self, image_path: Path, capsys: pytest.CaptureFixture[str]):
        main(['-f', str(image_path), '-i', '1', '--json'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['palette'] == [
            {'r': 255, 'g': 255, 'b': 255, 'a': 0},
            {'r': 125, 'g': 135, 'b': 135, 'a': 0},
        ]

    def test_writes_csv(self, image_path: Path, tmp_path: Path):
        out = tmp_path / 'colours'
        main(['-f', str(image_path), '-i', '3', 'csv', '-o', str(out)])
        assert (tmp_path / 'colours.csv').read_text().splitlines() == [
            'R, G, B, A',
            '255, 255, 255, 0',
            '150, 150, 150, 0',
            '100, 120, 120, 0',
        ]

    def test_default_out_filename(self, image_path: Path, tmp_path: Path):
        main(['-f', str(image_path), 'json'])
        assert (tmp_path / 'palette.json').is_file()

    def test_settings_from_dotenv(self, image_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        (tmp_path / '.env').write_text(f'{ITERATIONS_VAR}=7\n{OUT_VAR}=from_env\n')
        main(['-f', str(image_path), 'html'])
        err = capsys.readouterr().err
        assert 'loaded' in err
        assert 'maximum number of iterations of 4' in err
        assert (tmp_path / 'from_env.html').is_file()

    def test_missing_image(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc:
            main(['-f', str(tmp_path / 'missing.png')])
        assert exc.value.code == 1
        assert 'Unable to locate file' in capsys.readouterr().err

    def test_bad_config(self, image_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
        monkeypatch.setenv(ITERATIONS_VAR, 'lots')
        with pytest.raises(SystemExit) as exc:
            main(['-f', str(image_path)])
        assert exc.value.code == 1
        assert 'Error:' in capsys.readouterr().err

    def test_unwritable_output(self, image_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc:
            main(['-f', str(image_path), '-i', '3', 'csv', '-o', str(tmp_path / 'no' / 'such' / 'dir')])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert 'Failed writing csv output file' in captured.err
        # palette is still reported on stdout
        assert '{ R: 255, G: 255, B: 255, A: 0 }' in captured.out
        assert '{ R: 100, G: 120, B: 120, A: 0 }' in captured.out
        assert 'csv: wrote' not in captured.out

    def test_unwritable_output_json_report(
        self, image_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ):
        with pytest.raises(SystemExit):
            main(['-f', str(image_path), '-i', '1', 'json', '--json', '-o', str(tmp_path / 'no' / 'dir')])
        obj = json.loads(capsys.readouterr().out)
        assert len(obj['palette']) == 2
        assert 'exported' not in obj

    def test_explicit_empty_out_filename_is_not_replaced(
        self, image_path: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv(OUT_VAR, 'from_env')
        main(['-f', str(image_path), 'csv', '-o', ''])
        assert (tmp_path / '.csv').is_file()
        assert not (tmp_path / 'from_env.csv').exists()

    def test_unknown_format_rejected(self, image_path: Path):
        with pytest.raises(SystemExit) as exc:
            main(['-f', str(image_path), 'xml'])
        assert exc.value.code == 2
