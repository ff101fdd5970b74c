"""Tests for the shader-swatch command line and the swatch renderer."""

import json
import shutil
from pathlib import Path

import pytest
from PIL import Image
from shader_swatch.__main__ import main
from shader_swatch.core.report import line_col
from shader_swatch.core.swatch import render_swatches
from shader_swatch.core.types import CanonicalColour

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
SAMPLE_FRAG = FIXTURES_DIR / 'sample.frag'


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A cwd with a .git marker so no stray .env is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestScanCommand:
    def test_text(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['scan', str(SAMPLE_FRAG)])
        out = capsys.readouterr().out
        assert 'sample.frag' in out
        assert '7 colour(s)' in out
        assert '#33669980' in out
        assert 'vec3(12.0' not in out

    def test_json(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['scan', str(SAMPLE_FRAG), '--json'])
        data = json.loads(capsys.readouterr().out)
        assert data['summary']['total'] == 7
        first = data['colours'][0]
        assert first['text'] == 'vec3(1.0, 0.85, 0.4)'
        assert first['grammar'] == 'vector'
        assert first['line'] == 4
        assert first['colour'] == {'red': 1.0, 'green': 0.85, 'blue': 0.4, 'alpha': 1.0}

    def test_strict_policy_flag(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['scan', str(SAMPLE_FRAG), '--json', '--policy', 'strict'])
        data = json.loads(capsys.readouterr().out)
        assert data['summary']['total'] == 6

    def test_policy_from_env_file(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workdir / '.env').write_text('SHADER_SWATCH_POLICY=strict\n')
        main(['scan', str(SAMPLE_FRAG), '--json'])
        data = json.loads(capsys.readouterr().out)
        assert data['summary']['total'] == 6

    def test_missing_file(self, workdir: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['scan', str(workdir / 'nope.frag')])
        assert exc.value.code == 1

    def test_unrecognised_suffix_still_scanned(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        copy = workdir / 'sample.txt'
        shutil.copy(SAMPLE_FRAG, copy)
        main(['scan', str(copy), '--json'])
        assert json.loads(capsys.readouterr().out)['summary']['total'] == 7


class TestPresentCommand:
    def test_text(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['present', '#F90'])
        out = capsys.readouterr().out
        assert ' * #f90' in out
        assert 'rgb(255, 153, 0)' in out

    def test_json(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['present', 'rgba(255,128,0,0.5)', '--json'])
        data = json.loads(capsys.readouterr().out)
        assert data['candidates'][0] == {'text': 'rgba(255, 128, 0, 0.50)', 'grammar': 'rgba', 'alpha': True}

    def test_not_a_literal(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['present', 'kBlue'])
        assert exc.value.code == 1
        assert 'Error' in capsys.readouterr().err

    def test_rejected_vector(self, workdir: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['present', 'vec3(2.5, 0.5, 0.5)'])
        assert exc.value.code == 1


class TestSwatchesCommand:
    def test_writes_png(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out_dir = workdir / 'out'
        main(['swatches', str(out_dir), str(SAMPLE_FRAG), '--size', '10'])
        img = Image.open(out_dir / 'swatches.png')
        assert img.format == 'PNG'
        assert img.size == (70, 10)
        assert 'swatches.png' in capsys.readouterr().out


class TestHelpCommand:
    def test_lists_syntaxes(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help'])
        out = capsys.readouterr().out
        for name in ('vector', 'hex', 'rgb', 'rgba'):
            assert name in out

    def test_module_docs(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'vector'])
        assert 'permissive' in capsys.readouterr().out

    def test_unknown(self, workdir: Path) -> None:
        with pytest.raises(SystemExit):
            main(['help', 'hsl'])


class TestRenderSwatches:
    def test_size(self) -> None:
        img = render_swatches([CanonicalColour(1, 0, 0, 1), CanonicalColour(0, 0, 1, 0.5)], size=10)
        assert img.size == (20, 10)
        assert img.mode == 'RGB'

    def test_opaque_fill(self) -> None:
        img = render_swatches([CanonicalColour(1, 0, 0, 1)], size=10)
        assert img.getpixel((5, 5)) == (255, 0, 0)

    def test_translucent_shows_checkerboard(self) -> None:
        img = render_swatches([CanonicalColour(0, 0, 1, 0.5)], size=8)
        r, g, b = img.getpixel((0, 0))
        assert b > r
        assert r > 0
        assert img.getpixel((0, 0)) != img.getpixel((2, 0))

    def test_empty(self) -> None:
        assert render_swatches([], size=12).size == (12, 12)


class TestLineCol:
    def test_first_line(self) -> None:
        assert line_col('abc', 1) == (1, 2)

    def test_later_line(self) -> None:
        assert line_col('ab\ncd\nef', 7) == (3, 2)
