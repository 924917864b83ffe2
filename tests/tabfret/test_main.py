from pathlib import Path

import mido
import pytest

from tabfret.config import Config, build_profile, init_config
from tabfret.main import main
from tabfret.parser import TuningSyntaxError
from tabfret.templates import DEFAULT_PROFILE, ProfileTemplate


def test_default_config_builds_default_profile() -> None:
    assert build_profile(init_config()) == DEFAULT_PROFILE


def test_config_overrides() -> None:
    config = Config(
        template=ProfileTemplate.StandardGuitar, fret_count=20, tuning="D2"
    )
    profile = build_profile(config)
    assert profile.fret_count == 20
    # A tuning string replaces the whole string table
    assert profile.strings == (38,)


def test_config_bad_tuning() -> None:
    config = Config(template=ProfileTemplate.Mandolin, fret_count=None, tuning="Q")
    with pytest.raises(TuningSyntaxError):
        build_profile(config)


def test_main_prints_positions(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["C3", "E3", "G3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["C3\t48\t4\t3", "E3\t52\t3\t2", "G3\t55\t2\t0"]


def test_main_marks_conflicts(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--template", "StandardBass", "E1", "F1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["E1\t28\t-\t-\tconflict", "F1\t29\t3\t1"]


def test_main_with_tuning(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--tuning", "D2 A2 D3 G3 B3 E4", "38"]) == 0
    assert capsys.readouterr().out.splitlines() == ["D2\t38\t5\t0"]


def test_main_rejects_bad_notes() -> None:
    assert main(["H2"]) == 2
    assert main(["--tuning", "E2 D2", "40"]) == 2


def test_main_with_musicxml(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "drop_d.xml"
    path.write_text(
        "<staff-details><staff-lines>6</staff-lines>"
        '<staff-tuning line="1"><tuning-step>D</tuning-step>'
        "<tuning-octave>2</tuning-octave></staff-tuning></staff-details>",
        encoding="utf-8",
    )
    # Only line 1 is tuned, so the resized table is incomplete
    assert main(["--musicxml", str(path), "38"]) == 2
    path.write_text(
        "<staff-details>"
        '<staff-tuning line="1"><tuning-step>D</tuning-step>'
        "<tuning-octave>2</tuning-octave></staff-tuning></staff-details>",
        encoding="utf-8",
    )
    assert main(["--musicxml", str(path), "38", "62"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["D2\t38\t5\t0", "D4\t62\t1\t3"]


def test_main_with_midi(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = str(tmp_path / "chord.mid")
    midi_file = mido.MidiFile(type=0)
    track = mido.MidiTrack()
    midi_file.tracks.append(track)
    track.append(mido.Message("note_on", note=48, velocity=80, time=0))
    track.append(mido.Message("note_on", note=52, velocity=80, time=0))
    track.append(mido.Message("note_off", note=48, time=480))
    midi_file.save(path)
    assert main(["--midi", path, "G3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["C3\t48\t4\t3", "E3\t52\t3\t2", "G3\t55\t2\t0"]


def test_main_rejects_missing_inputs(tmp_path: Path) -> None:
    assert main([]) == 2
    assert main(["--midi", str(tmp_path / "missing.mid")]) == 2
    assert main(["--musicxml", str(tmp_path / "missing.xml"), "40"]) == 2
