from __future__ import annotations

import main


def test_all_transcripts_understood(capsys) -> None:
    exit_code = main.main(["mangga lima puluh ribu", "aqua 500"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Mangga" in out
    assert "INDONESIAN_WORDS" in out
    assert "550.000" in out


def test_unrecognized_transcript_fails(capsys) -> None:
    exit_code = main.main(["halo dunia"])
    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Maaf, bisa diulangi lebih jelas?" in out


def test_samples_include_a_failure(capsys) -> None:
    assert main.main([]) == 1
    out = capsys.readouterr().out
    assert "Pizza Hut" in out
