import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from music_library import SEPARATOR, main


def test_demo_output(capsys):
    main()
    out = capsys.readouterr().out
    lines = out.splitlines()

    assert lines[0] == "Sample Track Qubicon"
    assert lines[1] == SEPARATOR
    assert out.count(SEPARATOR) == 4
    assert out.endswith(SEPARATOR + "\n")

    # Qubicon is printed twice: before and after the playlist is attached
    assert "PlaylistCount: 0" in out
    assert "PlaylistCount: 1" in out
    assert out.count("Title: Wave Tracks") == 2
    assert "Description: Go with the wave!" in out

    final_report = out.split(SEPARATOR)[-2]
    assert "Duration: 06:07" in final_report
    assert "\tOwner: Travis Scott\n" in final_report
    assert "\tVisibility: PRIVATE\n" in final_report
    assert final_report.index("Sample Track") < final_report.index("One of Us")
