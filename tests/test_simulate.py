"""Tests for the command-line simulation and the plot"""

import argparse

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from mazewalker.config import clamp_maze_size  # noqa: E402
from mazewalker.simulate import main, parse_keys, script_events  # noqa: E402
from mazewalker.types import KeyDown, KeyUp, Pose, Tick  # noqa: E402
from mazewalker.visualization import Visualization  # noqa: E402


@pytest.mark.parametrize("size,expected", [
    (2, 5), (4, 5), (5, 5), (6, 7), (25, 25), (50, 51), (51, 51), (200, 51),
])
def test_clamp_maze_size(size, expected):
    assert clamp_maze_size(size) == expected


def test_parse_keys():
    assert parse_keys("w:40 e:45  w:10") == [('w', 40), ('e', 45), ('w', 10)]
    assert parse_keys("") == []


@pytest.mark.parametrize("script", ["w", "w:", "w:x", "ww:3", "w:0", ":4"])
def test_parse_keys_rejects_bad_tokens(script):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_keys(script)


def test_script_events():
    events = list(script_events([('w', 2), ('q', 1)]))
    assert events == [
        KeyDown('w'), Tick(), KeyDown('w'), Tick(), KeyUp('w'),
        KeyDown('q'), Tick(), KeyUp('q'),
    ]


def test_main_prints_map(capsys):
    assert main(['--size', '5', '--seed', '1']) == 0
    out = capsys.readouterr().out
    lines = out.split("MAP OF THE MAZE:\n")[1].splitlines()
    assert lines[0] == "# # # # #"
    assert lines[1].startswith("# S")
    assert lines[4] == "# # # D #"


def test_main_clamps_size(capsys):
    main(['--size', '4', '--seed', '0'])
    out = capsys.readouterr().out
    lines = out.split("MAP OF THE MAZE:\n")[1].splitlines()
    assert len(lines[0].split()) == 5


def test_main_replays_keys(capsys):
    main(['--size', '7', '--seed', '2', '--keys', 'w:10 q:5'])
    out = capsys.readouterr().out
    assert "Final pose:" in out
    assert "after 15 ticks" in out


def test_main_rejects_bad_keys():
    with pytest.raises(SystemExit) as excinfo:
        main(['--keys', 'forward'])
    assert excinfo.value.code == 2


def test_main_rejects_start_outside_maze():
    with pytest.raises(SystemExit) as excinfo:
        main(['--size', '5', '--start', '9', '9'])
    assert excinfo.value.code == 2


def test_main_farthest_exit(capsys):
    assert main(['--size', '9', '--seed', '4', '--exit', 'farthest']) == 0
    out = capsys.readouterr().out
    grid_text = out.split("MAP OF THE MAZE:\n")[1]
    assert grid_text.count('D') == 1
    assert grid_text.count('S') == 1


def test_visualization_draws_maze_and_trail(hook_maze):
    visual = Visualization(hook_maze)
    before = len(plt.gca().lines)
    visual.drawTrail([Pose(1.0, 1.0), Pose(1.0, 2.0), Pose(1.0, 3.0)], color='r')
    visual.drawPose(Pose(1.0, 3.0, yaw=0.0), color='b')

    assert len(plt.gca().lines) == before + 1
    assert len(plt.gca().patches) == 1
    plt.close('all')


def test_main_reports_wall_clearance(capsys):
    # Rotating in place keeps the agent on the start cell center.
    main(['--size', '7', '--seed', '2', '--keys', 'q:3'])
    out = capsys.readouterr().out
    assert "0.500 from the nearest wall" in out


def test_main_plot_shows_figure(monkeypatch, capsys):
    shown = []
    monkeypatch.setattr(plt, 'show', lambda: shown.append(plt.gcf()))

    assert main(['--size', '5', '--seed', '1', '--keys', 'w:5', '--plot']) == 0
    assert len(shown) == 1
    # The trail and the heading arrow were drawn before showing.
    assert len(shown[0].gca().patches) == 1
    assert len(shown[0].gca().lines) >= 4
    plt.close('all')
