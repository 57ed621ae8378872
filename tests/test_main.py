"""Tests for the command line entry point."""

import json

import pytest

import main


def test_preset_to_stdout(capsys):
    assert main.main(["--preset", "two_spheres", "--width", "4", "--height", "2",
                      "--samples", "1", "--workers", "1", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[:3] == ["P3", "4 2", "255"]
    assert len(lines) == 3 + 8
    for line in lines[3:]:
        channels = [int(c) for c in line.split()]
        assert len(channels) == 3
        assert all(0 <= c <= 255 for c in channels)


def test_stdout_is_deterministic(capsys):
    args = ["--preset", "showcase", "--width", "6", "--height", "3", "--samples", "2",
            "--workers", "1", "--seed", "4", "--log-level", "WARNING"]
    main.main(args)
    first = capsys.readouterr().out
    main.main(args)
    assert capsys.readouterr().out == first


def test_scene_file_to_output(tmp_path):
    scene = {
        "width": 5, "height": 3, "samples_per_pixel": 1,
        "camera": {"look_from": [0, 0, 0], "look_at": [0, 0, -1], "up": [0, 1, 0], "vfov_deg": 90},
        "scene": [{"center0": [0, 0, -1], "radius": 0.5,
                   "material": {"type": "lambertian", "albedo": [0.5, 0.5, 0.5]}}],
    }
    scene_path = tmp_path / "scene.json"
    scene_path.write_text(json.dumps(scene))
    out = tmp_path / "render.ppm"
    assert main.main(["--scene", str(scene_path), "--output", str(out), "--workers", "1"]) == 0
    assert out.read_text().startswith("P3\n5 3\n255\n")


def test_invalid_configuration_exits_nonzero(tmp_path, capsys):
    scene_path = tmp_path / "scene.json"
    scene_path.write_text(json.dumps({"width": 0, "height": 1, "samples_per_pixel": 1}))
    assert main.main(["--scene", str(scene_path), "--workers", "1"]) == 1
    assert "width" in capsys.readouterr().err


def test_scene_and_preset_are_exclusive():
    with pytest.raises(SystemExit):
        main.parse_args(["--scene", "a.json", "--preset", "random"])


def test_size_overrides_reshape_scene_camera(tmp_path):
    scene = {
        "width": 4, "height": 2, "samples_per_pixel": 1,
        "camera": {"look_from": [0, 0, 0], "look_at": [0, 0, -1], "up": [0, 1, 0], "vfov_deg": 90},
        "scene": [],
    }
    scene_path = tmp_path / "scene.json"
    scene_path.write_text(json.dumps(scene))
    width, height, _, camera, _ = main.build_job(
        main.parse_args(["--scene", str(scene_path), "--width", "8", "--height", "2"]))
    assert (width, height) == (8, 2)
    assert camera.aspect_ratio == 4.0
