"""Tests for the command-line entry point."""

import logging

import pytest
from PIL import Image

from pathtracer import config
from pathtracer.main import build_parser, main, resolve_settings


def parse(*argv):
    return build_parser().parse_args(list(argv))


class TestParser:
    def test_defaults(self):
        args = parse()
        assert args.scene == config.DEFAULT_SCENE
        assert args.width == config.IMAGE_WIDTH
        assert args.aspect_ratio == config.ASPECT_RATIO
        assert args.jobs == config.NUM_JOBS
        assert args.output == config.OUTPUT_PATH
        assert args.samples is None
        assert args.seed is None

    def test_unknown_scene_is_a_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            parse("--scene", "teapot")
        assert excinfo.value.code == 2

    def test_verbose_and_quiet_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse("--verbose", "--quiet")


class TestResolveSettings:
    def test_plain_defaults(self):
        width, height, samples, max_depth = resolve_settings(parse())
        assert (width, height) == (config.IMAGE_WIDTH, config.IMAGE_WIDTH)
        assert samples == config.SAMPLES_PER_PIXEL
        assert max_depth == config.MAX_DEPTH

    def test_preview_preset_scales_width(self):
        width, height, samples, max_depth = resolve_settings(
            parse("--quality", "preview", "--width", "200", "--aspect-ratio", "2"))
        assert (width, height) == (100, 50)
        assert (samples, max_depth) == (8, 8)

    def test_explicit_values_beat_preset(self):
        _, _, samples, max_depth = resolve_settings(
            parse("--quality", "final", "--samples", "3", "--max-depth", "7"))
        assert (samples, max_depth) == (3, 7)

    def test_bad_aspect_ratio(self):
        with pytest.raises(ValueError):
            resolve_settings(parse("--aspect-ratio", "0"))


class TestMain:
    def test_renders_image(self, tmp_path):
        output = tmp_path / "render.png"
        code = main(["--scene", "ground_sphere", "--width", "8", "--samples", "1",
                     "--max-depth", "2", "--workers", "1", "--jobs", "2", "--quiet",
                     "--seed", "3", "--output", str(output)])
        assert code == 0
        with Image.open(output) as img:
            assert img.size == (8, 8)

    def test_missing_texture_fails(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="pathtracer"):
            code = main(["--scene", "earth", "--texture", str(tmp_path / "nope.jpg"),
                         "--width", "4", "--samples", "1", "--workers", "1", "--quiet",
                         "--output", str(tmp_path / "out.png")])
        assert code == 1
        assert "nope.jpg" in caplog.text
        assert not (tmp_path / "out.png").exists()

    def test_invalid_settings_fail(self, tmp_path):
        code = main(["--scene", "ground_sphere", "--samples", "0", "--quiet",
                     "--output", str(tmp_path / "out.png")])
        assert code == 1
