from pathlib import Path

from snapcam.core.config import ConfigLoader, SnapcamConfig, load_config


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.txt"
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigLoader:
    def test_missing_file_returns_defaults(self, tmp_path):
        defaults = {"camera_index": 0}

        values = ConfigLoader.load(tmp_path / "nope.txt", defaults)

        assert values == defaults
        assert values is not defaults

    def test_values_typed_from_defaults(self, tmp_path):
        path = write_config(tmp_path, "camera_index = 2\nconsole_output = no\nwindow_title = Bench 1\n")
        defaults = {"camera_index": 0, "console_output": True, "window_title": ""}

        values = ConfigLoader.load(path, defaults)

        assert values == {"camera_index": 2, "console_output": False, "window_title": "Bench 1"}

    def test_comments_quotes_and_blank_lines(self, tmp_path):
        path = write_config(
            tmp_path,
            "# header\n\noutput_dir = \"/tmp/shots\"  # where PNGs go\nwindow_title = 'Cam'\n",
        )

        values = ConfigLoader.load(path, {"output_dir": ".", "window_title": ""})

        assert values["output_dir"] == "/tmp/shots"
        assert values["window_title"] == "Cam"

    def test_invalid_int_falls_back_to_default(self, tmp_path):
        path = write_config(tmp_path, "camera_index = front\n")

        assert ConfigLoader.load(path, {"camera_index": 4})["camera_index"] == 4

    def test_int_accepts_prefixed_literals(self, tmp_path):
        path = write_config(tmp_path, "camera_index = 0x1\n")

        assert ConfigLoader.load(path, {"camera_index": 0})["camera_index"] == 1

    def test_lines_without_equals_are_skipped(self, tmp_path):
        path = write_config(tmp_path, "garbage\ncamera_index = 1\n")

        assert ConfigLoader.load(path, {"camera_index": 0}) == {"camera_index": 1}

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = write_config(tmp_path, "bogus = 1\ncamera_index = 1\n")

        assert ConfigLoader.load(path, {"camera_index": 0}) == {"camera_index": 1}


class TestSnapcamConfig:
    def test_defaults_reproduce_fixed_behaviour(self):
        config = SnapcamConfig()

        assert config.camera_index == 0
        assert config.output_path == Path(".")
        assert config.control_bar_height == 30
        assert config.log_path is None

    def test_from_dict_drops_unknown_keys(self):
        config = SnapcamConfig.from_dict({"camera_index": 3, "unused": True})

        assert config.camera_index == 3

    def test_log_path_expands_user(self):
        config = SnapcamConfig(log_file="~/snapcam.log")

        assert config.log_path == Path("~/snapcam.log").expanduser()

    def test_load_config_from_file(self, tmp_path):
        path = write_config(tmp_path, "camera_index = 1\noutput_dir = shots\nlog_level = debug\n")

        config = load_config(path)

        assert config.camera_index == 1
        assert config.output_dir == "shots"
        assert config.log_level == "debug"
        assert config.window_title == "SnapCam"

    def test_no_path_means_no_file_is_read(self):
        assert load_config(None) == SnapcamConfig()

    def test_packaged_template_matches_defaults(self, project_root):
        config = load_config(project_root / "snapcam" / "config.txt")

        assert config == SnapcamConfig()
