import logging

import numpy as np
import pytest
from PIL import Image

from images_resizer.app import ImagesResizerApp
from images_resizer.controllers.resize_controller import ResizeController
from images_resizer.models.config_model import ResizeConfig
from images_resizer.models.errors import ResizeJobError
from images_resizer.services.task_service import TaskService


@pytest.fixture
def scenario_dir(tmp_path, make_image):
    make_image("a.png", size=(4, 4), color=(255, 0, 0))
    make_image("b.jpg", size=(2, 2), color=(0, 128, 255))
    make_image("c_resized.gif", size=(2, 2), color=(0, 0, 0))
    return tmp_path


def names(directory):
    return sorted(p.name for p in directory.iterdir())


@pytest.mark.parametrize("strategy", ["pool", "sequential", "per_job"])
def test_scenario_directory(scenario_dir, strategy):
    summary = ResizeController().run(ResizeConfig(directory=scenario_dir, factor=0.5, strategy=strategy))

    assert sorted(r.filename for r in summary.results) == ["a.png", "b.jpg"]
    assert names(scenario_dir) == ["a.png", "a_resized.png", "b.jpg", "b_resized.jpg", "c_resized.gif"]

    with Image.open(scenario_dir / "a_resized.png") as a_out:
        assert a_out.format == "PNG"
        assert a_out.size == (2, 2)
        assert (np.asarray(a_out.convert("RGBA")) == (255, 0, 0, 255)).all()
    with Image.open(scenario_dir / "b_resized.jpg") as b_out:
        assert b_out.format == "JPEG"
        assert b_out.size == (1, 1)


def test_rerun_does_not_resize_outputs_again(scenario_dir):
    controller = ResizeController()
    controller.run(ResizeConfig(directory=scenario_dir, factor=0.5))
    second = controller.run(ResizeConfig(directory=scenario_dir, factor=0.5))

    # originals are resized again, outputs of the first run are not
    assert sorted(r.filename for r in second.results) == ["a.png", "b.jpg"]
    assert not any("_resized_resized" in name for name in names(scenario_dir))


def test_output_keeps_extension_but_uses_sniffed_format(tmp_path, make_image):
    make_image("fake.jpg", size=(6, 6), fmt="PNG")

    ResizeController().run(ResizeConfig(directory=tmp_path, factor=0.5))

    with Image.open(tmp_path / "fake_resized.jpg") as out:
        assert out.format == "PNG"
        assert out.size == (3, 3)


def test_run_reports_progress_and_elapsed_time(scenario_dir, caplog):
    with caplog.at_level(logging.INFO):
        summary = ResizeController().run(ResizeConfig(directory=scenario_dir, factor=0.5, workers=2))

    assert summary.elapsed >= 0
    assert caplog.messages[0] == "-" * 80
    assert any(m.startswith("Resizing a.png (worker ") for m in caplog.messages)
    assert any(m.endswith(" OK [1]") for m in caplog.messages)
    assert caplog.messages[-1].startswith("Resize images time: ")


def test_corrupt_file_aborts_whole_run(tmp_path, make_image):
    make_image("good.png", size=(4, 4))
    (tmp_path / "bad.png").write_bytes(b"\x89PNG but truncated")

    with pytest.raises(ResizeJobError) as excinfo:
        ResizeController().run(ResizeConfig(directory=tmp_path, factor=0.5, strategy="sequential"))

    assert excinfo.value.filename == "bad.png"
    # bad.png sorts first, so nothing was written
    assert not (tmp_path / "good_resized.png").exists()


def test_app_returns_failure_status_on_corrupt_input(tmp_path):
    (tmp_path / "bad.gif").write_bytes(b"GIF89a??")
    assert ImagesResizerApp(ResizeConfig(directory=tmp_path, factor=0.5)).run() == 1


def test_app_returns_failure_status_on_missing_directory(tmp_path):
    assert ImagesResizerApp(ResizeConfig(directory=tmp_path / "missing", factor=0.5)).run() == 1


def test_app_succeeds_on_empty_directory(tmp_path):
    assert ImagesResizerApp(ResizeConfig(directory=tmp_path, factor=0.5)).run() == 0


def test_too_small_image_fails_without_leaving_empty_output(tmp_path, make_image):
    make_image("a_icon.gif", size=(1, 1), fmt="GIF")
    make_image("b.png", size=(4, 4))

    with pytest.raises(ResizeJobError) as excinfo:
        ResizeController().run(ResizeConfig(directory=tmp_path, factor=0.5, strategy="sequential"))

    assert excinfo.value.filename == "a_icon.gif"
    assert names(tmp_path) == ["a_icon.gif", "b.png"]


def test_app_returns_failure_status_on_unreadable_directory(tmp_path, monkeypatch):
    def deny(self, directory):
        raise PermissionError(f"Permission denied: {directory}")

    monkeypatch.setattr(TaskService, "list_eligible", deny)
    assert ImagesResizerApp(ResizeConfig(directory=tmp_path, factor=0.5)).run() == 1
