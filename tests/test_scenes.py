import logging

import pytest

from starforge.scenes import Scene, SceneManager


class RecordingScene(Scene):
    def __init__(self):
        self.devices = []
        self.deltas = []
        self.renders = 0

    def load_resources(self, device):
        self.devices.append(device)

    def update(self, delta_time):
        self.deltas.append(delta_time)

    def render(self):
        self.renders += 1


class Renderable:
    def __init__(self):
        self.runs = 0

    def run(self):
        self.runs += 1


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_activate_loads_resources():
    manager = SceneManager()
    scene = RecordingScene()
    manager.add_scene("demo", scene)
    device = object()
    assert manager.set_active_scene("demo", device) is True
    assert scene.devices == [device]
    assert manager.active_scene is scene
    assert manager.scene_name == "demo"


def test_unknown_scene_logs_and_fails(caplog):
    manager = SceneManager()
    with caplog.at_level(logging.ERROR):
        assert manager.set_active_scene("missing", None) is False
    assert "missing" in caplog.text
    assert manager.scene_name == "No Scene"


def test_empty_scene_entry():
    manager = SceneManager()
    manager.add_scene("blank", None)
    assert manager.set_active_scene("blank", None) is False
    assert manager.scene_name == "blank"


def test_add_scene_keeps_first():
    manager = SceneManager()
    first, second = RecordingScene(), RecordingScene()
    manager.add_scene("demo", first)
    manager.add_scene("demo", second)
    manager.set_active_scene("demo", None)
    assert manager.active_scene is first
    assert second.devices == []


def test_update_forwards_only_when_active():
    manager = SceneManager()
    scene = RecordingScene()
    manager.add_scene("demo", scene)
    manager.update(0.25)
    assert scene.deltas == []
    manager.set_active_scene("demo", None)
    manager.update(0.25)
    assert scene.deltas == [0.25]


def test_render_runs_only_when_active():
    manager = SceneManager()
    renderable = Renderable()
    manager.render(renderable)
    assert renderable.runs == 0
    manager.add_scene("demo", RecordingScene())
    manager.set_active_scene("demo", None)
    manager.render(renderable)
    assert renderable.runs == 1


def test_window_title_format():
    manager = SceneManager()
    manager.add_scene("demo", RecordingScene())
    manager.set_active_scene("demo", None)
    assert manager.window_title(60.0) == "Scene: demo | 60.000000 FPS"


def test_window_title_without_scene():
    assert SceneManager().window_title(30.5) == "Scene:  | 30.500000 FPS"