import numpy as np
import pytest

from mgengine.gameobject import GameObject
from mgengine.vector import Vector3


@pytest.fixture(autouse=True)
def empty_scene():
    GameObject.clear_objects()
    yield
    GameObject.clear_objects()


class Recorder(GameObject):
    def __init__(self, journal):
        super().__init__()
        self.journal = journal

    def start(self):
        self.journal.append(("start", self))

    def update(self):
        self.journal.append(("update", self))

    def on_destroy(self):
        self.journal.append(("destroy", self))


class Root(GameObject):
    pass


class Child(GameObject):
    pass


def test_instantiate_registers_root():
    obj = GameObject.instantiate(GameObject())
    assert GameObject.objects() == (obj,)


def test_add_component_links_parent_and_child():
    parent = GameObject.instantiate(GameObject())
    child = parent.add_component(GameObject())
    assert child.parent is parent
    assert child.has_parent
    assert parent.children == (child,)
    assert GameObject.objects() == (parent,)


def test_set_parent_moves_child():
    first = GameObject.instantiate(GameObject())
    second = GameObject.instantiate(GameObject())
    child = first.add_component(GameObject())
    child.set_parent(second)
    assert first.children == ()
    assert second.children == (child,)
    assert child.parent is second


def test_remove_parent():
    parent = GameObject.instantiate(GameObject())
    child = parent.add_component(GameObject())
    child.remove_parent()
    assert not child.has_parent
    assert parent.children == ()


def test_remove_component():
    parent = GameObject.instantiate(GameObject())
    child = parent.add_component(GameObject())
    parent.remove_component(child)
    assert child.parent is None
    assert parent.children == ()


def test_instantiate_rejects_other_types():
    with pytest.raises(TypeError):
        GameObject.instantiate(object())


def test_run_start_starts_each_object_once():
    journal = []
    root = GameObject.instantiate(Recorder(journal))
    child = root.add_component(Recorder(journal))
    GameObject.run_start()
    GameObject.run_start()
    assert journal == [("start", root), ("start", child)]


def test_run_update_starts_then_updates():
    journal = []
    root = GameObject.instantiate(Recorder(journal))
    GameObject.run_update()
    GameObject.run_update()
    assert journal == [("start", root), ("update", root), ("update", root)]


def test_late_events_fire_with_sender():
    obj = GameObject.instantiate(GameObject())
    started, updated = [], []
    obj.late_start_event += lambda sender: started.append(sender)
    obj.late_update_event += lambda sender: updated.append(sender)
    GameObject.run_start()
    GameObject.run_start()
    GameObject.run_update()
    GameObject.run_update()
    assert started == [obj]
    assert updated == [obj, obj]


def test_destroy_runs_hooks_and_detaches():
    journal = []
    root = GameObject.instantiate(Recorder(journal))
    child = root.add_component(Recorder(journal))
    GameObject.destroy(root)
    assert journal == [("destroy", root), ("destroy", child)]
    assert GameObject.objects() == ()
    assert root.children == ()
    assert child.parent is None


def test_destroy_child_removes_it_from_parent():
    parent = GameObject.instantiate(GameObject())
    child = parent.add_component(GameObject())
    GameObject.destroy(child)
    assert parent.children == ()
    assert GameObject.objects() == (parent,)


def test_destroy_twice_logs_error(capsys):
    obj = GameObject.instantiate(GameObject())
    GameObject.destroy(obj)
    capsys.readouterr()
    GameObject.destroy(obj)
    assert "[ENGINE] [ERROR]" in capsys.readouterr().out


def test_hierarchy_lines():
    root = GameObject.instantiate(Root())
    root.add_component(Child())
    assert GameObject.hierarchy() == ["Root", "\tChild"]


def test_print_hierarchy_logs(capsys):
    root = GameObject.instantiate(Root())
    root.add_component(Child())
    GameObject.print_hierarchy()
    out = capsys.readouterr().out
    assert "Objects hierarchy:" in out
    assert "\tChild" in out


def test_type_name():
    child = GameObject.instantiate(Child())
    assert child.type_name == "Child"


def test_attaching_updates_child_transform():
    parent = GameObject.instantiate(GameObject())
    parent.transform.set_position(Vector3(1.0, 2.0, 3.0))
    child = parent.add_component(GameObject())
    pos = child.transform.position
    assert np.allclose([pos.x, pos.y, pos.z], [1.0, 2.0, 3.0])