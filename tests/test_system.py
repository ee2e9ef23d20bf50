import pytest

from akecs.system import System, SystemManager
from akecs.types import ECSError, Entity, Signature


class Recorder(System):
    def __init__(self, label="rec"):
        super().__init__()
        self.label = label
        self.added = []
        self.after_calls = 0

    def on_add_entity(self, entity):
        self.added.append(entity)

    def after_destroy_entity(self):
        self.after_calls += 1


class Other(System):
    pass


def sig(*bits):
    s = Signature()
    for b in bits:
        s.set(b)
    return s


def test_register_passes_arguments():
    m = SystemManager()
    system = m.register_system(Recorder, label="movement")
    assert system.label == "movement"
    assert m.get_system(Recorder) is system


def test_register_twice_raises():
    m = SystemManager()
    m.register_system(Recorder)
    with pytest.raises(ECSError):
        m.register_system(Recorder)


def test_get_unregistered_raises():
    with pytest.raises(ECSError):
        SystemManager().get_system(Recorder)


def test_signature_rules():
    m = SystemManager()
    with pytest.raises(ECSError):
        m.set_system_signature(Recorder, sig(0))
    m.register_system(Recorder)
    m.set_system_signature(Recorder, sig(0))
    with pytest.raises(ECSError):
        m.set_system_signature(Recorder, sig(1))


def test_matching_entity_joins_and_leaves():
    m = SystemManager()
    rec = m.register_system(Recorder)
    m.set_system_signature(Recorder, sig(0, 1))
    e = Entity(0, 0, signature=sig(0, 1, 2))
    m.entity_signature_changed(e)
    assert e in rec.entities
    assert rec.added == [e]
    e.signature.set(1, False)
    m.entity_signature_changed(e)
    assert e not in rec.entities
    assert rec.after_calls == 1


def test_system_without_signature_takes_everything():
    m = SystemManager()
    other = m.register_system(Other)
    e = Entity(0, 0)
    m.entity_signature_changed(e)
    assert other.entities == {e}


def test_entity_destroyed_removes_from_all():
    m = SystemManager()
    rec = m.register_system(Recorder)
    other = m.register_system(Other)
    e = Entity(0, 0)
    m.entity_signature_changed(e)
    m.entity_destroyed(e)
    assert e not in rec.entities
    assert e not in other.entities
    assert rec.after_calls == 1


def test_stored_signature_is_a_copy():
    m = SystemManager()
    rec = m.register_system(Recorder)
    required = sig(3)
    m.set_system_signature(Recorder, required)
    required.reset()
    m.entity_signature_changed(Entity(0, 0))
    assert rec.entities == set()