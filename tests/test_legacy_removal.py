from Observable.Events.event_emitter import EventEmitter
from Observable.Utility.settings import LEGACY_REMOVAL_ENV, legacy_removal_enabled


class LegacyEmitter(EventEmitter):
    legacy_removal = True


def f():
    pass


def g():
    pass


def test_legacy_flag_read_from_environment(monkeypatch):
    monkeypatch.delenv(LEGACY_REMOVAL_ENV, raising=False)
    assert legacy_removal_enabled() is False
    monkeypatch.setenv(LEGACY_REMOVAL_ENV, "Yes")
    assert legacy_removal_enabled() is True
    assert legacy_removal_enabled(False) is False


def test_legacy_remove_by_callback_alone_clears_event():
    emitter = LegacyEmitter()
    emitter.on("x", f).on("x", g)
    emitter.off("x", f)
    assert emitter.has_listener("x") is False


def test_legacy_keeps_entries_differing_in_callback_and_context():
    ctx1, ctx2 = object(), object()
    emitter = LegacyEmitter()
    emitter.on("x", f, ctx1).on("x", g, ctx2)
    emitter.off("x", f, ctx1)
    assert emitter._listener_registry().count("x") == 1
    assert emitter._listener_registry().snapshot("x")[0].callback is g


def test_environment_enables_legacy_mode(monkeypatch):
    monkeypatch.setenv(LEGACY_REMOVAL_ENV, "1")
    emitter = EventEmitter()
    emitter.on("x", f).on("x", g)
    emitter.off("x", f)
    assert emitter.has_listener("x") is False


def test_class_override_beats_environment(monkeypatch):
    class Strict(EventEmitter):
        legacy_removal = False

    monkeypatch.setenv(LEGACY_REMOVAL_ENV, "1")
    emitter = Strict()
    emitter.on("x", f).on("x", g)
    emitter.off("x", f)
    assert emitter._listener_registry().count("x") == 1
