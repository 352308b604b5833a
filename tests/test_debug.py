import logging

import pytest

from debug import Debug
from enigma import Enigma


def test_all_components_start_off():
    assert not any(Debug().status().values())


def test_switches_are_shared_between_instances():
    Debug().enable("stepping")
    assert Debug().status()["stepping"] is True


def test_unknown_component():
    with pytest.raises(ValueError):
        Debug().enable("radio")


def test_stepping_trace(caplog):
    caplog.set_level(logging.DEBUG, logger="ENIGMA")
    Debug().enable("stepping")
    Enigma().process("AB")
    messages = [r.getMessage() for r in caplog.records]
    assert "[STEPPING] window AAB" in messages
    assert "[STEPPING] window AAC" in messages


def test_global_switch_silences(caplog):
    caplog.set_level(logging.DEBUG, logger="ENIGMA")
    dbg = Debug()
    dbg.enable("plugboard", "reflector")
    dbg.toggle_global(False)
    Enigma().process("QUIET")
    assert caplog.records == []


def test_tracing_does_not_change_output():
    plain = Enigma().process("SAME OUTPUT")
    Debug().enable("keyboard", "plugboard", "rotor", "reflector", "stepping", "process")
    assert Enigma().process("SAME OUTPUT") == plain


def test_cli_debug_flag_enables_component():
    from enigma_cli import main

    main(["--debug", "process", "-m", "A"])
    assert Debug().status()["process"] is True


def test_toggle_and_repr():
    dbg = Debug()
    dbg.toggle("rotor")
    assert "rotor" in repr(dbg)
    dbg.toggle("rotor")
    assert dbg.status()["rotor"] is False


def test_window_not_read_while_stepping_trace_is_off(monkeypatch):
    reads = []
    real = Enigma.window

    def counting(self):
        reads.append(1)
        return real.fget(self)

    monkeypatch.setattr(Enigma, "window", property(counting))
    Enigma().process("QUIET RUN")
    assert reads == []
