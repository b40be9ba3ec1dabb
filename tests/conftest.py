import pytest

from debug import debug
from machine import Machine
from wheels import B, I, II, III


@pytest.fixture
def classic() -> Machine:
    """Rotors I, II, III with reflector B, keyed to AAA."""
    m = Machine([I, II, III], B)
    m.set_window("AAA")
    return m


@pytest.fixture(autouse=True)
def _quiet_debug():
    yield
    debug.disable_all()
    debug.close_files()
    debug.toggle_global(True)
