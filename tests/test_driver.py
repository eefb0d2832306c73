import pytest

from switchcontroller.controllers.types import Button, ControllerState, Stick, StickMode
from switchcontroller.driver import SwitchController
from switchcontroller.errors import (
    EmptyButtonList,
    InvalidSleepDuration,
    InvalidStickValue,
    TransportError,
)

from conftest import FakeTransport


def test_each_call_is_one_line(ctrl, transport):
    ctrl.press([Button.A])
    ctrl.hold([Button.ZR, Button.ZL])
    ctrl.release([Button.ZR])
    ctrl.stick(Stick.LEFT, 1.0, 0.0)
    ctrl.state(ControllerState().set_button(Button.B, True), StickMode.NONE)
    ctrl.sleep(0.1)
    assert transport.lines == [
        "PRESS a",
        "HOLD zr zl",
        "RELEASE zr",
        "STICK l_stick 1 0",
        "STATE 010000000000000000",
        "SLEEP 0.1",
    ]


def test_press_does_not_block(ctrl, transport, monkeypatch):
    import time

    def no_sleep(_):
        raise AssertionError("driver must not sleep on the host")

    monkeypatch.setattr(time, "sleep", no_sleep)
    ctrl.press([Button.A])
    ctrl.sleep(5.0)
    assert transport.lines == ["PRESS a", "SLEEP 5"]


def test_validation_happens_before_write(ctrl, transport):
    with pytest.raises(EmptyButtonList):
        ctrl.press([])
    with pytest.raises(InvalidStickValue):
        ctrl.stick(Stick.LEFT, 1.5, 0.0)
    with pytest.raises(InvalidSleepDuration):
        ctrl.sleep(-1.0)
    assert transport.lines == []


def test_state_builder_can_be_reused(ctrl, transport):
    st = ControllerState().set_button(Button.A, True)
    ctrl.state(st, StickMode.NONE)
    st.set_button(Button.A, False).set_left_stick(0.5, 0.5)
    ctrl.state(st, StickMode.LEFT)
    assert transport.lines == [
        "STATE 100000000000000000",
        "STATE 000000000000000000 0.5 0.5",
    ]


def test_transport_error_propagates_unchanged():
    err = TransportError("unplugged")
    ctrl = SwitchController(FakeTransport(fail=err))
    with pytest.raises(TransportError) as info:
        ctrl.press([Button.A])
    assert info.value is err


def test_os_error_is_wrapped():
    ctrl = SwitchController(FakeTransport(fail=BrokenPipeError("gone")))
    with pytest.raises(TransportError) as info:
        ctrl.sleep(1)
    assert isinstance(info.value.__cause__, BrokenPipeError)


def test_context_manager_closes(transport):
    with SwitchController(transport) as ctrl:
        ctrl.press([Button.HOME])
    assert transport.closed


def test_buttons_are_one_ordered_sequence(ctrl, transport):
    ctrl.press([Button.A, Button.B])
    ctrl.hold((Button.ZL, Button.ZR))
    ctrl.release(b for b in [Button.ZR, Button.ZL])
    assert transport.lines == ["PRESS a b", "HOLD zl zr", "RELEASE zr zl"]


def test_empty_sequences_are_rejected(ctrl, transport):
    for op in (ctrl.press, ctrl.hold, ctrl.release):
        with pytest.raises(EmptyButtonList):
            op([])
    assert transport.lines == []


def test_out_of_range_state_is_not_written(ctrl, transport):
    st = ControllerState()
    st.left_stick = (1.5, 0.0)
    with pytest.raises(InvalidStickValue):
        ctrl.state(st, StickMode.BOTH)
    assert transport.lines == []
