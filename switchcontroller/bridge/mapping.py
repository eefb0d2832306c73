from __future__ import annotations
from dataclasses import dataclass

from switchcontroller.bridge.types import MapTuning, RawPadState
from switchcontroller.controllers.types import Button, ControllerState
from switchcontroller.utils import apply_deadzone, clamp

POSITIONAL_FACES = {"A": Button.B, "B": Button.A, "X": Button.Y, "Y": Button.X}
LABEL_FACES = {"A": Button.A, "B": Button.B, "X": Button.X, "Y": Button.Y}

OTHER_BUTTONS = {
    "LB": Button.L,
    "RB": Button.R,
    "VIEW": Button.MINUS,
    "MENU": Button.PLUS,
    "GUIDE": Button.HOME,
    "LS": Button.L_STICK,
    "RS": Button.R_STICK,
}


def norm_trigger(x: float) -> float:
    # Heuristic: sometimes triggers appear as -1..1 (rest at -1). Map to 0..1.
    x = clamp(x, -1.0, 1.0)
    if x < 0.0:
        return (x + 1.0) * 0.5
    return x


@dataclass
class SwitchLayoutMapper:
    """Xbox-style pad -> Switch ControllerState."""
    tuning: MapTuning = MapTuning()

    def _axis(self, raw: RawPadState, name: str, invert: bool = False) -> float:
        x = apply_deadzone(float(raw.axes.get(name, 0.0)), self.tuning.deadzone)
        if invert:
            x = -x
        return clamp(x, -1.0, 1.0) + 0.0  # +0.0 folds -0.0

    def map(self, raw: RawPadState) -> ControllerState:
        st = ControllerState()

        def btn(name: str) -> bool:
            return bool(raw.buttons.get(name, 0))

        faces = POSITIONAL_FACES if self.tuning.positional_faces else LABEL_FACES
        for name, button in faces.items():
            st.set_button(button, btn(name))
        for name, button in OTHER_BUTTONS.items():
            st.set_button(button, btn(name))

        thr = self.tuning.trigger_threshold
        st.set_button(Button.ZL, norm_trigger(float(raw.axes.get("LT", -1.0))) >= thr)
        st.set_button(Button.ZR, norm_trigger(float(raw.axes.get("RT", -1.0))) >= thr)

        hx, hy = raw.hat
        st.set_button(Button.DPAD_UP, hy > 0)
        st.set_button(Button.DPAD_DOWN, hy < 0)
        st.set_button(Button.DPAD_LEFT, hx < 0)
        st.set_button(Button.DPAD_RIGHT, hx > 0)

        inv = self.tuning.invert_y
        st.set_left_stick(self._axis(raw, "LX"), self._axis(raw, "LY", inv))
        st.set_right_stick(self._axis(raw, "RX"), self._axis(raw, "RY", inv))
        return st
