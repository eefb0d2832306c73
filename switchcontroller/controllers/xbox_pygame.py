from __future__ import annotations
import os
from typing import Dict, Optional
import pygame

from switchcontroller.bridge.mapping import SwitchLayoutMapper
from switchcontroller.bridge.types import RawPadState
from switchcontroller.controllers.types import Controller, ControllerState

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class XboxController:
    """
    Raw pygame joystick reader. Returns axis/button dictionaries.
    Default maps are SDL2's layout for an Xbox pad on Linux.
    """
    DEFAULT_AXIS_MAP = {
        "LX": 0,
        "LY": 1,
        "LT": 2,
        "RX": 3,
        "RY": 4,
        "RT": 5,
    }

    DEFAULT_BUTTON_MAP = {
        "A": 0,
        "B": 1,
        "X": 2,
        "Y": 3,
        "LB": 4,
        "RB": 5,
        "VIEW": 6,
        "MENU": 7,
        "GUIDE": 8,
        "LS": 9,
        "RS": 10,
    }

    def __init__(
        self,
        index: int = 0,
        axis_map: Optional[Dict[str, int]] = None,
        button_map: Optional[Dict[str, int]] = None,
    ):
        pygame.init()
        pygame.joystick.init()

        if pygame.joystick.get_count() <= index:
            raise RuntimeError("No controller found. Is it on and connected?")

        self.js = pygame.joystick.Joystick(index)
        self.js.init()

        self.axis_map = axis_map or dict(self.DEFAULT_AXIS_MAP)
        self.button_map = button_map or dict(self.DEFAULT_BUTTON_MAP)

    @property
    def name(self) -> str:
        return self.js.get_name()

    def read_raw(self) -> RawPadState:
        pygame.event.pump()

        axes: Dict[str, float] = {}
        for name, idx in self.axis_map.items():
            if idx < self.js.get_numaxes():
                axes[name] = float(self.js.get_axis(idx))

        buttons: Dict[str, int] = {}
        for name, idx in self.button_map.items():
            if idx < self.js.get_numbuttons():
                buttons[name] = int(self.js.get_button(idx))

        hat = (0, 0)
        if self.js.get_numhats() > 0:
            hat = tuple(self.js.get_hat(0))

        return RawPadState(axes=axes, buttons=buttons, hat=hat)


class XboxPygameAdapter(Controller):
    """
    RawPadState -> ControllerState, through a SwitchLayoutMapper.
    """
    def __init__(self, ctrl: XboxController, mapper: SwitchLayoutMapper):
        self.ctrl = ctrl
        self.mapper = mapper

    def read_state(self) -> ControllerState:
        return self.mapper.map(self.ctrl.read_raw())
