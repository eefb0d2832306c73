from unittest import mock

import serial

from switchcontroller import utils
from switchcontroller.controllers.types import Button, ControllerState
from switchcontroller.protocol.print_protocol import PrintOnlyTransport
from switchcontroller.runners import demo, pad_bridge

from conftest import ScriptedController


def test_demo_dry_run_prints_lines(capsys):
    assert demo.main(["--dry-run", "--sleep", "0.5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "PRESS a",
        "SLEEP 0.5",
        "PRESS y",
        "STICK l_stick 0 0",
        "STICK r_stick 0 0",
    ]


def test_demo_reports_open_failure(tmp_path):
    port = tmp_path / "ttyACM9"
    port.touch()
    with mock.patch(
        "switchcontroller.protocol.serial_transport.serial.Serial",
        side_effect=serial.SerialException("busy"),
    ):
        assert demo.main([str(port), "9600"]) == 1


def test_demo_opens_the_port_it_was_given(monkeypatch):
    monkeypatch.setattr(utils, "list_serial_candidates", lambda: ["/dev/ttyUSB7"])
    with mock.patch(
        "switchcontroller.protocol.serial_transport.serial.Serial",
        side_effect=serial.SerialException("no such device"),
    ) as opened:
        assert demo.main(["/dev/ttyACM_does_not_exist"]) == 1
    assert opened.call_args[0][0] == "/dev/ttyACM_does_not_exist"


def test_print_only_transport_records():
    t = PrintOnlyTransport(echo=False)
    t.write_line("SLEEP 1")
    t.close()
    assert t.lines == ["SLEEP 1"]
    assert t.closed


def test_pad_bridge_dry_run(monkeypatch, capsys):
    pad = ScriptedController([ControllerState().set_button(Button.A, True), KeyboardInterrupt()])
    monkeypatch.setattr(pad_bridge, "build_controller", lambda args: pad)
    assert pad_bridge.main(["--dry-run", "--hz", "1000"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "STATE 100000000000000000 0 0 0 0",
        "STATE 000000000000000000 0 0 0 0",
    ]


def test_pad_bridge_without_a_pad(monkeypatch, caplog):
    def no_pad(args):
        raise RuntimeError("No controller found at index 0")

    monkeypatch.setattr(pad_bridge, "build_controller", no_pad)
    assert pad_bridge.main(["--dry-run"]) == 1
    assert "No controller found" in caplog.text
