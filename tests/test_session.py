from __future__ import annotations

from typing import List

from smarthome.config import AppConfig
from smarthome.devices import Light
from smarthome.io_adapter import ScriptedIO
from smarthome.session import WELCOME, SmartHomeSession


def _run(lines: List[str], **config) -> tuple[SmartHomeSession, ScriptedIO]:
    cfg = AppConfig(use_color=False, show_welcome=False, **config)
    io = ScriptedIO.from_lines(lines)
    session = SmartHomeSession(io=io, config=cfg)
    session.run()
    return session, io


def test_scenario_on_status_undo_status_exit() -> None:
    session, io = _run(["add light Lamp", "on Lamp", "status", "undo", "status", "exit", "status"])

    out = io.output
    assert "[OK] Device 'Lamp' added." in out
    assert ">>> Light (Lamp) shines brightly." in out
    assert "[UNDO] Undoing last action..." in out
    assert ">>> Light (Lamp) goes dark." in out

    statuses = [line for line in out if line.startswith("Lamp\t")]
    assert statuses == ["Lamp\t: [ON]", "Lamp\t: [OFF]"]
    # "status" after exit was never read
    assert io.lines == ["status"]


def test_added_device_is_off() -> None:
    for type_tag in ("light", "ac"):
        session, io = _run([f"add {type_tag} Dev", "status"])
        assert "Dev\t: [OFF]" in io.output
        assert session.registry.get("Dev").is_on is False


def test_on_then_off() -> None:
    session, io = _run(["add ac Cooler", "on Cooler", "off Cooler", "status"])
    assert ">>> Air conditioner (Cooler) cools the air." in io.output
    assert ">>> Air conditioner (Cooler) is switched off." in io.output
    assert io.output[-2] == "Cooler\t: [OFF]"
    assert len(session.history) == 2


def test_undo_with_empty_history() -> None:
    session, io = _run(["add light Lamp", "undo"])
    assert io.output[-1] == "[INFO] Nothing to undo."
    assert session.registry.get("Lamp").is_on is False


def test_duplicate_add_keeps_original_device() -> None:
    session, io = _run(["add light L1", "on L1", "add light L1", "add ac L1"])
    errors = [line for line in io.output if line.startswith("[ERROR]")]
    assert errors == ["[ERROR] Device 'L1' already exists!"] * 2
    device = session.registry.get("L1")
    assert device.is_on is True
    assert type(device).__name__ == "Light"


def test_unknown_type_adds_nothing() -> None:
    session, io = _run(["add foo X"])
    assert io.output[-1] == "[ERROR] Unknown device type 'foo'. Available: light, ac"
    assert not session.registry.exists("X")


def test_add_requires_both_args() -> None:
    session, io = _run(["add", "add light"])
    assert io.output == ["[ERROR] Usage: add [type] [name]"] * 2
    assert len(session.registry) == 0


def test_on_unknown_device_leaves_history_untouched() -> None:
    session, io = _run(["on nonexistent", "off", "undo"])
    assert io.output == [
        "[ERROR] Device 'nonexistent' not found.",
        "[ERROR] Device '' not found.",
        "[INFO] Nothing to undo.",
    ]
    assert len(session.history) == 0


def test_unknown_and_case_sensitive_commands() -> None:
    _, io = _run(["dance", "STATUS"])
    assert io.output == [
        "[ERROR] Unknown command 'dance'. Type 'help'.",
        "[ERROR] Unknown command 'STATUS'. Type 'help'.",
    ]


def test_blank_lines_are_skipped() -> None:
    _, io = _run(["", "   ", "\t"])
    assert io.output == []
    # three blanks plus the end-of-input read
    assert io.prompts == 4


def test_status_without_devices() -> None:
    _, io = _run(["status"])
    assert io.output == ["", "--- HOME STATUS ---", "(no devices)", "-------------------"]


def test_help_lists_every_command() -> None:
    _, io = _run(["help"])
    text = io.text
    for word in ("add [light|ac] [name]", "on [name]", "off [name]", "undo", "status", "help", "exit"):
        assert word in text


def test_end_of_input_stops_loop() -> None:
    session, io = _run(["add light Lamp", "on Lamp"])
    assert session.registry.get("Lamp").is_on is True
    assert io.lines == []


def test_welcome_banner_and_colors() -> None:
    io = ScriptedIO.from_lines(["dance"])
    SmartHomeSession(io=io, config=AppConfig()).run()
    assert io.output[0] == f"\033[1m{WELCOME}\033[0m"
    assert io.output[-1] == "\033[31m[ERROR] Unknown command 'dance'. Type 'help'.\033[0m"


def test_handle_line_reports_exit() -> None:
    session = SmartHomeSession(io=ScriptedIO(), config=AppConfig(use_color=False))
    assert session.handle_line("status") is True
    assert session.handle_line("exit") is False


def test_help_shows_device_types_registered_later() -> None:
    class Fan(Light):
        type_tag = "fan"

    io = ScriptedIO.from_lines(["help", "add fan F1", "status"])
    session = SmartHomeSession(io=io, config=AppConfig(use_color=False, show_welcome=False))
    session.factory.register("fan", Fan)
    session.run()

    assert "add [light|ac|fan] [name]" in io.text
    assert "[OK] Device 'F1' added." in io.output
    assert "F1\t: [OFF]" in io.output
