import json
from pathlib import Path

import pytest

from debug import debug
from main import MachineConfig, build_machine, encode_message, load_config, main
from wheels import B

MACHINE_FLAGS = ["--rotors", "I", "II", "III", "--reflector", "B", "--window", "AAA"]


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ROTOR_DEBUG", raising=False)


def _write_config(path: Path, **data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_config_fills_defaults(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "cfg.json", rotors=["I", "II", "III"], reflector="B")
    cfg = load_config(path)
    assert cfg.window == "AAA"
    assert cfg.plugs == []


def test_load_config_reports_missing_keys(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "cfg.json", window="AAA")
    with pytest.raises(ValueError, match="reflector, rotors"):
        load_config(path)


def test_build_machine_applies_every_setting() -> None:
    cfg = MachineConfig(rotors=["iii", "II", "I"], reflector="b", window="qev", plugs=["ar", "MT"])
    machine = build_machine(cfg)
    assert machine.window == "QEV"
    assert machine.reflector.wiring == B
    assert machine.pb.wires == [("A", "R"), ("M", "T")]


def test_literal_reflector_wiring_is_accepted() -> None:
    cfg = MachineConfig(rotors=["I"], reflector=B.lower())
    assert build_machine(cfg).reflector.wiring == B


def test_unknown_wheel_names_fail() -> None:
    with pytest.raises(KeyError, match="Unknown rotor"):
        build_machine(MachineConfig(rotors=["IX"], reflector="B"))
    with pytest.raises(ValueError):
        build_machine(MachineConfig(rotors=["I"], reflector="Z"))


def test_encode_message_rewinds_and_cleans_input() -> None:
    cfg = MachineConfig(rotors=["I", "II", "III"], reflector="B", plugs=["AR"])
    machine = build_machine(cfg)
    cipher = encode_message(machine, cfg, "attack at dawn!")
    assert len(cipher) == len("ATTACKATDAWN")
    assert encode_message(machine, cfg, cipher) == "ATTACKATDAWN"


def test_config_round_trips_through_dict() -> None:
    cfg = MachineConfig(rotors=["I", "II"], reflector="C", window="XY", plugs=["AB"])
    assert MachineConfig.from_dict(cfg.to_dict()) == cfg


def test_cli_one_shot_encodes_and_decodes(capsys: pytest.CaptureFixture[str]) -> None:
    main(["-m", "hello world", "--block", "0", *MACHINE_FLAGS])
    cipher = capsys.readouterr().out.strip()
    assert len(cipher) == 10

    main(["-m", cipher, "--block", "0", *MACHINE_FLAGS])
    assert capsys.readouterr().out.strip() == "HELLOWORLD"


def test_cli_groups_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(["-m", "abcdefghijkl", *MACHINE_FLAGS])
    groups = capsys.readouterr().out.split()
    assert [len(g) for g in groups] == [5, 5, 2]


def test_cli_reads_config_file_and_flags_override(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path / "rotor_config.json", rotors=["I", "II", "III"], reflector="B", window="ZZZ")
    main(["-m", "secret", "--block", "0"])
    from_default = capsys.readouterr().out.strip()

    main(["-m", "secret", "--block", "0", "--config", str(path)])
    assert capsys.readouterr().out.strip() == from_default

    main(["-m", "secret", "--block", "0", "--window", "AAA"])
    assert capsys.readouterr().out.strip() != from_default


def test_cli_exits_on_bad_setup(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Failed to set up machine"):
        main(["-m", "x", "--config", str(tmp_path / "missing.json")])
    with pytest.raises(SystemExit, match="already wired"):
        main(["-m", "x", *MACHINE_FLAGS, "--plugs", "AR", "AB"])


def test_cli_log_file_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log = tmp_path / "run.log"
    main(["-m", "abc", "--block", "0", *MACHINE_FLAGS, "--debug", "encipher", "--log-file", str(log)])
    cipher = capsys.readouterr().out.strip()

    debug.close_files()
    lines = [ln for ln in log.read_text(encoding="utf-8").splitlines() if "[ENCIPHER]" in ln]
    assert [ln.rsplit(" ", 1)[-1] for ln in lines] == [f"{p}->{c}" for p, c in zip("ABC", cipher)]
