import logging

from main import DemoConfig, main, run_demo
from vectorlib import Vector3


def test_run_demo_default_report():
    lines = run_demo()
    assert lines[0] == "Dot Product: 792.0"
    assert lines[1] == "Cross Product (u x v): <168.0, 168.0, 84.0>"
    assert lines[2] == "Cross Product (v x u): <-168.0, -168.0, -84.0>"
    assert lines[3] == "u Scaled to 2.0x: <-16.0, -4.0, 40.0>"
    assert lines[4] == "u Scaled to 0.5x: <-4.0, -1.0, 10.0>"
    assert lines[5].startswith("u projected onto v: <")
    assert lines[6].startswith("v projected onto u: <")
    assert len(lines) == 7


def test_run_demo_custom_config():
    config = DemoConfig(u=Vector3(1, 0, 0), v=Vector3(0, 1, 0), scales=[3.0])
    lines = run_demo(config)
    assert lines == [
        "Dot Product: 0.0",
        "Cross Product (u x v): <0.0, 0.0, 1.0>",
        "Cross Product (v x u): <0.0, 0.0, -1.0>",
        "u Scaled to 3.0x: <3.0, 0.0, 0.0>",
        "u projected onto v: <0.0, 0.0, 0.0>",
        "v projected onto u: <0.0, 0.0, 0.0>",
    ]


def test_main_prints_report(capsys, caplog):
    with caplog.at_level(logging.DEBUG):
        main(["--verbose"])
    out = capsys.readouterr().out.splitlines()
    assert out == run_demo()
    assert any("Running demo" in r.message for r in caplog.records)
