import textwrap
from pathlib import Path

import pytest

import liquid_cli
from liquid_props import CONSTANTS, PROPERTIES

EXAMPLE = Path(__file__).resolve().parent.parent / "examples" / "liquidDict.yaml"


def write_dict(tmp_path, text):
    path = tmp_path / "liquidDict.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return str(path)


def constant_dict(tmp_path):
    body = "\n".join(f"  {k}: 1.5" for k in CONSTANTS + PROPERTIES)
    return write_dict(tmp_path, f"liquid: Foo\np: 2.0e+5\nT: 350\nFoo:\n  type: constant\n{body}\n")


def test_report_layout(tmp_path, capsys):
    rc = liquid_cli.main([constant_dict(tmp_path)])
    out = capsys.readouterr().out
    assert rc == 0
    lines = out.splitlines()
    assert lines[0] == "Liquid: Foo"
    assert "Physical constants:" in lines
    assert "    molecular weight, W                 = 1.5 [kg/kmol]" in lines
    assert "    critical compressibility factor, Zc = 1.5 []" in lines
    assert "Properties at T=350 and p=200000:" in lines
    assert "    vapour diffusivity, D               = 1.5 [m2/s]" in lines


def test_example_dictionary(capsys):
    assert liquid_cli.main([str(EXAMPLE)]) == 0
    out = capsys.readouterr().out
    assert "Liquid: H2O" in out
    assert "    density, rho                        = 996.5 [kg/m3]" in out


def test_missing_file(tmp_path, capsys):
    rc = liquid_cli.main([str(tmp_path / "nope.yaml")])
    assert rc == 2
    assert "not found" in capsys.readouterr().err


@pytest.mark.parametrize("text,needle", [
    ("p: 1\nT: 300\n", "'liquid'"),
    ("liquid: Foo\np: 1\nT: 300\n", "'Foo'"),
    ("liquid: Foo\np: 1\nT: 300\nFoo:\n  type: bogus\n", "Valid types"),
    ("- just\n- a list\n", "top level"),
    ("liquid: [unterminated\n", "Could not parse"),
])
def test_bad_dictionaries(tmp_path, capsys, text, needle):
    rc = liquid_cli.main([write_dict(tmp_path, text)])
    assert rc == 2
    assert needle in capsys.readouterr().err


def test_format_report_uses_model_methods():
    class Fake:
        def __getattr__(self, name):
            if name in PROPERTIES:
                return lambda p, T: p + T
            return 0.0

    text = liquid_cli.format_report("X", Fake(), 1.0, 2.0)
    assert "    density, rho                        = 3 [kg/m3]" in text
