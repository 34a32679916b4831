#!/usr/bin/env python3
"""
liquid_cli.py — Prints liquid properties for a given temperature and pressure.

Usage:
    python liquid_cli.py liquidDict.yaml

liquidDict.yaml:
    liquid: H2O
    p: 1.0e+5
    T: 300
    H2O:
      type: constant
      W: 18.015
      ...
"""

import os
import sys
import argparse
import traceback

import yaml

from liquid_props import MissingEntryError, UnknownModelError, new_liquid

CONSTANT_ROWS = (
    ("molecular weight, W", "W", "kg/kmol"),
    ("critical temperature, Tc", "Tc", "K"),
    ("critical pressure, Pc", "Pc", "Pa"),
    ("critical volume, Vc", "Vc", "m3/mol"),
    ("critical compressibility factor, Zc", "Zc", ""),
    ("triple point temperature, Tt", "Tt", "K"),
    ("triple point pressure, Pt", "Pt", "Pa"),
    ("normal boiling temperature, Tb", "Tb", "K"),
    ("dipole moment, dipm", "dipm", ""),
    ("pitzer's accentric factor, omega", "omega", ""),
    ("solubility parameter, delta", "delta", "(J/m3)^0.5"),
)

PROPERTY_ROWS = (
    ("density, rho", "rho", "kg/m3"),
    ("vapour pressure, pv", "pv", "Pa"),
    ("heat of vapourisation, hl", "hl", "J/kg"),
    ("liquid heat capacity, Cp", "Cp", "J/kg/K"),
    ("liquid enthalpy, h", "h", "J/kg"),
    ("ideal gas heat capacity, Cpg", "Cpg", "J/kg/K"),
    ("liquid viscosity, mu", "mu", "Pa.s"),
    ("vapour viscosity, mug", "mug", "Pa.s"),
    ("liquid thermal conductivity, K", "K", "W/m/K"),
    ("vapour thermal conductivity, Kg", "Kg", "W/m/K"),
    ("surface tension, sigma", "sigma", "N/m"),
    ("vapour diffusivity, D", "D", "m2/s"),
)

LABEL_WIDTH = 36


def _row(label: str, value: float, unit: str) -> str:
    return f"    {label:<{LABEL_WIDTH}}= {value:g} [{unit}]"


def format_report(liquid_name: str, fluid, p: float, T: float) -> str:
    lines = [f"Liquid: {liquid_name}", "", "Physical constants:"]
    lines += [_row(label, getattr(fluid, key), unit) for label, key, unit in CONSTANT_ROWS]
    lines += ["", f"Properties at T={T:g} and p={p:g}:"]
    lines += [_row(label, getattr(fluid, key)(p, T), unit) for label, key, unit in PROPERTY_ROWS]
    lines.append("")
    return "\n".join(lines)


def load_dict(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a dictionary")
    return data


def read_case(data: dict):
    """Returns (liquid_name, fluid, p, T) from a loaded dictionary."""
    for key in ("liquid", "p", "T"):
        if key not in data:
            raise MissingEntryError(f"Entry {key!r} not found in dictionary")
    name = str(data["liquid"])
    if name not in data:
        raise MissingEntryError(f"Sub-dictionary {name!r} not found in dictionary")
    p = float(data["p"])
    T = float(data["T"])
    return name, new_liquid(name, data[name]), p, T


def do_report(args: argparse.Namespace) -> int:
    if not os.path.exists(args.dict_path):
        print(f"[error] dictionary: {args.dict_path} not found", file=sys.stderr)
        return 2

    try:
        data = load_dict(args.dict_path)
        name, fluid, p, T = read_case(data)
    except yaml.YAMLError as e:
        print(f"[error] Could not parse {args.dict_path}: {e}", file=sys.stderr)
        return 2
    except (MissingEntryError, UnknownModelError) as e:
        print(f"[error] {e.args[0]}", file=sys.stderr)
        if args.verbose: traceback.print_exc()
        return 2
    except (ValueError, TypeError) as e:
        print(f"[error] Invalid dictionary: {e}", file=sys.stderr)
        if args.verbose: traceback.print_exc()
        return 2

    if args.verbose:
        print(f"[info] Using {fluid.type_name} model for {name}")
    print(format_report(name, fluid, p, T))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Output liquid properties for a given temperature and pressure"
    )
    p.add_argument("dict_path", metavar="dict", help="YAML properties dictionary")
    p.add_argument("--verbose", action="store_true", help="Verbose output")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return do_report(args)


if __name__ == "__main__":
    sys.exit(main())
