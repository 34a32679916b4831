# field_writer.py
from pathlib import Path

FIELD_TEMPLATE = """\
FoamFile
{{
    version     2.0;
    format      ascii;
    class       volScalarField;
    object      {name};
}}

dimensions      [0 0 0 0 0 0 0];

internalField   uniform {value};

boundaryField
{{
    ".*"
    {{
        type            calculated;
        value           uniform {value};
    }}
}}
"""


def field_path(case_dir, time_name: str, field_name: str, rank: int | None = None) -> Path:
    """<case>/processor<rank>/<time>/<field> for parallel runs, <case>/<time>/<field> otherwise."""
    base = Path(case_dir)
    if rank is not None:
        base = base / f"processor{rank}"
    return base / time_name / field_name


def render_uniform_field(field_name: str, value: int) -> str:
    return FIELD_TEMPLATE.format(name=field_name, value=value)


def write_uniform_field(path, field_name: str, value: int) -> Path:
    path = Path(path)
    time_dir = path.parent
    # case (or processor) directory must exist; the time directory may not
    if not time_dir.parent.is_dir():
        raise FileNotFoundError(f"Directory not found: {time_dir.parent}")
    time_dir.mkdir(exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(render_uniform_field(field_name, value))
    return path
