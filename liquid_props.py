# liquid_props.py
"""
Liquid property models selected by name.

Models only serve values supplied in the properties dictionary; no physical
correlations are evaluated here.
"""
import numpy as np

CONSTANTS = ("W", "Tc", "Pc", "Vc", "Zc", "Tt", "Pt", "Tb", "dipm", "omega", "delta")
PROPERTIES = ("rho", "pv", "hl", "Cp", "h", "Cpg", "mu", "mug", "K", "Kg", "sigma", "D")

_MODELS: dict[str, type] = {}


class UnknownModelError(KeyError):
    pass


class MissingEntryError(KeyError):
    pass


def register_model(name: str):
    def deco(cls):
        _MODELS[name] = cls
        cls.type_name = name
        return cls
    return deco


def model_names() -> list[str]:
    return sorted(_MODELS)


def lookup(name: str) -> type:
    try:
        return _MODELS[name]
    except KeyError:
        raise UnknownModelError(
            f"Unknown liquid model type {name!r}. Valid types are: {', '.join(model_names())}"
        ) from None


def _require(entries: dict, key: str, where: str):
    if key not in entries:
        raise MissingEntryError(f"Entry {key!r} not found in {where}")
    return entries[key]


class LiquidModel:
    type_name = ""

    def __init__(self, name: str, entries: dict):
        self.name = name
        for key in CONSTANTS:
            setattr(self, key, float(_require(entries, key, name)))

    def property(self, key: str, p: float, T: float) -> float:
        raise NotImplementedError

    # (p, T) properties
    def rho(self, p, T):   return self.property("rho", p, T)
    def pv(self, p, T):    return self.property("pv", p, T)
    def hl(self, p, T):    return self.property("hl", p, T)
    def Cp(self, p, T):    return self.property("Cp", p, T)
    def h(self, p, T):     return self.property("h", p, T)
    def Cpg(self, p, T):   return self.property("Cpg", p, T)
    def mu(self, p, T):    return self.property("mu", p, T)
    def mug(self, p, T):   return self.property("mug", p, T)
    def K(self, p, T):     return self.property("K", p, T)
    def Kg(self, p, T):    return self.property("Kg", p, T)
    def sigma(self, p, T): return self.property("sigma", p, T)
    def D(self, p, T):     return self.property("D", p, T)


@register_model("constant")
class ConstantLiquid(LiquidModel):
    """Every (p, T) property is a fixed value."""

    def __init__(self, name: str, entries: dict):
        super().__init__(name, entries)
        self.values = {k: float(_require(entries, k, name)) for k in PROPERTIES}

    def property(self, key, p, T):
        return self.values[key]


@register_model("tabulated")
class TabulatedLiquid(LiquidModel):
    """
    Properties interpolated linearly in temperature (pressure is ignored):

        T:   [280, 300, 320]
        rho: [999.9, 996.5, 989.4]

    Outside the table the end values are held.
    """

    def __init__(self, name: str, entries: dict):
        super().__init__(name, entries)
        self.T = np.asarray(_require(entries, "T", name), dtype=np.float64)
        if self.T.ndim != 1 or self.T.size == 0:
            raise ValueError(f"{name}: T must be a non-empty list")
        if np.any(np.diff(self.T) <= 0):
            raise ValueError(f"{name}: T must be strictly increasing")
        self.tables = {}
        for key in PROPERTIES:
            col = np.asarray(_require(entries, key, name), dtype=np.float64)
            if col.shape != self.T.shape:
                raise ValueError(f"{name}: {key} has {col.size} values, T has {self.T.size}")
            self.tables[key] = col

    def property(self, key, p, T):
        return float(np.interp(T, self.T, self.tables[key]))


def new_liquid(name: str, entries: dict) -> LiquidModel:
    """Model type comes from the 'type' entry, else the sub-dictionary name."""
    if not isinstance(entries, dict):
        raise ValueError(f"{name}: expected a dictionary of entries")
    cls = lookup(entries.get("type", name))
    return cls(name, entries)
