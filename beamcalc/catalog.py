"""
CATALOG: MATERIAL STIFFNESS
===========================

PURPOSE:
--------
A fixed table of elastic moduli that the analysis can reference by name.
Instead of typing E=200e9 every time, callers pass "steel" and the catalog
resolves it.

ENGINEERING CONTEXT:
--------------------
Only the Young's modulus matters for linear Euler-Bernoulli bending:
- Steel:    ~200 GPa
- Copper:   ~120 GPa
- Aluminum:  ~70 GPa
- Wood:      ~12 GPa (along the grain)

LOOKUP RULES:
-------------
1. "custom" + an explicit value in GPa  -> value * 1e9
2. a known identifier                   -> catalog value
3. anything else                        -> steel

Rule 3 is a deliberate default. The catalog never signals an unknown
identifier; a caller that wants strict behaviour has to check
`material_id in catalog` itself.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


CUSTOM_MATERIAL = "custom"
FALLBACK_MATERIAL = "steel"

GPA = 1e9  # Pa per GPa


@dataclass(frozen=True)
class Material:
    """
    Material entry for the catalog.

    Parameters:
    -----------
    name : str
        Identifier used in lookups (e.g., "steel", "wood")

    E : float
        Young's modulus (Pa = N/m²)
    """
    name: str
    E: float  # Young's modulus (Pa)


MATERIALS = (
    Material(name="steel", E=200e9),
    Material(name="aluminum", E=70e9),
    Material(name="copper", E=120e9),
    Material(name="wood", E=12e9),
)


@dataclass(frozen=True)
class MaterialCatalog:
    """
    Read-only mapping from material identifier to elastic modulus (Pa).

    Built once and shared; the underlying mapping is a MappingProxyType so
    nothing can add or change an entry after construction.
    """
    moduli: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        if FALLBACK_MATERIAL not in self.moduli:
            raise ValueError(f"Catalog must define '{FALLBACK_MATERIAL}' (the fallback material).")
        object.__setattr__(self, "moduli", MappingProxyType(dict(self.moduli)))

    @classmethod
    def from_materials(cls, materials: Iterable[Material]) -> "MaterialCatalog":
        return cls(moduli={m.name: m.E for m in materials})

    def __contains__(self, material_id) -> bool:
        return material_id in self.moduli

    def names(self) -> list[str]:
        return list(self.moduli)

    def elastic_modulus(self, material_id: str, custom_gpa: Optional[float] = None) -> float:
        """
        Resolve a material identifier to Young's modulus in Pa.

        Parameters:
        -----------
        material_id : str
            Catalog key, or "custom"
        custom_gpa : float, optional
            Modulus in GPa, only used together with "custom"

        Returns:
        --------
        float
            E in Pa. Unknown identifiers (and "custom" without a value)
            resolve to steel.
        """
        if material_id == CUSTOM_MATERIAL and custom_gpa is not None:
            return custom_gpa * GPA
        return self.moduli.get(material_id, self.moduli[FALLBACK_MATERIAL])


DEFAULT_CATALOG = MaterialCatalog.from_materials(MATERIALS)


def elastic_modulus(
    material_id: str,
    custom_gpa: Optional[float] = None,
    catalog: MaterialCatalog = DEFAULT_CATALOG,
) -> float:
    """Module-level shortcut for `catalog.elastic_modulus(...)`."""
    return catalog.elastic_modulus(material_id, custom_gpa)
