"""
Static catalogs for the photoelectric simulator.

The metal catalog and the wavelength color bands never change at runtime,
so they are module-level immutable constants rather than per-call lookups.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Metal:
    """A photocathode material and its work function."""
    name: str
    symbol: str
    work_function_ev: float
    color: str  # Plate color for display


# Index order is the selection order in the material drop-down.
# Index 0 is the experiment default.
METALS: Tuple[Metal, ...] = (
    Metal("Sodium", "Na", 2.28, "#fbbf24"),
    Metal("Potassium", "K", 2.3, "#a855f7"),
    Metal("Cesium", "Cs", 2.1, "#06b6d4"),
    Metal("Copper", "Cu", 4.7, "#f97316"),
    Metal("Silver", "Ag", 4.73, "#6b7280"),
    Metal("Aluminum", "Al", 4.08, "#60a5fa"),
    Metal("Gold", "Au", 5.1, "#fbbf24"),
)


@dataclass(frozen=True)
class WavelengthBand:
    """Display color for wavelengths below ``upper_nm``."""
    upper_nm: float
    color: str
    label: str


# Bands are checked in order; the first band whose upper bound exceeds
# the wavelength wins. The last band is open-ended.
WAVELENGTH_BANDS: Tuple[WavelengthBand, ...] = (
    WavelengthBand(380.0, "#8b5cf6", "ultraviolet"),
    WavelengthBand(450.0, "#6366f1", "violet"),
    WavelengthBand(495.0, "#06b6d4", "blue"),
    WavelengthBand(570.0, "#10b981", "green"),
    WavelengthBand(590.0, "#fbbf24", "yellow"),
    WavelengthBand(620.0, "#f97316", "orange"),
    WavelengthBand(float("inf"), "#ef4444", "red"),
)


def get_metal(index: int) -> Metal:
    """
    Look up a metal by catalog index.

    Args:
        index: Position in METALS

    Returns:
        Metal: The catalog entry

    Raises:
        IndexError: If index is outside the catalog
    """
    if not 0 <= index < len(METALS):
        raise IndexError(f"Metal index {index} out of range (0-{len(METALS) - 1})")
    return METALS[index]


def find_metal(key: Union[int, str]) -> Metal:
    """
    Find a metal by index, name or chemical symbol (case-insensitive).

    Raises:
        KeyError: If no metal matches
    """
    if isinstance(key, int):
        try:
            return get_metal(key)
        except IndexError as e:
            raise KeyError(str(e))

    text = key.strip()
    if text.isdigit():
        return find_metal(int(text))

    lowered = text.lower()
    for metal in METALS:
        if metal.name.lower() == lowered or metal.symbol.lower() == lowered:
            return metal
    raise KeyError(key)


def metal_index(metal: Metal) -> int:
    """Return the catalog index of a metal."""
    return METALS.index(metal)


def wavelength_band(wavelength_nm: float) -> WavelengthBand:
    """Return the display band containing a wavelength."""
    for band in WAVELENGTH_BANDS:
        if wavelength_nm < band.upper_nm:
            return band
    return WAVELENGTH_BANDS[-1]


def wavelength_to_color(wavelength_nm: float) -> str:
    """Map a wavelength in nm to its display color (hex string)."""
    return wavelength_band(wavelength_nm).color
