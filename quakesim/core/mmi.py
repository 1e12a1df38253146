"""Modified Mercalli Intensity (MMI) classification - Pure functions.

Maps the attenuation model's unitless intensity onto the twelve MMI bands
(I-XII) with qualitative descriptions. Bands are half-open [min, max)
intervals that partition [0, inf); the top band is open-ended.

Reference: USGS Modified Mercalli Intensity Scale.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class MMIEntry:
    """One band of the MMI scale.

    Attributes:
        level: Roman numeral (I-XII)
        numeric_level: 1-12
        min_intensity: Inclusive lower bound
        max_intensity: Exclusive upper bound (inf for XII)
        name: Qualitative name (e.g., "Very strong")
        shaking: Perceived shaking
        damage: Potential damage
        color: Hex color for display
        description: Observed effects
    """
    level: str
    numeric_level: int
    min_intensity: float
    max_intensity: float
    name: str
    shaking: str
    damage: str
    color: str
    description: str

    def contains(self, intensity: float) -> bool:
        """Check if an intensity falls inside this band."""
        return self.min_intensity <= intensity < self.max_intensity


MMI_SCALE: tuple[MMIEntry, ...] = (
    MMIEntry(
        level="I",
        numeric_level=1,
        min_intensity=0.0,
        max_intensity=1.5,
        name="Not felt",
        shaking="Not felt",
        damage="None",
        color="#FFFFFF",
        description="Not felt except by a very few under especially favorable conditions.",
    ),
    MMIEntry(
        level="II",
        numeric_level=2,
        min_intensity=1.5,
        max_intensity=2.5,
        name="Weak",
        shaking="Weak",
        damage="None",
        color="#ACD8E9",
        description="Felt only by a few persons at rest, especially on upper floors of buildings.",
    ),
    MMIEntry(
        level="III",
        numeric_level=3,
        min_intensity=2.5,
        max_intensity=3.5,
        name="Weak",
        shaking="Weak",
        damage="None",
        color="#ACD8E9",
        description=(
            "Felt quite noticeably by persons indoors. Many people do not recognize "
            "it as an earthquake. Standing motor cars may rock slightly."
        ),
    ),
    MMIEntry(
        level="IV",
        numeric_level=4,
        min_intensity=3.5,
        max_intensity=4.5,
        name="Light",
        shaking="Light",
        damage="None",
        color="#7BC5A6",
        description=(
            "Felt indoors by many, outdoors by few. Sensation like heavy truck "
            "striking building. Dishes, windows, doors disturbed."
        ),
    ),
    MMIEntry(
        level="V",
        numeric_level=5,
        min_intensity=4.5,
        max_intensity=5.5,
        name="Moderate",
        shaking="Moderate",
        damage="Very light",
        color="#FDE357",
        description=(
            "Felt by nearly everyone; many awakened. Some dishes, windows broken. "
            "Unstable objects overturned."
        ),
    ),
    MMIEntry(
        level="VI",
        numeric_level=6,
        min_intensity=5.5,
        max_intensity=6.5,
        name="Strong",
        shaking="Strong",
        damage="Light",
        color="#FDB462",
        description=(
            "Felt by all, many frightened. Some heavy furniture moved; a few "
            "instances of fallen plaster. Damage slight."
        ),
    ),
    MMIEntry(
        level="VII",
        numeric_level=7,
        min_intensity=6.5,
        max_intensity=7.5,
        name="Very strong",
        shaking="Very strong",
        damage="Moderate",
        color="#FB923C",
        description=(
            "Damage negligible in buildings of good design and construction; "
            "slight to moderate in well-built ordinary structures; considerable "
            "damage in poorly built or badly designed structures."
        ),
    ),
    MMIEntry(
        level="VIII",
        numeric_level=8,
        min_intensity=7.5,
        max_intensity=8.5,
        name="Severe",
        shaking="Severe",
        damage="Moderate to heavy",
        color="#F87171",
        description=(
            "Damage slight in specially designed structures; considerable damage "
            "in ordinary substantial buildings with partial collapse. Damage great "
            "in poorly built structures. Heavy furniture overturned."
        ),
    ),
    MMIEntry(
        level="IX",
        numeric_level=9,
        min_intensity=8.5,
        max_intensity=9.5,
        name="Violent",
        shaking="Violent",
        damage="Heavy",
        color="#DC2626",
        description=(
            "Damage considerable in specially designed structures; well-designed "
            "frame structures thrown out of plumb. Buildings shifted off "
            "foundations. Ground cracked conspicuously."
        ),
    ),
    MMIEntry(
        level="X",
        numeric_level=10,
        min_intensity=9.5,
        max_intensity=10.5,
        name="Extreme",
        shaking="Extreme",
        damage="Very heavy",
        color="#991B1B",
        description=(
            "Some well-built wooden structures destroyed; most masonry and frame "
            "structures destroyed with foundations. Rails bent."
        ),
    ),
    MMIEntry(
        level="XI",
        numeric_level=11,
        min_intensity=10.5,
        max_intensity=11.5,
        name="Extreme",
        shaking="Extreme",
        damage="Very heavy",
        color="#7F1D1D",
        description="Few, if any structures remain standing. Bridges destroyed. Rails bent greatly.",
    ),
    MMIEntry(
        level="XII",
        numeric_level=12,
        min_intensity=11.5,
        max_intensity=math.inf,
        name="Extreme",
        shaking="Extreme",
        damage="Very heavy",
        color="#450A0A",
        description="Total damage. Waves seen on ground surfaces. Objects thrown into the air.",
    ),
)

_ROMAN_TO_NUMERIC = {entry.level: entry.numeric_level for entry in MMI_SCALE}

_SIMPLE_DESCRIPTIONS = {
    3: "Felt by people at rest, indoors",
    4: "Felt by most people indoors",
    5: "Felt by everyone, minor damage possible",
    6: "Slight damage to buildings",
    7: "Moderate damage to ordinary buildings",
    8: "Considerable damage, buildings may collapse",
    9: "Heavy damage, ground cracks visible",
    10: "Most buildings destroyed",
}

# MMI levels at which effects become noticeable
FELT_LEVEL = 3
DAMAGING_LEVEL = 6
SEVERE_LEVEL = 8


def classify(intensity: float, scale: tuple[MMIEntry, ...] = MMI_SCALE) -> MMIEntry:
    """Convert an intensity value to its MMI band.

    Pure function. Never raises: negative, NaN or non-numeric intensity maps to MMI I,
    anything beyond the last finite bound maps to MMI XII.

    Args:
        intensity: Intensity from the attenuation model
        scale: Ordered, contiguous MMI bands

    Returns:
        The MMI band containing the intensity
    """
    if not isinstance(intensity, (int, float)) or math.isnan(intensity) or intensity < 0:
        return scale[0]

    for entry in scale:
        if entry.contains(intensity):
            return entry

    return scale[-1]


def numeric_level(intensity: float) -> int:
    """Numeric MMI level (1-12). Pure function."""
    return classify(intensity).numeric_level


def mmi_level(intensity: float) -> str:
    """Roman numeral MMI level (I-XII). Pure function."""
    return classify(intensity).level


def mmi_color(intensity: float) -> str:
    """Hex color for the intensity's MMI band. Pure function."""
    return classify(intensity).color


def is_felt(intensity: float) -> bool:
    """True when shaking is noticeably felt (MMI III or above)."""
    return numeric_level(intensity) >= FELT_LEVEL


def is_damaging(intensity: float) -> bool:
    """True when buildings are expected to be damaged (MMI VI or above)."""
    return numeric_level(intensity) >= DAMAGING_LEVEL


def is_severe(intensity: float) -> bool:
    """True for severe damage (MMI VIII or above)."""
    return numeric_level(intensity) >= SEVERE_LEVEL


def estimate_pga(intensity: float) -> float:
    """Rough Peak Ground Acceleration estimate, in %g.

    Pure function. Uses the Wald et al. (1999) conversion
    PGA = 10^((MMI - 3.7) / 2.2) on the numeric MMI level; not rigorous.
    """
    pga_in_g = 10 ** ((numeric_level(intensity) - 3.7) / 2.2)
    return max(pga_in_g * 100, 0.0)


def simple_description(intensity: float) -> str:
    """One-line description of expected effects. Pure function."""
    level = numeric_level(intensity)

    if level <= 2:
        return "Not felt by most people"
    if level >= 11:
        return "Total devastation"
    return _SIMPLE_DESCRIPTIONS[level]


def mmi_scale() -> tuple[MMIEntry, ...]:
    """Return the full MMI scale, lowest band first."""
    return MMI_SCALE


def intensity_range_for_level(level: str | int) -> tuple[float, float] | None:
    """Inverse lookup: intensity interval [min, max) for an MMI level.

    Pure function. Roman numerals are case-insensitive; an unrecognized
    numeral falls back to MMI I.

    Args:
        level: Roman numeral ("VII") or number (7)

    Returns:
        (min_intensity, max_intensity), or None for an unknown number
    """
    if isinstance(level, str):
        numeric = _ROMAN_TO_NUMERIC.get(level.strip().upper(), 1)
    else:
        numeric = level

    for entry in MMI_SCALE:
        if entry.numeric_level == numeric:
            return (entry.min_intensity, entry.max_intensity)

    return None
