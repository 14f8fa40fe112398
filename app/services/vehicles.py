"""Demo vehicle registration lookup.

A static table stands in for a registration service; there are no network
lookups.
"""

DEMO_VRM = "Y14 DRT"

# Registration → OEM tyre size
DEMO_VEHICLES: dict[str, str] = {
    DEMO_VRM: "265/30 R20",
}


def normalise_vrm(vrm: str) -> str:
    return vrm.strip().upper()


def lookup_oem_tyre(vrm: str) -> str | None:
    """Return the OEM tyre size for a registration, or None if unknown."""
    return DEMO_VEHICLES.get(normalise_vrm(vrm))
