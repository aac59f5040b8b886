from asciiframes.errors import InvalidRamp

# Dark to bright
BASIC = " .:-=+*#%@"

CLASSIC = " .'`^\",:;Il!i<>*+_-?][}{)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

RAMP_PRESETS = {
    "basic": BASIC,
    "classic": CLASSIC,
}


def resolve_ramp(spec: str) -> str:
    """Turn a preset name or a literal glyph string into a palette.

    Anything that is not a preset name is used verbatim, darkest glyph first.
    """
    ramp = RAMP_PRESETS.get(spec, spec)
    if not ramp:
        presets = ", ".join(RAMP_PRESETS)
        raise InvalidRamp(f"ramp cannot be empty (use a preset: {presets}, or a custom glyph string)")
    return ramp
