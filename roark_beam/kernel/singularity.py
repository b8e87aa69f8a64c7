# roark_beam/kernel/singularity.py
"""Singularity (step) function used by the integrated beam equations."""


def step(x: float, a: float, n: float) -> float:
    """
    Singularity function <x - a>^n.

    Returns 0 for x <= a and (x - a)^n for x > a. The value at x == a is 0
    for every n, including n = 0, so a load sitting exactly at a section
    does not act on that section yet.

    Args:
        x: Cross-section coordinate
        a: Location of the discontinuity (load point)
        n: Non-negative exponent

    Returns:
        <x - a>^n as a float
    """
    if x <= a:
        return 0.0
    return float((x - a) ** n)
