"""
Orrery Propagation Engine
=========================
Analytic position and velocity of solar-system bodies for a planetarium
renderer, in the shared ecliptic J2000 frame.

Architecture:
    - Anomaly solver for elliptic, parabolic and hyperbolic orbits
    - Kepler propagator with cached velocity and parent-frame rotation
    - Gimbal pseudo-orbit for virtual observer viewpoints
    - Precessing-ellipse secular theory for small planetary satellites
    - Element construction from catalogue values
"""

__version__ = "0.1.0"
