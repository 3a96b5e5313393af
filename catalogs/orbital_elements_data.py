"""
Orbital Elements Record Set

Keplerian elements at J2000 for the planets, keyed by lowercase body name.
Derived from JPL "Approximate Positions of the Planets" (Standish 1992):
    omega = w_bar - Om
    M0    = L - w_bar
Angles in degrees, a in AU.

The Sun and Pluto are deliberately absent: they are placed with the circular
fallback.
"""

ORBITAL_ELEMENTS_JSON = """
{
  "mercury": {"epoch_jd": 2451545.0, "a": 0.38709927, "e": 0.20563593, "i": 7.00497902,
              "omega": 29.12703035, "Om": 48.33076593, "M0": 174.79252722},
  "venus":   {"epoch_jd": 2451545.0, "a": 0.72333566, "e": 0.00677672, "i": 3.39467605,
              "omega": 54.92262463, "Om": 76.67984255, "M0": 50.37663232},
  "earth":   {"epoch_jd": 2451545.0, "a": 1.00000261, "e": 0.01671123, "i": 0.0,
              "omega": 102.93768193, "Om": 0.0, "M0": 357.52688973},
  "mars":    {"epoch_jd": 2451545.0, "a": 1.52371034, "e": 0.09339410, "i": 1.84969142,
              "omega": 286.4968315, "Om": 49.55953891, "M0": 19.39019754},
  "jupiter": {"epoch_jd": 2451545.0, "a": 5.20288700, "e": 0.04838624, "i": 1.30439695,
              "omega": 274.25457074, "Om": 100.47390909, "M0": 19.66796068},
  "saturn":  {"epoch_jd": 2451545.0, "a": 9.53667594, "e": 0.05386179, "i": 2.48599187,
              "omega": 338.93645383, "Om": 113.66242448, "M0": 317.35536592},
  "uranus":  {"epoch_jd": 2451545.0, "a": 19.18916464, "e": 0.04725744, "i": 0.77263783,
              "omega": 96.93735127, "Om": 74.01692503, "M0": 142.28382821},
  "neptune": {"epoch_jd": 2451545.0, "a": 30.06992276, "e": 0.00859048, "i": 1.77004347,
              "omega": 273.18053653, "Om": 131.78422574, "M0": 259.91520804}
}
"""
