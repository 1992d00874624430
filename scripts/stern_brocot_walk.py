"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Walks the Stern-Brocot tree down to a few fractions and prints their
continued fractions, partial fractions and Berstel splits.
"""

from digital_geometry import Config
from digital_geometry.arithmetic import SternBrocot

Config.configure_logging()

tree = SternBrocot.instance()

# Select the fractions
# ==========================================
fractions = [(3, 2), (5, 3), (13, 8), (7, 3), (355, 113)]

for p, q in fractions:
    f = tree.fraction(p, q)
    print(f"{f}  cfrac={f.cfrac()}  inverse={f.inverse()}")

    partials = [f.partial(kp) for kp in range(f.k + 1)]
    print("  partials: " + ", ".join(f"{g.p}/{g.q}" for g in partials))

    f1, nb1, f2, nb2 = f.split_berstel()
    print(f"  {p}/{q} = {nb1} * {f1.p}/{f1.q} (+) {nb2} * {f2.p}/{f2.q}")

print(f"{tree.nb_fractions()} fractions created")
