"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Digital curves.

This module contains:
- ArithmeticDSS4: online recognition of 4-connected digital straight segments
- Maximal segments of open curves and the most centered segment estimator
"""

from .arithmetic_dss import ArithmeticDSS4
from .maximal_segments import (
    MaximalSegment,
    MostCenteredMaximalSegmentEstimator,
    longest_segment,
    maximal_segments,
    normal_vector,
    tangent_angle,
    tangent_vector,
)

__all__ = [
    'ArithmeticDSS4', 'MaximalSegment', 'MostCenteredMaximalSegmentEstimator',
    'longest_segment', 'maximal_segments',
    'tangent_angle', 'tangent_vector', 'normal_vector',
]
