"""
Angle conversion, degree-unit trigonometry and coordinate transforms.

Includes radians/degrees conversion, sine/cosine/tangent/arctangent taking
degrees, angle normalization, and cartesian/polar point conversion.
"""
