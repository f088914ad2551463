import math
import struct
import zlib

# -------------------------------------------------------------------------------------------------
# source scenes are right-handed with y up, the renderer is left-handed with y up.
# positions and directions get their depth negated and are then rotated 180 degrees about y.

# rotation of 180 degrees about the up axis, written out exactly (sin(pi) is not zero in floats)
ROTATION_Y_180 = (
	(-1.0, 0.0, 0.0),
	(0.0, 1.0, 0.0),
	(0.0, 0.0, -1.0),
)


# -------------------------------------------------------------------------------------------------
def to_float32(value):
	"""
	Narrows a python float to the nearest 32-bit float, the precision of the mesh asset.
	Values beyond the 32-bit range become infinities of the same sign.
	"""
	try:
		return struct.unpack('<f', struct.pack('<f', float(value)))[0]
	except OverflowError:
		return math.copysign(math.inf, value)


# -------------------------------------------------------------------------------------------------
def transform_vec3(matrix, v):
	# zero entries are skipped so infinite components do not turn into nan
	return tuple(sum(m * c for m, c in zip(matrix[row], v) if m != 0.0) for row in range(3))


# -------------------------------------------------------------------------------------------------
def convert_vec3(v):
	"""
	Converts a right-handed source vector to the left-handed target space.

	Args:
	- v (sequence): x, y, z and optionally w, extra components are ignored.

	Returns:
	- tuple: The converted (x, y, z) narrowed to 32-bit floats.
	"""
	x, y, z = to_float32(v[0]), to_float32(v[1]), -to_float32(v[2])
	return tuple(component + 0.0 for component in transform_vec3(ROTATION_Y_180, (x, y, z)))


# -------------------------------------------------------------------------------------------------
def convert_uv(v):
	"""
	Flips the vertical texture coordinate to match a top-left texture origin.
	"""
	return (to_float32(v[0]), to_float32(1.0 - v[1]))


# -------------------------------------------------------------------------------------------------
def vertex_checksum(position, normal, tangent, uv):
	"""
	Deterministic 32-bit checksum over a full vertex attribute tuple.

	Negative zero is folded into positive zero so that tuples that compare equal
	always produce the same checksum.
	"""
	values = [component + 0.0 for component in (*position, *normal, *tangent, *uv)]
	return zlib.crc32(struct.pack('<11f', *values))
