from enum import Enum, IntEnum


# -------------------------------------------------------------------------------------------------
class MappingMode(Enum):
	# How the values of a layer element are keyed
	NONE = 'none'
	BY_CONTROL_POINT = 'by_control_point'
	BY_POLYGON_VERTEX = 'by_polygon_vertex'
	BY_POLYGON = 'by_polygon'
	BY_EDGE = 'by_edge'
	ALL_SAME = 'all_same'


# -------------------------------------------------------------------------------------------------
class ReferenceMode(Enum):
	# Whether a layer element stores values directly or through the index array
	DIRECT = 'direct'
	INDEX = 'index'
	INDEX_TO_DIRECT = 'index_to_direct'


# -------------------------------------------------------------------------------------------------
class ShadingModel(Enum):
	PHONG = 'phong'
	LAMBERT = 'lambert'
	UNKNOWN = 'unknown'

	# ---------------------------------------------------------------------------------------------
	@classmethod
	def from_name(cls, name):
		if isinstance(name, cls):
			return name
		try:
			return cls(str(name).lower())
		except ValueError:
			return cls.UNKNOWN


# -------------------------------------------------------------------------------------------------
class Severity(IntEnum):
	VERBOSE = 0
	WARNING = 1
	ERROR = 2


# -------------------------------------------------------------------------------------------------
class DiagnosticCode(Enum):
	# Informational
	PROGRESS = 'progress'
	# Fatal to the conversion
	NO_MESH = 'no_mesh'
	POLYGON_SIZE = 'polygon_size'
	INVALID_POLYGON = 'invalid_polygon'
	INDEX_OVERFLOW = 'index_overflow'
	# Data integrity
	UNSUPPORTED_ENCODING = 'unsupported_encoding'
	INVALID_LAYER = 'invalid_layer'
	ATTRIBUTE_CONFLICT = 'attribute_conflict'
	MATERIAL_INDEX = 'material_index'
	SHADING_MODEL = 'shading_model'
	MISSING_TEXTURE = 'missing_texture'
	NO_MATERIALS = 'no_materials'
	# Data quality
	MULTIPLE_MESHES = 'multiple_meshes'
	MISSING_NORMAL = 'missing_normal'
	MISSING_TANGENT = 'missing_tangent'
	MISSING_UV = 'missing_uv'
	MISSING_MATERIAL_INDEX = 'missing_material_index'
	CHECKSUM_COLLISION = 'checksum_collision'


# -------------------------------------------------------------------------------------------------
class OutputFormat(Enum):
	JSON = 'json'
	BINARY = 'binary'

	# ---------------------------------------------------------------------------------------------
	@classmethod
	def from_name(cls, name):
		if isinstance(name, cls):
			return name
		try:
			return cls(str(name).lower())
		except ValueError:
			raise ValueError(F"unknown export format : {name}")
