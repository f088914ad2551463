from collections import namedtuple
from mesh_formats.shared.transform import vertex_checksum

# -------------------------------------------------------------------------------------------------
# intermediate mesh data used for the duration of a single conversion
# - polygon vertices live in one list (the arena), everything else refers to them by index
# - extraction fills `VertexData` and `Polygon` fields that may stay unset
# - the missing data policy turns them into `ResolvedVertex` / `ResolvedPolygon` with every field set


# -------------------------------------------------------------------------------------------------
ResolvedVertex = namedtuple('ResolvedVertex', ['position', 'normal', 'tangent', 'uv'])

# -------------------------------------------------------------------------------------------------
ResolvedPolygon = namedtuple('ResolvedPolygon', ['vertices', 'material_index'])


# -------------------------------------------------------------------------------------------------
def get_vertex_checksum(vertex):
    return vertex_checksum(vertex.position, vertex.normal, vertex.tangent, vertex.uv)


# -------------------------------------------------------------------------------------------------
class VertexData:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, position=None):
        self.position = position
        self.normal = None
        self.tangent = None
        self.uv = None


# -------------------------------------------------------------------------------------------------
class PolygonVertex:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, polygon_index, control_point_index, position):
        self.polygon_index = polygon_index
        self.control_point_index = control_point_index
        self.data = VertexData(position)


# -------------------------------------------------------------------------------------------------
class Polygon:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, vertices):
        self.vertices = tuple(vertices) # polygon vertex indices
        self.material_index = None


# -------------------------------------------------------------------------------------------------
class ControlPoint:

    # ---------------------------------------------------------------------------------------------
    def __init__(self):
        self.vertices = [] # polygon vertex indices referencing this control point


# -------------------------------------------------------------------------------------------------
class Material:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, diffuse_map_file_name='', normal_map_file_name=''):
        self.diffuse_map_file_name = diffuse_map_file_name
        self.normal_map_file_name = normal_map_file_name

    # ---------------------------------------------------------------------------------------------
    def __str__(self):
        return F"{{ diffuse_map:'{self.diffuse_map_file_name}' , normal_map:'{self.normal_map_file_name}' }}"


# -------------------------------------------------------------------------------------------------
class MeshData:

    # ---------------------------------------------------------------------------------------------
    def __init__(self):
        self.materials = []
        self.polygon_vertices = []
        self.polygons = []
        self.control_points = []
        self.is_complete = True # false when extraction stopped early on a bad polygon


# -------------------------------------------------------------------------------------------------
class ResolvedMeshData:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, materials, vertices, polygons):
        self.materials = materials
        self.vertices = vertices # one ResolvedVertex per polygon vertex, same order as the arena
        self.polygons = polygons
