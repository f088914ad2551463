from pathlib import PureWindowsPath
from mesh_formats.conversion.errors import IndexOverflowError
from mesh_formats.graphics.mesh import MeshAsset, MeshMaterial, MeshVertex, MeshTriangle

# -------------------------------------------------------------------------------------------------
MAX_UINT16 = 0xFFFF


# -------------------------------------------------------------------------------------------------
def get_file_name_no_path_no_extension(filename):
    # windows paths accept both separators
    if not filename:
        return ''
    return PureWindowsPath(filename).stem


# -------------------------------------------------------------------------------------------------
def to_uint16(value, what):
    if not 0 <= value <= MAX_UINT16:
        raise IndexOverflowError(F"{what} {value} does not fit in 16 bits")
    return value


# -------------------------------------------------------------------------------------------------
def build_mesh_asset(materials, unique_vertices, remap, polygons):
    """
    Projects the resolved, deduplicated and sorted data into the final mesh asset.

    Args:
    - materials (list): Material records, index 0 always present.
    - unique_vertices (list): ResolvedVertex tuples in first seen order.
    - remap (list): Unique vertex index for every polygon vertex.
    - polygons (list): ResolvedPolygon tuples, already sorted by material index.

    Returns:
    - MeshAsset: The asset, ready to be written.

    Raises:
    - IndexOverflowError: When a vertex or material index exceeds the 16-bit range.
    """
    mesh = MeshAsset()

    for material in materials:
        mesh.materials.append(MeshMaterial(
            get_file_name_no_path_no_extension(material.diffuse_map_file_name),
            get_file_name_no_path_no_extension(material.normal_map_file_name),
        ))

    for polygon in polygons:
        v0, v1, v2 = (remap[polygon_vertex_index] for polygon_vertex_index in polygon.vertices)
        # reverse winding order due to the right-handed to left-handed conversion
        mesh.triangles.append(MeshTriangle(
            to_uint16(v0, 'Vertex index'),
            to_uint16(v2, 'Vertex index'),
            to_uint16(v1, 'Vertex index'),
            to_uint16(polygon.material_index, 'Material index'),
        ))

    for vertex in unique_vertices:
        mesh.vertices.append(MeshVertex(vertex.position, vertex.normal, vertex.tangent, vertex.uv))

    return mesh
