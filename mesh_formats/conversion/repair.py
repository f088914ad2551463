from mesh_formats.shared.enums import DiagnosticCode
from mesh_formats.conversion.mesh_data import Material, ResolvedVertex, ResolvedPolygon, ResolvedMeshData

# -------------------------------------------------------------------------------------------------
# defaults used for attributes no layer element provided
DEFAULT_NORMAL = (1.0, 0.0, 0.0)
DEFAULT_TANGENT = (1.0, 0.0, 0.0)
DEFAULT_UV = (0.0, 0.0)
DEFAULT_MATERIAL_INDEX = 0


# -------------------------------------------------------------------------------------------------
def resolve_mesh_data(mesh_data, diagnostics):
    """
    Fills every gap left by extraction and returns the fully resolved mesh data.

    - no materials: a fallback material with empty names is appended so index 0 is valid
    - missing normals, tangents and uvs get defaults, reported once per attribute kind
    - missing material indices become 0, out of range ones are reported and clamped to 0

    Args:
    - mesh_data (MeshData): The extracted mesh data, updated in place.
    - diagnostics (Diagnostics): Receives the errors and warnings.

    Returns:
    - ResolvedMeshData: Vertices and polygons with every field set.
    """
    if not mesh_data.materials:
        diagnostics.error(DiagnosticCode.NO_MATERIALS, 'No materials found')
        mesh_data.materials.append(Material())

    no_normal_count = 0
    no_tangent_count = 0
    no_uv_count = 0

    for polygon_vertex in mesh_data.polygon_vertices:
        data = polygon_vertex.data
        if data.normal is None:
            no_normal_count += 1
            data.normal = DEFAULT_NORMAL
        if data.tangent is None:
            no_tangent_count += 1
            data.tangent = DEFAULT_TANGENT
        if data.uv is None:
            no_uv_count += 1
            data.uv = DEFAULT_UV

    if no_normal_count > 0:
        diagnostics.warning(DiagnosticCode.MISSING_NORMAL, F"{no_normal_count} vertices are missing normals", no_normal_count)
    if no_tangent_count > 0:
        diagnostics.warning(DiagnosticCode.MISSING_TANGENT, F"{no_tangent_count} vertices are missing tangents", no_tangent_count)
    if no_uv_count > 0:
        diagnostics.warning(DiagnosticCode.MISSING_UV, F"{no_uv_count} vertices are missing uvs", no_uv_count)

    no_material_count = 0
    for polygon in mesh_data.polygons:
        if polygon.material_index is None:
            no_material_count += 1
            polygon.material_index = DEFAULT_MATERIAL_INDEX
        elif not 0 <= polygon.material_index < len(mesh_data.materials):
            diagnostics.error(DiagnosticCode.MATERIAL_INDEX, F"Polygon Material Index is invalid : {polygon.material_index}")
            polygon.material_index = DEFAULT_MATERIAL_INDEX

    if no_material_count > 0:
        diagnostics.warning(DiagnosticCode.MISSING_MATERIAL_INDEX, F"{no_material_count} polygons are missing material index", no_material_count)

    vertices = [
        ResolvedVertex(pv.data.position, pv.data.normal, pv.data.tangent, pv.data.uv)
        for pv in mesh_data.polygon_vertices
    ]
    polygons = [ResolvedPolygon(polygon.vertices, polygon.material_index) for polygon in mesh_data.polygons]
    return ResolvedMeshData(list(mesh_data.materials), vertices, polygons)
