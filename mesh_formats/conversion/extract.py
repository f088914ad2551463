from mesh_formats.shared.enums import ShadingModel, DiagnosticCode
from mesh_formats.shared.transform import convert_vec3, convert_uv
from mesh_formats.conversion.errors import NoMeshFoundError, InvalidPolygonError, PolygonSizeError
from mesh_formats.conversion.mesh_data import MeshData, ControlPoint, PolygonVertex, Polygon, Material
from mesh_formats.conversion.layers import is_index, resolve_per_polygon_vertex, resolve_per_polygon, apply_layer_elements


# -------------------------------------------------------------------------------------------------
def find_scene_mesh(scene, diagnostics):
    meshes = scene.find_meshes()
    if not meshes:
        raise NoMeshFoundError('No Mesh Node found in Scene.')
    if len(meshes) > 1:
        diagnostics.warning(DiagnosticCode.MULTIPLE_MESHES, 'Multiple Mesh Nodes found in Scene. Ignoring extra nodes.')
    return meshes[0]


# -------------------------------------------------------------------------------------------------
def get_texture_file_name(texture, texture_type, diagnostics):
    if texture is None:
        diagnostics.error(DiagnosticCode.MISSING_TEXTURE, F"No {texture_type} texture found on material.")
        return ''
    return texture.filename


# -------------------------------------------------------------------------------------------------
def make_material(scene_material, diagnostics):
    material = Material()
    if scene_material.shading_model in (ShadingModel.PHONG, ShadingModel.LAMBERT):
        material.diffuse_map_file_name = get_texture_file_name(scene_material.diffuse, 'DIFFUSE', diagnostics)
        material.normal_map_file_name = get_texture_file_name(scene_material.normal_map, 'NORMAL_MAP', diagnostics)
    else:
        diagnostics.error(DiagnosticCode.SHADING_MODEL, F"Unknown Material class type : {scene_material.name}")
    return material


# -------------------------------------------------------------------------------------------------
def make_vertex_assigner(mesh_data, attribute, label, convert, diagnostics):
    """
    Returns a callback writing a converted layer value to one attribute of a polygon vertex.
    The first write wins, later writes to the same attribute are reported.
    """
    def assign(polygon_vertex_index, value):
        data = mesh_data.polygon_vertices[polygon_vertex_index].data
        if getattr(data, attribute) is not None:
            diagnostics.error(DiagnosticCode.ATTRIBUTE_CONFLICT, F"Vertex already has {label}!")
        else:
            setattr(data, attribute, convert(value))
    return assign


# -------------------------------------------------------------------------------------------------
def make_material_index_assigner(mesh_data, diagnostics):
    def assign(polygon_index, material_index):
        polygon = mesh_data.polygons[polygon_index]
        if polygon.material_index is not None:
            diagnostics.error(DiagnosticCode.ATTRIBUTE_CONFLICT, 'Polygon already has MaterialIndex!')
        else:
            polygon.material_index = material_index
    return assign


# -------------------------------------------------------------------------------------------------
def extract_polygon(mesh, mesh_data, polygon_index):
    corners = mesh.polygons[polygon_index]
    if len(corners) != 3:
        raise PolygonSizeError(F"Polygon of size {len(corners)} found. Only triangles are supported.")
    for control_point_index in corners:
        if not is_index(control_point_index):
            raise InvalidPolygonError(F"Polygon {polygon_index} has non integer control point index {control_point_index!r}.")
        if not 0 <= control_point_index < len(mesh_data.control_points):
            raise InvalidPolygonError(F"Polygon {polygon_index} references missing control point {control_point_index}.")

    vertices = []
    for control_point_index in corners:
        position = convert_vec3(mesh.control_points[control_point_index])
        polygon_vertex_index = len(mesh_data.polygon_vertices)
        mesh_data.polygon_vertices.append(PolygonVertex(polygon_index, control_point_index, position))
        mesh_data.control_points[control_point_index].vertices.append(polygon_vertex_index)
        vertices.append(polygon_vertex_index)

    mesh_data.polygons.append(Polygon(vertices))


# -------------------------------------------------------------------------------------------------
def extract_mesh_data(mesh, diagnostics):
    """
    Builds the intermediate mesh data (materials, control points, polygon vertices and polygons)
    from a scene mesh and resolves its normal, tangent, uv and material layers.

    A polygon that is not a triangle stops extraction, the polygons before it are kept.
    """
    mesh_data = MeshData()

    scene_materials = mesh.node.materials if mesh.node is not None else []
    for scene_material in scene_materials:
        material = make_material(scene_material, diagnostics)
        diagnostics.verbose(F"found material : {material}")
        mesh_data.materials.append(material)

    mesh_data.control_points = [ControlPoint() for _ in mesh.control_points]

    diagnostics.verbose(F"found {len(mesh.polygons)} polygons")
    diagnostics.verbose(F"found {mesh.polygon_vertex_count} polygon vertices")
    try:
        for polygon_index in range(len(mesh.polygons)):
            extract_polygon(mesh, mesh_data, polygon_index)
    except PolygonSizeError as ex:
        diagnostics.error(DiagnosticCode.POLYGON_SIZE, str(ex))
        mesh_data.is_complete = False
    except InvalidPolygonError as ex:
        diagnostics.error(DiagnosticCode.INVALID_POLYGON, str(ex))
        mesh_data.is_complete = False

    apply_layer_elements(mesh.normals, 'ElementNormal', resolve_per_polygon_vertex,
        make_vertex_assigner(mesh_data, 'normal', 'Normal', convert_vec3, diagnostics), mesh_data, diagnostics)
    apply_layer_elements(mesh.tangents, 'ElementTangent', resolve_per_polygon_vertex,
        make_vertex_assigner(mesh_data, 'tangent', 'Tangent', convert_vec3, diagnostics), mesh_data, diagnostics)
    apply_layer_elements(mesh.uvs, 'ElementUV', resolve_per_polygon_vertex,
        make_vertex_assigner(mesh_data, 'uv', 'UV', convert_uv, diagnostics), mesh_data, diagnostics)
    apply_layer_elements(mesh.materials, 'ElementMaterial', resolve_per_polygon,
        make_material_index_assigner(mesh_data, diagnostics), mesh_data, diagnostics)

    return mesh_data
