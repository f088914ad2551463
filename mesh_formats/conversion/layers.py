from mesh_formats.shared.enums import MappingMode, ReferenceMode, DiagnosticCode
from mesh_formats.conversion.errors import LayerError, UnsupportedEncodingError, InvalidLayerError

# -------------------------------------------------------------------------------------------------
# layer elements resolve to a list of (target index, value) assignments
# - per polygon vertex targets are indices into `MeshData.polygon_vertices`
# - per polygon targets are indices into `MeshData.polygons`
# - a layer either resolves completely or raises, it never half applies
# - values addressing targets that were never extracted (truncated meshes) are dropped


# -------------------------------------------------------------------------------------------------
def is_index(value):
    return isinstance(value, int) and not isinstance(value, bool)


# -------------------------------------------------------------------------------------------------
def check_indices(indices, element_name):
    for index in indices:
        if not is_index(index):
            raise InvalidLayerError(element_name, F"Index {index!r} is not an integer")
    return indices


# -------------------------------------------------------------------------------------------------
def get_direct_value(element, element_name, direct_index):
    if not is_index(direct_index):
        raise InvalidLayerError(element_name, F"Direct index {direct_index!r} is not an integer")
    if not 0 <= direct_index < len(element.direct_array):
        raise InvalidLayerError(element_name, F"Direct index {direct_index} out of range [0, {len(element.direct_array)})")
    return element.direct_array[direct_index]


# -------------------------------------------------------------------------------------------------
def resolve_per_polygon_vertex(element, element_name, mesh_data):
    """
    Resolves a normal, tangent or uv layer element to per polygon vertex assignments.

    Args:
    - element (LayerElement): The layer element to resolve.
    - element_name (str): Used in error messages.
    - mesh_data (MeshData): The extracted intermediate mesh.

    Returns:
    - list: (polygon vertex index, value) tuples in layer order.

    Raises:
    - UnsupportedEncodingError: For any mapping and reference mode pair other than
      by control point/direct, by polygon vertex/direct and by polygon vertex/index to direct.
    - InvalidLayerError: When an index array entry points outside the direct array.
    """
    mode = (element.mapping_mode, element.reference_mode)
    num_polygon_vertices = len(mesh_data.polygon_vertices)
    assignments = []

    if mode == (MappingMode.BY_CONTROL_POINT, ReferenceMode.DIRECT):
        for control_point_index, value in enumerate(element.direct_array):
            if control_point_index >= len(mesh_data.control_points):
                break
            for polygon_vertex_index in mesh_data.control_points[control_point_index].vertices:
                assignments.append((polygon_vertex_index, value))

    elif mode == (MappingMode.BY_POLYGON_VERTEX, ReferenceMode.DIRECT):
        for polygon_vertex_index, value in enumerate(element.direct_array[:num_polygon_vertices]):
            assignments.append((polygon_vertex_index, value))

    elif mode == (MappingMode.BY_POLYGON_VERTEX, ReferenceMode.INDEX_TO_DIRECT):
        for polygon_vertex_index, direct_index in enumerate(element.index_array[:num_polygon_vertices]):
            assignments.append((polygon_vertex_index, get_direct_value(element, element_name, direct_index)))

    else:
        raise UnsupportedEncodingError(element_name, element.mapping_mode, element.reference_mode)

    return assignments


# -------------------------------------------------------------------------------------------------
def resolve_per_polygon(element, element_name, mesh_data):
    """
    Resolves a material layer element to per polygon material index assignments.

    Raises:
    - UnsupportedEncodingError: For anything but by polygon/index to direct and all same/index to direct.
    - InvalidLayerError: When an all same layer does not hold exactly one index.
    """
    mode = (element.mapping_mode, element.reference_mode)
    num_polygons = len(mesh_data.polygons)

    if mode == (MappingMode.BY_POLYGON, ReferenceMode.INDEX_TO_DIRECT):
        return list(enumerate(check_indices(element.index_array[:num_polygons], element_name)))

    elif mode == (MappingMode.ALL_SAME, ReferenceMode.INDEX_TO_DIRECT):
        if len(element.index_array) != 1:
            raise InvalidLayerError(element_name, F"all_same index array count expected to be one, found {len(element.index_array)}")
        check_indices(element.index_array, element_name)
        return [(polygon_index, element.index_array[0]) for polygon_index in range(num_polygons)]

    raise UnsupportedEncodingError(element_name, element.mapping_mode, element.reference_mode)


# -------------------------------------------------------------------------------------------------
def apply_layer_elements(elements, element_name, resolve, assign, mesh_data, diagnostics):
    """
    Resolves every element of one attribute kind and hands the assignments to `assign`.

    Elements that fail to resolve are reported and contribute nothing, the remaining elements
    are still applied.
    """
    for element in elements:
        try:
            assignments = resolve(element, element_name, mesh_data)
        except UnsupportedEncodingError as ex:
            diagnostics.error(DiagnosticCode.UNSUPPORTED_ENCODING, str(ex))
            continue
        except LayerError as ex:
            diagnostics.error(DiagnosticCode.INVALID_LAYER, str(ex))
            continue

        for target_index, value in assignments:
            assign(target_index, value)
