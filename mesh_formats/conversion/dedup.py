from mesh_formats.shared.enums import DiagnosticCode
from mesh_formats.conversion.mesh_data import get_vertex_checksum


# -------------------------------------------------------------------------------------------------
def build_unique_vertices(vertices, diagnostics):
    """
    Collapses vertices with identical attribute tuples into a list of unique vertices.

    Each checksum remembers the first vertex seen with it. A later vertex with the same checksum
    reuses that vertex's slot when the full tuples are equal, otherwise the collision is reported
    and the vertex gets its own slot without replacing the remembered one.

    Args:
    - vertices (list): ResolvedVertex tuples, one per polygon vertex.
    - diagnostics (Diagnostics): Receives collision warnings.

    Returns:
    - tuple: (unique vertices in first seen order, unique vertex index per input vertex)
    """
    unique_vertices = []
    remap = []
    checksum_map = {} # checksum -> index into unique_vertices of the first vertex with it

    for vertex in vertices:
        checksum = get_vertex_checksum(vertex)
        candidate_index = checksum_map.get(checksum)

        if candidate_index is not None:
            if unique_vertices[candidate_index] == vertex:
                remap.append(candidate_index)
                continue
            diagnostics.warning(DiagnosticCode.CHECKSUM_COLLISION, 'false positive duplicate vertex checksum detected.')
        else:
            checksum_map[checksum] = len(unique_vertices)

        remap.append(len(unique_vertices))
        unique_vertices.append(vertex)

    diagnostics.verbose(F"found {len(unique_vertices)} unique vertices")
    return unique_vertices, remap
