from mesh_formats.shared.enums import DiagnosticCode
from mesh_formats.conversion.errors import NoMeshFoundError, IndexOverflowError
from mesh_formats.conversion.diagnostics import Diagnostics
from mesh_formats.conversion.extract import find_scene_mesh, extract_mesh_data
from mesh_formats.conversion.repair import resolve_mesh_data
from mesh_formats.conversion.dedup import build_unique_vertices
from mesh_formats.conversion.grouping import sort_polygons_by_material_index
from mesh_formats.conversion.build import build_mesh_asset


# -------------------------------------------------------------------------------------------------
class MeshConverter:
    """
    Converts the first mesh of a scene into a mesh asset.

    The pipeline runs extract -> resolve missing data -> dedup -> sort -> build. Anomalies are
    recorded in a fresh `Diagnostics` per call and returned with the asset. Only a scene without
    a mesh or a 16-bit index overflow yields no asset.
    """

    # ---------------------------------------------------------------------------------------------
    def __init__(self, params={}):
        self.params = {
            'verbose': False,
            'warnings_as_errors': False,
            'echo': True,
        } | params

    # ---------------------------------------------------------------------------------------------
    def convert(self, scene):
        diagnostics = Diagnostics(self.params)
        try:
            mesh = find_scene_mesh(scene, diagnostics)
        except NoMeshFoundError as ex:
            diagnostics.error(DiagnosticCode.NO_MESH, str(ex))
            return None, diagnostics
        return self.convert_mesh(mesh, diagnostics), diagnostics

    # ---------------------------------------------------------------------------------------------
    def convert_mesh(self, mesh, diagnostics):
        mesh_data = extract_mesh_data(mesh, diagnostics)
        if not mesh_data.is_complete:
            diagnostics.verbose(F"converting {len(mesh_data.polygons)} of {len(mesh.polygons)} polygons")
        resolved = resolve_mesh_data(mesh_data, diagnostics)
        unique_vertices, remap = build_unique_vertices(resolved.vertices, diagnostics)
        polygons = sort_polygons_by_material_index(resolved.polygons)
        try:
            return build_mesh_asset(resolved.materials, unique_vertices, remap, polygons)
        except IndexOverflowError as ex:
            diagnostics.error(DiagnosticCode.INDEX_OVERFLOW, str(ex))
            return None


# -------------------------------------------------------------------------------------------------
def convert_scene(scene, params={}):
    return MeshConverter(params).convert(scene)
