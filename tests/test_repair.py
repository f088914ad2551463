from mesh_formats.conversion.diagnostics import Diagnostics
from mesh_formats.conversion.extract import extract_mesh_data
from mesh_formats.conversion.repair import resolve_mesh_data, DEFAULT_NORMAL, DEFAULT_TANGENT, DEFAULT_UV
from mesh_formats.shared.enums import DiagnosticCode

from scene_helpers import PARAMS, make_quad_mesh, make_scene, by_polygon, textured_material


def resolve(mesh, materials=None):
	diagnostics = Diagnostics(PARAMS)
	mesh_data = extract_mesh_data(make_scene(mesh, materials).find_meshes()[0], diagnostics)
	return resolve_mesh_data(mesh_data, diagnostics), diagnostics


def test_complete_mesh_needs_no_repair():
	materials = [textured_material('brick')]
	resolved, diagnostics = resolve(make_quad_mesh(materials=[by_polygon([0, 0])]), materials)
	assert len(resolved.vertices) == 6
	assert len(resolved.polygons) == 2
	assert diagnostics.entries == []


def test_no_materials_adds_fallback():
	resolved, diagnostics = resolve(make_quad_mesh())
	assert len(resolved.materials) == 1
	assert resolved.materials[0].diffuse_map_file_name == ''
	assert resolved.materials[0].normal_map_file_name == ''
	assert all(polygon.material_index == 0 for polygon in resolved.polygons)
	assert len(diagnostics.find(DiagnosticCode.NO_MATERIALS)) == 1
	assert diagnostics.find(DiagnosticCode.NO_MATERIALS)[0] in diagnostics.errors


def test_missing_attributes_get_defaults():
	resolved, diagnostics = resolve(make_quad_mesh(normals=[], tangents=[], uvs=[]), [textured_material('brick')])
	for vertex in resolved.vertices:
		assert vertex.normal == DEFAULT_NORMAL
		assert vertex.tangent == DEFAULT_TANGENT
		assert vertex.uv == DEFAULT_UV

	# one aggregate warning per attribute kind
	for code in (DiagnosticCode.MISSING_NORMAL, DiagnosticCode.MISSING_TANGENT, DiagnosticCode.MISSING_UV):
		assert len(diagnostics.find(code)) == 1
		assert diagnostics.total(code) == 6
	assert diagnostics.error_count == 0


def test_missing_uv_does_not_touch_tangent():
	resolved, diagnostics = resolve(make_quad_mesh(uvs=[]), [textured_material('brick')])
	assert all(vertex.uv == DEFAULT_UV for vertex in resolved.vertices)
	assert all(vertex.tangent == (-1.0, 0.0, 0.0) for vertex in resolved.vertices)
	assert diagnostics.find(DiagnosticCode.MISSING_TANGENT) == []


def test_missing_material_index_defaults_to_zero():
	resolved, diagnostics = resolve(make_quad_mesh(), [textured_material('brick'), textured_material('rock')])
	assert [polygon.material_index for polygon in resolved.polygons] == [0, 0]
	assert diagnostics.total(DiagnosticCode.MISSING_MATERIAL_INDEX) == 2
	assert diagnostics.error_count == 0


def test_out_of_range_material_index_is_clamped():
	materials = [textured_material('brick'), textured_material('rock'), textured_material('moss')]
	resolved, diagnostics = resolve(make_quad_mesh(materials=[by_polygon([7, 2])]), materials)
	assert [polygon.material_index for polygon in resolved.polygons] == [0, 2]
	assert len(diagnostics.find(DiagnosticCode.MATERIAL_INDEX)) == 1
	assert diagnostics.error_count == 1


def test_negative_material_index_is_clamped():
	resolved, diagnostics = resolve(make_quad_mesh(materials=[by_polygon([-1, 0])]), [textured_material('brick')])
	assert [polygon.material_index for polygon in resolved.polygons] == [0, 0]
	assert len(diagnostics.find(DiagnosticCode.MATERIAL_INDEX)) == 1
