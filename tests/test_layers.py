import pytest

from mesh_formats.graphics.scene import LayerElement
from mesh_formats.conversion.diagnostics import Diagnostics
from mesh_formats.conversion.errors import UnsupportedEncodingError, InvalidLayerError
from mesh_formats.conversion.extract import extract_mesh_data
from mesh_formats.conversion.layers import resolve_per_polygon_vertex, resolve_per_polygon
from mesh_formats.shared.enums import MappingMode, ReferenceMode, DiagnosticCode
from mesh_formats.shared.transform import convert_vec3

from scene_helpers import PARAMS, make_quad_mesh, make_scene, by_control_point, textured_material


def extract_quad(**layers):
	diagnostics = Diagnostics(PARAMS)
	scene = make_scene(make_quad_mesh(**layers), [textured_material('brick')])
	return extract_mesh_data(scene.find_meshes()[0], diagnostics), diagnostics


def bare_quad():
	mesh_data, _ = extract_quad(normals=[], tangents=[], uvs=[])
	return mesh_data


def test_by_control_point_direct():
	element = LayerElement(MappingMode.BY_CONTROL_POINT, ReferenceMode.DIRECT, ['a', 'b', 'c', 'd'])
	assignments = resolve_per_polygon_vertex(element, 'test', bare_quad())
	# control points 0 and 2 are shared by both triangles
	assert sorted(assignments) == [(0, 'a'), (1, 'b'), (2, 'c'), (3, 'a'), (4, 'c'), (5, 'd')]


def test_by_polygon_vertex_direct():
	element = LayerElement(MappingMode.BY_POLYGON_VERTEX, ReferenceMode.DIRECT, list('abcdef'))
	assignments = resolve_per_polygon_vertex(element, 'test', bare_quad())
	assert assignments == list(enumerate('abcdef'))


def test_by_polygon_vertex_index_to_direct():
	element = LayerElement(MappingMode.BY_POLYGON_VERTEX, ReferenceMode.INDEX_TO_DIRECT, ['x', 'y'], [0, 1, 1, 0, 1, 0])
	assignments = resolve_per_polygon_vertex(element, 'test', bare_quad())
	assert [value for _, value in assignments] == ['x', 'y', 'y', 'x', 'y', 'x']


def test_index_to_direct_out_of_range():
	element = LayerElement(MappingMode.BY_POLYGON_VERTEX, ReferenceMode.INDEX_TO_DIRECT, ['x'], [0, 0, 3, 0, 0, 0])
	with pytest.raises(InvalidLayerError):
		resolve_per_polygon_vertex(element, 'test', bare_quad())


@pytest.mark.parametrize('mapping_mode, reference_mode', [
	(MappingMode.BY_CONTROL_POINT, ReferenceMode.INDEX_TO_DIRECT),
	(MappingMode.BY_POLYGON, ReferenceMode.DIRECT),
	(MappingMode.BY_EDGE, ReferenceMode.DIRECT),
	(MappingMode.ALL_SAME, ReferenceMode.DIRECT),
	(MappingMode.NONE, ReferenceMode.INDEX),
])
def test_per_polygon_vertex_unsupported(mapping_mode, reference_mode):
	element = LayerElement(mapping_mode, reference_mode, ['a'] * 6, [0] * 6)
	with pytest.raises(UnsupportedEncodingError) as ex:
		resolve_per_polygon_vertex(element, 'ElementNormal', bare_quad())
	assert ex.value.mapping_mode == mapping_mode
	assert ex.value.reference_mode == reference_mode
	assert 'ElementNormal' in str(ex.value)


def test_by_polygon_index_to_direct():
	element = LayerElement(MappingMode.BY_POLYGON, ReferenceMode.INDEX_TO_DIRECT, index_array=[1, 0])
	assert resolve_per_polygon(element, 'test', bare_quad()) == [(0, 1), (1, 0)]


def test_all_same_index_to_direct():
	element = LayerElement(MappingMode.ALL_SAME, ReferenceMode.INDEX_TO_DIRECT, index_array=[2])
	assert resolve_per_polygon(element, 'test', bare_quad()) == [(0, 2), (1, 2)]


def test_all_same_requires_single_index():
	element = LayerElement(MappingMode.ALL_SAME, ReferenceMode.INDEX_TO_DIRECT, index_array=[0, 1])
	with pytest.raises(InvalidLayerError):
		resolve_per_polygon(element, 'test', bare_quad())


@pytest.mark.parametrize('mapping_mode, reference_mode', [
	(MappingMode.BY_POLYGON, ReferenceMode.DIRECT),
	(MappingMode.BY_POLYGON_VERTEX, ReferenceMode.INDEX_TO_DIRECT),
	(MappingMode.BY_CONTROL_POINT, ReferenceMode.DIRECT),
])
def test_per_polygon_unsupported(mapping_mode, reference_mode):
	element = LayerElement(mapping_mode, reference_mode, index_array=[0, 0])
	with pytest.raises(UnsupportedEncodingError):
		resolve_per_polygon(element, 'ElementMaterial', bare_quad())


def test_unsupported_layer_contributes_nothing():
	unsupported = {'mapping_mode': 'by_edge', 'reference_mode': 'direct', 'direct': [[0.0, 1.0, 0.0]] * 6}
	mesh_data, diagnostics = extract_quad(normals=[unsupported])
	assert all(pv.data.normal is None for pv in mesh_data.polygon_vertices)
	assert len(diagnostics.find(DiagnosticCode.UNSUPPORTED_ENCODING)) == 1
	# the other layers were still applied
	assert all(pv.data.tangent is not None for pv in mesh_data.polygon_vertices)


def test_invalid_layer_contributes_nothing():
	broken = {'mapping_mode': 'by_polygon_vertex', 'reference_mode': 'index_to_direct', 'direct': [[0.0, 1.0, 0.0]], 'index': [0, 0, 0, 0, 0, 9]}
	mesh_data, diagnostics = extract_quad(normals=[broken])
	assert all(pv.data.normal is None for pv in mesh_data.polygon_vertices)
	assert len(diagnostics.find(DiagnosticCode.INVALID_LAYER)) == 1


def test_second_layer_write_is_rejected():
	first = by_control_point([[0.0, 0.0, 1.0]] * 4)
	second = by_control_point([[0.0, 1.0, 0.0]] * 4)
	mesh_data, diagnostics = extract_quad(normals=[first, second])
	# first write wins
	assert all(pv.data.normal == convert_vec3((0.0, 0.0, 1.0)) for pv in mesh_data.polygon_vertices)
	assert len(diagnostics.find(DiagnosticCode.ATTRIBUTE_CONFLICT)) == 6


def test_second_material_layer_is_rejected():
	layers = [
		{'mapping_mode': 'all_same', 'reference_mode': 'index_to_direct', 'index': [0]},
		{'mapping_mode': 'by_polygon', 'reference_mode': 'index_to_direct', 'index': [1, 1]},
	]
	mesh_data, diagnostics = extract_quad(materials=layers)
	assert [polygon.material_index for polygon in mesh_data.polygons] == [0, 0]
	assert len(diagnostics.find(DiagnosticCode.ATTRIBUTE_CONFLICT)) == 2


def test_non_integer_direct_index_is_rejected():
	element = LayerElement(MappingMode.BY_POLYGON_VERTEX, ReferenceMode.INDEX_TO_DIRECT, ['x'], [0, 0.0, 0, 0, 0, 0])
	with pytest.raises(InvalidLayerError):
		resolve_per_polygon_vertex(element, 'test', bare_quad())


@pytest.mark.parametrize('layer', [
	{'mapping_mode': 'by_polygon', 'reference_mode': 'index_to_direct', 'index': [0, 7.5]},
	{'mapping_mode': 'all_same', 'reference_mode': 'index_to_direct', 'index': [1.0]},
])
def test_non_integer_material_index_contributes_nothing(layer):
	mesh_data, diagnostics = extract_quad(materials=[layer])
	assert all(polygon.material_index is None for polygon in mesh_data.polygons)
	assert len(diagnostics.find(DiagnosticCode.INVALID_LAYER)) == 1
