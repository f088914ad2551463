import json
import pytest

from mesh_formats.graphics.scene import Scene
from mesh_formats.shared.enums import MappingMode, ReferenceMode, ShadingModel

from scene_helpers import make_quad_mesh, textured_material


SCENE = {
	'root': {
		'name': 'root',
		'children': [
			{'name': 'camera'},
			{
				'name': 'quad',
				'materials': [textured_material('brick'), {'name': 'bare', 'shading_model': 'Lambert'}],
				'mesh': make_quad_mesh(),
				'children': [
					{'name': 'quad_lod', 'mesh': make_quad_mesh()},
				],
			},
		],
	},
}


def test_scene_from_dict():
	scene = Scene.from_dict(SCENE)
	meshes = scene.find_meshes()
	assert len(meshes) == 2
	assert meshes[0].node.name == 'quad'
	assert meshes[1].node.name == 'quad_lod'

	mesh = meshes[0]
	assert len(mesh.control_points) == 4
	assert mesh.polygon_vertex_count == 6
	assert mesh.normals[0].mapping_mode == MappingMode.BY_CONTROL_POINT
	assert mesh.normals[0].reference_mode == ReferenceMode.DIRECT
	assert mesh.normals[0].direct_array[0] == (0.0, 0.0, 1.0)

	materials = mesh.node.materials
	assert materials[0].shading_model == ShadingModel.PHONG
	assert materials[0].diffuse.filename == 'C:\\textures\\brick.png'
	assert materials[1].shading_model == ShadingModel.LAMBERT
	assert materials[1].diffuse is None


def test_unknown_shading_model():
	assert ShadingModel.from_name('cel') == ShadingModel.UNKNOWN


def test_scene_from_file(tmp_path):
	filename = tmp_path / 'quad.json'
	filename.write_text(json.dumps(SCENE), encoding='utf-8')
	scene = Scene.from_file(filename)
	assert len(scene.find_meshes()) == 2


def test_scene_from_missing_file(tmp_path):
	with pytest.raises(FileNotFoundError):
		Scene.from_file(tmp_path / 'missing.json')


def test_scene_from_unsupported_file(tmp_path):
	filename = tmp_path / 'quad.fbx'
	filename.write_bytes(b'Kaydara FBX Binary')
	with pytest.raises(NotImplementedError):
		Scene.from_file(filename)
