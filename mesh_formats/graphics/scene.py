import json
from pathlib import Path
from mesh_formats.shared.enums import MappingMode, ReferenceMode, ShadingModel

# -------------------------------------------------------------------------------------------------
# scene is the already imported and triangulated source scene graph
# - nodes own meshes and the materials those meshes reference by slot
# - meshes own control points, polygons and their attribute layer elements

# --- notes ---------------------------------------------------------------------------------------
# - only the first mesh found in the scene is ever converted
# - uv layers are expected to be the diffuse channel uvs
# - control points and layer values may carry a fourth (w) component, it is ignored


# -------------------------------------------------------------------------------------------------
class LayerElement:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, mapping_mode=MappingMode.NONE, reference_mode=ReferenceMode.DIRECT, direct_array=None, index_array=None):
        self.mapping_mode = MappingMode(mapping_mode)
        self.reference_mode = ReferenceMode(reference_mode)
        self.direct_array = list(direct_array or [])
        self.index_array = list(index_array or [])

    # ---------------------------------------------------------------------------------------------
    def __repr__(self):
        return F"LayerElement({self.mapping_mode.value}, {self.reference_mode.value}, direct={len(self.direct_array)}, index={len(self.index_array)})"

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data):
        return cls(
            data.get('mapping_mode', MappingMode.NONE.value),
            data.get('reference_mode', ReferenceMode.DIRECT.value),
            [tuple(value) if isinstance(value, (list, tuple)) else value for value in data.get('direct', [])],
            data.get('index', []),
        )


# -------------------------------------------------------------------------------------------------
class FileTexture:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, filename):
        self.filename = filename

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_value(cls, value):
        if value is None:
            return None
        if isinstance(value, dict):
            return cls(value.get('filename', ''))
        return cls(value)


# -------------------------------------------------------------------------------------------------
class SceneMaterial:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, name='', shading_model=ShadingModel.PHONG, diffuse=None, normal_map=None):
        self.name = name
        self.shading_model = ShadingModel.from_name(shading_model)
        self.diffuse = diffuse
        self.normal_map = normal_map

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data):
        return cls(
            data.get('name', ''),
            data.get('shading_model', ShadingModel.PHONG.value),
            FileTexture.from_value(data.get('diffuse')),
            FileTexture.from_value(data.get('normal_map')),
        )


# -------------------------------------------------------------------------------------------------
class SceneMesh:

    # ---------------------------------------------------------------------------------------------
    def __init__(self):
        self.node = None # owning node, provides the materials
        self.control_points = []
        self.polygons = [] # lists of control point indices
        self.normals = []
        self.tangents = []
        self.uvs = []
        self.materials = []

    # ---------------------------------------------------------------------------------------------
    @property
    def polygon_vertex_count(self):
        return sum(len(polygon) for polygon in self.polygons)

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data):
        mesh = cls()
        mesh.control_points = [tuple(cp) for cp in data.get('control_points', [])]
        mesh.polygons = [list(polygon) for polygon in data.get('polygons', [])]
        mesh.normals = [LayerElement.from_dict(element) for element in data.get('normals', [])]
        mesh.tangents = [LayerElement.from_dict(element) for element in data.get('tangents', [])]
        mesh.uvs = [LayerElement.from_dict(element) for element in data.get('uvs', [])]
        mesh.materials = [LayerElement.from_dict(element) for element in data.get('materials', [])]
        return mesh


# -------------------------------------------------------------------------------------------------
class SceneNode:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, name='', mesh=None, materials=None, children=None):
        self.name = name
        self.materials = list(materials or [])
        self.children = list(children or [])
        self.mesh = None
        if mesh is not None:
            self.attach_mesh(mesh)

    # ---------------------------------------------------------------------------------------------
    def attach_mesh(self, mesh):
        mesh.node = self
        self.mesh = mesh

    # ---------------------------------------------------------------------------------------------
    def find_meshes(self):
        """
        Collects the meshes of this node and all of its descendants, depth-first in child order.
        """
        meshes = []
        if self.mesh is not None:
            meshes.append(self.mesh)
        for child in self.children:
            meshes.extend(child.find_meshes())
        return meshes

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data):
        node = cls(
            data.get('name', ''),
            materials=[SceneMaterial.from_dict(material) for material in data.get('materials', [])],
            children=[cls.from_dict(child) for child in data.get('children', [])],
        )
        if data.get('mesh') is not None:
            node.attach_mesh(SceneMesh.from_dict(data['mesh']))
        return node


# -------------------------------------------------------------------------------------------------
class Scene:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, root=None):
        self.root = root if root is not None else SceneNode('root')

    # ---------------------------------------------------------------------------------------------
    def find_meshes(self):
        return self.root.find_meshes()

    # ---------------------------------------------------------------------------------------------
    def load(self, filename):
        pathname = Path(filename).resolve()

        if not pathname.exists():
            raise FileNotFoundError(F"File does not exist... '{pathname}'")

        if pathname.suffix.lower() == '.json':
            self.load_json(pathname)
        elif pathname.suffix.lower() == '.fbx':
            raise NotImplementedError('Loading fbx files directly is not supported, export the scene to json first...')
        else:
            raise NotImplementedError(F"Loading '{pathname.suffix}' files is not supported...")

    # ---------------------------------------------------------------------------------------------
    def load_json(self, filename):
        with open(filename, 'r', encoding='utf-8') as inp:
            self.root = SceneNode.from_dict(json.load(inp)['root'])

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data):
        return cls(SceneNode.from_dict(data['root']))

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_file(cls, filename):
        scene = cls()
        scene.load(filename)
        return scene
