import json
from pathlib import Path
from mesh_formats.shared.enums import OutputFormat
from mesh_formats.utils.reader import BinaryReader
from mesh_formats.utils.writer import BinaryWriter

# -------------------------------------------------------------------------------------------------
# mesh is the renderer ready asset
# - triangles index the vertex list with 16-bit indices and are grouped by material
# - texture map names are base file names without directory or extension

# --- binary layout (little-endian) ---------------------------------------------------------------
# uint32 num_materials
#   string diffuse_map, string normal_map (uint32 length + utf-8 bytes)
# uint32 num_vertices
#   float32[3] position, float32[3] normal, float32[3] tangent, float32[2] uv
# uint32 num_triangles
#   uint16 v0, uint16 v1, uint16 v2, uint16 material_index


# -------------------------------------------------------------------------------------------------
class MeshMaterial:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, diffuse_map='', normal_map=''):
        self.diffuse_map = diffuse_map
        self.normal_map = normal_map

    # ---------------------------------------------------------------------------------------------
    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return (self.diffuse_map, self.normal_map) == (other.diffuse_map, other.normal_map)
        return NotImplemented

    # ---------------------------------------------------------------------------------------------
    def to_dict(self):
        return {'diffuse_map': self.diffuse_map, 'normal_map': self.normal_map}


# -------------------------------------------------------------------------------------------------
class MeshVertex:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, position, normal, tangent, uv):
        self.position = tuple(position)
        self.normal = tuple(normal)
        self.tangent = tuple(tangent)
        self.uv = tuple(uv)

    # ---------------------------------------------------------------------------------------------
    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return self.to_dict() == other.to_dict()
        return NotImplemented

    # ---------------------------------------------------------------------------------------------
    def to_dict(self):
        return {
            'position': list(self.position),
            'normal': list(self.normal),
            'tangent': list(self.tangent),
            'uv': list(self.uv),
        }


# -------------------------------------------------------------------------------------------------
class MeshTriangle:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, v0, v1, v2, material_index):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material_index = material_index

    # ---------------------------------------------------------------------------------------------
    @property
    def indices(self):
        return (self.v0, self.v1, self.v2)

    # ---------------------------------------------------------------------------------------------
    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return (*self.indices, self.material_index) == (*other.indices, other.material_index)
        return NotImplemented

    # ---------------------------------------------------------------------------------------------
    def __repr__(self):
        return F"MeshTriangle({self.v0}, {self.v1}, {self.v2}, material_index={self.material_index})"

    # ---------------------------------------------------------------------------------------------
    def to_dict(self):
        return {'v0': self.v0, 'v1': self.v1, 'v2': self.v2, 'material_index': self.material_index}


# -------------------------------------------------------------------------------------------------
class MeshAsset:

    # ---------------------------------------------------------------------------------------------
    def __init__(self):
        self.materials = []
        self.vertices = []
        self.triangles = []

    # ---------------------------------------------------------------------------------------------
    def to_dict(self):
        return {
            'materials': [material.to_dict() for material in self.materials],
            'vertices': [vertex.to_dict() for vertex in self.vertices],
            'triangles': [triangle.to_dict() for triangle in self.triangles],
        }

    # ---------------------------------------------------------------------------------------------
    def to_json(self):
        return json.dumps(self.to_dict(), indent=4)

    # ---------------------------------------------------------------------------------------------
    def to_bytes(self):
        bw = BinaryWriter()
        bw.write_uint32(len(self.materials))
        for material in self.materials:
            bw.write_string(material.diffuse_map)
            bw.write_string(material.normal_map)

        bw.write_uint32(len(self.vertices))
        for vertex in self.vertices:
            bw.write_vec3(vertex.position)
            bw.write_vec3(vertex.normal)
            bw.write_vec3(vertex.tangent)
            bw.write_vec2(vertex.uv)

        bw.write_uint32(len(self.triangles))
        for triangle in self.triangles:
            bw.write_uint16(triangle.v0)
            bw.write_uint16(triangle.v1)
            bw.write_uint16(triangle.v2)
            bw.write_uint16(triangle.material_index)

        return bw.getvalue()

    # ---------------------------------------------------------------------------------------------
    def to_file(self, filename, params={}):
        params = {'format': OutputFormat.BINARY} | params
        output_format = OutputFormat.from_name(params['format'])
        pathname = Path(filename).resolve()
        pathname.parent.mkdir(exist_ok=True, parents=True)

        if output_format == OutputFormat.JSON:
            with open(pathname, 'w', encoding='utf-8') as out:
                out.write(self.to_json())
        else:
            with open(pathname, 'wb') as out:
                out.write(self.to_bytes())
        return True

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data):
        mesh = cls()
        mesh.materials = [MeshMaterial(m['diffuse_map'], m['normal_map']) for m in data['materials']]
        mesh.vertices = [MeshVertex(v['position'], v['normal'], v['tangent'], v['uv']) for v in data['vertices']]
        mesh.triangles = [MeshTriangle(t['v0'], t['v1'], t['v2'], t['material_index']) for t in data['triangles']]
        return mesh

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_json(cls, text):
        return cls.from_dict(json.loads(text))

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_bytes(cls, data):
        mesh = cls()
        br = BinaryReader(data)

        num_materials = br.read_uint32()
        for i in range(num_materials):
            diffuse_map = br.read_string()
            normal_map = br.read_string()
            mesh.materials.append(MeshMaterial(diffuse_map, normal_map))

        num_vertices = br.read_uint32()
        for i in range(num_vertices):
            mesh.vertices.append(MeshVertex(br.read_vec3(), br.read_vec3(), br.read_vec3(), br.read_vec2()))

        num_triangles = br.read_uint32()
        for i in range(num_triangles):
            mesh.triangles.append(MeshTriangle(br.read_uint16(), br.read_uint16(), br.read_uint16(), br.read_uint16()))

        return mesh

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_file(cls, filename, params={}):
        params = {'format': OutputFormat.BINARY} | params
        pathname = Path(filename).resolve()

        if not pathname.exists():
            raise FileNotFoundError(F"File does not exist... '{pathname}'")

        if OutputFormat.from_name(params['format']) == OutputFormat.JSON:
            with open(pathname, 'r', encoding='utf-8') as inp:
                return cls.from_json(inp.read())
        with open(pathname, 'rb') as inp:
            return cls.from_bytes(inp.read())
