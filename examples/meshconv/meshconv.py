import sys
import argparse
from pathlib import Path
from mesh_formats.graphics.scene import Scene
from mesh_formats.conversion.converter import MeshConverter
from mesh_formats.shared.enums import OutputFormat


# ------------------------------------------------------------------------------
def convert(args):
    params = {
        'verbose': args.verbose,
        'warnings_as_errors': args.warnings_as_errors,
        'format': OutputFormat.from_name(args.format),
    }

    inputpath = Path(args.input).resolve()
    if not inputpath.exists():
        raise Exception('The input file does not exist!')

    if args.output:
        outputpath = Path(args.output).resolve()
    else:
        outputpath = inputpath.with_suffix('.mesh') # derive output name from source file name

    print(F"Converting file '{inputpath}'")
    scene = Scene.from_file(inputpath)
    mesh, diagnostics = MeshConverter(params).convert(scene)
    if mesh is not None:
        mesh.to_file(outputpath, params)
        print(F"Wrote {len(mesh.vertices)} vertices, {len(mesh.triangles)} triangles and {len(mesh.materials)} materials to '{outputpath}'")

    return min(diagnostics.error_count, 255) # exit codes wrap past 255


# ------------------------------------------------------------------------------
if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Converts the first mesh of a scene into a renderer ready mesh asset.')
    parser.add_argument('-i', '--input', metavar='scene.json', required=True, type=str, help='input scene file')
    parser.add_argument('-o', '--output', metavar='output.mesh', required=False, type=str, help='output mesh file')
    parser.add_argument('-f', '--format', choices=['json', 'binary'], default='binary', help='output format (json or binary)')
    parser.add_argument('--verbose', action='store_true', help='print progress messages')
    parser.add_argument('--warnings-as-errors', action='store_true', help='count warnings as errors')
    args = parser.parse_args()
    try:
        sys.exit(convert(args))
    except Exception as e:
        print(e)
        sys.exit(1)
