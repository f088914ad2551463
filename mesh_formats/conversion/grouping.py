# -------------------------------------------------------------------------------------------------
def sort_polygons_by_material_index(polygons):
    # group triangles sharing a material to reduce render state changes.
    # the order within a material group is not part of the contract.
    return sorted(polygons, key=lambda polygon: polygon.material_index)
