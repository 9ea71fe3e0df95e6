from discmesh.disc import DiscMesh

"""
Most minimal example
"""
disc = DiscMesh(center=(0, 0, 1), radius=2, normal=(1, 1, 1), color=(200, 30, 30), segments=8)

print("\n Vertices:")
for v in disc.vertices:
    print('  ', tuple(v))

print("\n Faces:")
for f in disc.face_indices:
    print('  ', f)

print("\n Buffer:")
print('  ', disc.faces_as_flat_floats())
