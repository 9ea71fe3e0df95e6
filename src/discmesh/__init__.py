import os

_max_segments = os.environ.get("DISCMESH_MAX_SEGMENTS", "1048576")
try:
    max_segments = int(_max_segments)
except ValueError as err:
    raise RuntimeError(f"DISCMESH_MAX_SEGMENTS must be an integer, got '{_max_segments}'.") from err
