from logging import getLogger
from pathlib import Path
from typing import TextIO, Union
import numpy as np
import meshio

from discmesh.disc import DiscMesh
from discmesh.py2js import (point_vector_to_lines,
                            face_and_point_vector_to_lines,
                            face_field_to_corner_values)


def write_mesh(*, disc: DiscMesh, filepath: Union[str, Path]) -> None:
    """
    Write disc to file using meshio, file format given by the suffix.

    The shared face color is stored as the cell field "color".
    """
    filepath = Path(filepath)
    if filepath.suffix.lower() == ".js":
        raise ValueError("Use write_javascript for JavaScript output.")
    mesh = meshio.Mesh(disc.points,
                       [("triangle", np.asarray(disc.face_indices))],
                       cell_data={"color": [disc.colors]})
    mesh.write(str(filepath))
    logger = getLogger()
    logger.info(f"Wrote {disc.num_faces} faces to {filepath}")


def write_javascript(*, disc: DiscMesh, file_handle: TextIO) -> None:
    file_handle.write("{")
    file_handle.write("vertices: ")
    for line in face_and_point_vector_to_lines(name=None,
                                               face_vector=disc.face_indices,
                                               point_vector=disc.points):
        file_handle.write(f"{line}\n")
    file_handle.write(",\n")

    # Faces are wound (boundary, center, next boundary), so their front side
    # looks along -normal. Every corner of the flat disc shares that normal.
    file_handle.write("normals: ")
    normals = np.tile((-disc.unit_normal).as_array(), (3*disc.num_faces, 1))
    for line in point_vector_to_lines(name=None, point_vector=normals):
        file_handle.write(f"{line}\n")
    file_handle.write(",\n")

    file_handle.write("colors: ")
    for line in point_vector_to_lines(name=None,
                                      point_vector=face_field_to_corner_values(disc.colors)):
        file_handle.write(f"{line}\n")
    file_handle.write("}")


def write(*, disc: DiscMesh, filepath: Union[str, Path]) -> None:
    """
    Convenience function for writing to file, JavaScript for a .js suffix.
    """
    filepath = Path(filepath)
    if filepath.suffix.lower() == ".js":
        with filepath.open("w") as tf:
            tf.write("const disc = ")
            write_javascript(disc=disc, file_handle=tf)
            tf.write(";\n")
        logger = getLogger()
        logger.info(f"Wrote {disc.num_faces} faces to {filepath}")
    else:
        write_mesh(disc=disc, filepath=filepath)
