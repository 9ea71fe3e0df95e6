from typing import Generator, Optional
import numpy as np


def _open_array(name: Optional[str]) -> str:
    if name is not None:
        return f'const {name} = new Float32Array( ['
    return "new Float32Array( ["


def _close_array(name: Optional[str]) -> str:
    if name is not None:
        return '] );'
    return "] )"


def point_vector_to_lines(*,
                          name: Optional[str],
                          point_vector: np.ndarray) -> Generator[str, None, None]:
    yield _open_array(name)
    for v in point_vector:
        yield f"    {', '.join([str(s) for s in v])},"
    yield _close_array(name)


def face_and_point_vector_to_lines(*,
                                   name: Optional[str],
                                   face_vector: np.ndarray,
                                   point_vector: np.ndarray) -> Generator[str, None, None]:
    yield _open_array(name)
    for f in face_vector:
        for i in f:
            yield f"    {', '.join([str(s) for s in point_vector[i]])},"
    yield _close_array(name)


def face_field_to_corner_values(face_field: np.ndarray) -> np.ndarray:
    """

    :param face_field: vector field over faces
    :return: the field repeated for each of the three corners of every face
    """
    return np.repeat(np.asarray(face_field), 3, axis=0)
