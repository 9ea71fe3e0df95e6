import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

import discmesh
from discmesh.disc import DiscMesh, DEFAULT_RADIUS, DEFAULT_NORMAL, DEFAULT_SEGMENTS
from discmesh.exceptions import InvalidGeometry
from discmesh.writer import write


def main(argv: Optional[List[str]] = None) -> int:
    """
    Generate a disc mesh and store it to file.

    A .js output path gives a JavaScript object with Float32Array buffers,
    any other suffix is written with meshio.
    """
    logging.basicConfig(level=logging.CRITICAL, format='DiscMesh[%(levelname)s]: %(message)s')
    logger = logging.getLogger()

    arg_parser = argparse.ArgumentParser()
    arg_parser.add_argument("-center", nargs=3, type=float, default=[0.0, 0.0, 0.0], help="Center of the disc")
    arg_parser.add_argument("-radius", type=float, default=DEFAULT_RADIUS, help="Radius of the disc")
    arg_parser.add_argument("-normal", nargs=3, type=float, default=list(DEFAULT_NORMAL),
                            help="Normal vector of the disc plane, need not be normalized")
    arg_parser.add_argument("-color", nargs=3, type=int, default=[0, 0, 0], help="8-bit RGB color")
    arg_parser.add_argument("-segments", type=int, default=DEFAULT_SEGMENTS, help="Number of boundary segments")
    arg_parser.add_argument("-max-segments", type=int, default=discmesh.max_segments,
                            help="Upper bound on the number of segments")
    arg_parser.add_argument("-silent", action="store_true", help="Run in silent mode")
    arg_parser.add_argument("output", type=str, help="Output file")
    res = arg_parser.parse_args(sys.argv[1:] if argv is None else argv)
    if not res.silent:
        logger.setLevel(logging.INFO)

    try:
        disc = DiscMesh(center=res.center,
                        radius=res.radius,
                        normal=res.normal,
                        color=res.color,
                        segments=res.segments,
                        max_segments=res.max_segments)
    except InvalidGeometry as err:
        logger.critical(f"Invalid disc: {err}")
        return 1

    output = Path(res.output)
    if not output.parent.exists():
        output.parent.mkdir(parents=True)
    write(disc=disc, filepath=output)
    logger.info(f"Successfully generated {disc!r} in {output.absolute()}")
    return 0
