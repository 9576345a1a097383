"""Walk through the vector operations on a pair of 3D vectors."""

import argparse
import logging

from scale_geom.logger import FileLogListener
from scale_geom.vector import Vector3f, cross_product_3d, dot_product


def main(verbosity="WARNING", log_file=None):
    # Logging
    logger = logging.getLogger("scale_geom")
    logger.setLevel(verbosity)
    handler = logging.StreamHandler()
    handler.setLevel(verbosity)
    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    listener = None
    if log_file is not None:
        # Log to file in background
        listener = FileLogListener(log_file, logger)
        listener.start()

    try:
        vec1 = Vector3f(5.1, 6.2, 8.3)
        vec2 = Vector3f(4.2, 5.1, 6.5)

        print("vec1 + vec2 =", vec1 + vec2)
        print("vec1 - vec2 =", vec1 - vec2)

        if vec1 == vec2:
            print("vec1 and vec2 are equal")
        else:
            print("vec1 and vec2 are not equal")

        if vec1 != vec2:
            print("vec1 and vec2 are different")
        else:
            print("vec1 and vec2 are the same")

        if vec1 < vec2:
            print("vec1 is less than vec2")
        else:
            print("vec1 is not less than vec2")

        if vec1 > vec2:
            print("vec1 is greater than vec2")
        else:
            print("vec1 is not greater than vec2")

        print("dot product of vec1 and vec2 is", dot_product(vec1, vec2))
        print("cross product of vec1 and vec2 is",
              cross_product_3d(vec1, vec2))

        magnitude = vec1.magnitude()
        vec1.normalize()
        print("magnitude of vec1 is", magnitude)
        print("Normalized vec1 is", vec1)
    finally:
        if listener is not None:
            listener.stop()
        logger.removeHandler(handler)

def cli():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('-v', "--verbosity", type=str, default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"))
    parser.add_argument("--log-file", type=str, default=None,
                        help="also write log records to this file")
    args = parser.parse_args()

    main(args.verbosity, args.log_file)

if __name__ == '__main__':
    cli()
