"""
Ear clipping triangulation of simple polygons with exact fixed-point
(or floating-point) arithmetic.

Holes are supported when they are stitched to the outer ring by a pair of
coincident, oppositely directed edges.
"""

import logging

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

_file_handler = None
_stream_handler = None

fmt = '%(asctime)s %(levelname)-8s [%(filename)s:%(lineno)d] : %(message)s'
fmt_date = '%Y-%m-%d %T'


def addFileHandler(output_file: str = 'earclip.log') -> None:
    """Add a handler to redirect logs to a file.

    Arguments:
        output_file (str): Location of the log file.
    """
    global _file_handler
    if _file_handler is not None:
        return

    _file_handler = logging.FileHandler(output_file, mode='a')
    _file_handler.setFormatter(logging.Formatter(fmt, fmt_date))
    log.addHandler(_file_handler)


def addStreamHandler() -> None:
    """Adds a stream handler (stderr) for the log output. Stdout is reserved
    for the triangles, so nothing is added by default.
    """
    global _stream_handler
    if _stream_handler is not None:
        return
    _stream_handler = logging.StreamHandler()
    _stream_handler.setFormatter(logging.Formatter(fmt, fmt_date))
    log.addHandler(_stream_handler)


def enableLogging() -> None:
    """Raises the earclip logger level to INFO."""
    log.setLevel(logging.INFO)


def enableDebugging() -> None:
    """Raises the earclip logger level to DEBUG."""
    log.setLevel(logging.DEBUG)


from .config import (Arithmetic, FIXED_POINT, FLOATING_POINT,  # noqa: E402
                     current_arithmetic, use_fixed_point_arithmetic)
from .errors import (ConsistencyError, EarClipError,  # noqa: E402
                     PolygonFormatError, PolygonTooSmallError)
from .la2d import Point, Vector  # noqa: E402
from .polygon import Polygon  # noqa: E402
from .earclipper import EarClipper, Triangle, triangulate  # noqa: E402

__all__ = [
    'Arithmetic', 'FIXED_POINT', 'FLOATING_POINT', 'current_arithmetic',
    'use_fixed_point_arithmetic', 'ConsistencyError', 'EarClipError',
    'PolygonFormatError', 'PolygonTooSmallError', 'Point', 'Vector',
    'Polygon', 'EarClipper', 'Triangle', 'triangulate',
    'addFileHandler', 'addStreamHandler', 'enableLogging', 'enableDebugging',
]
