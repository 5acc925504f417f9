from bbox2d.bounding_box import BoundingBox
from bbox2d.error import Bbox2dError, MalformedPointsError, ParserError
from bbox2d.vector import Vector2D, VectorRecord, fold, maximal, minimal, pointwise, pointwise_tuple

__VERSION__ = '0.1.0'

__all__ = [
    'BoundingBox',
    'Bbox2dError',
    'MalformedPointsError',
    'ParserError',
    'Vector2D',
    'VectorRecord',
    'fold',
    'maximal',
    'minimal',
    'pointwise',
    'pointwise_tuple',
]
