"""
Mesh generation for a single-span beam.

Nodes are placed at both beam ends and at every support, point load and
UDL boundary, so each element carries a constant distributed load and
point loads always act at nodes.
"""

import logging
from typing import Dict, Iterable, List

from .beam import Node, PointLoad, Support, SupportType, UDL

logger = logging.getLogger(__name__)


def build_nodes(length: float,
                supports: Iterable[Support] = (),
                point_loads: Iterable[PointLoad] = (),
                udls: Iterable[UDL] = ()) -> List[Node]:
    """
    Build the ordered, duplicate-free node list covering [0, length].

    Positions outside [0, length] are discarded. When several supports share
    a position the last one in input order wins.

    Args:
        length: Beam length (mm)
        supports: Support definitions
        point_loads: Point loads
        udls: Distributed loads

    Returns:
        Nodes sorted by x
    """
    supports = list(supports)

    positions = [0.0, length]
    positions.extend(s.position for s in supports)
    positions.extend(p.position for p in point_loads)
    for udl in udls:
        positions.extend((udl.start, udl.end))

    support_at: Dict[float, SupportType] = {}
    for support in supports:
        support_at[support.position] = SupportType(support.kind)

    xs = sorted({float(x) for x in positions if 0 <= x <= length})
    nodes = [Node(x=x, support=support_at.get(x, SupportType.FREE)) for x in xs]

    logger.debug("Built %d nodes for beam of length %.3f mm", len(nodes), length)
    return nodes


def element_udl(udls: Iterable[UDL], x_start: float, x_end: float) -> float:
    """
    Total UDL intensity (kN/m, positive downward) acting on an element.

    Every UDL whose range contains the element midpoint contributes;
    overlapping UDLs add.
    """
    mid = (x_start + x_end) / 2
    return sum(udl.intensity for udl in udls if udl.start <= mid <= udl.end)
