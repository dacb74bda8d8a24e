"""Value type for a host reachable on a set of ports.

.. include:: ../../README.md
"""
from loguru import logger

from .node_addr import NodeAddr, group_socket_addrs

logger.disable("nodeaddr")

__all__=['NodeAddr', 'group_socket_addrs']
