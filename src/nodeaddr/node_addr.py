# node_addr.py

import ipaddress
from typing import Any, Iterable, Iterator, Sequence, Tuple

from loguru import logger

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address
SocketAddr = Tuple[str, int]

class NodeAddr:
    """
    Represents one host reachable on a set of ports.

    The ports are sorted and deduplicated on every construction path, so two
    NodeAddrs built from the same host and the same distinct ports compare
    and hash equal no matter the order or repetition of the input.

    Attributes:
        ip_addr (IPv4Address | IPv6Address): The IP address of the node.
        ports (list[int]): Ascending, duplicate-free port numbers.

    Instances are immutable; use clone() or the constructor for a new value.
    """
    __slots__= ('_ip_addr', '_ports')
    _MAX_PORT: int = 2 ** 16 - 1


    def __init__(self, ip_addr: IPAddress | str | int,
                 ports: Iterable[int]) -> None:
        object.__setattr__(self, '_ip_addr', ipaddress.ip_address(ip_addr))
        object.__setattr__(self, '_ports',
                           tuple(sorted({self._port(p) for p in ports})))



    @classmethod
    def from_socket_addr(cls, socket_addr: Sequence[Any]) -> "NodeAddr":
        """
        Builds a NodeAddr for a single socket endpoint.

        Args:
            socket_addr: A socket module address, either (host, port) or the
                IPv6 form (host, port, flowinfo, scope_id).

        Returns:
            NodeAddr: The endpoint's host with a one-element port list.
        """
        if len(socket_addr) < 2:
            raise ValueError(f"Invalid socket address: {socket_addr!r}")
        return cls(socket_addr[0], [socket_addr[1]])



    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NodeAddr":
        """
        Decodes the mapping produced by to_dict().

        Args:
            data: A mapping with exactly the keys "ip_addr" and "ports".

        Returns:
            NodeAddr: The decoded, normalized value.
        """
        if set(data) != {'ip_addr', 'ports'}:
            logger.debug(f"rejecting node address fields: {sorted(data)}")
            raise ValueError(
                f"Invalid node address format: {data!r}")
        return cls(data['ip_addr'], data['ports'])



    def _port(self, port: Any) -> int:
        # bool is an int subclass but never a port
        if isinstance(port, bool) or not isinstance(port, int):
            raise TypeError(f"Port must be an int, not {type(port).__name__}")
        if not 0 <= port <= NodeAddr._MAX_PORT:
            raise ValueError(f"Port out of range: {port}")
        return port



    @property
    def ip_addr(self) -> IPAddress:
        return self._ip_addr



    @property
    def ports(self) -> list[int]:
        return list(self._ports)



    def socket_addrs(self) -> list[SocketAddr]:
        """
        Expands into one socket endpoint per port, in ascending port order.

        Returns:
            list[tuple[str, int]]: (host, port) pairs sharing this IP.
        """
        return list(self)



    def clone(self) -> "NodeAddr":
        return NodeAddr(self._ip_addr, self._ports)



    def to_dict(self) -> dict[str, Any]:
        return {'ip_addr': str(self._ip_addr), 'ports': list(self._ports)}



    def __iter__(self) -> Iterator[SocketAddr]:
        host = str(self._ip_addr)
        return ((host, port) for port in self._ports)



    def __copy__(self) -> "NodeAddr":
        return self.clone()



    def __deepcopy__(self, memo: dict[int, Any]) -> "NodeAddr":
        return self.clone()



    def __reduce__(self) -> tuple[Any, ...]:
        return (NodeAddr, (str(self._ip_addr), self._ports))



    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"NodeAddr is immutable, cannot set {name!r}")



    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"NodeAddr is immutable, cannot delete {name!r}")



    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NodeAddr):
            return NotImplemented
        return (self._ip_addr == other._ip_addr and
                self._ports == other._ports)



    def __hash__(self) -> int:
        return hash((self._ip_addr, self._ports))



    def __repr__(self) -> str:
        return f"{self._ip_addr}:{list(self._ports)}"



def group_socket_addrs(socket_addrs: Iterable[Sequence[Any]]) -> list[NodeAddr]:
    """
    Collects socket endpoints into one NodeAddr per distinct IP address.

    The inverse of NodeAddr.socket_addrs(): NodeAddrs come back in the order
    their IP first appears.

    Args:
        socket_addrs: (host, port) or (host, port, flowinfo, scope_id) tuples.

    Returns:
        list[NodeAddr]: One entry per IP, holding every port seen for it.
    """
    grouped: dict[IPAddress, list[int]] = {}
    for socket_addr in socket_addrs:
        single = NodeAddr.from_socket_addr(socket_addr)
        grouped.setdefault(single.ip_addr, []).extend(single.ports)
    logger.trace(f"grouped endpoints into {len(grouped)} node addresses")
    return [NodeAddr(ip, ports) for ip, ports in grouped.items()]
