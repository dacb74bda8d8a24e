"""show.py: helper for manual scripts."""

from nodeaddr import NodeAddr


def show(addrs: list[NodeAddr]) -> None:
    """Prints each NodeAddr with its expanded endpoints."""
    for addr in addrs:
        print(f"{addr} -> {addr.socket_addrs()}")
