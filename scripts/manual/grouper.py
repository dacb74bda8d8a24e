"""grouper.py: groups host:port endpoints into NodeAddrs for debugging."""
import sys

import bpython
from show import show  #type: ignore

from nodeaddr import group_socket_addrs


def main() -> None:
    """Groups the endpoints given on the command line by IP address."""
    if len(sys.argv) < 2:
        print("usage: [uv run] python " \
              "grouper.py ip:port [ip:port ...]")
        exit(1)

    # split on the last colon so IPv6 hosts keep theirs
    endpoints = []
    for arg in sys.argv[1:]:
        host, _, port = arg.rpartition(":")
        endpoints.append((host.strip("[]"), int(port)))

    addrs = group_socket_addrs(endpoints)
    show(addrs)
    repl_locals = {
        'addrs': addrs,
        'show': show,
    }
    print("starting repl. access `addrs`, print them with `show(addrs)`")
    bpython.embed(locals_=repl_locals)


if __name__ == '__main__':
    main()
