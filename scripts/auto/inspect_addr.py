"""inspect_addr.py: builds a NodeAddr from the command line for inspection."""
import sys

import IPython
from loguru import logger

from nodeaddr import NodeAddr

logger.enable("nodeaddr")


def main() -> None:
    """Builds a NodeAddr and opens a repl with it bound to `addr`."""
    if len(sys.argv) < 2:
        print("usage: [uv run] python inspect_addr.py ip_addr [port ...]")
        exit(1)

    ip = sys.argv[1]
    ports = [int(p) for p in sys.argv[2:]]

    addr = NodeAddr(ip, ports)
    print(f"NodeAddr created as \"addr\": {addr}", file=sys.stderr)
    for endpoint in addr.socket_addrs():
        print(f"  {endpoint}", file=sys.stderr)
    repl_locals = {
        'addr': addr,
        'NodeAddr': NodeAddr,
    }
    print("starting repl. access `addr`")
    IPython.embed(user_ns=repl_locals)


if __name__ == '__main__':
    main()
