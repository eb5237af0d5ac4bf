#!/usr/bin/env python3
"""Demo module for multiaddr parsing and composition."""

from rich import box
from rich.console import Console
from rich.table import Table

from . import Multiaddr, MultiaddrError

EXAMPLES = [
    "/ip4/127.0.0.1/tcp/9090",
    "/ip6/::1/udp/4001/quic-v1",
    "/dns4/example.com/tcp/443/wss",
    "/unix/tmp/socket",
    "/ip4/1.2.3.4/tcp/80/p2p/QmPeer",
]


def segment_table(addr: Multiaddr) -> Table:
    """Build a table of one address's segments and their wire bytes."""
    table = Table(title=str(addr), box=box.SIMPLE_HEAVY)
    table.add_column("Protocol")
    table.add_column("Code", justify="right")
    table.add_column("Address")
    table.add_column("Wire bytes")
    for segment in addr:
        table.add_row(
            segment.protocol.name,
            f"0x{segment.protocol.code:04x}",
            segment.address or "",
            segment.to_bytes().hex(" "),
        )
    return table


def run_demo(console: Console) -> None:
    """Run a complete multiaddr demo."""
    console.print("[bold]Multiaddr Demo - Parsing and Composition[/bold]")

    for text in EXAMPLES:
        addr = Multiaddr(text)
        console.print(segment_table(addr))
        console.print(f"packed: {addr.to_bytes().hex()}\n")

    base = Multiaddr("/ip4/1.2.3.4/tcp/80")
    full = base.encapsulate("/p2p/QmPeer")
    console.print(f"encapsulate: {base} + /p2p/QmPeer -> {full}")
    console.print(f"peer id:     {full.get_peer_id()}")
    console.print(f"decapsulate: {full} - tcp -> {full.decapsulate('tcp')}")
    console.print(f"swap port:   {full.swap('8080', 'tcp')}")

    for bad in ["", "ip4/1.2.3.4", "/ip4/300.0.0.1", "/tcp/notaport"]:
        try:
            Multiaddr(bad)
        except MultiaddrError as exc:
            console.print(f"[red]{bad!r}[/red] -> {type(exc).__name__} ({exc.code.name}): {exc}")


def main():
    """Main entry point for the demo."""
    run_demo(Console())


if __name__ == "__main__":
    main()
