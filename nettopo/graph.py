"""Network topology: nodes joined by links between named interfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .linkedlist import LinkedList
from .net import IF_NAME_SIZE, NODE_NAME_SIZE, InterfaceNetworkProp, NodeNetworkProp

MAX_INTF_PER_NODE = 10
TOPOLOGY_NAME_SIZE = 32


@dataclass(eq=False)
class Interface:
    """One end of a link, attached to a node."""

    name: str
    node: Optional["Node"] = field(default=None, repr=False)
    link: Optional["Link"] = field(default=None, repr=False)
    network: InterfaceNetworkProp = field(default_factory=InterfaceNetworkProp, repr=False)

    def neighbor(self) -> Optional["Node"]:
        """Return the node at the other end of this interface's link."""
        if self.link is None:
            return None
        other = self.link.interface2 if self is self.link.interface1 else self.link.interface1
        return other.node


class Link:
    """A weighted connection between two interfaces."""

    def __init__(self, node1: "Node", node2: "Node", if_name1: str, if_name2: str, cost: int) -> None:
        self.interface1 = Interface(if_name1[: IF_NAME_SIZE - 1], node1, self)
        self.interface2 = Interface(if_name2[: IF_NAME_SIZE - 1], node2, self)
        self.cost = cost

    def __repr__(self) -> str:
        return f"Link({self.interface1.name!r}, {self.interface2.name!r}, cost={self.cost})"


@dataclass(eq=False)
class Node:
    """A device in the topology with up to ``MAX_INTF_PER_NODE`` interfaces."""

    name: str
    interfaces: list[Interface] = field(default_factory=list, repr=False)
    network: NodeNetworkProp = field(default_factory=NodeNetworkProp, repr=False)

    def __post_init__(self) -> None:
        self.name = self.name[: NODE_NAME_SIZE - 1]

    def interface_by_name(self, if_name: str) -> Optional[Interface]:
        """Return the interface called ``if_name``, or None."""
        return next((i for i in self.interfaces if i.name == if_name), None)

    def _attach(self, interface: Interface) -> None:
        self.interfaces.append(interface)


class Graph:
    """A named topology holding its nodes, newest first."""

    def __init__(self, name: str) -> None:
        self.name = name[: TOPOLOGY_NAME_SIZE - 1]
        self.nodes: LinkedList[Node] = LinkedList()

    def add_node(self, name: str) -> Node:
        """Create a node called ``name`` and put it at the front of the graph."""
        node = Node(name)
        self.nodes.add_front(node)
        return node

    def node_by_name(self, name: str) -> Optional[Node]:
        """Return the node called ``name``, or None."""
        return next((n for n in self.nodes if n.name == name), None)

    def dump(self) -> str:
        """Describe the topology, one line per node and interface."""
        lines = [f"Topology: {self.name}"]
        for node in self.nodes:
            lines.append(f"Node: {node.name}")
            for interface in node.interfaces:
                if interface.link is None:
                    continue
                neighbor = interface.neighbor()
                lines.append(
                    f"  Interface: {interface.name} --> {neighbor.name} "
                    f"(cost: {interface.link.cost})"
                )
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Graph({self.name!r})"


def insert_link(node1: Node, node2: Node, from_if_name: str, to_if_name: str, cost: int) -> Link:
    """Join two nodes with a link of the given cost through new interfaces."""
    for node in (node1, node2):
        if len(node.interfaces) >= MAX_INTF_PER_NODE:
            raise ValueError(f"node {node.name!r} has no free interface slot")
    if node1 is node2 and len(node1.interfaces) + 2 > MAX_INTF_PER_NODE:
        raise ValueError(f"node {node1.name!r} has no free interface slot")
    link = Link(node1, node2, from_if_name, to_if_name, cost)
    node1._attach(link.interface1)
    node2._attach(link.interface2)
    return link


def build_first_topo() -> Graph:
    """Build the three-router sample topology."""
    topo = Graph("MyFirstTopo")
    r1 = topo.add_node("R1")
    r2 = topo.add_node("R2")
    r3 = topo.add_node("R3")
    insert_link(r1, r2, "eth0", "eth1", 1)
    insert_link(r2, r3, "eth2", "eth3", 1)
    insert_link(r1, r3, "eth4", "eth5", 3)
    return topo