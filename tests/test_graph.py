import pytest

from nettopo.graph import MAX_INTF_PER_NODE, Graph, Node, build_first_topo, insert_link


def test_nodes_listed_newest_first():
    topo = build_first_topo()
    assert [n.name for n in topo.nodes] == ["R3", "R2", "R1"]


def test_node_by_name():
    topo = build_first_topo()
    assert topo.node_by_name("R2").name == "R2"
    assert topo.node_by_name("R9") is None


def test_interfaces_and_neighbors():
    topo = build_first_topo()
    r1 = topo.node_by_name("R1")
    r3 = topo.node_by_name("R3")
    assert [i.name for i in r1.interfaces] == ["eth0", "eth4"]
    eth4 = r1.interface_by_name("eth4")
    assert eth4.neighbor() is r3
    assert eth4.link.cost == 3
    assert r3.interface_by_name("eth5").neighbor() is r1
    assert r1.interface_by_name("eth5") is None


def test_link_ends_share_link():
    graph = Graph("G")
    a, b = graph.add_node("A"), graph.add_node("B")
    link = insert_link(a, b, "x", "y", 7)
    assert link.interface1.link is link and link.interface2.link is link
    assert link.interface1.node is a and link.interface2.node is b


def test_names_truncated():
    graph = Graph("T" * 40)
    node = graph.add_node("N" * 20)
    other = graph.add_node("M")
    insert_link(node, other, "i" * 20, "j", 1)
    assert len(graph.name) == 31
    assert node.name == "N" * 15
    assert node.interfaces[0].name == "i" * 15


def test_interface_limit():
    graph = Graph("G")
    hub = graph.add_node("hub")
    for k in range(MAX_INTF_PER_NODE):
        insert_link(hub, graph.add_node(f"n{k}"), f"h{k}", "e", 1)
    spare = graph.add_node("spare")
    with pytest.raises(ValueError):
        insert_link(hub, spare, "extra", "e", 1)
    assert spare.interfaces == []
    assert len(hub.interfaces) == MAX_INTF_PER_NODE


def test_unlinked_interface_has_no_neighbor():
    node = Node("lonely")
    assert node.interface_by_name("eth0") is None


def test_dump_first_topo():
    text = build_first_topo().dump()
    assert text == (
        "Topology: MyFirstTopo\n"
        "Node: R3\n"
        "  Interface: eth3 --> R2 (cost: 1)\n"
        "  Interface: eth5 --> R1 (cost: 3)\n"
        "Node: R2\n"
        "  Interface: eth1 --> R1 (cost: 1)\n"
        "  Interface: eth2 --> R3 (cost: 1)\n"
        "Node: R1\n"
        "  Interface: eth0 --> R2 (cost: 1)\n"
        "  Interface: eth4 --> R3 (cost: 3)\n"
    )


def test_dump_empty_graph():
    assert Graph("Empty").dump() == "Topology: Empty\n"