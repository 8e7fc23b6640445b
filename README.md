# nettopo

A small library for describing network topologies in Python. A topology is a
`Graph` of `Node` objects joined by `Link` objects. Each link ends in an
`Interface` on either node and carries a cost.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
nettopo
```

This builds the sample three-router topology and prints it. For each node it
prints the node's name. For each of the node's interfaces it prints the
interface name, the neighbouring node and the link cost. The command takes no
options apart from `-h`/`--help`.

## Library use

```python
from nettopo.graph import Graph, insert_link, build_first_topo

topo = Graph("lab")
r1 = topo.add_node("R1")
r2 = topo.add_node("R2")
link = insert_link(r1, r2, "eth0", "eth1", 1)

topo.node_by_name("R1").interface_by_name("eth0").neighbor()  # the R2 node
print(topo.dump(), end="")

print(build_first_topo().dump(), end="")
```

- `Graph.add_node(name)` creates a `Node` and puts it at the front of the
  graph. `Graph.nodes` lists the newest node first.
- `Graph.node_by_name(name)` and `Node.interface_by_name(if_name)` return the
  match or `None`.
- `insert_link(node1, node2, from_if_name, to_if_name, cost)` creates a `Link`
  and returns it. The link has two new interfaces, `link.interface1` and
  `link.interface2`, one attached to each node. A node holds at most ten
  interfaces. When a node has no free slot, `insert_link` raises `ValueError`.
- `Interface.neighbor()` returns the node at the other end of the link.
- `Graph.dump()` returns the description as a string. It does not print it.

Names are cut to fixed widths:

| Name            | Characters kept |
|-----------------|-----------------|
| Node names      | 15              |
| Interface names | 15              |
| Topology names  | 31              |

Nodes are kept in a `LinkedList` from `nettopo.linkedlist`. It supports
`add_front`, `remove`, iteration, `len()` and `in`. Items are tracked by
identity:

- Adding an item that is already in the list raises `ValueError`.
- Removing an item that is not in the list raises `ValueError`.
- While you iterate over the list, you can remove the current item.

### Addressing

`nettopo.net` handles addressing for nodes and interfaces. Each `Node` has a
`network` attribute holding a `NodeNetworkProp` (`is_loopback`,
`loopback_addr`). Each `Interface` has a `network` attribute holding an
`InterfaceNetworkProp` (`mac`, `is_ip`, `ip_addr`, `mask`).

- `set_loopback_address(node, ip_addr)` gives a node its loopback address. An
  empty address raises `ValueError`.
- `set_interface_ip_address(node, if_name, ip_addr, mask)` puts an interface
  into layer-3 mode with an address and mask. An unknown interface raises
  `KeyError`. A mask outside 0–32 raises `ValueError`.
- `remove_interface_ip_address(node, if_name)` clears the address and mask.
- `assign_mac_address(interface)` derives a 48-byte MAC field from the node
  and interface names. The first four bytes hold the product of the two
  `hash_code` values; the rest are zero.
- `hash_code(data, size)` hashes `size` bytes of `data`, zero padded, into an
  unsigned 32-bit value.
- `apply_mask(prefix, mask)` returns the IPv4 network address of `prefix`
  under a mask of `mask` bits.

Addresses are kept as strings of at most 15 characters.

## What it does not do

The package models topologies and their addressing only. It does not send or
receive packets, and it does not compute routes.