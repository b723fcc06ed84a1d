# tempnet

`tempnet` provides temporal contact networks, in which edges appear and
disappear over time. They are built to drive event-based epidemic simulations,
and they also work on their own. The package uses only the standard library.

## The interface

Every network derives from `tempnet.networks.TemporalNetwork`.

You query the current graph with these methods:

- `nodes()`
- `outdegree(node)`
- `neighbour(node, index)`. It returns `-1` once `index` runs past the last
  neighbour.
- `is_undirected()`

You advance the network in time with two methods:

- `next(rng, max_time=math.inf)` returns the time of the next edge event
  without applying it. It returns `math.inf` when there is no further event.
- `step(rng, max_time=math.nan)` applies the next event and returns it as a
  `NetworkEvent`. It returns `None` when there is no event up to `max_time`.
  A NaN `max_time` means there is no limit.

Randomness always comes from a `random.Random` that you pass in.

`notify_epidemic_event(event, rng)` tells a network about an `EpidemicEvent`.
Only `TemporalSIRXNetwork` reacts to it; the other networks ignore it.

### Events

The module `tempnet.events` defines the event types.

`NetworkEvent` is a frozen dataclass with these fields:

- `kind`
- `source_node`
- `target_node`
- `time`
- `weight`, which defaults to `1.0`

Its `kind` is a `NetworkEventKind`:

- `NEIGHBOUR_ADDED`
- `NEIGHBOUR_REMOVED`
- `INSTANTANEOUS_CONTACT`

`EpidemicEvent` has these fields:

- `kind`
- `node`
- `time`
- `source_node`, which defaults to `-1`

Its `kind` is an `EpidemicEventKind`:

- `INFECTION`
- `OUTSIDE_INFECTION`
- `RESET`

## Networks

### `tempnet.empirical.EmpiricalTemporalNetwork(path, contact_type, dt)`

This network replays a recorded contact list. Each line of the file holds
`src dst time`, separated by whitespace.

- A line that cannot be parsed raises `ValueError`.
- A negative node id raises `ValueError`.
- Events are sorted by time. The network gets `max_node + 1` nodes.

The `contact_type` is an `EdgeDurationKind`:

- `FINITE_DURATION`: the directed edge `src -> dst` is added at
  `time - dt/2` and removed at `time + dt/2`. An add for an edge that already
  exists is skipped, and so is a remove for an edge that does not exist.
- `INFINITESIMAL_DURATION`: each line becomes one `INSTANTANEOUS_CONTACT`
  event with weight `dt`.

`compute_number_of_edges(rng)` consumes every remaining event. After each
event it records a `(time, edge_count)` tuple and returns the list of these
tuples. Instantaneous contacts add to the count and never leave it.

### `tempnet.sirx.TemporalSIRXNetwork(network, kappa0, kappa)`

This network wraps a static network and removes nodes over time.

- The wrapped network must provide `nodes()`, `neighbour(node, index)` and
  `outdegree(node)`. It may also provide `is_undirected()`.
- Every node that has not been removed is removed at rate `kappa0`.
- Infected nodes that have not been removed are removed at an additional rate
  `kappa`.
- Removing a node reports a `NEIGHBOUR_REMOVED` event for each of its outgoing
  edges.
- On undirected networks each edge is reported twice: first reversed, then as
  stored.
- A node without neighbours is removed without reporting any event.

After removal, `neighbour` returns `-1` for that node and `outdegree` returns
`0`.

`notify_epidemic_event` handles epidemic events as follows:

- It records infections and resets.
- It discards a pending event that was drawn for a later time.
- It raises `ValueError` for an event that lies before the current time.
- It raises `ValueError` for an event that lies after an already drawn next
  event.

`state(node)` returns a `NodeState`:

- `S`: not infected, not removed
- `I`: infected, not removed
- `R`: not infected, removed
- `X`: infected, removed

`is_removed(node)` and `is_infected(node)` query each part separately.

### `tempnet.erdos_reyni.TemporalErdosReyni(size, avg_degree, timescale, rng)`

This is an undirected Erdős–Rényi graph.

- The initial graph includes each edge with probability
  `p = avg_degree / (size - 1)`.
- Each edge then appears at rate `alpha = p / timescale` and vanishes at rate
  `beta = (1 - p) / timescale`.
- Each change is reported twice, once for each direction, at the same time.
- `ValueError` is raised when `size < 2`.
- `ValueError` is raised when `p` lies outside `[0, 1]`.

These attributes are public:

- `edge_probability`
- `alpha`
- `beta`
- `edges_present`
- `edges_absent`
- `current_time`
- `next_time`

`add_edge(node, neighbour)` and `remove_edge(node, neighbour_index)` edit the
graph directly and keep the edge counters up to date.

### `tempnet.activity_driven.ActivityDrivenNetwork(activity_rates, eta, m, recovery_rate, rng)`

This is an activity-driven model.

- Node `i` becomes active at rate `eta * activity_rates[i]`.
- On activation it links, in both directions, to `ceil(m)` distinct random
  other nodes.
- It becomes inactive at rate `recovery_rate`, which removes all of its edges.
- `ValueError` is raised if `ceil(m)` is not smaller than the number of nodes.

Activations and deactivations are handled inside `next`. `step` reports only
edge events. `activate_node(node, time)` and `deactivate_node(node, time)`
trigger these transitions by hand. Each raises `RuntimeError` if the node is
already in the requested state.

`advance_time(rng, max_time=math.nan)` takes up to N steps at a time, where N
is the number of nodes. After each batch it records three values:

- the time of the last event
- the mean degree
- the mean squared degree

It stops at `max_time`, or when the network has no further events. It returns
the three lists `(times, mean_degree, mean_squared_degree)`.

## Building blocks

- `tempnet.networks.MutableNetwork(nodes=0)` is a directed graph stored as
  adjacency sets. Its methods are:
  - `resize`
  - `add_edge`, which returns whether the edge was new
  - `remove_edge`, which returns whether the edge existed
  - `has_edge`
  - `nodes`, `neighbour` and `outdegree`

  A node id out of range raises `IndexError`. You can pass a `MutableNetwork`
  as the static network wrapped by `TemporalSIRXNetwork`.
- `tempnet.indexedset.IndexedSet` is a set with constant-time `add` and
  `discard`, positional access, and uniform sampling with `choice(rng)`.
  `choice` raises `IndexError` on an empty set.

## Example

```python
import random

from tempnet.erdos_reyni import TemporalErdosReyni

rng = random.Random(1)
net = TemporalErdosReyni(100, 3.0, 1.0, rng)
while (event := net.step(rng, 10.0)) is not None:
    print(event.time, event.kind.name, event.source_node, event.target_node)
```

## What this package does not do

- It has no epidemic simulator. Something outside the package must drive the
  networks and pass epidemic events to `notify_epidemic_event`.
- It has no generators for static networks. The only static graph it provides
  is `MutableNetwork`, which you fill yourself.
- It has no command-line interface.

## Tests

```
pip install -e .[test]
pytest
```