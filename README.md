# treegraph

Classic search trees, heaps and graph algorithms written in plain Python,
with no third-party dependencies.

## What is inside

| Module                    | Contents |
|---------------------------|----------|
| `treegraph.bst`           | `BinarySearchTree`, `TreeNode`: unbalanced binary search tree with traversals, mirroring and copying |
| `treegraph.heaps`         | `MaxHeap`, `MinHeap`: array-backed binary heaps |
| `treegraph.avl`           | `AVLTree`, and `PlayerRanking` with `Player` (players ordered by score) |
| `treegraph.aa`            | `AATree`: search tree balanced by node levels (skew and split) |
| `treegraph.redblack`      | `RedBlackTree` and its `Color` enum |
| `treegraph.btree`         | `BTree` of a given minimum degree |
| `treegraph.bplustree`     | `BPlusTree` of a given minimum degree, keys kept in linked leaves |
| `treegraph.threaded`      | `ThreadedBinaryTree`: in-order traversal without a stack |
| `treegraph.search`        | depth-first and breadth-first search over adjacency lists |
| `treegraph.shortest_path` | Dijkstra's algorithm over adjacency lists or weight matrices |
| `treegraph.mst`           | Prim's and Kruskal's minimum spanning trees (`Edge`, `SpanningTree`) |

## Trees

The trees support `len()` and iteration in ascending order; all but the
B-tree and B+ tree also support `in`.

```python
from treegraph.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(60)
tree.delete(30)        # True if a value was removed

list(tree)             # values in ascending order
tree.preorder()        # root, left, right
tree.postorder()
tree.level_order()     # breadth first
tree.levels()          # values grouped by depth
40 in tree
tree.height()          # number of levels, 0 when empty
tree.leaf_count()

mirrored = tree.copy()
mirrored.mirror()      # the original tree is left untouched
```

How each tree treats duplicates and missing values:

| Tree                 | Duplicate insert            | Deleting a missing value |
|----------------------|-----------------------------|--------------------------|
| `BinarySearchTree`   | kept (right subtree)        | `delete` returns `False` |
| `AVLTree`, `AATree`  | ignored, `insert` returns `False` | `delete` returns `False` |
| `RedBlackTree`       | kept (right subtree)        | `remove` raises `KeyError` |
| `BTree`, `BPlusTree` | kept                        | `delete` returns `False` |
| `ThreadedBinaryTree` | `insert` raises `ValueError` | `delete` raises `KeyError` |

```python
from treegraph.avl import AVLTree
from treegraph.aa import AATree
from treegraph.redblack import RedBlackTree

avl = AVLTree(range(10))
avl.height()

aa = AATree([5, 3, 8])

rb = RedBlackTree([10, 20, 30])
rb.remove(20)
rb.level_order()       # [(value, Color.RED or Color.BLACK), ...] breadth first
```

B-trees and B+ trees take their minimum degree (at least 2) instead of
initial values; `BPlusTree` defaults to degree 3.

```python
from treegraph.btree import BTree
from treegraph.bplustree import BPlusTree

btree = BTree(3)
for key in (10, 20, 5, 6, 12, 30, 7, 17):
    btree.insert(key)
btree.delete(6)
btree.inorder()

bplus = BPlusTree()
bplus.insert(1)
bplus.insert(1)
len(bplus)             # 2
```

### Player ranking

`PlayerRanking` keeps players in an AVL tree ordered by score, equal
scores to the right. `descending()` yields `Player(player_id, score)` from
the highest score down. `delete(player_id)` searches by comparing player
identifiers, so it finds a player only when identifiers follow the same
order as scores along the search path.

```python
from treegraph.avl import PlayerRanking

ranking = PlayerRanking()
ranking.insert(1, 40)
ranking.insert(2, 90)
[player.score for player in ranking.descending()]   # [90, 40]
```

## Heaps

Both heaps store their items in level order; iterating yields them in that
order. `pop` and `peek` raise `IndexError` on an empty heap.

```python
from treegraph.heaps import MaxHeap, MinHeap

high = MaxHeap([3, 9, 1])
high.push(7)
high.peek()            # 9
high.pop()             # removes and returns 9

low = MinHeap([3, 9, 1])
low.pop()              # 1
```

## Graphs

Vertices are numbered from 0. Graphs are given as adjacency matrices or as
adjacency lists; out-of-range vertices raise `ValueError`.

```python
from treegraph.search import adjacency_from_matrix, depth_first_path, breadth_first_order
from treegraph.shortest_path import dijkstra, dijkstra_matrix
from treegraph.mst import prim, prim_matrix, kruskal, kruskal_matrix

matrix = [
    [0, 4, 1, 0],
    [4, 0, 2, 5],
    [1, 2, 0, 8],
    [0, 5, 8, 0],
]

adjacency = adjacency_from_matrix(matrix)   # neighbour lists, ascending
depth_first_path(adjacency, 0, 3)
breadth_first_order(adjacency, 0, 3)

dijkstra_matrix(matrix, 0)   # list of distances; math.inf if unreachable

tree = prim_matrix(matrix, 0)
tree.total_weight()
list(tree)                   # Edge(source, target, weight) objects

kruskal_matrix(matrix).total_weight()
kruskal(4, [(0, 1, 4), (0, 2, 1), (1, 2, 2), (1, 3, 5)])
```

Notes on behaviour:

- `depth_first_path` always follows the first unvisited neighbour and does
  not backtrack; it stops at the target or at a dead end.
- `breadth_first_order` returns vertices in discovery order, stopping when
  the target is discovered; otherwise every reachable vertex is returned.
- In weight matrices an off-diagonal `0` or `None` means "no edge" and the
  diagonal is ignored. `edges_from_matrix` reads edges from the upper
  triangle.
- `prim` raises `ValueError` when the graph is not connected; `kruskal`
  returns a spanning forest instead.

## What this package does not do

It is a library only: there is no command-line program or interactive
menu, and the structures do not print themselves. Traversals and searches
return lists, and callers decide how to display them. Nothing is stored
on disk.

## Running the tests

The test suite uses pytest and hypothesis, available through the `test`
extra:

```
pip install -e ".[test]"
pytest
```