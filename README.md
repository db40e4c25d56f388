# katamachine

A kata machine for practising data structures and algorithms every day.

Each day you get a fresh directory of empty templates for the algorithms you
want to drill. You implement them from memory, then run their tests.

## Installation

```
pip install .
```

## Layout of a practice directory

The command works relative to the directory it is run in:

- `config.yaml` lists the algorithms to copy each day.
- `src/DSA/<Name>/` holds the template of each algorithm: `<Name>.go` and
  `<Name>_test.go`.
- `src/dayN/` is the directory of day `N`. The current day is the highest
  `N` found; when there is none it is 0.

Known template names: ArrayList, BFSGraphList, BFSGraphMatrix,
BinarySearchList, BTBFS, BTInOrder, BTPostOrder, BTPreOrder, BubbleSort,
CompareBinaryTrees, DFSGraphList, DFSOnBST, DijkstraList, DoublyLinkedList,
InsertionSort, LinearSearchList, LRU, Map, MazeSolver, MergeSort, MinHeap,
PrimsList, Queue, QuickSort, RingBuffer, SinglyLinkedList, Stack, Trie,
TwoCrystalBalls.

## Configuration

```yaml
DSA:
  - ArrayList
  - Queue
  - Stack
  - BinarySearchList
  - BubbleSort
  - LRU
```

## Usage

Create the next day (`src/day<current+1>`) with every algorithm in the config:

```
katamachine generate
```

Use another config file, or name the algorithms directly (names given on the
command line replace the config list):

```
katamachine generate -configPath other.yaml
katamachine generate Queue Stack
```

Run the tests of the current day, of a given day, or of particular
algorithms. Arguments from the first flag on are passed unchanged to
`go test`, which the command runs:

```
katamachine test
katamachine test -day 3
katamachine test Queue Stack -v
```

Flags may be written `-name value` or `-name=value`. The command exits with
status 1 when the config cannot be read, a template is unknown or missing,
or the tests fail, and with status 2 on a bad flag.

The same steps are available from Python: `katamachine.config.load`,
`katamachine.days.current_day`, `next_day` and `day_dir_path`,
`katamachine.templates.copy_template`, `katamachine.generate.generate` and
`katamachine.gotest.prepare_args`.

## Reference implementations

The `katamachine.dsa` package holds working versions of the katas, handy for
checking yourself:

```python
from katamachine.dsa.lru import LRU
from katamachine.dsa.search import binary_search
from katamachine.dsa.sorting import quick_sort

cache = LRU(3)
cache.update("foo", 69)
cache.get("foo")                 # 69; None for a missing key

binary_search([1, 3, 4, 69], 69) # True

numbers = [9, 3, 7, 4]
quick_sort(numbers)              # numbers is now [3, 4, 7, 9]
```

Modules:

- `lists`: `ArrayList`, `SinglyLinkedList`, `DoublyLinkedList`; `get` and
  `remove_at` raise `IndexError`, `remove` raises `ValueError`.
- `linear`: `Queue`, `Stack`, `RingBuffer`; taking from an empty one raises
  `IndexError`.
- `heap`: `MinHeap`; `lru`: `LRU`; `hashmap`: `HashMap`; `trie`: `Trie`
  (`find` returns matching words sorted).
- `search`: `linear_search`, `binary_search`, `two_crystal_balls`.
- `sorting`: `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`,
  all in place.
- `trees`: `bfs`, `dfs`, `compare`, `in_order_search`, `pre_order_search`,
  `post_order_search`.
- `graphs`: `bfs_list`, `bfs_matrix`, `dfs_list`, `dijkstra_list`, `prims`.
- `maze`: `solve`.
- `fixtures`: `GraphEdge`, `BinaryNode`, `Point` and the sample graphs and
  trees `ADJ_LIST_1`, `ADJ_LIST_2`, `ADJ_MATRIX_1`, `TREE_1`, `TREE_2`.

## What it does not do

The package does not ship the templates in `src/DSA`; they must already be
present in the practice directory. It does not run tests itself: `test`
needs the `go` command on the path.