# treelist

`treelist` is an interactive terminal viewer for a singly linked list in which
every node holds a binary search tree of characters.

It reads a text file line by line. Each non-empty line becomes one list node
whose value is the line's first character. The node's tree is built by
inserting the line's characters one at a time, ordered by code point.
Characters that repeat are skipped.

## Installation

```
pip install .
```

## Running

```
treelist [FILE] [--no-clear]
```

`FILE` defaults to `agaclar.txt` in the current directory. If the file cannot
be opened, a message goes to standard error and the viewer starts with an
empty list. `--no-clear` keeps the screen from being cleared between frames.

The list is shown ten nodes per page. For each node on the page the screen
shows:

- the node's identifier
- the node's weighted tree value
- the identifier of the next node, or `NULL` for the last node

A marker sits under the selected node. The selected node's tree is drawn
below the list, one level per line with a line of dots marking the links.

Keys are read from standard input; whitespace is skipped, so several keys may
be typed on one line. Lower and upper case work alike:

| Key | Action                                       |
|-----|----------------------------------------------|
| `a` | move the selection one node to the left      |
| `d` | move the selection one node to the right     |
| `s` | delete the selected node                     |
| `w` | mirror the selected node's tree              |
| `q` | quit                                         |

The program also ends when input runs out. When the selection moves past the
edge of a page, the display changes to the next or previous page. After a
deletion the selection moves to the following node, or to the previous one if
the last node was deleted.

## Tree value

A tree's value is a weighted sum of character codes: the root counts once,
every right child counts twice and every left child counts three times.

## Library use

```python
from treelist.tree import BinaryTree
from treelist.linkedlist import TreeList

tree = BinaryTree()
for ch in "MKP":
    tree.insert(ch)
print(tree.total_value())
print(tree.inorder())
print(tree.render())

trees = TreeList()
trees.add_line("HELLO")
trees.add_line("WORLD")
print(len(trees))
trees.handle_key("d")
print(trees.render())
```

`BinaryTree` offers `insert`, `height` (an empty tree has height -1),
`total_value`, `mirror`, `inorder` and `render`. `TreeList` offers `add`,
`add_line`, `load`, `index_of`, `delete_current`, `handle_key` and `render`,
and can be iterated over and measured with `len`.

## Limits

Changes made in the viewer (deletions, mirroring) live only in memory; nothing
is written back to the file.

## Running the tests

```
pip install .[test]
pytest
```