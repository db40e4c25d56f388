"""Exercise templates and copying them into a day directory."""

from __future__ import annotations

from os import PathLike
from pathlib import Path, PurePosixPath

TEMPLATES_PATH = Path("src") / "DSA"

_NAMES = (
    "ArrayList",
    "BFSGraphList",
    "BFSGraphMatrix",
    "BinarySearchList",
    "BTBFS",
    "BTInOrder",
    "BTPostOrder",
    "BTPreOrder",
    "BubbleSort",
    "CompareBinaryTrees",
    "DFSGraphList",
    "DFSOnBST",
    "DijkstraList",
    "DoublyLinkedList",
    "InsertionSort",
    "LinearSearchList",
    "LRU",
    "Map",
    "MazeSolver",
    "MergeSort",
    "MinHeap",
    "PrimsList",
    "Queue",
    "QuickSort",
    "RingBuffer",
    "SinglyLinkedList",
    "Stack",
    "Trie",
    "TwoCrystalBalls",
)

TEMPLATE_FILES: dict[str, tuple[str, ...]] = {
    name: (f"{name}/{name}.go", f"{name}/{name}_test.go") for name in _NAMES
}


class TemplateError(Exception):
    """Raised when a template is unknown or cannot be copied."""


def copy_template(
    name: str,
    dst_dir: str | PathLike[str],
    templates_path: str | PathLike[str] = TEMPLATES_PATH,
) -> None:
    """Copy every file of the template ``name`` into ``dst_dir``."""
    try:
        files = TEMPLATE_FILES[name]
    except KeyError:
        raise TemplateError(f"algorithm {name} could not be found") from None

    for relative in files:
        parts = PurePosixPath(relative).parts
        try:
            content = Path(templates_path, *parts).read_bytes()
        except OSError as exc:
            raise TemplateError(f"read file {relative}: {exc}") from exc

        dst = Path(dst_dir, *parts)
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise TemplateError(f"make dirs for {dst}: {exc}") from exc
        try:
            dst.write_bytes(content)
        except OSError as exc:
            raise TemplateError(f"write file {dst}: {exc}") from exc