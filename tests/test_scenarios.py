"""End-to-end scenarios for compositetree.

Builds the sample trees a client would assemble and checks the
aggregated result strings.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from compositetree import Composite, Leaf


def build_sample_tree():
    """Create the sample tree.

    Structure:
    tree
    ├── branch1
    │   ├── Leaf
    │   └── Leaf
    └── branch2
        └── Leaf
    """
    tree = Composite()
    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())
    branch2 = Composite()
    branch2.add(Leaf())
    tree.add(branch1)
    tree.add(branch2)
    return tree, branch1, branch2


def test_single_leaf():
    """Scenario A: a lone leaf."""
    print("\n=== Test: Single Leaf ===")
    assert Leaf().operation() == "Leaf"
    print("[PASS] Single leaf passed")


def test_composite_with_two_leaves():
    """Scenario B: one composite, two leaves."""
    print("\n=== Test: Composite With Two Leaves ===")
    branch = Composite()
    branch.add(Leaf())
    branch.add(Leaf())

    assert branch.operation() == "Branch(Leaf+Leaf)"
    print("[PASS] Composite with two leaves passed")


def test_nested_tree():
    """Scenario C: two branches under a root."""
    print("\n=== Test: Nested Tree ===")
    tree, branch1, branch2 = build_sample_tree()

    result = tree.operation()
    print(f"RESULT: {result}")

    assert result == "Branch(Branch(Leaf+Leaf)+Branch(Leaf))"
    assert branch1.get_parent() is tree
    assert branch2.get_parent() is tree
    print("[PASS] Nested tree passed")


def test_add_on_leaf_is_noop():
    """Scenario D: adding to a leaf changes nothing."""
    print("\n=== Test: Add On Leaf ===")
    leaf = Leaf()
    leaf.add(Leaf())

    assert leaf.operation() == "Leaf"
    assert not leaf.is_composite()
    print("[PASS] Add on leaf passed")


def test_subtree_operation_matches_nested_result():
    """Operation on any node describes just its own subtree."""
    tree, branch1, branch2 = build_sample_tree()

    assert branch1.operation() == "Branch(Leaf+Leaf)"
    assert branch2.operation() == "Branch(Leaf)"
    assert tree.operation() == f"Branch({branch1.operation()}+{branch2.operation()})"


def test_remove_branch_updates_result():
    tree, branch1, branch2 = build_sample_tree()

    tree.remove(branch1)

    assert tree.operation() == "Branch(Branch(Leaf))"
    assert branch1.get_parent() is None
    assert branch1.operation() == "Branch(Leaf+Leaf)"


def test_empty_branches_nest():
    tree = Composite()
    tree.add(Composite())
    tree.add(Composite())

    assert tree.operation() == "Branch(Branch()+Branch())"


@pytest.mark.parametrize("count, expected", [
    (0, "Branch()"),
    (1, "Branch(Leaf)"),
    (3, "Branch(Leaf+Leaf+Leaf)"),
])
def test_join_has_no_trailing_separator(count, expected):
    branch = Composite()
    for _ in range(count):
        branch.add(Leaf())

    assert branch.operation() == expected


def test_capability_probe_before_add():
    """Client code gates add on is_composite() without type checks."""
    targets = [Leaf(), Composite()]
    for target in targets:
        if target.is_composite():
            target.add(Leaf())

    assert [t.operation() for t in targets] == ["Leaf", "Branch(Leaf)"]


def test_deep_chain():
    """Recursion follows tree height."""
    root = Composite()
    node = root
    for _ in range(50):
        child = Composite()
        node.add(child)
        node = child
    node.add(Leaf())

    assert root.operation() == "Branch(" * 51 + "Leaf" + ")" * 51
