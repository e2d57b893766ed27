"""Tests for the demonstration client."""

import subprocess
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositetree import Composite, Leaf
from compositetree.client import client_code, client_code_2, main


def test_client_code_prints_result(capsys):
    assert client_code(Leaf()) == "Leaf"
    assert capsys.readouterr().out == "RESULT: Leaf\n"


def test_client_code_2_adds_to_composite(capsys):
    tree = Composite()
    leaf = Leaf()

    result = client_code_2(tree, leaf)

    assert result == "Branch(Leaf)"
    assert leaf.get_parent() is tree
    assert capsys.readouterr().out == "RESULT: Branch(Leaf)\n"


def test_client_code_2_skips_leaf(capsys):
    leaf = Leaf()
    other = Leaf()

    assert client_code_2(leaf, other) == "Leaf"
    assert other.get_parent() is None


def test_main_output(capsys):
    assert main() == 0

    out = capsys.readouterr().out
    assert out == (
        "Client: I've got a simple component:\n"
        "RESULT: Leaf\n"
        "\n"
        "Client: Now I've got a composite tree:\n"
        "RESULT: Branch(Branch(Leaf+Leaf)+Branch(Leaf))\n"
        "\n"
        "Client: I don't need to check the components classes even when managing the tree:\n"
        "RESULT: Branch(Branch(Leaf+Leaf)+Branch(Leaf)+Leaf)\n"
    )


def test_module_entry_point():
    """python -m compositetree runs the demo."""
    result = subprocess.run(
        [sys.executable, "-m", "compositetree"],
        cwd=Path(__file__).parent.parent,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert result.stdout.splitlines()[-1] == "RESULT: Branch(Branch(Leaf+Leaf)+Branch(Leaf)+Leaf)"
