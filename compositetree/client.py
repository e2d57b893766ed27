"""Demonstration client for compositetree.

The client code works with every component through the base Component
interface, so the same functions handle a single leaf and a whole tree.
"""

from .core import Component, Composite, Leaf


def client_code(component: Component) -> str:
    """Print the result of a component's operation and return it."""
    result = component.operation()
    print(f"RESULT: {result}")
    return result


def client_code_2(component1: Component, component2: Component) -> str:
    """Attach component2 under component1 when it can bear children.

    The capability check goes through ``is_composite()``, so the client
    never depends on the concrete component classes even while managing
    the tree.
    """
    if component1.is_composite():
        component1.add(component2)
    return client_code(component1)


def main() -> int:
    """Build the sample tree and print what the client sees."""
    simple = Leaf()
    print("Client: I've got a simple component:")
    client_code(simple)
    print()

    # ...as well as the complex composites.
    tree = Composite()
    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())
    branch2 = Composite()
    branch2.add(Leaf())
    tree.add(branch1)
    tree.add(branch2)
    print("Client: Now I've got a composite tree:")
    client_code(tree)
    print()

    print("Client: I don't need to check the components classes even when managing the tree:")
    client_code_2(tree, simple)

    return 0
