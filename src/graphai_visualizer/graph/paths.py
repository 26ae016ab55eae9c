"""Scope paths of nested graphs ("outer.inner.") and the indentation they imply."""

SCOPE_SEPARATOR = "."


def scope_depth(scope_path: str) -> int:
    """Number of enclosing sub-graphs named by ``scope_path``."""
    return len([part for part in scope_path.split(SCOPE_SEPARATOR) if part])


def indent_for(scope_path: str) -> str:
    return " " * (scope_depth(scope_path) + 1)


def qualify(scope_path: str, node_id: str) -> str:
    return f"{scope_path}{node_id}"


def child_scope(qualified_id: str) -> str:
    return f"{qualified_id}{SCOPE_SEPARATOR}"
