"""Per-render style injection deduplication.

A render scope (usually one HTTP response) is bracketed by
:func:`push_style_scope` / :func:`pop_style_scope`. Inside a scope,
:func:`should_inject_style` answers True only the first time it sees a key;
outside any scope it always answers True.

Scopes nest, and the stack is context-local: each thread and each asyncio
task sees its own stack, so concurrent responses never share dedup state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from modern_css.naming import to_base36

__all__ = [
    "hash_css",
    "inline_style_tag",
    "pop_style_scope",
    "push_style_scope",
    "scope_depth",
    "should_inject_style",
    "style_key",
    "style_scope",
]

logger = logging.getLogger(__name__)

# Push and pop replace the tuple; only the top set is mutated in place.
_scope_stack: ContextVar[tuple[set[str], ...]] = ContextVar(
    "modern_css_style_scopes", default=()
)


def push_style_scope() -> None:
    """Open a new, empty dedup scope on top of the current stack."""
    stack = _scope_stack.get()
    _scope_stack.set(stack + (set(),))
    logger.debug("Pushed style scope (depth=%d)", len(stack) + 1)


def pop_style_scope() -> None:
    """Discard the innermost scope. Popping with no active scope is a no-op."""
    stack = _scope_stack.get()
    if not stack:
        logger.warning("pop_style_scope() called with no active style scope")
        return
    _scope_stack.set(stack[:-1])
    logger.debug("Popped style scope (depth=%d)", len(stack) - 1)


def scope_depth() -> int:
    return len(_scope_stack.get())


def should_inject_style(key: str) -> bool:
    """Return True if the style identified by *key* should be emitted now.

    Records *key* in the innermost scope. With no active scope, dedup is
    disabled and the answer is always True.
    """
    stack = _scope_stack.get()
    if not stack:
        return True
    seen = stack[-1]
    if key in seen:
        return False
    seen.add(key)
    return True


@contextmanager
def style_scope() -> Iterator[None]:
    """Run a block inside its own dedup scope, popping it even on error."""
    push_style_scope()
    try:
        yield
    finally:
        pop_style_scope()


def hash_css(css: str) -> str:
    """Deterministic content hash of compiled CSS, used to build dedup keys.

    djb2 with xor (``h * 33 ^ unit``) over UTF-16 code units, unsigned
    32-bit, rendered in base 36.
    """
    h = 5381
    raw = css.encode("utf-16-le")
    for i in range(0, len(raw), 2):
        h = ((h * 33) & 0xFFFFFFFF) ^ int.from_bytes(raw[i : i + 2], "little")
    return to_base36(h)


def style_key(component_name: str, css: str) -> str:
    """Build a dedup key from the component name and its compiled CSS.

    Keys come from CSS content, never from class names, because class names
    are not stable across compile calls.
    """
    return f"{component_name}:{hash_css(css)}"


def inline_style_tag(component_name: str, css: str) -> str:
    """Return ``<style>`` markup for *css*, or ``""`` if this scope already has it."""
    if not css:
        return ""
    if not should_inject_style(style_key(component_name, css)):
        return ""
    return f"<style>{css}</style>"
