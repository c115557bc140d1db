from __future__ import annotations

"""
Caller identification for automatic tags.

Walks the interpreter stack outward from the logging facility, skipping the
facility's own frames, and describes the first external frame. Tag
derivation only depends on the CallSite value, so hosts without frame
introspection can plug in a static fallback.
"""

import re
import sys
from dataclasses import dataclass
from types import FrameType
from typing import Iterable, Optional

# Trailing '$1', '$1$2' markers of anonymous/synthetic class names
ANONYMOUS_CLASS = re.compile(r"(\$\d+)+$")

# Modules whose frames are part of the dispatch path, never the caller
INTERNAL_MODULES = frozenset({
    "logify",
    "logify.facade",
    "logify.core.callsite",
    "logify.core.loggers",
})


@dataclass(frozen=True)
class CallSite:
    """
    Location of the code that issued a log call.

    Attributes:
        module: Dotted module name of the frame.
        class_name: Name of the enclosing class for methods, else None.
        function: Function name of the frame.
        lineno: Current line number in that function.
    """
    module: str
    class_name: Optional[str]
    function: str
    lineno: int

    @property
    def type_name(self) -> str:
        """Class name when known, else the last component of the module."""
        return self.class_name or self.module.rsplit(".", 1)[-1]


def find_call_site(
        skip_modules: Iterable[str] = INTERNAL_MODULES,
        start: Optional[FrameType] = None,
) -> Optional[CallSite]:
    """
    Locate the first frame outside the logging facility.

    Args:
        skip_modules: Module names treated as internal.
        start: Frame to start from; defaults to the caller of this function.

    Returns:
        Optional[CallSite]: The external caller, or None if the stack only
        contains internal frames.
    """
    skip = frozenset(skip_modules)
    frame = start if start is not None else sys._getframe(1)
    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        if module not in skip:
            return CallSite(
                module=module,
                class_name=_enclosing_class(frame),
                function=frame.f_code.co_name,
                lineno=frame.f_lineno,
            )
        frame = frame.f_back
    return None


def create_stack_element_tag(site: CallSite, max_length: int, detail: bool = False) -> str:
    """
    Derive a short tag from a call site.

    The type name is stripped of anonymous-class suffixes and truncated to
    'max_length'. With 'detail', ':<function>:<line>' is appended after
    truncation.
    """
    tag = ANONYMOUS_CLASS.sub("", site.type_name)
    tag = tag[:max_length]
    if detail:
        tag = f"{tag}:{site.function}:{site.lineno}"
    return tag


def _enclosing_class(frame: FrameType) -> Optional[str]:
    local_vars = frame.f_locals
    if "self" in local_vars:
        return type(local_vars["self"]).__name__
    cls = local_vars.get("cls")
    if isinstance(cls, type):
        return cls.__name__
    return None
