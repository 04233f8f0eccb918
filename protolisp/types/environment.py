"""Runtime environment for protolisp.

The Environment stores bindings of names to runtime values and supports
nested scopes via an `outer` link. Frames are created per `do` block, per
call and per object; a child frame shadows same-named bindings of its
ancestors.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from protolisp.types.values import RuntimeValue


class Environment:
    """Hierarchical mapping from names to runtime values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, RuntimeValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: RuntimeValue) -> None:
        """Bind `name` to `value` in this frame, replacing any local binding."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def resolve(self, name: str, current_only: bool = False) -> Optional[RuntimeValue]:
        """Return the value bound to `name`, or None when it is not bound.

        With `current_only` only this frame is inspected; otherwise the
        chain is walked outward until the name is found or the chain ends.
        Absence is never an error here; callers decide what it means.
        """
        if current_only:
            return self.vars.get(name)
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def snapshot(self, current_only: bool = False) -> dict[str, RuntimeValue]:
        """Merged name -> value view; child bindings override their ancestors'."""
        if current_only or self.outer is None:
            return dict(self.vars)
        merged = self.outer.snapshot(False)
        merged.update(self.vars)
        return merged

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        frames = []
        for env in self.chain():
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                frames.append(env_buf.getvalue())
        return f"<Environment chain: {' -> '.join(frames)}>"
