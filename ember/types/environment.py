"""Runtime environment for Ember.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Frames are shared by reference: every
closure created in a frame keeps that frame (and its ancestors) alive.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from ember import LispValue
from ember.errors import EmberExpectedSymbol, EmberUnboundSymbol
from ember.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only; ancestors are never touched.

        Raises EmberExpectedSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise EmberExpectedSymbol(name)
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outward through the chain.

        Raises EmberUnboundSymbol if no frame binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            vars_ = env.vars
            if name in vars_:
                return vars_[name]
            env = env.outer
        raise EmberUnboundSymbol(str(name))

    def root(self) -> Environment:
        """Return the outermost (parentless) frame of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def extend(self, params: Iterable[Symbol], args: Iterable[LispValue]) -> Environment:
        """Return a child frame binding `params` to `args` positionally.

        Surplus arguments are dropped; surplus parameters stay unbound.
        """
        child = Environment(outer=self)
        child.vars.update(zip(params, args))
        return child

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the root frame is abbreviated."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            if env.outer is None:
                chain.append(f"<root: {len(env.vars)} bindings>")
            else:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
