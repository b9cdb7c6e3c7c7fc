from typing import Dict, Optional

from plox.errors import LoxRuntimeError
from plox.tokens import Token
from plox.types import Value


class Environment:
    """Maps variable names to values.

    The interpreter keeps one global environment per session. `enclosing`
    lets environments chain to a parent for nested scopes; lookups and
    assignments walk the chain outward.
    """
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Value] = {}

    def define(self, name: str, value: Value):
        # redeclaring a name overwrites its previous value and type
        self.values[name] = value

    def get(self, name: Token) -> Value:
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise LoxRuntimeError(name, f"undefined variable '{name.lexeme}'")

    def assign(self, name: Token, value: Value):
        env = self.resolve(name.lexeme)
        if env is None:
            # assignment does not require a prior declaration
            env = self.outermost()
        env.values[name.lexeme] = value

    def resolve(self, name: str) -> Optional['Environment']:
        """Return the nearest environment that binds `name`, if any."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.values:
                return env
            env = env.enclosing
        return None

    def outermost(self) -> 'Environment':
        env = self
        while env.enclosing is not None:
            env = env.enclosing
        return env

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None
