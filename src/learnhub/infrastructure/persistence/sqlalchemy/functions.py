"""Unicode-aware ``lower()`` for case-insensitive title matching.

PostgreSQL's ``lower()`` folds every letter, SQLite's only folds ASCII
(``École`` stays ``École``). ``unicode_lower`` renders as ``lower`` on
PostgreSQL and as ``learnhub_lower`` on SQLite, a Python function that
``install_sqlite_functions`` registers on every new connection.
"""

from typing import Any, Optional

from sqlalchemy import String, event
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

SQLITE_LOWER = "learnhub_lower"


class unicode_lower(FunctionElement):  # noqa: N801
    type = String()
    name = "unicode_lower"
    inherit_cache = True


@compiles(unicode_lower)
def _compile_lower(element: unicode_lower, compiler: Any, **kw: Any) -> str:
    return f"lower({compiler.process(element.clauses, **kw)})"


@compiles(unicode_lower, "sqlite")
def _compile_sqlite_lower(element: unicode_lower, compiler: Any, **kw: Any) -> str:
    return f"{SQLITE_LOWER}({compiler.process(element.clauses, **kw)})"


def _python_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def install_sqlite_functions(engine: AsyncEngine) -> None:
    """Register ``learnhub_lower`` on each connection of a SQLite engine."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _register(dbapi_connection: Any, _record: Any) -> None:
        # deterministic is required for use in an index expression
        dbapi_connection.create_function(
            SQLITE_LOWER,
            1,
            _python_lower,
            deterministic=True,
        )
