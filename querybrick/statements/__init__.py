"""Statement builders: SELECT, INSERT, UPDATE and DELETE."""

from __future__ import annotations

from querybrick.statements.base import Statement
from querybrick.statements.delete import Delete
from querybrick.statements.insert import Insert
from querybrick.statements.select import Select
from querybrick.statements.update import Update

__all__ = ["Delete", "Insert", "Select", "Statement", "Update"]
