"""Compiles a validated entity query into a SQLAlchemy Core statement.

Clause order, all ANDed: created-at range, equality, set membership,
case-insensitive contains, soft-delete visibility. Paging only applies to
row selection; counting never sorts.
"""

from sqlalchemy import Select, Table, and_, func, or_, select
from sqlalchemy.sql.elements import ColumnElement

from cmsstore.domain.columns import COLUMN_SOFT_DELETED_AT
from cmsstore.domain.queries import EntityQuery, ParamKind


def _range_clause(query: EntityQuery, table: Table) -> list[ColumnElement[bool]]:
    lower = [(param, value) for param, value in query.set_params() if param.kind == ParamKind.RANGE_GTE]
    upper = [(param, value) for param, value in query.set_params() if param.kind == ParamKind.RANGE_LTE]

    clauses: list[ColumnElement[bool]] = []
    for param, value in lower:
        clauses.append(table.c[param.column] >= value)
    for param, value in upper:
        clauses.append(table.c[param.column] <= value)
    return clauses


def where_clauses(query: EntityQuery, table: Table, now: str) -> list[ColumnElement[bool]]:
    """Predicates of ``query`` in compilation order; unset fields add nothing."""
    clauses = _range_clause(query, table)
    params = query.set_params()

    for param, value in params:
        if param.kind == ParamKind.EQUALS:
            clauses.append(table.c[param.column] == value)
        elif param.kind == ParamKind.EQUALS_ANY:
            clauses.append(or_(*(table.c[column] == value for column in param.columns)))

    for param, value in params:
        if param.kind == ParamKind.IN:
            clauses.append(table.c[param.column].in_(value))

    for param, value in params:
        if param.kind == ParamKind.CONTAINS:
            needle = param.contains_format.format(value)
            clauses.append(table.c[param.column].icontains(needle, autoescape=True))

    if not query.soft_deleted_included:
        clauses.append(table.c[COLUMN_SOFT_DELETED_AT] > now)

    return clauses


def compile_select(query: EntityQuery, table: Table, now: str) -> Select:
    """Row selection: requested columns (all by default), filters, sort, paging."""
    if query.columns:
        stmt = select(*(table.c[column] for column in query.columns))
    else:
        stmt = select(table)

    clauses = where_clauses(query, table, now)
    if clauses:
        stmt = stmt.where(and_(*clauses))

    if query.has("order_by"):
        column = table.c[query.order_by]
        stmt = stmt.order_by(column.asc() if query.sort_ascending else column.desc())

    if not query.count_only:
        if query.has("limit"):
            stmt = stmt.limit(query.limit)
        if query.has("offset"):
            stmt = stmt.offset(query.offset)

    return stmt


def compile_count(query: EntityQuery, table: Table, now: str) -> Select:
    """Single-row ``count(*)`` aggregate over the filtered rows."""
    stmt = select(func.count().label("count")).select_from(table)
    clauses = where_clauses(query, table, now)
    if clauses:
        stmt = stmt.where(and_(*clauses))
    return stmt
