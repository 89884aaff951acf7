"""
Catalog Kernel — Renderer

Pure function: (QueryResult, options?) → HTML string (or text string)
No IO. Deterministic: same input → same output, always.

Two channels:
- html: the filter panel + product table, rendered from a Mustache template
  with chevron. The control classes (is-active, is-info, fa-sort-up, ...)
  are derived from the FilterState here, never stored in it.
- text: a fixed-width table for terminals.

An empty result is not an error: both channels print the "no matches"
message in place of the table.
"""

from __future__ import annotations

from typing import Any

import chevron

from catalog.kernel.types import (
    ORDER_ASC,
    SORTABLE_COLUMNS,
    FilterState,
    QueryResult,
    RenderOptions,
    ViewRecord,
)

NO_MATCHES_MESSAGE = "No products matching selected criteria"

# Font Awesome classes for the sort indicator
SORT_ICON_NONE = "fa-sort"
SORT_ICON_ASC = "fa-sort-up"
SORT_ICON_DESC = "fa-sort-down"

OWNER_CLASSES: dict[str, str] = {
    "m": "has-text-link",
    "f": "has-text-danger",
}

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render(result: QueryResult, options: RenderOptions | None = None) -> str:
    """
    Render a query result on the requested channel.
    Pure function. No side effects. No IO.
    """
    opts = options or RenderOptions()

    if opts.channel == "text":
        return render_text(result, opts)

    return render_html(result, opts)


def render_html(result: QueryResult, options: RenderOptions | None = None) -> str:
    """Render the filter panel and product table as an HTML fragment."""
    opts = options or RenderOptions()
    context = build_context(result, opts)
    return chevron.render(_PAGE_TEMPLATE, context)


def render_text(result: QueryResult, options: RenderOptions | None = None) -> str:
    """Render the current filters and the product table as plain text."""
    opts = options or RenderOptions()
    parts: list[str] = []

    if opts.title:
        parts.append(opts.title)
        parts.append("=" * len(opts.title))
        parts.append("")

    parts.append(_describe_filters(result))
    parts.append("")

    if result.is_empty:
        parts.append(NO_MATCHES_MESSAGE)
    else:
        parts.extend(_text_table(result.records, result.state))

    return "\n".join(parts).rstrip()


# ---------------------------------------------------------------------------
# Control state helpers
# ---------------------------------------------------------------------------


def sort_icon_class(state: FilterState, column: str) -> str:
    """The indicator class for one column header."""
    if state.sort.column != column:
        return SORT_ICON_NONE
    if state.sort.order == ORDER_ASC:
        return SORT_ICON_ASC
    return SORT_ICON_DESC


def owner_class(record: ViewRecord) -> str:
    return OWNER_CLASSES.get(record.owner.sex, "")


def category_label(record: ViewRecord) -> str:
    return f"{record.category.icon} - {record.category.title}"


def build_context(result: QueryResult, options: RenderOptions | None = None) -> dict[str, Any]:
    """Build the Mustache context for the page template."""
    opts = options or RenderOptions()
    state = result.state

    return {
        "title": opts.title,
        "all_owners_active": state.selected_user_id is None,
        "owners": [
            {"id": u.id, "name": u.name, "active": state.selected_user_id == u.id}
            for u in result.users
        ],
        "search": state.search,
        "show_clear": bool(state.search),
        "all_categories_active": not state.selected_category_ids,
        "categories": [
            {"id": c.id, "title": c.title, "active": c.id in state.selected_category_ids}
            for c in result.categories
        ],
        "empty": result.is_empty,
        "no_matches_message": NO_MATCHES_MESSAGE,
        "columns": [
            {
                "name": column,
                "label": column.upper(),
                "icon_class": sort_icon_class(state, column),
            }
            for column in SORTABLE_COLUMNS
        ],
        "products": [
            {
                "id": r.id,
                "name": r.name,
                "category_label": category_label(r),
                "owner_name": r.owner.name,
                "owner_class": owner_class(r),
            }
            for r in result.records
        ],
    }


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

_PAGE_TEMPLATE = """\
<div class="section">
  <div class="container">
    <h1 class="title">{{title}}</h1>
    <div class="block">
      <nav class="panel">
        <p class="panel-heading">Filters</p>
        <p class="panel-tabs has-text-weight-bold">
          <a href="#/" data-cy="FilterAllUsers"{{#all_owners_active}} class="is-active"{{/all_owners_active}}>All</a>
          {{#owners}}
          <a href="#/" data-cy="FilterUser" data-user-id="{{id}}"{{#active}} class="is-active"{{/active}}>{{name}}</a>
          {{/owners}}
        </p>
        <div class="panel-block">
          <p class="control has-icons-left has-icons-right">
            <input type="text" class="input" placeholder="Search" value="{{search}}" data-cy="SearchField">
            {{#show_clear}}
            <button type="button" class="delete" data-cy="ClearButton"></button>
            {{/show_clear}}
          </p>
        </div>
        <div class="panel-block is-flex-wrap-wrap">
          <a href="#/" data-cy="AllCategories" class="button mr-6 {{#all_categories_active}}is-success{{/all_categories_active}}{{^all_categories_active}}is-outlined{{/all_categories_active}}">All</a>
          {{#categories}}
          <a href="#/" data-cy="Category" data-category-id="{{id}}" class="button mr-2 my-1{{#active}} is-info{{/active}}">{{title}}</a>
          {{/categories}}
        </div>
        <div class="panel-block">
          <button type="button" class="button is-link is-outlined is-fullwidth" data-cy="ResetAllButton">Reset All Filters</button>
        </div>
      </nav>
    </div>
    <div class="box table-container">
      {{#empty}}
      <p data-cy="NoMatchingMessage">{{no_matches_message}}</p>
      {{/empty}}
      {{^empty}}
      <table class="table is-striped is-narrow is-fullwidth" data-cy="ProductTable">
        <thead>
          <tr>
            {{#columns}}
            <th>
              <button type="button" class="button is-ghost is-fullwidth" data-sort-column="{{name}}">
                {{label}}
                <span class="icon ml-2"><i data-cy="SortIcon" class="fas {{icon_class}}"></i></span>
              </button>
            </th>
            {{/columns}}
          </tr>
        </thead>
        <tbody>
          {{#products}}
          <tr data-cy="Product">
            <td data-cy="ProductId">{{id}}</td>
            <td data-cy="ProductName">{{name}}</td>
            <td data-cy="ProductCategory">{{category_label}}</td>
            <td data-cy="ProductUser" class="{{owner_class}}">{{owner_name}}</td>
          </tr>
          {{/products}}
        </tbody>
      </table>
      {{/empty}}
    </div>
  </div>
</div>
"""


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

_TEXT_ARROWS: dict[str, str] = {
    SORT_ICON_NONE: "",
    SORT_ICON_ASC: " ^",
    SORT_ICON_DESC: " v",
}


def _describe_filters(result: QueryResult) -> str:
    state = result.state

    owner = "All"
    if state.selected_user_id is not None:
        names = [u.name for u in result.users if u.id == state.selected_user_id]
        owner = names[0] if names else f"#{state.selected_user_id}"

    categories = "All"
    if state.selected_category_ids:
        titles = {c.id: c.title for c in result.categories}
        categories = ", ".join(titles.get(cid, f"#{cid}") for cid in state.selected_category_ids)

    sort = "none"
    if state.sort.active:
        sort = f"{state.sort.column} {state.sort.order}"

    return f"Owner: {owner} | Search: {state.search!r} | Categories: {categories} | Sort: {sort}"


def _text_table(records: list[ViewRecord], state: FilterState) -> list[str]:
    headers = [column.upper() + _TEXT_ARROWS[sort_icon_class(state, column)] for column in SORTABLE_COLUMNS]
    rows = [[str(r.id), r.name, category_label(r), r.owner.name] for r in records]

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def fmt(cells: list[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    lines = [fmt(headers), "-+-".join("-" * w for w in widths)]
    lines.extend(fmt(row) for row in rows)
    return lines
