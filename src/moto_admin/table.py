"""
DataTable — renders any list of records as a paginated table or a stack of cards.

The table is a pure view: it never fetches and never changes its own page.
Page changes are reported through `on_page_change`, and the owner is
expected to fetch and build a new table with the new data.

Layouts:
  WIDE     terminal width >= compact_width. Columns flagged hide_on_tablet
           are dropped below medium_width.
  COMPACT  one card per record with "label: value" lines for every column
           not flagged hide_on_mobile. An empty `actions` value is omitted.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from pydantic import BaseModel
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from moto_admin.models.pagination import Pagination

DEFAULT_EMPTY_MESSAGE = "No data available"
DEFAULT_COMPACT_WIDTH = 80
DEFAULT_MEDIUM_WIDTH = 120
ACTIONS_KEY = "actions"
PLACEHOLDER = "-"

Renderer = Callable[[Any, Any], Any]


class Layout(str, Enum):
    WIDE = "wide"
    COMPACT = "compact"


class Column:
    __slots__ = ("key", "label", "render", "hide_on_mobile", "hide_on_tablet")

    def __init__(
        self,
        key: str,
        label: str,
        render: Optional[Renderer] = None,
        hide_on_mobile: bool = False,
        hide_on_tablet: bool = False,
    ):
        self.key = key
        self.label = label
        self.render = render
        self.hide_on_mobile = hide_on_mobile
        self.hide_on_tablet = hide_on_tablet

    def __repr__(self) -> str:
        return f"Column(key={self.key!r}, label={self.label!r})"


class Element:
    """A piece of rendered cell content. `parent` links nested elements."""

    role: Optional[str] = None

    def __init__(self, label: str = "", parent: Optional["Element"] = None, role: Optional[str] = None):
        self.label = label
        self.parent = parent
        if role is not None:
            self.role = role

    def __str__(self) -> str:
        return self.label


class Button(Element):
    role = "button"

    def __init__(self, label: str, on_press: Optional[Callable[[], Any]] = None, parent: Optional[Element] = None):
        super().__init__(label, parent)
        self.on_press = on_press

    def press(self) -> Any:
        if self.on_press is not None:
            return self.on_press()
        return None

    def __str__(self) -> str:
        return f"[{self.label}]"


class Link(Element):
    role = "link"

    def __init__(self, label: str, href: str, parent: Optional[Element] = None):
        super().__init__(label, parent)
        self.href = href


def is_interactive(target: Any) -> bool:
    """True if target, or any element it sits inside, is a button or link."""
    node = target
    while node is not None:
        if isinstance(node, (Button, Link)) or getattr(node, "role", None) == "button":
            return True
        node = getattr(node, "parent", None)
    return False


def field_value(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    getter = getattr(record, "get", None)
    if isinstance(record, BaseModel) and callable(getter):
        return getter(key)
    return getattr(record, key, None)


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple)) and not value)


def _plain(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(_plain(v) for v in value)
    if isinstance(value, Text):
        return value.plain
    return str(value)


def _as_text(value: Any) -> RenderableType:
    # Text, not str: cell content must never be parsed as console markup.
    if isinstance(value, (Text, Table, Panel, Group)):
        return value
    return Text(_plain(value))


class PaginationControls:
    def __init__(self, pagination: Pagination, on_page_change: Optional[Callable[[int], Any]]):
        self._pagination = pagination
        self._on_page_change = on_page_change

    @property
    def page(self) -> int:
        return self._pagination.page

    @property
    def pages(self) -> int:
        return self._pagination.pages or 0

    @property
    def previous_enabled(self) -> bool:
        return self._pagination.has_previous

    @property
    def next_enabled(self) -> bool:
        return self._pagination.has_next

    @property
    def summary(self) -> str:
        return f"Page {self.page} of {self.pages} ({self._pagination.total} total items)"

    def previous(self) -> bool:
        return self._go(self.page - 1) if self.previous_enabled else False

    def next(self) -> bool:
        return self._go(self.page + 1) if self.next_enabled else False

    def _go(self, page: int) -> bool:
        if self._on_page_change is None:
            return False
        self._on_page_change(page)
        return True


class DataTable:
    def __init__(
        self,
        columns: Sequence[Column],
        data: Any,
        pagination: Union[Pagination, Mapping[str, Any], None] = None,
        on_page_change: Optional[Callable[[int], Any]] = None,
        empty_message: str = DEFAULT_EMPTY_MESSAGE,
        on_row_click: Optional[Callable[[Any], Any]] = None,
        compact_width: int = DEFAULT_COMPACT_WIDTH,
        medium_width: int = DEFAULT_MEDIUM_WIDTH,
        title: Optional[str] = None,
    ):
        self.columns = list(columns)
        self.records: list[Any] = list(data) if isinstance(data, (list, tuple)) else []
        if isinstance(pagination, Mapping):
            pagination = Pagination.model_validate(pagination)
        self.pagination: Optional[Pagination] = pagination
        self.on_page_change = on_page_change
        self.empty_message = empty_message
        self.on_row_click = on_row_click
        self.compact_width = compact_width
        self.medium_width = medium_width
        self.title = title

    @property
    def is_empty(self) -> bool:
        return not self.records

    @staticmethod
    def row_key(record: Any, index: int) -> Any:
        record_id = field_value(record, "id")
        return record_id if record_id not in (None, "") else index

    @staticmethod
    def cell(column: Column, record: Any) -> Any:
        value = field_value(record, column.key)
        if column.render is not None:
            return column.render(value, record)
        return value

    def layout_for(self, width: int) -> Layout:
        return Layout.WIDE if width >= self.compact_width else Layout.COMPACT

    def wide_columns(self, width: int) -> list[Column]:
        if width >= self.medium_width:
            return list(self.columns)
        return [c for c in self.columns if not c.hide_on_tablet]

    def card_fields(self, record: Any) -> list[tuple[str, Any]]:
        fields = []
        for column in self.columns:
            if column.hide_on_mobile:
                continue
            value = self.cell(column, record)
            if column.key == ACTIONS_KEY and (_is_empty(value) or value == PLACEHOLDER):
                continue
            fields.append((column.label, PLACEHOLDER if _is_empty(value) else value))
        return fields

    @property
    def controls(self) -> Optional[PaginationControls]:
        if self.pagination is None or (self.pagination.pages or 0) <= 1:
            return None
        return PaginationControls(self.pagination, self.on_page_change)

    def click(self, index: int, target: Any = None) -> bool:
        """Handle a click on row `index`. Returns True if on_row_click ran.

        Clicks on buttons, links or role="button" elements inside the row
        belong to that element, not the row.
        """
        if is_interactive(target):
            if isinstance(target, Button):
                target.press()
            return False
        if self.on_row_click is None or not 0 <= index < len(self.records):
            return False
        self.on_row_click(self.records[index])
        return True

    def build_wide(self, width: int) -> RenderableType:
        columns = self.wide_columns(width)
        table = Table(title=self.title, show_lines=False, expand=False)
        for column in columns:
            table.add_column(column.label, no_wrap=True)
        if self.is_empty:
            return Group(table, Text(self.empty_message, style="dim", justify="center"))
        for record in self.records:
            table.add_row(*[_as_text(self.cell(c, record)) for c in columns])
        return table

    def build_compact(self) -> list[RenderableType]:
        if self.is_empty:
            return [Panel(Text(self.empty_message, style="dim", justify="center"), title=self.title)]
        cards: list[RenderableType] = []
        for index, record in enumerate(self.records):
            lines = Text()
            for n, (label, value) in enumerate(self.card_fields(record)):
                if n:
                    lines.append("\n")
                lines.append(f"{label.upper()}: ", style="bold dim")
                lines.append(_plain(value))
            cards.append(Panel(lines, title=str(self.row_key(record, index))))
        return cards

    def render(self, console: Console, width: Optional[int] = None) -> Layout:
        width = width if width is not None else console.width
        layout = self.layout_for(width)
        if layout is Layout.WIDE:
            console.print(self.build_wide(width))
        else:
            if self.title:
                console.print(Text(self.title, style="bold"))
            for card in self.build_compact():
                console.print(card)
        controls = self.controls
        if controls is not None:
            nav = Text(controls.summary + "   ")
            nav.append("[p] Previous", style=None if controls.previous_enabled else "dim strike")
            nav.append("  ")
            nav.append("[n] Next", style=None if controls.next_enabled else "dim strike")
            console.print(nav)
        return layout
