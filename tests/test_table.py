"""DataTable: layouts, empty state, pagination controls and row clicks."""

import pytest
from rich.console import Console

from moto_admin.models.order import Order
from moto_admin.models.pagination import Pagination
from moto_admin.table import (
    Button,
    Column,
    DataTable,
    Element,
    Layout,
    Link,
    is_interactive,
)

COLUMNS = [
    Column("name", "Name"),
    Column("price", "Price", render=lambda v, _r: f"${v:.2f}"),
    Column("sku", "SKU", hide_on_mobile=True),
    Column("stock", "Stock", hide_on_tablet=True),
]

ROWS = [
    {"id": 11, "name": "Brake pad", "price": 19.5, "sku": "BP-1", "stock": 4},
    {"id": 12, "name": "Chain kit", "price": 89.0, "sku": "CK-2", "stock": 0},
]


def console(width: int) -> Console:
    return Console(record=True, width=width, force_terminal=False, color_system=None)


def rendered(table: DataTable, width: int) -> str:
    out = console(width)
    table.render(out)
    return out.export_text()


class TestLayout:
    def test_wide_and_compact_thresholds(self):
        table = DataTable(COLUMNS, ROWS)
        assert table.layout_for(80) is Layout.WIDE
        assert table.layout_for(79) is Layout.COMPACT

    def test_tablet_width_drops_flagged_columns(self):
        table = DataTable(COLUMNS, ROWS)
        assert [c.key for c in table.wide_columns(100)] == ["name", "price", "sku"]
        assert [c.key for c in table.wide_columns(120)] == ["name", "price", "sku", "stock"]

    def test_wide_render_shows_rendered_cells(self):
        text = rendered(DataTable(COLUMNS, ROWS), 130)
        assert "Brake pad" in text
        assert "$19.50" in text
        assert "Stock" in text

    def test_compact_cards_skip_mobile_hidden_columns(self):
        text = rendered(DataTable(COLUMNS, ROWS), 60)
        assert "NAME: Brake pad" in text
        assert "PRICE: $89.00" in text
        assert "SKU" not in text

    def test_compact_omits_empty_actions(self):
        columns = [Column("name", "Name"), Column("actions", "Actions", render=lambda _v, r: r.get("actions"))]
        table = DataTable(columns, [{"id": 1, "name": "Tee", "actions": None}])
        assert table.card_fields(table.records[0]) == [("Name", "Tee")]

    def test_missing_values_show_placeholder(self):
        table = DataTable([Column("name", "Name"), Column("sku", "SKU")], [{"id": 1, "name": "Tee"}])
        assert table.card_fields(table.records[0]) == [("Name", "Tee"), ("SKU", "-")]

    def test_cell_text_is_not_markup(self):
        text = rendered(DataTable([Column("name", "Name")], [{"id": 1, "name": "[bold]Visor[/bold]"}]), 100)
        assert "[bold]Visor[/bold]" in text

    def test_models_and_row_keys(self):
        orders = [Order(id=5, order_number="ORD-5"), Order(order_number="ORD-X")]
        table = DataTable([Column("order_number", "Order #")], orders)
        assert table.cell(table.columns[0], orders[0]) == "ORD-5"
        assert table.row_key(orders[0], 0) == 5
        assert table.row_key(orders[1], 1) == 1

    def test_render_receives_value_and_record(self):
        seen = []
        column = Column("price", "Price", render=lambda v, r: seen.append((v, r["id"])) or "x")
        DataTable([column], ROWS[:1]).card_fields(ROWS[0])
        assert seen == [(19.5, 11)]


class TestEmpty:
    @pytest.mark.parametrize("data", [[], None, "not a list", {"orders": []}])
    def test_non_list_data_renders_empty(self, data):
        table = DataTable(COLUMNS, data)
        assert table.is_empty
        assert "No data available" in rendered(table, 100)
        assert "No data available" in rendered(table, 60)

    def test_custom_empty_message(self):
        table = DataTable(COLUMNS, [], empty_message="No orders yet")
        assert "No orders yet" in rendered(table, 100)
        assert "No orders yet" in rendered(table, 60)


class TestPagination:
    def test_single_page_has_no_controls(self):
        table = DataTable(COLUMNS, ROWS, pagination=Pagination(page=1, limit=20, total=2))
        assert table.controls is None
        assert "Page 1" not in rendered(table, 100)

    def test_no_pagination_has_no_controls(self):
        assert DataTable(COLUMNS, ROWS).controls is None

    def test_pages_derived_from_total(self):
        assert Pagination(page=1, limit=20, total=45).pages == 3
        assert Pagination(total=0).pages == 0
        assert Pagination(page=9, limit=20, total=45).page == 3

    def test_first_page(self):
        requested = []
        table = DataTable(COLUMNS, ROWS, pagination={"page": 1, "limit": 20, "total": 45, "pages": 3},
                          on_page_change=requested.append)
        controls = table.controls
        assert controls.summary == "Page 1 of 3 (45 total items)"
        assert not controls.previous_enabled
        assert controls.next_enabled
        assert controls.previous() is False
        assert controls.next() is True
        assert requested == [2]

    def test_last_page(self):
        requested = []
        table = DataTable(COLUMNS, ROWS, pagination=Pagination(page=3, limit=20, total=45),
                          on_page_change=requested.append)
        controls = table.controls
        assert controls.previous_enabled
        assert not controls.next_enabled
        assert controls.next() is False
        assert controls.previous() is True
        assert requested == [2]

    def test_table_never_changes_its_own_page(self):
        table = DataTable(COLUMNS, ROWS, pagination=Pagination(page=2, limit=20, total=45),
                          on_page_change=lambda _p: None)
        table.controls.next()
        assert table.pagination.page == 2

    def test_summary_rendered(self):
        table = DataTable(COLUMNS, ROWS, pagination=Pagination(page=2, limit=20, total=45))
        assert "Page 2 of 3 (45 total items)" in rendered(table, 100)


class TestRowClick:
    def test_row_click_reports_record(self):
        clicked = []
        table = DataTable(COLUMNS, ROWS, on_row_click=clicked.append)
        assert table.click(1) is True
        assert clicked == [ROWS[1]]

    def test_without_handler_nothing_happens(self):
        assert DataTable(COLUMNS, ROWS).click(0) is False

    def test_out_of_range(self):
        clicked = []
        assert DataTable(COLUMNS, ROWS, on_row_click=clicked.append).click(5) is False
        assert clicked == []

    def test_button_inside_row_suppresses_row_click(self):
        clicked, pressed = [], []
        table = DataTable(COLUMNS, ROWS, on_row_click=clicked.append)
        edit = Button("Edit", on_press=lambda: pressed.append("edit"))

        assert table.click(0, target=edit) is False
        assert clicked == []
        assert pressed == ["edit"]

    def test_nested_and_role_targets_suppress(self):
        clicked = []
        table = DataTable(COLUMNS, ROWS, on_row_click=clicked.append)
        icon = Element("icon", parent=Button("Delete"))

        assert table.click(0, target=icon) is False
        assert table.click(0, target=Link("Open", "/orders/11")) is False
        assert table.click(0, target=Element("menu", role="button")) is False
        assert clicked == []

    def test_plain_target_is_a_row_click(self):
        clicked = []
        table = DataTable(COLUMNS, ROWS, on_row_click=clicked.append)
        assert table.click(0, target=Element("Brake pad")) is True
        assert clicked == [ROWS[0]]

    def test_is_interactive(self):
        assert is_interactive(Button("x"))
        assert not is_interactive(None)
        assert not is_interactive(Element("cell"))
