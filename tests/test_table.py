"""Tests for the Table widget."""

import logging

import pytest
from term_widgets import Table, TableShapeError


def make_table(rows=25, items_by_page=10):
    """Create a two-column table with numbered rows."""
    data = [[str(i), f'row {i}'] for i in range(rows)]
    return Table(['id', 'name'], data, items_by_page=items_by_page)


class TestTableConstruction:
    """Tests for Table initialization."""

    def test_round_trip(self):
        """Test that headers and data read back as given."""
        table = Table(['a', 'b'], [['1', '2'], ['3', '4']])
        assert table.headers == ('a', 'b')
        assert table.data == (('1', '2'), ('3', '4'))
        assert len(table) == 2

    def test_mismatched_row_rejected(self):
        with pytest.raises(TableShapeError, match='row 1'):
            Table(['a', 'b'], [['1', '2'], ['1']])

    def test_shape_error_is_value_error(self):
        with pytest.raises(ValueError):
            Table(['a'], [['1', '2']])

    def test_defaults(self):
        table = Table(['a'], [])
        assert table.current_page == 0
        assert table.items_by_page == 20
        assert table.padding_vertical == 1
        assert table.padding_horizontal == 1
        assert table.border_vertical == ' '
        assert table.has_border is False
        assert table.updated is True

    def test_bordered_variant(self):
        table = Table(['a'], [], border=True)
        assert table.border_vertical == '|'
        assert table.border_horizontal == '-'
        assert table.border_intersect == '+'

    def test_data_is_copied(self):
        """Test that later changes to the source lists do not leak in."""
        rows = [['1', '2']]
        table = Table(['a', 'b'], rows)
        rows[0][0] = 'changed'
        rows.append(['x', 'y'])
        assert table.data == (('1', '2'),)

    def test_title_keyword(self):
        assert Table(['a'], [], title='Users').title == 'Users'


class TestTableMutation:
    """Tests for the mutable form of Table."""

    def test_set_data(self):
        table = Table(['a'], [['1']])
        table.updated = False
        table.set_data([['2'], ['3']])
        assert table.data == (('2',), ('3',))
        assert table.updated is True

    def test_set_data_rejects_bad_shape_without_change(self):
        table = Table(['a'], [['1']])
        with pytest.raises(TableShapeError):
            table.set_data([['2'], ['3', '4']])
        assert table.data == (('1',),)

    def test_append_row(self):
        table = Table(['a', 'b'], [])
        table.updated = False
        table.append_row(['1', '2'])
        assert table.data == (('1', '2'),)
        assert table.updated is True
        with pytest.raises(TableShapeError):
            table.append_row(['1'])

    def test_set_headers_with_data(self):
        table = Table(['a'], [['1']])
        table.set_headers(['a', 'b'], [['1', '2']])
        assert table.headers == ('a', 'b')
        assert table.data == (('1', '2'),)

    def test_set_headers_checks_existing_rows(self):
        table = Table(['a'], [['1']])
        with pytest.raises(TableShapeError):
            table.set_headers(['a', 'b'])
        assert table.headers == ('a',)


class TestPagination:
    """Tests for table paging."""

    def test_first_page(self):
        table = make_table()
        rows = table.visible_rows()
        assert len(rows) == 10
        assert rows[0] == ('0', 'row 0')
        assert rows[-1] == ('9', 'row 9')

    def test_last_partial_page(self):
        table = make_table()
        table.current_page = 2
        rows = table.visible_rows()
        assert [row[0] for row in rows] == ['20', '21', '22', '23', '24']

    def test_page_past_end_is_empty(self):
        table = make_table()
        table.current_page = 3
        assert table.visible_rows() == ()
        table.current_page = 1000
        assert table.visible_rows() == ()

    def test_zero_items_by_page_shows_nothing(self, caplog):
        table = make_table()
        with caplog.at_level(logging.WARNING, logger='term_widgets.table'):
            table.items_by_page = 0
        assert table.visible_rows() == ()
        assert table.page_count == 0
        assert 'items_by_page is 0' in caplog.text

    def test_negative_values_rejected(self):
        table = make_table()
        with pytest.raises(ValueError):
            table.current_page = -1
        with pytest.raises(ValueError):
            table.items_by_page = -5

    def test_page_count(self):
        assert make_table(25, 10).page_count == 3
        assert make_table(20, 10).page_count == 2
        assert make_table(0, 10).page_count == 0

    def test_setters_mark_updated(self):
        table = make_table()
        table.updated = False
        table.current_page = 1
        assert table.updated is True
        table.updated = False
        table.items_by_page = 5
        assert table.updated is True

    def test_setting_same_value_marks_updated(self):
        """Test that setters mark the table dirty even without a change."""
        table = make_table()
        table.updated = False
        table.current_page = 0
        assert table.updated is True
        table.updated = False
        table.items_by_page = 10
        assert table.updated is True

    def test_next_and_previous_page(self):
        table = make_table()
        assert table.previous_page() is False
        assert table.next_page() is True
        assert table.next_page() is True
        assert table.current_page == 2
        assert table.next_page() is False
        assert table.current_page == 2
        assert table.previous_page() is True
        assert table.current_page == 1

    def test_column_widths_follow_visible_rows(self):
        table = Table(['id', 'n'], [['1', 'short'], ['2', 'a much longer name']],
                      items_by_page=1)
        assert table.column_widths() == [2, 5]
        table.current_page = 1
        assert table.column_widths() == [2, 18]
