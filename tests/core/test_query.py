"""SelectQuery: placeholder numbering and clause assembly."""

from core.query import SelectQuery, escape_like


def test_base_only_has_no_where_clause():
    sql, args = SelectQuery("SELECT * FROM orders").build()
    assert sql == "SELECT * FROM orders"
    assert args == []


def test_conditions_are_anded_and_numbered_in_order():
    q = SelectQuery("SELECT * FROM orders")
    q.where("order_status = {}", "paid")
    q.where("(order_no LIKE {} OR user_name LIKE {})", "%a%", "%b%")

    sql, args = q.build()

    assert sql == (
        "SELECT * FROM orders WHERE order_status = $1 "
        "AND (order_no LIKE $2 OR user_name LIKE $3)"
    )
    assert args == ["paid", "%a%", "%b%"]


def test_limit_and_offset_are_bound_after_conditions():
    q = SelectQuery("SELECT * FROM orders")
    q.where("order_status = {}", "paid").order_by("create_time DESC").limit(10).offset(20)

    sql, args = q.build()

    assert sql.endswith("ORDER BY create_time DESC LIMIT $2 OFFSET $3")
    assert args == ["paid", 10, 20]


def test_user_input_never_lands_in_sql_text():
    hostile = "x'; DROP TABLE orders; --"
    q = SelectQuery("SELECT * FROM orders").where("order_status = {}", hostile)

    sql, args = q.build()

    assert hostile not in sql
    assert args == [hostile]


def test_build_returns_a_copy_of_args():
    q = SelectQuery("SELECT 1").where("a = {}", 1)
    _, args = q.build()
    args.append(2)
    assert q.build()[1] == [1]


def test_escape_like_escapes_wildcards_and_backslash():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"
    assert escape_like("plain") == "plain"
