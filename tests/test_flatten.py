from data_model import BoolCondition, BoolOp, FactCondition, Production
from logic_graph import condition_root, condition_seq, indexed_condition_seq


def test_single_condition_is_root(rule1):
    root = condition_root(rule1)
    assert root == FactCondition("org.example.Order", fact_binding="?order")
    assert condition_seq(rule1) == [root]


def test_bare_condition_lhs_is_root():
    cond = FactCondition("a.B")
    production = Production(name="r", lhs=cond)
    assert condition_seq(production) == [cond]


def test_multiple_conditions_get_implicit_and(rule2):
    root = condition_root(rule2)
    assert isinstance(root, BoolCondition)
    assert root.op is BoolOp.AND
    assert list(root.children) == list(rule2.lhs)


def test_preorder_sequence(nested_rule):
    kinds = [type(c).__name__ for c in condition_seq(nested_rule)]
    assert kinds == [
        "BoolCondition",         # niejawny AND
        "BoolCondition",         # OR
        "FactCondition",         # Alert
        "BoolCondition",         # NOT
        "FactCondition",         # Silenced
        "AccumulatorCondition",
    ]


def test_child_positions(nested_rule):
    items = indexed_condition_seq(nested_rule)
    assert [i.position for i in items] == [0, 1, 2, 3, 4, 5]
    assert items[0].child_positions == (1, 5)
    assert items[1].child_positions == (2, 3)
    assert items[3].child_positions == (4,)
    assert items[2].child_positions == ()
    assert items[5].child_positions == ()


def test_flattening_is_deterministic(nested_rule):
    assert condition_seq(nested_rule) == condition_seq(nested_rule)
    assert indexed_condition_seq(nested_rule) == indexed_condition_seq(nested_rule)


def test_identical_conditions_keep_separate_positions():
    cond = FactCondition("a.T")
    production = Production(name="twice", lhs=[cond, cond])
    items = indexed_condition_seq(production)
    assert len(items) == 3
    assert items[0].child_positions == (1, 2)


def test_empty_lhs_yields_bare_and():
    production = Production(name="always", lhs=[])
    seq = condition_seq(production)
    assert seq == [BoolCondition(BoolOp.AND, ())]


def test_plain_string_operator_is_flattened():
    from data_model import ConditionType, condition_type

    inner = BoolCondition("not", (FactCondition("a.X"),))
    assert condition_type(inner) is ConditionType.NOT
    production = Production(name="r", lhs=[inner])
    assert condition_seq(production) == [inner, FactCondition("a.X")]
