from marketplace_e2e.helpers import deep_merge, empty_object_values, is_truthy_option


def test_deep_merge_merges_nested_mappings():
    base = {"payment": {"paypal": {"email": "a@x.y"}, "bank": {"ac_name": "n"}}, "store_ppp": 12}
    update = {"payment": {"paypal": {"email": ""}}}

    merged = deep_merge(base, update)

    assert merged == {"payment": {"paypal": {"email": ""}, "bank": {"ac_name": "n"}}, "store_ppp": 12}
    assert base["payment"]["paypal"]["email"] == "a@x.y"


def test_deep_merge_replaces_non_mapping_values():
    assert deep_merge({"a": {"b": 1}}, {"a": [1, 2]}) == {"a": [1, 2]}
    assert deep_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}


def test_empty_object_values_keeps_shape():
    value = {"bank": {"ac_name": "n", "ac_number": "1"}, "paypal": {"email": "a@x.y"}}

    assert empty_object_values(value) == {"bank": {"ac_name": "", "ac_number": ""}, "paypal": {"email": ""}}


def test_is_truthy_option():
    assert is_truthy_option("on")
    assert is_truthy_option("YES")
    assert not is_truthy_option("off")
    assert not is_truthy_option("")
    assert is_truthy_option(1)
    assert not is_truthy_option(None)
