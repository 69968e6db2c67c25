from cavegen.validation import validate

SCHEMA = {
    'width': ('int', False, {'min': 1, 'max': 512}),
    'fill': ('number', False, {'min': 0, 'max': 100, 'default': 47}),
    'seed': ('seed', False, {'max_len': 8}),
    'random': ('bool', False, {}),
    'name': ('str', True, {}),
}


def test_valid_payload_normalized():
    ok, data = validate({'width': 10, 'seed': 5, 'name': 'x'}, SCHEMA)
    assert ok
    assert data == {'width': 10, 'fill': 47, 'seed': 5, 'name': 'x'}


def test_missing_required():
    ok, err = validate({}, SCHEMA)
    assert not ok
    assert err == {'field': 'name', 'error': 'required', 'code': 'required'}


def test_type_and_range_errors():
    ok, err = validate({'width': 'ten', 'name': 'x'}, SCHEMA)
    assert not ok and err['code'] == 'type' and err['field'] == 'width'
    ok, err = validate({'width': 0, 'name': 'x'}, SCHEMA)
    assert not ok and err['code'] == 'min'
    ok, err = validate({'fill': 100.5, 'name': 'x'}, SCHEMA)
    assert not ok and err['code'] == 'max'
    ok, err = validate({'seed': 'much-too-long', 'name': 'x'}, SCHEMA)
    assert not ok and err['code'] == 'max_len'


def test_bool_is_not_a_number():
    ok, err = validate({'width': True, 'name': 'x'}, SCHEMA)
    assert not ok and err['code'] == 'type'


def test_non_object_payload():
    ok, err = validate(['width'], SCHEMA)
    assert not ok and err['field'] == '__root__'


def test_query_string_coercion():
    ok, data = validate({'width': '12', 'fill': '40.5', 'random': 'yes', 'name': 'x'}, SCHEMA, coerce_strings=True)
    assert ok
    assert data['width'] == 12 and data['fill'] == 40.5 and data['random'] is True
    ok, err = validate({'width': '12', 'name': 'x'}, SCHEMA)
    assert not ok and err['code'] == 'type'


def test_bad_schema_entry():
    ok, err = validate({}, {'width': 'int'})
    assert not ok and err['code'] == 'schema'


def test_non_finite_numbers_rejected():
    for value in (float('nan'), float('inf'), float('-inf')):
        ok, err = validate({'fill': value, 'name': 'x'}, SCHEMA)
        assert not ok and err == {'field': 'fill', 'error': 'expected number', 'code': 'type'}
    ok, err = validate({'fill': 'nan', 'name': 'x'}, SCHEMA, coerce_strings=True)
    assert not ok and err['code'] == 'type'
