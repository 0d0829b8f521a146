to_db = {
    'id': 'id_',
}

from_db = {
    'partkey': None,
    'sortkey': None,
    'record_type': None,
    'id_': 'id',
}
