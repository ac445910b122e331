from travel_admin.services.responses import as_collection, as_record, record_id, unwrap_envelope


def test_unwrap_envelope_only_unwraps_data_key():
    assert unwrap_envelope({"data": [1, 2]}) == [1, 2]
    assert unwrap_envelope([1, 2]) == [1, 2]
    assert unwrap_envelope({"message": "ok"}) == {"message": "ok"}


def test_as_collection_fallback_order():
    hotels = [{"_id": "h1"}]
    assert as_collection(hotels) == hotels
    assert as_collection({"hotels": hotels}) == hotels
    assert as_collection({"data": hotels}) == hotels
    assert as_collection({"hotels": hotels, "data": [{"_id": "other"}]}) == hotels
    assert as_collection({"data": {"hotels": hotels}}) == hotels


def test_as_collection_defaults_to_empty():
    assert as_collection(None) == []
    assert as_collection("nope") == []
    assert as_collection({"count": 3}) == []
    assert as_collection({"hotels": None}) == []


def test_as_record_and_record_id():
    assert as_record({"data": {"_id": "d1"}}) == {"_id": "d1"}
    assert as_record([]) is None
    assert record_id({"_id": "d1"}) == "d1"
    assert record_id({"id": 7}) == "7"
    assert record_id({"name": "x"}) is None
    assert record_id(None) is None
