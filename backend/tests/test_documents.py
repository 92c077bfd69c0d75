import json

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import API, create

PO_ITEMS = [
    {"id": "i1", "productId": "12", "designImage": "AS PER SAMPLE", "weightPerBox": 28.5, "boxes": 100, "thickness": "8.5 MM"},
    {"id": "i2", "productId": "13", "designImage": "AS PER SAMPLE", "weightPerBox": 28, "boxes": 50, "thickness": "9.0 MM"},
    {"id": "i3", "productId": "14", "designImage": "AS PER SAMPLE", "weightPerBox": 30, "boxes": 25, "thickness": "8.5 MM", "remark": "urgent"},
]


def po_payload(**overrides):
    payload = {
        "sourcePiId": "7",
        "exporterId": "1",
        "manufacturerId": "2",
        "poNumber": "HEM/PO/25-26/001",
        "poDate": "2024-05-01T10:30:00.000Z",
        "sizeId": "3",
        "numberOfContainers": 2,
        "items": PO_ITEMS,
        "termsAndConditions": "Delivery within 20 days",
    }
    payload.update(overrides)
    return payload


def test_purchase_order_items_and_date_round_trip(client, raw_db):
    created = create(client, "/purchase-order-data", po_payload())
    assert created["id"]

    orders = client.get(f"{API}/purchase-order-data").json()
    assert len(orders) == 1
    order = orders[0]
    assert order["items"] == PO_ITEMS
    assert order["poDate"] == "2024-05-01T10:30:00"

    row = raw_db.execute("SELECT po_date, items_json FROM purchase_orders").fetchone()
    assert row["po_date"] == "2024-05-01 10:30:00"
    assert json.loads(row["items_json"]) == {"version": 1, "items": PO_ITEMS}


def test_missing_items_round_trip_to_empty_list(client):
    payload = po_payload()
    del payload["items"]
    create(client, "/purchase-order-data", payload)
    assert client.get(f"{API}/purchase-order-data").json()[0]["items"] == []


def test_null_terms_become_empty_string(client):
    create(client, "/purchase-order-data", po_payload(termsAndConditions=None))
    assert client.get(f"{API}/purchase-order-data").json()[0]["termsAndConditions"] == ""


def test_date_only_input_keeps_calendar_day(client):
    create(client, "/purchase-order-data", po_payload(poDate="2024-12-31"))
    assert client.get(f"{API}/purchase-order-data").json()[0]["poDate"] == "2024-12-31T00:00:00"


def test_offset_timestamp_keeps_wall_clock(client):
    create(client, "/purchase-order-data", po_payload(poDate="2024-06-01T00:15:00.123+05:30"))
    assert client.get(f"{API}/purchase-order-data").json()[0]["poDate"] == "2024-06-01T00:15:00"


def test_invalid_date_is_rejected(client):
    response = client.post(f"{API}/purchase-order-data", json=po_payload(poDate="someday"))
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid purchase order data"}


def test_legacy_and_corrupt_item_columns(client, raw_db):
    first = create(client, "/purchase-order-data", po_payload(poNumber="A"))
    second = create(client, "/purchase-order-data", po_payload(poNumber="B"))
    raw_db.execute("UPDATE purchase_orders SET items_json = ? WHERE id = ?", ('[{"boxes": 5}]', int(first["id"])))
    raw_db.execute("UPDATE purchase_orders SET items_json = ? WHERE id = ?", ("{not json", int(second["id"])))
    raw_db.commit()

    orders = {o["poNumber"]: o for o in client.get(f"{API}/purchase-order-data").json()}
    assert orders["A"]["items"] == [{"boxes": 5}]
    assert orders["B"]["items"] == []


def test_update_replaces_items(client):
    order = create(client, "/purchase-order-data", po_payload())
    new_items = [{"id": "n1", "productId": "99", "boxes": 1}]
    response = client.put(
        f"{API}/purchase-order-data", params={"id": order["id"]},
        json=po_payload(items=new_items, poDate="2024-07-02T08:00:00Z"),
    )
    assert response.status_code == 200
    assert response.json()["id"] == order["id"]

    stored = client.get(f"{API}/purchase-order-data").json()[0]
    assert stored["items"] == new_items
    assert stored["poDate"] == "2024-07-02T08:00:00"


def test_update_requires_id(client):
    response = client.put(f"{API}/purchase-order-data", json=po_payload())
    assert response.status_code == 400
    assert response.json() == {"message": "Purchase Order ID is required"}


def test_failed_commit_rolls_back(client, raw_db, monkeypatch):
    async def failing_commit(self):
        raise RuntimeError("disk full")

    monkeypatch.setattr(AsyncSession, "commit", failing_commit)
    response = client.post(f"{API}/purchase-order-data", json=po_payload())
    monkeypatch.undo()

    assert response.status_code == 500
    assert response.json() == {"message": "Error creating purchase order"}
    assert raw_db.execute("SELECT COUNT(*) FROM purchase_orders").fetchone()[0] == 0


@pytest.mark.parametrize("path,payload,date_field", [
    (
        "/manu-bill-data",
        {
            "manufacturerId": "2", "transporterId": "4", "invoiceNumber": "MB-1",
            "invoiceDate": "2024-05-02", "lrDate": "2024-05-03T12:00:00Z",
            "items": [{"description": "Tiles", "quantity": 10, "unit": "BOX", "rate": 100, "discountPercentage": 0, "taxableAmount": 1000}],
            "subTotal": 1000, "grandTotal": 1180,
        },
        "lrDate",
    ),
    (
        "/supply-bill-data",
        {
            "supplierId": "5", "invoiceNumber": "SB-1", "invoiceDate": "2024-05-02",
            "ackDate": "2024-05-04", "items": [{"description": "Cartons", "quantity": 500}],
            "grandTotal": 2360,
        },
        "ackDate",
    ),
    (
        "/trans-bill-data",
        {
            "transporterId": "4", "invoiceNumber": "TB-1", "invoiceDate": "2024-05-02",
            "jobDate": "2024-05-01", "items": [{"description": "Container haulage", "quantity": 2, "rate": 9000, "gstRate": 18}],
            "totalPayable": 21240,
        },
        "jobDate",
    ),
    (
        "/performa-invoice-data",
        {
            "exporterId": "1", "clientId": "3", "selectedBankId": "6", "invoiceNumber": "PI-1",
            "invoiceDate": "2024-05-02", "currencyType": "USD", "totalGrossWeight": "NA",
            "items": [{"sizeId": "1", "productId": "2", "boxes": 100, "ratePerSqmt": 6.5}],
            "subTotal": 936, "grandTotal": 936,
        },
        "invoiceDate",
    ),
])
def test_compound_documents_round_trip(client, path, payload, date_field):
    created = create(client, path, payload)
    records = client.get(f"{API}{path}").json()
    assert [r["id"] for r in records] == [created["id"]]
    assert records[0]["items"] == payload["items"]
    assert records[0][date_field].startswith(payload[date_field][:10])

    response = client.delete(f"{API}{path}", params={"id": created["id"]})
    assert response.status_code == 200
    assert client.get(f"{API}{path}").json() == []


def test_bill_messages(client):
    response = client.delete(f"{API}/manu-bill-data")
    assert response.json() == {"message": "Bill ID is required"}
    response = client.put(f"{API}/performa-invoice-data", json={})
    assert response.json() == {"message": "Invoice ID is required"}
    response = client.post(f"{API}/trans-bill-data", json={"transporterId": "4"})
    assert response.json() == {"message": "Missing required fields"}


def test_item_values_are_stored_as_submitted(client, raw_db):
    items = [
        {"id": 7, "productId": 12, "weightPerBox": "", "boxes": "10", "thickness": None, "note": ""},
        {"productId": "13", "weightPerBox": "28.50", "boxes": 0},
    ]
    create(client, "/purchase-order-data", po_payload(items=items))

    assert client.get(f"{API}/purchase-order-data").json()[0]["items"] == items
    row = raw_db.execute("SELECT items_json FROM purchase_orders").fetchone()
    assert json.loads(row["items_json"])["items"] == items


def test_bill_item_values_are_stored_as_submitted(client):
    items = [{"description": "Tiles", "quantity": "10", "rate": "", "discountPercentage": "0"}]
    create(client, "/manu-bill-data", {
        "manufacturerId": "2", "invoiceNumber": "MB-9", "invoiceDate": "2024-05-02", "items": items,
    })
    assert client.get(f"{API}/manu-bill-data").json()[0]["items"] == items


def test_item_with_wrong_type_is_rejected(client, raw_db):
    items = [{"productId": "12", "boxes": "many"}]
    response = client.post(f"{API}/purchase-order-data", json=po_payload(items=items))
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid purchase order data"}
    assert raw_db.execute("SELECT COUNT(*) FROM purchase_orders").fetchone()[0] == 0
