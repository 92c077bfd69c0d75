from tests.factories import API, client_payload, create, manufacturer_payload


def manu_bill(manufacturer_id, number, total, date):
    return {
        "manufacturerId": manufacturer_id,
        "invoiceNumber": number,
        "invoiceDate": date,
        "items": [],
        "grandTotal": total,
    }


def payment(party_type, party_id, amount, date, type_="credit", currency="INR"):
    return {
        "date": date,
        "type": type_,
        "partyType": party_type,
        "partyId": party_id,
        "currency": currency,
        "amount": amount,
    }


def test_manufacturer_balance(client):
    factory = create(client, "/manufacturer-data", manufacturer_payload())
    other = create(client, "/manufacturer-data", manufacturer_payload(companyName="Other"))
    create(client, "/manu-bill-data", manu_bill(factory["id"], "MB-1", 700, "2024-04-01"))
    create(client, "/manu-bill-data", manu_bill(factory["id"], "MB-2", 300.5, "2024-04-15"))
    create(client, "/manu-bill-data", manu_bill(other["id"], "MB-3", 999, "2024-04-15"))
    deleted = create(client, "/manu-bill-data", manu_bill(factory["id"], "MB-4", 50, "2024-04-20"))
    client.delete(f"{API}/manu-bill-data", params={"id": deleted["id"]})
    create(client, "/transaction-data", payment("manufacturer", factory["id"], 400.5, "2024-05-01"))

    response = client.get(f"{API}/party-ledger/manufacturer/{factory['id']}")
    assert response.status_code == 200
    ledger = response.json()
    assert ledger["party"]["companyName"] == "Sunrise Ceramics"
    assert ledger["totalDebit"] == 1000.5
    assert ledger["totalCredit"] == 400.5
    assert ledger["balance"] == 600
    assert [e["reference"] for e in ledger["entries"] if e["source"] == "manu_bill"] == ["MB-2", "MB-1"]
    assert ledger["entries"][0]["source"] == "transaction"


def test_client_balance_counts_receipts(client):
    buyer = create(client, "/client-data", client_payload())
    create(client, "/performa-invoice-data", {
        "exporterId": "1",
        "clientId": buyer["id"],
        "invoiceNumber": "PI-9",
        "invoiceDate": "2024-02-01",
        "currencyType": "USD",
        "items": [],
        "grandTotal": 500,
    })
    create(client, "/transaction-data", payment("client", buyer["id"], 200, "2024-02-10", type_="debit", currency="USD"))
    # 退款方向不计入
    create(client, "/transaction-data", payment("client", buyer["id"], 999, "2024-02-11", type_="credit", currency="USD"))

    ledger = client.get(f"{API}/party-ledger/client/{buyer['id']}").json()
    assert ledger["totalDebit"] == 500
    assert ledger["totalCredit"] == 200
    assert ledger["balance"] == 300
    assert {e["currency"] for e in ledger["entries"]} == {"USD"}


def test_unknown_party_ledger(client):
    for path in ("manufacturer/42", "client/abc", "gst/1", "bank/1"):
        response = client.get(f"{API}/party-ledger/{path}")
        assert response.status_code == 404
        assert response.json() == {"message": "Party not found"}
