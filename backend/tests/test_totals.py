from bizform.services.totals import goods_bill_totals, performa_invoice_totals, to_decimal, trans_bill_totals


def test_performa_invoice_totals():
    sizes = {"1": {"sqmPerBox": 1.44}, "2": {"sqmPerBox": "0.96"}}
    invoice = {
        "invoiceNumber": "PI-1",
        "discount": 100,
        "freight": 250.5,
        "items": [
            {"id": "a", "sizeId": "1", "boxes": 100, "ratePerSqmt": 6.5},
            {"id": "b", "sizeId": 2, "boxes": 3, "ratePerSqmt": 7.35},
            {"id": "c", "sizeId": "missing", "boxes": 10, "ratePerSqmt": 5},
        ],
    }
    result = performa_invoice_totals(invoice, sizes)

    assert result["invoiceNumber"] == "PI-1"
    first, second, third = result["items"]
    assert first == {"id": "a", "sizeId": "1", "boxes": 100, "ratePerSqmt": 6.5, "quantitySqmt": 144.0, "amount": 936.0}
    assert second["quantitySqmt"] == 2.88
    assert second["amount"] == 21.17
    assert third["quantitySqmt"] == 0 and third["amount"] == 0
    # 2.88 * 7.35 = 21.168，合计按未舍入金额计算
    assert result["subTotal"] == 957.17
    assert result["grandTotal"] == 1107.67


def test_goods_bill_totals():
    bill = {
        "items": [
            {"quantity": 10, "rate": 100, "discountPercentage": 10},
            {"quantity": 2, "rate": "50.25"},
        ],
        "discountAmount": 50,
        "insuranceAmount": 10,
        "freightAmount": "",
        "centralTaxRate": 9,
        "stateTaxRate": 9,
        "roundOff": 0.02,
    }
    result = goods_bill_totals(bill)
    assert [i["taxableAmount"] for i in result["items"]] == [900.0, 100.5]
    assert result["subTotal"] == 1000.5
    assert result["finalSubTotal"] == 960.5
    assert result["centralTaxAmount"] == 86.45
    assert result["stateTaxAmount"] == 86.45
    assert result["grandTotal"] == 1133.41


def test_trans_bill_totals():
    bill = {
        "items": [{"description": "Haulage", "quantity": 2, "rate": 9000}, {"quantity": 1, "rate": 1500}],
        "cgstRate": 2.5,
        "sgstRate": 2.5,
        "roundOff": -0.5,
    }
    result = trans_bill_totals(bill)
    assert [i["amount"] for i in result["items"]] == [18000.0, 1500.0]
    assert result["subTotal"] == 19500
    assert result["cgstAmount"] == 487.5
    assert result["totalTax"] == 975
    assert result["totalAfterTax"] == 20475
    assert result["totalPayable"] == 20474.5


def test_bad_numbers_count_as_zero():
    assert to_decimal(None) == 0
    assert to_decimal("abc") == 0
    assert trans_bill_totals({})["totalPayable"] == 0
